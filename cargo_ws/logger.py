"""Human and JSON logging helpers."""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.theme import Theme


@dataclass
class HumanEntry:
    title: Optional[str] = None
    body: Optional[str] = None
    variant: str = "info"


class Logger:
    def __init__(
        self,
        log_json_path: Optional[str] = None,
        enable_human_logs: bool = True,
        pretty: bool = True,
    ) -> None:
        self.log_path = Path(log_json_path) if log_json_path else None
        self.enable_human_logs = enable_human_logs
        self.enable_file_logs = self.log_path is not None
        self.pretty = pretty
        self.console = Console(theme=_theme(), highlight=False) if pretty else None

    def human(self, entry: HumanEntry) -> None:
        if not self.enable_human_logs:
            return
        title = entry.title or "info"
        body = entry.body or ""
        variant = entry.variant or "info"
        if self.console:
            prefix = {
                "error": "[error]",
                "warn": "[warn]",
                "done": "[done]",
            }.get(variant, "[info]")
            self.console.print(f"{prefix} {title}", style=variant if variant in _STYLES else "info", markup=False)
            if body:
                self.console.print(body, markup=False)
            return
        print(f"{title}: {body}" if body else title)

    def json(self, entry: Dict[str, Any]) -> None:
        if not self.enable_file_logs or self.log_path is None:
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **entry,
        }
        try:
            with self.log_path.open("a", encoding="utf8") as fh:
                fh.write(json.dumps(payload))
                fh.write("\n")
        except OSError:
            if self.console:
                self.console.print("log write failed", style="error")


_STYLES = {
    "info": "cyan",
    "warn": "yellow",
    "error": "red",
    "done": "green",
}


def _theme() -> Theme:
    return Theme(_STYLES)
