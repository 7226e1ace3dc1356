"""General utilities shared across cargo-ws modules."""
from __future__ import annotations

import subprocess
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ParseError


def read_toml(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf8")
    except FileNotFoundError as err:
        raise ParseError(path, "file not found") from err
    except (OSError, UnicodeDecodeError) as err:
        raise ParseError(path, str(err)) from err
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        raise ParseError(path, str(err)) from err


def run_captured(cmd: list[str], cwd: Optional[Path] = None) -> tuple[int, str, str]:
    proc = subprocess.run(cmd, cwd=str(cwd) if cwd else None, capture_output=True, text=True)
    return proc.returncode, proc.stdout, proc.stderr


def first_token(text: str) -> Optional[str]:
    parts = text.split()
    return parts[0] if parts else None
