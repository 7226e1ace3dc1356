"""Cargo's own configuration ($CARGO_HOME/config.toml)."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlparse

from .errors import ParseError
from .utils import read_toml

CRATES_IO = "crates-io"


@dataclass(frozen=True)
class Source:
    registry: Optional[str] = None
    replace_with: Optional[str] = None


@dataclass(frozen=True)
class CargoConfig:
    sources: Dict[str, Source] = field(default_factory=dict)
    path: Optional[Path] = None

    def registry_host(self) -> Optional[str]:
        """Host of the registry crates-io resolves to, following one replace-with hop.

        Returns None when crates-io is not configured, so the caller falls back to
        whatever registry directory it finds first.
        """
        source = self.sources.get(CRATES_IO)
        if source is None:
            return None
        if source.replace_with:
            source = self.sources.get(source.replace_with)
            if source is None:
                return None
        return _host(source.registry)


def config_path(cargo_home: Path) -> Optional[Path]:
    """Cargo reads config.toml first and the legacy extensionless config second."""
    for name in ("config.toml", "config"):
        candidate = cargo_home / name
        if candidate.is_file():
            return candidate
    return None


def read_cargo_config(cargo_home: Path) -> CargoConfig:
    path = config_path(cargo_home)
    if path is None:
        return CargoConfig()
    data = read_toml(path)
    raw_sources = data.get("source", {})
    if not isinstance(raw_sources, dict):
        raise ParseError(path, "[source] must be a table")
    sources: Dict[str, Source] = {}
    for name, raw in raw_sources.items():
        if not isinstance(raw, dict):
            raise ParseError(path, f"[source.{name}] must be a table")
        registry = raw.get("registry")
        replace_with = raw.get("replace-with")
        sources[name] = Source(
            registry=registry if isinstance(registry, str) else None,
            replace_with=replace_with if isinstance(replace_with, str) else None,
        )
    return CargoConfig(sources=sources, path=path)


def _host(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    # sparse+https://host/index/ parses like any other scheme
    return urlparse(url).hostname
