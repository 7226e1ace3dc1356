"""Readers for Cargo.toml and Cargo.lock."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ParseError
from .utils import read_toml

PathLike = Union[str, Path]


@dataclass(frozen=True)
class Package:
    name: str
    version: str

    @property
    def key(self) -> str:
        """Directory name cargo uses for this package in the registry cache."""
        return f"{self.name}-{self.version}"


@dataclass(frozen=True)
class Manifest:
    package: Optional[Package] = None

    @property
    def name(self) -> Optional[str]:
        return self.package.name if self.package else None


@dataclass(frozen=True)
class LockFile:
    packages: List[Package] = field(default_factory=list)

    def keys(self) -> set[str]:
        return {pkg.key for pkg in self.packages}

    def __len__(self) -> int:
        return len(self.packages)


def read_manifest(path: PathLike) -> Manifest:
    """Read a Cargo.toml. Virtual workspace manifests have no [package] table."""
    path = Path(path)
    data = read_toml(path)
    raw = data.get("package")
    if raw is None:
        return Manifest()
    if not isinstance(raw, dict):
        raise ParseError(path, "[package] must be a table")
    name = raw.get("name")
    if not isinstance(name, str):
        raise ParseError(path, "package.name must be a string")
    # version.workspace = true and similar inherited values carry no version here
    version = raw.get("version")
    return Manifest(package=Package(name=name, version=version if isinstance(version, str) else ""))


def read_lock(path: PathLike) -> LockFile:
    path = Path(path)
    data = read_toml(path)
    raw = data.get("package", [])
    if not isinstance(raw, list):
        raise ParseError(path, "package must be an array of tables")
    return LockFile(packages=[_lock_entry(path, index, entry) for index, entry in enumerate(raw)])


def _lock_entry(path: Path, index: int, entry: Any) -> Package:
    if not isinstance(entry, dict):
        raise ParseError(path, f"package entry {index} is not a table")
    values: Dict[str, str] = {}
    for key in ("name", "version"):
        value = entry.get(key)
        if not isinstance(value, str):
            raise ParseError(path, f"package entry {index} has no {key}")
        values[key] = value
    return Package(**values)
