"""Error types raised by cargo-ws."""
from __future__ import annotations

from pathlib import Path


class CargoWsError(Exception):
    """Base class for every failure cargo-ws reports to the user."""


class MissingEnvironment(CargoWsError):
    """The user's home directory could not be determined."""


class MissingInstallation(CargoWsError):
    """rustup or cargo is not installed. Reported, never fatal."""


class ParseError(CargoWsError, ValueError):
    """A manifest, lock file or cargo config is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class SubprocessError(CargoWsError):
    """An external command could not be run or exited with an error."""
