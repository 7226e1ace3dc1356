"""Configuration helpers and defaults."""
from __future__ import annotations

from os import getenv
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ROOT = "."
DEFAULT_WORKSPACE_NAME = "cargo-ws"
WORKSPACE_SUFFIX = ".code-workspace"

# Names of the folders shown in the editor sidebar
ROOT_FOLDER_NAME = ""
STDLIB_FOLDER_NAME = "Stdlib"
EXTERNAL_FOLDER_NAME = "External Libraries"

# Track if we've loaded .env
_dotenv_loaded = False


def ensure_dotenv_loaded() -> None:
    """Load .env file from current directory if not already loaded."""
    global _dotenv_loaded
    if _dotenv_loaded:
        return

    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        # Also try parent directories up to home
        for parent in Path.cwd().parents:
            env_file = parent / ".env"
            if env_file.exists():
                load_dotenv(env_file)
                break
            if parent == Path.home():
                break

    _dotenv_loaded = True


def env_str(name: str) -> Optional[str]:
    raw = getenv(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def env_flag(name: str) -> bool:
    raw = getenv(name, "")
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def rustup_home(home: Path) -> Path:
    """Toolchain root: $RUSTUP_HOME, else ~/.rustup."""
    override = env_str("RUSTUP_HOME")
    return Path(override) if override else home / ".rustup"


def cargo_home(home: Path) -> Path:
    """Package cache root: $CARGO_HOME, else ~/.cargo."""
    override = env_str("CARGO_HOME")
    return Path(override) if override else home / ".cargo"


def default_toolchain() -> Optional[str]:
    return env_str("CARGO_WS_TOOLCHAIN")


def default_registry() -> Optional[str]:
    return env_str("CARGO_WS_REGISTRY")


def stdlib_disabled() -> bool:
    return env_flag("CARGO_WS_NO_STDLIB")
