"""Locate the rustup toolchain sources and the cargo registry cache."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from . import config
from .cargo_config import read_cargo_config
from .errors import MissingEnvironment, MissingInstallation, SubprocessError
from .utils import first_token, run_captured

CommandRunner = Callable[[List[str]], Tuple[int, str, str]]

STDLIB_SUBPATH = ("lib", "rustlib", "src", "rust", "library")


@dataclass(frozen=True)
class Environment:
    home: Path
    rustup_home: Path
    cargo_home: Path
    toolchain: Optional[str] = None
    stdlib: Optional[Path] = None
    registry: Optional[Path] = None


def resolve_home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as err:
        raise MissingEnvironment("Failed to get current user home directory") from err


def query_default_toolchain(run: CommandRunner = run_captured) -> str:
    """Ask rustup for the default toolchain.

    `rustup default` prints e.g. "stable-x86_64-unknown-linux-gnu (default)";
    the toolchain is the first whitespace-delimited token.
    """
    try:
        code, stdout, stderr = run(["rustup", "default"])
    except OSError as err:
        raise SubprocessError(f"Failed to execute rustup: {err}") from err
    if code != 0:
        raise SubprocessError(f"rustup default exited with {code}: {stderr.strip()}")
    toolchain = first_token(stdout)
    if toolchain is None:
        raise SubprocessError("Failed to parse rustup toolchain")
    return toolchain


def stdlib_path(rustup_home: Path, toolchain: str) -> Path:
    return rustup_home.joinpath("toolchains", toolchain, *STDLIB_SUBPATH)


def find_registry_root(registry_src: Path, host: Optional[str] = None, name: Optional[str] = None) -> Optional[Path]:
    """Pick the registry source directory holding the unpacked crates.

    Cargo names these `<host>-<hash>`. An explicit directory name wins, then the
    first entry for the configured host, then the first entry by name. With
    several registries and no hint, the choice is best-effort: a machine that
    still has the old `github.com-*` git index next to `index.crates.io-*` gets
    the stale git one, since it sorts first. Pass a name or configure the host
    to avoid that. A named directory that does not exist yields None.
    """
    if name:
        named = registry_src / name
        return named if named.is_dir() else None
    if not registry_src.is_dir():
        return None
    entries = sorted(entry for entry in registry_src.iterdir() if entry.is_dir())
    if not entries:
        return None
    if host:
        for entry in entries:
            if entry.name.startswith(f"{host}-"):
                return entry
    return entries[0]


def probe_environment(
    home: Optional[Path] = None,
    run: CommandRunner = run_captured,
    toolchain: Optional[str] = None,
    registry_name: Optional[str] = None,
    include_stdlib: bool = True,
) -> Environment:
    """Work out where the stdlib and registry sources live.

    Raises MissingInstallation when ~/.rustup or ~/.cargo is absent.
    """
    home = home or resolve_home()

    rustup = config.rustup_home(home)
    if not rustup.exists():
        raise MissingInstallation("rustc must be installed")

    stdlib: Optional[Path] = None
    if include_stdlib:
        toolchain = toolchain or query_default_toolchain(run)
        stdlib = stdlib_path(rustup, toolchain)
    else:
        toolchain = None

    cargo = config.cargo_home(home)
    if not cargo.exists():
        raise MissingInstallation("cargo must be installed")

    host = None if registry_name else read_cargo_config(cargo).registry_host()
    registry = find_registry_root(cargo / "registry" / "src", host=host, name=registry_name)

    return Environment(
        home=home,
        rustup_home=rustup,
        cargo_home=cargo,
        toolchain=toolchain,
        stdlib=stdlib,
        registry=registry,
    )
