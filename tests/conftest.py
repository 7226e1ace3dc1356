from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

TOOLCHAIN = "stable-x86_64-unknown-linux-gnu"
REGISTRY_DIR = "index.crates.io-6f17d22bba15001f"

CARGO_TOML = """\
[package]
name = "demo"
version = "0.1.0"
edition = "2021"

[dependencies]
a = "1.0"
b = "2.0"
"""

CARGO_LOCK = """\
# This file is automatically @generated by Cargo.
# It is not intended for manual editing.
version = 3

[[package]]
name = "a"
version = "1.0"
source = "registry+https://github.com/rust-lang/crates.io-index"

[[package]]
name = "b"
version = "2.0"
source = "registry+https://github.com/rust-lang/crates.io-index"

[[package]]
name = "demo"
version = "0.1.0"
dependencies = [
 "a",
 "b",
]
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch):
    for var in ("CARGO_HOME", "RUSTUP_HOME", "CARGO_WS_TOOLCHAIN", "CARGO_WS_REGISTRY", "CARGO_WS_NO_STDLIB"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("cargo_ws.config._dotenv_loaded", True)


@pytest.fixture()
def sandbox(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    root_cwd = Path.cwd()
    original_env = dict(os.environ)
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(root_cwd)
        shutil.rmtree(tmp_path, ignore_errors=True)
        os.environ.clear()
        os.environ.update(original_env)


@pytest.fixture()
def fake_home(tmp_path: Path) -> Path:
    """A home directory with rustup, rust-src and three cached crates."""
    home = tmp_path / "home"
    library = home / ".rustup" / "toolchains" / TOOLCHAIN / "lib" / "rustlib" / "src" / "rust" / "library"
    library.mkdir(parents=True)
    registry = home / ".cargo" / "registry" / "src" / REGISTRY_DIR
    for name in ("a-1.0", "b-2.0", "c-3.0"):
        (registry / name).mkdir(parents=True)
    return home


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    (root / "Cargo.toml").write_text(CARGO_TOML, encoding="utf8")
    (root / "Cargo.lock").write_text(CARGO_LOCK, encoding="utf8")
    return root


@pytest.fixture()
def fake_rustup():
    """Factory for a command runner that answers like `rustup default`."""

    def factory(stdout: str = f"{TOOLCHAIN} (default)\n", code: int = 0, stderr: str = ""):
        calls = []

        def run(cmd):
            calls.append(cmd)
            return code, stdout, stderr

        run.calls = calls
        return run

    return factory
