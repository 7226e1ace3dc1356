"""Tests for utils module."""

from __future__ import annotations

from pathlib import Path

import pytest


def test_read_toml(tmp_path: Path):
    from cargo_ws.utils import read_toml

    path = tmp_path / "a.toml"
    path.write_text('[package]\nname = "x"\n', encoding="utf8")
    assert read_toml(path) == {"package": {"name": "x"}}


def test_read_toml_errors(tmp_path: Path):
    from cargo_ws.errors import ParseError
    from cargo_ws.utils import read_toml

    with pytest.raises(ParseError, match="file not found"):
        read_toml(tmp_path / "missing.toml")

    bad = tmp_path / "bad.toml"
    bad.write_text("= nope", encoding="utf8")
    with pytest.raises(ParseError) as exc:
        read_toml(bad)
    assert exc.value.path == bad
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("stable-aarch64-apple-darwin (default)\n", "stable-aarch64-apple-darwin"),
        ("nightly", "nightly"),
        ("", None),
        ("\n\t ", None),
    ],
)
def test_first_token(text, expected):
    from cargo_ws.utils import first_token

    assert first_token(text) == expected


def test_run_captured(tmp_path: Path):
    import sys

    from cargo_ws.utils import run_captured

    code, stdout, _ = run_captured([sys.executable, "-c", "print('hello')"], tmp_path)
    assert code == 0
    assert stdout.strip() == "hello"


def test_parse_error_carries_path_and_reason(tmp_path: Path):
    from cargo_ws.errors import ParseError

    err = ParseError(tmp_path / "Cargo.lock", "package entry 0 has no version")
    assert err.path == tmp_path / "Cargo.lock"
    assert err.reason == "package entry 0 has no version"
    assert str(err) == f"Failed to parse {tmp_path / 'Cargo.lock'}: package entry 0 has no version"
