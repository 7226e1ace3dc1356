"""CLI entrypoint for cargo-ws.

Installed as `cargo-ws` on PATH, cargo runs it for `cargo ws`, passing "ws"
as the first argument.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__, config
from .errors import CargoWsError
from .logger import HumanEntry
from .runner import GenerateOptions, build_logger, run_generate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cargo", description="cargo ws [options]")
    sub = parser.add_subparsers(dest="cmd", required=True)

    ws = sub.add_parser("ws", help="generate vscode workspace file", usage="cargo ws [options]")
    ws.add_argument("-V", "--version", action="version", version=f"cargo-ws {__version__}")
    ws.add_argument("-r", "--root", default=config.DEFAULT_ROOT, help="Project directory holding Cargo.toml; the workspace file is written here unless --output is given (default: .)")
    ws.add_argument("-o", "--output", help="Workspace file to write (default: <root>/<package>.code-workspace)")
    ws.add_argument("--toolchain", help="Toolchain whose stdlib to add (default: `rustup default`)")
    ws.add_argument("--no-stdlib", action="store_true", help="Do not add the standard library folder")
    ws.add_argument("--registry", help="Directory name under ~/.cargo/registry/src to use")
    ws.add_argument("--log-json", dest="log_json", help="Append JSON logs to this file")
    ws.add_argument("--quiet", action="store_true", help="Suppress human-readable logs")
    ws.add_argument("--pretty", action="store_true", help="Enable colored human logs")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> GenerateOptions:
    # Load .env early so CLI defaults can come from it
    config.ensure_dotenv_loaded()

    parsed = build_parser().parse_args(argv)
    return GenerateOptions(
        root=parsed.root,
        output=parsed.output,
        toolchain=parsed.toolchain or config.default_toolchain(),
        registry=parsed.registry or config.default_registry(),
        include_stdlib=not (parsed.no_stdlib or config.stdlib_disabled()),
        log_json_path=parsed.log_json,
        enable_human_logs=not parsed.quiet,
        pretty_logs=parsed.pretty,
    )


def main(argv: Optional[List[str]] = None) -> None:
    options = parse_args(argv)
    logger = build_logger(options)
    try:
        run_generate(options, logger=logger)
    except (CargoWsError, OSError) as err:
        if logger.enable_human_logs:
            logger.human(HumanEntry(title="cargo ws failed", body=str(err), variant="error"))
        else:
            print(f"cargo ws failed: {err}", file=sys.stderr)
        logger.json({"type": "fatal", "error": str(err), "kind": type(err).__name__})
        sys.exit(1)


if __name__ == "__main__":
    main()
