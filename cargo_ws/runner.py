"""cargo-ws pipeline: read the project, probe the machine, write the workspace."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import config
from .errors import MissingInstallation
from .logger import HumanEntry, Logger
from .manifest import read_lock, read_manifest
from .probe import CommandRunner, probe_environment
from .utils import run_captured
from .workspace import build_workspace, workspace_filename


@dataclass
class GenerateOptions:
    root: str = config.DEFAULT_ROOT
    output: Optional[str] = None
    toolchain: Optional[str] = None
    registry: Optional[str] = None
    include_stdlib: bool = True
    log_json_path: Optional[str] = None
    enable_human_logs: bool = True
    pretty_logs: bool = True


def build_logger(options: GenerateOptions) -> Logger:
    return Logger(
        log_json_path=options.log_json_path,
        enable_human_logs=options.enable_human_logs,
        pretty=options.pretty_logs,
    )


def run_generate(
    options: GenerateOptions,
    logger: Optional[Logger] = None,
    home: Optional[Path] = None,
    run: CommandRunner = run_captured,
) -> Optional[Path]:
    """Write the workspace file and return its path.

    Returns None when rustup or cargo is not installed. Parse, I/O and
    subprocess failures propagate to the caller.
    """
    logger = logger or build_logger(options)
    root = Path(options.root)

    manifest = read_manifest(root / "Cargo.toml")
    lock = read_lock(root / "Cargo.lock")
    logger.json({"type": "project", "root": str(root), "package": manifest.name, "locked": len(lock)})

    try:
        env = probe_environment(
            home=home,
            run=run,
            toolchain=options.toolchain,
            registry_name=options.registry,
            include_stdlib=options.include_stdlib,
        )
    except MissingInstallation as err:
        logger.human(HumanEntry(title=str(err), variant="warn"))
        logger.json({"type": "missing_installation", "message": str(err)})
        return None

    if env.stdlib is not None and not env.stdlib.exists():
        logger.human(
            HumanEntry(
                title="stdlib sources not found",
                body=f"{env.stdlib}\nrun `rustup component add rust-src` to browse the standard library",
                variant="warn",
            )
        )
    if env.registry is None:
        if options.registry:
            title = f"registry {options.registry} not found under cargo home"
        else:
            title = "no registry sources under cargo home"
        logger.human(HumanEntry(title=title, body=str(env.cargo_home), variant="warn"))
    logger.json(
        {
            "type": "environment",
            "toolchain": env.toolchain,
            "stdlib": str(env.stdlib) if env.stdlib else None,
            "registry": str(env.registry) if env.registry else None,
        }
    )

    workspace = build_workspace(env.stdlib, env.registry, lock)
    target = Path(options.output) if options.output else root / workspace_filename(manifest.name)
    workspace.write(target)

    excluded = len(workspace.settings.file_excludes)
    logger.human(HumanEntry(title=f"wrote {target}", body=f"{excluded} unused packages hidden", variant="done"))
    logger.json({"type": "workspace_written", "path": str(target), "excluded": excluded, "folders": len(workspace.folders)})
    return target
