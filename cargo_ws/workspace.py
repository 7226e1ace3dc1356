"""Build and write the .code-workspace file.

The editor cannot nest folders inside a workspace folder, so the whole registry
cache is added as one folder and every package the project does not use is
hidden through "files.exclude". rust-analyzer would otherwise index every cached
package on startup, so both source roots also go into its excludeDirs.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .manifest import LockFile
from .types import ANALYZER_EXCLUDE_DIRS_KEY, FILES_EXCLUDE_KEY, FolderDict, WorkspaceDict


@dataclass(frozen=True)
class WorkspaceFolder:
    name: str
    path: str

    def to_dict(self) -> FolderDict:
        return {"name": self.name, "path": self.path}


@dataclass
class WorkspaceSettings:
    file_excludes: Dict[str, bool] = field(default_factory=dict)
    analyzer_exclude_dirs: List[str] = field(default_factory=list)


@dataclass
class Workspace:
    folders: List[WorkspaceFolder] = field(default_factory=list)
    settings: WorkspaceSettings = field(default_factory=WorkspaceSettings)

    def to_dict(self) -> WorkspaceDict:
        return {
            "folders": [folder.to_dict() for folder in self.folders],
            "settings": {
                FILES_EXCLUDE_KEY: dict(self.settings.file_excludes),
                ANALYZER_EXCLUDE_DIRS_KEY: list(self.settings.analyzer_exclude_dirs),
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Workspace":
        settings = data.get("settings") or {}
        return cls(
            folders=[WorkspaceFolder(name=item["name"], path=item["path"]) for item in data.get("folders") or []],
            settings=WorkspaceSettings(
                file_excludes=dict(settings.get(FILES_EXCLUDE_KEY) or {}),
                analyzer_exclude_dirs=list(settings.get(ANALYZER_EXCLUDE_DIRS_KEY) or []),
            ),
        )

    def render(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def write(self, path: Path) -> Path:
        path.write_text(self.render(), encoding="utf8")
        return path


def unused_packages(registry: Path, lock: LockFile) -> List[str]:
    used = lock.keys()
    return sorted(entry.name for entry in registry.iterdir() if entry.name not in used)


def build_workspace(stdlib: Optional[Path], registry: Optional[Path], lock: LockFile) -> Workspace:
    """Assemble the workspace for a project.

    A missing registry yields an empty workspace rather than an error.
    """
    workspace = Workspace()
    if registry is None or not registry.exists():
        return workspace

    workspace.settings.file_excludes = {name: True for name in unused_packages(registry, lock)}

    registry_str = str(registry)
    workspace.settings.analyzer_exclude_dirs.append(registry_str)
    workspace.folders.append(WorkspaceFolder(name=config.ROOT_FOLDER_NAME, path="."))
    if stdlib is not None:
        stdlib_str = str(stdlib)
        workspace.settings.analyzer_exclude_dirs.append(stdlib_str)
        workspace.folders.append(WorkspaceFolder(name=config.STDLIB_FOLDER_NAME, path=stdlib_str))
    workspace.folders.append(WorkspaceFolder(name=config.EXTERNAL_FOLDER_NAME, path=registry_str))
    return workspace


def workspace_filename(name: Optional[str]) -> str:
    return f"{name or config.DEFAULT_WORKSPACE_NAME}{config.WORKSPACE_SUFFIX}"
