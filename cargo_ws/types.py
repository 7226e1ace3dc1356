"""Typed structures for the on-disk workspace file."""
from __future__ import annotations

from typing import Dict, List, TypedDict

# Keys the editor's workspace schema requires
FILES_EXCLUDE_KEY = "files.exclude"
ANALYZER_EXCLUDE_DIRS_KEY = "rust-analyzer.files.excludeDirs"


class FolderDict(TypedDict):
    name: str
    path: str


SettingsDict = TypedDict(
    "SettingsDict",
    {
        "files.exclude": Dict[str, bool],
        "rust-analyzer.files.excludeDirs": List[str],
    },
)


class WorkspaceDict(TypedDict):
    folders: List[FolderDict]
    settings: SettingsDict
