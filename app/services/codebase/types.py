"""Codebase data types."""

from dataclasses import dataclass
from typing import Literal

EntryKind = Literal["file", "folder"]


@dataclass(frozen=True)
class FileEntry:
    """A file or folder found under the codebase root."""

    path: str  # relative to the root, "/"-separated
    name: str
    kind: EntryKind
    size: int | None = None  # bytes, files only


class CodebaseNotFoundError(Exception):
    """The codebase root directory does not exist."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(f"Codebase folder not found: {root}")
