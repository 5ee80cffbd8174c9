"""
Directory scanner for the local codebase folder.

Walks the tree depth-first and returns a flat list of FileEntry, each folder
ahead of its children. Siblings are sorted by name so the listing is the same
on every platform.
"""

import logging
import os
from pathlib import Path, PurePosixPath

from app.services.codebase.constants import (
    IGNORED_DIRECTORIES,
    IGNORED_EXTENSIONS,
    IGNORED_FILES,
)
from app.services.codebase.types import CodebaseNotFoundError, FileEntry

logger = logging.getLogger(__name__)


def should_ignore(name: str, relative_path: str) -> bool:
    """
    Check an entry against the ignore policy.

    Both the entry name and every component of its relative path are checked,
    so anything below an ignored directory is dropped too.
    """
    parts = PurePosixPath(relative_path).parts or (name,)

    # Hidden files and directories (.git, .vscode, .env, ...)
    if name.startswith(".") or any(part.startswith(".") for part in parts):
        return True

    if any(part in IGNORED_DIRECTORIES for part in parts):
        return True

    if name in IGNORED_FILES:
        return True

    return PurePosixPath(name).suffix.lower() in IGNORED_EXTENSIONS


def scan_directory(root: str | Path) -> list[FileEntry]:
    """
    Recursively list every non-ignored file and folder under root.

    Unreadable directories and entries are logged and left out; the scan
    itself only fails when the root is missing.

    Raises:
        CodebaseNotFoundError: If root does not exist or is not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise CodebaseNotFoundError(str(root_path))

    entries: list[FileEntry] = []
    _scan(root_path, root_path, entries)
    return entries


def _scan(directory: Path, root: Path, entries: list[FileEntry]) -> None:
    try:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.warning(f"Error scanning directory {directory}: {e}")
        return

    for child in children:
        relative_path = Path(child.path).relative_to(root).as_posix()
        if should_ignore(child.name, relative_path):
            continue

        try:
            # Symlinked directories are listed as files to avoid cycles
            if child.is_dir(follow_symlinks=False):
                entries.append(FileEntry(path=relative_path, name=child.name, kind="folder"))
                _scan(Path(child.path), root, entries)
            else:
                size = child.stat().st_size
                entries.append(
                    FileEntry(path=relative_path, name=child.name, kind="file", size=size)
                )
        except OSError as e:
            logger.warning(f"Skipping unreadable entry {relative_path}: {e}")
