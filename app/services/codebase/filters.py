"""
Relevance filter for documentation work.

Narrows a directory scan to source, config and doc files worth showing
to the model.
"""

import logging
from pathlib import Path, PurePosixPath

from app.services.codebase.constants import RELEVANT_EXTENSIONS, RELEVANT_NAME_MARKERS
from app.services.codebase.scanner import scan_directory
from app.services.codebase.types import FileEntry

logger = logging.getLogger(__name__)


def is_relevant_file(entry: FileEntry) -> bool:
    """Check if an entry is a file with an allowed extension, a marker name, or no extension."""
    if entry.kind != "file":
        return False

    extension = PurePosixPath(entry.path).suffix.lower()
    name = entry.name.lower()
    return (
        extension in RELEVANT_EXTENSIONS
        or any(marker in name for marker in RELEVANT_NAME_MARKERS)
        # Dockerfile, Makefile, LICENSE ...
        or not extension
    )


def filter_relevant_files(entries: list[FileEntry]) -> list[FileEntry]:
    """Keep only documentation-relevant files, preserving scan order."""
    return [entry for entry in entries if is_relevant_file(entry)]


def load_codebase_files(root: str | Path) -> list[FileEntry]:
    """
    Scan the codebase root and return its documentation-relevant files.

    Raises:
        CodebaseNotFoundError: If the root folder does not exist
    """
    relevant = filter_relevant_files(scan_directory(root))
    logger.info(f"Found {len(relevant)} relevant files in codebase")
    return relevant
