"""
Read user-selected codebase files into one labeled prompt bundle.

Each file becomes a "FILE: <path>" header followed by a fenced code block.
Files that cannot be included get an inline placeholder, so one bad path
never fails the whole batch. Bytes that are not valid UTF-8 are replaced
with U+FFFD rather than failing the file.
"""

import logging
from pathlib import Path

from app.services.codebase.constants import (
    LANGUAGE_BY_EXTENSION,
    MAX_BUNDLE_CHARS,
    MAX_FILE_SIZE,
)

logger = logging.getLogger(__name__)


def language_for(file_path: str) -> str:
    """Code fence language for a file path ("text" when unknown)."""
    return LANGUAGE_BY_EXTENSION.get(Path(file_path).suffix.lower(), "text")


def _placeholder(file_path: str, note: str) -> str:
    return f"\nFILE: {file_path}\n[{note}]\n"


def _fenced(file_path: str, content: str) -> str:
    return f"\nFILE: {file_path}\n```{language_for(file_path)}\n{content}\n```\n"


def build_file_bundle(
    root: str | Path,
    file_paths: list[str],
    max_file_size: int = MAX_FILE_SIZE,
    max_total_chars: int = MAX_BUNDLE_CHARS,
) -> str:
    """
    Read the selected files (relative to root) and concatenate them.

    Args:
        root: Codebase root the paths are relative to
        file_paths: Selected paths, in the order they should appear
        max_file_size: Per-file size limit in bytes
        max_total_chars: Combined content budget across all files

    Returns:
        The labeled bundle, one section per requested path
    """
    root_path = Path(root).resolve()
    sections: list[str] = []
    total_chars = 0

    for file_path in file_paths:
        full_path = (root_path / file_path).resolve()

        if not full_path.is_relative_to(root_path):
            logger.warning(f"Rejected selected file outside codebase: {file_path}")
            sections.append(_placeholder(file_path, "Error: Path outside codebase"))
            continue

        if not full_path.exists():
            sections.append(_placeholder(file_path, "Error: File not found"))
            continue

        if full_path.is_dir():
            sections.append(_placeholder(file_path, "Directory - skipped"))
            continue

        try:
            size = full_path.stat().st_size
            if size > max_file_size:
                sections.append(
                    _placeholder(file_path, f"File too large ({round(size / 1024)}KB) - skipped")
                )
                continue

            content = full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Error reading file {file_path}: {e}")
            sections.append(_placeholder(file_path, "Error: Could not read file content"))
            continue

        if total_chars + len(content) > max_total_chars:
            logger.warning(f"Combined content limit reached, skipping {file_path}")
            sections.append(_placeholder(file_path, "Skipped - combined content limit reached"))
            continue

        total_chars += len(content)
        sections.append(_fenced(file_path, content))

    logger.info(f"Read {len(file_paths)} selected files ({total_chars} chars of content)")
    return "\n".join(sections)
