"""
Codebase package: the local folder the assistant documents.

Module structure:
- scanner.py: Recursive directory scan with ignore policy
- filters.py: Documentation-relevance filter
- reader.py: Selected-file bundle for prompts
- types.py: FileEntry and CodebaseNotFoundError
- constants.py: Ignore rules, allow-lists and size limits
"""

from app.services.codebase.filters import (
    filter_relevant_files,
    is_relevant_file,
    load_codebase_files,
)
from app.services.codebase.reader import build_file_bundle, language_for
from app.services.codebase.scanner import scan_directory, should_ignore
from app.services.codebase.types import CodebaseNotFoundError, FileEntry

__all__ = [
    "CodebaseNotFoundError",
    "FileEntry",
    "build_file_bundle",
    "filter_relevant_files",
    "is_relevant_file",
    "language_for",
    "load_codebase_files",
    "scan_directory",
    "should_ignore",
]
