"""
Assistant data types.

Data classes for chat tasks and their results, plus assistant exceptions.
"""

from dataclasses import dataclass, field
from enum import Enum

from app.services.codebase import FileEntry


class ChatAction(str, Enum):
    """What the user asked the assistant to do."""

    EDIT = "edit"
    GENERATE = "generate"
    CHAT = "chat"
    ANALYZE_CODEBASE = "analyze_codebase"
    PROCESS_WITH_FILES = "process_with_files"


@dataclass
class ChatTask:
    """One request to the assistant."""

    message: str
    action: ChatAction
    current_content: str | None = None
    file_path: str | None = None
    selected_files: list[str] | None = None
    codebase_files: list[FileEntry] | None = None  # analyze_codebase only


@dataclass
class FileAnalysis:
    """Files the model considers relevant for a documentation task."""

    relevant_files: list[str] = field(default_factory=list)
    reasoning: str = "Analysis completed"
    confidence: str = "medium"  # high, medium, low


@dataclass
class ParsedResponse:
    """Explanation / content split of a model reply."""

    explanation: str
    content: str | None = None


@dataclass
class TaskResult:
    """Assistant reply returned to the frontend."""

    explanation: str
    action: ChatAction
    content: str | None = None
    file_analysis: FileAnalysis | None = None
    needs_user_confirmation: bool | None = None


class AssistantError(Exception):
    """The model call (or its configuration) failed."""


class AssistantConfigurationError(AssistantError):
    """No API key is configured for the model service."""


class NoFilesSelectedError(AssistantError):
    """process_with_files was called without any selected files."""

    def __init__(self) -> None:
        super().__init__("No files selected for processing")
