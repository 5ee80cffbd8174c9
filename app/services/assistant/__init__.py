"""
Assistant package: Claude-backed documentation chat.

Module structure:
- service.py: AssistantService orchestrating one chat task
- types.py: ChatTask, TaskResult, FileAnalysis and assistant exceptions
- prompts.py: Prompt builders, one per action
- parser.py: Marker-based reply parsing
- constants.py: Reply markers and limits
"""

from app.services.assistant.constants import MAX_RELEVANT_FILES
from app.services.assistant.parser import parse_file_analysis, parse_task_response
from app.services.assistant.prompts import build_prompt
from app.services.assistant.service import AssistantService
from app.services.assistant.types import (
    AssistantConfigurationError,
    AssistantError,
    ChatAction,
    ChatTask,
    FileAnalysis,
    NoFilesSelectedError,
    ParsedResponse,
    TaskResult,
)

__all__ = [
    # Main class
    "AssistantService",
    # Types
    "ChatAction",
    "ChatTask",
    "FileAnalysis",
    "ParsedResponse",
    "TaskResult",
    # Exceptions
    "AssistantConfigurationError",
    "AssistantError",
    "NoFilesSelectedError",
    # Utilities
    "MAX_RELEVANT_FILES",
    "build_prompt",
    "parse_file_analysis",
    "parse_task_response",
]
