"""
Documentation assistant service.

Runs one chat task end to end: builds the action's prompt (reading selected
codebase files for process_with_files), makes a single model call and parses
the reply into a TaskResult. Model failures are not retried; they surface as
AssistantError for the handler to report.
"""

import asyncio
import logging
from pathlib import Path

import anthropic
import httpx

from app.config import settings
from app.services.assistant.parser import parse_file_analysis, parse_task_response
from app.services.assistant.prompts import (
    build_analysis_prompt,
    build_documentation_prompt,
    build_prompt,
)
from app.services.assistant.types import (
    AssistantConfigurationError,
    AssistantError,
    ChatAction,
    ChatTask,
    NoFilesSelectedError,
    TaskResult,
)
from app.services.codebase import build_file_bundle

logger = logging.getLogger(__name__)


class AssistantService:
    """
    Documentation assistant backed by Claude.

    Handles five actions:
    - edit / generate / chat: prompt and parse, no file access
    - analyze_codebase: suggest relevant files from a pre-scanned codebase listing
    - process_with_files: write documentation from the selected files' contents
    """

    def __init__(
        self,
        codebase_path: Path | None = None,
        client: anthropic.AsyncAnthropic | None = None,
    ) -> None:
        """Initialize the assistant with an Anthropic client (created lazily when omitted)."""
        self.codebase_path = codebase_path or settings.codebase_path
        self._client = client

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            if not settings.assistant_enabled:
                raise AssistantConfigurationError(
                    "ANTHROPIC_API_KEY is not configured in environment variables"
                )
            self._client = anthropic.AsyncAnthropic(
                api_key=settings.anthropic_api_key,
                timeout=settings.assistant_timeout,
                max_retries=0,
            )
        return self._client

    async def process(self, task: ChatTask) -> TaskResult:
        """
        Process a chat task.

        Raises:
            NoFilesSelectedError: process_with_files without selected files (before any I/O)
            AssistantError: The model call failed or is not configured
        """
        if task.action == ChatAction.ANALYZE_CODEBASE:
            return await self.analyze_codebase(task)
        if task.action == ChatAction.PROCESS_WITH_FILES:
            return await self.process_with_files(task)

        try:
            text = await self._generate(build_prompt(task))
        except AssistantError as e:
            logger.error(f"Assistant {task.action.value} request failed: {e}")
            raise AssistantError("Failed to process AI request") from e

        parsed = parse_task_response(text, task.action)
        return TaskResult(
            explanation=parsed.explanation,
            content=parsed.content,
            action=task.action,
        )

    async def analyze_codebase(self, task: ChatTask) -> TaskResult:
        """Ask the model which of task.codebase_files are relevant to the task."""
        try:
            text = await self._generate(build_analysis_prompt(task))
        except AssistantError as e:
            logger.error(f"Codebase analysis failed: {e}")
            raise AssistantError("Failed to analyze codebase") from e

        analysis = parse_file_analysis(text)
        logger.info(
            f"Codebase analysis suggested {len(analysis.relevant_files)} files "
            f"({analysis.confidence} confidence)"
        )

        return TaskResult(
            explanation=(
                f"I've analyzed your codebase and identified {len(analysis.relevant_files)} "
                "files that would be most helpful for creating comprehensive technical "
                "documentation. Please review my suggestions below."
            ),
            action=ChatAction.ANALYZE_CODEBASE,
            file_analysis=analysis,
            needs_user_confirmation=True,
        )

    async def process_with_files(self, task: ChatTask) -> TaskResult:
        """Write documentation from the contents of task.selected_files."""
        if not task.selected_files:
            raise NoFilesSelectedError()

        try:
            file_bundle = await asyncio.to_thread(
                build_file_bundle, self.codebase_path, task.selected_files
            )
            text = await self._generate(build_documentation_prompt(task, file_bundle))
        except AssistantError as e:
            logger.error(f"Processing selected files failed: {e}")
            raise AssistantError("Failed to process selected files") from e

        parsed = parse_task_response(text, ChatAction.EDIT)
        return TaskResult(
            explanation=parsed.explanation,
            content=parsed.content,
            action=ChatAction.PROCESS_WITH_FILES,
        )

    async def _generate(self, prompt: str) -> str:
        """Single model call; returns the reply text."""
        try:
            response = await self.client.messages.create(
                model=settings.assistant_model,
                max_tokens=settings.assistant_max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except (anthropic.APIError, httpx.HTTPError) as e:
            raise AssistantError(f"Model request failed: {e}") from e

        if not response.content:
            raise AssistantError("Model returned an empty response")

        # Extract text from response
        first_block = response.content[0]
        return first_block.text if hasattr(first_block, "text") else str(first_block)
