"""Unit tests for AssistantService.

The Anthropic client is replaced by a mock whose messages.create returns a
canned reply, so each test checks prompt dispatch, error wrapping and the
shape of the TaskResult.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from app.services.assistant import (
    AssistantConfigurationError,
    AssistantError,
    AssistantService,
    ChatAction,
    ChatTask,
    NoFilesSelectedError,
)
from app.services.codebase import FileEntry

EDIT_REPLY = "EXPLANATION: Added a section.\nCONTENT:\n```markdown\n# Doc\n```"
ANALYSIS_REPLY = (
    "REASONING: Entry point matters.\nRELEVANT_FILES:\nsrc/index.ts\nREADME.md\nCONFIDENCE: high"
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mock_client(reply: str | None = EDIT_REPLY) -> MagicMock:
    """Anthropic client stub; reply=None yields an empty content list."""
    client = MagicMock()
    content = [MagicMock(text=reply)] if reply is not None else []
    client.messages.create = AsyncMock(return_value=MagicMock(content=content))
    return client


def _service(codebase: Path, reply: str | None = EDIT_REPLY) -> AssistantService:
    return AssistantService(codebase_path=codebase, client=_mock_client(reply))


def _sent_prompt(service: AssistantService) -> str:
    return service.client.messages.create.call_args.kwargs["messages"][0]["content"]


async def _longest_loop_stall(work) -> float:
    """Await work while a ticker measures the longest gap between event-loop turns."""
    gaps: list[float] = []

    async def ticker() -> None:
        last = time.monotonic()
        while True:
            await asyncio.sleep(0.02)
            now = time.monotonic()
            gaps.append(now - last)
            last = now

    ticker_task = asyncio.create_task(ticker())
    try:
        await work
    finally:
        ticker_task.cancel()
    assert gaps
    return max(gaps)


# ═══════════════════════════════════════════════════════════════════════════
# Simple actions
# ═══════════════════════════════════════════════════════════════════════════


class TestSimpleActions:
    """edit / generate / chat: one call, parsed reply."""

    @pytest.mark.anyio
    async def test_edit_parses_content(self, codebase):
        service = _service(codebase)

        result = await service.process(
            ChatTask(message="Add usage", action=ChatAction.EDIT, current_content="# Old")
        )

        assert result.action == ChatAction.EDIT
        assert result.explanation == "Added a section."
        assert result.content == "# Doc"
        assert result.file_analysis is None
        assert "# Old" in _sent_prompt(service)

    @pytest.mark.anyio
    async def test_chat_returns_whole_reply(self, codebase):
        service = _service(codebase, reply="Use shorter headings.")

        result = await service.process(ChatTask(message="Tips?", action=ChatAction.CHAT))

        assert result.explanation == "Use shorter headings."
        assert result.content is None

    @pytest.mark.anyio
    async def test_single_model_call_with_settings(self, codebase):
        service = _service(codebase)

        with patch("app.services.assistant.service.settings") as mock_settings:
            mock_settings.assistant_model = "claude-test"
            mock_settings.assistant_max_tokens = 123
            await service.process(ChatTask(message="Write", action=ChatAction.GENERATE))

        service.client.messages.create.assert_awaited_once()
        call_kwargs = service.client.messages.create.call_args.kwargs
        assert call_kwargs["model"] == "claude-test"
        assert call_kwargs["max_tokens"] == 123

    @pytest.mark.anyio
    async def test_network_error_wrapped(self, codebase):
        service = _service(codebase)
        service.client.messages.create.side_effect = httpx.ConnectError("down")

        with pytest.raises(AssistantError, match="Failed to process AI request"):
            await service.process(ChatTask(message="Write", action=ChatAction.GENERATE))

    @pytest.mark.anyio
    async def test_empty_reply_is_error(self, codebase):
        service = _service(codebase, reply=None)

        with pytest.raises(AssistantError) as exc_info:
            await service.process(ChatTask(message="Write", action=ChatAction.GENERATE))

        assert "empty response" in str(exc_info.value.__cause__)


# ═══════════════════════════════════════════════════════════════════════════
# Client configuration
# ═══════════════════════════════════════════════════════════════════════════


class TestClientConfiguration:
    def test_missing_api_key(self, codebase):
        service = AssistantService(codebase_path=codebase)

        with patch("app.services.assistant.service.settings") as mock_settings:
            mock_settings.assistant_enabled = False
            with pytest.raises(AssistantConfigurationError):
                _ = service.client

    @pytest.mark.anyio
    async def test_missing_api_key_surfaces_as_assistant_error(self, codebase):
        service = AssistantService(codebase_path=codebase)

        with patch("app.services.assistant.service.settings") as mock_settings:
            mock_settings.assistant_enabled = False
            with pytest.raises(AssistantError) as exc_info:
                await service.process(ChatTask(message="Hi", action=ChatAction.CHAT))

        assert isinstance(exc_info.value.__cause__, AssistantConfigurationError)

    def test_client_created_once(self, codebase):
        service = AssistantService(codebase_path=codebase)

        with (
            patch("app.services.assistant.service.settings") as mock_settings,
            patch("app.services.assistant.service.anthropic.AsyncAnthropic") as mock_cls,
        ):
            mock_settings.assistant_enabled = True
            mock_settings.anthropic_api_key = "sk-test"
            mock_settings.assistant_timeout = 30.0
            first = service.client
            second = service.client

        assert first is second
        mock_cls.assert_called_once_with(api_key="sk-test", timeout=30.0, max_retries=0)


# ═══════════════════════════════════════════════════════════════════════════
# analyze_codebase
# ═══════════════════════════════════════════════════════════════════════════


class TestAnalyzeCodebase:
    @pytest.mark.anyio
    async def test_returns_analysis_needing_confirmation(self, codebase):
        service = _service(codebase, reply=ANALYSIS_REPLY)
        files = [FileEntry(path="src/index.ts", name="index.ts", kind="file", size=30)]

        result = await service.process(
            ChatTask(
                message="Document the API",
                action=ChatAction.ANALYZE_CODEBASE,
                codebase_files=files,
            )
        )

        assert result.action == ChatAction.ANALYZE_CODEBASE
        assert result.needs_user_confirmation is True
        assert result.file_analysis.relevant_files == ["src/index.ts", "README.md"]
        assert result.file_analysis.confidence == "high"
        assert "identified 2 files" in result.explanation
        assert "src/index.ts (file, 30 bytes)" in _sent_prompt(service)

    @pytest.mark.anyio
    async def test_failure_wrapped(self, codebase):
        service = _service(codebase)
        service.client.messages.create.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(AssistantError, match="Failed to analyze codebase"):
            await service.process(
                ChatTask(message="x", action=ChatAction.ANALYZE_CODEBASE, codebase_files=[])
            )


# ═══════════════════════════════════════════════════════════════════════════
# process_with_files
# ═══════════════════════════════════════════════════════════════════════════


class TestProcessWithFiles:
    @pytest.mark.anyio
    @pytest.mark.parametrize("selected", [None, []])
    async def test_no_files_selected_before_any_io(self, codebase, selected):
        service = _service(codebase)

        with patch("app.services.assistant.service.build_file_bundle") as mock_bundle:
            with pytest.raises(NoFilesSelectedError):
                await service.process(
                    ChatTask(
                        message="Doc",
                        action=ChatAction.PROCESS_WITH_FILES,
                        selected_files=selected,
                    )
                )

        mock_bundle.assert_not_called()
        service.client.messages.create.assert_not_called()

    @pytest.mark.anyio
    async def test_bundle_sent_and_reply_parsed(self, codebase):
        service = _service(codebase)

        result = await service.process(
            ChatTask(
                message="Doc",
                action=ChatAction.PROCESS_WITH_FILES,
                selected_files=["src/index.ts", "nope.md"],
            )
        )

        prompt = _sent_prompt(service)
        assert "FILE: src/index.ts\n```typescript" in prompt
        assert "FILE: nope.md\n[Error: File not found]" in prompt
        assert result.action == ChatAction.PROCESS_WITH_FILES
        assert result.content == "# Doc"

    @pytest.mark.anyio
    async def test_failure_wrapped(self, codebase):
        service = _service(codebase)
        service.client.messages.create.side_effect = httpx.ConnectError("down")

        with pytest.raises(AssistantError, match="Failed to process selected files"):
            await service.process(
                ChatTask(
                    message="Doc",
                    action=ChatAction.PROCESS_WITH_FILES,
                    selected_files=["README.md"],
                )
            )

    @pytest.mark.anyio
    async def test_file_reads_do_not_block_event_loop(self, codebase):
        service = _service(codebase)

        def slow_bundle(codebase_path, selected_files):
            time.sleep(0.3)
            return "\nFILE: README.md\n```markdown\n# Demo\n```\n"

        with patch(
            "app.services.assistant.service.build_file_bundle", side_effect=slow_bundle
        ):
            stall = await _longest_loop_stall(
                service.process(
                    ChatTask(
                        message="Doc",
                        action=ChatAction.PROCESS_WITH_FILES,
                        selected_files=["README.md"],
                    )
                )
            )

        assert stall < 0.2
        assert "FILE: README.md" in _sent_prompt(service)
