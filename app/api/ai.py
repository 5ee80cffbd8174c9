"""
AI assistant endpoint for documentation chat.
"""

import asyncio
import logging
from dataclasses import asdict

from fastapi import APIRouter, Body, status

from app.api.deps import Assistant
from app.config import settings
from app.core.exceptions import APIError
from app.schemas.ai import ChatRequest, ChatResponse, TaskResultOut
from app.services.assistant import AssistantError, ChatAction, ChatTask, NoFilesSelectedError
from app.services.codebase import CodebaseNotFoundError, load_codebase_files

router = APIRouter(prefix="/ai", tags=["ai"])
logger = logging.getLogger(__name__)

VALID_ACTIONS = ", ".join(action.value for action in ChatAction)


def _chat_error(status_code: int, error: str, details: str | None = None) -> APIError:
    """Chat errors carry `success: false` and, outside production, `details`."""
    extra: dict[str, object] = {"success": False}
    if details is not None:
        extra["details"] = details
    return APIError(status_code, error, **extra)


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat(
    assistant: Assistant,
    body: ChatRequest | None = Body(default=None),
) -> ChatResponse:
    """Run one assistant action (edit, generate, chat, analyze_codebase, process_with_files)."""
    body = body or ChatRequest()

    if not body.message or not body.action:
        raise _chat_error(
            status.HTTP_400_BAD_REQUEST,
            "Missing required fields: message and action are required",
        )

    try:
        action = ChatAction(body.action)
    except ValueError:
        raise _chat_error(
            status.HTTP_400_BAD_REQUEST,
            f"Invalid action. Must be one of: {VALID_ACTIONS}",
        ) from None

    task = ChatTask(
        message=body.message,
        action=action,
        current_content=body.current_content,
        file_path=body.file_path,
        selected_files=body.selected_files,
    )

    if action == ChatAction.ANALYZE_CODEBASE:
        try:
            task.codebase_files = await asyncio.to_thread(
                load_codebase_files, assistant.codebase_path
            )
        except (CodebaseNotFoundError, OSError) as e:
            logger.error(f"Error fetching codebase files: {e}")
            raise _chat_error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to fetch codebase files",
                "Please ensure the codebase folder exists and contains files",
            ) from e

    try:
        result = await assistant.process(task)
    except NoFilesSelectedError as e:
        raise _chat_error(status.HTTP_400_BAD_REQUEST, str(e)) from e
    except AssistantError as e:
        logger.error(f"AI chat failed: {e} (cause: {e.__cause__})")
        raise _chat_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to process AI request",
            str(e) if settings.expose_error_details else None,
        ) from e

    payload = asdict(result)
    payload["action"] = result.action.value
    return ChatResponse(data=TaskResultOut.model_validate(payload))
