"""Pydantic schemas for the AI chat endpoint."""

from app.schemas.base import CamelModel


class ChatRequest(CamelModel):
    """Request body for POST /api/ai/chat.

    message/action are checked by the handler so the 400 responses keep
    their documented wording.
    """

    message: str | None = None
    action: str | None = None
    current_content: str | None = None
    file_path: str | None = None
    selected_files: list[str] | None = None


class FileAnalysisOut(CamelModel):
    relevant_files: list[str]
    reasoning: str
    confidence: str


class TaskResultOut(CamelModel):
    explanation: str
    content: str | None = None
    action: str
    file_analysis: FileAnalysisOut | None = None
    needs_user_confirmation: bool | None = None


class ChatResponse(CamelModel):
    """Response for POST /api/ai/chat."""

    success: bool = True
    data: TaskResultOut
