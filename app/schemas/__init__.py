"""Pydantic schemas for API request/response validation."""

from app.schemas.ai import ChatRequest, ChatResponse, FileAnalysisOut, TaskResultOut
from app.schemas.base import CamelModel
from app.schemas.gitlab import (
    ConnectionData,
    ConnectionResponse,
    ConnectRequest,
    FileContentData,
    FileContentResponse,
    RepoFileItem,
    RepoFilesData,
    RepoFilesResponse,
)

__all__ = [
    "CamelModel",
    "ChatRequest",
    "ChatResponse",
    "ConnectRequest",
    "ConnectionData",
    "ConnectionResponse",
    "FileAnalysisOut",
    "FileContentData",
    "FileContentResponse",
    "RepoFileItem",
    "RepoFilesData",
    "RepoFilesResponse",
    "TaskResultOut",
]
