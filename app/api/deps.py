"""API dependencies: the connection session and the assistant service."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from app.services.assistant import AssistantService
from app.services.gitlab import ConnectionState


def get_connection(request: Request) -> ConnectionState:
    """The application's GitLab connection session (owned by app.state)."""
    connection: ConnectionState = request.app.state.connection
    return connection


@lru_cache
def get_assistant_service() -> AssistantService:
    """Shared assistant; the Anthropic client is created on first use."""
    return AssistantService()


Connection = Annotated[ConnectionState, Depends(get_connection)]
Assistant = Annotated[AssistantService, Depends(get_assistant_service)]
