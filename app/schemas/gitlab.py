"""Pydantic schemas for GitLab endpoints."""

from app.schemas.base import CamelModel


class ConnectRequest(CamelModel):
    """Request body for POST /api/gitlab/connect."""

    # Optional here so missing fields get the service's own 400 message
    repo_url: str | None = None
    access_token: str | None = None


class ConnectionData(CamelModel):
    repo_url: str | None = None
    connected: bool
    timestamp: str


class ConnectionResponse(CamelModel):
    """Response for POST /api/gitlab/connect and /disconnect."""

    success: bool = True
    message: str
    data: ConnectionData


class RepoFileItem(CamelModel):
    """Single entry in a repository listing."""

    id: str
    name: str
    path: str
    type: str  # "file" or "folder"
    size: int | None = None
    mode: str


class RepoFilesData(CamelModel):
    repo_url: str
    project_id: str
    ref: str
    path: str
    files: list[RepoFileItem]
    timestamp: str


class RepoFilesResponse(CamelModel):
    """Response for GET /api/gitlab/files."""

    success: bool = True
    message: str
    data: RepoFilesData


class FileContentData(CamelModel):
    file_path: str
    ref: str
    content: str
    size: int
    timestamp: str


class FileContentResponse(CamelModel):
    """Response for GET /api/gitlab/files/{file_path}."""

    success: bool = True
    message: str
    data: FileContentData
