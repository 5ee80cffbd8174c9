"""Data types for GitLab API responses."""

from dataclasses import dataclass, field


@dataclass
class ConnectionRecord:
    """Repository URL and access token of the active connection."""

    repository_url: str
    access_token: str
    connected_at: str


@dataclass
class RepoTreeItem:
    """Single entry from the repository tree endpoint."""

    id: str
    name: str
    path: str
    type: str  # "file" or "folder"
    mode: str
    size: int | None = None


@dataclass
class RepoTree:
    """Directory listing plus the request coordinates it was fetched with."""

    repo_url: str
    project_id: str
    ref: str
    path: str
    files: list[RepoTreeItem] = field(default_factory=list)


@dataclass
class RepoFile:
    """Raw file content fetched from a repository."""

    file_path: str
    ref: str
    content: str
    size: int  # bytes
