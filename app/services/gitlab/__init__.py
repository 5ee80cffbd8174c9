"""
GitLab service package.

Usage: `from app.services.gitlab import ConnectionState, GitLabReadOperations`

Module structure:
- connection.py: ConnectionState session object and the connect probe
- read_operations.py: Tree listing and raw file fetches
- helpers.py: URL parsing and error response mapping
- http_client.py: Shared pooled httpx client
- types.py: Data types and response models
- exceptions.py: Custom exceptions
- constants.py: API constants and timeouts
"""

from app.services.gitlab.connection import ConnectionState, probe_connection
from app.services.gitlab.exceptions import (
    ConnectionValidationError,
    GitLabAPIError,
    InvalidRepositoryUrlError,
    NotConnectedError,
)
from app.services.gitlab.helpers import extract_project_id, get_api_base, handle_error_response
from app.services.gitlab.http_client import close_gitlab_client
from app.services.gitlab.read_operations import GitLabReadOperations
from app.services.gitlab.types import ConnectionRecord, RepoFile, RepoTree, RepoTreeItem

__all__ = [
    # Session + operations
    "ConnectionState",
    "GitLabReadOperations",
    "probe_connection",
    # HTTP client lifecycle
    "close_gitlab_client",
    # Utilities
    "extract_project_id",
    "get_api_base",
    "handle_error_response",
    # Exceptions
    "ConnectionValidationError",
    "GitLabAPIError",
    "InvalidRepositoryUrlError",
    "NotConnectedError",
    # Types
    "ConnectionRecord",
    "RepoFile",
    "RepoTree",
    "RepoTreeItem",
]
