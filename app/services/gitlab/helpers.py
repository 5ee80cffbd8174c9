"""
GitLab API helper utilities.

Repository URL parsing and error response processing for GitLab API calls.
"""

import logging
from urllib.parse import urlparse

import httpx

from app.services.gitlab.constants import API_PATH, DEFAULT_API_BASE, GITLAB_URL_MARKER
from app.services.gitlab.exceptions import GitLabAPIError

logger = logging.getLogger(__name__)

# resource -> (error, message) used for upstream 404s
NOT_FOUND_ERRORS: dict[str, tuple[str, str]] = {
    "repository": ("Repository not found", "Repository or branch not found"),
    "file": ("File not found", "File not found in repository or branch"),
}

# resource -> prefix for generic upstream failures
FAILURE_MESSAGES: dict[str, str] = {
    "repository": "GitLab API request failed",
    "file": "Failed to fetch file content",
}


def is_valid_gitlab_url(url: str) -> bool:
    """
    Basic GitLab repository URL check.

    Accepts https URLs on gitlab.com or any self-hosted instance whose
    host (or URL) mentions "gitlab".
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    hostname = parsed.hostname or ""
    if parsed.scheme != "https" or not hostname:
        return False
    return GITLAB_URL_MARKER in hostname or GITLAB_URL_MARKER in url


def extract_project_id(repo_url: str) -> str | None:
    """
    Extract the project path (namespace/project) from a repository URL.

    GitLab accepts the URL-encoded full path wherever a project ID is expected.

    Returns:
        Project path without leading slash or ".git" suffix, or None if empty
    """
    try:
        pathname = urlparse(repo_url).path
    except ValueError:
        return None

    pathname = pathname.removeprefix("/").removesuffix(".git")
    return pathname or None


def get_api_base(repo_url: str) -> str:
    """Get the GitLab REST API base URL (scheme://host/api/v4) for a repository URL."""
    try:
        parsed = urlparse(repo_url)
    except ValueError:
        return DEFAULT_API_BASE

    if not parsed.scheme or not parsed.netloc:
        return DEFAULT_API_BASE
    return f"{parsed.scheme}://{parsed.netloc}{API_PATH}"


def upstream_message(response: httpx.Response) -> str:
    """Best-effort error message from a GitLab response body."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return response.reason_phrase or f"HTTP {response.status_code}"


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Handle error responses from GitLab API.

    Args:
        response: The HTTP response from GitLab API
        resource: "repository" for tree listings, "file" for raw file fetches

    Raises:
        GitLabAPIError: For authentication, authorization, not-found or other API errors
    """
    if response.is_success:
        return

    if response.status_code == 401:
        raise GitLabAPIError(
            "Authentication failed",
            "Invalid access token or insufficient permissions",
            401,
        )
    elif response.status_code == 403:
        raise GitLabAPIError(
            "Access denied",
            "Insufficient permissions to access this repository",
            403,
        )
    elif response.status_code == 404:
        error, message = NOT_FOUND_ERRORS[resource]
        raise GitLabAPIError(error, message, 404)

    detail = upstream_message(response)
    logger.warning(f"GitLab API returned {response.status_code} for {resource}: {detail}")
    raise GitLabAPIError(
        "GitLab API error",
        f"{FAILURE_MESSAGES[resource]}: {detail}",
        response.status_code,
    )
