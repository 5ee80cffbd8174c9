"""
Connection session for the GitLab repository the frontend is working against.

One ConnectionState is owned by the application (app.state.connection) and
handed to handlers through a dependency; gateway calls read it on every request.
"""

import logging
from datetime import UTC, datetime

import httpx

from app.services.gitlab.constants import MIN_TOKEN_LENGTH, PROBE_TIMEOUT
from app.services.gitlab.exceptions import ConnectionValidationError, NotConnectedError
from app.services.gitlab.helpers import is_valid_gitlab_url
from app.services.gitlab.http_client import get_gitlab_client
from app.services.gitlab.types import ConnectionRecord

logger = logging.getLogger(__name__)


def mask_token(token: str) -> str:
    return f"{token[:8]}..."


class ConnectionState:
    """Holds the currently configured repository URL and access token."""

    def __init__(self) -> None:
        self._record: ConnectionRecord | None = None

    @property
    def record(self) -> ConnectionRecord | None:
        return self._record

    @property
    def is_connected(self) -> bool:
        return self._record is not None

    def connect(self, repo_url: str | None, access_token: str | None) -> ConnectionRecord:
        """
        Validate and store new connection details.

        The previous record is only replaced once every check has passed.

        Raises:
            ConnectionValidationError: Missing fields, non-GitLab URL or short token
        """
        if not repo_url or not access_token:
            raise ConnectionValidationError(
                "Missing required fields",
                "Both repoUrl and accessToken are required",
            )

        if not repo_url.strip() or not is_valid_gitlab_url(repo_url.strip()):
            raise ConnectionValidationError(
                "Invalid repository URL",
                "Please provide a valid GitLab repository URL",
            )

        if len(access_token.strip()) < MIN_TOKEN_LENGTH:
            raise ConnectionValidationError(
                "Invalid access token",
                "Please provide a valid GitLab access token",
            )

        self._record = ConnectionRecord(
            repository_url=repo_url.strip(),
            access_token=access_token.strip(),
            connected_at=datetime.now(UTC).isoformat(),
        )
        logger.info(
            f"GitLab connection stored for {self._record.repository_url} "
            f"(token {mask_token(self._record.access_token)})"
        )
        return self._record

    def disconnect(self) -> None:
        """
        Forget the active connection.

        Raises:
            NotConnectedError: If there is nothing to disconnect from
        """
        if self._record is None:
            raise NotConnectedError("No active GitLab connection found")

        logger.info(f"Disconnecting from GitLab repository {self._record.repository_url}")
        self._record = None

    def require(self) -> ConnectionRecord:
        """Return the active record, or raise NotConnectedError before any upstream call."""
        if self._record is None:
            raise NotConnectedError()
        return self._record


async def probe_connection(record: ConnectionRecord) -> None:
    """
    Issue one diagnostic GET against the repository URL with the new credentials.

    Runs after the connect response has been sent. The outcome is only logged;
    the stored connection is kept either way.
    """
    client = get_gitlab_client()
    try:
        response = await client.get(
            record.repository_url,
            headers={"PRIVATE-TOKEN": record.access_token},
            timeout=PROBE_TIMEOUT,
        )
    except httpx.HTTPError as e:
        logger.warning(f"GitLab probe failed for {record.repository_url}, connection kept: {e}")
        return

    if response.is_success:
        logger.info(f"GitLab probe succeeded for {record.repository_url}")
    else:
        logger.warning(
            f"GitLab probe for {record.repository_url} returned {response.status_code}, "
            "connection kept"
        )
