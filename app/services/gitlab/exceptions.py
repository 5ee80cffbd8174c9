"""Exceptions for GitLab service."""


class GitLabAPIError(Exception):
    """Error from (or while reaching) the GitLab API.

    `error` is the short category shown to the frontend ("Authentication failed",
    "Repository not found", ...), `message` the human-readable explanation.
    """

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotConnectedError(GitLabAPIError):
    """No repository connection has been configured."""

    def __init__(self, message: str = "Please connect to a GitLab repository first"):
        super().__init__("Not connected", message, status_code=400)


class ConnectionValidationError(GitLabAPIError):
    """Connect request carried a missing or malformed URL/token."""

    def __init__(self, error: str, message: str):
        super().__init__(error, message, status_code=400)


class InvalidRepositoryUrlError(GitLabAPIError):
    """Stored repository URL has no usable project path."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid repository URL",
            "Could not extract project ID from repository URL",
            status_code=400,
        )
