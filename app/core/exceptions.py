from typing import Any

from fastapi import HTTPException, status


class APIError(HTTPException):
    """HTTP error rendered as a JSON body with an `error` label.

    `message` and any extra keyword fields are added to the body as-is
    (see the handler registered in app.main).
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str | None = None,
        **extra: Any,
    ):
        self.error = error
        self.message = message
        self.extra = extra
        super().__init__(status_code=status_code, detail=message or error)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = dict(self.extra)
        body["error"] = self.error
        if self.message is not None:
            body["message"] = self.message
        return body


class ValidationError(APIError):
    """Raised when request validation fails."""

    def __init__(self, error: str, message: str | None = None, **extra: Any):
        super().__init__(status.HTTP_400_BAD_REQUEST, error, message, **extra)
