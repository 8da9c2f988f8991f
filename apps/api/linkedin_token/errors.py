"""Application exception types."""

from __future__ import annotations

from linkedin_token.schemas.error import ErrorResponse


class InternalOAuthError(Exception):
    """Raised when a call to the identity provider fails at the transport level.

    The provider-specific cause is kept on ``oauth_error`` and chained as
    ``__cause__`` by the raise site.
    """

    def __init__(self, message: str, oauth_error: BaseException | None = None) -> None:
        self.oauth_error = oauth_error
        super().__init__(message)


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    def __init__(self, status_code: int, code: str, message: str, details: dict | None = None) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(code=code, message=message, details=details)
        super().__init__(message)


__all__ = ["ApiError", "InternalOAuthError"]
