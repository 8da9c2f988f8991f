"""OAuth2 resource client interfaces."""

from abc import ABC, abstractmethod


class OAuth2TransportError(Exception):
    """Raised when a signed GET against the provider does not yield a 2xx body."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class OAuth2Client(ABC):
    """Provider-neutral client for token-authenticated resource requests."""

    @abstractmethod
    async def get(self, url: str, token: str, *, access_token_name: str = "access_token") -> str:
        """GET ``url`` presenting ``token`` under ``access_token_name`` and return the body."""


__all__ = ["OAuth2Client", "OAuth2TransportError"]
