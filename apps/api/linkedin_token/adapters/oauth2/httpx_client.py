"""httpx-backed OAuth2 resource client."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from linkedin_token.adapters.oauth2.base import OAuth2Client, OAuth2TransportError

logger = logging.getLogger(__name__)


class HttpxOAuth2Client(OAuth2Client):
    """Performs token-signed GET requests with ``httpx.AsyncClient``.

    The token is sent both as a query parameter named by the caller and as an
    ``Authorization: Bearer`` header. A shared ``httpx.AsyncClient`` may be
    injected; otherwise one is opened per call.
    """

    def __init__(self, *, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        self._timeout = timeout
        self._client = client

    async def get(self, url: str, token: str, *, access_token_name: str = "access_token") -> str:
        if self._client is not None:
            return await self._get(self._client, url, token, access_token_name)

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._get(client, url, token, access_token_name)

    async def _get(self, client: httpx.AsyncClient, url: str, token: str, access_token_name: str) -> str:
        # Appended verbatim so LinkedIn projection syntax in ``url`` is not re-encoded.
        separator = "&" if "?" in url else "?"
        try:
            request_url = httpx.URL(f"{url}{separator}{urlencode({access_token_name: token})}")
            response = await client.get(request_url, headers={"Authorization": f"Bearer {token}"})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("oauth2.request_failed reason=%s", type(exc).__name__)
            raise OAuth2TransportError(f"request failed: {type(exc).__name__}") from exc

        if not response.is_success:
            logger.warning(
                "oauth2.request_rejected host=%s status_code=%s",
                request_url.host,
                response.status_code,
            )
            raise OAuth2TransportError(
                f"provider responded with status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        return response.text


__all__ = ["HttpxOAuth2Client"]
