"""Mock OAuth2 client for local development and tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import json
from typing import Any

from linkedin_token.adapters.oauth2.base import OAuth2Client, OAuth2TransportError


@dataclass(slots=True)
class RecordedCall:
    url: str
    token: str
    access_token_name: str


def _localized(value: str) -> dict[str, Any]:
    return {"localized": {"en_US": value}, "preferredLocale": {"language": "en", "country": "US"}}


def member_documents_for_token(token: str) -> tuple[dict[str, Any], dict[str, Any]] | None:
    """Return profile and email documents for a deterministic test token.

    Expected token format:
    - ``test:<member_id>``
    """
    parts = token.split(":")
    if len(parts) != 2 or parts[0] != "test" or not parts[1].strip():
        return None

    member_id = parts[1].strip()
    profile = {"id": member_id, "firstName": _localized("Test"), "lastName": _localized(member_id)}
    email = {
        "elements": [
            {
                "handle": f"urn:li:emailAddress:{member_id}",
                "handle~": {"emailAddress": f"{member_id}@example.test"},
            }
        ]
    }
    return profile, email


class MockOAuth2Client(OAuth2Client):
    """Serves canned bodies keyed by URL and records every call.

    A URL mapped to an exception raises it. When ``profile_url`` and
    ``email_url`` are given, those endpoints answer ``test:<member_id>`` tokens
    with deterministic documents and reject any other token with status 401.
    Any other unknown URL raises ``OAuth2TransportError`` with status 404.
    """

    def __init__(
        self,
        responses: dict[str, str | BaseException] | None = None,
        *,
        profile_url: str | None = None,
        email_url: str | None = None,
    ) -> None:
        self.responses: dict[str, str | BaseException] = dict(responses or {})
        self.calls: list[RecordedCall] = []
        self._profile_url = profile_url
        self._email_url = email_url

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def calls_to(self, url: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.url == url]

    async def get(self, url: str, token: str, *, access_token_name: str = "access_token") -> str:
        self.calls.append(RecordedCall(url=url, token=token, access_token_name=access_token_name))
        # Yield like a real request so concurrent callers interleave.
        await asyncio.sleep(0)

        response = self.responses.get(url)
        if response is None and url in (self._profile_url, self._email_url):
            return self._member_body(url, token)
        if response is None:
            raise OAuth2TransportError(f"no canned response for {url}", status_code=404)
        if isinstance(response, BaseException):
            raise response
        return response

    def _member_body(self, url: str, token: str) -> str:
        documents = member_documents_for_token(token)
        if documents is None:
            raise OAuth2TransportError("invalid test access token", status_code=401)

        profile, email = documents
        return json.dumps(profile if url == self._profile_url else email)


__all__ = ["MockOAuth2Client", "RecordedCall", "member_documents_for_token"]
