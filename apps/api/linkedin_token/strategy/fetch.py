"""Sequential profile and email retrieval from LinkedIn."""

from __future__ import annotations

import json
import logging

from linkedin_token.adapters.oauth2.base import OAuth2Client, OAuth2TransportError
from linkedin_token.core.config import LINKEDIN_ACCESS_TOKEN_NAME
from linkedin_token.core.logging_safety import safe_log_identifier
from linkedin_token.errors import InternalOAuthError
from linkedin_token.schemas.profile import NormalizedProfile
from linkedin_token.strategy.normalizer import normalize_profile

logger = logging.getLogger(__name__)


class ProfileFetcher:
    """Fetches the member profile, then the member email, then normalizes both.

    The email endpoint is only called after the profile call succeeded. The
    token parameter name is passed on every request, so one fetcher can serve
    concurrent requests.
    """

    def __init__(
        self,
        client: OAuth2Client,
        *,
        profile_url: str,
        email_url: str,
        access_token_name: str = LINKEDIN_ACCESS_TOKEN_NAME,
    ) -> None:
        self._client = client
        self._profile_url = profile_url
        self._email_url = email_url
        self._access_token_name = access_token_name

    async def fetch_profile(self, access_token: str) -> NormalizedProfile:
        safe_token = safe_log_identifier(access_token, prefix="tok")

        try:
            profile_body = await self._client.get(
                self._profile_url,
                access_token,
                access_token_name=self._access_token_name,
            )
        except OAuth2TransportError as exc:
            logger.warning("profile.fetch_failed token=%s stage=profile status_code=%s", safe_token, exc.status_code)
            raise InternalOAuthError("failed to fetch user profile", exc) from exc

        try:
            email_body = await self._client.get(
                self._email_url,
                access_token,
                access_token_name=self._access_token_name,
            )
        except OAuth2TransportError as exc:
            logger.warning("profile.fetch_failed token=%s stage=email status_code=%s", safe_token, exc.status_code)
            raise InternalOAuthError("failed to fetch user email", exc) from exc

        parsed_profile = json.loads(profile_body)
        parsed_email = json.loads(email_body)
        profile = normalize_profile(parsed_profile, parsed_email, raw=profile_body)

        logger.info(
            "profile.fetched token=%s emails=%s photos=%s",
            safe_token,
            len(profile.emails or []),
            len(profile.photos or []),
        )
        return profile


__all__ = ["ProfileFetcher"]
