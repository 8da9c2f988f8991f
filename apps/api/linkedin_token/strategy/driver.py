"""LinkedIn access-token authentication strategy.

Accepts access tokens obtained by a client-side (implicit grant) flow,
validates them by loading the LinkedIn profile and hands the normalized
profile to an application ``verify`` callback::

    async def verify(access_token, refresh_token, profile):
        user = await users.find_or_create(profile.id)
        return user

    strategy = LinkedInTokenStrategy(
        StrategyOptions(client_id="123-456-789", client_secret="shhh"),
        verify,
        client=HttpxOAuth2Client(),
    )
    outcome = await strategy.authenticate(TokenRequest(query={"access_token": token}))

``verify`` may be sync or async. It returns the user, or a ``(user, info)``
tuple; a falsy user rejects the credentials and raising reports an error.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
import inspect
import logging
from typing import Any

from linkedin_token.adapters.oauth2.base import OAuth2Client
from linkedin_token.core.config import StrategyOptions
from linkedin_token.core.logging_safety import safe_log_identifier
from linkedin_token.schemas.auth import BearerCredential
from linkedin_token.schemas.outcome import AuthError, AuthFailure, AuthSuccess, AuthenticationSink, Outcome
from linkedin_token.schemas.profile import NormalizedProfile
from linkedin_token.strategy.fetch import ProfileFetcher
from linkedin_token.strategy.gate import ProfileLoadGate, resolve_skip_policy

logger = logging.getLogger(__name__)

VerifyCallback = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class TokenRequest:
    """Request fields the strategy reads, detached from any web framework.

    ``native`` is the host request object, passed to ``verify`` when
    ``pass_req_to_callback`` is enabled.
    """

    body: Mapping[str, Any] | None = None
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)
    native: Any = None


def _first_value(sources: tuple[Mapping[str, Any] | None, ...], key: str) -> str | None:
    for source in sources:
        if not source:
            continue
        value = source.get(key)
        if value:
            return str(value)
    return None


def extract_credential(request: TokenRequest) -> BearerCredential | None:
    """Read tokens from the body, then the query string, then the headers.

    Each token is resolved independently; the first non-empty value wins.
    """
    sources = (request.body, request.query, request.headers)
    access_token = _first_value(sources, "access_token")
    if access_token is None:
        return None
    return BearerCredential(access_token=access_token, refresh_token=_first_value(sources, "refresh_token"))


class LinkedInTokenStrategy:
    name = "linkedin-token"

    def __init__(self, options: StrategyOptions, verify: VerifyCallback, *, client: OAuth2Client) -> None:
        self._options = options
        self._verify = verify
        self._gate = ProfileLoadGate(
            ProfileFetcher(
                client,
                profile_url=options.profile_url,
                email_url=options.email_url,
                access_token_name=options.access_token_name,
            ),
            resolve_skip_policy(options.skip_user_profile),
        )

    @property
    def options(self) -> StrategyOptions:
        return self._options

    async def load_user_profile(self, access_token: str) -> NormalizedProfile | None:
        return await self._gate.load(access_token)

    async def authenticate(self, request: TokenRequest) -> Outcome:
        """Authenticate ``request`` and return exactly one terminal outcome."""
        if request.query and request.query.get("error"):
            logger.warning("auth.rejected strategy=%s reason=provider_error", self.name)
            return AuthFailure()

        credential = extract_credential(request)
        if credential is None:
            logger.warning("auth.rejected strategy=%s reason=missing_access_token", self.name)
            return AuthFailure()

        safe_token = safe_log_identifier(credential.access_token, prefix="tok")
        try:
            profile = await self.load_user_profile(credential.access_token)
        except Exception as exc:
            logger.warning(
                "auth.errored strategy=%s token=%s reason=profile_load_failed error=%s",
                self.name,
                safe_token,
                type(exc).__name__,
            )
            return AuthError(exc)

        return await self._run_verify(request, credential, profile, safe_token)

    async def authenticate_into(self, request: TokenRequest, sink: AuthenticationSink) -> Outcome:
        """Authenticate ``request`` and dispatch the outcome to a host sink."""
        outcome = await self.authenticate(request)
        outcome.dispatch(sink)
        return outcome

    async def _run_verify(
        self,
        request: TokenRequest,
        credential: BearerCredential,
        profile: NormalizedProfile | None,
        safe_token: str,
    ) -> Outcome:
        args: tuple[Any, ...] = (credential.access_token, credential.refresh_token, profile)
        if self._options.pass_req_to_callback:
            args = (request.native, *args)

        try:
            result = self._verify(*args)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.warning(
                "auth.errored strategy=%s token=%s reason=verify_failed error=%s",
                self.name,
                safe_token,
                type(exc).__name__,
            )
            return AuthError(exc)

        user, info = result if isinstance(result, tuple) and len(result) == 2 else (result, None)
        if not user:
            logger.warning("auth.rejected strategy=%s token=%s reason=verify_rejected", self.name, safe_token)
            return AuthFailure(info)

        logger.info("auth.accepted strategy=%s token=%s", self.name, safe_token)
        return AuthSuccess(user, info)


__all__ = ["LinkedInTokenStrategy", "TokenRequest", "VerifyCallback", "extract_credential"]
