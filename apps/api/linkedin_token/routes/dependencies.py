"""Dependency wiring for routes."""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from linkedin_token.adapters.oauth2 import HttpxOAuth2Client, MockOAuth2Client, OAuth2Client
from linkedin_token.core.config import Settings, get_settings
from linkedin_token.errors import ApiError
from linkedin_token.schemas.outcome import AuthError, AuthFailure
from linkedin_token.strategy.driver import LinkedInTokenStrategy, TokenRequest

logger = logging.getLogger(__name__)


def _auth_error(message: str) -> ApiError:
    return ApiError(status_code=401, code="UNAUTHORIZED", message=message)


def get_oauth2_client(settings: Annotated[Settings, Depends(get_settings)]) -> OAuth2Client:
    """Resolve the OAuth2 resource client from configuration."""
    if settings.oauth2_client == "httpx":
        return HttpxOAuth2Client(timeout=settings.http_timeout_seconds)
    return MockOAuth2Client(profile_url=settings.profile_url, email_url=settings.email_url)


def get_strategy(request: Request) -> LinkedInTokenStrategy:
    return request.app.state.strategy


async def _read_body(request: Request) -> dict[str, Any] | None:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return None


async def build_token_request(request: Request) -> TokenRequest:
    """Detach the fields the strategy reads from a Starlette request."""
    return TokenRequest(
        body=await _read_body(request),
        query=dict(request.query_params),
        headers=request.headers,
        native=request,
    )


async def get_authenticated_user(
    request: Request,
    strategy: Annotated[LinkedInTokenStrategy, Depends(get_strategy)],
) -> Any:
    """Run the token strategy and attach the verified user to request context."""
    outcome = await strategy.authenticate(await build_token_request(request))

    if isinstance(outcome, AuthFailure):
        logger.warning(
            "auth.rejected method=%s path=%s reason=token_not_accepted",
            request.method,
            request.url.path,
        )
        message = outcome.info if isinstance(outcome.info, str) and outcome.info else "Invalid or missing access token"
        raise _auth_error(message)

    if isinstance(outcome, AuthError):
        logger.error(
            "auth.errored method=%s path=%s error=%s",
            request.method,
            request.url.path,
            type(outcome.error).__name__,
        )
        raise ApiError(
            status_code=502,
            code="UPSTREAM_AUTH_ERROR",
            message="Unable to verify access token with identity provider",
        ) from outcome.error

    request.state.auth_user = outcome.user
    request.state.auth_info = outcome.info
    return outcome.user
