"""Authenticate LinkedIn access tokens from client-side OAuth2 flows."""

from linkedin_token.adapters.oauth2 import HttpxOAuth2Client, MockOAuth2Client, OAuth2Client, OAuth2TransportError
from linkedin_token.core.config import Settings, StrategyOptions
from linkedin_token.errors import InternalOAuthError
from linkedin_token.schemas.outcome import AuthError, AuthFailure, AuthSuccess, AuthenticationSink, Outcome
from linkedin_token.schemas.profile import NormalizedProfile
from linkedin_token.strategy import LinkedInTokenStrategy, TokenRequest

__all__ = [
    "AuthError",
    "AuthFailure",
    "AuthSuccess",
    "AuthenticationSink",
    "HttpxOAuth2Client",
    "InternalOAuthError",
    "LinkedInTokenStrategy",
    "MockOAuth2Client",
    "NormalizedProfile",
    "OAuth2Client",
    "OAuth2TransportError",
    "Outcome",
    "Settings",
    "StrategyOptions",
    "TokenRequest",
]
