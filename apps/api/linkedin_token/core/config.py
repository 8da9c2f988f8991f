"""Strategy and application configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTHORIZATION_URL = "https://www.linkedin.com"
DEFAULT_TOKEN_URL = "https://www.linkedin.com/uas/oauth2/accessToken"
DEFAULT_PROFILE_URL = (
    "https://api.linkedin.com/v2/me"
    "?projection=(id,firstName,lastName,profilePicture(displayImage~:playableStreams))"
)
DEFAULT_EMAIL_URL = "https://api.linkedin.com/v2/emailAddress?q=members&projection=(elements*(handle~))"
# LinkedIn expects the token under this query parameter instead of ``access_token``.
LINKEDIN_ACCESS_TOKEN_NAME = "oauth2_access_token"


class StrategyOptions(BaseModel):
    """Immutable options for one ``LinkedInTokenStrategy`` instance.

    Fields accept either their Python names or the option names used by other
    token strategies (``clientID``, ``profileURL``, ``skipUserProfile`` ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    client_id: str | None = Field(default=None, alias="clientID")
    client_secret: str | None = Field(default=None, alias="clientSecret")
    authorization_url: str = Field(default=DEFAULT_AUTHORIZATION_URL, alias="authorizationURL")
    token_url: str = Field(default=DEFAULT_TOKEN_URL, alias="tokenURL")
    scope_separator: str = Field(default=",", alias="scopeSeparator")
    profile_url: str = Field(default=DEFAULT_PROFILE_URL, alias="profileURL")
    email_url: str = Field(default=DEFAULT_EMAIL_URL, alias="emailURL")
    pass_req_to_callback: bool = Field(default=False, alias="passReqToCallback")
    # bool, sync or async predicate, or a resolved skip policy
    skip_user_profile: Any = Field(default=False, alias="skipUserProfile")
    access_token_name: str = LINKEDIN_ACCESS_TOKEN_NAME


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    client_id: str | None = None
    client_secret: str | None = None
    authorization_url: str = DEFAULT_AUTHORIZATION_URL
    token_url: str = DEFAULT_TOKEN_URL
    scope_separator: str = ","
    profile_url: str = DEFAULT_PROFILE_URL
    email_url: str = DEFAULT_EMAIL_URL
    pass_req_to_callback: bool = False
    skip_user_profile: bool = False
    oauth2_client: Literal["httpx", "mock"] = "httpx"
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    model_config = SettingsConfigDict(env_prefix="LINKEDIN_TOKEN_", extra="ignore")

    def to_strategy_options(self) -> StrategyOptions:
        return StrategyOptions(
            client_id=self.client_id,
            client_secret=self.client_secret,
            authorization_url=self.authorization_url,
            token_url=self.token_url,
            scope_separator=self.scope_separator,
            profile_url=self.profile_url,
            email_url=self.email_url,
            pass_req_to_callback=self.pass_req_to_callback,
            skip_user_profile=self.skip_user_profile,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
