"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class BearerCredential(BaseModel):
    """Tokens extracted from one incoming request."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(min_length=1)
    refresh_token: str | None = None


class AuthPrincipal(BaseModel):
    """Normalized authenticated principal returned to API callers."""

    user_id: str = Field(min_length=1)
    display_name: str
    email: str | None = None
    provider: str = "linkedin"
