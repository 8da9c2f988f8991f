"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from linkedin_token.adapters.oauth2 import OAuth2Client
from linkedin_token.core.config import Settings, get_settings
from linkedin_token.errors import ApiError
from linkedin_token.routes import auth_router
from linkedin_token.routes.dependencies import get_oauth2_client
from linkedin_token.schemas.auth import AuthPrincipal
from linkedin_token.schemas.profile import NormalizedProfile
from linkedin_token.strategy.driver import LinkedInTokenStrategy, VerifyCallback


def principal_from_profile(
    access_token: str,
    refresh_token: str | None,
    profile: NormalizedProfile | None,
) -> AuthPrincipal | tuple[None, str]:
    """Default verify callback: accept any token whose profile could be loaded."""
    if profile is None:
        return None, "Profile loading is disabled"

    email = profile.emails[0].value if profile.emails else None
    return AuthPrincipal(user_id=profile.id, display_name=profile.display_name, email=email)


def create_app(
    *,
    settings: Settings | None = None,
    verify: VerifyCallback | None = None,
    client: OAuth2Client | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="LinkedIn Token Auth API", version="0.1.0")
    app.state.strategy = LinkedInTokenStrategy(
        settings.to_strategy_options(),
        verify or principal_from_profile,
        client=client or get_oauth2_client(settings),
    )

    @app.exception_handler(ApiError)
    async def handle_api_error(_, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.payload.model_dump(mode="json", exclude_none=True),
        )

    app.include_router(auth_router)
    return app


app = create_app()
