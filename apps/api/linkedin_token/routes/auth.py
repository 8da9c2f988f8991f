"""Token login routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from linkedin_token.routes.dependencies import get_authenticated_user
from linkedin_token.schemas.auth import AuthPrincipal
from linkedin_token.schemas.error import ErrorResponse

router = APIRouter(prefix="/auth/linkedin", tags=["Auth"])

_RESPONSES = {401: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}


@router.post("/token", response_model=AuthPrincipal, responses=_RESPONSES)
async def login_with_token(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_user)],
) -> AuthPrincipal:
    return principal


@router.get("/token", response_model=AuthPrincipal, responses=_RESPONSES)
async def login_with_token_query(
    principal: Annotated[AuthPrincipal, Depends(get_authenticated_user)],
) -> AuthPrincipal:
    return principal
