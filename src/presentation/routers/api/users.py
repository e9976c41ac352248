"""User router.

Endpoints:
    GET /api/user/profile - Profile of the authenticated caller
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.presentation.routers.api.errors import ProblemDetails
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.schemas import ProfileData, ProfileResponse

router = APIRouter(prefix="/api/user", tags=["Users"])


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"description": "Not authenticated", "model": ProblemDetails}},
    summary="Get profile",
)
async def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> ProfileResponse:
    """Return the caller's email from the validated access token.

    GET /api/user/profile → 200 OK
    """
    return ProfileResponse(data=ProfileData(email=current_user.email))
