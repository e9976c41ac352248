"""User profile schemas.

GET /api/user/profile returns the standard success envelope with the
caller's email taken from the access token.
"""

from pydantic import Field

from src.schemas.common_schemas import CamelModel


class ProfileData(CamelModel):
    """Profile payload."""

    email: str = Field(..., description="Authenticated user's email address")


class ProfileResponse(CamelModel):
    """Response schema for the profile endpoint."""

    success: bool = Field(default=True, description="Operation succeeded")
    message: str = Field(
        default="Profile retrieved",
        description="Human-readable outcome",
    )
    data: ProfileData
