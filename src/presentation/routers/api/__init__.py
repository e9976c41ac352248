"""HTTP API routers.

Exports:
    auth_router: /api/auth endpoints
    users_router: /api/user endpoints
"""

from src.presentation.routers.api.auth import router as auth_router
from src.presentation.routers.api.users import router as users_router

__all__ = ["auth_router", "users_router"]
