"""Application routers.

Exports:
    auth_router: /api/auth endpoints
    users_router: /api/user endpoints
    system_router: root and health endpoints
"""

from src.presentation.routers.api import auth_router, users_router
from src.presentation.routers.system import system_router

__all__ = ["auth_router", "system_router", "users_router"]
