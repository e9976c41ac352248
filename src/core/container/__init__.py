"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_signup_handler, ...

The container is organized into modules by concern:
- infrastructure: Core services (db, security, email, logging)
- events: Event bus and subscriptions
- auth_handlers: Authentication service and handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_dummy_password_hash,
    get_email_service,
    get_logger,
    get_otp_code_service,
    get_password_service,
    get_refresh_token_service,
    get_token_service,
)

# Event bus
from src.core.container.events import get_event_bus

# Auth services and handlers
from src.core.container.auth_handlers import (
    get_login_handler,
    get_otp_service,
    get_refresh_token_handler,
    get_refresh_token_manager,
    get_resend_otp_handler,
    get_signup_handler,
    get_verify_otp_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_dummy_password_hash",
    "get_email_service",
    "get_logger",
    "get_otp_code_service",
    "get_password_service",
    "get_refresh_token_service",
    "get_token_service",
    # Events
    "get_event_bus",
    # Auth
    "get_login_handler",
    "get_otp_service",
    "get_refresh_token_handler",
    "get_refresh_token_manager",
    "get_resend_otp_handler",
    "get_signup_handler",
    "get_verify_otp_handler",
]
