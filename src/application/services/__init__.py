"""Application services shared by command handlers."""

from src.application.services.otp_service import OTPService
from src.application.services.refresh_token_manager import RefreshTokenManager

__all__ = [
    "OTPService",
    "RefreshTokenManager",
]
