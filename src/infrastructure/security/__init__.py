"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- JWT access token generation/validation
- Refresh token generation (opaque tokens with SHA-256 lookup hashes)
- One-time password codes for email verification
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.otp_code_service import OTPCodeService
from src.infrastructure.security.refresh_token_service import RefreshTokenService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
    "OTPCodeService",
    "RefreshTokenService",
]
