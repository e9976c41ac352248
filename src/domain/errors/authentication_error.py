"""Authentication domain errors.

Error value constants for the credential and token lifecycle.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import AuthenticationError
    from src.core.result import Failure

    match await otp_service.validate(email, code):
        case Failure(error=AuthenticationError.INVALID_OR_EXPIRED_OTP):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    These are NOT exceptions - they are error value constants used in the
    railway-oriented programming pattern. The presentation layer maps each
    one to an HTTP status.

    Error Categories:
        - Signup: EMAIL_ALREADY_EXISTS, DEFAULT_ROLE_NOT_FOUND
        - Credentials: INVALID_CREDENTIALS, EMAIL_NOT_VERIFIED
        - OTP: INVALID_OR_EXPIRED_OTP, DELIVERY_FAILED
        - Refresh: TOKEN_INVALID, TOKEN_EXPIRED
        - Accounts: USER_NOT_FOUND
    """

    # Signup
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    DEFAULT_ROLE_NOT_FOUND = "default_role_not_found"

    # Credentials
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_VERIFIED = "email_not_verified"

    # One-time passwords
    INVALID_OR_EXPIRED_OTP = "invalid_or_expired_otp"
    DELIVERY_FAILED = "delivery_failed"

    # Refresh tokens
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"

    # Accounts
    USER_NOT_FOUND = "user_not_found"
