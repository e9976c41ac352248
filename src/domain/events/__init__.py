"""Domain events package."""

from src.domain.events.auth_events import (
    OTPResent,
    OTPVerificationAttempted,
    OTPVerificationFailed,
    OTPVerificationSucceeded,
    TokenRefreshAttempted,
    TokenRefreshFailed,
    TokenRefreshSucceeded,
    UserLoginAttempted,
    UserLoginFailed,
    UserLoginSucceeded,
    UserSignupAttempted,
    UserSignupFailed,
    UserSignupSucceeded,
)
from src.domain.events.base_event import DomainEvent

__all__ = [
    "DomainEvent",
    "OTPResent",
    "OTPVerificationAttempted",
    "OTPVerificationFailed",
    "OTPVerificationSucceeded",
    "TokenRefreshAttempted",
    "TokenRefreshFailed",
    "TokenRefreshSucceeded",
    "UserLoginAttempted",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserSignupAttempted",
    "UserSignupFailed",
    "UserSignupSucceeded",
]
