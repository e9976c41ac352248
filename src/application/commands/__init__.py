"""Command definitions (CQRS write side)."""

from src.application.commands.auth_commands import (
    Login,
    RefreshAccessToken,
    ResendOTP,
    Signup,
    VerifyOTP,
)

__all__ = [
    "Login",
    "RefreshAccessToken",
    "ResendOTP",
    "Signup",
    "VerifyOTP",
]
