"""Domain protocols (ports).

Structural interfaces the application layer depends on. Infrastructure
provides the adapters; the container wires them.
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.otp_code_protocol import OTPCodeProtocol
from src.domain.protocols.otp_notifier_protocol import OTPNotifierProtocol
from src.domain.protocols.otp_repository import OTPData, OTPRepository
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.refresh_token_repository import (
    RefreshTokenData,
    RefreshTokenRepository,
)
from src.domain.protocols.refresh_token_service_protocol import (
    RefreshTokenServiceProtocol,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "OTPCodeProtocol",
    "OTPData",
    "OTPNotifierProtocol",
    "OTPRepository",
    "PasswordHashingProtocol",
    "RefreshTokenData",
    "RefreshTokenRepository",
    "RefreshTokenServiceProtocol",
    "TokenGenerationProtocol",
    "UserRepository",
]
