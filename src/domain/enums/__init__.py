"""Domain enums.

Available Enums:
    - ActivationState: Account activation state machine states
    - UserRole: Flat role tags attached to a user
"""

from src.domain.enums.activation_state import ActivationState
from src.domain.enums.user_role import UserRole

__all__ = [
    "ActivationState",
    "UserRole",
]
