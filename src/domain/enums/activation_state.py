"""Account activation states.

A user account has exactly two observable states, derived from the
(email_verified, enabled) pair on the User entity:

    UNVERIFIED_DISABLED  --(OTP validated)-->  VERIFIED_ENABLED

There is no transition back. The combination enabled=True with
email_verified=False is not a state; the entity rejects it.
"""

from enum import Enum


class ActivationState(str, Enum):
    """Account activation state."""

    UNVERIFIED_DISABLED = "unverified_disabled"
    VERIFIED_ENABLED = "verified_enabled"
