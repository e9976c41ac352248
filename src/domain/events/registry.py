"""Domain events registry.

Catalogs every domain event with its workflow and phase. The container
walks this list to subscribe the logging handler, and tests use it to
catch events that were defined but never registered.

Adding new events:
1. Define event dataclass in auth_events.py
2. Add entry to EVENT_REGISTRY below
"""

from dataclasses import dataclass
from enum import Enum

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


class WorkflowPhase(Enum):
    """3-state workflow phases for ATTEMPT → OUTCOME pattern."""

    ATTEMPTED = "attempted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    OPERATIONAL = "operational"  # Single-state events


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        workflow_name: Name of workflow (e.g., "user_signup").
        phase: Workflow phase.
    """

    event_class: type[DomainEvent]
    workflow_name: str
    phase: WorkflowPhase


EVENT_REGISTRY: list[EventMetadata] = [
    # Signup
    EventMetadata(UserSignupAttempted, "user_signup", WorkflowPhase.ATTEMPTED),
    EventMetadata(UserSignupSucceeded, "user_signup", WorkflowPhase.SUCCEEDED),
    EventMetadata(UserSignupFailed, "user_signup", WorkflowPhase.FAILED),
    # Login
    EventMetadata(UserLoginAttempted, "user_login", WorkflowPhase.ATTEMPTED),
    EventMetadata(UserLoginSucceeded, "user_login", WorkflowPhase.SUCCEEDED),
    EventMetadata(UserLoginFailed, "user_login", WorkflowPhase.FAILED),
    # Email verification
    EventMetadata(OTPVerificationAttempted, "otp_verification", WorkflowPhase.ATTEMPTED),
    EventMetadata(OTPVerificationSucceeded, "otp_verification", WorkflowPhase.SUCCEEDED),
    EventMetadata(OTPVerificationFailed, "otp_verification", WorkflowPhase.FAILED),
    EventMetadata(OTPResent, "otp_resend", WorkflowPhase.OPERATIONAL),
    # Token refresh
    EventMetadata(TokenRefreshAttempted, "token_refresh", WorkflowPhase.ATTEMPTED),
    EventMetadata(TokenRefreshSucceeded, "token_refresh", WorkflowPhase.SUCCEEDED),
    EventMetadata(TokenRefreshFailed, "token_refresh", WorkflowPhase.FAILED),
]


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        List of event classes in registry order.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_event_phase(event_type: type[DomainEvent]) -> WorkflowPhase:
    """Look up the workflow phase of an event class.

    Args:
        event_type: Registered event class.

    Returns:
        WorkflowPhase of the event (OPERATIONAL if unregistered).
    """
    for meta in EVENT_REGISTRY:
        if meta.event_class is event_type:
            return meta.phase
    return WorkflowPhase.OPERATIONAL


def get_workflow_events(workflow_name: str) -> dict[WorkflowPhase, type[DomainEvent]]:
    """Get all events for a workflow.

    Args:
        workflow_name: Workflow name (e.g., "user_login")

    Returns:
        Dict mapping phase to event class.
    """
    return {
        meta.phase: meta.event_class
        for meta in EVENT_REGISTRY
        if meta.workflow_name == workflow_name
    }
