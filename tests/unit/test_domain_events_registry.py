"""Unit tests for the domain event registry.

Tests cover:
- Every event exported by the events package is registered
- Each workflow has ATTEMPTED, SUCCEEDED and FAILED events
- Phase lookup
"""

import pytest

import src.domain.events as events_package
from src.domain.events import DomainEvent, OTPResent, UserLoginFailed
from src.domain.events.registry import (
    EVENT_REGISTRY,
    WorkflowPhase,
    get_all_events,
    get_event_phase,
    get_workflow_events,
)


@pytest.mark.unit
class TestEventRegistryCompliance:
    """Registry must stay in sync with the event classes."""

    def test_every_exported_event_is_registered(self):
        """Test no exported event class is missing from EVENT_REGISTRY."""
        # Arrange
        exported = {
            getattr(events_package, name)
            for name in events_package.__all__
            if name != "DomainEvent"
        }

        # Act
        registered = set(get_all_events())

        # Assert
        assert exported == registered

    def test_no_duplicate_registrations(self):
        """Test each event class appears exactly once."""
        classes = [meta.event_class for meta in EVENT_REGISTRY]
        assert len(classes) == len(set(classes))

    def test_all_registered_events_are_domain_events(self):
        """Test registry entries subclass DomainEvent."""
        assert all(issubclass(cls, DomainEvent) for cls in get_all_events())

    @pytest.mark.parametrize(
        "workflow",
        ["user_signup", "user_login", "otp_verification", "token_refresh"],
    )
    def test_workflow_has_three_phases(self, workflow):
        """Test each workflow defines attempted, succeeded and failed events."""
        # Act
        phases = get_workflow_events(workflow)

        # Assert
        assert set(phases) == {
            WorkflowPhase.ATTEMPTED,
            WorkflowPhase.SUCCEEDED,
            WorkflowPhase.FAILED,
        }


@pytest.mark.unit
class TestEventPhaseLookup:
    """Test get_event_phase."""

    def test_failed_event_phase(self):
        """Test failure events report the FAILED phase."""
        assert get_event_phase(UserLoginFailed) is WorkflowPhase.FAILED

    def test_operational_event_phase(self):
        """Test OTPResent is operational rather than part of a workflow."""
        assert get_event_phase(OTPResent) is WorkflowPhase.OPERATIONAL
