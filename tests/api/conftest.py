"""Fixtures for API tests: accounts set up through the public endpoints."""

from itertools import count

import pytest

from src.infrastructure.security.otp_code_service import OTPCodeService
from tests.api.helpers import login, signup, verify


@pytest.fixture
def sequential_codes(monkeypatch):
    """Make issued OTPs predictable and distinct: 100001, 100002, ..."""
    counter = count(100_001)
    monkeypatch.setattr(
        OTPCodeService, "generate_code", lambda self: str(next(counter))
    )


@pytest.fixture
def verified_user(client, email_service) -> str:
    """Sign up and verify an account; returns its email."""
    email = "user@example.com"
    assert signup(client, email).status_code == 201
    assert verify(client, email_service, email).status_code == 200
    return email


@pytest.fixture
def auth_tokens(client, verified_user) -> dict:
    """Token pair for a verified account."""
    response = login(client, verified_user)
    assert response.status_code == 200
    return response.json()
