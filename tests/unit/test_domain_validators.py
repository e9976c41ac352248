"""Unit tests for domain validators and request schemas.

Tests cover:
- Email trimming and case preservation
- Password strength rules
- OTP and refresh token bodies only require a non-empty value
- camelCase wire names on request and response schemas
"""

import pytest
from pydantic import ValidationError

from src.domain.validators import (
    validate_email,
    validate_person_name,
    validate_strong_password,
)
from src.schemas import RefreshTokenRequest, SignupRequest, VerifyOTPRequest
from src.schemas.common_schemas import AckResponse


@pytest.mark.unit
class TestValidateEmail:
    """Test email validation."""

    def test_valid_email_is_trimmed_not_lowercased(self):
        """Test surrounding whitespace is removed and case kept."""
        assert validate_email("  User@Example.com ") == "User@Example.com"

    @pytest.mark.parametrize("email", ["plainaddress", "user@", "@example.com", "a@b"])
    def test_invalid_email_raises(self, email):
        """Test malformed addresses are rejected."""
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(email)


@pytest.mark.unit
class TestValidateStrongPassword:
    """Test password strength rules."""

    def test_strong_password_passes(self):
        """Test a password meeting every rule is returned unchanged."""
        assert validate_strong_password("SecurePass123!") == "SecurePass123!"

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Sh0rt!", "at least 8 characters"),
            ("securepass123!", "uppercase"),
            ("SECUREPASS123!", "lowercase"),
            ("SecurePass!!!", "digit"),
            ("SecurePass123", "special character"),
        ],
    )
    def test_weak_password_raises(self, password, message):
        """Test each missing rule produces its own message."""
        with pytest.raises(ValueError, match=message):
            validate_strong_password(password)


@pytest.mark.unit
class TestValidatePersonName:
    """Test name validation."""

    def test_blank_name_rejected(self):
        """Test whitespace-only names are rejected and others trimmed."""
        assert validate_person_name("  Ada ") == "Ada"
        with pytest.raises(ValueError, match="blank"):
            validate_person_name("   ")


@pytest.mark.unit
class TestAuthSchemas:
    """Test request/response schema wire format."""

    def test_signup_request_accepts_camel_case(self):
        """Test firstName/lastName populate snake_case fields."""
        # Act
        request = SignupRequest.model_validate(
            {
                "email": "user@example.com",
                "password": "SecurePass123!",
                "firstName": "Ada",
                "lastName": "Lovelace",
            }
        )

        # Assert
        assert request.first_name == "Ada"
        assert request.last_name == "Lovelace"

    def test_signup_request_rejects_weak_password(self):
        """Test password strength is enforced at the boundary."""
        with pytest.raises(ValidationError):
            SignupRequest.model_validate(
                {
                    "email": "user@example.com",
                    "password": "weakpassword",
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                }
            )

    def test_verify_otp_request_leaves_code_format_to_lookup(self):
        """Test short or non-digit codes pass the schema and fail at lookup."""
        # Act
        short = VerifyOTPRequest(email="user@example.com", otp="12345")
        letters = VerifyOTPRequest(email="user@example.com", otp="12ab56")

        # Assert
        assert short.otp == "12345"
        assert letters.otp == "12ab56"
        with pytest.raises(ValidationError):
            VerifyOTPRequest(email="user@example.com", otp="")

    def test_refresh_token_request_accepts_any_non_empty_value(self):
        """Test token shape is not checked before the store lookup."""
        # Act
        request = RefreshTokenRequest.model_validate({"refreshToken": "abc"})

        # Assert
        assert request.refresh_token == "abc"
        with pytest.raises(ValidationError):
            RefreshTokenRequest.model_validate({"refreshToken": ""})

    def test_ack_response_serializes_success_and_message(self):
        """Test the acknowledgement body shape."""
        # Act
        body = AckResponse(message="done").model_dump(by_alias=True)

        # Assert
        assert body == {"success": True, "message": "done"}
