"""Integration tests for bcrypt password service.

Uses the real bcrypt library at the minimum cost factor to keep tests fast.
"""

import pytest

from src.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Integration tests for password hashing."""

    def test_hash_and_verify(self, password_service):
        """Test a hashed password verifies and a wrong one does not."""
        password_hash = password_service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password("SecurePass123!", password_hash)
        assert not password_service.verify_password("WrongPass123!", password_hash)

    def test_hashes_are_salted(self, password_service):
        """Test the same password hashes differently each time."""
        first = password_service.hash_password("SecurePass123!")
        second = password_service.hash_password("SecurePass123!")

        assert first != second

    def test_malformed_hash_returns_false(self, password_service):
        """Test a garbage hash is a mismatch, not an exception."""
        assert password_service.verify_password("SecurePass123!", "not-a-hash") is False

    @pytest.mark.parametrize("cost_factor", [3, 32])
    def test_invalid_cost_factor_rejected(self, cost_factor):
        """Test cost factors outside bcrypt's range are refused."""
        with pytest.raises(ValueError, match="between 4 and 31"):
            BcryptPasswordService(cost_factor=cost_factor)
