"""API tests for the user profile endpoint.

Tests cover:
- Profile with a valid bearer token
- Missing, malformed and tampered tokens
- WWW-Authenticate header on 401
"""

import pytest

from tests.api.helpers import login


@pytest.mark.integration
class TestProfile:
    """GET /api/user/profile."""

    def test_profile_with_access_token(self, client, auth_tokens):
        """Test the profile echoes the token's email."""
        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Bearer {auth_tokens['accessToken']}"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Profile retrieved",
            "data": {"email": "user@example.com"},
        }

    def test_profile_after_refresh(self, client, auth_tokens):
        """Test the access token from a refresh is accepted."""
        refreshed = client.post(
            "/api/auth/refresh-token",
            json={"refreshToken": auth_tokens["refreshToken"]},
        ).json()

        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Bearer {refreshed['accessToken']}"},
        )

        assert response.status_code == 200

    def test_profile_without_token_returns_401(self, client):
        """Test the endpoint requires a bearer token."""
        response = client.get("/api/user/profile")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["detail"] == "Not authenticated"

    def test_profile_with_tampered_token_returns_401(self, client, verified_user):
        """Test a modified access token is rejected."""
        token = login(client, verified_user).json()["accessToken"]
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Bearer {tampered}"},
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_refresh_token_is_not_an_access_token(self, client, auth_tokens):
        """Test the opaque refresh token cannot be used as a bearer token."""
        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Bearer {auth_tokens['refreshToken']}"},
        )

        assert response.status_code == 401

    def test_wrong_scheme_returns_401(self, client, auth_tokens):
        """Test only the Bearer scheme is accepted."""
        response = client.get(
            "/api/user/profile",
            headers={"Authorization": f"Basic {auth_tokens['accessToken']}"},
        )

        assert response.status_code == 401
