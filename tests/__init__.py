"""Test suite for the OTP auth service.

- unit/: Handlers, services, domain and config with mocked collaborators
- integration/: Repositories, security services and logging against real
  libraries and an in-memory SQLite database
- api/: HTTP endpoints end-to-end through FastAPI's TestClient
"""
