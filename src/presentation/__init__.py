"""Presentation layer - API endpoints and HTTP concerns.

Routers dispatch commands to the application layer and translate results
to HTTP responses. The presentation layer contains NO business logic.

Structure:
- routers/api/: /api/auth and /api/user endpoints, errors, middleware
- routers/system.py: root and health endpoints
"""
