"""Infrastructure layer - adapters behind the domain protocols.

Structure:
- persistence/: SQLAlchemy models, async database and repositories
- security/: bcrypt hashing, JWT access tokens, opaque refresh tokens,
  OTP code generation
- email/: OTP delivery via AWS SES, or a logging stub in development
- events/: In-memory event bus and the logging event handler
- logging/: structlog console adapter

The domain layer never imports from here.
"""
