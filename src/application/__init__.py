"""Application layer - auth use cases.

Structure:
- commands/: Command dataclasses and their handlers (signup, login,
  OTP verification and resend, token refresh)
- services/: OTP lifecycle and refresh-token rotation shared by handlers
- dtos/: Results handed back to the presentation layer

Handlers orchestrate domain objects through protocols and return Result
types; they never raise for expected failures.
"""
