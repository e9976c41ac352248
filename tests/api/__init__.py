"""API tests package.

Drive the real app through TestClient: request validation, handler wiring,
response envelopes and Problem Details errors. Outbound OTP email is
captured by a StubEmailService fixture instead of being sent.
"""
