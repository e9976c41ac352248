"""Email service implementations.

This package contains email service adapters:
- StubEmailService: Console logging for development/testing
- SESEmailService: AWS SES for production
"""

from src.infrastructure.email.ses_email_service import SESEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SESEmailService",
    "StubEmailService",
]
