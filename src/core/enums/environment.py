"""Application environment types.

Selects environment-specific wiring in the container:
- DEVELOPMENT: human-readable console logs, stub email delivery
- TESTING / CI: JSON logs, stub email delivery
- PRODUCTION: JSON logs, AWS SES email delivery
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
