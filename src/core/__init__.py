"""Core shared kernel.

Foundational pieces used across all layers:
- Result types for railway-oriented programming
- Settings (pydantic-settings)
- Dependency container

The core module has no dependencies on the presentation layer.
"""

from src.core.result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
