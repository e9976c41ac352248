"""RFC 7807 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
    ErrorResponseBuilder: Maps handler error constants to responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
