"""Error response builder for authentication failures.

Maps the error constants returned by command handlers to HTTP status codes
and RFC 7807 Problem Details bodies.

Exports:
    ErrorResponseBuilder: Utility class for building Problem Details responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.domain.errors import AuthenticationError
from src.presentation.routers.api.errors.problem_details import ProblemDetails

# error -> (status, title, client-facing detail)
_AUTH_ERROR_INFO: dict[str, tuple[int, str, str]] = {
    AuthenticationError.EMAIL_ALREADY_EXISTS: (
        status.HTTP_409_CONFLICT,
        "Email Already Registered",
        "An account with this email already exists",
    ),
    AuthenticationError.DEFAULT_ROLE_NOT_FOUND: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "Default role is not configured",
    ),
    AuthenticationError.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Authentication Failed",
        "Invalid email or password",
    ),
    AuthenticationError.EMAIL_NOT_VERIFIED: (
        status.HTTP_401_UNAUTHORIZED,
        "Email Not Verified",
        "Please verify your email before logging in",
    ),
    AuthenticationError.INVALID_OR_EXPIRED_OTP: (
        status.HTTP_400_BAD_REQUEST,
        "Invalid Or Expired OTP",
        "The verification code is invalid or has expired",
    ),
    AuthenticationError.DELIVERY_FAILED: (
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Email Delivery Failed",
        "The verification email could not be sent. Please try again later.",
    ),
    AuthenticationError.TOKEN_INVALID: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid Token",
        "Refresh token is invalid",
    ),
    AuthenticationError.TOKEN_EXPIRED: (
        status.HTTP_401_UNAUTHORIZED,
        "Token Expired",
        "Refresh token has expired. Please log in again.",
    ),
    AuthenticationError.USER_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "User Not Found",
        "No account exists for this email",
    ),
}

_UNKNOWN_ERROR_INFO = (
    status.HTTP_500_INTERNAL_SERVER_ERROR,
    "Internal Server Error",
    "An unexpected error occurred",
)


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> response = ErrorResponseBuilder.from_auth_error(
        ...     AuthenticationError.TOKEN_EXPIRED, request
        ... )
        >>> response.status_code
        401
    """

    @staticmethod
    def from_auth_error(error: str, request: Request) -> JSONResponse:
        """Convert a handler error constant to a Problem Details response.

        Unknown errors map to 500 so an unmapped constant never leaks as 2xx.

        Args:
            error: Error constant from AuthenticationError.
            request: FastAPI Request object (for instance URL and trace ID).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title, detail = ErrorResponseBuilder.describe(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error}",
            title=title,
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            errors=None,
            trace_id=getattr(request.state, "trace_id", None),
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def describe(error: str) -> tuple[int, str, str]:
        """Look up status, title and detail for an error constant.

        Example:
            >>> ErrorResponseBuilder.describe(AuthenticationError.USER_NOT_FOUND)[0]
            404
        """
        return _AUTH_ERROR_INFO.get(error, _UNKNOWN_ERROR_INFO)
