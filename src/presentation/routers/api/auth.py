"""Authentication router.

Endpoints:
    POST /api/auth/signup         - Create account and email an OTP
    POST /api/auth/login          - Exchange credentials for tokens
    POST /api/auth/verify-otp     - Activate account with OTP
    POST /api/auth/resend-otp     - Email a fresh OTP
    POST /api/auth/refresh-token  - Rotate refresh token, mint access token
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    Login,
    RefreshAccessToken,
    ResendOTP,
    Signup,
    VerifyOTP,
)
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.refresh_token_handler import (
    RefreshTokenHandler,
)
from src.application.commands.handlers.resend_otp_handler import ResendOTPHandler
from src.application.commands.handlers.signup_handler import SignupHandler
from src.application.commands.handlers.verify_otp_handler import VerifyOTPHandler
from src.core.container import (
    get_login_handler,
    get_refresh_token_handler,
    get_resend_otp_handler,
    get_signup_handler,
    get_verify_otp_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas import (
    AckResponse,
    AuthTokensResponse,
    LoginRequest,
    RefreshTokenRequest,
    ResendOTPQuery,
    SignupRequest,
    VerifyOTPRequest,
)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=AckResponse,
    responses={
        400: {"description": "Validation failed", "model": ProblemDetails},
        409: {"description": "Email already registered", "model": ProblemDetails},
        503: {"description": "Verification email not sent", "model": ProblemDetails},
    },
    summary="Sign up",
    description="Create an unverified account and email a one-time code.",
)
async def signup(
    request: Request,
    data: SignupRequest,
    handler: SignupHandler = Depends(get_signup_handler),
) -> AckResponse | JSONResponse:
    """Create account.

    POST /api/auth/signup → 201 Created

    The account stays disabled until the emailed OTP is verified.

    Args:
        request: FastAPI request object.
        data: Signup request (email, password, firstName, lastName).
        handler: Signup handler (injected).

    Returns:
        AckResponse on success (201 Created).
        JSONResponse with Problem Details on failure (409/503); malformed
        bodies are answered 400 by the validation handler.
    """
    command = Signup(
        email=data.email,
        password=data.password,
        first_name=data.first_name,
        last_name=data.last_name,
    )

    match await handler.handle(command):
        case Success():
            return AckResponse(
                message="Registration successful. Please check your email for the OTP.",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.post(
    "/login",
    response_model=AuthTokensResponse,
    responses={
        401: {
            "description": "Invalid credentials or email not verified",
            "model": ProblemDetails,
        },
    },
    summary="Log in",
    description="Exchange email and password for an access/refresh token pair.",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginHandler = Depends(get_login_handler),
) -> AuthTokensResponse | JSONResponse:
    """Authenticate and issue tokens.

    POST /api/auth/login → 200 OK

    Each login rotates the user's single refresh token.

    Args:
        request: FastAPI request object.
        data: Login request (email, password).
        handler: Login handler (injected).

    Returns:
        AuthTokensResponse on success.
        JSONResponse with Problem Details on failure (401).
    """
    match await handler.handle(Login(email=data.email, password=data.password)):
        case Success(value=tokens):
            return AuthTokensResponse.from_tokens(tokens)
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.post(
    "/verify-otp",
    response_model=AckResponse,
    responses={
        400: {"description": "Invalid or expired OTP", "model": ProblemDetails},
        404: {"description": "Unknown account", "model": ProblemDetails},
    },
    summary="Verify OTP",
    description="Consume a one-time code and activate the account.",
)
async def verify_otp(
    request: Request,
    data: VerifyOTPRequest,
    handler: VerifyOTPHandler = Depends(get_verify_otp_handler),
) -> AckResponse | JSONResponse:
    """Verify email ownership.

    POST /api/auth/verify-otp → 200 OK

    Args:
        request: FastAPI request object.
        data: Verification request (email, otp).
        handler: Verify OTP handler (injected).

    Returns:
        AckResponse on success.
        JSONResponse with Problem Details on failure (400/404).
    """
    match await handler.handle(VerifyOTP(email=data.email, otp=data.otp)):
        case Success():
            return AckResponse(message="Email verified successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.post(
    "/resend-otp",
    response_model=AckResponse,
    responses={
        404: {"description": "Unknown account", "model": ProblemDetails},
        503: {"description": "Verification email not sent", "model": ProblemDetails},
    },
    summary="Resend OTP",
    description="Replace any outstanding code with a fresh one and email it.",
)
async def resend_otp(
    request: Request,
    query: Annotated[ResendOTPQuery, Query()],
    handler: ResendOTPHandler = Depends(get_resend_otp_handler),
) -> AckResponse | JSONResponse:
    """Email a fresh OTP.

    POST /api/auth/resend-otp?email=... → 200 OK

    Args:
        request: FastAPI request object.
        query: Query parameters (email).
        handler: Resend OTP handler (injected).

    Returns:
        AckResponse on success.
        JSONResponse with Problem Details on failure (404/503).
    """
    match await handler.handle(ResendOTP(email=query.email)):
        case Success():
            return AckResponse(message="OTP sent to your email")
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.post(
    "/refresh-token",
    response_model=AuthTokensResponse,
    responses={
        401: {"description": "Invalid or expired refresh token", "model": ProblemDetails},
    },
    summary="Refresh tokens",
    description="Exchange a refresh token for a new pair. The old refresh token stops working.",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshTokenHandler = Depends(get_refresh_token_handler),
) -> AuthTokensResponse | JSONResponse:
    """Rotate tokens.

    POST /api/auth/refresh-token → 200 OK

    Args:
        request: FastAPI request object.
        data: Refresh request (refreshToken).
        handler: Refresh token handler (injected).

    Returns:
        AuthTokensResponse on success.
        JSONResponse with Problem Details on failure (401).
    """
    match await handler.handle(RefreshAccessToken(refresh_token=data.refresh_token)):
        case Success(value=tokens):
            return AuthTokensResponse.from_tokens(tokens)
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)
