"""Auth router.

Sign-up with email OTP verification and cookie sessions.

Endpoints:
    POST /api/v1/auth/register    - Create account and email an OTP
    POST /api/v1/auth/verify-otp  - Verify email, set session cookie
    POST /api/v1/auth/resend-otp  - Replace and resend the OTP
    POST /api/v1/auth/login       - Verify password, set session cookie
    POST /api/v1/auth/logout      - Close session, clear cookie
    GET  /api/v1/auth/me          - Identity behind the session cookie
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import Login, Logout, RegisterAccount, ResendOtp, VerifyOtp
from src.application.commands.handlers.login_handler import LoginHandler
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.commands.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from src.application.commands.handlers.resend_otp_handler import ResendOtpHandler
from src.application.commands.handlers.verify_otp_handler import VerifyOtpHandler
from src.application.dtos import AuthenticatedSession
from src.core.config import settings
from src.core.container import (
    get_login_handler,
    get_logout_handler,
    get_register_account_handler,
    get_resend_otp_handler,
    get_verify_otp_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentAuth,
    get_session_id,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    ResendOtpRequest,
    SessionResponse,
    UserResponse,
    VerifyOtpRequest,
)
from src.schemas.common_schemas import MessageResponse

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_response(session: AuthenticatedSession, message: str) -> JSONResponse:
    """Build a SessionResponse body and attach the session cookie."""
    body = SessionResponse(
        message=message,
        user=UserResponse.from_context(session.context),
    )
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(mode="json"),
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.session_id,
        max_age=settings.session_ttl_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return response


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses={
        400: {"description": "Email already registered", "model": ProblemDetails},
        502: {"description": "OTP email could not be sent", "model": ProblemDetails},
    },
    summary="Register account",
    description="Create an unverified account and email a 6-digit verification code.",
)
async def register(
    request: Request,
    data: RegisterRequest,
    handler: RegisterAccountHandler = Depends(get_register_account_handler),
) -> RegisterResponse | JSONResponse:
    """POST /api/v1/auth/register → 201 Created

    The account exists even when the OTP email fails (502); the caller can
    use resend-otp afterwards.
    """
    command = RegisterAccount(
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role,
    )

    match await handler.handle(command):
        case Success(value=registered):
            return RegisterResponse(user_id=registered.account_id, email=registered.email)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/verify-otp",
    response_model=SessionResponse,
    responses={
        400: {"description": "Invalid or expired code", "model": ProblemDetails},
        404: {"description": "Account not found", "model": ProblemDetails},
    },
    summary="Verify email",
    description="Verify the emailed code and sign in.",
)
async def verify_otp(
    request: Request,
    data: VerifyOtpRequest,
    handler: VerifyOtpHandler = Depends(get_verify_otp_handler),
) -> JSONResponse:
    """POST /api/v1/auth/verify-otp → 200 OK + session cookie"""
    match await handler.handle(VerifyOtp(email=data.email, otp=data.otp)):
        case Success(value=session):
            return _session_response(session, "Email verified successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/resend-otp",
    response_model=MessageResponse,
    responses={
        400: {"description": "Account already verified", "model": ProblemDetails},
        404: {"description": "Account not found", "model": ProblemDetails},
        502: {"description": "OTP email could not be sent", "model": ProblemDetails},
    },
    summary="Resend verification code",
)
async def resend_otp(
    request: Request,
    data: ResendOtpRequest,
    handler: ResendOtpHandler = Depends(get_resend_otp_handler),
) -> MessageResponse | JSONResponse:
    """POST /api/v1/auth/resend-otp → 200 OK

    The previous code stops working as soon as the new one is stored.
    """
    match await handler.handle(ResendOtp(email=data.email)):
        case Success():
            return MessageResponse(message="OTP resent successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/login",
    response_model=SessionResponse,
    responses={
        401: {
            "description": "Invalid credentials or email not verified",
            "model": ProblemDetails,
        },
    },
    summary="Login",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginHandler = Depends(get_login_handler),
) -> JSONResponse:
    """POST /api/v1/auth/login → 200 OK + session cookie"""
    match await handler.handle(Login(email=data.email, password=data.password)):
        case Success(value=session):
            return _session_response(session, "Login successful")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Close the current session. Succeeds even without a session.",
)
async def logout(
    request: Request,
    session_id: str | None = Depends(get_session_id),
    handler: LogoutHandler = Depends(get_logout_handler),
) -> Response:
    """POST /api/v1/auth/logout → 200 OK, cookie cleared"""
    if session_id is not None:
        match await handler.handle(Logout(session_id=session_id)):
            case Failure(error=error):
                return ErrorResponseBuilder.from_domain_error(
                    error, request, get_trace_id()
                )
            case Success():
                pass

    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content=MessageResponse(message="Logged out successfully").model_dump(),
    )
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return response


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    responses={401: {"description": "Not signed in", "model": ProblemDetails}},
    summary="Current user",
)
async def me(auth: CurrentAuth) -> CurrentUserResponse:
    """GET /api/v1/auth/me → 200 OK"""
    return CurrentUserResponse(user=UserResponse.from_context(auth))
