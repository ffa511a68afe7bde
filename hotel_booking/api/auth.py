"""Auth API router — static credential login and session check."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from hotel_booking.api.deps import Session, get_current_session
from hotel_booking.auth.session import authenticate
from hotel_booking.errors import AuthenticationError
from hotel_booking.schemas.auth import LoginRequest, LoginResponse, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in with the operator credentials",
)
async def login(body: LoginRequest) -> LoginResponse | JSONResponse:
    """Return a session token on success, 401 with ``success: false`` otherwise."""
    try:
        session = authenticate(body)
    except AuthenticationError as exc:
        logger.warning("Failed login attempt for %r", body.username)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=LoginResponse(success=False, message=exc.message).model_dump(exclude_none=True),
        )

    return LoginResponse(
        success=True,
        message="Login successful!",
        access_token=session.access_token,
        token_type=session.token_type,
    )


@router.get(
    "/session",
    response_model=SessionResponse,
    summary="Get the session behind a bearer token",
)
async def get_session(session: Session = Depends(get_current_session)) -> SessionResponse:
    return SessionResponse(username=session.username)
