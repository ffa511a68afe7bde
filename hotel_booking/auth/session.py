"""Static-credential authentication producing token-backed sessions.

There is a single configured operator account. ``authenticate`` compares
against it and hands back a :class:`Session` carrying a signed token;
``get_current_session`` turns a Bearer token back into a Session.
"""

import secrets
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from hotel_booking.auth.jwt import create_access_token, decode_token
from hotel_booking.config import settings
from hotel_booking.errors import AuthenticationError
from hotel_booking.schemas.auth import LoginRequest

# Strict bearer, raises 403 automatically if no token provided
_bearer_scheme = HTTPBearer()


@dataclass(frozen=True)
class Session:
    """An authenticated operator session."""

    username: str
    access_token: str
    token_type: str = "bearer"


def authenticate(credentials: LoginRequest) -> Session:
    """Check credentials against the configured admin account.

    Raises:
        AuthenticationError: Username or password does not match.
    """
    username_ok = secrets.compare_digest(credentials.username.encode(), settings.admin_username.encode())
    password_ok = secrets.compare_digest(credentials.password.encode(), settings.admin_password.encode())
    if not (username_ok and password_ok):
        raise AuthenticationError("Invalid username or password.")

    token = create_access_token({"sub": credentials.username})
    return Session(username=credentials.username, access_token=token)


async def get_current_session(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
) -> Session:
    """Validate the Bearer token and return its session.

    Raises:
        HTTPException 401: If the token is invalid, expired, or of the wrong type.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    token = credentials.credentials
    try:
        payload = decode_token(token)
    except JWTError:
        raise credentials_exception from None

    if payload.get("type") != "access":
        raise credentials_exception

    sub: str | None = payload.get("sub")
    if sub is None or sub != settings.admin_username:
        raise credentials_exception

    return Session(username=sub, access_token=token)
