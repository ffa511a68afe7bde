"""Pydantic v2 request/response schemas for authentication endpoints."""

from pydantic import BaseModel

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Schema for username/password login."""

    username: str
    password: str


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class LoginResponse(BaseModel):
    """Login outcome; the token is only present on success."""

    success: bool
    message: str
    access_token: str | None = None
    token_type: str | None = None


class SessionResponse(BaseModel):
    """The session behind a bearer token."""

    username: str
