"""Pydantic v2 request/response schemas for customer endpoints."""

from pydantic import BaseModel, EmailStr, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CustomerCreate(BaseModel):
    """Schema for creating a new customer."""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    phone: str | None = Field(None, max_length=20)
    address: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class CustomerCreatedResponse(BaseModel):
    """Identifier of the newly created customer."""

    id: int
    message: str = "Customer created successfully"
