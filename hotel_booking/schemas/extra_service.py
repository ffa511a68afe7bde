"""Pydantic v2 schemas for booking extra services."""

from decimal import Decimal

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for attaching a service to a booking."""

    booking_id: int
    service_name: str = Field(..., min_length=1, max_length=100)
    service_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class ServiceCreatedResponse(BaseModel):
    """Identifier of the newly attached service."""

    id: int
    message: str = "Service added successfully"
