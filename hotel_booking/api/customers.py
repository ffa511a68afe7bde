"""Customers API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.deps import get_db
from hotel_booking.schemas.customer import CustomerCreate, CustomerCreatedResponse
from hotel_booking.services import customer_service

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.post(
    "",
    response_model=CustomerCreatedResponse,
    summary="Create a new customer",
)
async def create_customer(
    body: CustomerCreate,
    db: AsyncSession = Depends(get_db),
) -> CustomerCreatedResponse:
    """Create a customer record. Raises 400 if the email is already registered."""
    customer = await customer_service.create_customer(db, body)
    return CustomerCreatedResponse(id=customer.id)
