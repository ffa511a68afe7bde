"""Customer directory — creates contact records for each booking flow."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.errors import ConflictError, StorageError
from hotel_booking.models.customer import Customer
from hotel_booking.schemas.customer import CustomerCreate

logger = logging.getLogger(__name__)


async def get_customer(db: AsyncSession, customer_id: int) -> Customer | None:
    result = await db.execute(select(Customer).where(Customer.id == customer_id))
    return result.scalar_one_or_none()


async def create_customer(db: AsyncSession, body: CustomerCreate) -> Customer:
    """Insert a new customer without looking the email up first.

    Returning guests are not deduplicated: the email uniqueness constraint
    in the store is what rejects a repeat, and that violation is reported
    as a conflict.

    Raises:
        ConflictError: A customer with this email already exists.
        StorageError: Any other integrity failure.
    """
    customer = Customer(**body.model_dump())
    try:
        async with db.begin_nested():
            db.add(customer)
            await db.flush()
    except IntegrityError as exc:
        if "email" in str(exc.orig).lower():
            raise ConflictError("Customer with this email already exists") from exc
        raise StorageError(str(exc.orig)) from exc

    logger.info("Created customer %s", customer.id)
    return customer
