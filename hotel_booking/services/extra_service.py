"""Extra services charged to a booking."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models.extra_service import ExtraService
from hotel_booking.schemas.extra_service import ServiceCreate
from hotel_booking.services.booking_service import get_booking

logger = logging.getLogger(__name__)


async def add_service(db: AsyncSession, body: ServiceCreate) -> ExtraService:
    """Attach a service to an existing booking. Raises ``NotFoundError`` otherwise."""
    await get_booking(db, body.booking_id)

    service = ExtraService(**body.model_dump())
    db.add(service)
    await db.flush()
    logger.info("Added service %r to booking %s", service.service_name, service.booking_id)
    return service
