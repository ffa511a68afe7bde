"""Extra services API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.api.deps import get_db
from hotel_booking.schemas.extra_service import ServiceCreate, ServiceCreatedResponse
from hotel_booking.services import extra_service

router = APIRouter(prefix="/api/services", tags=["services"])


@router.post(
    "",
    response_model=ServiceCreatedResponse,
    summary="Attach a service to a booking",
)
async def add_service(
    body: ServiceCreate,
    db: AsyncSession = Depends(get_db),
) -> ServiceCreatedResponse:
    service = await extra_service.add_service(db, body)
    return ServiceCreatedResponse(id=service.id)
