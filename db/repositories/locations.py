"""Location repository."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db.loading import Include, loader_options
from db.models import Location
from schemas.fleet import LocationWithCars

logger = logging.getLogger(__name__)

CAR_SUMMARY = Include(
    "cars",
    columns=("car_model", "color", "rental_rate", "availability"),
)


async def get_with_cars(session: AsyncSession) -> list[LocationWithCars]:
    """Return every location with the cars stationed there."""
    result = await session.execute(
        select(Location).options(*loader_options(Location, [CAR_SUMMARY]))
    )
    return [LocationWithCars.model_validate(loc) for loc in result.scalars().all()]
