"""Car repository: fleet reads with service history."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from db.loading import Include, loader_options
from db.models import Car
from schemas.fleet import CarWithMaintenance

logger = logging.getLogger(__name__)

MAINTENANCE_SUMMARY = Include(
    "maintenance_records",
    columns=("description", "maintenance_date", "cost"),
)


async def get_with_maintenance(session: AsyncSession) -> list[CarWithMaintenance]:
    """Return every car with its maintenance records.

    Cars without any maintenance are included with an empty list.
    """
    result = await session.execute(
        select(Car).options(*loader_options(Car, [MAINTENANCE_SUMMARY]))
    )
    return [CarWithMaintenance.model_validate(car) for car in result.scalars().all()]
