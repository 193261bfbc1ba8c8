"""Customer repository: keyed reads, projections and single-row writes."""
import logging
from typing import Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from db.loading import Include, loader_options
from db.models import Customer
from schemas.customer import (
    CustomerContact,
    CustomerCreate,
    CustomerPatch,
    CustomerWithBookings,
    CustomerWithReservations,
)

logger = logging.getLogger(__name__)

RESERVATIONS = Include("reservations")
BOOKING_SUMMARY = Include(
    "bookings",
    columns=("car_id", "rental_start_date", "rental_end_date", "total_amount"),
)


async def list_all(session: AsyncSession) -> list[Customer]:
    """Return every customer in store order."""
    result = await session.execute(select(Customer))
    return list(result.scalars().all())


async def get_by_id(session: AsyncSession, customer_id: int) -> Optional[Customer]:
    """Return the Customer with this id, or None."""
    return await find_by_id(session, customer_id)


async def find_by_id(
    session: AsyncSession,
    customer_id: int,
    include: Sequence[Include] = (),
) -> Optional[Customer]:
    """Return the Customer with this id and the requested collections loaded."""
    result = await session.execute(
        select(Customer)
        .where(Customer.customer_id == customer_id)
        .options(*loader_options(Customer, include))
    )
    return result.scalar_one_or_none()


async def get_with_reservations(
    session: AsyncSession, customer_id: int
) -> Optional[CustomerWithReservations]:
    """Return the customer with all of its reservations, or None."""
    customer = await find_by_id(session, customer_id, include=[RESERVATIONS])
    if customer is None:
        return None
    return CustomerWithReservations.model_validate(customer)


async def get_with_bookings(
    session: AsyncSession, customer_id: int
) -> Optional[CustomerWithBookings]:
    """Return the customer with its bookings, or None.

    Bookings only carry car_id, rental_start_date, rental_end_date and
    total_amount; no other booking column is read from the store.
    """
    customer = await find_by_id(session, customer_id, include=[BOOKING_SUMMARY])
    if customer is None:
        return None
    return CustomerWithBookings.model_validate(customer)


async def get_contact_details(
    session: AsyncSession, customer_id: int
) -> list[CustomerContact]:
    """Return name, email and phone for this customer (0 or 1 rows)."""
    result = await session.execute(
        select(
            Customer.first_name,
            Customer.last_name,
            Customer.email,
            Customer.phone_number,
        ).where(Customer.customer_id == customer_id)
    )
    return [CustomerContact.model_validate(row._asdict()) for row in result.all()]


async def insert_customer(session: AsyncSession, data: CustomerCreate) -> list[Customer]:
    """Insert one customer and return it with its store-assigned id.

    Raises IntegrityError (ConstraintViolation) on a duplicate email or a
    missing required column.
    """
    result = await session.execute(
        insert(Customer).values(**data.model_dump()).returning(Customer),
        execution_options={"populate_existing": True},
    )
    inserted = list(result.scalars().all())
    await session.flush()
    for customer in inserted:
        logger.info("Inserted customer customer_id=%s", customer.customer_id)
    return inserted


async def update_customer(
    session: AsyncSession, email: str, patch: CustomerPatch
) -> list[Customer]:
    """Apply the fields set on ``patch`` to the customer with this email.

    Returns the updated rows (empty when no customer has this email). An
    empty patch writes nothing and returns the matching rows as they are.
    """
    values = patch.to_values()
    if not values:
        result = await session.execute(select(Customer).where(Customer.email == email))
        return list(result.scalars().all())

    result = await session.execute(
        update(Customer)
        .where(Customer.email == email)
        .values(**values)
        .returning(Customer),
        execution_options={"populate_existing": True},
    )
    updated = list(result.scalars().all())
    await session.flush()
    logger.info(
        "Updated %d customer(s) for email=%s fields=%s",
        len(updated), email, sorted(values),
    )
    return updated


async def delete_customer(session: AsyncSession, customer_id: int) -> list[Customer]:
    """Delete the customer with this id and return the removed row.

    Returns an empty list when nothing matched. Dependent bookings and
    reservations are left to the store's foreign keys, which reject the
    delete with IntegrityError.
    """
    result = await session.execute(
        delete(Customer)
        .where(Customer.customer_id == customer_id)
        .returning(Customer)
    )
    deleted = list(result.scalars().all())
    await session.flush()
    if deleted:
        logger.info("Deleted customer customer_id=%s", customer_id)
    return deleted
