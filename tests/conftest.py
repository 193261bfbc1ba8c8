"""Shared fixtures: an in-memory SQLite store built from the ORM metadata."""
from datetime import date
from decimal import Decimal

import pytest_asyncio

from db.connection import dispose_engine, get_db, init_engine
from db.models import (
    Base,
    Booking,
    Car,
    Customer,
    Location,
    MaintenanceRecord,
    Reservation,
)

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def database():
    engine = init_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await dispose_engine()


@pytest_asyncio.fixture
async def rental_data(database):
    """Two locations, three cars, one customer with a booking and a reservation."""
    async with get_db() as session:
        nairobi = Location(location_name="Nairobi CBD", address="Moi Avenue", contact_number="0700000001")
        nyeri = Location(location_name="Nyeri", address="Kimathi Way", contact_number="0700000002")
        empty = Location(location_name="Mombasa", address="Nkrumah Rd")
        session.add_all([nairobi, nyeri, empty])
        await session.flush()

        axio = Car(car_model="Toyota Axio", year=2018, color="White", rental_rate=Decimal("45.00"), availability=True, location_id=nairobi.location_id)
        demio = Car(car_model="Mazda Demio", year=2016, color="Blue", rental_rate=Decimal("30.00"), availability=False, location_id=nairobi.location_id)
        prado = Car(car_model="Toyota Prado", year=2020, color="Black", rental_rate=Decimal("120.00"), availability=True, location_id=nyeri.location_id)
        session.add_all([axio, demio, prado])
        await session.flush()

        session.add_all([
            MaintenanceRecord(car_id=axio.car_id, maintenance_date=date(2024, 3, 1), description="Oil change", cost=Decimal("25.00")),
            MaintenanceRecord(car_id=axio.car_id, maintenance_date=date(2024, 6, 12), description="Brake pads", cost=Decimal("80.00")),
        ])

        wanjiru = Customer(
            first_name="Grace",
            last_name="Wanjiru",
            email="grace@example.com",
            phone_number="0722000000",
            address="5 Kenyatta Ave",
        )
        session.add(wanjiru)
        await session.flush()

        session.add(Booking(
            customer_id=wanjiru.customer_id,
            car_id=prado.car_id,
            rental_start_date=date(2024, 7, 1),
            rental_end_date=date(2024, 7, 5),
            total_amount=Decimal("480.00"),
        ))
        session.add(Reservation(
            customer_id=wanjiru.customer_id,
            car_id=axio.car_id,
            reservation_date=date(2024, 8, 1),
            pickup_date=date(2024, 8, 10),
            return_date=date(2024, 8, 12),
        ))

    return {
        "customer_id": wanjiru.customer_id,
        "axio_id": axio.car_id,
        "prado_id": prado.car_id,
        "demio_id": demio.car_id,
    }
