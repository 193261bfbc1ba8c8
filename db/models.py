"""SQLAlchemy 2.0 ORM models for the car rental database.

Covers 6 tables:
  - customers, reservations, bookings
  - locations, cars, maintenance_records

Foreign keys declare no ON DELETE action: removing a parent row that still
has children is rejected by the store.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
    true,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


# ---------------------------------------------------------------------------
# Shared base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


# ===========================================================================
# Customers and their rentals
# ===========================================================================


class Customer(Base):
    """customers: people who reserve and book cars."""

    __tablename__ = "customers"
    __table_args__ = (UniqueConstraint("email", name="uq_customer_email"),)

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="customer"
    )
    bookings: Mapped[list["Booking"]] = relationship(
        "Booking", back_populates="customer"
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.customer_id} email={self.email!r}>"


class Reservation(Base):
    """reservations: a hold on a car for a future pickup."""

    __tablename__ = "reservations"

    reservation_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.customer_id"), nullable=False, index=True
    )
    car_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cars.car_id"), nullable=False
    )
    reservation_date: Mapped[date] = mapped_column(Date, nullable=False)
    pickup_date: Mapped[date] = mapped_column(Date, nullable=False)
    return_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    customer: Mapped["Customer"] = relationship("Customer", back_populates="reservations")
    car: Mapped["Car"] = relationship("Car", back_populates="reservations")


class Booking(Base):
    """bookings: a confirmed rental with its billed amount."""

    __tablename__ = "bookings"

    booking_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.customer_id"), nullable=False, index=True
    )
    car_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cars.car_id"), nullable=False
    )
    rental_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    rental_end_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    # Relationships
    customer: Mapped["Customer"] = relationship("Customer", back_populates="bookings")
    car: Mapped["Car"] = relationship("Car", back_populates="bookings")


# ===========================================================================
# Fleet
# ===========================================================================


class Location(Base):
    """locations: branches where cars are picked up and returned."""

    __tablename__ = "locations"

    location_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    location_name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contact_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationship
    cars: Mapped[list["Car"]] = relationship("Car", back_populates="location")


class Car(Base):
    """cars: the rentable fleet, each stationed at one location."""

    __tablename__ = "cars"

    car_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_model: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    color: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    rental_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, server_default=true(), nullable=False
    )
    location_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("locations.location_id"), nullable=True, index=True
    )

    # Relationships
    location: Mapped[Optional["Location"]] = relationship("Location", back_populates="cars")
    maintenance_records: Mapped[list["MaintenanceRecord"]] = relationship(
        "MaintenanceRecord", back_populates="car"
    )
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="car")
    reservations: Mapped[list["Reservation"]] = relationship(
        "Reservation", back_populates="car"
    )


class MaintenanceRecord(Base):
    """maintenance_records: service history for one car."""

    __tablename__ = "maintenance_records"

    maintenance_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cars.car_id"), nullable=False, index=True
    )
    maintenance_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cost: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    # Relationship
    car: Mapped["Car"] = relationship("Car", back_populates="maintenance_records")
