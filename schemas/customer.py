"""Customer input models and read projections."""
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    """Every required customer field; the id is assigned by the store."""

    model_config = ConfigDict(extra="forbid")

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    address: Optional[str] = None


class CustomerPatch(BaseModel):
    """Partial update. Only fields explicitly set are written.

    ``CustomerPatch(address=None)`` clears the address, while
    ``CustomerPatch()`` leaves every column alone.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None

    def to_values(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class CustomerRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: int
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    address: Optional[str] = None


class CustomerContact(BaseModel):
    """Column projection used by the contact details lookup."""

    model_config = ConfigDict(from_attributes=True)

    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None


class ReservationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    reservation_id: int
    customer_id: int
    car_id: int
    reservation_date: date
    pickup_date: date
    return_date: date


class BookingSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    car_id: int
    rental_start_date: date
    rental_end_date: date
    total_amount: Decimal


class CustomerWithReservations(CustomerRecord):
    reservations: List[ReservationRecord] = Field(default_factory=list)


class CustomerWithBookings(CustomerRecord):
    bookings: List[BookingSummary] = Field(default_factory=list)
