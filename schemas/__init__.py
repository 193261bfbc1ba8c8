from .customer import (
    CustomerCreate,
    CustomerPatch,
    CustomerRecord,
    CustomerContact,
    ReservationRecord,
    BookingSummary,
    CustomerWithReservations,
    CustomerWithBookings,
)
from .fleet import (
    CarSummary,
    LocationWithCars,
    MaintenanceSummary,
    CarWithMaintenance,
)

__all__ = [
    "CustomerCreate", "CustomerPatch", "CustomerRecord", "CustomerContact",
    "ReservationRecord", "BookingSummary",
    "CustomerWithReservations", "CustomerWithBookings",
    "CarSummary", "LocationWithCars", "MaintenanceSummary", "CarWithMaintenance",
]
