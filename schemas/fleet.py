"""Location and car read projections."""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CarSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    car_model: str
    color: Optional[str] = None
    rental_rate: Decimal
    availability: bool


class LocationWithCars(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    location_id: int
    location_name: str
    address: Optional[str] = None
    contact_number: Optional[str] = None
    cars: List[CarSummary] = Field(default_factory=list)


class MaintenanceSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    description: Optional[str] = None
    maintenance_date: date
    cost: Optional[Decimal] = None


class CarWithMaintenance(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    car_id: int
    car_model: str
    year: Optional[int] = None
    color: Optional[str] = None
    rental_rate: Decimal
    availability: bool
    location_id: Optional[int] = None
    maintenance_records: List[MaintenanceSummary] = Field(default_factory=list)
