"""Unit tests for the explicit nested-loading helper, no database required."""
import pytest

from db.loading import Include, loader_options
from db.models import Customer, Location
from db.repositories.customers import BOOKING_SUMMARY, RESERVATIONS


def test_one_option_per_include():
    options = loader_options(Customer, [RESERVATIONS, BOOKING_SUMMARY])
    assert len(options) == 2


def test_no_includes_no_options():
    assert loader_options(Location, []) == []


def test_unknown_relationship_raises():
    with pytest.raises(ValueError, match="no relationship 'payments'"):
        loader_options(Customer, [Include("payments")])


def test_unknown_column_raises():
    with pytest.raises(ValueError, match="mileage"):
        loader_options(Location, [Include("cars", columns=("car_model", "mileage"))])


def test_include_is_hashable_and_comparable():
    assert Include("cars", ("color",)) == Include("cars", ("color",))
    assert len({Include("cars"), Include("cars")}) == 1
