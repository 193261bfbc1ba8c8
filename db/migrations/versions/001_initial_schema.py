"""Initial schema: customers, locations, cars, rentals, maintenance.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ─── Customers ───────────────────────────────────────────────────────────

    op.create_table(
        "customers",
        sa.Column("customer_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("phone_number", sa.Text, nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.UniqueConstraint("email", name="uq_customer_email"),
    )

    # ─── Fleet ───────────────────────────────────────────────────────────────

    op.create_table(
        "locations",
        sa.Column("location_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("location_name", sa.Text, nullable=False),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("contact_number", sa.Text, nullable=True),
    )

    op.create_table(
        "cars",
        sa.Column("car_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("car_model", sa.Text, nullable=False),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("color", sa.Text, nullable=True),
        sa.Column("rental_rate", sa.Numeric(10, 2), nullable=False),
        sa.Column("availability", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column(
            "location_id",
            sa.Integer,
            sa.ForeignKey("locations.location_id"),
            nullable=True,
        ),
    )

    op.create_table(
        "maintenance_records",
        sa.Column("maintenance_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("car_id", sa.Integer, sa.ForeignKey("cars.car_id"), nullable=False),
        sa.Column("maintenance_date", sa.Date, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("cost", sa.Numeric(10, 2), nullable=True),
    )

    # ─── Rentals ─────────────────────────────────────────────────────────────

    op.create_table(
        "reservations",
        sa.Column("reservation_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "customer_id",
            sa.Integer,
            sa.ForeignKey("customers.customer_id"),
            nullable=False,
        ),
        sa.Column("car_id", sa.Integer, sa.ForeignKey("cars.car_id"), nullable=False),
        sa.Column("reservation_date", sa.Date, nullable=False),
        sa.Column("pickup_date", sa.Date, nullable=False),
        sa.Column("return_date", sa.Date, nullable=False),
    )

    op.create_table(
        "bookings",
        sa.Column("booking_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "customer_id",
            sa.Integer,
            sa.ForeignKey("customers.customer_id"),
            nullable=False,
        ),
        sa.Column("car_id", sa.Integer, sa.ForeignKey("cars.car_id"), nullable=False),
        sa.Column("rental_start_date", sa.Date, nullable=False),
        sa.Column("rental_end_date", sa.Date, nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
    )

    op.create_index("ix_reservations_customer_id", "reservations", ["customer_id"])
    op.create_index("ix_bookings_customer_id", "bookings", ["customer_id"])
    op.create_index("ix_cars_location_id", "cars", ["location_id"])
    op.create_index("ix_maintenance_records_car_id", "maintenance_records", ["car_id"])


def downgrade() -> None:
    op.drop_index("ix_maintenance_records_car_id", table_name="maintenance_records")
    op.drop_index("ix_cars_location_id", table_name="cars")
    op.drop_index("ix_bookings_customer_id", table_name="bookings")
    op.drop_index("ix_reservations_customer_id", table_name="reservations")
    op.drop_table("bookings")
    op.drop_table("reservations")
    op.drop_table("maintenance_records")
    op.drop_table("cars")
    op.drop_table("locations")
    op.drop_table("customers")
