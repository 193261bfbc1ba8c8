"""Car rental database command line.

One sub-command per repository operation. Results are printed as JSON.

Usage:
  # Create the tables on a fresh SQLite database (PostgreSQL: alembic upgrade head)
  python rental.py init-db

  # Customers
  python rental.py list-customers
  python rental.py get-customer --id 4
  python rental.py customer-bookings --id 4
  python rental.py insert-customer --first-name Brian --last-name Kemboi \
      --email kemboi@gmail.com --phone 0712345678 --address "10 River Rd"
  python rental.py update-customer --email kemboi@gmail.com --address "10 Dekut Nyeri"
  python rental.py delete-customer --id 10

  # Fleet
  python rental.py locations
  python rental.py cars-maintenance
"""
import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

import db.repositories.cars as car_repo
import db.repositories.customers as customer_repo
import db.repositories.locations as location_repo
from db.connection import dispose_engine, get_db, get_engine, init_engine
from db.errors import describe
from db.models import Base
from schemas import CustomerCreate, CustomerPatch, CustomerRecord

logger = logging.getLogger(__name__)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def _dump(models) -> list[dict]:
    return [m.model_dump(mode="json") for m in models]


def _customer_rows(customers) -> list[dict]:
    return _dump(CustomerRecord.model_validate(c) for c in customers)


async def cmd_init_db(args: argparse.Namespace) -> int:
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("Tables created")
    return 0


async def cmd_list_customers(args: argparse.Namespace) -> int:
    async with get_db() as session:
        customers = await customer_repo.list_all(session)
    if not customers:
        print("No customers found")
        return 0
    _print_json(_customer_rows(customers))
    return 0


async def cmd_get_customer(args: argparse.Namespace) -> int:
    async with get_db() as session:
        customer = await customer_repo.get_by_id(session, args.id)
    if customer is None:
        print("Customer not found")
        return 0
    _print_json(_customer_rows([customer])[0])
    return 0


async def cmd_customer_reservations(args: argparse.Namespace) -> int:
    async with get_db() as session:
        customer = await customer_repo.get_with_reservations(session, args.id)
    if customer is None:
        print("Customer with reservations not found")
        return 0
    _print_json(customer.model_dump(mode="json"))
    return 0


async def cmd_customer_bookings(args: argparse.Namespace) -> int:
    async with get_db() as session:
        customer = await customer_repo.get_with_bookings(session, args.id)
    if customer is None:
        print("Customer with bookings not found")
        return 0
    _print_json(customer.model_dump(mode="json"))
    return 0


async def cmd_customer_details(args: argparse.Namespace) -> int:
    async with get_db() as session:
        details = await customer_repo.get_contact_details(session, args.id)
    if not details:
        print("Customer with selected details not found")
        return 0
    _print_json(details[0].model_dump(mode="json"))
    return 0


async def cmd_locations(args: argparse.Namespace) -> int:
    async with get_db() as session:
        locations = await location_repo.get_with_cars(session)
    if not locations:
        print("No locations with cars found")
        return 0
    _print_json(_dump(locations))
    return 0


async def cmd_cars_maintenance(args: argparse.Namespace) -> int:
    async with get_db() as session:
        cars = await car_repo.get_with_maintenance(session)
    if not cars:
        print("No cars with maintenance records found")
        return 0
    _print_json(_dump(cars))
    return 0


async def cmd_insert_customer(args: argparse.Namespace) -> int:
    data = CustomerCreate(
        first_name=args.first_name,
        last_name=args.last_name,
        email=args.email,
        phone_number=args.phone,
        address=args.address,
    )
    async with get_db() as session:
        inserted = await customer_repo.insert_customer(session, data)
    print("New customer inserted successfully:")
    _print_json(_customer_rows(inserted)[0])
    return 0


async def cmd_update_customer(args: argparse.Namespace) -> int:
    fields = {
        "first_name": args.first_name,
        "last_name": args.last_name,
        "email": args.new_email,
        "phone_number": args.phone,
        "address": args.address,
    }
    patch = CustomerPatch(**{k: v for k, v in fields.items() if v is not None})
    async with get_db() as session:
        updated = await customer_repo.update_customer(session, args.email, patch)
    if not updated:
        print(f"No customer with email {args.email}")
        return 0
    print("Customer updated successfully:")
    _print_json(_customer_rows(updated)[0])
    return 0


async def cmd_delete_customer(args: argparse.Namespace) -> int:
    async with get_db() as session:
        deleted = await customer_repo.delete_customer(session, args.id)
    if not deleted:
        print("Customer not found")
        return 0
    print("Customer deleted successfully:")
    _print_json(_customer_rows(deleted)[0])
    return 0


COMMANDS = {
    "init-db": cmd_init_db,
    "list-customers": cmd_list_customers,
    "get-customer": cmd_get_customer,
    "customer-reservations": cmd_customer_reservations,
    "customer-bookings": cmd_customer_bookings,
    "customer-details": cmd_customer_details,
    "locations": cmd_locations,
    "cars-maintenance": cmd_cars_maintenance,
    "insert-customer": cmd_insert_customer,
    "update-customer": cmd_update_customer,
    "delete-customer": cmd_delete_customer,
}


async def run_command(args: argparse.Namespace) -> int:
    """Run one sub-command and release the connection pool afterwards."""
    init_engine()
    try:
        return await COMMANDS[args.command](args)
    finally:
        await dispose_engine()


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Car rental database operations")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("init-db", help="Create all tables (development databases)")
    sub.add_parser("list-customers", help="List every customer")

    for name, help_text in (
        ("get-customer", "Fetch one customer by id"),
        ("customer-reservations", "Fetch a customer with its reservations"),
        ("customer-bookings", "Fetch a customer with its bookings"),
        ("customer-details", "Fetch a customer's name, email and phone"),
        ("delete-customer", "Delete a customer by id"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--id", type=int, required=True, help="Customer id")

    sub.add_parser("locations", help="List locations with their cars")
    sub.add_parser("cars-maintenance", help="List cars with their maintenance records")

    insert = sub.add_parser("insert-customer", help="Insert a new customer")
    insert.add_argument("--first-name", required=True)
    insert.add_argument("--last-name", required=True)
    insert.add_argument("--email", required=True)
    insert.add_argument("--phone", default=None)
    insert.add_argument("--address", default=None)

    update = sub.add_parser("update-customer", help="Update the customer with this email")
    update.add_argument("--email", required=True, help="Email of the customer to update")
    update.add_argument("--first-name")
    update.add_argument("--last-name")
    update.add_argument("--new-email", help="Replace the customer's email")
    update.add_argument("--phone")
    update.add_argument("--address")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s %(message)s",
    )
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return asyncio.run(run_command(args))
    except SQLAlchemyError as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"Error: {describe(exc)}: {getattr(exc, 'orig', None) or exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Error: invalid input: {exc}", file=sys.stderr)
        return 1
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
