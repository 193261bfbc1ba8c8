"""Alembic migration tests against a temporary SQLite file."""
from pathlib import Path

import pytest
from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config
from alembic.migration import MigrationContext
from sqlalchemy import create_engine, inspect

from db.models import Base

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "db" / "migrations"


@pytest.fixture
def alembic_config(tmp_path, monkeypatch):
    db_file = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("path_separator", "os")
    cfg.attributes["db_file"] = db_file
    return cfg


@pytest.fixture
def sync_engine(alembic_config):
    engine = create_engine(f"sqlite:///{alembic_config.attributes['db_file']}")
    yield engine
    engine.dispose()


def test_upgrade_head_matches_models(alembic_config, sync_engine):
    """The migrated schema and Base.metadata must not drift apart."""
    command.upgrade(alembic_config, "head")

    with sync_engine.connect() as conn:
        ctx = MigrationContext.configure(conn, opts={"compare_type": True})
        diff = compare_metadata(ctx, Base.metadata)

    assert diff == []


def test_upgrade_creates_foreign_key_indexes(alembic_config, sync_engine):
    command.upgrade(alembic_config, "head")

    inspector = inspect(sync_engine)
    expected = {
        "reservations": "ix_reservations_customer_id",
        "bookings": "ix_bookings_customer_id",
        "cars": "ix_cars_location_id",
        "maintenance_records": "ix_maintenance_records_car_id",
    }
    for table, index_name in expected.items():
        assert index_name in {ix["name"] for ix in inspector.get_indexes(table)}


def test_downgrade_base_drops_tables(alembic_config, sync_engine):
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "base")

    remaining = set(inspect(sync_engine).get_table_names()) - {"alembic_version"}
    assert remaining == set()
