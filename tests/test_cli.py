"""End-to-end tests for the rental command line against a temporary SQLite file."""
import json

import pytest

import rental


@pytest.fixture
def sqlite_url(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'rental.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    assert rental.main(["init-db"]) == 0
    return url


def _json_after_header(out: str) -> dict:
    return json.loads(out[out.index("{"):])


def test_no_command_prints_help(capsys):
    assert rental.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_missing_database_url_exits_nonzero(monkeypatch, capsys):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert rental.main(["list-customers"]) == 1
    assert "DATABASE_URL" in capsys.readouterr().err


def test_unsupported_driver_exits_nonzero(monkeypatch, capsys):
    monkeypatch.setenv("DATABASE_URL", "mysql://user:pw@localhost/rental")
    assert rental.main(["list-customers"]) == 1
    assert "mysql" in capsys.readouterr().err


def test_unreachable_database_exits_nonzero(tmp_path, monkeypatch, capsys):
    missing = tmp_path / "missing" / "dir" / "rental.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{missing}")

    assert rental.main(["list-customers"]) == 1
    assert "database unreachable" in capsys.readouterr().err


def test_customer_lifecycle(sqlite_url, capsys):
    capsys.readouterr()

    assert rental.main([
        "insert-customer",
        "--first-name", "Brian",
        "--last-name", "Kemboi",
        "--email", "kemboi@gmail.com",
        "--phone", "0712345678",
        "--address", "10 River Rd",
    ]) == 0
    inserted = _json_after_header(capsys.readouterr().out)
    customer_id = inserted["customer_id"]
    assert inserted["address"] == "10 River Rd"

    assert rental.main([
        "update-customer", "--email", "kemboi@gmail.com", "--address", "10 Dekut Nyeri",
    ]) == 0
    updated = _json_after_header(capsys.readouterr().out)
    assert updated["address"] == "10 Dekut Nyeri"
    assert updated["first_name"] == "Brian"

    assert rental.main(["customer-details", "--id", str(customer_id)]) == 0
    details = json.loads(capsys.readouterr().out)
    assert set(details) == {"first_name", "last_name", "email", "phone_number"}

    assert rental.main(["delete-customer", "--id", str(customer_id)]) == 0
    assert "deleted successfully" in capsys.readouterr().out

    assert rental.main(["get-customer", "--id", str(customer_id)]) == 0
    assert "Customer not found" in capsys.readouterr().out


def test_duplicate_insert_exits_nonzero(sqlite_url, capsys):
    args = [
        "insert-customer",
        "--first-name", "Brian",
        "--last-name", "Kemboi",
        "--email", "kemboi@gmail.com",
    ]
    assert rental.main(args) == 0
    capsys.readouterr()

    assert rental.main(args) == 1
    assert "constraint violation" in capsys.readouterr().err


def test_empty_listings(sqlite_url, capsys):
    capsys.readouterr()
    assert rental.main(["list-customers"]) == 0
    assert rental.main(["locations"]) == 0
    assert rental.main(["cars-maintenance"]) == 0
    out = capsys.readouterr().out
    assert "No customers found" in out
    assert "No locations with cars found" in out
    assert "No cars with maintenance records found" in out
