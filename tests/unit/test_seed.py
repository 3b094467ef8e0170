"""Tests for fixture loading and the seed script."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from employee_api.core.config import Settings
from employee_api.core.database import Database
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.seed_loader import load_seed_data, read_employees
from scripts.seed import main, parse_args, seed

SAMPLE_DATA_FILE = Path(__file__).resolve().parents[2] / "sample-data" / "user.json"


def _write_fixture(path, users):
    path.write_text(json.dumps({"users": users}), encoding="utf-8")
    return path


def test_read_employees_sample_file():
    employees = read_employees(SAMPLE_DATA_FILE)

    assert len(employees) == 5
    assert employees[0].first_name == "Chamara"
    assert employees[0].last_name == "Wijesekara"
    assert employees[0].email == "chamara@example.com"
    assert all(e.id is None for e in employees)


def test_read_employees_accepts_partial_records(tmp_path):
    fixture = _write_fixture(tmp_path / "users.json", [{"email": "x@y.z"}, {}])

    employees = read_employees(fixture)

    assert len(employees) == 2
    assert employees[0].email == "x@y.z"
    assert employees[1].first_name is None


def test_read_employees_missing_users_key_is_empty(tmp_path):
    fixture = tmp_path / "users.json"
    fixture.write_text("{}", encoding="utf-8")

    assert read_employees(fixture) == []


def test_read_employees_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_employees(tmp_path / "missing.json")


def test_read_employees_malformed_raises(tmp_path):
    fixture = tmp_path / "users.json"
    fixture.write_text('{"users": "not-a-list"}', encoding="utf-8")

    with pytest.raises(ValidationError):
        read_employees(fixture)


@pytest.mark.anyio
async def test_load_seed_data_inserts_all(repository):
    saved = await load_seed_data(repository, SAMPLE_DATA_FILE)

    stored = await repository.find_all()
    assert len(saved) == 5
    assert stored == saved
    assert await repository.find_by_email("nimali.perera@example.com") is not None


def test_parse_args_defaults():
    args = parse_args([])

    assert args.file is None
    assert args.database_url is None
    assert args.dry_run is False
    assert args.verbose is False


def test_parse_args_custom_values():
    args = parse_args(["--file", "users.json", "--database-url", "sqlite+aiosqlite:///x.db", "--verbose"])

    assert args.file == "users.json"
    assert args.database_url == "sqlite+aiosqlite:///x.db"
    assert args.verbose is True


@pytest.mark.anyio
async def test_seed_dry_run_writes_nothing(tmp_path):
    db_file = tmp_path / "seed.db"
    args = parse_args(
        ["--file", str(SAMPLE_DATA_FILE), "--database-url", f"sqlite+aiosqlite:///{db_file}", "--dry-run"]
    )

    assert await seed(args) == 5
    assert not db_file.exists()


@pytest.mark.anyio
async def test_seed_loads_into_database(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"
    args = parse_args(["--file", str(SAMPLE_DATA_FILE), "--database-url", url])

    assert await seed(args) == 5

    database = Database()
    await database.initialize(Settings(DATABASE_URL=url))
    try:
        async with database.session_factory() as session:
            employees = await EmployeeRepository(session).find_all()
    finally:
        await database.close()

    assert [e.first_name for e in employees] == ["Chamara", "Nimali", "Kasun", "Dilani", "Ruwan"]


@pytest.mark.anyio
async def test_seed_without_fixture_returns_none(monkeypatch):
    monkeypatch.setenv("SEED_FILE", "")

    assert await seed(parse_args([])) is None


def test_main_without_fixture_exits_non_zero(monkeypatch):
    monkeypatch.setenv("SEED_FILE", "")
    monkeypatch.setattr(sys, "argv", ["seed.py"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
