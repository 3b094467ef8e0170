"""One-shot import of employee fixtures into the store."""

from __future__ import annotations

import logging
from pathlib import Path

from employee_api.models.employee import Employee, EmployeeList
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


def read_employees(path: str | Path) -> list[Employee]:
    """Parse a ``{"users": [...]}`` fixture file into employee models.

    Raises ``FileNotFoundError`` for a missing file and pydantic's
    ``ValidationError`` for a malformed one.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return EmployeeList.model_validate_json(raw).users


async def load_seed_data(repository: EmployeeRepository, path: str | Path) -> list[Employee]:
    employees = read_employees(path)
    saved = await repository.save_all(employees)
    logger.info("Loaded %d employees from %s", len(saved), path)
    return saved
