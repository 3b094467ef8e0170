"""Employee business rules on top of the employee store."""

from __future__ import annotations

import logging

from employee_api.core.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from employee_api.models.employee import Employee, EmployeeUpdate
from employee_api.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)

_MERGED_FIELDS = ("first_name", "last_name", "email")


class EmployeeService:
    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def create(self, employee: Employee) -> Employee:
        # Uniqueness is checked on id; a new record normally carries none.
        existing = await self.repository.find_by_id(employee.id)
        if existing is not None:
            raise EmployeeAlreadyExistsError(employee.email)

        saved = await self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    async def list_all(self) -> list[Employee]:
        return await self.repository.find_all()

    async def get_by_id(self, employee_id: int) -> Employee | None:
        return await self.repository.find_by_id(employee_id)

    async def update(self, employee_id: int, patch: EmployeeUpdate) -> Employee:
        existing = await self.repository.find_by_id(employee_id)
        if existing is None:
            raise EmployeeNotFoundError(employee_id)

        changes = {
            field: getattr(patch, field) for field in _MERGED_FIELDS if getattr(patch, field) is not None
        }
        merged = existing.model_copy(update=changes)

        saved = await self.repository.save(merged)
        logger.info("Updated employee %s (fields=%s)", employee_id, sorted(changes))
        return saved

    async def delete(self, employee_id: int) -> None:
        await self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
