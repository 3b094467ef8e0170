"""Domain errors raised by the employee store and service."""

from __future__ import annotations


class EmployeeError(Exception):
    """Base class for employee domain errors."""


class EmployeeAlreadyExistsError(EmployeeError):
    def __init__(self, email: str | None) -> None:
        super().__init__(f"Employee already exists with given email : {email}")
        self.email = email


class EmployeeNotFoundError(EmployeeError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee not found with id : {employee_id}")
        self.employee_id = employee_id


class EmptyResultError(EmployeeError):
    """A delete matched no row."""

    def __init__(self, employee_id: int) -> None:
        super().__init__(f"No employee entity with id {employee_id} exists")
        self.employee_id = employee_id
