"""Employee models exchanged over HTTP and with the employee store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Largest id the employees table (64-bit INTEGER) can hold
MAX_EMPLOYEE_ID = 2**63 - 1


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Employee(_CamelModel):
    """A stored (or about to be stored) employee record.

    ``id`` is None until the store assigns one.
    """

    id: int | None = Field(default=None, le=MAX_EMPLOYEE_ID)
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class EmployeeUpdate(_CamelModel):
    """Patch applied by an update: None fields leave the stored value unchanged."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


class EmployeeList(BaseModel):
    """Seed fixture document: ``{"users": [...]}``."""

    users: list[Employee] = []
