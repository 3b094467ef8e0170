"""SQL-backed employee store.

Rows of the ``employees`` table are mapped to :class:`Employee` models on the
way out, so callers never hold ORM instances. Lookups return ``None`` for
absence; every mutating call commits on its own.
"""

from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import String, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.core.database import Base
from employee_api.core.exceptions import EmptyResultError
from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRecord(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str | None] = mapped_column(String(255))
    last_name: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(255))


def _to_model(record: EmployeeRecord) -> Employee:
    return Employee(
        id=record.id,
        first_name=record.first_name,
        last_name=record.last_name,
        email=record.email,
    )


class EmployeeRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, employee: Employee) -> Employee:
        record = await self._stage(employee)
        await self.session.commit()
        return _to_model(record)

    async def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        records = [await self._stage(employee) for employee in employees]
        await self.session.commit()
        logger.debug("Saved %d employees", len(records))
        return [_to_model(record) for record in records]

    async def find_by_id(self, employee_id: int | None) -> Employee | None:
        if employee_id is None:
            return None
        record = await self.session.get(EmployeeRecord, employee_id)
        return _to_model(record) if record else None

    async def find_all(self) -> list[Employee]:
        result = await self.session.scalars(select(EmployeeRecord).order_by(EmployeeRecord.id))
        return [_to_model(record) for record in result]

    async def exists(self) -> bool:
        result = await self.session.scalars(select(EmployeeRecord.id).limit(1))
        return result.first() is not None

    async def find_by_email(self, email: str) -> Employee | None:
        result = await self.session.scalars(
            select(EmployeeRecord).where(EmployeeRecord.email == email).limit(1)
        )
        record = result.first()
        return _to_model(record) if record else None

    async def find_by_first_and_last_name(self, first_name: str, last_name: str) -> Employee | None:
        result = await self.session.scalars(
            select(EmployeeRecord)
            .where(EmployeeRecord.first_name == first_name, EmployeeRecord.last_name == last_name)
            .limit(1)
        )
        record = result.first()
        return _to_model(record) if record else None

    async def delete_by_id(self, employee_id: int) -> None:
        result = await self.session.execute(delete(EmployeeRecord).where(EmployeeRecord.id == employee_id))
        if result.rowcount == 0:
            await self.session.rollback()
            raise EmptyResultError(employee_id)
        await self.session.commit()

    async def delete_all(self) -> None:
        await self.session.execute(delete(EmployeeRecord))
        await self.session.commit()

    async def _stage(self, employee: Employee) -> EmployeeRecord:
        record = None
        if employee.id is not None:
            record = await self.session.get(EmployeeRecord, employee.id)

        if record is None:
            record = EmployeeRecord(id=employee.id)
            self.session.add(record)

        record.first_name = employee.first_name
        record.last_name = employee.last_name
        record.email = employee.email
        await self.session.flush()
        return record
