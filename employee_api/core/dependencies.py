from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.database import database
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService


async def get_session() -> AsyncIterator[AsyncSession]:
    async for session in database.session():
        yield session


def get_employee_service(
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> EmployeeService:
    return EmployeeService(EmployeeRepository(session))
