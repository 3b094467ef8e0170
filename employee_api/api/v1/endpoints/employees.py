from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from employee_api.core.dependencies import get_employee_service
from employee_api.core.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from employee_api.models.employee import MAX_EMPLOYEE_ID, Employee, EmployeeUpdate
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def _lookup(service: EmployeeService, employee_id: int) -> Employee | None:
    try:
        return await service.get_by_id(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.create(employee)
    except EmployeeAlreadyExistsError as err:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(err)) from err
    except Exception as err:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err


@router.get("", response_model=list[Employee])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.list_all()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int = Path(le=MAX_EMPLOYEE_ID),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    employee = await _lookup(service, employee_id)
    if employee is None:
        return _not_found()
    return employee


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    patch: EmployeeUpdate,
    employee_id: int = Path(le=MAX_EMPLOYEE_ID),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    if await _lookup(service, employee_id) is None:
        return _not_found()

    try:
        return await service.update(employee_id, patch)
    except EmployeeNotFoundError:
        return _not_found()
    except Exception as err:
        logger.exception("Failed to update employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee",
        ) from err


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: int = Path(le=MAX_EMPLOYEE_ID),  # noqa: B008
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    if await _lookup(service, employee_id) is None:
        return _not_found()

    try:
        await service.delete(employee_id)
    except Exception as err:
        logger.exception("Failed to delete employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete employee",
        ) from err

    return Response(status_code=status.HTTP_200_OK)
