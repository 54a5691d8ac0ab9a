from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from app.core.dependencies import get_employee_service
from app.models.employee import Employee
from app.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Employees", tags=["employees"])


@router.get("/{id}", response_model=Employee)
async def get_employee(
    id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        employee = await service.get_employee(id)
    except Exception as err:
        logger.exception("Failed to get employee %s", id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{id}' not found",
        )

    return employee


@router.get("", response_model=list[Employee])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        return await service.get_all_employees()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee: Employee,
    request: Request,
    response: Response,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    try:
        await service.create_employee(employee)
    except Exception as err:
        logger.exception("Failed to create employee %s", employee.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err

    response.headers["Location"] = str(request.url_for("get_employee", id=employee.id))
    return employee


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_employee(
    id: str,
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
) -> Response:
    if id != employee.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Path id '{id}' does not match body id '{employee.id}'",
        )

    try:
        await service.update_employee(employee)
    except Exception as err:
        logger.exception("Failed to update employee %s", id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee",
        ) from err

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    id: str,
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
) -> Response:
    try:
        await service.delete_employee(id)
    except Exception as err:
        logger.exception("Failed to delete employee %s", id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete employee",
        ) from err

    return Response(status_code=status.HTTP_204_NO_CONTENT)
