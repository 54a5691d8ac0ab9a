from __future__ import annotations

from fastapi import HTTPException, status

from app.services.employee_service import EmployeeService, employee_service


async def get_employee_service() -> EmployeeService:
    if not employee_service.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee store not configured",
        )
    return employee_service
