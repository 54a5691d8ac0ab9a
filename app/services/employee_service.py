"""Employee service; delegates every call to the repository."""

from __future__ import annotations

from app.models.employee import Employee
from app.repositories.employee_repository import EmployeeRepository


class EmployeeService:
    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    @property
    def initialized(self) -> bool:
        return self.repository.initialized

    async def get_employee(self, employee_id: str) -> Employee | None:
        return await self.repository.get_employee(employee_id)

    async def get_all_employees(self) -> list[Employee]:
        return await self.repository.get_all_employees()

    async def create_employee(self, employee: Employee) -> None:
        await self.repository.create_employee(employee)

    async def update_employee(self, employee: Employee) -> None:
        await self.repository.update_employee(employee)

    async def delete_employee(self, employee_id: str) -> None:
        await self.repository.delete_employee(employee_id)


employee_repository = EmployeeRepository()
employee_service = EmployeeService(employee_repository)
