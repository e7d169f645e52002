"""
Employee service — create employees and list them by parent.

Employees carry two parent ids (organization and department).  Both
are stored exactly as submitted; neither parent is checked for
existence before the insert.
"""

import logging

from orgservices.errors import Result
from orgservices.models.organization import Employee
from orgservices.repositories.employee_repository import EmployeeRepository
from orgservices.schemas import EmployeeRequest, EmployeeResponse

logger = logging.getLogger(__name__)


def to_employee_response(employee: Employee) -> EmployeeResponse:
    """Map a stored employee to its response shape."""
    return EmployeeResponse(
        id=employee.id,
        organization_id=employee.organization_id,
        department_id=employee.department_id,
        name=employee.name,
        age=employee.age,
        position=employee.position,
    )


class EmployeeService:
    """Employee operations over an ``EmployeeRepository``."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def add(self, request: EmployeeRequest) -> Employee:
        """
        Create an employee from a request.

        Args:
            request: Parsed request body; parent ids are copied verbatim.

        Returns:
            The stored Employee with its newly assigned id.
        """
        employee = Employee(
            organization_id=request.organization_id,
            department_id=request.department_id,
            name=request.name,
            age=request.age,
            position=request.position,
        )
        self.repository.save(employee)
        logger.info(
            "Created employee %d: %s (org=%d, dept=%d)",
            employee.id,
            employee.name,
            employee.organization_id,
            employee.department_id,
        )
        return employee

    def find_by_id(self, employee_id: int) -> Result[EmployeeResponse]:
        employee = self.repository.get(employee_id)
        if employee is None:
            logger.warning("Employee %d not found", employee_id)
            return Result.not_found(f"Employee {employee_id} not found.")
        return Result.success(to_employee_response(employee))

    def find_all(self) -> list[EmployeeResponse]:
        return [to_employee_response(e) for e in self.repository.find_all()]

    def find_by_department(self, department_id: int) -> list[EmployeeResponse]:
        """Return employees of a department; empty when none match."""
        return [
            to_employee_response(e)
            for e in self.repository.find_by_department_id(department_id)
        ]

    def find_by_organization(self, organization_id: int) -> list[EmployeeResponse]:
        """Return employees of an organization; empty when none match."""
        return [
            to_employee_response(e)
            for e in self.repository.find_by_organization_id(organization_id)
        ]
