"""
Department service — create departments and list them by organization.

Listing by organization can include each department's employees.  The
employee collection is only loaded when ``include_employees`` is set;
otherwise the response leaves it out entirely.
"""

import logging

from orgservices.errors import Result
from orgservices.models.organization import Department
from orgservices.repositories.department_repository import DepartmentRepository
from orgservices.schemas import DepartmentRequest, DepartmentResponse
from orgservices.services.employee_service import to_employee_response

logger = logging.getLogger(__name__)


def to_department_response(
    department: Department, include_employees: bool = False
) -> DepartmentResponse:
    """
    Map a stored department to its response shape.

    Args:
        department:        The stored department.
        include_employees: If True, query and attach the department's
                           employees (ordered by id).
    """
    response = DepartmentResponse(
        id=department.id,
        organization_id=department.organization_id,
        name=department.name,
    )
    if include_employees:
        response.employees = [to_employee_response(e) for e in department.employees]
    return response


class DepartmentService:
    """Department operations over a ``DepartmentRepository``."""

    def __init__(self, repository: DepartmentRepository):
        self.repository = repository

    def add(self, request: DepartmentRequest) -> Department:
        """
        Create a department from a request.

        The organization id is stored as given; it is not checked
        against the organization table.

        Returns:
            The stored Department with its newly assigned id.
        """
        department = Department(
            organization_id=request.organization_id,
            name=request.name,
        )
        self.repository.save(department)
        logger.info(
            "Created department %d: %s (org=%d)",
            department.id,
            department.name,
            department.organization_id,
        )
        return department

    def find_by_id(self, department_id: int) -> Result[DepartmentResponse]:
        department = self.repository.get(department_id)
        if department is None:
            logger.warning("Department %d not found", department_id)
            return Result.not_found(f"Department {department_id} not found.")
        return Result.success(to_department_response(department))

    def find_all(self) -> list[DepartmentResponse]:
        return [to_department_response(d) for d in self.repository.find_all()]

    def find_by_organization(
        self, organization_id: int, include_employees: bool = False
    ) -> list[DepartmentResponse]:
        """
        Return the departments of an organization.

        Args:
            organization_id:   Parent organization id.
            include_employees: Attach each department's employees.

        Returns:
            Departments ordered by id; empty when none match.
        """
        departments = self.repository.find_by_organization_id(organization_id)
        return [to_department_response(d, include_employees) for d in departments]
