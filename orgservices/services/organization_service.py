"""
Organization service — fetch an organization with optional children.

``find_by_id`` takes two independent inclusion flags.  Each flag
controls one collection on the response: when set, the collection is
queried and attached (possibly empty); when clear, it is never queried
and is omitted from the JSON.
"""

import logging

from orgservices.errors import Result
from orgservices.models.organization import Organization
from orgservices.repositories.organization_repository import OrganizationRepository
from orgservices.schemas import OrganizationRequest, OrganizationResponse
from orgservices.services.department_service import to_department_response
from orgservices.services.employee_service import to_employee_response

logger = logging.getLogger(__name__)


def to_organization_response(
    organization: Organization,
    include_departments: bool = False,
    include_employees: bool = False,
) -> OrganizationResponse:
    """Map a stored organization to its response shape."""
    response = OrganizationResponse(
        id=organization.id,
        name=organization.name,
        address=organization.address,
    )
    if include_departments:
        response.departments = [
            to_department_response(d) for d in organization.departments
        ]
    if include_employees:
        response.employees = [to_employee_response(e) for e in organization.employees]
    return response


class OrganizationService:
    """Organization operations over an ``OrganizationRepository``."""

    def __init__(self, repository: OrganizationRepository):
        self.repository = repository

    def add(self, request: OrganizationRequest) -> Organization:
        """
        Create an organization.

        Not exposed over HTTP; used by the ``seed-demo`` command and tests.
        """
        organization = Organization(name=request.name, address=request.address)
        self.repository.save(organization)
        logger.info("Created organization %d: %s", organization.id, organization.name)
        return organization

    def find_by_id(
        self,
        organization_id: int,
        include_departments: bool = False,
        include_employees: bool = False,
    ) -> Result[OrganizationResponse]:
        """
        Look up an organization and project it with the given flags.

        Args:
            organization_id:     Primary key to look up.
            include_departments: Attach the organization's departments.
            include_employees:   Attach the organization's employees.

        Returns:
            A successful Result with the response, or a NOT_FOUND Result.
        """
        organization = self.repository.get(organization_id)
        if organization is None:
            logger.warning("Organization %d not found", organization_id)
            return Result.not_found(f"Organization {organization_id} not found.")
        return Result.success(
            to_organization_response(
                organization,
                include_departments=include_departments,
                include_employees=include_employees,
            )
        )
