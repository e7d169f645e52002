"""
Routes for the organization blueprint.

The four GET routes differ only in which inclusion flags they pass to
``OrganizationService.find_by_id``.
"""

from orgservices.blueprints.organization import bp
from orgservices.errors import error_response
from orgservices.extensions import db
from orgservices.repositories import OrganizationRepository
from orgservices.services.organization_service import OrganizationService


def _service() -> OrganizationService:
    return OrganizationService(OrganizationRepository(db.session))


def _respond(organization_id: int, include_departments: bool, include_employees: bool):
    result = _service().find_by_id(
        organization_id,
        include_departments=include_departments,
        include_employees=include_employees,
    )
    if not result.ok:
        return error_response(result)
    return result.value.to_dict(), 200


@bp.route("/<int:organization_id>", methods=["GET"])
def find_by_id(organization_id):
    """Return the organization's own fields."""
    return _respond(organization_id, False, False)


@bp.route("/<int:organization_id>/with-departments", methods=["GET"])
def find_by_id_with_departments(organization_id):
    """Return the organization with its departments."""
    return _respond(organization_id, True, False)


@bp.route("/<int:organization_id>/with-employees", methods=["GET"])
def find_by_id_with_employees(organization_id):
    """Return the organization with its employees."""
    return _respond(organization_id, False, True)


@bp.route("/<int:organization_id>/with-departments-and-employees", methods=["GET"])
def find_by_id_with_departments_and_employees(organization_id):
    """Return the organization with both its departments and employees."""
    return _respond(organization_id, True, True)
