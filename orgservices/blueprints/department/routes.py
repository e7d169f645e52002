"""
Routes for the department blueprint.

Collection routes keep their trailing slash (``/api/department/``).
"""

from flask import jsonify, request

from orgservices.blueprints.department import bp
from orgservices.errors import error_body, error_response
from orgservices.extensions import db
from orgservices.repositories import DepartmentRepository
from orgservices.schemas import DepartmentRequest, RequestError
from orgservices.services.department_service import DepartmentService


def _service() -> DepartmentService:
    return DepartmentService(DepartmentRepository(db.session))


@bp.route("/", methods=["POST"])
def add():
    """Create a department from ``{organizationId, name}``."""
    try:
        department_request = DepartmentRequest.from_json(request.get_json(silent=True))
    except RequestError as exc:
        return error_body("bad_request", "Invalid department.", errors=exc.errors), 400

    _service().add(department_request)
    return "", 201


@bp.route("/<int:department_id>", methods=["GET"])
def find_by_id(department_id):
    """Return one department."""
    result = _service().find_by_id(department_id)
    if not result.ok:
        return error_response(result)
    return result.value.to_dict(), 200


@bp.route("/", methods=["GET"])
def find_all():
    """Return every department."""
    return jsonify([d.to_dict() for d in _service().find_all()]), 200


@bp.route("/organization/<int:organization_id>", methods=["GET"])
def find_by_organization(organization_id):
    """Return the departments of an organization."""
    departments = _service().find_by_organization(organization_id)
    return jsonify([d.to_dict() for d in departments]), 200


@bp.route("/organization/<int:organization_id>/with-employees", methods=["GET"])
def find_by_organization_with_employees(organization_id):
    """Return the departments of an organization, each with its employees."""
    departments = _service().find_by_organization(
        organization_id, include_employees=True
    )
    return jsonify([d.to_dict() for d in departments]), 200
