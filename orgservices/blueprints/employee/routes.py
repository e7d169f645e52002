"""
Routes for the employee blueprint.

The collection route has no trailing slash (``/api/employee``).
"""

from flask import jsonify, request

from orgservices.blueprints.employee import bp
from orgservices.errors import error_body, error_response
from orgservices.extensions import db
from orgservices.repositories import EmployeeRepository
from orgservices.schemas import EmployeeRequest, RequestError
from orgservices.services.employee_service import EmployeeService


def _service() -> EmployeeService:
    return EmployeeService(EmployeeRepository(db.session))


@bp.route("", methods=["GET"])
def find_all():
    """Return every employee."""
    return jsonify([e.to_dict() for e in _service().find_all()]), 200


@bp.route("", methods=["POST"])
def add():
    """Create an employee from the JSON body."""
    try:
        employee_request = EmployeeRequest.from_json(request.get_json(silent=True))
    except RequestError as exc:
        return error_body("bad_request", "Invalid employee.", errors=exc.errors), 400

    _service().add(employee_request)
    return "", 201


@bp.route("/<int:employee_id>", methods=["GET"])
def find_by_id(employee_id):
    """Return one employee."""
    result = _service().find_by_id(employee_id)
    if not result.ok:
        return error_response(result)
    return result.value.to_dict(), 200


@bp.route("/department/<int:department_id>", methods=["GET"])
def find_by_department(department_id):
    """Return the employees of a department."""
    employees = _service().find_by_department(department_id)
    return jsonify([e.to_dict() for e in employees]), 200


@bp.route("/organization/<int:organization_id>", methods=["GET"])
def find_by_organization(organization_id):
    """Return the employees of an organization."""
    employees = _service().find_by_organization(organization_id)
    return jsonify([e.to_dict() for e in employees]), 200
