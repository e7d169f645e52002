"""
Request and response shapes exchanged over HTTP.

Responses are plain dataclasses serialized with ``to_dict()`` into the
camelCase JSON the services have always spoken.  An optional related
collection left as ``None`` was not requested and is omitted from the
JSON entirely; an empty list means it was requested and has no members.
"""

from dataclasses import dataclass
from typing import Any


class RequestError(ValueError):
    """Raised when a request body is missing fields or has the wrong shape."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _require(payload: Any, fields: tuple[str, ...]) -> dict:
    """Check that ``payload`` is a JSON object carrying every field."""
    if not isinstance(payload, dict):
        raise RequestError(["Request body must be a JSON object."])
    missing = [name for name in fields if payload.get(name) is None]
    if missing:
        raise RequestError([f"'{name}' is required." for name in missing])
    return payload


def _as_int(payload: dict, name: str, errors: list[str]) -> int | None:
    """
    Return an integer field as submitted, collecting an error otherwise.

    Floats and numeric strings are rejected rather than converted, so
    the stored value is always exactly the one in the request.
    """
    value = payload[name]
    if isinstance(value, bool) or not isinstance(value, int):
        errors.append(f"'{name}' must be an integer.")
        return None
    return value


def _as_str(payload: dict, name: str, errors: list[str]) -> str | None:
    """Return a string field as submitted, collecting an error otherwise."""
    value = payload[name]
    if not isinstance(value, str):
        errors.append(f"'{name}' must be a string.")
        return None
    return value


# =========================================================================
# Requests
# =========================================================================


@dataclass
class OrganizationRequest:
    """Fields needed to create an organization."""

    name: str
    address: str | None = None


@dataclass
class DepartmentRequest:
    """Body of ``POST /api/department/``."""

    organization_id: int
    name: str

    @classmethod
    def from_json(cls, payload: Any) -> "DepartmentRequest":
        """
        Parse a decoded JSON body.

        Raises:
            RequestError: If a field is missing or has the wrong JSON type
                          (integers for ids and age, strings otherwise).
        """
        payload = _require(payload, ("organizationId", "name"))
        errors: list[str] = []
        organization_id = _as_int(payload, "organizationId", errors)
        name = _as_str(payload, "name", errors)
        if errors:
            raise RequestError(errors)
        return cls(organization_id=organization_id, name=name)


@dataclass
class EmployeeRequest:
    """Body of ``POST /api/employee``."""

    organization_id: int
    department_id: int
    name: str
    age: int
    position: str

    @classmethod
    def from_json(cls, payload: Any) -> "EmployeeRequest":
        """
        Parse a decoded JSON body.

        Raises:
            RequestError: If a field is missing or has the wrong JSON type
                          (integers for ids and age, strings otherwise).
        """
        payload = _require(
            payload, ("organizationId", "departmentId", "name", "age", "position")
        )
        errors: list[str] = []
        organization_id = _as_int(payload, "organizationId", errors)
        department_id = _as_int(payload, "departmentId", errors)
        name = _as_str(payload, "name", errors)
        age = _as_int(payload, "age", errors)
        position = _as_str(payload, "position", errors)
        if errors:
            raise RequestError(errors)
        return cls(
            organization_id=organization_id,
            department_id=department_id,
            name=name,
            age=age,
            position=position,
        )


@dataclass
class Notification:
    """Body of ``POST /api/notification``."""

    message: str
    sender: str

    @classmethod
    def from_json(cls, payload: Any) -> "Notification":
        payload = _require(payload, ("message", "sender"))
        errors: list[str] = []
        message = _as_str(payload, "message", errors)
        sender = _as_str(payload, "sender", errors)
        if errors:
            raise RequestError(errors)
        return cls(message=message, sender=sender)


# =========================================================================
# Responses
# =========================================================================


@dataclass
class EmployeeResponse:
    """External view of an employee."""

    id: int
    organization_id: int
    department_id: int
    name: str
    age: int
    position: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "organizationId": self.organization_id,
            "departmentId": self.department_id,
            "name": self.name,
            "age": self.age,
            "position": self.position,
        }


@dataclass
class DepartmentResponse:
    """External view of a department, optionally with its employees."""

    id: int
    organization_id: int
    name: str
    employees: list[EmployeeResponse] | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "organizationId": self.organization_id,
            "name": self.name,
        }
        if self.employees is not None:
            data["employees"] = [e.to_dict() for e in self.employees]
        return data


@dataclass
class OrganizationResponse:
    """
    External view of an organization.

    ``departments`` and ``employees`` are independent: either, both or
    neither may be populated.
    """

    id: int
    name: str
    address: str | None
    departments: list[DepartmentResponse] | None = None
    employees: list[EmployeeResponse] | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "address": self.address,
        }
        if self.departments is not None:
            data["departments"] = [d.to_dict() for d in self.departments]
        if self.employees is not None:
            data["employees"] = [e.to_dict() for e in self.employees]
        return data
