"""
Tests for DepartmentService.

Covers the create/fetch round trip, listing by organization with and
without employees, and the not-found result for a missing id.
"""

import pytest

from orgservices.errors import ErrorKind, NotFoundError
from orgservices.models.organization import Department, Employee
from orgservices.schemas import DepartmentRequest
from orgservices.services.department_service import DepartmentService


class TestDepartmentService:
    """DepartmentService against the test database."""

    @pytest.fixture(autouse=True)
    def _setup(self, department_repository, employee_repository):
        self.repository = department_repository
        self.employees = employee_repository
        self.service = DepartmentService(department_repository)

    def test_add_assigns_id_and_copies_fields(self):
        """A created department comes back with the submitted fields."""
        created = self.service.add(
            DepartmentRequest(organization_id=1, name="IT Department")
        )

        assert created.id is not None
        result = self.service.find_by_id(created.id)
        assert result.ok
        assert result.value.id == created.id
        assert result.value.name == "IT Department"
        assert result.value.organization_id == 1

    def test_add_does_not_require_existing_organization(self):
        """Parent ids are stored verbatim, even when no such parent exists."""
        created = self.service.add(DepartmentRequest(organization_id=424242, name="Ghost"))

        assert self.repository.get(created.id).organization_id == 424242

    def test_find_all_after_single_create(self):
        """One create, one listed department."""
        self.service.add(DepartmentRequest(organization_id=1, name="IT Department"))

        departments = self.service.find_all()

        assert len(departments) == 1
        assert departments[0].name == "IT Department"
        assert departments[0].organization_id == 1
        assert departments[0].id is not None

    def test_find_by_id_missing_returns_not_found(self):
        result = self.service.find_by_id(999999)

        assert not result.ok
        assert result.error is ErrorKind.NOT_FOUND
        assert result.value is None
        assert "999999" in result.message
        with pytest.raises(NotFoundError, match="not found"):
            result.unwrap()

    def test_find_by_id_leaves_employees_out(self):
        department = self.repository.save(Department(organization_id=1, name="Sales"))
        self.employees.save(
            Employee(
                organization_id=1,
                department_id=department.id,
                name="Jan",
                age=24,
                position="student",
            )
        )

        response = self.service.find_by_id(department.id).unwrap()

        assert response.employees is None
        assert "employees" not in response.to_dict()

    def test_find_by_organization_filters_by_parent(self):
        self.repository.save(Department(organization_id=1, name="IT Department"))
        self.repository.save(Department(organization_id=1, name="HR Department"))
        self.repository.save(Department(organization_id=2, name="Sales Department"))

        departments = self.service.find_by_organization(1)

        assert len(departments) == 2
        assert all(d.organization_id == 1 for d in departments)
        assert {d.name for d in departments} == {"IT Department", "HR Department"}
        assert all(d.employees is None for d in departments)

    def test_find_by_organization_unknown_parent_is_empty(self):
        self.repository.save(Department(organization_id=1, name="IT Department"))

        assert self.service.find_by_organization(77) == []

    def test_find_by_organization_with_employees(self):
        """Each department carries exactly its own employees."""
        engineering = self.repository.save(
            Department(organization_id=1, name="Engineering Department")
        )
        support = self.repository.save(
            Department(organization_id=1, name="Support Department")
        )
        for department_id, name in (
            (engineering.id, "Alice"),
            (engineering.id, "Charlie"),
            (support.id, "Diana"),
        ):
            self.employees.save(
                Employee(
                    organization_id=1,
                    department_id=department_id,
                    name=name,
                    age=30,
                    position="Engineer",
                )
            )

        departments = {
            d.name: d
            for d in self.service.find_by_organization(1, include_employees=True)
        }

        assert len(departments) == 2
        assert {e.name for e in departments["Engineering Department"].employees} == {
            "Alice",
            "Charlie",
        }
        assert [e.name for e in departments["Support Department"].employees] == [
            "Diana"
        ]

    def test_include_employees_on_empty_department_gives_empty_list(self):
        self.repository.save(Department(organization_id=3, name="Empty"))

        (department,) = self.service.find_by_organization(3, include_employees=True)

        assert department.employees == []
        assert department.to_dict()["employees"] == []
