"""Query helpers for ``Employee`` records."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from orgservices.models.organization import Employee


class EmployeeRepository:
    """Persistence helpers for employees."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, employee_id: int) -> Employee | None:
        """Return an employee by primary key, or None if not found."""
        return self._session.get(Employee, employee_id)

    def find_all(self) -> list[Employee]:
        stmt = select(Employee).order_by(Employee.id)
        return list(self._session.scalars(stmt).all())

    def find_by_department_id(self, department_id: int) -> list[Employee]:
        stmt = (
            select(Employee)
            .where(Employee.department_id == department_id)
            .order_by(Employee.id)
        )
        return list(self._session.scalars(stmt).all())

    def find_by_organization_id(self, organization_id: int) -> list[Employee]:
        stmt = (
            select(Employee)
            .where(Employee.organization_id == organization_id)
            .order_by(Employee.id)
        )
        return list(self._session.scalars(stmt).all())

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee and return it with its assigned id."""
        self._session.add(employee)
        self._session.commit()
        return employee

    def delete_all(self) -> None:
        """Remove every employee.  Test teardown only."""
        self._session.execute(delete(Employee))
        self._session.commit()
