"""Query helpers for ``Department`` records."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from orgservices.models.organization import Department


class DepartmentRepository:
    """Persistence helpers for departments."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, department_id: int) -> Department | None:
        """Return a department by primary key, or None if not found."""
        return self._session.get(Department, department_id)

    def find_all(self) -> list[Department]:
        stmt = select(Department).order_by(Department.id)
        return list(self._session.scalars(stmt).all())

    def find_by_organization_id(self, organization_id: int) -> list[Department]:
        """Return the departments whose ``organization_id`` matches, by id."""
        stmt = (
            select(Department)
            .where(Department.organization_id == organization_id)
            .order_by(Department.id)
        )
        return list(self._session.scalars(stmt).all())

    def save(self, department: Department) -> Department:
        """Insert a new department and return it with its assigned id."""
        self._session.add(department)
        self._session.commit()
        return department

    def delete_all(self) -> None:
        """Remove every department.  Test teardown only."""
        self._session.execute(delete(Department))
        self._session.commit()
