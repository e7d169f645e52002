"""Query helpers for ``Organization`` records."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from orgservices.models.organization import Organization


class OrganizationRepository:
    """Persistence helpers for organizations."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, organization_id: int) -> Organization | None:
        """Return an organization by primary key, or None if not found."""
        return self._session.get(Organization, organization_id)

    def find_all(self) -> list[Organization]:
        stmt = select(Organization).order_by(Organization.id)
        return list(self._session.scalars(stmt).all())

    def save(self, organization: Organization) -> Organization:
        """Insert a new organization and return it with its assigned id."""
        self._session.add(organization)
        self._session.commit()
        return organization

    def delete_all(self) -> None:
        """Remove every organization.  Test teardown only."""
        self._session.execute(delete(Organization))
        self._session.commit()
