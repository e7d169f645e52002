"""
Repository package — the storage layer.

Each repository wraps one model and is constructed with an explicit
SQLAlchemy session.  Routes build them from ``db.session``; tests and
CLI commands may pass any session bound to the same engine::

    from orgservices.repositories import DepartmentRepository
    repository = DepartmentRepository(db.session)
"""

from orgservices.repositories.department_repository import (  # noqa: F401
    DepartmentRepository,
)
from orgservices.repositories.employee_repository import (  # noqa: F401
    EmployeeRepository,
)
from orgservices.repositories.organization_repository import (  # noqa: F401
    OrganizationRepository,
)
