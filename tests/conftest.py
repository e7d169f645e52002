"""
Pytest configuration and shared fixtures.

Provides a test application, database session, and test client that
all test modules can use. Uses the ``testing`` configuration, which
points at an in-memory SQLite database unless ``TEST_DATABASE_URL``
says otherwise.
"""

import pytest

from orgservices import create_app
from orgservices.extensions import db as _db
from orgservices.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    OrganizationRepository,
)


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    The app is created once per test session, and the schema is
    created from the models inside a session-wide application context.
    """
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def database(app):  # pylint: disable=redefined-outer-name
    """Provide the SQLAlchemy database instance."""
    yield _db


@pytest.fixture(scope="function")
def db_session(database):  # pylint: disable=redefined-outer-name
    """Provide the active SQLAlchemy session for direct seeding."""
    yield database.session
    database.session.rollback()


@pytest.fixture(autouse=True)
def _empty_tables(database):  # pylint: disable=redefined-outer-name
    """Start every test with empty tables."""
    EmployeeRepository(database.session).delete_all()
    DepartmentRepository(database.session).delete_all()
    OrganizationRepository(database.session).delete_all()
    # Bulk deletes bypass the identity map; drop stale objects so reused
    # ids do not collide with instances loaded by an earlier test.
    database.session.expunge_all()
    yield


@pytest.fixture(scope="function")
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_health(client):
            response = client.get("/health")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def organization_repository(db_session):  # pylint: disable=redefined-outer-name
    return OrganizationRepository(db_session)


@pytest.fixture
def department_repository(db_session):  # pylint: disable=redefined-outer-name
    return DepartmentRepository(db_session)


@pytest.fixture
def employee_repository(db_session):  # pylint: disable=redefined-outer-name
    return EmployeeRepository(db_session)
