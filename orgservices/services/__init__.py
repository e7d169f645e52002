"""
Service layer package.

Each service module encapsulates one domain of business logic and
receives its repository at construction.  Services are the only layer
that maps stored entities to response shapes; routes never touch the
models directly.

Build services in route modules as needed::

    from orgservices.services.department_service import DepartmentService
    service = DepartmentService(DepartmentRepository(db.session))
"""
