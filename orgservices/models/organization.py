"""
Organization structure models.

An organization owns departments and employees; a department owns
employees.  Ownership is expressed through plain indexed integer
columns rather than database FOREIGN KEY constraints, because each
service may run against its own database and creates copy the parent
ids verbatim.  The relationships below are read-only joins over those
columns and load lazily, so a collection is only queried when asked for.
"""

from orgservices.extensions import db


class Organization(db.Model):
    """Root entity: a named organization at an address."""

    __tablename__ = "organization"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.String(300), nullable=True)

    # -- Relationships -----------------------------------------------------
    departments = db.relationship(
        "Department",
        primaryjoin="Organization.id == foreign(Department.organization_id)",
        order_by="Department.id",
        lazy="dynamic",
        viewonly=True,
    )
    employees = db.relationship(
        "Employee",
        primaryjoin="Organization.id == foreign(Employee.organization_id)",
        order_by="Employee.id",
        lazy="dynamic",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Organization {self.id}: {self.name}>"


class Department(db.Model):
    """A department belonging to one organization."""

    __tablename__ = "department"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    organization_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)

    # -- Relationships -----------------------------------------------------
    employees = db.relationship(
        "Employee",
        primaryjoin="Department.id == foreign(Employee.department_id)",
        order_by="Employee.id",
        lazy="dynamic",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Department {self.id}: {self.name} (org={self.organization_id})>"


class Employee(db.Model):
    """
    An employee within an organization and one of its departments.

    Both parent ids are stored as given at creation time.
    """

    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    organization_id = db.Column(db.Integer, nullable=False, index=True)
    department_id = db.Column(db.Integer, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    position = db.Column(db.String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<Employee {self.id}: {self.name} ({self.position})>"
