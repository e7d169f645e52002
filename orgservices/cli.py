"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check      # Verify database connectivity and tables
    flask init-db       # Create tables directly (SQLite/dev only)
    flask seed-demo     # Insert a sample organization
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import func, inspect, select
from sqlalchemy.engine import make_url

from orgservices.extensions import db
from orgservices.models.organization import Department, Employee, Organization
from orgservices.repositories import (
    DepartmentRepository,
    EmployeeRepository,
    OrganizationRepository,
)
from orgservices.schemas import DepartmentRequest, EmployeeRequest, OrganizationRequest
from orgservices.services.department_service import DepartmentService
from orgservices.services.employee_service import EmployeeService
from orgservices.services.organization_service import OrganizationService

_MODELS = (Organization, Department, Employee)


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm the expected tables exist.

    Runs a simple query against the configured database and reports the
    row count of each table.  Useful for confirming ``DATABASE_URL`` is
    correct and migrations have been applied.
    """
    click.echo("=" * 60)
    click.echo("  orgservices — Database Connectivity Check")
    click.echo("=" * 60)

    # Show the connection string with any password masked.
    db_url = make_url(current_app.config["SQLALCHEMY_DATABASE_URI"])
    click.echo(f"\n  Connection string: {db_url.render_as_string(hide_password=True)}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        db.session.execute(select(1))
        click.secho("      ✓ Connected successfully.", fg="green")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Is the database server running?")
        click.echo("    - Does DATABASE_URL match your server config?")
        raise SystemExit(1) from exc

    # -- Step 2: Tables and row counts -------------------------------------
    click.echo("[2/2] Checking tables...\n")
    existing = set(inspect(db.engine).get_table_names())
    missing = [m.__tablename__ for m in _MODELS if m.__tablename__ not in existing]
    if missing:
        click.secho(f"      ✗ Missing tables: {', '.join(missing)}", fg="red")
        click.echo("        Run `flask db upgrade` (or `flask init-db` for SQLite).")
        raise SystemExit(1)

    for model in _MODELS:
        count = db.session.scalar(select(func.count()).select_from(model))
        click.echo(f"      {model.__tablename__:>12}  — {count} row(s)")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables directly from the models (no migration history)."""
    db.create_all()
    click.secho("Tables created.", fg="green")


@click.command("seed-demo")
@click.option(
    "--name",
    default="Tech Corp",
    show_default=True,
    help="Name of the sample organization.",
)
@click.option(
    "--address",
    default="123 Tech Street",
    show_default=True,
    help="Address of the sample organization.",
)
@with_appcontext
def seed_demo_command(name: str, address: str):
    """Insert one organization with two departments and three employees."""
    organization = OrganizationService(OrganizationRepository(db.session)).add(
        OrganizationRequest(name=name, address=address)
    )

    department_service = DepartmentService(DepartmentRepository(db.session))
    it = department_service.add(
        DepartmentRequest(organization_id=organization.id, name="IT Department")
    )
    hr = department_service.add(
        DepartmentRequest(organization_id=organization.id, name="HR Department")
    )

    employee_service = EmployeeService(EmployeeRepository(db.session))
    for department, emp_name, age, position in (
        (it, "Alice", 25, "Developer"),
        (it, "Charlie", 30, "Tester"),
        (hr, "Diana", 35, "Manager"),
    ):
        employee_service.add(
            EmployeeRequest(
                organization_id=organization.id,
                department_id=department.id,
                name=emp_name,
                age=age,
                position=position,
            )
        )

    click.secho(
        f"Seeded organization {organization.id} ({name}) "
        "with 2 departments and 3 employees.",
        fg="green",
    )


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)
