"""
Tests for the custom Flask CLI commands.
"""

from orgservices.cli import db_check_command, seed_demo_command
from orgservices.services.organization_service import OrganizationService


def test_seed_demo_creates_sample_data(
    app, organization_repository, department_repository, employee_repository
):
    runner = app.test_cli_runner()

    result = runner.invoke(seed_demo_command, ["--name", "Demo Org"])

    assert result.exit_code == 0, result.output
    (organization,) = organization_repository.find_all()
    assert organization.name == "Demo Org"
    assert len(department_repository.find_by_organization_id(organization.id)) == 2
    assert len(employee_repository.find_by_organization_id(organization.id)) == 3

    response = (
        OrganizationService(organization_repository)
        .find_by_id(organization.id, include_departments=True, include_employees=True)
        .unwrap()
    )
    assert [d.name for d in response.departments] == ["IT Department", "HR Department"]
    assert [e.name for e in response.employees] == ["Alice", "Charlie", "Diana"]


def test_db_check_reports_tables(app):
    runner = app.test_cli_runner()

    result = runner.invoke(db_check_command)

    assert result.exit_code == 0, result.output
    assert "organization" in result.output
    assert "All checks passed" in result.output
