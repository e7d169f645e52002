"""Create organization, department and employee tables

Parent ids are plain indexed integers rather than FOREIGN KEY
constraints: each service may own a separate database, and creates
store the submitted parent ids without checking them.

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 09:12:41.503218

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a2b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the three entity tables and their parent-id indexes."""
    op.create_table(
        "organization",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("address", sa.String(length=300), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "department",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("organization_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("department") as batch_op:
        batch_op.create_index(
            batch_op.f("ix_department_organization_id"), ["organization_id"]
        )

    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("organization_id", sa.Integer(), nullable=False),
        sa.Column("department_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("position", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("employee") as batch_op:
        batch_op.create_index(
            batch_op.f("ix_employee_organization_id"), ["organization_id"]
        )
        batch_op.create_index(
            batch_op.f("ix_employee_department_id"), ["department_id"]
        )


def downgrade() -> None:
    """Drop the three entity tables."""
    with op.batch_alter_table("employee") as batch_op:
        batch_op.drop_index(batch_op.f("ix_employee_department_id"))
        batch_op.drop_index(batch_op.f("ix_employee_organization_id"))
    op.drop_table("employee")

    with op.batch_alter_table("department") as batch_op:
        batch_op.drop_index(batch_op.f("ix_department_organization_id"))
    op.drop_table("department")

    op.drop_table("organization")
