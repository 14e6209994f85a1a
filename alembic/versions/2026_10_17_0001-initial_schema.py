"""initial_schema

Revision ID: 3f9c2a7d1b40
Revises:
Create Date: 2026-10-17 00:01:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _organization_fk() -> list:
    return [
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["organization_id"],
            ["organizations.id"],
            ondelete="CASCADE",
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "organizations",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_organizations_id"), "organizations", ["id"], unique=False)
    op.create_index(op.f("ix_organizations_slug"), "organizations", ["slug"], unique=True)

    # Email is unique across all organizations
    op.create_table(
        "accounts",
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("display_name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=256), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        *_organization_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_accounts_id"), "accounts", ["id"], unique=False)
    op.create_index(op.f("ix_accounts_email"), "accounts", ["email"], unique=True)
    op.create_index(
        op.f("ix_accounts_organization_id"), "accounts", ["organization_id"], unique=False
    )

    op.create_table(
        "projects",
        sa.Column("name", sa.String(length=180), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        *_organization_fk(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_projects_id"), "projects", ["id"], unique=False)
    op.create_index(
        op.f("ix_projects_is_completed"), "projects", ["is_completed"], unique=False
    )
    op.create_index(
        op.f("ix_projects_organization_id"), "projects", ["organization_id"], unique=False
    )

    op.create_table(
        "project_memberships",
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("account_id", sa.Uuid(), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("project_id", "account_id", name="uq_project_membership"),
    )
    op.create_index(
        op.f("ix_project_memberships_id"), "project_memberships", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_project_memberships_project_id"),
        "project_memberships",
        ["project_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_project_memberships_account_id"),
        "project_memberships",
        ["account_id"],
        unique=False,
    )

    # Status and priority are stored as their integer workflow values
    op.create_table(
        "work_items",
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("assignee_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("status", sa.Integer(), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("story_points", sa.Integer(), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        *_organization_fk(),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assignee_id"], ["accounts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_work_items_id"), "work_items", ["id"], unique=False)
    op.create_index(
        op.f("ix_work_items_project_id"), "work_items", ["project_id"], unique=False
    )
    op.create_index(
        op.f("ix_work_items_assignee_id"), "work_items", ["assignee_id"], unique=False
    )
    op.create_index(op.f("ix_work_items_status"), "work_items", ["status"], unique=False)
    op.create_index(
        op.f("ix_work_items_organization_id"),
        "work_items",
        ["organization_id"],
        unique=False,
    )

    op.create_table(
        "work_item_comments",
        sa.Column("work_item_id", sa.Uuid(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("body", sa.String(length=3000), nullable=False),
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        *_organization_fk(),
        sa.ForeignKeyConstraint(
            ["work_item_id"], ["work_items.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["accounts.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_work_item_comments_id"), "work_item_comments", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_work_item_comments_work_item_id"),
        "work_item_comments",
        ["work_item_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_work_item_comments_organization_id"),
        "work_item_comments",
        ["organization_id"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order of creation
    op.drop_index(
        op.f("ix_work_item_comments_organization_id"), table_name="work_item_comments"
    )
    op.drop_index(
        op.f("ix_work_item_comments_work_item_id"), table_name="work_item_comments"
    )
    op.drop_index(op.f("ix_work_item_comments_id"), table_name="work_item_comments")
    op.drop_table("work_item_comments")

    op.drop_index(op.f("ix_work_items_organization_id"), table_name="work_items")
    op.drop_index(op.f("ix_work_items_status"), table_name="work_items")
    op.drop_index(op.f("ix_work_items_assignee_id"), table_name="work_items")
    op.drop_index(op.f("ix_work_items_project_id"), table_name="work_items")
    op.drop_index(op.f("ix_work_items_id"), table_name="work_items")
    op.drop_table("work_items")

    op.drop_index(
        op.f("ix_project_memberships_account_id"), table_name="project_memberships"
    )
    op.drop_index(
        op.f("ix_project_memberships_project_id"), table_name="project_memberships"
    )
    op.drop_index(op.f("ix_project_memberships_id"), table_name="project_memberships")
    op.drop_table("project_memberships")

    op.drop_index(op.f("ix_projects_organization_id"), table_name="projects")
    op.drop_index(op.f("ix_projects_is_completed"), table_name="projects")
    op.drop_index(op.f("ix_projects_id"), table_name="projects")
    op.drop_table("projects")

    op.drop_index(op.f("ix_accounts_organization_id"), table_name="accounts")
    op.drop_index(op.f("ix_accounts_email"), table_name="accounts")
    op.drop_index(op.f("ix_accounts_id"), table_name="accounts")
    op.drop_table("accounts")

    op.drop_index(op.f("ix_organizations_slug"), table_name="organizations")
    op.drop_index(op.f("ix_organizations_id"), table_name="organizations")
    op.drop_table("organizations")
