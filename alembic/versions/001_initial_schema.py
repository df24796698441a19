"""Initial schema - role, role_permission, app_user, directory_config.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "role",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    # Unique name is what serializes concurrent create/rename.
    op.create_index("ix_role_name", "role", ["name"], unique=True)

    op.create_table(
        "role_permission",
        sa.Column(
            "role_id",
            sa.String(64),
            sa.ForeignKey("role.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("permission", sa.String(150), primary_key=True),
    )

    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        # No cascade: deleting a role that still has users must fail.
        sa.Column("role_id", sa.String(64), sa.ForeignKey("role.id"), nullable=False),
        sa.Column("source", sa.String(20), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("ix_app_user_username", "app_user", ["username"], unique=True)
    op.create_index("ix_app_user_role_id", "app_user", ["role_id"])

    op.create_table(
        "directory_config",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("server_url", sa.String(500), nullable=False, server_default=""),
        sa.Column("base_dn", sa.String(500), nullable=False, server_default=""),
        sa.Column("bind_dn", sa.String(500), nullable=False, server_default=""),
        sa.Column("bind_password", sa.String(500), nullable=False, server_default=""),
        sa.Column("user_filter", sa.String(500), nullable=False, server_default=""),
        sa.Column("group_base_dn", sa.String(500), nullable=False, server_default=""),
        sa.Column("group_filter", sa.String(500), nullable=False, server_default=""),
        sa.Column(
            "role_mappings",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("default_role_id", sa.String(64), nullable=False, server_default="user"),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.CheckConstraint("id = 1", name="ck_directory_config_singleton"),
    )


def downgrade() -> None:
    op.drop_table("directory_config")
    op.drop_index("ix_app_user_role_id", table_name="app_user")
    op.drop_index("ix_app_user_username", table_name="app_user")
    op.drop_table("app_user")
    op.drop_table("role_permission")
    op.drop_index("ix_role_name", table_name="role")
    op.drop_table("role")
