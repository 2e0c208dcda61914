"""create_reference_data_and_identity_tables

Revision ID: 7c1e4f2a9b30
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "7c1e4f2a9b30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _mutable_columns() -> list[sa.Column]:
    """created_at, updated_at and version (BaseMutableModel)."""
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
        sa.Column("version", sa.Integer(), server_default="1", nullable=False),
    ]


def upgrade() -> None:
    """Create reference-data, user and role tables."""
    op.create_table(
        "bids",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_mutable_columns(),
        sa.Column("account", sa.String(length=50), nullable=False),
        sa.Column("bid_type", sa.String(length=50), nullable=False),
        sa.Column("bid_quantity", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "curve_points",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_mutable_columns(),
        sa.Column("curve_id", sa.Integer(), nullable=False),
        sa.Column("term", sa.Float(), nullable=True),
        sa.Column("curve_point_value", sa.Float(), nullable=True),
        sa.Column("as_of_date", sa.DateTime(), nullable=True),
        sa.Column("creation_date", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_curve_points_curve_id"), "curve_points", ["curve_id"], unique=False
    )

    op.create_table(
        "ratings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_mutable_columns(),
        sa.Column("moodys_rating", sa.String(length=50), nullable=False),
        sa.Column("sand_p_rating", sa.String(length=50), nullable=False),
        sa.Column("fitch_rating", sa.String(length=50), nullable=False),
        sa.Column("order_number", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "rules",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_mutable_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("json", sa.Text(), nullable=False),
        sa.Column("template", sa.Text(), nullable=False),
        sa.Column("sql_str", sa.Text(), nullable=False),
        sa.Column("sql_part", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "trades",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        *_mutable_columns(),
        sa.Column("account", sa.String(length=50), nullable=False),
        sa.Column("account_type", sa.String(length=50), nullable=False),
        sa.Column("buy_quantity", sa.Float(), nullable=True),
        sa.Column("sell_quantity", sa.Float(), nullable=True),
        sa.Column("buy_price", sa.Float(), nullable=True),
        sa.Column("sell_price", sa.Float(), nullable=True),
        sa.Column("trade_date", sa.DateTime(), nullable=True),
        sa.Column("trade_security", sa.String(length=100), nullable=True),
        sa.Column("trade_status", sa.String(length=50), nullable=True),
        sa.Column("trader", sa.String(length=50), nullable=True),
        sa.Column("benchmark", sa.String(length=50), nullable=True),
        sa.Column("book", sa.String(length=50), nullable=True),
        sa.Column("creation_name", sa.String(length=50), nullable=True),
        sa.Column("revision_name", sa.String(length=50), nullable=True),
        sa.Column("deal_name", sa.String(length=50), nullable=True),
        sa.Column("creation_date", sa.DateTime(), nullable=True),
        sa.Column("revision_date", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_trades_account"), "trades", ["account"], unique=False)

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_mutable_columns(),
        sa.Column(
            "user_name",
            sa.String(length=50),
            nullable=False,
            comment="Login name (unique)",
        ),
        sa.Column("full_name", sa.String(length=100), nullable=True),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password",
        ),
        sa.Column(
            "failed_login_attempts",
            sa.Integer(),
            server_default="0",
            nullable=False,
            comment="Counter for failed login attempts (resets on success)",
        ),
        sa.Column("locked_until", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_name"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "name",
            sa.String(length=50),
            nullable=False,
            comment="Role name (case-sensitive)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "user_roles",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "role_id"),
    )
    op.create_index(
        op.f("ix_user_roles_role_id"), "user_roles", ["role_id"], unique=False
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f("ix_user_roles_role_id"), table_name="user_roles")
    op.drop_table("user_roles")
    op.drop_table("roles")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
    op.drop_index(op.f("ix_trades_account"), table_name="trades")
    op.drop_table("trades")
    op.drop_table("rules")
    op.drop_table("ratings")
    op.drop_index(op.f("ix_curve_points_curve_id"), table_name="curve_points")
    op.drop_table("curve_points")
    op.drop_table("bids")
