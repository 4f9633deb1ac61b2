"""Initial schema - users, permission matrices, audit log, notification templates.

Revision ID: 001
Revises:
Create Date: 2026-10-19

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
        "app_user",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="SUBSCRIBER"),
        sa.Column("birth_date", sa.Date(), nullable=True),
    )
    op.create_index("ix_app_user_email", "app_user", ["email"], unique=True)

    # Only EDITOR and AUTHOR rows are ever written; code defaults fill the rest.
    op.create_table(
        "role_permission",
        sa.Column("role", sa.String(20), primary_key=True),
        sa.Column("resource", sa.String(50), primary_key=True),
        sa.Column("action", sa.String(20), primary_key=True),
        sa.Column("allowed", sa.Boolean(), nullable=False),
        sa.CheckConstraint("role IN ('EDITOR', 'AUTHOR')", name="ck_role_permission_role"),
    )

    op.create_table(
        "user_permission",
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("resource", sa.String(50), primary_key=True),
        sa.Column("action", sa.String(20), primary_key=True),
        sa.Column("allowed", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "audit_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("action", sa.String(20), nullable=False),
        sa.Column("resource", sa.String(50), nullable=False),
        sa.Column("record_id", sa.String(255), nullable=False),
        sa.Column("record_title", sa.String(255), nullable=True),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_audit_log_created_at", "audit_log", ["created_at", "id"])
    op.create_index("ix_audit_log_resource", "audit_log", ["resource"])

    op.create_table(
        "notification_template",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("trigger", sa.String(30), nullable=False),
        sa.Column("titles", postgresql.JSONB(), nullable=False),
        sa.Column("messages", postgresql.JSONB(), nullable=False),
        sa.Column("days_before", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("custom_month", sa.SmallInteger(), nullable=True),
        sa.Column("custom_day", sa.SmallInteger(), nullable=True),
        sa.Column("recurring", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("link", sa.String(500), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("coupon_enabled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("coupon_type", sa.String(20), nullable=True),
        sa.Column("coupon_value", sa.Numeric(10, 2), nullable=True),
        sa.Column("coupon_currency", sa.String(3), nullable=True),
        sa.Column("coupon_duration", sa.Integer(), nullable=True),
        sa.Column("coupon_per_user", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "coupon_product_ids",
            postgresql.ARRAY(sa.String(255)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "coupon_allow_on_sale", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("coupon_min_purchase", sa.Numeric(10, 2), nullable=True),
        sa.Column("coupon_expiry_mode", sa.String(20), nullable=True),
        sa.Column("coupon_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("last_run_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_run_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "coupon",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("value", sa.Numeric(10, 2), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("currency", sa.String(3), nullable=True),
        sa.Column("min_purchase", sa.Numeric(10, 2), nullable=True),
        sa.Column("max_uses", sa.Integer(), nullable=True),
        sa.Column("per_user_limit", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "product_ids", postgresql.ARRAY(sa.String(255)), nullable=False, server_default="{}"
        ),
        sa.Column("allow_on_sale", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("show_on_product", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_coupon_code", "coupon", ["code"], unique=True)

    op.create_table(
        "coupon_usage",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "coupon_id", sa.UUID(), sa.ForeignKey("coupon.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("order_id", sa.String(255), nullable=True),
        sa.Column(
            "used_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("ix_coupon_usage_coupon_email", "coupon_usage", ["coupon_id", "email"])

    op.create_table(
        "notification",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "user_id",
            sa.String(255),
            sa.ForeignKey("app_user.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("link", sa.String(500), nullable=True),
        sa.Column(
            "coupon_id", sa.UUID(), sa.ForeignKey("coupon.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("reminder_sent_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_notification_user_id", "notification", ["user_id"])

    op.create_table(
        "template_send_log",
        sa.Column(
            "template_id",
            sa.UUID(),
            sa.ForeignKey("notification_template.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("user_id", sa.String(255), primary_key=True),
        sa.Column("year", sa.Integer(), primary_key=True),
        sa.Column(
            "coupon_id", sa.UUID(), sa.ForeignKey("coupon.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column(
            "sent_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()
        ),
    )


def downgrade() -> None:
    op.drop_table("template_send_log")
    op.drop_table("notification")
    op.drop_table("coupon_usage")
    op.drop_table("coupon")
    op.drop_table("notification_template")
    op.drop_table("audit_log")
    op.drop_table("user_permission")
    op.drop_table("role_permission")
    op.drop_table("app_user")
