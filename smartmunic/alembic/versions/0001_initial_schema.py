"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enum columns store member names
issue_status = sa.Enum("OPEN", "ASSIGNED", "IN_PROGRESS", "RESOLVED", "CLOSED", name="issuestatus")
issue_priority = sa.Enum("LOW", "MEDIUM", "HIGH", "URGENT", name="issuepriority")
issue_category = sa.Enum(
    "WATER_SANITATION",
    "ELECTRICITY",
    "ROADS_TRANSPORT",
    "WASTE_MANAGEMENT",
    "SAFETY_SECURITY",
    "HOUSING",
    "OTHER",
    name="issuecategory",
)
department = sa.Enum(
    "WATER_SANITATION",
    "ELECTRICITY",
    "ROADS_TRANSPORT",
    "WASTE_MANAGEMENT",
    "SAFETY_SECURITY",
    "HOUSING",
    name="department",
)
technician_status = sa.Enum("AVAILABLE", "ON_JOB", "MAINTENANCE", "OFFLINE", name="technicianstatus")
payment_type = sa.Enum("WATER", "ELECTRICITY", "RATES", "FINE", name="paymenttype")
payment_status = sa.Enum("PENDING", "PAID", "OVERDUE", name="paymentstatus")
voucher_type = sa.Enum("WATER", "ELECTRICITY", name="vouchertype")
voucher_status = sa.Enum("ACTIVE", "USED", "EXPIRED", name="voucherstatus")
user_role = sa.Enum(
    "CITIZEN",
    "CALL_CENTER_AGENT",
    "TECH_MANAGER",
    "FIELD_TECHNICIAN",
    "ADMIN",
    "MAYOR",
    "WARD_COUNCILLOR",
    name="userrole",
)

ALL_ENUMS = [
    issue_status,
    issue_priority,
    issue_category,
    department,
    technician_status,
    payment_type,
    payment_status,
    voucher_type,
    voucher_status,
    user_role,
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("department", department, nullable=False),
        sa.Column("status", technician_status, nullable=False),
        sa.Column("current_location", sa.String(length=255), nullable=True),
        sa.Column("members", sa.JSON(), nullable=False),
        sa.Column("equipment", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_teams")),
    )
    op.create_index(op.f("ix_teams_id"), "teams", ["id"])
    op.create_index(op.f("ix_teams_department"), "teams", ["department"])

    op.create_table(
        "technicians",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("department", department, nullable=False),
        sa.Column("skills", sa.JSON(), nullable=False),
        sa.Column("status", technician_status, nullable=False),
        sa.Column("current_location", sa.String(length=255), nullable=True),
        sa.Column("latitude", sa.String(length=50), nullable=True),
        sa.Column("longitude", sa.String(length=50), nullable=True),
        sa.Column("team_id", sa.Integer(), nullable=True),
        sa.Column("performance_rating", sa.Float(), nullable=False),
        sa.Column("completed_issues", sa.Integer(), nullable=False),
        sa.Column("avg_resolution_time", sa.Float(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["team_id"], ["teams.id"], name=op.f("fk_technicians_team_id_teams"), ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_technicians")),
    )
    op.create_index(op.f("ix_technicians_id"), "technicians", ["id"])
    op.create_index(op.f("ix_technicians_department"), "technicians", ["department"])
    op.create_index(op.f("ix_technicians_status"), "technicians", ["status"])
    op.create_index(op.f("ix_technicians_team_id"), "technicians", ["team_id"])

    op.create_table(
        "issues",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("reference_number", sa.String(length=16), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", issue_category, nullable=False),
        sa.Column("priority", issue_priority, nullable=False),
        sa.Column("status", issue_status, nullable=False),
        sa.Column("location", sa.Text(), nullable=False),
        sa.Column("ward", sa.String(length=100), nullable=True),
        sa.Column("latitude", sa.String(length=50), nullable=True),
        sa.Column("longitude", sa.String(length=50), nullable=True),
        sa.Column("reporter_name", sa.String(length=200), nullable=True),
        sa.Column("reporter_phone", sa.String(length=32), nullable=True),
        sa.Column("assigned_to_id", sa.Integer(), nullable=True),
        sa.Column("photos", sa.JSON(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("resolved_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["assigned_to_id"],
            ["technicians.id"],
            name=op.f("fk_issues_assigned_to_id_technicians"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issues")),
    )
    op.create_index(op.f("ix_issues_id"), "issues", ["id"])
    op.create_index(op.f("ix_issues_reference_number"), "issues", ["reference_number"], unique=True)
    op.create_index(op.f("ix_issues_category"), "issues", ["category"])
    op.create_index(op.f("ix_issues_status"), "issues", ["status"])
    op.create_index(op.f("ix_issues_ward"), "issues", ["ward"])
    op.create_index(op.f("ix_issues_assigned_to_id"), "issues", ["assigned_to_id"])

    op.create_table(
        "issue_notes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("issue_id", sa.Integer(), nullable=False),
        sa.Column("note", sa.Text(), nullable=False),
        sa.Column("note_type", sa.String(length=50), nullable=False),
        sa.Column("created_by", sa.String(length=200), nullable=False),
        sa.Column("created_by_role", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["issue_id"], ["issues.id"], name=op.f("fk_issue_notes_issue_id_issues"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issue_notes")),
    )
    op.create_index(op.f("ix_issue_notes_issue_id"), "issue_notes", ["issue_id"])

    op.create_table(
        "issue_escalations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("issue_id", sa.Integer(), nullable=False),
        sa.Column("escalation_reason", sa.Text(), nullable=False),
        sa.Column("escalated_by", sa.String(length=200), nullable=False),
        sa.Column("escalated_by_role", sa.String(length=50), nullable=False),
        sa.Column("escalated_to", sa.String(length=200), nullable=False),
        sa.Column("priority", issue_priority, nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["issue_id"], ["issues.id"], name=op.f("fk_issue_escalations_issue_id_issues"), ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issue_escalations")),
    )
    op.create_index(op.f("ix_issue_escalations_issue_id"), "issue_escalations", ["issue_id"])

    op.create_table(
        "issue_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("issue_id", sa.Integer(), nullable=False),
        sa.Column("from_status", issue_status, nullable=True),
        sa.Column("to_status", issue_status, nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("updated_by", sa.String(length=200), nullable=False),
        sa.Column("technician_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["issue_id"], ["issues.id"], name=op.f("fk_issue_history_issue_id_issues"), ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["technician_id"],
            ["technicians.id"],
            name=op.f("fk_issue_history_technician_id_technicians"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_issue_history")),
    )
    op.create_index(op.f("ix_issue_history_issue_id"), "issue_history", ["issue_id"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type", payment_type, nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", payment_status, nullable=False),
        sa.Column("account_number", sa.String(length=50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("paid_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_payments")),
    )
    op.create_index(op.f("ix_payments_id"), "payments", ["id"])
    op.create_index(op.f("ix_payments_type"), "payments", ["type"])
    op.create_index(op.f("ix_payments_status"), "payments", ["status"])

    op.create_table(
        "vouchers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("type", voucher_type, nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("voucher_code", sa.String(length=64), nullable=False),
        sa.Column("status", voucher_status, nullable=False),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("used_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_vouchers")),
    )
    op.create_index(op.f("ix_vouchers_id"), "vouchers", ["id"])
    op.create_index(op.f("ix_vouchers_type"), "vouchers", ["type"])
    op.create_index(op.f("ix_vouchers_status"), "vouchers", ["status"])
    op.create_index(op.f("ix_vouchers_voucher_code"), "vouchers", ["voucher_code"], unique=True)

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"])
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)


def downgrade() -> None:
    for table in (
        "users",
        "vouchers",
        "payments",
        "issue_history",
        "issue_escalations",
        "issue_notes",
        "issues",
        "technicians",
        "teams",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum_type in ALL_ENUMS:
        enum_type.drop(bind, checkfirst=True)
