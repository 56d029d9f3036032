# Third-party imports
from sqladmin import ModelView

# Local application imports
from smartmunic.models.billing import Payment, Voucher
from smartmunic.models.issues import Issue, IssueEscalation, IssueNote
from smartmunic.models.technicians import Team, Technician
from smartmunic.models.users import User
from smartmunic.utils.validators.phone_validator import mask_phone_number


class IssueAdmin(ModelView, model=Issue):  # type: ignore[call-arg]
    column_list = [
        "id",
        "reference_number",
        "title",
        "category",
        "priority",
        "status",
        "ward",
        "assigned_to_id",
        "rating",
        "created_at",
        "resolved_at",
    ]
    column_searchable_list = ["reference_number", "title"]
    column_default_sort = ("created_at", True)


class IssueNoteAdmin(ModelView, model=IssueNote):  # type: ignore[call-arg]
    column_list = ["id", "issue_id", "note_type", "created_by", "created_by_role", "created_at"]


class IssueEscalationAdmin(ModelView, model=IssueEscalation):  # type: ignore[call-arg]
    column_list = ["id", "issue_id", "escalated_by", "escalated_to", "priority", "status", "created_at"]


class TechnicianAdmin(ModelView, model=Technician):  # type: ignore[call-arg]
    column_list = [
        "id",
        "name",
        "department",
        "status",
        "phone",
        "current_location",
        "team_id",
        "performance_rating",
        "completed_issues",
    ]
    column_formatters = {
        "phone": lambda m, a: mask_phone_number(m.phone) if m.phone else "-",
    }


class TeamAdmin(ModelView, model=Team):  # type: ignore[call-arg]
    column_list = ["id", "name", "department", "status", "current_location"]


class PaymentAdmin(ModelView, model=Payment):  # type: ignore[call-arg]
    column_list = ["id", "type", "amount", "status", "due_date", "account_number", "paid_at"]


class VoucherAdmin(ModelView, model=Voucher):  # type: ignore[call-arg]
    column_list = ["id", "type", "amount", "voucher_code", "status", "purchase_date", "expiry_date"]


class UserAdmin(ModelView, model=User):  # type: ignore[call-arg]
    column_list = ["id", "username", "name", "role", "email", "is_active", "created_at"]


ADMIN_VIEWS = [
    IssueAdmin,
    IssueNoteAdmin,
    IssueEscalationAdmin,
    TechnicianAdmin,
    TeamAdmin,
    PaymentAdmin,
    VoucherAdmin,
    UserAdmin,
]
