# Third-party imports
from pydantic import Field

# Local application imports
from smartmunic.models.issues.issue import IssuePriority, IssueStatus
from smartmunic.schemas.common.base_schema import CamelModel, NonEmptyStr, UtcDateTime


class NoteCreate(CamelModel):
    note: NonEmptyStr
    note_type: str = Field("general", max_length=50)
    created_by: str = Field("Unknown User", max_length=200)
    created_by_role: str = Field("call_center_agent", max_length=50)


class NoteResponse(CamelModel):
    id: int
    issue_id: int
    note: str
    note_type: str
    created_by: str
    created_by_role: str
    created_at: UtcDateTime


class EscalationCreate(CamelModel):
    escalation_reason: NonEmptyStr
    escalated_by: str = Field("Call Center Agent", max_length=200)
    escalated_by_role: str = Field("call_center_agent", max_length=50)
    escalated_to: str = Field("Technical Manager", max_length=200)


class EscalationResponse(CamelModel):
    id: int
    issue_id: int
    escalation_reason: str
    escalated_by: str
    escalated_by_role: str
    escalated_to: str
    priority: IssuePriority
    status: str
    created_at: UtcDateTime


class HistoryResponse(CamelModel):
    id: int
    issue_id: int
    from_status: IssueStatus | None
    to_status: IssueStatus
    comment: str | None
    updated_by: str
    technician_id: int | None
    created_at: UtcDateTime
