# Local application imports
from smartmunic.schemas.common.base_schema import CamelModel, NonEmptyStr, UtcDateTime
from smartmunic.schemas.issues.issue_schemas import IssueResponse


class WorkSessionStart(CamelModel):
    issue_id: int
    technician_id: int


class WorkSessionComplete(CamelModel):
    issue_id: int
    technician_id: int
    completion_notes: NonEmptyStr


class WorkSessionResponse(CamelModel):
    message: str
    issue: IssueResponse


class WorkSessionCompleteResponse(WorkSessionResponse):
    completed_at: UtcDateTime


class ActiveWorkSession(CamelModel):
    issue_id: int
    reference_number: str
    title: str
    arrival_time: UtcDateTime
    is_active: bool = True
