from .issue_schemas import IssueCreate, IssueRating, IssueResponse, IssueUpdate
from .note_schemas import EscalationCreate, EscalationResponse, HistoryResponse, NoteCreate, NoteResponse

__all__ = [
    "IssueCreate",
    "IssueUpdate",
    "IssueRating",
    "IssueResponse",
    "NoteCreate",
    "NoteResponse",
    "EscalationCreate",
    "EscalationResponse",
    "HistoryResponse",
]
