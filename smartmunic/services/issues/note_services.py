# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import NotFoundError, ValidationError
from smartmunic.core.monitoring.logging import get_contextual_logger
from smartmunic.db_selectors.issues import get_issue_by_id, list_issue_notes
from smartmunic.models.issues import IssueNote
from smartmunic.schemas.issues.note_schemas import NoteCreate
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.model_utils import commit_or_conflict


async def add_note(db: AsyncSession, issue_id: int, data: NoteCreate) -> IssueNote:
    """
    Append a note to an issue. Notes are never edited or deleted, and
    adding one leaves the issue itself untouched.
    """
    if await get_issue_by_id(db, issue_id) is None:
        raise NotFoundError("Issue not found")

    text = data.note.strip()
    if not text:
        raise ValidationError("Note text is required")

    note = IssueNote(
        issue_id=issue_id,
        note=text,
        note_type=data.note_type,
        created_by=data.created_by,
        created_by_role=data.created_by_role,
        created_at=utc_now(),
    )
    db.add(note)
    await commit_or_conflict(db, "Could not save the note, please retry")

    logger = get_contextual_logger(__name__, issue_id=issue_id)
    logger.info(f"Note added by {note.created_by} ({note.created_by_role})")
    return note


async def get_notes(db: AsyncSession, issue_id: int) -> Sequence[IssueNote]:
    if await get_issue_by_id(db, issue_id) is None:
        raise NotFoundError("Issue not found")
    return await list_issue_notes(db, issue_id)
