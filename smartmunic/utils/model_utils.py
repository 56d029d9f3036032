# Third-party imports
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

# Local application imports
from smartmunic.core.exceptions import ConflictError
from smartmunic.models.base import Base


def update_model_fields(model_instance: Base, update_data: BaseModel) -> dict[str, object]:
    """
    Apply the fields the client explicitly sent to a model instance (PATCH).

    Fields that were not part of the request are left untouched; fields sent
    as null are written as null.

    Returns:
        The applied changes, keyed by attribute name.
    """
    changes = update_data.model_dump(exclude_unset=True)
    applied: dict[str, object] = {}
    for field, value in changes.items():
        if not hasattr(model_instance, field):
            continue
        setattr(model_instance, field, value)
        applied[field] = value
    return applied


async def commit_or_conflict(db: AsyncSession, conflict_message: str) -> None:
    """
    Commit the session, rolling back on failure.

    A stale version counter or a unique-constraint violation means another
    request won the race; both surface as ``ConflictError``.
    """
    try:
        await db.commit()
    except (StaleDataError, IntegrityError) as e:
        await db.rollback()
        raise ConflictError(conflict_message) from e
    except Exception:
        await db.rollback()
        raise
