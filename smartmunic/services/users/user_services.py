# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.exceptions import ConflictError, NotFoundError
from smartmunic.core.monitoring.logging import get_logger
from smartmunic.db_selectors.users import get_user_by_id, get_user_by_username, list_users, user_exists_by_username
from smartmunic.models.users import User, UserRole
from smartmunic.schemas.users.user_schemas import UserCreate
from smartmunic.settings import settings
from smartmunic.utils.datetime_utils import utc_now
from smartmunic.utils.model_utils import commit_or_conflict

logger = get_logger(__name__)


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def get_users(db: AsyncSession, role: UserRole | None = None) -> Sequence[User]:
    return await list_users(db, role=role)


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    if await user_exists_by_username(db, data.username):
        raise ConflictError("Username is already taken")

    now = utc_now()
    user = User(**data.model_dump(), is_active=True, created_at=now, updated_at=now)
    db.add(user)
    await commit_or_conflict(db, "Username is already taken")
    return user


async def create_default_admin_user(db: AsyncSession) -> int:
    """Seed the administrator account once. Returns its id."""
    existing_admin = await get_user_by_username(db, settings.ADMIN_USERNAME)
    if existing_admin is not None:
        logger.info("Admin user already exists.")
        return existing_admin.id

    now = utc_now()
    admin_user = User(
        username=settings.ADMIN_USERNAME,
        name=settings.ADMIN_NAME,
        role=UserRole.ADMIN,
        email=settings.ADMIN_EMAIL,
        phone=settings.ADMIN_PHONE_NUMBER,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(admin_user)
    await commit_or_conflict(db, "Admin user was created concurrently")
    logger.info("Admin user created.")
    return admin_user.id
