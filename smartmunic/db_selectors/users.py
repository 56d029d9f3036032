# Standard library imports
from collections.abc import Sequence

# Third-party imports
from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.models.users import User, UserRole


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def user_exists_by_username(db: AsyncSession, username: str) -> bool:
    result = await db.execute(select(exists().where(User.username == username)))
    return bool(result.scalar())


async def list_users(db: AsyncSession, role: UserRole | None = None) -> Sequence[User]:
    query = select(User)
    if role:
        query = query.where(User.role == role)
    result = await db.execute(query.order_by(User.id))
    return result.scalars().all()
