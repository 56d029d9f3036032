# Third-party imports
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from smartmunic.core.db import get_async_session
from smartmunic.models.users import UserRole
from smartmunic.schemas.users.user_schemas import UserCreate, UserResponse
from smartmunic.services.users import user_services

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(role: UserRole | None = None, db: AsyncSession = Depends(get_async_session)):
    return await user_services.get_users(db, role=role)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, db: AsyncSession = Depends(get_async_session)):
    """Create a staff or citizen profile. Usernames are unique."""
    return await user_services.create_user(db, user_data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_async_session)):
    return await user_services.get_user(db, user_id)
