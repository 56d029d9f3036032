from .user_schemas import UserCreate, UserResponse

__all__ = ["UserCreate", "UserResponse"]
