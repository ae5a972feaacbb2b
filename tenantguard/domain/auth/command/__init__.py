"""Auth domain commands."""

from .user_admin import (
    ChangeUserStatus,
    ChangeUserStatusHandler,
    UpdateUser,
    UpdateUserHandler,
    UserResult,
)

__all__ = [
    "ChangeUserStatus",
    "ChangeUserStatusHandler",
    "UpdateUser",
    "UpdateUserHandler",
    "UserResult",
]
