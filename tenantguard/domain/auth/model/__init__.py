"""Auth domain models."""

from .actor import Actor
from .audit import AuditAction, AuditLogEntry, AuditLogEntryId
from .edit import EditRequest, RoleTransition
from .role import SystemRole, TeamRole
from .status import UserStatus, UserType
from .user import TRACKED_FIELDS, User
from .value import RequestMeta, TeamId, UserId

__all__ = [
    "TRACKED_FIELDS",
    "Actor",
    "AuditAction",
    "AuditLogEntry",
    "AuditLogEntryId",
    "EditRequest",
    "RequestMeta",
    "RoleTransition",
    "SystemRole",
    "TeamId",
    "TeamRole",
    "User",
    "UserId",
    "UserStatus",
    "UserType",
]
