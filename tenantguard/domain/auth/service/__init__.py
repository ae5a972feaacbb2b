"""Auth domain services."""

from .audit import AuditLogService
from .status import StatusManagementService
from .user_update import UserUpdateService

__all__ = ["AuditLogService", "StatusManagementService", "UserUpdateService"]
