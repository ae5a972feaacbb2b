"""Auth domain ports."""

from .notifier import UserNotifier
from .repository import AuditLogRepository, UserRepository

__all__ = [
    "AuditLogRepository",
    "UserNotifier",
    "UserRepository",
]
