"""In-memory infrastructure adapters."""

from .notifier import LoggingNotifier, Notice
from .repository import (
    MemoryAuditLogRepository,
    MemoryBillingGateway,
    MemoryStore,
    MemoryTeamRepository,
    MemoryUnitOfWork,
    MemoryUserRepository,
)

__all__ = [
    "LoggingNotifier",
    "MemoryAuditLogRepository",
    "MemoryBillingGateway",
    "MemoryStore",
    "MemoryTeamRepository",
    "MemoryUnitOfWork",
    "MemoryUserRepository",
    "Notice",
]
