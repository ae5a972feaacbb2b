"""AuditLogEntry entity: record of an administrative action."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from tenantguard.domain.auth.model.value import RequestMeta, UserId
from tenantguard.domain.shared.model.entity import Entity
from tenantguard.domain.shared.model.value import Identifier


class AuditLogEntryId(Identifier):
    """Unique identifier for an AuditLogEntry."""


class AuditAction(StrEnum):
    USER_UPDATE = "user_update"
    STATUS_CHANGE = "status_change"
    ROLE_CHANGE = "role_change"
    TEAM_CREATED = "team_created"


class AuditLogEntry(Entity):
    """Who did what to whom, and from where."""

    id: AuditLogEntryId
    admin_id: UserId
    target_id: UserId
    action: AuditAction
    details: dict[str, Any] = {}
    ip_address: str | None = None
    user_agent: str | None = None
    created_at: datetime

    @classmethod
    def create(
        cls,
        admin_id: UserId,
        target_id: UserId,
        action: AuditAction,
        details: dict[str, Any] | None = None,
        request: RequestMeta | None = None,
    ) -> "AuditLogEntry":
        return cls(
            id=AuditLogEntryId.generate(),
            admin_id=admin_id,
            target_id=target_id,
            action=action,
            details=details or {},
            ip_address=request.ip_address if request else None,
            user_agent=request.user_agent if request else None,
            created_at=datetime.now(UTC),
        )
