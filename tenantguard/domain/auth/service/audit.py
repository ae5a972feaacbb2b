"""Audit log service, records administrative actions."""

import logging
from typing import Any

from tenantguard.domain.auth.model.audit import AuditAction, AuditLogEntry
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta, UserId
from tenantguard.domain.auth.port.repository import AuditLogRepository
from tenantguard.domain.shared.error import InfrastructureError
from tenantguard.domain.shared.service import Service

logger = logging.getLogger(__name__)


class AuditLogService(Service):
    """Writes audit entries. A failed write is logged, never propagated,
    so auditing cannot undo the mutation it describes."""

    _audit_repo: AuditLogRepository

    async def log(
        self,
        admin_id: UserId,
        target_id: UserId,
        action: AuditAction,
        details: dict[str, Any] | None = None,
        request: RequestMeta | None = None,
    ) -> AuditLogEntry | None:
        entry = AuditLogEntry.create(
            admin_id=admin_id,
            target_id=target_id,
            action=action,
            details=details,
            request=request,
        )
        try:
            await self._audit_repo.save(entry)
        except InfrastructureError as e:
            logger.error(
                "Failed to create audit log: %s (admin=%s target=%s action=%s)",
                e.message,
                admin_id,
                target_id,
                action,
            )
            return None
        return entry

    async def log_status_change(
        self,
        admin: User,
        target: User,
        old_status: str,
        new_status: str,
        request: RequestMeta | None = None,
    ) -> AuditLogEntry | None:
        return await self.log(
            admin.id,
            target.id,
            AuditAction.STATUS_CHANGE,
            {"old_status": str(old_status), "new_status": str(new_status)},
            request,
        )

    async def log_user_update(
        self,
        admin: User,
        target: User,
        changes: dict[str, dict[str, Any]],
        request: RequestMeta | None = None,
    ) -> AuditLogEntry | None:
        if not changes:
            return None
        return await self.log(
            admin.id, target.id, AuditAction.USER_UPDATE, {"changes": changes}, request
        )

    async def log_role_change(
        self,
        admin: User,
        target: User,
        old_role: str,
        new_role: str,
        request: RequestMeta | None = None,
    ) -> AuditLogEntry | None:
        return await self.log(
            admin.id,
            target.id,
            AuditAction.ROLE_CHANGE,
            {"old_role": str(old_role), "new_role": str(new_role)},
            request,
        )

    async def log_team_action(
        self,
        admin: User,
        team_admin_id: UserId,
        action: AuditAction,
        team_id: Any,
        team_name: str,
        details: dict[str, Any] | None = None,
        request: RequestMeta | None = None,
    ) -> AuditLogEntry | None:
        return await self.log(
            admin.id,
            team_admin_id,
            action,
            {**(details or {}), "team_id": str(team_id), "team_name": team_name},
            request,
        )
