"""Status management service: activating, deactivating and locking accounts."""

import logging

import logfire

from tenantguard.domain.auth.model.status import UserStatus
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta
from tenantguard.domain.auth.port.notifier import UserNotifier
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.auth.service.transition import validate_no_self_role_edit
from tenantguard.domain.shared.authorization.action import Action
from tenantguard.domain.shared.authorization.policy_set import POLICY_SET, PolicySet
from tenantguard.domain.shared.outcome import Err, Ok, Outcome
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.domain.shared.service import Service

logger = logging.getLogger(__name__)


class StatusManagementService(Service):
    """Changes a user's account status on behalf of an admin."""

    _user_repo: UserRepository
    _audit: AuditLogService
    _notifier: UserNotifier
    _uow: UnitOfWork
    _policy_set: PolicySet = POLICY_SET

    async def change_status(
        self,
        admin: User,
        target: User,
        new_status: str,
        request: RequestMeta | None = None,
    ) -> Outcome[User]:
        """Set target's status, then audit, notify and force sign-out as needed."""
        if not self._policy_set.authorize(admin.as_actor(), Action.USER_SET_STATUS, target):
            return Err("Unauthorized", code="access_denied")

        violations = validate_no_self_role_edit(admin.as_actor(), target, {"status": new_status})
        if violations:
            return Err(violations[0], code="self_edit")

        try:
            status = UserStatus(new_status)
        except ValueError:
            return Err("Invalid status", code="invalid_status")

        with logfire.span("ChangeUserStatus"):
            async with self._uow.transaction():
                old_status = target.status
                updated = target.model_copy()
                updated.status = status
                # Non-active accounts lose their sessions
                if status != UserStatus.ACTIVE:
                    updated.sign_in_count = 0
                await self._user_repo.save(updated)

                await self._audit.log_status_change(admin, updated, old_status, status, request)
                if old_status != status:
                    await self._notifier.notify_status_change(updated, old_status, status, admin)

            logfire.info(
                "User status changed",
                user_id=str(target.id),
                old_status=str(old_status),
                new_status=str(status),
            )
        logger.info("Status of %s changed from %s to %s by %s", target.id, old_status, status, admin.id)
        return Ok(updated)
