"""Tests for StatusManagementService."""

from unittest.mock import AsyncMock

import pytest

from tenantguard.domain.auth.model.audit import AuditAction
from tenantguard.domain.auth.model.role import SystemRole
from tenantguard.domain.auth.model.status import UserStatus
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.auth.service.status import StatusManagementService
from tenantguard.domain.auth.service.transition import OWN_STATUS_ERROR
from tenantguard.domain.shared.outcome import Err, Ok
from tenantguard.infrastructure.memory import (
    LoggingNotifier,
    MemoryAuditLogRepository,
    MemoryStore,
    MemoryUnitOfWork,
    MemoryUserRepository,
)


def _make_service(store: MemoryStore, notifier: LoggingNotifier | None = None) -> StatusManagementService:
    return StatusManagementService(
        _user_repo=MemoryUserRepository(store),
        _audit=AuditLogService(_audit_repo=MemoryAuditLogRepository(store)),
        _notifier=notifier or LoggingNotifier(),
        _uow=MemoryUnitOfWork(store),
    )


def _seed(store: MemoryStore, *users: User) -> None:
    for user in users:
        store.users[user.id] = user


class TestChangeStatus:
    @pytest.mark.asyncio
    async def test_site_admin_deactivates_user(self) -> None:
        store = MemoryStore()
        notifier = LoggingNotifier()
        admin = User.create("admin@example.com", system_role=SystemRole.SITE_ADMIN)
        target = User.create("user@example.com", sign_in_count=7)
        _seed(store, admin, target)

        outcome = await _make_service(store, notifier).change_status(
            admin, target, "inactive", RequestMeta(ip_address="10.0.0.1")
        )

        assert isinstance(outcome, Ok)
        assert outcome.value.status == UserStatus.INACTIVE
        assert outcome.value.sign_in_count == 0
        assert store.users[target.id].status == UserStatus.INACTIVE
        assert [e.action for e in store.audit_log] == [AuditAction.STATUS_CHANGE]
        assert store.audit_log[0].ip_address == "10.0.0.1"
        assert [n.kind for n in notifier.sent] == ["status_change"]

    @pytest.mark.asyncio
    async def test_plain_user_is_unauthorized(self) -> None:
        store = MemoryStore()
        actor = User.create("user@example.com")
        target = User.create("other@example.com")
        _seed(store, actor, target)

        outcome = await _make_service(store).change_status(actor, target, "locked")

        assert isinstance(outcome, Err)
        assert outcome.code == "access_denied"
        assert store.users[target.id].status == UserStatus.ACTIVE
        assert store.audit_log == []

    @pytest.mark.asyncio
    async def test_admin_cannot_change_own_status(self) -> None:
        store = MemoryStore()
        admin = User.create("admin@example.com", system_role=SystemRole.SUPER_ADMIN)
        _seed(store, admin)

        outcome = await _make_service(store).change_status(admin, admin, "locked")

        assert isinstance(outcome, Err)
        assert outcome.message == OWN_STATUS_ERROR
        assert store.users[admin.id].status == UserStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_invalid_status(self) -> None:
        store = MemoryStore()
        admin = User.create("admin@example.com", system_role=SystemRole.SUPER_ADMIN)
        target = User.create("user@example.com")
        _seed(store, admin, target)

        outcome = await _make_service(store).change_status(admin, target, "banished")

        assert isinstance(outcome, Err)
        assert outcome.code == "invalid_status"

    @pytest.mark.asyncio
    async def test_unchanged_status_is_audited_but_not_notified(self) -> None:
        store = MemoryStore()
        notifier = LoggingNotifier()
        admin = User.create("admin@example.com", system_role=SystemRole.SUPER_ADMIN)
        target = User.create("user@example.com")
        _seed(store, admin, target)

        outcome = await _make_service(store, notifier).change_status(admin, target, "active")

        assert isinstance(outcome, Ok)
        assert len(store.audit_log) == 1
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_notifier_failure_rolls_back(self) -> None:
        store = MemoryStore()
        notifier = AsyncMock()
        notifier.notify_status_change.side_effect = RuntimeError("smtp down")
        admin = User.create("admin@example.com", system_role=SystemRole.SUPER_ADMIN)
        target = User.create("user@example.com")
        _seed(store, admin, target)

        with pytest.raises(RuntimeError):
            await _make_service(store, notifier).change_status(admin, target, "locked")

        assert store.users[target.id].status == UserStatus.ACTIVE
        assert store.audit_log == []
