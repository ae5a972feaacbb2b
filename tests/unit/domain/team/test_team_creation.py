"""Tests for TeamCreationService."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from tenantguard.config import TeamConfig
from tenantguard.domain.auth.model.audit import AuditAction
from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.status import UserType
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.shared.error import StorageUnavailableError
from tenantguard.domain.shared.outcome import Err, Ok
from tenantguard.domain.team.model.team import Plan
from tenantguard.domain.team.service.creation import TeamCreationService
from tenantguard.infrastructure.memory import (
    MemoryAuditLogRepository,
    MemoryBillingGateway,
    MemoryStore,
    MemoryTeamRepository,
    MemoryUnitOfWork,
    MemoryUserRepository,
)


def _make_service(
    store: MemoryStore,
    billing: object | None = None,
    config: TeamConfig | None = None,
) -> TeamCreationService:
    return TeamCreationService(
        _team_repo=MemoryTeamRepository(store),
        _user_repo=MemoryUserRepository(store),
        _billing=billing or MemoryBillingGateway(store),
        _audit=AuditLogService(_audit_repo=MemoryAuditLogRepository(store)),
        _uow=MemoryUnitOfWork(store),
        _config=config or TeamConfig(),
    )


def _seed(store: MemoryStore, *users: User) -> None:
    for user in users:
        store.users[user.id] = user


def _make_super_admin() -> User:
    return User.create("root@example.com", system_role=SystemRole.SUPER_ADMIN)


class TestCreateTeam:
    @pytest.mark.asyncio
    async def test_starter_team_gets_trial_and_admin(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)

        outcome = await _make_service(store).create(creator, {"name": "Acme"}, lead)

        assert isinstance(outcome, Ok)
        team = outcome.value
        assert team.plan == Plan.STARTER
        assert team.max_members == 5
        assert team.payment_customer_id == "cus_000001"
        assert team.trial_ends_at is not None
        assert team.trial_ends_at - datetime.now(UTC) > timedelta(days=13)

        saved_lead = store.users[lead.id]
        assert saved_lead.team_id == team.id
        assert saved_lead.team_role == TeamRole.ADMIN
        assert saved_lead.owns_team
        assert [e.action for e in store.audit_log] == [AuditAction.TEAM_CREATED]
        assert store.audit_log[0].details["team_name"] == "Acme"

    @pytest.mark.asyncio
    async def test_pro_plan_has_no_trial(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)

        outcome = await _make_service(store).create(creator, {"name": "Acme", "plan": "pro"}, lead)

        assert isinstance(outcome, Ok)
        assert outcome.value.max_members == 15
        assert outcome.value.trial_ends_at is None

    @pytest.mark.asyncio
    async def test_limits_come_from_config(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)
        config = TeamConfig(member_limits={"starter": 2})

        outcome = await _make_service(store, config=config).create(creator, {"name": "Acme"}, lead)

        assert isinstance(outcome, Ok)
        assert outcome.value.max_members == 2

    @pytest.mark.asyncio
    async def test_invited_admin_does_not_own_team(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com", user_type=UserType.INVITED)
        _seed(store, creator, lead)

        outcome = await _make_service(store).create(creator, {"name": "Acme"}, lead)

        assert isinstance(outcome, Ok)
        assert not store.users[lead.id].owns_team

    @pytest.mark.asyncio
    async def test_site_admin_cannot_create(self) -> None:
        store = MemoryStore()
        creator = User.create("site@example.com", system_role=SystemRole.SITE_ADMIN)
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)

        outcome = await _make_service(store).create(creator, {"name": "Acme"}, lead)

        assert isinstance(outcome, Err)
        assert outcome.code == "access_denied"
        assert store.teams == {}

    @pytest.mark.asyncio
    async def test_admin_must_exist(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        _seed(store, creator)

        outcome = await _make_service(store).create(creator, {"name": "Acme"}, None)

        assert isinstance(outcome, Err)
        assert outcome.code == "admin_missing"

    @pytest.mark.asyncio
    async def test_admin_already_in_team(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)
        service = _make_service(store)
        first = await service.create(creator, {"name": "First"}, lead)
        assert isinstance(first, Ok)

        outcome = await service.create(creator, {"name": "Second"}, store.users[lead.id])

        assert isinstance(outcome, Err)
        assert outcome.code == "already_in_team"

    @pytest.mark.asyncio
    async def test_stale_admin_copy_does_not_bypass_team_check(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)
        service = _make_service(store)
        old = await service.create(creator, {"name": "Old"}, lead)
        assert isinstance(old, Ok)

        # lead still has team_id=None here; the stored record does not
        outcome = await service.create(creator, {"name": "New"}, lead)

        assert isinstance(outcome, Err)
        assert outcome.message == "User already has a team"
        assert store.users[lead.id].team_id == old.value.id
        assert len(store.teams) == 1

    @pytest.mark.asyncio
    async def test_missing_name_fails_without_side_effects(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)

        outcome = await _make_service(store).create(creator, {}, lead)

        assert isinstance(outcome, Err)
        assert outcome.code == "team_creation_failed"
        assert store.teams == {}

    @pytest.mark.asyncio
    async def test_billing_failure_rolls_back(self) -> None:
        store = MemoryStore()
        creator = _make_super_admin()
        lead = User.create("lead@example.com")
        _seed(store, creator, lead)
        billing = AsyncMock()
        billing.create_customer.side_effect = StorageUnavailableError("billing offline")

        outcome = await _make_service(store, billing=billing).create(
            creator, {"name": "Acme"}, lead
        )

        assert isinstance(outcome, Err)
        assert outcome.message == "billing offline"
        assert store.teams == {}
        assert store.users[lead.id].team_id is None
        assert store.audit_log == []
