"""Team creation service: provisions a tenant with its admin and billing."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from tenantguard.config import TeamConfig
from tenantguard.domain.auth.model.audit import AuditAction
from tenantguard.domain.auth.model.role import TeamRole
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta, TeamId
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.shared.authorization.action import Action
from tenantguard.domain.shared.authorization.policy_set import POLICY_SET, PolicySet
from tenantguard.domain.shared.error import DomainError, InfrastructureError
from tenantguard.domain.shared.outcome import Err, Ok, Outcome
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.domain.shared.service import Service
from tenantguard.domain.team.model.team import Plan, Team
from tenantguard.domain.team.port.repository import BillingGateway, TeamRepository

logger = logging.getLogger(__name__)


class TeamCreationService(Service):
    """Creates a team, makes a user its admin and sets up billing, atomically."""

    _team_repo: TeamRepository
    _user_repo: UserRepository
    _billing: BillingGateway
    _audit: AuditLogService
    _uow: UnitOfWork
    _config: TeamConfig
    _policy_set: PolicySet = POLICY_SET

    async def create(
        self,
        creator: User,
        params: Mapping[str, Any],
        admin_user: User | None,
        request: RequestMeta | None = None,
    ) -> Outcome[Team]:
        if not self._policy_set.authorize(creator.as_actor(), Action.TEAM_CREATE):
            return Err("Only super admins can create teams", code="access_denied")
        # Preconditions are checked against the stored record, not the caller's copy
        persisted = await self._user_repo.get(admin_user.id) if admin_user is not None else None
        if persisted is None:
            return Err("Admin user must exist", code="admin_missing")
        if persisted.team_id is not None:
            return Err("User already has a team", code="already_in_team")
        if persisted.direct and persisted.owns_team:
            return Err("Direct user already owns a team", code="already_owns_team")

        plan = params.get("plan") or self._config.default_plan
        try:
            with logfire.span("CreateTeam"):
                async with self._uow.transaction():
                    team = await self._create_team(creator, params, persisted, plan)
                    await self._assign_admin(team, persisted)
                    await self._setup_billing(team)
                    await self._audit.log_team_action(
                        creator,
                        persisted.id,
                        AuditAction.TEAM_CREATED,
                        team.id,
                        team.name,
                        {"plan": str(team.plan)},
                        request,
                    )
                logfire.info("Team created", team_id=str(team.id), plan=str(team.plan))
        except (PydanticValidationError, DomainError, InfrastructureError) as e:
            logger.warning("Team creation failed: %s", e)
            return Err(getattr(e, "message", str(e)), code="team_creation_failed")

        return Ok(team)

    async def _create_team(
        self, creator: User, params: Mapping[str, Any], admin_user: User, plan: str
    ) -> Team:
        team = Team(
            id=TeamId.generate(),
            name=params.get("name"),
            admin_id=admin_user.id,
            created_by=creator.id,
            plan=plan,
            max_members=self._config.member_limit(plan),
        )
        await self._team_repo.save(team)
        return team

    async def _assign_admin(self, team: Team, admin_user: User) -> None:
        updated = admin_user.model_copy()
        updated.team_id = team.id
        updated.team_role = TeamRole.ADMIN
        # Direct users own the team; invited users only manage it
        if updated.direct:
            updated.owns_team = True
        await self._user_repo.save(updated)

    async def _setup_billing(self, team: Team) -> None:
        team.payment_customer_id = await self._billing.create_customer(team)
        if team.plan == Plan.STARTER:
            team.trial_ends_at = datetime.now(UTC) + timedelta(days=self._config.trial_days)
        await self._team_repo.save(team)
