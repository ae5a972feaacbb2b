"""CreateTeam command and handler."""

from datetime import datetime
from uuid import UUID

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.value import RequestMeta, UserId
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.shared.authorization.policy import super_admin
from tenantguard.domain.shared.command import Command, CommandHandler, Result, unwrap
from tenantguard.domain.shared.error import NotFoundError
from tenantguard.domain.team.service.creation import TeamCreationService


class CreateTeam(Command):
    """Command to provision a team with a designated admin."""

    name: str
    admin_user_id: str  # UUID as string from API
    plan: str | None = None
    request: RequestMeta | None = None


class CreateTeamResult(Result):
    id: str
    name: str
    plan: str
    admin_id: str
    max_members: int
    trial_ends_at: datetime | None = None


class CreateTeamHandler(CommandHandler[CreateTeam, CreateTeamResult]):
    __auth__ = super_admin()
    actor: Actor
    user_repo: UserRepository
    creation_service: TeamCreationService

    async def run(self, cmd: CreateTeam) -> CreateTeamResult:
        creator = await self.user_repo.get(self.actor.id)
        if creator is None:
            raise NotFoundError(f"User not found: {self.actor.id}", code="user_not_found")
        admin_user = await self.user_repo.get(UserId(UUID(cmd.admin_user_id)))

        outcome = await self.creation_service.create(
            creator,
            {"name": cmd.name, "plan": cmd.plan},
            admin_user,
            cmd.request,
        )
        team = unwrap(outcome)
        return CreateTeamResult(
            id=str(team.id),
            name=team.name,
            plan=str(team.plan),
            admin_id=str(team.admin_id),
            max_members=team.max_members,
            trial_ends_at=team.trial_ends_at,
        )
