"""ChangeUserStatus and UpdateUser commands and handlers."""

from typing import Any
from uuid import UUID

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta, UserId
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.status import StatusManagementService
from tenantguard.domain.auth.service.user_update import UserUpdateService
from tenantguard.domain.shared.authorization.policy import admin, super_admin
from tenantguard.domain.shared.command import Command, CommandHandler, Result, unwrap
from tenantguard.domain.shared.error import NotFoundError


class UserResult(Result):
    """Snapshot of a user after an admin mutation."""

    id: str
    email: str
    system_role: str
    status: str
    team_id: str | None = None
    team_role: str | None = None

    @classmethod
    def of(cls, user: User) -> "UserResult":
        return cls(
            id=str(user.id),
            email=user.email,
            system_role=str(user.system_role),
            status=str(user.status),
            team_id=str(user.team_id) if user.team_id else None,
            team_role=str(user.team_role) if user.team_role else None,
        )


async def _load(repo: UserRepository, user_id: str | UserId) -> User:
    uid = user_id if isinstance(user_id, UserId) else UserId(UUID(str(user_id)))
    user = await repo.get(uid)
    if user is None:
        raise NotFoundError(f"User not found: {uid}", code="user_not_found")
    return user


class ChangeUserStatus(Command):
    """Command to activate, deactivate or lock a user."""

    user_id: str  # UUID as string from API
    status: str
    request: RequestMeta | None = None


class ChangeUserStatusHandler(CommandHandler[ChangeUserStatus, UserResult]):
    __auth__ = admin()
    actor: Actor
    user_repo: UserRepository
    status_service: StatusManagementService

    async def run(self, cmd: ChangeUserStatus) -> UserResult:
        acting = await _load(self.user_repo, self.actor.id)
        target = await _load(self.user_repo, cmd.user_id)
        outcome = await self.status_service.change_status(acting, target, cmd.status, cmd.request)
        return UserResult.of(unwrap(outcome))


class UpdateUser(Command):
    """Command to edit another user's account fields."""

    user_id: str  # UUID as string from API
    fields: dict[str, Any]
    request: RequestMeta | None = None


class UpdateUserHandler(CommandHandler[UpdateUser, UserResult]):
    __auth__ = super_admin()
    actor: Actor
    user_repo: UserRepository
    update_service: UserUpdateService

    async def run(self, cmd: UpdateUser) -> UserResult:
        acting = await _load(self.user_repo, self.actor.id)
        target = await _load(self.user_repo, cmd.user_id)
        outcome = await self.update_service.update(acting, target, cmd.fields, cmd.request)
        return UserResult.of(unwrap(outcome))
