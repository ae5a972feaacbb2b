"""Actor: the identity performing an action, resolved per-request."""

from dataclasses import dataclass

from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.status import UserStatus, UserType
from tenantguard.domain.auth.model.value import TeamId, UserId


@dataclass(frozen=True)
class Actor:
    """The identity of the current requester.

    Built by the host application from its own user record. Immutable for the
    duration of an authorization check. ``system_role`` is normalized on
    construction: an unset or unrecognized role becomes USER.
    """

    id: UserId
    system_role: SystemRole = SystemRole.USER
    team_id: TeamId | None = None
    team_role: TeamRole | None = None
    status: UserStatus | None = None
    email: str | None = None
    user_type: UserType | None = None
    plan: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "system_role", SystemRole.coerce(self.system_role))

    @property
    def is_super_admin(self) -> bool:
        return self.system_role == SystemRole.SUPER_ADMIN

    @property
    def is_site_admin(self) -> bool:
        return self.system_role == SystemRole.SITE_ADMIN

    @property
    def is_admin(self) -> bool:
        """Site admin or super admin."""
        return self.is_super_admin or self.is_site_admin

    @property
    def is_team_admin(self) -> bool:
        return self.team_role == TeamRole.ADMIN

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def has_role(self, *roles: SystemRole) -> bool:
        """Check the actor's system role is one of the given roles."""
        return self.system_role in roles
