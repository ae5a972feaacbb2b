"""User entity for the auth domain."""

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.status import UserStatus, UserType
from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.shared.model.entity import Entity

TRACKED_FIELDS: tuple[str, ...] = ("first_name", "last_name", "email", "system_role", "status")
"""Attributes whose changes are audited and reported to the user."""


class User(Entity):
    """An account in the application.

    Invariants:
    - `id` is immutable after creation
    - `user_type` never changes once set
    - invited users always belong to a team
    """

    id: UserId
    email: str
    first_name: str | None = None
    last_name: str | None = None
    system_role: SystemRole = SystemRole.USER
    status: UserStatus = UserStatus.ACTIVE
    user_type: UserType = UserType.DIRECT
    team_id: TeamId | None = None
    team_role: TeamRole | None = None
    owns_team: bool = False
    plan: str | None = None
    sign_in_count: int = 0

    @classmethod
    def create(cls, email: str, **fields) -> "User":
        """Create a new user with a fresh id."""
        return cls(id=UserId.generate(), email=email, **fields)

    @property
    def direct(self) -> bool:
        return self.user_type == UserType.DIRECT

    @property
    def invited(self) -> bool:
        return self.user_type == UserType.INVITED

    def snapshot(self) -> dict[str, object]:
        """Current values of the tracked attributes."""
        return {name: getattr(self, name) for name in TRACKED_FIELDS}

    def as_actor(self) -> Actor:
        """Project this user onto the immutable identity used by policies."""
        return Actor(
            id=self.id,
            system_role=self.system_role,
            team_id=self.team_id,
            team_role=self.team_role,
            status=self.status,
            email=self.email,
            user_type=self.user_type,
            plan=self.plan,
        )
