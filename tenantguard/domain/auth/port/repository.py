"""Repository ports for the auth domain."""

from abc import abstractmethod
from typing import Protocol

from tenantguard.domain.auth.model.audit import AuditLogEntry
from tenantguard.domain.auth.model.role import TeamRole
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.shared.port import Port


class UserRepository(Port, Protocol):
    """Repository for User entity persistence."""

    @abstractmethod
    async def get(self, user_id: UserId) -> User | None:
        """Get a user by ID."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, compared case-insensitively."""
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save a user (create or update)."""
        ...

    @abstractmethod
    async def list_by_team(self, team_id: TeamId, team_role: TeamRole | None = None) -> list[User]:
        """List the members of a team, optionally only those holding team_role."""
        ...


class AuditLogRepository(Port, Protocol):
    """Append-only store of audit entries."""

    @abstractmethod
    async def save(self, entry: AuditLogEntry) -> None:
        """Persist an audit entry."""
        ...

    @abstractmethod
    async def list_for_target(self, target_id: UserId) -> list[AuditLogEntry]:
        """List entries about a user, oldest first."""
        ...
