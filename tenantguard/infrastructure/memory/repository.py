"""In-memory adapters for embedding and tests.

All stores share one MemoryStore so a MemoryUnitOfWork can snapshot and
restore them together.
"""

import copy
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from tenantguard.domain.auth.model.audit import AuditLogEntry
from tenantguard.domain.auth.model.role import TeamRole
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.team.model.team import Team

logger = logging.getLogger(__name__)


@dataclass
class MemoryStore:
    users: dict[UserId, User] = field(default_factory=dict)
    teams: dict[TeamId, Team] = field(default_factory=dict)
    audit_log: list[AuditLogEntry] = field(default_factory=list)
    customers: list[str] = field(default_factory=list)
    invitations: dict[str, TeamId] = field(default_factory=dict)  # pending, by lowercased email


class MemoryUserRepository:
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def get(self, user_id: UserId) -> User | None:
        user = self._store.users.get(user_id)
        return user.model_copy() if user else None

    async def get_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        for user in self._store.users.values():
            if user.email.lower() == wanted:
                return user.model_copy()
        return None

    async def save(self, user: User) -> None:
        self._store.users[user.id] = user.model_copy()

    async def list_by_team(self, team_id: TeamId, team_role: TeamRole | None = None) -> list[User]:
        return [
            u.model_copy()
            for u in self._store.users.values()
            if u.team_id == team_id and (team_role is None or u.team_role == team_role)
        ]


class MemoryTeamRepository:
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def get(self, team_id: TeamId) -> Team | None:
        team = self._store.teams.get(team_id)
        return team.model_copy() if team else None

    async def get_by_admin(self, admin_id: UserId) -> Team | None:
        for team in self._store.teams.values():
            if team.admin_id == admin_id:
                return team.model_copy()
        return None

    async def get_by_pending_invitation(self, email: str) -> Team | None:
        team_id = self._store.invitations.get(email.strip().lower())
        return await self.get(team_id) if team_id is not None else None

    async def save(self, team: Team) -> None:
        self._store.teams[team.id] = team.model_copy()


class MemoryAuditLogRepository:
    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def save(self, entry: AuditLogEntry) -> None:
        self._store.audit_log.append(entry)

    async def list_for_target(self, target_id: UserId) -> list[AuditLogEntry]:
        return [e for e in self._store.audit_log if e.target_id == target_id]


class MemoryBillingGateway:
    """Hands out sequential fake customer ids."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    async def create_customer(self, team: Team) -> str:
        customer_id = f"cus_{len(self._store.customers) + 1:06d}"
        self._store.customers.append(customer_id)
        return customer_id


class MemoryUnitOfWork:
    """Snapshots the store on entry and restores it if the block raises."""

    def __init__(self, store: MemoryStore) -> None:
        self._store = store

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot: dict[str, Any] = {
            "users": copy.deepcopy(self._store.users),
            "teams": copy.deepcopy(self._store.teams),
            "audit_log": list(self._store.audit_log),
            "customers": list(self._store.customers),
            "invitations": dict(self._store.invitations),
        }
        try:
            yield
        except BaseException:
            logger.debug("Rolling back in-memory transaction")
            for name, value in snapshot.items():
                setattr(self._store, name, value)
            raise
