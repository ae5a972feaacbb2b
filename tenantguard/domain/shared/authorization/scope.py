"""Scope resolution: which records of a collection an actor may see.

Each resource kind maps to an ordered list of (gate, filter) pairs. The first
gate the actor satisfies selects the filter, which is then applied to every
record. No matching gate means nothing is visible.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from tenantguard.domain.auth.model.role import SystemRole
from tenantguard.domain.shared.authorization.action import Resource
from tenantguard.domain.shared.authorization.policy import (
    ActorIs,
    Policy,
    TargetIs,
    admin,
    anyone,
    is_self,
    same_team,
    super_admin,
    team_admin,
)

if TYPE_CHECKING:
    from tenantguard.domain.auth.model.actor import Actor

T = TypeVar("T")


@dataclass(frozen=True)
class ScopeRule:
    """Actors passing ``gate`` see the records passing ``visible``."""

    gate: Policy
    visible: Policy


def when(gate: Policy, visible: Policy | None = None) -> ScopeRule:
    """Scope rule constructor; omitting ``visible`` exposes every record."""
    return ScopeRule(gate=gate, visible=visible or anyone())


class Scope:
    """Ordered scope rules for one resource kind."""

    def __init__(self, rules: list[ScopeRule]) -> None:
        self._rules = rules

    def resolve(self, actor: "Actor | None", records: Iterable[T]) -> list[T]:
        """Return a new list of the records the actor may see."""
        if actor is None:
            return []
        for rule in self._rules:
            if rule.gate.evaluate(actor):
                return [r for r in records if rule.visible.evaluate(actor, r)]
        return []


class ScopeSet:
    """Scopes for every resource kind. Unknown kinds resolve to nothing."""

    def __init__(self, scopes: dict[Resource, Scope]) -> None:
        self._scopes = scopes

    def resolve(
        self,
        actor: "Actor | None",
        resource: Resource | str,
        records: Iterable[T],
    ) -> list[T]:
        try:
            kind = Resource(resource)
        except ValueError:
            return []
        scope = self._scopes.get(kind)
        if scope is None:
            return []
        return scope.resolve(actor, records)


_admins_only = Scope([when(admin())])
_super_admins_only = Scope([when(super_admin())])

SCOPE_SET = ScopeSet(
    {
        Resource.NOTIFICATION_EVENT: _admins_only,
        Resource.ENTERPRISE_GROUP: _admins_only,
        Resource.ANNOUNCEMENT: _super_admins_only,
        Resource.PLAN: _super_admins_only,
        Resource.USER: Scope(
            [
                when(super_admin()),
                when(admin(), ~TargetIs("system_role", SystemRole.SUPER_ADMIN)),
                when(team_admin(), same_team()),
            ]
        ),
        Resource.TEAM: Scope(
            [
                when(admin()),
                when(~ActorIs("team_id", None), same_team("id")),
            ]
        ),
        Resource.INVITATION: Scope(
            [
                when(super_admin()),
                when(team_admin(), same_team()),
            ]
        ),
        Resource.EMAIL_CHANGE_REQUEST: Scope(
            [
                when(super_admin()),
                when(team_admin(), same_team("user.team_id")),
                when(anyone(), is_self("user_id")),
            ]
        ),
        Resource.NOTIFICATION: Scope([when(anyone(), is_self("recipient_id"))]),
    }
)


def scope(actor: "Actor | None", resource: Resource | str, records: Iterable[Any]) -> list[Any]:
    """Filter records down to those the actor may see."""
    return SCOPE_SET.resolve(actor, resource, records)
