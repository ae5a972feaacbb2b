"""Composable policy predicates over (actor, target)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.status import UserStatus, UserType

if TYPE_CHECKING:
    from tenantguard.domain.auth.model.actor import Actor

_MISSING = object()


def resolve_attr(obj: Any, path: str) -> Any:
    """Follow a dotted attribute path; a missing link yields None."""
    for name in path.split("."):
        if obj is None:
            return None
        obj = getattr(obj, name, None)
    return obj


class Policy(ABC):
    """Base class for composable authorization policies.

    A policy is a pure predicate: it reads the actor and (optionally) the
    target and never mutates either.
    """

    @abstractmethod
    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        """Return True if actor satisfies this policy for target."""
        ...

    def __and__(self, other: Policy) -> AllOf:
        return AllOf(policies=(self, other))

    def __or__(self, other: Policy) -> AnyOf:
        return AnyOf(policies=(self, other))

    def __invert__(self) -> Not:
        return Not(policy=self)


@dataclass(frozen=True)
class Always(Policy):
    """Policy satisfied by any authenticated actor."""

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return True


@dataclass(frozen=True)
class RequiresRole(Policy):
    """Policy that checks the actor's system role is one of the given roles.

    Membership only: roles are not ranked, so every role that should pass
    has to be listed.
    """

    roles: frozenset[SystemRole]

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return actor.system_role in self.roles


@dataclass(frozen=True)
class ActorIs(Policy):
    """Actor attribute equals the expected value."""

    attribute: str
    value: Any

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return getattr(actor, self.attribute, _MISSING) == self.value


@dataclass(frozen=True)
class TargetIs(Policy):
    """Target attribute (dotted path) equals the expected value."""

    attribute: str
    value: Any

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return resolve_attr(target, self.attribute) == self.value


@dataclass(frozen=True)
class Matches(Policy):
    """An actor attribute equals a target attribute, and neither is None."""

    actor_attribute: str
    target_attribute: str

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        mine = getattr(actor, self.actor_attribute, None)
        theirs = resolve_attr(target, self.target_attribute)
        return mine is not None and mine == theirs


@dataclass(frozen=True)
class TargetEmpty(Policy):
    """Target collection attribute is empty."""

    attribute: str

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return not resolve_attr(target, self.attribute)


@dataclass(frozen=True)
class AllOf(Policy):
    """Policy that requires ALL sub-policies to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return all(p.evaluate(actor, target) for p in self.policies)


@dataclass(frozen=True)
class AnyOf(Policy):
    """Policy that requires at least ONE sub-policy to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return any(p.evaluate(actor, target) for p in self.policies)


@dataclass(frozen=True)
class Not(Policy):
    """Policy that inverts another policy."""

    policy: Policy

    def evaluate(self, actor: "Actor", target: Any = None) -> bool:
        return not self.policy.evaluate(actor, target)


def anyone() -> Always:
    return Always()


def requires_role(*roles: SystemRole) -> RequiresRole:
    """Factory: policy requiring one of the given system roles."""
    return RequiresRole(roles=frozenset(roles))


def super_admin() -> RequiresRole:
    return requires_role(SystemRole.SUPER_ADMIN)


def admin() -> RequiresRole:
    """Site admins and super admins."""
    return requires_role(SystemRole.SITE_ADMIN, SystemRole.SUPER_ADMIN)


def team_admin() -> ActorIs:
    return ActorIs("team_role", TeamRole.ADMIN)


def is_self(target_attribute: str = "id") -> Matches:
    """Target refers to the actor itself (by default: same id)."""
    return Matches("id", target_attribute)


def same_team(target_attribute: str = "team_id") -> Matches:
    return Matches("team_id", target_attribute)


def direct_active_user() -> AllOf:
    return ActorIs("user_type", UserType.DIRECT) & ActorIs("status", UserStatus.ACTIVE)


def on_paid_plan() -> AllOf:
    return ~ActorIs("plan", None) & ~ActorIs("plan", "free")
