"""Proposed mutations checked by the role-transition guard."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tenantguard.domain.auth.model.actor import Actor


@dataclass(frozen=True)
class RoleTransition:
    """A proposed change of system role. Roles are kept as given so unknown
    values can be reported as invalid rather than rejected on construction."""

    from_role: str
    to_role: str


@dataclass(frozen=True)
class EditRequest:
    """Field changes an actor proposes for a target user."""

    actor: Actor
    target: Any
    fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_self_edit(self) -> bool:
        return self.actor.id == getattr(self.target, "id", None)
