"""Role-transition guard: structural checks on role and status mutations.

These are stateless validators. Failures come back as values (a list of
messages or False); the caller decides whether to reject the request.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.edit import EditRequest, RoleTransition
from tenantguard.domain.auth.model.role import SystemRole

OWN_SYSTEM_ROLE_ERROR = "You cannot change your own system role"
OWN_STATUS_ERROR = "You cannot change your own account status"

ROLE_TRANSITIONS: Mapping[SystemRole, frozenset[SystemRole]] = MappingProxyType(
    {
        SystemRole.USER: frozenset({SystemRole.SITE_ADMIN, SystemRole.SUPER_ADMIN}),
        SystemRole.SITE_ADMIN: frozenset({SystemRole.USER, SystemRole.SUPER_ADMIN}),
        SystemRole.SUPER_ADMIN: frozenset({SystemRole.USER, SystemRole.SITE_ADMIN}),
    }
)
"""Allowed target roles per current role. No role may transition to itself."""

SAFE_SELF_EDIT_FIELDS: frozenset[str] = frozenset({"first_name", "last_name", "email"})
"""Profile fields a user may change on their own account."""


def validate_no_self_role_edit(
    actor: Actor,
    target: Any,
    fields: Mapping[str, Any] | Iterable[str],
) -> list[str]:
    """Return the self-edit violations of a proposed change, empty if none.

    Both checks run independently, so a self-edit touching system_role and
    status yields two messages.
    """
    if actor.id != getattr(target, "id", None):
        return []

    keys = set(fields)
    errors: list[str] = []
    if "system_role" in keys:
        errors.append(OWN_SYSTEM_ROLE_ERROR)
    if "status" in keys:
        errors.append(OWN_STATUS_ERROR)
    return errors


def validate_self_edit(request: EditRequest) -> list[str]:
    """validate_no_self_role_edit() for a bundled EditRequest."""
    return validate_no_self_role_edit(request.actor, request.target, request.fields)


def validate_role_transition(from_role: Any, to_role: Any) -> bool:
    """Check (from_role, to_role) is in the transition allow-list.

    Unknown roles on either side make the transition invalid.
    """
    source = SystemRole.lookup(from_role)
    destination = SystemRole.lookup(to_role)
    if source is None or destination is None:
        return False
    return destination in ROLE_TRANSITIONS.get(source, frozenset())


def is_valid_transition(transition: RoleTransition) -> bool:
    return validate_role_transition(transition.from_role, transition.to_role)


def is_safe_self_edit_field(field: Any) -> bool:
    """Check a field is on the self-service profile allow-list."""
    return str(field) in SAFE_SELF_EDIT_FIELDS
