"""Access control for a multi-tenant admin surface.

Three pure building blocks, usable without the DI container:

- ``authorize`` decides whether an actor may perform an action
- ``scope`` filters a collection down to what an actor may see
- the transition guard validates system role and status mutations
"""

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.edit import EditRequest, RoleTransition
from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.service.transition import (
    ROLE_TRANSITIONS,
    SAFE_SELF_EDIT_FIELDS,
    is_safe_self_edit_field,
    is_valid_transition,
    validate_no_self_role_edit,
    validate_role_transition,
    validate_self_edit,
)
from tenantguard.domain.shared.authorization.action import Action, Resource
from tenantguard.domain.shared.authorization.policy_set import POLICY_SET, Decision, authorize
from tenantguard.domain.shared.authorization.scope import SCOPE_SET, scope

__all__ = [
    "POLICY_SET",
    "ROLE_TRANSITIONS",
    "SAFE_SELF_EDIT_FIELDS",
    "SCOPE_SET",
    "Action",
    "Actor",
    "Decision",
    "EditRequest",
    "Resource",
    "RoleTransition",
    "SystemRole",
    "TeamRole",
    "authorize",
    "is_safe_self_edit_field",
    "is_valid_transition",
    "scope",
    "validate_no_self_role_edit",
    "validate_role_transition",
    "validate_self_edit",
]
