"""PolicySet: declarative authorization rules and the Decision enum.

Contains PolicyRule, Decision, allow() constructor, and the POLICY_SET constant.
This is the single source of truth for all "who can do what on which resource" rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from tenantguard.domain.shared.authorization.action import Action
from tenantguard.domain.shared.authorization.policy import (
    Matches,
    Policy,
    TargetEmpty,
    TargetIs,
    admin,
    anyone,
    direct_active_user,
    is_self,
    on_paid_plan,
    same_team,
    super_admin,
    team_admin,
)
from tenantguard.domain.shared.error import AuthorizationError, ConfigurationError

if TYPE_CHECKING:
    from tenantguard.domain.auth.model.actor import Actor

logger = logging.getLogger(__name__)


class Decision(StrEnum):
    """Outcome of an authorization check. Truthy only when allowed."""

    ALLOW = "allow"
    DENY = "deny"

    def __bool__(self) -> bool:
        return self is Decision.ALLOW


@dataclass(frozen=True)
class PolicyRule:
    """A single authorization rule in the policy set."""

    action: Action
    policy: Policy


def allow(action: Action, policy: Policy) -> PolicyRule:
    """Convenience constructor for a policy rule."""
    return PolicyRule(action=action, policy=policy)


class PolicySet:
    """Declarative set of all authorization rules.

    Evaluation: for a given action, rules are tried in order.
    First match wins (allow). No match means deny. Anonymous actors
    (None) are denied everything.
    """

    def __init__(self, rules: list[PolicyRule]) -> None:
        self._rules = rules
        self._by_action: dict[Action, list[PolicyRule]] = {}
        for rule in rules:
            self._by_action.setdefault(rule.action, []).append(rule)

    def authorize(
        self,
        actor: "Actor | None",
        action: Action,
        target: Any = None,
    ) -> Decision:
        """Decide whether actor may perform action on target."""
        if actor is not None:
            for rule in self._by_action.get(action, []):
                if rule.policy.evaluate(actor, target):
                    return Decision.ALLOW
        return Decision.DENY

    def guard(
        self,
        actor: "Actor | None",
        action: Action,
        target: Any = None,
    ) -> None:
        """Raise AuthorizationError if no rule allows this access."""
        actor_id = str(actor.id) if actor else "anonymous"

        if self.authorize(actor, action, target):
            logger.info("Authorization allowed: actor=%s action=%s", actor_id, action)
            return

        logger.warning("Authorization denied: actor=%s action=%s", actor_id, action)
        raise AuthorizationError(f"Access denied: {action}", code="access_denied")

    def rules_for(self, action: Action) -> list[PolicyRule]:
        return list(self._by_action.get(action, []))

    def validate_coverage(self) -> None:
        """Startup check: every Action enum member must have at least one rule."""
        covered = {r.action for r in self._rules}
        missing = set(Action) - covered
        if missing:
            raise ConfigurationError(f"Actions without policy rules: {sorted(missing)}")


_team_admin_of_target_team = team_admin() & same_team()
_team_admin_of_requester_team = team_admin() & same_team("user.team_id")
_member_of_team = same_team("id")
_invitation_recipient = Matches("email", "email")
_open_request = TargetIs("pending", True) & TargetIs("expired", False)

POLICY_SET = PolicySet(
    [
        # Notification events: admins read, super admins create
        allow(Action.NOTIFICATION_EVENT_INDEX, admin()),
        allow(Action.NOTIFICATION_EVENT_SHOW, admin()),
        allow(Action.NOTIFICATION_EVENT_NEW, super_admin()),
        allow(Action.NOTIFICATION_EVENT_CREATE, super_admin()),
        # Users
        allow(Action.USER_INDEX, admin()),
        allow(Action.USER_SHOW, admin() | is_self()),
        allow(Action.USER_SET_STATUS, admin()),
        allow(Action.USER_IMPERSONATE, admin() & ~is_self()),
        allow(Action.USER_DESTROY, super_admin() | _team_admin_of_target_team),
        # Teams (target is the team itself)
        allow(Action.TEAM_SHOW, admin() | _member_of_team),
        allow(Action.TEAM_CREATE, super_admin()),
        allow(Action.TEAM_UPDATE, super_admin() | (team_admin() & _member_of_team)),
        allow(Action.TEAM_DESTROY, super_admin()),
        allow(Action.TEAM_ADMIN_ACCESS, super_admin() | (team_admin() & _member_of_team)),
        # Announcements (super admin only)
        allow(Action.ANNOUNCEMENT_INDEX, super_admin()),
        allow(Action.ANNOUNCEMENT_SHOW, super_admin()),
        allow(Action.ANNOUNCEMENT_NEW, super_admin()),
        allow(Action.ANNOUNCEMENT_CREATE, super_admin()),
        allow(Action.ANNOUNCEMENT_EDIT, super_admin()),
        allow(Action.ANNOUNCEMENT_UPDATE, super_admin()),
        allow(Action.ANNOUNCEMENT_DESTROY, super_admin()),
        # Plans (super admin only)
        allow(Action.PLAN_INDEX, super_admin()),
        allow(Action.PLAN_SHOW, super_admin()),
        allow(Action.PLAN_NEW, super_admin()),
        allow(Action.PLAN_CREATE, super_admin()),
        allow(Action.PLAN_EDIT, super_admin()),
        allow(Action.PLAN_UPDATE, super_admin()),
        allow(Action.PLAN_DESTROY, super_admin()),
        # Enterprise groups
        allow(Action.ENTERPRISE_GROUP_INDEX, admin()),
        allow(Action.ENTERPRISE_GROUP_SHOW, admin()),
        allow(Action.ENTERPRISE_GROUP_NEW, super_admin()),
        allow(Action.ENTERPRISE_GROUP_CREATE, super_admin()),
        allow(Action.ENTERPRISE_GROUP_EDIT, super_admin()),
        allow(Action.ENTERPRISE_GROUP_UPDATE, super_admin()),
        allow(Action.ENTERPRISE_GROUP_DESTROY, super_admin() & TargetEmpty("users")),
        # Invitations (target carries team_id, email, accepted)
        allow(Action.INVITATION_INDEX, super_admin() | _team_admin_of_target_team),
        allow(
            Action.INVITATION_SHOW,
            super_admin() | _team_admin_of_target_team | _invitation_recipient,
        ),
        allow(Action.INVITATION_CREATE, super_admin() | _team_admin_of_target_team),
        allow(Action.INVITATION_RESEND, super_admin() | _team_admin_of_target_team),
        allow(Action.INVITATION_REVOKE, super_admin() | _team_admin_of_target_team),
        allow(Action.INVITATION_ACCEPT, _invitation_recipient & ~TargetIs("accepted", True)),
        allow(Action.INVITATION_DECLINE, _invitation_recipient & ~TargetIs("accepted", True)),
        # Email change requests (target carries user_id, user, pending, expired)
        allow(Action.EMAIL_CHANGE_REQUEST_INDEX, anyone()),
        allow(Action.EMAIL_CHANGE_REQUEST_CREATE, anyone()),
        allow(
            Action.EMAIL_CHANGE_REQUEST_SHOW,
            is_self("user_id") | super_admin() | _team_admin_of_requester_team,
        ),
        allow(
            Action.EMAIL_CHANGE_REQUEST_APPROVE,
            _open_request & (super_admin() | _team_admin_of_requester_team),
        ),
        allow(
            Action.EMAIL_CHANGE_REQUEST_REJECT,
            _open_request & (super_admin() | _team_admin_of_requester_team),
        ),
        # Notifications (recipient only)
        allow(Action.NOTIFICATION_SHOW, is_self("recipient_id")),
        allow(Action.NOTIFICATION_MARK_AS_READ, is_self("recipient_id")),
        allow(Action.NOTIFICATION_DESTROY, is_self("recipient_id")),
        # Subscription of the acting user
        allow(Action.SUBSCRIPTION_SHOW, direct_active_user()),
        allow(Action.SUBSCRIPTION_EDIT, direct_active_user()),
        allow(Action.SUBSCRIPTION_UPDATE, direct_active_user()),
        allow(Action.SUBSCRIPTION_DESTROY, direct_active_user() & on_paid_plan()),
    ]
)


def authorize(actor: "Actor | None", action: Action, target: Any = None) -> Decision:
    """Evaluate an action against the application policy set."""
    return POLICY_SET.authorize(actor, action, target)
