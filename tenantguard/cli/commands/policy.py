"""Policy inspection commands."""

import sys

import cyclopts

from tenantguard.cli.console import console
from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.role import SystemRole
from tenantguard.domain.auth.model.value import UserId
from tenantguard.domain.shared.authorization.action import Action, Resource
from tenantguard.domain.shared.authorization.policy_set import POLICY_SET

app = cyclopts.App(name="policy", help="Inspect authorization rules")


def _parse_action(value: str) -> Action:
    try:
        return Action(value)
    except ValueError:
        console.error(f"Unknown action: {value}", hint="Run 'tenantguard policy actions' to list them")
        sys.exit(1)


def _parse_resource(value: str) -> Resource:
    try:
        return Resource(value)
    except ValueError:
        console.error(
            f"Unknown resource: {value}",
            hint="Choose one of: " + ", ".join(r.value for r in Resource),
        )
        sys.exit(1)


@app.command
def check(role: str, action: str) -> None:
    """Evaluate an action for an actor holding only a system role.

    Rules that depend on the target (ownership, team membership) deny here
    because no target is supplied.

    Args:
        role: System role of the actor. Unknown roles are treated as "user".
        action: Action name, e.g. notification_event:index.
    """
    actor = Actor(id=UserId.generate(), system_role=SystemRole.coerce(role))
    decision = POLICY_SET.authorize(actor, _parse_action(action))
    if decision:
        console.success(f"{actor.system_role} may {action}")
    else:
        console.error(f"{actor.system_role} may not {action}")
        console.info("Rules that need a target (ownership, team) always deny here")
        sys.exit(1)


@app.command
def matrix(resource: str | None = None) -> None:
    """Print a role x action table of role-only decisions.

    Args:
        resource: Restrict the table to one resource kind.
    """
    kind = _parse_resource(resource) if resource is not None else None
    actions = [a for a in Action if kind is None or a.resource == kind]
    actors = {role: Actor(id=UserId.generate(), system_role=role) for role in SystemRole}
    rows = [
        {
            "action": str(action),
            **{str(role): str(POLICY_SET.authorize(actor, action)) for role, actor in actors.items()},
        }
        for action in actions
    ]
    columns = [("action", "Action")] + [(str(role), str(role)) for role in SystemRole]
    console.table(rows, columns, title="Role-only decisions")


@app.command
def actions() -> None:
    """List every action known to the policy set."""
    for action in Action:
        console.print(str(action))
