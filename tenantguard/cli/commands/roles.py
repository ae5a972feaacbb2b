"""Role transition commands."""

import sys

import cyclopts

from tenantguard.cli.console import console
from tenantguard.domain.auth.service.transition import ROLE_TRANSITIONS, validate_role_transition

app = cyclopts.App(name="roles", help="Inspect the system role transition graph")


@app.command
def transitions() -> None:
    """Print every allowed role transition."""
    rows = [
        {"from": str(source), "to": ", ".join(sorted(str(r) for r in targets))}
        for source, targets in ROLE_TRANSITIONS.items()
    ]
    console.table(rows, [("from", "From"), ("to", "Allowed targets")], title="Role transitions")


@app.command
def transition(from_role: str, to_role: str) -> None:
    """Check whether one role may be changed to another.

    Args:
        from_role: Current system role.
        to_role: Proposed system role.
    """
    if validate_role_transition(from_role, to_role):
        console.success(f"{from_role} -> {to_role} is allowed")
    else:
        console.error(f"{from_role} -> {to_role} is not allowed")
        sys.exit(1)
