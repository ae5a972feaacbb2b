"""Main CLI application using Cyclopts.

Offline inspection of the authorization rules; it never touches user data.
"""

import cyclopts

from tenantguard.cli.commands import config, policy, roles
from tenantguard.config import Config, configure_logging

app = cyclopts.App(
    name="tenantguard",
    help="tenantguard - access control for multi-tenant admin",
)

app.command(policy.app, name="policy")
app.command(roles.app, name="roles")
app.command(config.app, name="config")


def main() -> None:
    configure_logging(Config().logging)  # type: ignore[call-arg]
    app()
