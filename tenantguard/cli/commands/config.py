"""Config inspection commands."""

import cyclopts
import yaml

from tenantguard.cli.console import console
from tenantguard.config import Config

app = cyclopts.App(name="config", help="Show effective configuration")


@app.command
def show() -> None:
    """Print the effective configuration as YAML (env, .env and config file merged)."""
    config = Config()  # type: ignore[call-arg]
    console.print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))
