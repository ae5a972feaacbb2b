"""Team domain commands."""

from .create_team import CreateTeam, CreateTeamHandler, CreateTeamResult

__all__ = ["CreateTeam", "CreateTeamHandler", "CreateTeamResult"]
