"""Team domain models."""

from .team import Plan, Team

__all__ = ["Plan", "Team"]
