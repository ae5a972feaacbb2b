"""Team domain services."""

from .creation import TeamCreationService

__all__ = ["TeamCreationService"]
