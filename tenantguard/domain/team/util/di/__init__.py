"""DI providers for the team domain."""

from .provider import TeamProvider

__all__ = ["TeamProvider"]
