"""System and team roles for authorization."""

from enum import StrEnum
from typing import Any


class SystemRole(StrEnum):
    """Site-wide privilege tier of a user.

    The set is closed and carries no numeric ranking: what each role may do
    is spelled out by policy rules, and which role changes are allowed is
    spelled out by the transition table.
    """

    USER = "user"
    SITE_ADMIN = "site_admin"
    SUPER_ADMIN = "super_admin"

    @classmethod
    def lookup(cls, value: Any) -> "SystemRole | None":
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def coerce(cls, value: Any) -> "SystemRole":
        """Like lookup(), but unset or unknown roles fall back to USER."""
        return cls.lookup(value) or cls.USER


class TeamRole(StrEnum):
    """Role of a user within their team."""

    ADMIN = "admin"
    MEMBER = "member"
