"""Value objects for the auth domain."""

from dataclasses import dataclass

from tenantguard.domain.shared.model.value import Identifier


class UserId(Identifier):
    """Unique identifier for a User."""


class TeamId(Identifier):
    """Unique identifier for a Team."""


@dataclass(frozen=True)
class RequestMeta:
    """Origin of the request that triggered a mutation, recorded in audit entries."""

    ip_address: str | None = None
    user_agent: str | None = None
