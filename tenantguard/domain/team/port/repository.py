"""Ports for the team domain."""

from abc import abstractmethod
from typing import Protocol

from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.shared.port import Port
from tenantguard.domain.team.model.team import Team


class TeamRepository(Port, Protocol):
    """Repository for Team persistence."""

    @abstractmethod
    async def get(self, team_id: TeamId) -> Team | None:
        """Get a team by ID."""
        ...

    @abstractmethod
    async def get_by_admin(self, admin_id: UserId) -> Team | None:
        """Get the team a user is the designated admin of."""
        ...

    @abstractmethod
    async def get_by_pending_invitation(self, email: str) -> Team | None:
        """Get the team holding an open, unexpired invitation for this email."""
        ...

    @abstractmethod
    async def save(self, team: Team) -> None:
        """Save a team (create or update)."""
        ...


class BillingGateway(Port, Protocol):
    """Payment processor integration."""

    @abstractmethod
    async def create_customer(self, team: Team) -> str:
        """Register the team with the payment processor; returns the customer id."""
        ...
