"""Team domain ports."""

from .repository import BillingGateway, TeamRepository

__all__ = ["BillingGateway", "TeamRepository"]
