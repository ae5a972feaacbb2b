"""Team aggregate and plan tiers."""

from datetime import datetime
from enum import StrEnum

from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.shared.model.entity import Entity


class Plan(StrEnum):
    STARTER = "starter"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class Team(Entity):
    """A tenant: a group of users billed together under one plan.

    Invariants:
    - `admin_id` names the designated team admin
    - membership never exceeds `max_members`
    """

    id: TeamId
    name: str
    admin_id: UserId
    created_by: UserId
    plan: Plan = Plan.STARTER
    max_members: int
    trial_ends_at: datetime | None = None
    payment_customer_id: str | None = None

    @property
    def starter(self) -> bool:
        return self.plan == Plan.STARTER
