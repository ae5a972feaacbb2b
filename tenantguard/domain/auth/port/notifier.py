"""Port for telling users about changes made to their account."""

from abc import abstractmethod
from typing import Any, Protocol

from tenantguard.domain.auth.model.user import User
from tenantguard.domain.shared.port import Port


class UserNotifier(Port, Protocol):
    """Delivers account-change notices. Delivery channel is the adapter's concern."""

    @abstractmethod
    async def notify_status_change(
        self, user: User, old_status: str, new_status: str, changed_by: User
    ) -> None: ...

    @abstractmethod
    async def notify_critical_changes(
        self, user: User, changes: dict[str, dict[str, Any]], changed_by: User
    ) -> None: ...
