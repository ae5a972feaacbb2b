"""Notifier adapter that records notices and writes them to the log."""

import logging
from dataclasses import dataclass, field
from typing import Any

from tenantguard.domain.auth.model.user import User

logger = logging.getLogger(__name__)


@dataclass
class Notice:
    user_id: str
    kind: str
    details: dict[str, Any]


@dataclass
class LoggingNotifier:
    sent: list[Notice] = field(default_factory=list)

    async def notify_status_change(
        self, user: User, old_status: str, new_status: str, changed_by: User
    ) -> None:
        self.sent.append(
            Notice(
                str(user.id),
                "status_change",
                {"from": str(old_status), "to": str(new_status), "by": str(changed_by.id)},
            )
        )
        logger.info("Notified %s of status change %s -> %s", user.email, old_status, new_status)

    async def notify_critical_changes(
        self, user: User, changes: dict[str, dict[str, Any]], changed_by: User
    ) -> None:
        self.sent.append(
            Notice(str(user.id), "critical_changes", {"changes": changes, "by": str(changed_by.id)})
        )
        logger.info("Notified %s of changes to %s", user.email, ", ".join(sorted(changes)))
