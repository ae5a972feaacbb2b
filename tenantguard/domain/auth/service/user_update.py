"""User update service for admin edits of another user's account."""

import logging
import re
from collections.abc import Mapping
from typing import Any

import logfire
from pydantic import ValidationError as PydanticValidationError

from tenantguard.domain.auth.model.role import TeamRole
from tenantguard.domain.auth.model.status import UserStatus
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import RequestMeta, TeamId
from tenantguard.domain.auth.port.notifier import UserNotifier
from tenantguard.domain.auth.port.repository import UserRepository
from tenantguard.domain.auth.service.audit import AuditLogService
from tenantguard.domain.auth.service.transition import (
    validate_no_self_role_edit,
    validate_role_transition,
)
from tenantguard.domain.shared.outcome import Err, Ok, Outcome
from tenantguard.domain.shared.port.uow import UnitOfWork
from tenantguard.domain.shared.service import Service
from tenantguard.domain.team.port.repository import TeamRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

EDITABLE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "email",
        "system_role",
        "status",
        "user_type",
        "team_id",
        "team_role",
    }
)


def _diff(before: dict[str, Any], after: dict[str, Any]) -> dict[str, dict[str, Any]]:
    return {
        key: {"from": _plain(old), "to": _plain(after[key])}
        for key, old in before.items()
        if old != after[key]
    }


def _plain(value: Any) -> Any:
    return None if value is None else str(value)


def _team_id(value: Any) -> TeamId | None:
    """Parse a team id; raises pydantic's ValidationError for malformed input."""
    if not value:
        return None
    return value if isinstance(value, TeamId) else TeamId(value)


class UserUpdateService(Service):
    """Applies an admin's field changes to a user after every guard passes.

    Checks run in a fixed order and the first failure is returned:
    authorization, known fields, self-edit, user type, role transition,
    status, team values, email, team constraints.
    """

    _user_repo: UserRepository
    _team_repo: TeamRepository
    _audit: AuditLogService
    _notifier: UserNotifier
    _uow: UnitOfWork

    async def update(
        self,
        admin: User,
        target: User,
        fields: Mapping[str, Any],
        request: RequestMeta | None = None,
    ) -> Outcome[User]:
        """Validate and apply ``fields`` to ``target``."""
        if not admin.as_actor().is_super_admin:
            return Err("Unauthorized", code="access_denied")

        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            return Err(f"Unknown fields: {', '.join(sorted(unknown))}", code="unknown_field")

        violations = validate_no_self_role_edit(admin.as_actor(), target, fields)
        if violations:
            return Err.of(violations, code="self_edit")

        if "user_type" in fields and fields["user_type"] != target.user_type:
            return Err("Invalid user type change", code="user_type_locked")

        if "system_role" in fields:
            if not validate_role_transition(target.system_role, fields["system_role"]):
                return Err("Invalid system role change", code="invalid_transition")

        if "status" in fields and fields["status"] not in set(UserStatus):
            return Err("Invalid status", code="invalid_status")

        team_role = fields.get("team_role")
        if team_role and team_role not in set(TeamRole):
            return Err("Invalid team role", code="invalid_team")

        changes = dict(fields)
        if "team_id" in changes:
            try:
                changes["team_id"] = _team_id(changes["team_id"])
            except PydanticValidationError:
                return Err("Invalid team", code="invalid_team")
        if "team_role" in changes:
            changes["team_role"] = TeamRole(changes["team_role"]) if changes["team_role"] else None

        if "email" in changes:
            changes["email"] = (changes["email"] or "").strip().lower()
            error = await self._validate_email(target, changes["email"])
            if error:
                return Err(error, code="invalid_email")

        error = await self._validate_team_constraints(target, changes)
        if error:
            return Err(error, code="team_constraint")

        with logfire.span("UpdateUser"):
            async with self._uow.transaction():
                before = target.snapshot()
                updated = target.model_copy()
                for key, value in changes.items():
                    setattr(updated, key, value)
                await self._user_repo.save(updated)

                diff = _diff(before, updated.snapshot())
                if diff:
                    await self._audit.log_user_update(admin, updated, diff, request)
                    if "system_role" in diff:
                        await self._audit.log_role_change(
                            admin, updated, before["system_role"], updated.system_role, request
                        )
                    await self._notifier.notify_critical_changes(updated, diff, admin)

            logfire.info("User updated", user_id=str(updated.id), fields=sorted(diff))
        logger.info("[ADMIN ACTION] %s updated user %s: %s", admin.email, updated.email, diff)
        return Ok(updated)

    async def _validate_email(self, target: User, email: str) -> str | None:
        if email == (target.email or "").lower():
            return None
        if not EMAIL_PATTERN.match(email):
            return "Email must be a valid email address"
        existing = await self._user_repo.get_by_email(email)
        if existing is not None and existing.id != target.id:
            return "Email is already taken by another user"
        invitation_team = await self._team_repo.get_by_pending_invitation(email)
        if invitation_team is not None:
            return f"Email conflicts with pending team invitation for {invitation_team.name}"
        return None

    async def _validate_team_constraints(self, target: User, changes: dict[str, Any]) -> str | None:
        if "team_id" not in changes and "team_role" not in changes:
            return None

        removing = ("team_id" in changes and not changes["team_id"]) or (
            "team_role" in changes and not changes["team_role"]
        )
        adding = ("team_id" in changes and changes["team_id"] and target.team_id is None) or (
            "team_role" in changes and changes["team_role"] and target.team_role is None
        )
        if target.invited and removing:
            return (
                "Cannot remove team association from invited user - "
                "this would violate data integrity"
            )
        if target.direct and adding:
            return (
                "Cannot add team association to direct user - "
                "this violates the dual-track architecture"
            )

        if "team_role" in changes and changes["team_role"] != target.team_role:
            error = await self._validate_team_role_change(target, changes["team_role"])
            if error:
                return error

        if "team_id" in changes and changes["team_id"] != target.team_id:
            error = await self._validate_team_change(target, changes["team_id"])
            if error:
                return error

        return None

    async def _validate_team_role_change(self, target: User, new_role: Any) -> str | None:
        if target.team_role != TeamRole.ADMIN or target.team_id is None:
            return None

        team = await self._team_repo.get(target.team_id)
        if team is None:
            return None

        if new_role == TeamRole.MEMBER:
            admins = await self._user_repo.list_by_team(team.id, TeamRole.ADMIN)
            if not [u for u in admins if u.id != target.id]:
                return "Cannot change role from admin to member - team must have at least one admin"

        if team.admin_id == target.id:
            return "Cannot change role - user is the designated team admin"
        return None

    async def _validate_team_change(self, target: User, new_team_id: TeamId | None) -> str | None:
        new_team = None
        if new_team_id is not None:
            new_team = await self._team_repo.get(new_team_id)
            if new_team is None:
                return "Cannot assign user to team - team does not exist"

        if target.team_id is not None:
            old_team = await self._team_repo.get(target.team_id)
            if old_team is not None and old_team.admin_id == target.id:
                return "Cannot move user - they are the designated admin of their current team"

        if new_team is not None:
            members = await self._user_repo.list_by_team(new_team.id)
            if len(members) >= new_team.max_members:
                return (
                    "Cannot assign user to team - team has reached maximum member limit "
                    f"of {new_team.max_members}"
                )
        return None

