"""Tests for scope resolution: which records an actor may see."""

from dataclasses import dataclass
from typing import Any

import pytest

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.value import TeamId, UserId
from tenantguard.domain.shared.authorization.action import Resource
from tenantguard.domain.shared.authorization.scope import Scope, ScopeSet, scope, when
from tenantguard.domain.shared.authorization.policy import super_admin


def _make_actor(role: Any = SystemRole.USER, **kwargs: Any) -> Actor:
    return Actor(id=UserId.generate(), system_role=role, **kwargs)


@dataclass
class _Row:
    id: Any = None
    team_id: Any = None
    system_role: Any = SystemRole.USER
    user_id: Any = None
    recipient_id: Any = None
    user: Any = None


def _events(n: int = 3) -> list[_Row]:
    return [_Row(id=i) for i in range(n)]


class TestNotificationEventScope:
    @pytest.mark.parametrize("role", [SystemRole.SITE_ADMIN, SystemRole.SUPER_ADMIN])
    def test_admins_see_all(self, role: SystemRole) -> None:
        records = _events()
        assert scope(_make_actor(role), Resource.NOTIFICATION_EVENT, records) == records

    @pytest.mark.parametrize("role", [SystemRole.USER, "bogus", None])
    def test_others_see_nothing(self, role: Any) -> None:
        assert scope(_make_actor(role), Resource.NOTIFICATION_EVENT, _events()) == []

    def test_anonymous_sees_nothing(self) -> None:
        assert scope(None, Resource.NOTIFICATION_EVENT, _events()) == []

    def test_accepts_resource_name_string(self) -> None:
        records = _events()
        assert scope(_make_actor(SystemRole.SUPER_ADMIN), "notification_event", records) == records

    def test_result_is_a_new_list(self) -> None:
        records = _events()
        result = scope(_make_actor(SystemRole.SUPER_ADMIN), Resource.NOTIFICATION_EVENT, records)
        assert result is not records

    def test_accepts_any_iterable(self) -> None:
        result = scope(
            _make_actor(SystemRole.SITE_ADMIN),
            Resource.NOTIFICATION_EVENT,
            (r for r in _events(2)),
        )
        assert len(result) == 2


class TestUnknownResource:
    def test_unknown_kind_is_empty(self) -> None:
        assert scope(_make_actor(SystemRole.SUPER_ADMIN), "widgets", _events()) == []

    def test_kind_without_scope_is_empty(self) -> None:
        assert scope(_make_actor(SystemRole.SUPER_ADMIN), Resource.SUBSCRIPTION, _events()) == []


class TestUserScope:
    def test_site_admin_does_not_see_super_admins(self) -> None:
        plain = _Row(id=1)
        boss = _Row(id=2, system_role=SystemRole.SUPER_ADMIN)
        assert scope(_make_actor(SystemRole.SITE_ADMIN), Resource.USER, [plain, boss]) == [plain]

    def test_super_admin_sees_everyone(self) -> None:
        rows = [_Row(id=1), _Row(id=2, system_role=SystemRole.SUPER_ADMIN)]
        assert scope(_make_actor(SystemRole.SUPER_ADMIN), Resource.USER, rows) == rows

    def test_team_admin_sees_own_team(self) -> None:
        team_id = TeamId.generate()
        mine = _Row(id=1, team_id=team_id)
        other = _Row(id=2, team_id=TeamId.generate())
        actor = _make_actor(team_id=team_id, team_role=TeamRole.ADMIN)
        assert scope(actor, Resource.USER, [mine, other]) == [mine]

    def test_plain_user_sees_nobody(self) -> None:
        assert scope(_make_actor(), Resource.USER, [_Row(id=1)]) == []


class TestOtherScopes:
    def test_team_member_sees_own_team(self) -> None:
        team_id = TeamId.generate()
        teams = [_Row(id=team_id), _Row(id=TeamId.generate())]
        actor = _make_actor(team_id=team_id, team_role=TeamRole.MEMBER)
        assert scope(actor, Resource.TEAM, teams) == [teams[0]]

    def test_teamless_user_sees_no_teams(self) -> None:
        assert scope(_make_actor(), Resource.TEAM, [_Row(id=None)]) == []

    def test_email_change_requests_of_own_account(self) -> None:
        actor = _make_actor()
        mine = _Row(user_id=actor.id)
        theirs = _Row(user_id=UserId.generate())
        assert scope(actor, Resource.EMAIL_CHANGE_REQUEST, [mine, theirs]) == [mine]

    def test_notifications_only_for_recipient(self) -> None:
        actor = _make_actor(SystemRole.SUPER_ADMIN)
        mine = _Row(recipient_id=actor.id)
        assert scope(actor, Resource.NOTIFICATION, [mine, _Row(recipient_id=UserId.generate())]) == [
            mine
        ]

    def test_announcements_super_admin_only(self) -> None:
        rows = _events()
        assert scope(_make_actor(SystemRole.SITE_ADMIN), Resource.ANNOUNCEMENT, rows) == []
        assert scope(_make_actor(SystemRole.SUPER_ADMIN), Resource.ANNOUNCEMENT, rows) == rows


class TestCustomScopeSet:
    def test_first_matching_gate_wins(self) -> None:
        scopes = ScopeSet({Resource.PLAN: Scope([when(super_admin())])})
        rows = _events()
        assert scopes.resolve(_make_actor(SystemRole.SUPER_ADMIN), Resource.PLAN, rows) == rows
        assert scopes.resolve(_make_actor(SystemRole.SITE_ADMIN), Resource.PLAN, rows) == []
