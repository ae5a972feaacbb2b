"""Tests for SystemRole lookup/coercion and Actor normalization."""

import pytest

from tenantguard.domain.auth.model.actor import Actor
from tenantguard.domain.auth.model.role import SystemRole, TeamRole
from tenantguard.domain.auth.model.status import UserStatus
from tenantguard.domain.auth.model.user import User
from tenantguard.domain.auth.model.value import TeamId, UserId


class TestSystemRole:
    @pytest.mark.parametrize("value", ["user", "site_admin", "super_admin"])
    def test_lookup_known(self, value: str) -> None:
        assert SystemRole.lookup(value) == value

    @pytest.mark.parametrize("value", ["admin", "", None, 3, "SUPER_ADMIN"])
    def test_lookup_unknown(self, value: object) -> None:
        assert SystemRole.lookup(value) is None

    @pytest.mark.parametrize("value", ["admin", "", None])
    def test_coerce_falls_back_to_user(self, value: object) -> None:
        assert SystemRole.coerce(value) is SystemRole.USER

    def test_coerce_keeps_known_role(self) -> None:
        assert SystemRole.coerce("site_admin") is SystemRole.SITE_ADMIN


class TestActor:
    def test_unknown_role_normalized(self) -> None:
        actor = Actor(id=UserId.generate(), system_role="root")  # type: ignore[arg-type]
        assert actor.system_role is SystemRole.USER

    def test_role_helpers(self) -> None:
        actor = Actor(id=UserId.generate(), system_role=SystemRole.SITE_ADMIN)
        assert actor.is_site_admin
        assert actor.is_admin
        assert not actor.is_super_admin
        assert actor.has_role(SystemRole.SITE_ADMIN, SystemRole.USER)

    def test_actor_is_immutable(self) -> None:
        actor = Actor(id=UserId.generate())
        with pytest.raises(AttributeError):
            actor.system_role = SystemRole.SUPER_ADMIN  # type: ignore[misc]


class TestUserAsActor:
    def test_projection_copies_identity(self) -> None:
        team_id = TeamId.generate()
        user = User.create(
            "ann@example.com",
            system_role=SystemRole.SITE_ADMIN,
            team_id=team_id,
            team_role=TeamRole.ADMIN,
        )
        actor = user.as_actor()
        assert actor.id == user.id
        assert actor.team_id == team_id
        assert actor.is_team_admin
        assert actor.status == UserStatus.ACTIVE

    def test_snapshot_has_tracked_fields(self) -> None:
        user = User.create("ann@example.com", first_name="Ann")
        snap = user.snapshot()
        assert snap["first_name"] == "Ann"
        assert set(snap) == {"first_name", "last_name", "email", "system_role", "status"}
