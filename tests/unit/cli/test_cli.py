"""Tests for the tenantguard CLI."""

import pytest

from tenantguard.cli.main import app


def _run(*tokens: str) -> int:
    """Invoke the CLI and return its exit code."""
    try:
        app(list(tokens))
    except SystemExit as e:
        return int(e.code or 0)
    return 0


class TestPolicyCommands:
    def test_check_allowed(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("policy", "check", "super_admin", "notification_event:create")
        assert code == 0
        assert "super_admin may notification_event:create" in capsys.readouterr().out

    def test_check_denied(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("policy", "check", "site_admin", "notification_event:create")
        assert code == 1
        assert "may not" in capsys.readouterr().err

    def test_check_unknown_role_is_user(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("policy", "check", "wizard", "notification_event:index")
        assert code == 1
        assert "user may not" in capsys.readouterr().err

    def test_check_unknown_action(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = _run("policy", "check", "user", "rocket:launch")
        assert code == 1
        assert "Unknown action" in capsys.readouterr().err

    def test_actions_lists_everything(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("policy", "actions") == 0
        out = capsys.readouterr().out
        assert "notification_event:index" in out
        assert "subscription:destroy" in out


class TestRoleCommands:
    def test_transition_allowed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("roles", "transition", "user", "site_admin") == 0
        assert "allowed" in capsys.readouterr().out

    def test_same_role_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("roles", "transition", "user", "user") == 1
        assert "not allowed" in capsys.readouterr().err


class TestConfigCommands:
    def test_show_prints_effective_config(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TENANTGUARD_TEAMS__TRIAL_DAYS", "21")
        assert _run("config", "show") == 0
        assert "trial_days: 21" in capsys.readouterr().out


class TestMatrixCommand:
    def test_matrix_for_one_resource(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("policy", "matrix", "--resource", "plan") == 0
        out = capsys.readouterr().out
        assert "plan:index" in out
        assert "user:index" not in out

    def test_unknown_resource(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run("policy", "matrix", "--resource", "bogus") == 1
        assert "Unknown resource: bogus" in capsys.readouterr().err
