"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from etcdview.cli import app, build_settings, validate_arguments
from etcdview.constants.defaults import SETTINGS_ENV_VAR
from etcdview.errors import UsageError
from etcdview.models.state.app_settings import AppSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "settings.json"
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))
    return path


@pytest.fixture
def viewer_app():
    with patch("etcdview.cli.EtcdViewerApp") as viewer, patch(
        "etcdview.cli.configure_logging"
    ):
        yield viewer


class TestValidateArguments:
    """Tests for positional argument validation."""

    def test_strips_whitespace(self) -> None:
        assert validate_arguments(" shoot--dev ", "etcd-main\n") == ("shoot--dev", "etcd-main")

    @pytest.mark.parametrize(("namespace", "name"), [("", "etcd-main"), ("shoot--dev", "  ")])
    def test_blank_argument(self, namespace: str, name: str) -> None:
        with pytest.raises(UsageError, match="Usage: etcd-pod-viewer"):
            validate_arguments(namespace, name)


class TestBuildSettings:
    """Tests for command line overrides."""

    def test_no_overrides_returns_same_settings(self) -> None:
        settings = AppSettings()
        assert build_settings(settings) is settings

    def test_overrides_applied(self) -> None:
        settings = build_settings(
            AppSettings(request_timeout="5s"), context="dev", verify_owner=True, tail=20
        )

        assert settings.context == "dev"
        assert settings.verify_owner is True
        assert settings.log_tail_lines == 20
        assert settings.request_timeout == "5s"


class TestInspectCommand:
    """Tests for the inspect command."""

    def test_runs_app(self, viewer_app) -> None:
        result = runner.invoke(app, ["shoot--dev", "etcd-main"])

        assert result.exit_code == 0, result.output
        args, kwargs = viewer_app.call_args
        assert args == ("shoot--dev", "etcd-main")
        assert kwargs["settings"] == AppSettings()
        viewer_app.return_value.run.assert_called_once_with()

    def test_options_override_settings(self, viewer_app) -> None:
        result = runner.invoke(
            app,
            ["shoot--dev", "etcd-main", "--context", "garden", "--verify-owner", "--tail", "7"],
        )

        assert result.exit_code == 0, result.output
        settings = viewer_app.call_args.kwargs["settings"]
        assert settings.context == "garden"
        assert settings.verify_owner is True
        assert settings.log_tail_lines == 7

    def test_missing_argument_is_usage_error(self, viewer_app) -> None:
        result = runner.invoke(app, ["shoot--dev"])

        assert result.exit_code == 2
        viewer_app.assert_not_called()

    def test_blank_argument_is_usage_error(self, viewer_app) -> None:
        result = runner.invoke(app, ["", "etcd-main"])

        assert result.exit_code == 2
        assert "Usage: etcd-pod-viewer <namespace> <etcd-name>" in result.output
        viewer_app.assert_not_called()

    def test_tail_must_be_positive(self, viewer_app) -> None:
        result = runner.invoke(app, ["shoot--dev", "etcd-main", "--tail", "0"])

        assert result.exit_code == 2
        viewer_app.assert_not_called()

    def test_invalid_log_level(self, viewer_app) -> None:
        result = runner.invoke(app, ["shoot--dev", "etcd-main", "--log-level", "LOUD"])

        assert result.exit_code == 2
        assert "Invalid log level" in result.output

    def test_invalid_settings_file(self, viewer_app, isolated_settings: Path) -> None:
        isolated_settings.write_text('{"log_tail_lines": -3}', encoding="utf-8")

        result = runner.invoke(app, ["shoot--dev", "etcd-main"])

        assert result.exit_code == 1
        assert "Failed to load settings" in result.output
        viewer_app.assert_not_called()

    def test_explicit_config_path(self, viewer_app, tmp_path: Path) -> None:
        config = tmp_path / "other.json"
        config.write_text('{"context": "from-file"}', encoding="utf-8")

        result = runner.invoke(app, ["shoot--dev", "etcd-main", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert viewer_app.call_args.kwargs["settings"].context == "from-file"
