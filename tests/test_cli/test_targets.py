"""Tests for the targets CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gh_observer.cli.main import app
from gh_observer.config import CONFIG_FILENAME, ConfigStore


@pytest.fixture
def runner() -> CliRunner:
    """Provide CLI test runner."""
    return CliRunner(env={"NO_COLOR": "1", "FORCE_COLOR": "0"})


class TestTargetsCommands:
    """Test targets list/add/remove."""

    def test_list_empty(self, runner: CliRunner, config_dir: Path) -> None:
        """Test listing with a fresh configuration."""
        result = runner.invoke(app, ["targets", "list", "-c", str(config_dir)])

        assert result.exit_code == 0
        assert "No repositories configured." in result.stdout
        assert (config_dir / CONFIG_FILENAME).exists()

    def test_add_then_list(self, runner: CliRunner, config_dir: Path) -> None:
        """Test that added repositories are listed in order."""
        result = runner.invoke(
            app, ["targets", "add", "octo/app", "octo/lib", "-c", str(config_dir)]
        )
        assert result.exit_code == 0
        assert "Saved 2 repositories" in result.stdout

        result = runner.invoke(app, ["targets", "list", "-c", str(config_dir)])
        assert result.exit_code == 0
        assert "Watching 2 repositories" in result.stdout
        assert result.stdout.index("octo/app") < result.stdout.index("octo/lib")

    def test_add_invalid(self, runner: CliRunner, config_dir: Path) -> None:
        """Test that invalid identifiers are rejected and nothing is saved."""
        result = runner.invoke(
            app, ["targets", "add", "octo/app", "not-a-repo", "-c", str(config_dir)]
        )

        assert result.exit_code == 1
        assert "Invalid repository identifier: not-a-repo" in result.stdout
        assert ConfigStore(config_dir).ensure().targets == []

    def test_remove(self, runner: CliRunner, config_dir: Path) -> None:
        """Test removing a subset of targets."""
        ConfigStore(config_dir).add_targets(["octo/app", "octo/lib", "octo/web"])

        result = runner.invoke(
            app,
            ["targets", "remove", "octo/lib", "octo/nope", "-c", str(config_dir)],
        )

        assert result.exit_code == 0
        assert "Removed 1 repositories, 2 remaining" in result.stdout
        assert ConfigStore(config_dir).load().targets == ["octo/app", "octo/web"]

    def test_broken_config(self, runner: CliRunner, config_dir: Path) -> None:
        """Test that an unreadable file is reported."""
        (config_dir / CONFIG_FILENAME).write_text("- a\n- b\n", encoding="utf-8")

        result = runner.invoke(app, ["targets", "list", "-c", str(config_dir)])

        assert result.exit_code == 1
        assert "Configuration error" in result.stdout
