"""Test that the CLI entry point works correctly in built packages."""

import subprocess
import sys


def test_entry_point_import():
    """Test that the entry point module can be imported."""
    from gh_observer.cli.main import app

    assert app is not None


def test_cli_help_command():
    """Test that the CLI help command works."""
    result = subprocess.run(
        [sys.executable, "-c", "from gh_observer.cli.main import app; app(['--help'])"],
        capture_output=True,
        text=True,
    )

    # Should exit with code 0 for help
    assert result.returncode == 0
    assert "Watch GitHub repositories for new issues and comments" in result.stdout
