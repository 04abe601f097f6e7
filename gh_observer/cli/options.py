"""Standardized CLI option definitions for consistent shorthand mappings.

This module provides centralized option definitions to ensure consistent
shorthand options across all commands and prevent future drift.
"""

import typer

# Configuration options
CONFIG_DIR_OPTION = typer.Option(
    None,
    "--config-dir",
    "-c",
    help="Directory holding gh-observer.yaml (defaults to $CONFIG_DIR or ~/.config)",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

# Monitoring options
REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="Repository to watch as owner/name (overrides configured targets, "
    "can be used multiple times)",
)

INTERVAL_OPTION = typer.Option(
    None, "--interval", "-n", help="Seconds between poll cycles (overrides config)"
)

SOURCE_OPTION = typer.Option(
    None,
    "--source",
    "-s",
    help="Issue source: 'api' (GitHub REST API) or 'gh' (GitHub CLI)",
)

ONCE_OPTION = typer.Option(False, "--once", help="Run a single poll cycle and exit")

MAX_CYCLES_OPTION = typer.Option(
    None, "--max-cycles", help="Stop after this many poll cycles"
)

# Logging options
LOG_LEVEL_OPTION = typer.Option(
    None, "--log-level", "-L", help="Log level: DEBUG, INFO, WARNING, ERROR"
)

LOG_FILE_OPTION = typer.Option(
    None, "--log-file", help="Also write log lines to this file"
)
