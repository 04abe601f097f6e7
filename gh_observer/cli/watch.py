"""CLI command that runs the issue monitor loop."""

import logging
import signal

import typer
from rich.console import Console

from ..config import ConfigError, ConfigStore, ObserverConfig
from ..github_client.client import GitHubClient
from ..github_client.gh_cli import GhCliClient
from ..monitor.engine import ChangeDetectionEngine
from ..monitor.scheduler import MonitorScheduler
from ..monitor.source import IssueSource
from ..monitor.validator import is_valid_repository
from ..utils.logging import configure_logging
from .options import (
    CONFIG_DIR_OPTION,
    INTERVAL_OPTION,
    LOG_FILE_OPTION,
    LOG_LEVEL_OPTION,
    MAX_CYCLES_OPTION,
    ONCE_OPTION,
    REPO_OPTION,
    SOURCE_OPTION,
    TOKEN_OPTION,
)

console = Console()
logger = logging.getLogger(__name__)


def build_source(config: ObserverConfig, token: str | None = None) -> IssueSource:
    """Create the issue source selected in the configuration."""
    if config.source == "gh":
        return GhCliClient(limit=config.issue_limit, timeout=config.command_timeout)
    return GitHubClient(token=token, limit=config.issue_limit)


def watch(
    repo: list[str] | None = REPO_OPTION,
    interval: float | None = INTERVAL_OPTION,
    source: str | None = SOURCE_OPTION,
    once: bool = ONCE_OPTION,
    max_cycles: int | None = MAX_CYCLES_OPTION,
    token: str | None = TOKEN_OPTION,
    config_dir: str | None = CONFIG_DIR_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
    log_file: str | None = LOG_FILE_OPTION,
) -> None:
    """Watch repositories for new issues and comments.

    Targets come from the configuration file and are re-read every cycle,
    so `gh-observer targets add` takes effect while the watcher runs.

    Examples:
        gh-observer watch
        gh-observer watch --repo octocat/hello-world --interval 30
        gh-observer watch --source gh --once
    """
    store = ConfigStore(config_dir)
    try:
        config = store.ensure()
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    overrides: dict[str, object] = {}
    if interval is not None:
        overrides["interval"] = interval
    if source is not None:
        overrides["source"] = source
    if log_level is not None:
        overrides["log_level"] = log_level
    if overrides:
        try:
            config = ObserverConfig.model_validate({**config.model_dump(), **overrides})
        except ValueError as e:
            console.print(f"❌ Invalid option: {e}")
            raise typer.Exit(1)

    try:
        configure_logging(config.log_level, log_file)
    except ValueError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(1)

    if repo:
        invalid = [r for r in repo if not is_valid_repository(r)]
        if invalid:
            console.print(f"❌ Invalid repository identifier: {', '.join(invalid)}")
            raise typer.Exit(1)
        fixed_targets = list(dict.fromkeys(repo))

        def targets() -> list[str]:
            return fixed_targets

    else:
        if not config.targets:
            console.print(
                f"❌ No repositories to watch. Add some with "
                f"'gh-observer targets add OWNER/NAME' or edit {store.path}"
            )
            raise typer.Exit(1)
        last_known = list(config.targets)

        def targets() -> list[str]:
            nonlocal last_known
            try:
                last_known = store.load().targets
            except ConfigError as e:
                logger.error("Keeping previous targets: %s", e)
            return last_known

    try:
        issue_source = build_source(config, token)
    except ValueError as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)

    scheduler = MonitorScheduler(
        ChangeDetectionEngine(issue_source), targets, interval=config.interval
    )

    initial = targets()
    logger.info("Watching %d repositories: %s", len(initial), ", ".join(initial))
    logger.info("Poll interval: %gs, source: %s", config.interval, config.source)

    def handle_shutdown(signum: int, frame: object) -> None:
        logger.info("Stopping monitor...")
        scheduler.stop()

    previous_handler = signal.signal(signal.SIGTERM, handle_shutdown)

    try:
        scheduler.run_forever(max_cycles=1 if once else max_cycles)
    except KeyboardInterrupt:
        scheduler.stop()
        logger.info("Monitor interrupted")
    finally:
        signal.signal(signal.SIGTERM, previous_handler)
