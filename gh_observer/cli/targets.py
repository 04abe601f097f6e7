"""CLI commands for managing the watched repository list."""

import typer
from rich.console import Console

from ..config import ConfigError, ConfigStore
from ..monitor.validator import is_valid_repository
from .options import CONFIG_DIR_OPTION

console = Console()
app = typer.Typer(
    help="Manage the repositories being watched",
    context_settings={"help_option_names": ["-h", "--help"]},
)

REPOSITORIES_ARGUMENT = typer.Argument(..., help="Repositories as owner/name")


def _open_store(config_dir: str | None) -> ConfigStore:
    return ConfigStore(config_dir)


@app.command("list")
def list_targets(config_dir: str | None = CONFIG_DIR_OPTION) -> None:
    """Show the configured repositories."""
    store = _open_store(config_dir)
    try:
        config = store.ensure()
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    if not config.targets:
        console.print("No repositories configured.")
        return

    console.print(f"📋 Watching {len(config.targets)} repositories:")
    for target in config.targets:
        console.print(f"  {target}")


@app.command("add")
def add_targets(
    repositories: list[str] = REPOSITORIES_ARGUMENT,
    config_dir: str | None = CONFIG_DIR_OPTION,
) -> None:
    """Add repositories to the watch list."""
    invalid = [r for r in repositories if not is_valid_repository(r)]
    if invalid:
        console.print(f"❌ Invalid repository identifier: {', '.join(invalid)}")
        raise typer.Exit(1)

    store = _open_store(config_dir)
    try:
        config = store.add_targets(repositories)
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    console.print(f"✅ Saved {len(config.targets)} repositories to {store.path}")


@app.command("remove")
def remove_targets(
    repositories: list[str] = REPOSITORIES_ARGUMENT,
    config_dir: str | None = CONFIG_DIR_OPTION,
) -> None:
    """Remove repositories from the watch list."""
    store = _open_store(config_dir)
    try:
        before = store.ensure()
        config = store.remove_targets(repositories)
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    removed = len(before.targets) - len(config.targets)
    console.print(f"🗑️  Removed {removed} repositories, {len(config.targets)} remaining")
