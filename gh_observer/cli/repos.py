"""CLI commands for discovering and checking repositories."""

import typer
from github.GithubException import GithubException
from rich.console import Console
from rich.table import Table

from ..config import ConfigError, ConfigStore
from ..github_client.client import GitHubClient
from ..monitor.validator import is_valid_repository
from .options import CONFIG_DIR_OPTION, TOKEN_OPTION

console = Console()


def repos(
    token: str | None = TOKEN_OPTION,
    config_dir: str | None = CONFIG_DIR_OPTION,
) -> None:
    """List repositories you own or can see through your organizations.

    Repositories already being watched are marked in the first column.
    """
    try:
        targets = set(ConfigStore(config_dir).ensure().targets)
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    try:
        client = GitHubClient(token=token)
        repositories = client.list_repositories()
    except ValueError as e:
        console.print(f"❌ Error: {e}")
        raise typer.Exit(1)
    except GithubException as e:
        console.print(f"❌ Could not list repositories: {e}")
        raise typer.Exit(1)

    table = Table(title="Repositories")
    table.add_column("Watched", justify="center", style="green")
    table.add_column("Repository", style="cyan")
    table.add_column("Organization", style="magenta")
    table.add_column("Description", style="white")

    for repository in repositories:
        description = repository.description or ""
        table.add_row(
            "✓" if repository.full_name in targets else "",
            repository.full_name,
            repository.organization or "",
            description[:50] + "..." if len(description) > 50 else description,
        )

    console.print(table)
    console.print(f"📊 {len(repositories)} repositories, {len(targets)} watched")


def validate(
    repositories: list[str] = typer.Argument(..., help="Identifiers to check"),
) -> None:
    """Check that repository identifiers are valid owner/name pairs."""
    invalid = 0
    for repository in repositories:
        if is_valid_repository(repository):
            console.print(f"✅ {repository}")
        else:
            invalid += 1
            console.print(f"❌ {repository}")

    if invalid:
        raise typer.Exit(1)
