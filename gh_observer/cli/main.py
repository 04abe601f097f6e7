"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from . import targets
from .repos import repos, validate
from .watch import watch

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-observer",
    help="Watch GitHub repositories for new issues and comments",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


# All commands including main command support -h shorthand via context_settings


app.command(name="watch", context_settings={"help_option_names": ["-h", "--help"]})(
    watch
)
app.command(name="repos", context_settings={"help_option_names": ["-h", "--help"]})(
    repos
)
app.command(
    name="validate", context_settings={"help_option_names": ["-h", "--help"]}
)(validate)
app.add_typer(targets.app, name="targets")


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_observer import __version__

    console.print(f"gh-observer v{__version__}")


if __name__ == "__main__":
    app()
