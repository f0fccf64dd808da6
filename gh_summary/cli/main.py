"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .run import listen, summarize

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-summary",
    help="Slack bot that summarizes recently active GitHub issues",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="listen", context_settings={"help_option_names": ["-h", "--help"]})(
    listen
)
app.command(
    name="summarize", context_settings={"help_option_names": ["-h", "--help"]}
)(summarize)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_summary import __version__

    console.print(f"GitHub Issue Summary v{__version__}")


if __name__ == "__main__":
    app()
