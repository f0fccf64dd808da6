"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

ORG_OPTION = typer.Option(..., "--org", "-o", help="GitHub organization or user")

REPO_OPTION = typer.Option(..., "--repo", "-r", help="GitHub repository name")

LAST_DAYS_OPTION = typer.Option(
    None,
    "--last-days",
    help="Summarize issues updated in the last N days (defaults to config)",
)

POST_OPTION = typer.Option(
    False, "--post/--no-post", help="Post summaries to Slack instead of printing"
)

CHANNEL_OPTION = typer.Option(
    None, "--channel", "-c", help="Slack channel to post to (defaults to SLACK_CHANNEL)"
)

MODEL_OPTION = typer.Option(
    None,
    "--model",
    "-m",
    help="AI model to use (e.g., 'openai:gpt-4o-mini')",
)

TOKEN_BUDGET_OPTION = typer.Option(
    None, "--token-budget", help="Maximum tokens per summarization chunk"
)

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
