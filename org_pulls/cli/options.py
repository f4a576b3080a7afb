"""Shared CLI option definitions."""

import typer

ORG_OPTION = typer.Option(
    None,
    "--org",
    "-o",
    help="GitHub organization to include (can be used multiple times)",
)

TOKEN_OPTION = typer.Option(
    None, "--token", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Show debug logging on stderr"
)
