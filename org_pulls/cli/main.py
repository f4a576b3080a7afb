"""Main CLI entry point."""

import asyncio
from collections.abc import Sequence

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import DEFAULT_ORGANIZATIONS, GitHubConfig
from ..github_client.client import GitHubGraphQLClient
from ..github_client.fetcher import OrganizationFetcher
from ..logging_config import setup_logging
from ..report.buckets import classify
from ..report.collector import CollectionResult, collect_pull_requests
from ..report.printer import ReportPrinter
from .options import ORG_OPTION, TOKEN_OPTION, VERBOSE_OPTION

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="find-org-pulls",
    help="Report open pull requests across GitHub organizations by age",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


async def _collect(
    token: str, endpoint: str, organizations: Sequence[str]
) -> CollectionResult:
    async with GitHubGraphQLClient(token, endpoint=endpoint) as client:
        fetcher = OrganizationFetcher(client)
        return await collect_pull_requests(fetcher, organizations)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def report(
    orgs: list[str] | None = ORG_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print open pull requests of every organization, oldest first.

    Examples:
        find-org-pulls report
        find-org-pulls report --org hatchify --org vroomy
    """
    setup_logging(verbose)

    config = GitHubConfig()
    if token:
        config.token = token
    try:
        config.validate()
    except ValueError:
        console.print("Failed to get github token")
        return

    organizations = list(orgs) if orgs else list(DEFAULT_ORGANIZATIONS)
    assert config.token is not None  # guaranteed by validate above
    collection = asyncio.run(_collect(config.token, config.endpoint, organizations))

    ReportPrinter(console).print_report(collection, classify(collection.records))


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from org_pulls import __version__

    console.print(f"find-org-pulls v{__version__}")


if __name__ == "__main__":
    app()
