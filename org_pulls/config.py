"""Configuration for the GitHub GraphQL integration."""

import os
from typing import Optional

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

# Repositories requested per page; a shorter page marks the last one
PAGE_SIZE = 100
PULL_REQUESTS_PER_REPOSITORY = 10

# Per-request timeout in seconds; None disables httpx's 5s default
REQUEST_TIMEOUT: Optional[float] = None

DEFAULT_ORGANIZATIONS = (
    "gdbu",
    "hatch1fy",
    "hatchify",
    "hatch-integrations",
    "vroomy",
)


class GitHubConfig:
    """Configuration class for GitHub API access."""

    def __init__(self) -> None:
        """Initialize GitHub configuration from environment variables."""
        self.token: Optional[str] = os.getenv("GITHUB_TOKEN") or None
        self.endpoint: str = os.getenv("GITHUB_GRAPHQL_URL", GITHUB_GRAPHQL_URL)

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )
