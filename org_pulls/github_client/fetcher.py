"""Walk an organization's repositories and yield its open pull requests."""

import logging
from collections.abc import AsyncIterator, Callable
from datetime import datetime, timezone
from typing import Any

from ..config import PAGE_SIZE
from .client import GitHubGraphQLClient, GitHubResponseError
from .models import PullRequestRecord
from .queries import ORG_OPEN_PULL_REQUESTS_QUERY

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrganizationFetcher:
    """Pages through one organization at a time with cursor-forward paging."""

    def __init__(
        self,
        client: GitHubGraphQLClient,
        page_size: int = PAGE_SIZE,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the fetcher.

        Args:
            client: Open GraphQL client shared by all organizations
            page_size: Repositories requested per page
            clock: Source of the current time used to compute record ages
        """
        self.client = client
        self.page_size = page_size
        self.clock = clock

    async def iter_pull_requests(self, org: str) -> AsyncIterator[PullRequestRecord]:
        """Yield one record per open pull request in ``org``.

        Any GitHubAPIError raised by the client ends the walk immediately.
        """
        variables: dict[str, Any] = {
            "orgName": org,
            "after": None,
            "pageSize": self.page_size,
        }
        page_number = 1

        while True:
            logger.info("Getting %s repositories, page #%d", org, page_number)
            response = await self.client.execute(
                ORG_OPEN_PULL_REQUESTS_QUERY, variables
            )

            organization = response.data.organization if response.data else None
            if organization is None:
                raise GitHubResponseError(f"organization {org} not found in response")

            now = self.clock()
            repositories = organization.repositories
            for repository in repositories.nodes:
                for pull_request in repository.pull_requests.nodes:
                    yield PullRequestRecord.from_node(
                        organization.login, repository.name, pull_request, now
                    )

            if len(repositories.edges) < self.page_size:
                return

            variables["after"] = repositories.edges[-1].cursor
            page_number += 1

    async def fetch_pull_requests(self, org: str) -> list[PullRequestRecord]:
        """Collect every open pull request in ``org`` into a list."""
        return [record async for record in self.iter_pull_requests(org)]
