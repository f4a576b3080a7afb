"""Concurrent collection of open pull requests across organizations."""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ..github_client.client import GitHubAPIError
from ..github_client.models import PullRequestRecord

logger = logging.getLogger(__name__)


class PullRequestSource(Protocol):
    """Anything that can stream one organization's open pull requests."""

    def iter_pull_requests(self, org: str) -> AsyncIterator[PullRequestRecord]: ...


@dataclass
class OrganizationResult:
    """Completion signal for one organization's worker."""

    organization: str
    record_count: int = 0
    error: GitHubAPIError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class CollectionResult:
    """Records from every organization, sorted oldest first."""

    records: list[PullRequestRecord] = field(default_factory=list)
    organizations: list[OrganizationResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def failed(self) -> list[OrganizationResult]:
        return [result for result in self.organizations if not result.succeeded]


async def _walk_organization(
    fetcher: PullRequestSource,
    org: str,
    queue: "asyncio.Queue[PullRequestRecord | OrganizationResult]",
) -> OrganizationResult:
    result = OrganizationResult(organization=org)
    try:
        async for record in fetcher.iter_pull_requests(org):
            await queue.put(record)
            result.record_count += 1
    except GitHubAPIError as e:
        logger.error("error walking %s: %s", org, e)
        result.error = e
    else:
        logger.info("Finished with %s", org)
    finally:
        # Done marker is always sent so the collector can stop draining
        await queue.put(result)
    return result


async def collect_pull_requests(
    fetcher: PullRequestSource, organizations: Sequence[str]
) -> CollectionResult:
    """Fetch all organizations concurrently and gather their records.

    One task runs per organization. Records stream through a single-slot
    queue, so a worker waits until the collector has taken its previous
    record. A failing organization contributes what it sent before the
    failure and does not stop the others.

    Args:
        fetcher: Source of records, normally an OrganizationFetcher
        organizations: Organization logins to walk

    Returns:
        CollectionResult with records sorted ascending by creation time
    """
    queue: asyncio.Queue[PullRequestRecord | OrganizationResult] = asyncio.Queue(
        maxsize=1
    )
    tasks = [
        asyncio.create_task(_walk_organization(fetcher, org, queue))
        for org in organizations
    ]

    records: list[PullRequestRecord] = []
    done: list[OrganizationResult] = []
    while len(done) < len(tasks):
        item = await queue.get()
        if isinstance(item, OrganizationResult):
            done.append(item)
        else:
            records.append(item)

    # Re-raises anything that is not a GitHub API failure
    results = await asyncio.gather(*tasks)

    records.sort(key=lambda record: record.created_at)
    logger.debug(
        "Collected %d records from %d organizations", len(records), len(results)
    )
    return CollectionResult(records=records, organizations=list(results))
