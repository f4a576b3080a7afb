"""Async GitHub GraphQL client using httpx."""

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import ValidationError

from .. import __version__
from ..config import GITHUB_GRAPHQL_URL, REQUEST_TIMEOUT
from .models import GraphQLError, GraphQLResponse

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Base class for failures talking to the GitHub GraphQL API."""


class GitHubTransportError(GitHubAPIError):
    """The request could not be sent or the response body could not be read."""


class GitHubStatusError(GitHubAPIError):
    """GitHub answered with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"github returned {status_code}")
        self.status_code = status_code


class GitHubResponseError(GitHubAPIError):
    """The response body is not the JSON document we asked for."""


class GitHubGraphQLError(GitHubAPIError):
    """A 200 response carried a non-empty top-level ``errors`` list."""

    def __init__(self, error: GraphQLError):
        super().__init__(f"failed to make graphql request: {error}")
        self.error = error


class GitHubGraphQLClient:
    """Minimal GraphQL client for api.github.com.

    Use as an async context manager so the underlying connection pool is
    closed when the run ends::

        async with GitHubGraphQLClient(token) as client:
            response = await client.execute(query, variables)
    """

    def __init__(
        self,
        token: str,
        endpoint: str = GITHUB_GRAPHQL_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = REQUEST_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            token: GitHub personal access token
            endpoint: GraphQL endpoint URL
            transport: Optional httpx transport, used by tests to stub GitHub
            timeout: Seconds to wait on each request, or None for no limit
        """
        if not token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.endpoint = endpoint
        self.headers = {
            "Authorization": f"token {token}",
            "Content-Type": "application/json",
            "User-Agent": f"find-org-pulls/{__version__}",
        }
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubGraphQLClient":
        self._client = httpx.AsyncClient(
            headers=self.headers, timeout=self.timeout, transport=self._transport
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def execute(self, query: str, variables: dict[str, Any]) -> GraphQLResponse:
        """Execute a GraphQL query.

        Args:
            query: GraphQL document
            variables: Values for the document's variables

        Returns:
            Parsed response whose ``errors`` list is empty or absent

        Raises:
            GitHubTransportError: Request or body read failed
            GitHubStatusError: Status code other than 200
            GitHubResponseError: Body is not valid JSON for the schema
            GitHubGraphQLError: Response carried GraphQL errors
        """
        if self._client is None:
            raise RuntimeError("GitHubGraphQLClient must be used as a context manager")

        try:
            response = await self._client.post(
                self.endpoint, json={"query": query, "variables": variables}
            )
        except httpx.HTTPError as e:
            raise GitHubTransportError(f"failed to make request: {e}") from e

        if response.status_code != 200:
            raise GitHubStatusError(response.status_code)

        try:
            result = GraphQLResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise GitHubResponseError(f"failed to unmarshal response: {e}") from e

        if result.errors:
            # Only the first error is surfaced
            raise GitHubGraphQLError(result.errors[0])

        logger.debug("GraphQL request to %s succeeded", self.endpoint)
        return result
