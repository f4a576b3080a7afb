"""GitHub client package for GraphQL API interaction."""

from .client import (
    GitHubAPIError,
    GitHubGraphQLClient,
    GitHubGraphQLError,
    GitHubResponseError,
    GitHubStatusError,
    GitHubTransportError,
)
from .fetcher import OrganizationFetcher
from .models import GraphQLError, GraphQLResponse, PullRequestRecord

__all__ = [
    "GitHubAPIError",
    "GitHubGraphQLClient",
    "GitHubGraphQLError",
    "GitHubResponseError",
    "GitHubStatusError",
    "GitHubTransportError",
    "GraphQLError",
    "GraphQLResponse",
    "OrganizationFetcher",
    "PullRequestRecord",
]
