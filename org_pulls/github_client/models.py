"""Pydantic models for GitHub GraphQL organization pull request data."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

# GitHub renders pull requests from deleted accounts with this login
GHOST_LOGIN = "ghost"


class GraphQLErrorLocation(BaseModel):
    """Position in the query document an error refers to."""

    line: int = Field(..., description="Line number in the query (integer)")
    column: int = Field(..., description="Column number in the query (integer)")


class GraphQLErrorExtensions(BaseModel):
    """Extra error details attached by the GraphQL server."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    code: str | None = Field(None, description="Machine readable error code")
    type_name: str | None = Field(
        None, alias="typeName", description="Schema type the error refers to"
    )
    page_size: str | int | None = Field(
        None, alias="pageSize", description="Page size variable reported back"
    )


class GraphQLError(BaseModel):
    """Single entry of a GraphQL response's top-level ``errors`` list.

    API Reference: https://docs.github.com/en/graphql/overview/about-the-graphql-api
    """

    message: str = Field(..., description="Human readable error message")
    path: list[str | int] = Field(
        default_factory=list, description="Response path the error applies to"
    )
    extensions: GraphQLErrorExtensions | None = Field(
        None, description="Server specific error details"
    )
    locations: list[GraphQLErrorLocation] = Field(
        default_factory=list, description="Query document locations"
    )

    def __str__(self) -> str:
        return self.message


class GitHubAuthor(BaseModel):
    """Pull request author (``Actor`` in the GraphQL schema)."""

    login: str = Field(..., description="GitHub username/login (string)")


class GitHubPullRequest(BaseModel):
    """Open pull request node."""

    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(..., description="Pull request number within the repository")
    title: str = Field(..., description="Pull request title")
    author: GitHubAuthor | None = Field(
        None, description="Author, null when the account was deleted"
    )
    created_at: datetime = Field(
        ..., alias="createdAt", description="Timestamp of creation (RFC 3339)"
    )

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Treat timestamps without an offset as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def author_login(self) -> str:
        return self.author.login if self.author else GHOST_LOGIN


class PullRequestConnection(BaseModel):
    """``pullRequests`` connection of a repository."""

    nodes: list[GitHubPullRequest] = Field(default_factory=list)


class GitHubRepository(BaseModel):
    """Repository node with its first open pull requests."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Repository name")
    pull_requests: PullRequestConnection = Field(
        default_factory=PullRequestConnection, alias="pullRequests"
    )


class RepositoryEdge(BaseModel):
    """Edge of the repositories connection, used only for its cursor."""

    cursor: str = Field(..., description="Opaque pagination cursor")


class RepositoryConnection(BaseModel):
    """One page of an organization's repositories."""

    model_config = ConfigDict(populate_by_name=True)

    total_count: int = Field(0, alias="totalCount")
    nodes: list[GitHubRepository] = Field(default_factory=list)
    edges: list[RepositoryEdge] = Field(default_factory=list)


class GitHubOrganization(BaseModel):
    """Organization with one page of repositories."""

    login: str = Field(..., description="Organization login")
    repositories: RepositoryConnection = Field(default_factory=RepositoryConnection)


class OrganizationData(BaseModel):
    """``data`` member of the organization query response."""

    organization: GitHubOrganization | None = None


class GraphQLResponse(BaseModel):
    """Full GraphQL response envelope."""

    errors: list[GraphQLError] | None = None
    data: OrganizationData | None = None


class PullRequestRecord(BaseModel):
    """Denormalized open pull request ready for reporting.

    Age is computed when the record is read from the API response, so it
    stays stable for the rest of the run.
    """

    model_config = ConfigDict(frozen=True)

    organization: str = Field(..., description="Organization login")
    repository: str = Field(..., description="Repository name")
    number: int = Field(..., description="Pull request number")
    title: str = Field(..., description="Pull request title")
    author: str = Field(..., description="Author login")
    created_at: datetime = Field(..., description="Timestamp of creation")
    age: timedelta = Field(..., description="Age at the time it was fetched")

    @property
    def url(self) -> str:
        return f"github.com/{self.organization}/{self.repository}/pull/{self.number}"

    @property
    def age_days(self) -> int:
        """Whole days of age, truncated toward zero."""
        return int(self.age.total_seconds() / 86400)

    def format_line(self) -> str:
        """Format the record as a single report line."""
        return f"{self.age_days} days | {self.url}: {self.title} <{self.author}>"

    @classmethod
    def from_node(
        cls,
        organization: str,
        repository: str,
        pull_request: GitHubPullRequest,
        now: datetime,
    ) -> "PullRequestRecord":
        """Build a record from a pull request node as seen at ``now``."""
        return cls(
            organization=organization,
            repository=repository,
            number=pull_request.number,
            title=pull_request.title,
            author=pull_request.author_login,
            created_at=pull_request.created_at,
            age=now - pull_request.created_at,
        )
