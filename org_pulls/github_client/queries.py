"""GraphQL documents sent to the GitHub API."""

from ..config import PULL_REQUESTS_PER_REPOSITORY

ORG_OPEN_PULL_REQUESTS_QUERY = """
query getAllRepos($orgName: String!, $after: String, $pageSize: Int!) {
  organization(login: $orgName) {
    login
    repositories(first: $pageSize, orderBy: {field: NAME, direction: ASC}, after: $after) {
      totalCount
      nodes {
        name
        pullRequests(first: %d, states: OPEN) {
          nodes {
            number
            title
            author {
              login
            }
            createdAt
          }
        }
      }
      edges {
        cursor
      }
    }
  }
}
""" % PULL_REQUESTS_PER_REPOSITORY
