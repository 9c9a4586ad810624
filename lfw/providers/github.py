"""GitHub GraphQL API v4 tracker."""

import logging

import httpx

from lfw.errors import CreateFailed, LfwError, LinkFailed, LookupFailed
from lfw.models import CreatedIssue
from lfw.providers.base import IssueTracker, parse_issue_number
from lfw.settings import LfwSettings

logger = logging.getLogger(__name__)

ENDPOINT = "https://api.github.com/graphql"

_REPOSITORY_ID = """
query RepositoryId($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    id
  }
}
"""

_CREATE_ISSUE = """
mutation CreateIssue($repositoryId: ID!, $title: String!, $body: String!) {
  createIssue(input: { repositoryId: $repositoryId, title: $title, body: $body }) {
    issue {
      id
      number
      url
    }
  }
}
"""

_ISSUE_ID = """
query IssueId($owner: String!, $name: String!, $number: Int!) {
  repository(owner: $owner, name: $name) {
    issue(number: $number) {
      id
    }
  }
}
"""

_ADD_SUB_ISSUE = """
mutation AddSubIssue($issueId: ID!, $subIssueId: ID!) {
  addSubIssue(input: { issueId: $issueId, subIssueId: $subIssueId }) {
    issue {
      number
    }
    subIssue {
      number
    }
  }
}
"""


def _dig(data: dict | None, *keys: str):
    """Walk nested keys, returning None at the first missing or null step."""
    node = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


class GitHubProvider(IssueTracker):
    def __init__(self, token: str, endpoint: str = ENDPOINT, timeout: float = 30) -> None:
        if not token:
            raise ValueError("GitHub token is required")
        self._endpoint = endpoint
        self._timeout = timeout
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            # addSubIssue is still behind a feature preview
            "GraphQL-Features": "sub_issues",
        }

    @classmethod
    def from_settings(cls, settings: LfwSettings, token: str) -> "GitHubProvider":
        return cls(token, endpoint=settings.graphql_url, timeout=settings.http_timeout)

    def _gql(self, query: str, variables: dict, error: type[LfwError], step: str) -> dict:
        logger.debug("GraphQL %s: %s", step, variables)
        try:
            response = httpx.post(
                self._endpoint,
                json={"query": query, "variables": variables},
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as exc:
            raise error(f"Failed to {step}: {exc}") from exc

        if response.status_code == 401:
            raise error(
                f"Failed to {step}: GitHub API returned 401. Check that GITHUB_TOKEN is valid.",
                detail=response.text,
            )
        if response.is_error:
            raise error(f"Failed to {step}: HTTP {response.status_code}", detail=response.text)
        try:
            payload = response.json()
        except ValueError as exc:
            raise error(f"Failed to {step}: response is not JSON", detail=response.text) from exc
        if payload.get("errors"):
            raise error(f"Failed to {step}: GitHub API error", detail=response.text)
        logger.debug("GraphQL %s response: %s", step, response.text)
        return payload.get("data") or {}

    def fetch_repository_id(self, owner: str, repo: str) -> str:
        data = self._gql(_REPOSITORY_ID, {"owner": owner, "name": repo}, LookupFailed, "fetch repository ID")
        repository_id = _dig(data, "repository", "id")
        if not repository_id:
            raise LookupFailed(f"Failed to fetch repository ID for {owner}/{repo}", detail=str(data))
        return repository_id

    def create_issue(self, repository_id: str, title: str, body: str) -> CreatedIssue:
        data = self._gql(
            _CREATE_ISSUE,
            {"repositoryId": repository_id, "title": title, "body": body},
            CreateFailed,
            "create issue",
        )
        node = _dig(data, "createIssue", "issue") or {}
        if not node.get("id") or node.get("number") is None:
            raise CreateFailed("Failed to create issue: no issue ID returned", detail=str(data))
        return CreatedIssue(id=node["id"], number=node["number"], url=node.get("url"))

    def fetch_issue_id(self, owner: str, repo: str, number: int | str) -> str:
        number = parse_issue_number(number)
        data = self._gql(
            _ISSUE_ID,
            {"owner": owner, "name": repo, "number": number},
            LookupFailed,
            "fetch issue ID",
        )
        issue_id = _dig(data, "repository", "issue", "id")
        if not issue_id:
            raise LookupFailed(f"Failed to fetch issue ID for {owner}/{repo}#{number}", detail=str(data))
        return issue_id

    def link_sub_issue(self, parent_issue_id: str, child_issue_id: str) -> int:
        data = self._gql(
            _ADD_SUB_ISSUE,
            {"issueId": parent_issue_id, "subIssueId": child_issue_id},
            LinkFailed,
            "add sub-issue",
        )
        sub_issue_number = _dig(data, "addSubIssue", "subIssue", "number")
        if sub_issue_number is None:
            raise LinkFailed("Failed to add sub-issue: no sub-issue number returned", detail=str(data))
        return sub_issue_number
