"""Abstract base class for issue trackers that support sub-issues."""

from abc import ABC, abstractmethod

from lfw.errors import LookupFailed
from lfw.models import CreatedIssue


class IssueTracker(ABC):
    @abstractmethod
    def fetch_repository_id(self, owner: str, repo: str) -> str: ...

    @abstractmethod
    def create_issue(self, repository_id: str, title: str, body: str) -> CreatedIssue: ...

    @abstractmethod
    def fetch_issue_id(self, owner: str, repo: str, number: int | str) -> str: ...

    @abstractmethod
    def link_sub_issue(self, parent_issue_id: str, child_issue_id: str) -> int:
        """Attach child to parent; returns the confirmed sub-issue number."""


def parse_issue_number(value: int | str) -> int:
    """Return value as a positive issue number or raise LookupFailed."""
    try:
        number = int(value.strip()) if isinstance(value, str) else int(value)
    except ValueError:
        raise LookupFailed(f"Failed to fetch issue ID: '{value}' is not an issue number") from None
    if number < 1:
        raise LookupFailed(f"Failed to fetch issue ID: '{value}' is not an issue number")
    return number
