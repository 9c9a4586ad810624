"""In-memory fakes for the tracker and checker seams."""

from pathlib import Path

from rich.console import Console

from lfw.checker import Checker
from lfw.models import CheckerResult, CreatedIssue
from lfw.providers.base import IssueTracker


class FakeTracker(IssueTracker):
    """In-memory tracker recording every call; ``fail_at`` names a step that raises."""

    def __init__(self, fail_at: str | None = None, error: Exception | None = None) -> None:
        self.calls: list[str] = []
        self.created: list[tuple[str, str, str]] = []
        self._fail_at = fail_at
        self._error = error

    def _step(self, name: str) -> None:
        self.calls.append(name)
        if name == self._fail_at:
            raise self._error or RuntimeError(name)

    def fetch_repository_id(self, owner: str, repo: str) -> str:
        self._step("fetch_repository_id")
        return "R_repo"

    def create_issue(self, repository_id: str, title: str, body: str) -> CreatedIssue:
        self._step("create_issue")
        self.created.append((repository_id, title, body))
        return CreatedIssue(id="I_child", number=101, url="https://github.com/stdlib-js/stdlib/issues/101")

    def fetch_issue_id(self, owner: str, repo: str, number: int | str) -> str:
        self._step("fetch_issue_id")
        return "I_parent"

    def link_sub_issue(self, parent_issue_id: str, child_issue_id: str) -> int:
        self._step("link_sub_issue")
        return 101


class FakeChecker(Checker):
    """Checker fake: canned results keyed by (target dir name, config file name)."""

    def __init__(self, failures: dict[tuple[str, str], CheckerResult] | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self._failures = failures or {}

    def run(self, target: Path, config: str) -> CheckerResult:
        key = (target.name, Path(config).name)
        self.calls.append(key)
        return self._failures.get(key, CheckerResult(returncode=0))


def output_of(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]
