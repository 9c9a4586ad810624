"""File a lint-failure issue and attach it to its parent as a sub-issue.

The four GraphQL calls are strictly ordered, each needing the previous
result. Nothing is retried and nothing is rolled back: if linking fails the
child issue stays open and unlinked.
"""

import logging
from datetime import datetime, timezone

from lfw.issue_body import issue_title, render_issue_body
from lfw.models import FilingResult, LintFailureRequest, SubIssueLink
from lfw.providers.base import IssueTracker, parse_issue_number
from lfw.reporter import ResultReporter

logger = logging.getLogger(__name__)


def file_lint_sub_issue(
    request: LintFailureRequest,
    tracker: IssueTracker,
    owner: str,
    repo: str,
    reporter: ResultReporter | None = None,
    now: datetime | None = None,
) -> FilingResult:
    """Run the four steps in order and return the created child and its link.

    The parent number is checked before any request, so a bad value cannot
    leave an orphaned child behind. The log is decoded as UTF-8; undecodable
    bytes become U+FFFD, since the body has to travel as JSON text.
    """

    def progress(message: str) -> None:
        logger.info(message)
        if reporter:
            reporter.progress(message)

    parent_number = parse_issue_number(request.parent_issue_number)

    log_contents = request.error_log_path.read_text(encoding="utf-8", errors="replace")
    body = render_issue_body(
        request.lint_type,
        request.workflow_url,
        now or datetime.now(timezone.utc),
        log_contents,
    )

    progress(f"Fetching repository ID for {owner}/{repo}...")
    repository_id = tracker.fetch_repository_id(owner, repo)

    progress("Creating child issue...")
    child = tracker.create_issue(repository_id, issue_title(request.lint_type), body)
    progress(f"Created issue #{child.number}")

    progress(f"Fetching parent issue #{parent_number}...")
    parent_id = tracker.fetch_issue_id(owner, repo, parent_number)

    progress(f"Linking #{child.number} as a sub-issue of #{parent_number}...")
    sub_issue_number = tracker.link_sub_issue(parent_id, child.id)

    link = SubIssueLink(
        parent_issue_id=parent_id,
        child_issue_id=child.id,
        parent_issue_number=parent_number,
        sub_issue_number=sub_issue_number,
    )
    return FilingResult(child=child, link=link)
