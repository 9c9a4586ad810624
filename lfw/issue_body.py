"""Markdown body for a lint-failure issue."""

import re
from datetime import datetime, timezone

_BACKTICK_RUN = re.compile(r"`+")


def issue_title(lint_type: str) -> str:
    return f"Fix {lint_type} lint errors"


def _fence_for(content: str) -> str:
    # A fence must be longer than any backtick run inside the block.
    longest = max((len(m.group()) for m in _BACKTICK_RUN.finditer(content)), default=0)
    return "`" * max(3, longest + 1)


def render_issue_body(lint_type: str, workflow_url: str, timestamp: datetime, log_contents: str) -> str:
    """Render the issue body with the log embedded verbatim in a fenced block.

    Naive timestamps are taken to be UTC already. The result is plain text;
    callers send it as a GraphQL variable so the JSON encoder handles quoting.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    date = timestamp.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    fence = _fence_for(log_contents)

    lines = [
        f"## {lint_type} Linting Failures",
        "",
        f"Linting failures were detected in the automated {lint_type} lint workflow run.",
        "",
        "### Workflow Details",
        "",
        f"-   Run: {workflow_url}",
        f"-   Type: {lint_type} Linting",
        f"-   Date: {date} UTC",
        "",
        "### Error Details",
        "",
        fence,
        log_contents,
        fence,
    ]
    return "\n".join(lines)
