"""Shared pydantic models — single-use records passed between the pipeline stages."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class LintFailureRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    workflow_url: str
    lint_type: str  # e.g. "JavaScript", "Markdown"
    parent_issue_number: str  # passed through unparsed
    error_log_path: Path


class CreatedIssue(BaseModel):
    """Returned by create_issue — just what the link step and the report need."""

    model_config = ConfigDict(frozen=True)

    id: str  # GraphQL node ID
    number: int
    url: str | None = None


class SubIssueLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    parent_issue_id: str
    child_issue_id: str
    parent_issue_number: int
    sub_issue_number: int


class FilingResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    child: CreatedIssue
    link: SubIssueLink


class LintTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path  # directory the checker runs in
    label: str  # what progress lines print


class CheckerResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0
