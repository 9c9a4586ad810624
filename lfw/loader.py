"""Turn raw CLI arguments into a validated LintFailureRequest."""

import logging
from pathlib import Path

from lfw.errors import MissingCredential, MissingLogFile
from lfw.models import LintFailureRequest
from lfw.settings import LfwSettings

logger = logging.getLogger(__name__)


def require_token(settings: LfwSettings) -> str:
    token = settings.github_token.get_secret_value().strip() if settings.github_token else ""
    if not token:
        raise MissingCredential("GITHUB_TOKEN is not set. Export GITHUB_TOKEN or LFW_GITHUB_TOKEN.")
    return token


def load_request(
    workflow_url: str,
    lint_type: str,
    parent_issue_number: str,
    error_log_path: str | Path,
    settings: LfwSettings,
) -> LintFailureRequest:
    """Validate the credential and the log file; everything else passes through.

    The credential is checked first so a missing token fails before any
    filesystem or network access.
    """
    require_token(settings)

    path = Path(error_log_path)
    if not path.is_file():
        raise MissingLogFile(f"Error log file not found: {path}")

    logger.debug("Loaded request for %s lint failures (parent #%s)", lint_type, parent_issue_number)
    return LintFailureRequest(
        workflow_url=workflow_url,
        lint_type=lint_type,
        parent_issue_number=parent_issue_number,
        error_log_path=path,
    )
