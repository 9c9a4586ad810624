"""Shared test fixtures."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

import lfw.settings as settings_module
from lfw.models import LintFailureRequest
from lfw.reporter import ResultReporter
from lfw.settings import LfwSettings

_ENV_VARS = [
    "GITHUB_TOKEN",
    "LFW_GITHUB_TOKEN",
    "LFW_PROFILE",
    "LFW_GITHUB_OWNER",
    "LFW_GITHUB_REPO",
    "LFW_NODE_BIN",
    "LFW_EDITORCONFIG_CHECKER",
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's config file and CI token out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "CONFIG_PATH", tmp_path / "no-config.toml")
    settings_module._load_toml.cache_clear()
    yield
    settings_module._load_toml.cache_clear()


@pytest.fixture
def settings() -> LfwSettings:
    return LfwSettings(github_token="ghp_test")  # type: ignore[call-arg]


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    path = tmp_path / "log.txt"
    path.write_text("SyntaxError: x")
    return path


@pytest.fixture
def lint_request(log_file: Path) -> LintFailureRequest:
    return LintFailureRequest(
        workflow_url="https://ci/run/1",
        lint_type="JavaScript",
        parent_issue_number="42",
        error_log_path=log_file,
    )


@pytest.fixture
def reporter() -> ResultReporter:
    return ResultReporter(
        out=Console(file=StringIO(), highlight=False, soft_wrap=True),
        err=Console(file=StringIO(), highlight=False, soft_wrap=True),
    )
