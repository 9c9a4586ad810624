"""Tests for the halt-on-first-failure lint loop."""

from pathlib import Path

import pytest

from lfw.errors import LintViolation
from lfw.models import CheckerResult, LintTarget
from lfw.reporter import ResultReporter
from lfw.runner import SUCCESS_MESSAGE, lint_targets
from tests.fakes import FakeChecker, output_of

GENERAL = "general.json"
MARKDOWN = "markdown.json"


def _targets(*names: str) -> list[LintTarget]:
    return [LintTarget(path=Path("/pkgs") / name, label=f"/pkgs/{name}") for name in names]


def test_runs_both_configs_for_every_target(reporter: ResultReporter) -> None:
    checker = FakeChecker()
    linted = lint_targets(_targets("abs", "trim"), checker, [GENERAL, MARKDOWN], reporter)
    assert linted == 2
    assert checker.calls == [("abs", GENERAL), ("abs", MARKDOWN), ("trim", GENERAL), ("trim", MARKDOWN)]
    out = output_of(reporter.out)
    assert "Linting package for basic formatting errors: /pkgs/abs" in out
    assert out.count(SUCCESS_MESSAGE) == 2


def test_markdown_failure_halts_after_first_target(reporter: ResultReporter) -> None:
    checker = FakeChecker({("abs", MARKDOWN): CheckerResult(returncode=1, output="README.md: Wrong indent")})
    with pytest.raises(LintViolation) as excinfo:
        lint_targets(_targets("abs", "trim"), checker, [GENERAL, MARKDOWN], reporter)
    assert checker.calls == [("abs", GENERAL), ("abs", MARKDOWN)]
    assert excinfo.value.target == "/pkgs/abs"
    assert excinfo.value.config == MARKDOWN
    assert excinfo.value.detail == "README.md: Wrong indent"
    assert SUCCESS_MESSAGE not in output_of(reporter.out)


def test_general_failure_skips_markdown_check(reporter: ResultReporter) -> None:
    checker = FakeChecker({("abs", GENERAL): CheckerResult(returncode=2, output="lib/main.js: Trailing whitespace")})
    with pytest.raises(LintViolation):
        lint_targets(_targets("abs"), checker, [GENERAL, MARKDOWN], reporter)
    assert checker.calls == [("abs", GENERAL)]


def test_no_targets_lints_nothing(reporter: ResultReporter) -> None:
    checker = FakeChecker()
    assert lint_targets([], checker, [GENERAL, MARKDOWN], reporter) == 0
    assert checker.calls == []


def test_custom_heading(reporter: ResultReporter) -> None:
    heading = "Linting files for basic formatting errors..."
    lint_targets(_targets("stage"), FakeChecker(), [GENERAL], reporter, heading=heading)
    assert "Linting files for basic formatting errors..." in output_of(reporter.out)
