"""Tests for ResultReporter."""

from lfw.errors import LinkFailed, LintViolation
from lfw.reporter import EXIT_ERROR, ResultReporter
from tests.fakes import output_of


def test_progress_goes_to_out(reporter: ResultReporter) -> None:
    reporter.progress("Fetching repository ID...")
    assert "Fetching repository ID..." in output_of(reporter.out)
    assert output_of(reporter.err) == ""


def test_fail_writes_message_and_detail_to_err(reporter: ResultReporter) -> None:
    code = reporter.fail(LinkFailed("Failed to add sub-issue", detail='{"errors": [{"message": "nope"}]}'))
    assert code == EXIT_ERROR
    err = output_of(reporter.err)
    assert "Failed to add sub-issue" in err
    assert '"message": "nope"' in err
    assert output_of(reporter.out) == ""


def test_tool_output_brackets_not_treated_as_markup(reporter: ResultReporter) -> None:
    reporter.fail(LintViolation("/pkg", "conf.json", "[red] literal [/red] and [bold]"))
    assert "[red] literal [/red] and [bold]" in output_of(reporter.err)
