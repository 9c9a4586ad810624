"""Run the checker over lint targets, stopping at the first failure."""

import logging
from collections.abc import Iterable, Sequence

from lfw.checker import Checker
from lfw.errors import LintViolation
from lfw.models import LintTarget
from lfw.reporter import ResultReporter

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success. No detected EditorConfig lint errors."


def lint_targets(
    targets: Iterable[LintTarget],
    checker: Checker,
    configs: Sequence[str],
    reporter: ResultReporter,
    heading: str = "Linting package for basic formatting errors: {target}",
) -> int:
    """Check every target against every config in order; return the number linted.

    Raises LintViolation with the checker's raw output on the first non-zero
    exit. Remaining configs and targets are not run.
    """
    linted = 0
    for target in targets:
        reporter.progress("")
        reporter.progress(heading.format(target=target.label))
        for config in configs:
            result = checker.run(target.path, config)
            if not result.ok:
                logger.debug("Checker exited %d for %s with %s", result.returncode, target.label, config)
                raise LintViolation(target.label, config, result.output)
        reporter.success(SUCCESS_MESSAGE)
        linted += 1
    return linted
