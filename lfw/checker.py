"""EditorConfig checker invocation.

The checker is an opaque external executable. ``Checker`` is the seam tests
replace with an in-memory fake; ``SubprocessChecker`` is the real thing.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from lfw.errors import CheckerMissing
from lfw.models import CheckerResult
from lfw.settings import LfwSettings

logger = logging.getLogger(__name__)


class Checker(ABC):
    @abstractmethod
    def run(self, target: Path, config: str) -> CheckerResult:
        """Run the checker inside target using config; never raises on lint errors."""


class SubprocessChecker(Checker):
    def __init__(self, executable: str, node_bin: str | None = "node", flags: list[str] | None = None) -> None:
        self._executable = executable
        self._node_bin = node_bin
        self._flags = flags if flags is not None else ["--ignore-defaults"]

    @classmethod
    def from_settings(cls, settings: LfwSettings) -> "SubprocessChecker":
        # cwd changes per target, so anchor repo-relative paths now
        return cls(
            executable=_executable(settings),
            node_bin=settings.node_bin or None,
            flags=list(settings.editorconfig_flags),
        )

    def command(self, config: str) -> list[str]:
        cmd = [self._node_bin] if self._node_bin else []
        return [*cmd, self._executable, *self._flags, "--config", config]

    def run(self, target: Path, config: str) -> CheckerResult:
        cmd = self.command(config)
        logger.debug("Running %s in %s", cmd, target)
        try:
            result = subprocess.run(cmd, cwd=target, capture_output=True, text=True, check=False)
        except FileNotFoundError as exc:
            raise CheckerMissing(f"Cannot run EditorConfig checker: {exc}") from exc
        return CheckerResult(returncode=result.returncode, output=(result.stdout or "") + (result.stderr or ""))


def _executable(settings: LfwSettings) -> str:
    # A bare name run without node is left for PATH lookup; node takes a script path.
    name = settings.editorconfig_checker
    if not settings.node_bin and "/" not in name and os.sep not in name:
        return name
    return _absolute(name)


def _absolute(path: str) -> str:
    return str(Path(path).resolve())


def config_paths(settings: LfwSettings) -> list[str]:
    """General config first, then the Markdown one."""
    return [_absolute(settings.editorconfig_config), _absolute(settings.editorconfig_markdown_config)]
