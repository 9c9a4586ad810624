"""Enumerate lint targets: package directories, or a staged list of files."""

import logging
import os
import re
import shutil
from collections.abc import Iterable
from pathlib import Path

from lfw.errors import NoTargets
from lfw.models import LintTarget

logger = logging.getLogger(__name__)

DEFAULT_FILTER = ".*/.*"
PACKAGE_MANIFEST = "package.json"


def find_packages(root: Path, pattern: str | None = None) -> list[LintTarget]:
    """Return every package directory under root, optionally filtered.

    A package is a directory holding a package.json. The pattern is a regex
    matched against the whole absolute path of that package.json, the way
    ``find -regex`` matches (e.g. ``.*/math/base/special/abs/.*``).
    Dependencies vendored inside a package's own node_modules are skipped.
    """
    try:
        regex = re.compile(pattern or DEFAULT_FILTER)
    except re.error as exc:
        raise NoTargets(f"Invalid package filter '{pattern}': {exc}") from exc

    root = root.resolve()
    if not root.is_dir():
        logger.warning("Package root %s does not exist", root)
        return []

    targets = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d != "node_modules" and not d.startswith("."))
        if PACKAGE_MANIFEST not in filenames:
            continue
        manifest = Path(dirpath) / PACKAGE_MANIFEST
        if regex.fullmatch(manifest.as_posix()):
            targets.append(LintTarget(path=Path(dirpath), label=dirpath))
    logger.debug("Found %d package(s) under %s matching %s", len(targets), root, regex.pattern)
    return targets


def _relative_destination(path: Path, cwd: Path) -> Path:
    """Where path lands inside the staging directory.

    Absolute paths are made relative to cwd when under it, else their anchor is
    dropped. ``..`` and ``.`` components are stripped the way tar does.
    """
    if path.is_absolute():
        try:
            path = path.relative_to(cwd)
        except ValueError:
            path = path.relative_to(path.anchor)
    parts = [part for part in path.parts if part not in ("..", ".")]
    return Path(*parts)


def stage_files(files: Iterable[str | Path], staging_dir: Path) -> LintTarget:
    """Copy files into a freshly cleared staging directory, keeping their relative layout."""
    paths = [Path(f) for f in files]
    if not paths:
        raise NoTargets("No files to lint")
    missing = [str(p) for p in paths if not p.is_file()]
    if missing:
        raise NoTargets(f"Files not found: {', '.join(missing)}")

    if staging_dir.exists():
        shutil.rmtree(staging_dir)
    staging_dir.mkdir(parents=True)

    cwd = Path.cwd()
    staging_root = staging_dir.resolve()
    for path in paths:
        dest = staging_dir / _relative_destination(path, cwd)
        if not dest.resolve().is_relative_to(staging_root):
            raise NoTargets(f"Cannot stage '{path}' outside {staging_dir}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(path, dest)
    logger.debug("Staged %d file(s) in %s", len(paths), staging_dir)
    return LintTarget(path=staging_dir.resolve(), label=str(staging_dir))
