"""LFW CLI — all commands."""

from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.table import Table

from lfw.checker import Checker, SubprocessChecker, config_paths
from lfw.errors import LfwError
from lfw.filer import file_lint_sub_issue
from lfw.loader import load_request, require_token
from lfw.log import setup_logging
from lfw.packages import find_packages, stage_files
from lfw.providers.base import IssueTracker
from lfw.providers.github import GitHubProvider
from lfw.reporter import ResultReporter
from lfw.runner import lint_targets
from lfw.settings import LfwSettings, get_settings

app = typer.Typer(
    help="lint-failure-wrangler: GitHub sub-issues for lint failures + EditorConfig checks",
    no_args_is_help=True,
)

ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-P", help="Profile name from ~/.config/lfw/config.toml"),
]

STAGING_SUBDIR = "editorconfig-checker"


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    setup_logging(verbose)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def get_tracker(settings: LfwSettings) -> IssueTracker:
    return GitHubProvider.from_settings(settings, require_token(settings))


def get_checker(settings: LfwSettings) -> Checker:
    return SubprocessChecker.from_settings(settings)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("file-sub-issue")
def file_sub_issue(
    workflow_url: Annotated[str, typer.Argument(help="URL of the failing workflow run")],
    lint_type: Annotated[str, typer.Argument(help="Linter label, e.g. JavaScript")],
    parent_issue_number: Annotated[str, typer.Argument(help="Issue the new issue is attached to")],
    error_log_file: Annotated[Path, typer.Argument(help="File holding the lint output")],
    profile: ProfileOpt = None,
    owner: Annotated[str | None, typer.Option("--owner", help="Repository owner")] = None,
    repo: Annotated[str | None, typer.Option("--repo", help="Repository name")] = None,
) -> None:
    """Create an issue for lint failures and link it as a sub-issue of the parent."""
    settings = get_settings(profile=profile)
    reporter = ResultReporter()
    try:
        request = load_request(workflow_url, lint_type, parent_issue_number, error_log_file, settings)
        result = file_lint_sub_issue(
            request,
            get_tracker(settings),
            owner or settings.github_owner,
            repo or settings.github_repo,
            reporter=reporter,
        )
    except LfwError as exc:
        raise typer.Exit(reporter.fail(exc))

    reporter.success(
        f"Created sub-issue #{result.child.number} under parent issue #{result.link.parent_issue_number}"
    )
    if result.child.url:
        reporter.progress(f"  {result.child.url}")


@app.command("lint-editorconfig")
def lint_editorconfig(
    packages_filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Regex on package.json paths, e.g. '.*/math/base/special/abs/.*'"),
    ] = None,
    root: Annotated[Path | None, typer.Option("--root", help="Directory to search for packages")] = None,
    profile: ProfileOpt = None,
) -> None:
    """Lint every package for EditorConfig compliance, stopping at the first failure."""
    settings = get_settings(profile=profile)
    reporter = ResultReporter()
    try:
        targets = find_packages(root or settings.packages_root, packages_filter)
        if not targets:
            reporter.progress("No packages matched; nothing to lint.")
            return
        lint_targets(targets, get_checker(settings), config_paths(settings), reporter)
    except LfwError as exc:
        raise typer.Exit(reporter.fail(exc))


@app.command("lint-editorconfig-files")
def lint_editorconfig_files(
    files: Annotated[list[Path], typer.Argument(help="Files to lint, e.g. output of git diff --name-only")],
    profile: ProfileOpt = None,
) -> None:
    """Copy FILES into a clean staging directory and lint them there."""
    settings = get_settings(profile=profile)
    reporter = ResultReporter()
    try:
        target = stage_files(files, settings.build_dir / STAGING_SUBDIR)
        lint_targets(
            [target],
            get_checker(settings),
            config_paths(settings),
            reporter,
            heading="Linting files for basic formatting errors...",
        )
    except LfwError as exc:
        raise typer.Exit(reporter.fail(exc))


@app.command("config-show")
def config_show(profile: ProfileOpt = None) -> None:
    """Show resolved configuration (masks credentials)."""
    settings = get_settings(profile=profile)

    def mask(val: str | None) -> str:
        if not val:
            return "[dim](not set)[/dim]"
        if len(val) <= 5:
            return "***"
        return f"...{val[-5:]}"

    table = Table(title="LFW Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("github_token", mask(settings.github_token.get_secret_value() if settings.github_token else None))
    table.add_row("github_owner", settings.github_owner)
    table.add_row("github_repo", settings.github_repo)
    table.add_row("graphql_url", settings.graphql_url)
    table.add_row("node_bin", settings.node_bin or "[dim](none)[/dim]")
    table.add_row("editorconfig_checker", settings.editorconfig_checker)
    table.add_row("editorconfig_config", settings.editorconfig_config)
    table.add_row("editorconfig_markdown_config", settings.editorconfig_markdown_config)
    table.add_row("editorconfig_flags", " ".join(settings.editorconfig_flags))
    table.add_row("packages_root", str(settings.packages_root))
    table.add_row("build_dir", str(settings.build_dir))

    rprint(table)
