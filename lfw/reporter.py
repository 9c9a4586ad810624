"""Human-readable progress and failure output, plus exit-code mapping."""

from rich.console import Console
from rich.markup import escape

from lfw.errors import LfwError

EXIT_OK = 0
EXIT_ERROR = 1


class ResultReporter:
    """Progress lines go to ``out``, failures to ``err``.

    Tool and API output is printed with markup disabled so brackets in lint
    logs are not swallowed by rich.
    """

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out = out or Console(highlight=False, soft_wrap=True)
        self.err = err or Console(stderr=True, highlight=False, soft_wrap=True)

    def progress(self, message: str) -> None:
        self.out.print(message, markup=False)

    def success(self, message: str) -> None:
        self.out.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.err.print(f"[red]Error:[/red] {escape(message)}")

    def raw(self, output: str) -> None:
        self.err.print(output, markup=False)

    def fail(self, exc: LfwError) -> int:
        self.error(str(exc))
        if exc.detail:
            self.raw(exc.detail)
        return EXIT_ERROR
