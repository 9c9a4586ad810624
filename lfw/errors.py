"""Error taxonomy. Every error is terminal: the CLI reports it and exits 1."""


class LfwError(RuntimeError):
    """Base class. ``detail`` carries raw API or tool output when there is any."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


class MissingCredential(LfwError):
    pass


class MissingLogFile(LfwError):
    pass


class LookupFailed(LfwError):
    pass


class CreateFailed(LfwError):
    pass


class LinkFailed(LfwError):
    pass


class NoTargets(LfwError):
    pass


class CheckerMissing(LfwError):
    pass


class LintViolation(LfwError):
    def __init__(self, target: str, config: str, output: str) -> None:
        super().__init__(f"EditorConfig lint errors in {target} (config: {config})", detail=output)
        self.target = target
        self.config = config
