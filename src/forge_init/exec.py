"""Typed subprocess execution for the external tools forge-init drives.

Commands are described by a ``CommandRequest`` and executed by a
``CommandRunner``. The default runner wraps ``subprocess.run``; tests inject
recording runners instead. ``run_typed`` pairs a request with an output
parser and raises ``CommandExecutionError`` or ``CommandParseError`` so callers
never inspect return codes themselves.

Example:
    >>> CommandResult(argv=("git",), returncode=0, stdout=" x\\n", stderr="").output
    'x'
"""

import subprocess
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar

from . import log

ParsedT = TypeVar("ParsedT")


@dataclass(frozen=True)
class CommandRequest:
    """One command invocation; stdout and stderr are always captured as text."""

    argv: tuple[str, ...]

    @property
    def display(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Stripped stderr, falling back to stdout (git reports on either)."""
        return (self.stderr or self.stdout or "").strip()


class CommandRunner(Protocol):
    """Executes a request; returns ``None`` when the executable is missing."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """``CommandRunner`` backed by ``subprocess.run``."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv), capture_output=True, text=True, check=False
            )
        except FileNotFoundError:
            return None
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandSpec(Generic[ParsedT]):
    """A request plus the parser that turns its successful output into a value."""

    request: CommandRequest
    parser: Callable[[CommandResult], ParsedT]
    context: str | None = None


class CommandExecutionError(RuntimeError):
    """The command could not be started or exited non-zero.

    Attributes:
        request: The request that failed.
        detail: Human-readable summary including the command's own output.
        result: The captured result, or ``None`` when the executable is missing.
    """

    def __init__(
        self, request: CommandRequest, detail: str, result: CommandResult | None = None
    ) -> None:
        super().__init__(detail)
        self.request = request
        self.detail = detail
        self.result = result

    @classmethod
    def missing(cls, request: CommandRequest) -> "CommandExecutionError":
        name = request.argv[0] if request.argv else ""
        detail = f"missing required command: {name}" if name else "missing required command"
        return cls(request, detail)

    @classmethod
    def failed(cls, request: CommandRequest, result: CommandResult) -> "CommandExecutionError":
        detail = f"command failed: {request.display}"
        if result.output:
            detail = f"{detail}\n{result.output}"
        return cls(request, detail, result)


class CommandParseError(RuntimeError):
    """The command succeeded but its output did not parse."""

    def __init__(self, request: CommandRequest, detail: str, context: str | None = None) -> None:
        super().__init__(detail)
        self.request = request
        self.detail = detail
        self.context = context


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Run ``request`` without interpreting the result."""
    log.trace(f"$ {request.display}")
    return (runner or _DEFAULT_COMMAND_RUNNER).run(request)


def run_typed(spec: CommandSpec[ParsedT], *, runner: CommandRunner | None = None) -> ParsedT:
    """Run ``spec.request`` and parse its output.

    Raises:
        CommandExecutionError: When the executable is missing or the command fails.
        CommandParseError: When ``spec.parser`` rejects the output.
    """
    request = spec.request
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise CommandExecutionError.missing(request)
    if not result.ok:
        raise CommandExecutionError.failed(request, result)
    try:
        return spec.parser(result)
    except CommandParseError:
        raise
    except Exception as exc:
        where = f" ({spec.context})" if spec.context else ""
        raise CommandParseError(
            request, f"failed to parse command output{where}: {exc}", spec.context
        ) from exc


def parse_none(result: CommandResult) -> None:
    del result


def parse_stripped_stdout(result: CommandResult) -> str:
    """Return stripped stdout, failing when the command printed nothing."""
    value = (result.stdout or "").strip()
    if not value:
        raise ValueError("empty output")
    return value
