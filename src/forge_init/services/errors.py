"""Failures raised by init services.

Every expected problem (bad input, a blocked safety gate, git failing, a
file that cannot be read or written, malformed state on disk) surfaces as a
``ServiceFailure`` subclass. Each carries a stable ``code`` and an optional
one-line ``recovery_hint`` that the CLI prints under the error. Programmer
bugs keep raising ordinary exceptions.

Example:
    >>> failure = ValidationFailedError("bad root", recovery_hint="pick another")
    >>> (failure.code, str(failure), failure.recovery_hint)
    ('validation_failed', 'bad root', 'pick another')
"""

from __future__ import annotations

from typing import ClassVar, Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "policy_blocked",
    "external_command_failed",
    "io_failed",
    "unexpected_state",
]


class ServiceFailure(Exception):
    """Base class; chain the cause with ``raise ... from exc``."""

    code: ClassVar[ServiceFailureCode]

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Input rejected, e.g. a non-empty target directory without ``--force``."""

    code = "validation_failed"


class PolicyBlockedError(ServiceFailure):
    """A safety gate refused to continue, e.g. uncommitted changes."""

    code = "policy_blocked"


class ExternalCommandFailedError(ServiceFailure):
    code = "external_command_failed"


class IoFailedError(ServiceFailure):
    code = "io_failed"


class UnexpectedStateError(ServiceFailure):
    """A file on disk exists but cannot be interpreted."""

    code = "unexpected_state"
