"""Base service ABC.

Services extend BaseService and implement _run(request) -> T. They raise
ServiceFailure on expected errors. __call__ catches ServiceFailure and
invokes _handle_failure; the default re-raises. Collaborator exceptions
(failed git commands, OS errors) are translated into ServiceFailure at the
boundary so callers only need to handle one family.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..exec import CommandExecutionError, CommandParseError
from ..templates import TemplateReadError
from .errors import ExternalCommandFailedError, IoFailedError, ServiceFailure

R = TypeVar("R")
T = TypeVar("T")


class BaseService(ABC, Generic[R, T]):
    """Abstract base for orchestration services.

    Subclasses implement _run(request) -> T. __call__ wraps _run, translates
    collaborator errors, catches ServiceFailure, and invokes _handle_failure.
    Default _handle_failure re-raises; override for recovery.
    """

    def __call__(self, request: R) -> T:
        try:
            try:
                return self._run(request)
            except (CommandExecutionError, CommandParseError) as exc:
                raise ExternalCommandFailedError(str(exc)) from exc
            except TemplateReadError as exc:
                raise IoFailedError(str(exc)) from exc
            except OSError as exc:
                raise IoFailedError(str(exc)) from exc
        except ServiceFailure as e:
            return self._handle_failure(e)

    @abstractmethod
    def _run(self, request: R) -> T:
        """Execute the service logic. Raise ServiceFailure on expected errors."""
        ...

    def _handle_failure(self, error: ServiceFailure) -> T:
        """Handle ServiceFailure. Default re-raises; override for recovery."""
        raise error
