from .base import BaseService
from .errors import (
    ExternalCommandFailedError,
    IoFailedError,
    PolicyBlockedError,
    ServiceFailure,
    UnexpectedStateError,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "ExternalCommandFailedError",
    "IoFailedError",
    "PolicyBlockedError",
    "ServiceFailure",
    "UnexpectedStateError",
    "ValidationFailedError",
]
