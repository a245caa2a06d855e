"""
Domain error taxonomy.

Every failure that crosses a layer boundary is a ``DomainError`` tagged with an
``ErrorKind``. Callers branch on ``error.kind``, never on the identity of a
particular exception instance.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INTERNAL = "INTERNAL"


class DomainError(Exception):
    """Failure tagged with a kind, a caller-safe message and an optional cause."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    def is_kind(self, *kinds: ErrorKind) -> bool:
        return self.kind in kinds

    def __repr__(self) -> str:
        return f"DomainError(kind={self.kind.value}, message={self.message!r})"


# Caller-facing messages
TASK_NOT_FOUND = "task not found"
COMMENT_NOT_FOUND = "comment not found"
LABEL_NOT_FOUND = "label not found"
LABEL_ALREADY_EXISTS = "label already exists"
ID_MUST_BE_UUID = "the id must be uuid"
ID_MUST_BE_VALID_UUID = "the id must be a valid (non-nil) uuid"
CANNOT_PARSE_TIME_LAYOUT = "cannot parse timelayout"
INTERNAL_SERVER_ERROR = "internal server error"


def not_found(message: str) -> DomainError:
    return DomainError(ErrorKind.NOT_FOUND, message)


def already_exists(message: str, cause: Optional[BaseException] = None) -> DomainError:
    return DomainError(ErrorKind.ALREADY_EXISTS, message, cause)


def invalid_argument(message: str, cause: Optional[BaseException] = None) -> DomainError:
    return DomainError(ErrorKind.INVALID_ARGUMENT, message, cause)


def internal(cause: Optional[BaseException] = None) -> DomainError:
    return DomainError(ErrorKind.INTERNAL, INTERNAL_SERVER_ERROR, cause)
