from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PATH = "invalid_path"
    NOT_FOUND = "not_found"
    IO_FAILURE = "io_failure"


class RetrievalError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPath(RetrievalError):
    kind = ErrorKind.INVALID_PATH


class NotFound(RetrievalError):
    kind = ErrorKind.NOT_FOUND


class IOFailure(RetrievalError):
    kind = ErrorKind.IO_FAILURE
