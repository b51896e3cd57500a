from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INSUFFICIENT_DATA = "InsufficientData"
    DUPLICATE_OR_DEGENERATE_X = "DuplicateOrDegenerateX"
    DEGENERATE_SYSTEM = "DegenerateSystem"
    DEGENERATE_VARIANCE = "DegenerateVariance"
    INVALID_INPUT = "InvalidInput"
    NO_CRITICAL_POINT = "NoCriticalPoint"


class ParabolaFitError(ValueError):
    """Base class for every failure the fitting core can report.

    ``kind`` lets a caller map the failure to its own message without
    matching on the exception class.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InsufficientDataError(ParabolaFitError):
    kind = ErrorKind.INSUFFICIENT_DATA


class DuplicateOrDegenerateXError(ParabolaFitError):
    kind = ErrorKind.DUPLICATE_OR_DEGENERATE_X


class DegenerateSystemError(ParabolaFitError):
    kind = ErrorKind.DEGENERATE_SYSTEM


class DegenerateVarianceError(ParabolaFitError):
    kind = ErrorKind.DEGENERATE_VARIANCE


class InvalidInputError(ParabolaFitError):
    kind = ErrorKind.INVALID_INPUT


class NoCriticalPointError(ParabolaFitError):
    kind = ErrorKind.NO_CRITICAL_POINT
