"""
Result and error types for similarity scoring.

Every rejected computation is described by a FailureKind. The compute path
never raises for bad input; it returns a ScoreResult, and unwrap() turns a
failed one into the matching SimilarityError.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

from . import config as CFG

if TYPE_CHECKING:
    from .modes import SimilarityMode


class SimilarityError(Exception):
    """Base exception for all similarity scoring errors."""
    pass


class ConfigurationError(SimilarityError):
    """
    Error in the similarity configuration.

    Raised when:
    - A mode or mismatch mode name is unknown
    - No current mode is available on an engine stack
    """
    pass


class EmptyInputError(SimilarityError):
    """
    Error for empty vectors the active mode cannot score.

    Raised when:
    - Both vectors are empty and the mode does not allow it
    - One vector is empty under cosine, tanimoto or ochiai
    """
    pass


class LengthMismatchError(SimilarityError):
    """
    Error for vectors of different lengths.

    Raised when:
    - The mode requires equal lengths and the bail policy is active
    """

    def __init__(self, message: str, len_a: Optional[int] = None, len_b: Optional[int] = None):
        super().__init__(message)
        self.len_a = len_a
        self.len_b = len_b


class FailureKind(Enum):
    CONFIGURATION_UNAVAILABLE = "configuration_unavailable"
    EMPTY_INPUT_REJECTED = "empty_input_rejected"
    LENGTH_MISMATCH_REJECTED = "length_mismatch_rejected"

    @property
    def error_class(self) -> type:
        return _ERRORS[self]


_ERRORS = {
    FailureKind.CONFIGURATION_UNAVAILABLE: ConfigurationError,
    FailureKind.EMPTY_INPUT_REJECTED: EmptyInputError,
    FailureKind.LENGTH_MISMATCH_REJECTED: LengthMismatchError,
}


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one similarity computation.

    Exactly one of ``value`` / ``failure`` is set. ``truncated`` is True when
    the longer vector was cut down under the truncate mismatch policy.
    ``lengths`` holds the two input lengths on rejections.
    """

    value: Optional[float] = None
    failure: Optional[FailureKind] = None
    mode: Optional["SimilarityMode"] = None
    truncated: bool = False
    detail: str = ""
    lengths: Optional[Tuple[int, int]] = None

    @classmethod
    def success(cls, value: float, mode: "SimilarityMode" = None,
                truncated: bool = False) -> "ScoreResult":
        return cls(value=float(value), mode=mode, truncated=truncated)

    @classmethod
    def rejected(cls, failure: FailureKind, mode: "SimilarityMode" = None,
                 detail: str = "",
                 lengths: Optional[Tuple[int, int]] = None) -> "ScoreResult":
        return cls(failure=failure, mode=mode, detail=detail, lengths=lengths)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def as_sample(self) -> float:
        """Value on success, FAILURE_SENTINEL (-1.0) otherwise."""
        if self.failure is not None:
            return CFG.FAILURE_SENTINEL
        return self.value

    def unwrap(self) -> float:
        """Value on success; raises the SimilarityError matching the failure."""
        if self.failure is None:
            return self.value
        message = self.detail or self.failure.value.replace("_", " ")
        if self.failure is FailureKind.LENGTH_MISMATCH_REJECTED and self.lengths:
            raise LengthMismatchError(message, *self.lengths)
        raise self.failure.error_class(message)
