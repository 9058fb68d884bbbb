"""Similarity / mismatch modes and the override stack that holds them."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Generic, Iterator, List, Optional, TypeVar, Union

from . import config as CFG
from .results import ConfigurationError

__all__ = [
    "SimilarityMode",
    "MismatchMode",
    "ModeStack",
]


def _normalize_name(name: str) -> str:
    """'JaccardIndex', 'jaccard-index', ' JACCARD_INDEX ' -> 'jaccard_index'."""
    s = name.strip()
    out = []
    for i, ch in enumerate(s):
        if ch.isupper() and i > 0 and s[i - 1].islower():
            out.append("_")
        out.append(ch)
    return "".join(out).lower().replace("-", "_").replace(" ", "_")


class _ParsableMode(Enum):

    @classmethod
    def parse(cls, value: Union["_ParsableMode", str]):
        """Return the member for an enum value or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(
                f"Expected {cls.__name__} or str, got {type(value).__name__}"
            )
        key = _normalize_name(value)
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        valid = ", ".join(m.value for m in cls)
        raise ConfigurationError(f"Unknown {cls.__name__} {value!r} (expected one of: {valid})")

    def __str__(self) -> str:
        return self.value


class SimilarityMode(_ParsableMode):
    """Supported metrics. Closed set.

    Ochiai, both Jaccard modes and Dice treat each vector as the set of its
    distinct values: order and duplicates are ignored, so [1, 1, 2] and
    [2, 1] compare as identical. Do not use them where multiset semantics
    matter.
    """

    COSINE = "cosine"
    TANIMOTO = "tanimoto"
    OCHIAI = "ochiai"
    JACCARD_INDEX = "jaccard_index"
    JACCARD_DISTANCE = "jaccard_distance"
    DICE = "dice"
    HAMMING = "hamming"

    @property
    def requires_equal_length(self) -> bool:
        return self.value in CFG.ENFORCE_EQUAL_LENGTH

    @property
    def rejects_single_empty(self) -> bool:
        return self.value in CFG.BAIL_ON_EMPTY_INPUT

    @property
    def allows_both_empty(self) -> bool:
        return self.value in CFG.ALLOW_EMPTY_INPUTS


class MismatchMode(_ParsableMode):
    """What to do when an equal-length metric gets vectors of different lengths."""

    BAIL = "bail"
    TRUNCATE = "truncate"


T = TypeVar("T")


class ModeStack(Generic[T]):
    """
    LIFO override stack that is never empty.

    The bottom element is the default and cannot be popped, so current()
    always has something to return under normal use. Not thread-safe.
    """

    def __init__(self, default: T):
        self._items: List[T] = [default]

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> Optional[T]:
        """Remove the top override. No-op (returns None) at the default."""
        if len(self._items) > 1:
            return self._items.pop()
        return None

    def current(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    @property
    def depth(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @contextmanager
    def override(self, value: T) -> Iterator[T]:
        """Push ``value`` for the duration of the block."""
        self.push(value)
        try:
            yield value
        finally:
            self.pop()

    def __repr__(self) -> str:
        return f"ModeStack({self._items!r})"
