"""
Dispatcher: validate two vectors against a configuration and score them.

score() is the stateless entry point. It takes an explicit, immutable
SimilarityConfig, applies the empty-input and mismatched-length rules of the
configured mode, and routes to one metric from similarity_metrics.METRICS.

Pipeline:
  config → empty checks → length check (bail | truncate) → metric
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from . import config as CFG
from .modes import MismatchMode, SimilarityMode
from .results import FailureKind, ScoreResult
from .similarity_metrics import METRICS, as_vector

logger = logging.getLogger(__name__)

__all__ = [
    "SimilarityConfig",
    "score",
    "compute",
    "truncate_to_shorter",
]


def _default_mode() -> SimilarityMode:
    return SimilarityMode.parse(CFG.DEFAULT_SIMILARITY_MODE)


def _default_mismatch() -> MismatchMode:
    return MismatchMode.parse(CFG.DEFAULT_MISMATCH_MODE)


@dataclass(frozen=True)
class SimilarityConfig:
    """Metric + mismatch policy for one computation.

    Defaults are read from config.py when the instance is created. Strings
    are accepted and parsed.
    """

    mode: Optional[SimilarityMode] = field(default_factory=_default_mode)
    mismatch: Optional[MismatchMode] = field(default_factory=_default_mismatch)

    def __post_init__(self):
        if self.mode is not None:
            object.__setattr__(self, "mode", SimilarityMode.parse(self.mode))
        if self.mismatch is not None:
            object.__setattr__(self, "mismatch", MismatchMode.parse(self.mismatch))

    def with_mode(self, mode: Union[SimilarityMode, str]) -> "SimilarityConfig":
        return replace(self, mode=SimilarityMode.parse(mode))

    def with_mismatch(self, mismatch: Union[MismatchMode, str]) -> "SimilarityConfig":
        return replace(self, mismatch=MismatchMode.parse(mismatch))


def truncate_to_shorter(a: np.ndarray, b: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (shorter, prefix of the longer with the shorter's length).

    Argument order is not preserved: the shorter vector always comes first.
    With equal lengths ``b`` is taken as the shorter one.
    """
    short, long_ = (a, b) if len(a) < len(b) else (b, a)
    return short, long_[: len(short)]


def _reject(
    kind: FailureKind,
    mode: Optional[SimilarityMode],
    detail: str,
    lengths: Optional[Tuple[int, int]] = None,
) -> ScoreResult:
    logger.debug("similarity rejected (%s, mode=%s): %s", kind.value, mode, detail)
    return ScoreResult.rejected(kind, mode=mode, detail=detail, lengths=lengths)


def score(
    a: Sequence[float],
    b: Sequence[float],
    config: Optional[SimilarityConfig] = None,
) -> ScoreResult:
    """Score two vectors; every rejection comes back as a failed ScoreResult."""
    cfg = config if config is not None else SimilarityConfig()
    mode = cfg.mode
    if mode is None:
        return _reject(FailureKind.CONFIGURATION_UNAVAILABLE, None, "no similarity mode set")

    u = as_vector(a)
    v = as_vector(b)
    n_u, n_v = len(u), len(v)

    # both empty: only modes that define a result for it (hamming) go on
    if n_u == 0 and n_v == 0 and not mode.allows_both_empty:
        return _reject(FailureKind.EMPTY_INPUT_REJECTED, mode, "both vectors are empty", (0, 0))

    # one empty would divide by zero
    if mode.rejects_single_empty and (n_u == 0 or n_v == 0):
        return _reject(
            FailureKind.EMPTY_INPUT_REJECTED, mode,
            f"empty vector not allowed (lengths {n_u} and {n_v})",
            (n_u, n_v),
        )

    truncated = False
    if mode.requires_equal_length and n_u != n_v:
        mismatch = cfg.mismatch
        if mismatch is None:
            return _reject(FailureKind.CONFIGURATION_UNAVAILABLE, mode, "no mismatch mode set", (n_u, n_v))
        if mismatch is MismatchMode.BAIL:
            return _reject(
                FailureKind.LENGTH_MISMATCH_REJECTED, mode,
                f"vector lengths differ ({n_u} != {n_v})",
                (n_u, n_v),
            )
        # truncate, then go straight to the equal-length metric below
        u, v = truncate_to_shorter(u, v)
        truncated = True
        logger.debug("truncated vectors to length %d (mode=%s, was %d/%d)", len(u), mode, n_u, n_v)

    value = METRICS[mode](u, v)
    return ScoreResult.success(value, mode=mode, truncated=truncated)


def compute(
    a: Sequence[float],
    b: Sequence[float],
    config: Optional[SimilarityConfig] = None,
) -> float:
    """Sentinel-style score: the value, or -1.0 on any rejection."""
    return score(a, b, config).as_sample()
