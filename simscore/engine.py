"""
SimilarityEngine: stack-based wrapper around the stateless dispatcher.

Keeps a "current" similarity mode and mismatch mode on two ModeStacks so that
callers can push an override, compute, and pop back to what was there
before. Each compute call snapshots the stack tops into a SimilarityConfig
and hands it to dispatcher.score().

The stacks are plain mutable instance state with no locking. Share an engine
across threads only behind the caller's own lock, or pass explicit
SimilarityConfig values to dispatcher.score() instead.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Sequence, Union

from . import config as CFG
from .dispatcher import SimilarityConfig, score
from .modes import MismatchMode, ModeStack, SimilarityMode
from .results import ConfigurationError, ScoreResult
from .vector_similarity import score_named

__all__ = ["SimilarityEngine"]


class SimilarityEngine:

    def __init__(
        self,
        mode: Union[SimilarityMode, str, None] = None,
        mismatch: Union[MismatchMode, str, None] = None,
    ):
        self._sim_modes: ModeStack[SimilarityMode] = ModeStack(
            SimilarityMode.parse(mode if mode is not None else CFG.DEFAULT_SIMILARITY_MODE)
        )
        self._mismatch_modes: ModeStack[MismatchMode] = ModeStack(
            MismatchMode.parse(mismatch if mismatch is not None else CFG.DEFAULT_MISMATCH_MODE)
        )

    # similarity mode stack

    def push_sim_mode(self, mode: Union[SimilarityMode, str]) -> None:
        self._sim_modes.push(SimilarityMode.parse(mode))

    def pop_sim_mode(self) -> None:
        """Restore the previous mode; the default is never popped."""
        self._sim_modes.pop()

    def current_sim_mode(self) -> Optional[SimilarityMode]:
        return self._sim_modes.current()

    @contextmanager
    def sim_mode(self, mode: Union[SimilarityMode, str]) -> Iterator[SimilarityMode]:
        with self._sim_modes.override(SimilarityMode.parse(mode)) as m:
            yield m

    # mismatch mode stack

    def push_mismatch_mode(self, mode: Union[MismatchMode, str]) -> None:
        self._mismatch_modes.push(MismatchMode.parse(mode))

    def pop_mismatch_mode(self) -> None:
        self._mismatch_modes.pop()

    def current_mismatch_mode(self) -> Optional[MismatchMode]:
        return self._mismatch_modes.current()

    @contextmanager
    def mismatch_mode(self, mode: Union[MismatchMode, str]) -> Iterator[MismatchMode]:
        with self._mismatch_modes.override(MismatchMode.parse(mode)) as m:
            yield m

    # scoring

    def config(self) -> SimilarityConfig:
        """Snapshot of the current stack tops."""
        mode = self.current_sim_mode()
        mismatch = self.current_mismatch_mode()
        if mode is None or mismatch is None:
            raise ConfigurationError("similarity engine has no current mode")
        return SimilarityConfig(mode=mode, mismatch=mismatch)

    def _snapshot(self) -> SimilarityConfig:
        # Same as config(), but lets the dispatcher report a missing mode
        # as a failed result instead of raising.
        return SimilarityConfig(mode=self.current_sim_mode(), mismatch=self.current_mismatch_mode())

    def evaluate(self, a: Sequence[float], b: Sequence[float]) -> ScoreResult:
        return score(a, b, self._snapshot())

    def compute(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Score under the current modes; -1.0 when the input is rejected."""
        return self.evaluate(a, b).as_sample()

    def evaluate_named(self, a: Dict[str, float], b: Dict[str, float]) -> ScoreResult:
        return score_named(a, b, self._snapshot())

    def compute_named(self, a: Dict[str, float], b: Dict[str, float]) -> float:
        return self.evaluate_named(a, b).as_sample()

    def __repr__(self) -> str:
        return (
            f"SimilarityEngine(mode={self.current_sim_mode()}, "
            f"mismatch={self.current_mismatch_mode()})"
        )
