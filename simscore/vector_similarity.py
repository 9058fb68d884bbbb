# simscore/vector_similarity.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from .dispatcher import SimilarityConfig, score
from .results import ScoreResult

__all__ = [
    "align_keys",
    "named_to_vectors",
    "score_named",
    "compute_named",
]


def align_keys(a: Dict[str, float], b: Dict[str, float]) -> list[str]:
    """Sorted intersection of feature names (only shared features are comparable)."""
    return sorted(set(a).intersection(b))


def named_to_vectors(a: Dict[str, float], b: Dict[str, float]) -> Tuple[List[float], List[float]]:
    """Values of a and b over their shared keys, in sorted key order."""
    keys = align_keys(a, b)
    return [float(a[k]) for k in keys], [float(b[k]) for k in keys]


def score_named(
    a: Dict[str, float],
    b: Dict[str, float],
    config: Optional[SimilarityConfig] = None,
) -> ScoreResult:
    """
    Score two name-keyed feature dicts over their intersecting keys.

    Keys present on only one side are dropped, so the aligned vectors always
    have equal length. No shared keys means two empty vectors, which only
    hamming accepts.
    """
    u, v = named_to_vectors(a, b)
    return score(u, v, config)


def compute_named(
    a: Dict[str, float],
    b: Dict[str, float],
    config: Optional[SimilarityConfig] = None,
) -> float:
    """Sentinel-style score_named: the value, or -1.0 when rejected."""
    return score_named(a, b, config).as_sample()
