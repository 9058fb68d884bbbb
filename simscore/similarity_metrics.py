# similarity_metrics.py
from __future__ import annotations

import math
from typing import Callable, Dict, FrozenSet, Sequence

import numpy as np

from .modes import SimilarityMode

__all__ = [
    # vector helpers
    "as_vector",
    "dot",
    "magnitude",
    "value_set",

    # magnitude-based (equal length)
    "cosine_similarity",
    "tanimoto_similarity",

    # set-based (any length)
    "ochiai_similarity",
    "jaccard_index",
    "jaccard_distance",
    "dice_coefficient",

    # positional (equal length)
    "hamming_distance",

    "METRICS",
]

# No validation happens here: the dispatcher checks lengths and emptiness
# before calling any of these. Calling them directly on inputs the dispatcher
# would reject gives NaN/inf or raises ZeroDivisionError.


#  HELPERS

def as_vector(u: Sequence[float]) -> np.ndarray:
    """1-D float64 view of u (no copy when u already is one).

    Scalars and nested / 2-D input raise ValueError instead of being flattened.
    """
    arr = np.asarray(u, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"expected a 1-D vector, got {arr.ndim}-D input with shape {arr.shape}")
    return arr


def dot(u: Sequence[float], v: Sequence[float]) -> float:
    """Σ u[i]·v[i]."""
    return float(np.dot(as_vector(u), as_vector(v)))


def magnitude(u: Sequence[float]) -> float:
    """Euclidean norm sqrt(Σ u[i]²)."""
    return float(np.linalg.norm(as_vector(u)))


def value_set(u: Sequence[float]) -> FrozenSet[float]:
    """
    Distinct values of u.

    Order and multiplicity are discarded: [1, 1, 2] and [2, 1] give the same
    set. This is what the set-based metrics compare, not a multiset.
    """
    return frozenset(float(x) for x in as_vector(u))


#  COSINE / TANIMOTO

def cosine_similarity(u: Sequence[float], v: Sequence[float]) -> float:
    """dot(u, v) / (‖u‖·‖v‖), in [-1, 1]. Zero-norm input yields NaN."""
    a, b = as_vector(u), as_vector(v)
    num = np.dot(a, b)
    den = np.linalg.norm(a) * np.linalg.norm(b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def tanimoto_similarity(u: Sequence[float], v: Sequence[float]) -> float:
    """dot(u, v) / (‖u‖² + ‖v‖² − dot(u, v))."""
    a, b = as_vector(u), as_vector(v)
    na = np.linalg.norm(a)
    nb = np.linalg.norm(b)
    ab = np.dot(a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(ab) / np.float64(na * na + nb * nb - ab))


#  SET METRICS (distinct values)

def ochiai_similarity(u: Sequence[float], v: Sequence[float]) -> float:
    """|A∩B| / sqrt(|A|·|B|) over the value sets (set sizes, not norms)."""
    A, B = value_set(u), value_set(v)
    return len(A & B) / math.sqrt(len(A) * len(B))


def jaccard_index(u: Sequence[float], v: Sequence[float]) -> float:
    """|A∩B| / |A∪B| over the value sets."""
    A, B = value_set(u), value_set(v)
    return len(A & B) / len(A | B)


def jaccard_distance(u: Sequence[float], v: Sequence[float]) -> float:
    """1 − jaccard_index."""
    return 1.0 - jaccard_index(u, v)


def dice_coefficient(u: Sequence[float], v: Sequence[float]) -> float:
    """2·|A∩B| / (|A| + |B|) over the value sets."""
    A, B = value_set(u), value_set(v)
    return 2.0 * len(A & B) / (len(A) + len(B))


#  HAMMING

def hamming_distance(u: Sequence[float], v: Sequence[float]) -> float:
    """Number of positions where u and v differ; 0.0 for two empty vectors."""
    a, b = as_vector(u), as_vector(v)
    if a.size == 0:
        return 0.0
    return float(np.count_nonzero(a != b))


METRICS: Dict[SimilarityMode, Callable[[Sequence[float], Sequence[float]], float]] = {
    SimilarityMode.COSINE: cosine_similarity,
    SimilarityMode.TANIMOTO: tanimoto_similarity,
    SimilarityMode.OCHIAI: ochiai_similarity,
    SimilarityMode.JACCARD_INDEX: jaccard_index,
    SimilarityMode.JACCARD_DISTANCE: jaccard_distance,
    SimilarityMode.DICE: dice_coefficient,
    SimilarityMode.HAMMING: hamming_distance,
}
