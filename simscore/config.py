# config.py
from typing import FrozenSet

# Defaults
# Raw names only; parsing into enum members happens in modes.py.
# Pass mode= / mismatch= to SimilarityEngine or SimilarityConfig to start elsewhere.
DEFAULT_SIMILARITY_MODE: str = "cosine"
DEFAULT_MISMATCH_MODE: str = "bail"


# Failure reporting
# Returned by the sentinel-style entry points on any rejected computation.
# NOTE: a legitimate cosine similarity can also be -1.0 (opposite vectors);
# use score()/evaluate() when the two outcomes must be told apart.
FAILURE_SENTINEL: float = -1.0


# Mode rules (by SimilarityMode value)

# Modes that only make sense for vectors of the same length.
# Unequal lengths are then handled by the active mismatch mode.
ENFORCE_EQUAL_LENGTH: FrozenSet[str] = frozenset({
    "cosine",
    "tanimoto",
    "hamming",
})

# Modes where a single empty vector would divide by zero.
BAIL_ON_EMPTY_INPUT: FrozenSet[str] = frozenset({
    "cosine",
    "tanimoto",
    "ochiai",
})

# Modes that accept two empty vectors (everything else rejects them).
ALLOW_EMPTY_INPUTS: FrozenSet[str] = frozenset({
    "hamming",
})
