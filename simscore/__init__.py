from .modes import SimilarityMode, MismatchMode, ModeStack
from .results import (
    FailureKind, ScoreResult,
    SimilarityError, ConfigurationError, EmptyInputError, LengthMismatchError,
)
from .similarity_metrics import (
    cosine_similarity, tanimoto_similarity, ochiai_similarity,
    jaccard_index, jaccard_distance, dice_coefficient, hamming_distance,
    value_set,
)
from .dispatcher import SimilarityConfig, score, compute
from .vector_similarity import align_keys, score_named, compute_named
from .engine import SimilarityEngine
from .config import FAILURE_SENTINEL

__version__ = "0.1.0"

__all__ = [
    # modes & configuration
    "SimilarityMode", "MismatchMode", "ModeStack", "SimilarityConfig",
    # results & errors
    "FailureKind", "ScoreResult", "FAILURE_SENTINEL",
    "SimilarityError", "ConfigurationError", "EmptyInputError", "LengthMismatchError",
    # metric functions (no validation)
    "cosine_similarity", "tanimoto_similarity", "ochiai_similarity",
    "jaccard_index", "jaccard_distance", "dice_coefficient", "hamming_distance",
    "value_set",
    # validated scoring
    "score", "compute", "SimilarityEngine",
    # named-vector helpers
    "align_keys", "score_named", "compute_named",
]
