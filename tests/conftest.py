"""
Shared test configuration for pytest.
"""

import sys
from pathlib import Path

import pytest

# Make the package importable without an install
sys.path.insert(0, str(Path(__file__).parent.parent))

from simscore import SimilarityEngine  # noqa: E402


@pytest.fixture
def engine() -> SimilarityEngine:
    """Fresh engine with the default modes (cosine, bail)."""
    return SimilarityEngine(mode="cosine", mismatch="bail")
