"""
Alignment primitives: sequences, scoring and DP matrices.
"""

from dpalign.core.sequence import Sequence, as_sequence
from dpalign.core.scoring import (
    ScoringModel,
    DEFAULT_MATCH,
    DEFAULT_MISMATCH,
    DEFAULT_GAP_OPEN,
    DEFAULT_GAP_EXTEND,
    GAP_CHAR,
)
from dpalign.core.matrix import ScoreMatrix

__all__ = [
    "Sequence",
    "as_sequence",
    "ScoringModel",
    "DEFAULT_MATCH",
    "DEFAULT_MISMATCH",
    "DEFAULT_GAP_OPEN",
    "DEFAULT_GAP_EXTEND",
    "GAP_CHAR",
    "ScoreMatrix",
]
