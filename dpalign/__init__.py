"""
dpalign: Pairwise Sequence Alignment by Dynamic Programming

This package provides:
- Needleman-Wunsch global alignment (linear gap penalty)
- Smith-Waterman local alignment (linear gap penalty)
- Needleman-Wunsch-Gotoh global alignment (affine gap penalty)

Matrices are stored as NumPy arrays and traced back without pointer
arrays, by re-deriving which recurrence branch produced each cell.
"""

__version__ = "0.1.0"
__author__ = "dpalign Contributors"

from dpalign.core import (
    Sequence,
    ScoringModel,
    ScoreMatrix,
    GAP_CHAR,
)

from dpalign.align import (
    AlignmentResult,
    GlobalAligner,
    LocalAligner,
    GlobalAffineAligner,
    align,
    get_aligner,
)

from dpalign.errors import (
    DPAlignError,
    SequenceIndexError,
    SequenceTypeError,
    ScoringError,
    UnknownModeError,
)

__all__ = [
    # Primitives
    "Sequence",
    "ScoringModel",
    "ScoreMatrix",
    "GAP_CHAR",
    # Aligners
    "AlignmentResult",
    "GlobalAligner",
    "LocalAligner",
    "GlobalAffineAligner",
    "align",
    "get_aligner",
    # Errors
    "DPAlignError",
    "SequenceIndexError",
    "SequenceTypeError",
    "ScoringError",
    "UnknownModeError",
]
