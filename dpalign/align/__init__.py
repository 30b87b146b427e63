"""
Pairwise alignment algorithms.

- GlobalAligner: Needleman-Wunsch, linear gaps
- LocalAligner: Smith-Waterman, linear gaps
- GlobalAffineAligner: Needleman-Wunsch-Gotoh, affine gaps
"""

from dpalign.align.result import AlignmentResult
from dpalign.align.linear import GlobalAligner, LocalAligner
from dpalign.align.affine import GlobalAffineAligner
from dpalign.align.pairwise import (
    ALIGNERS,
    MODE_TITLES,
    align,
    get_aligner,
)

__all__ = [
    "AlignmentResult",
    "GlobalAligner",
    "LocalAligner",
    "GlobalAffineAligner",
    "ALIGNERS",
    "MODE_TITLES",
    "align",
    "get_aligner",
]
