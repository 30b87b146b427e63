"""
Mode dispatch for pairwise alignment.

The set of aligners is closed: "global", "local" and "affine". Each maps to
a concrete class exposing run(target, query, scoring, keep_matrices).
"""

from typing import Literal, Optional, Union

from dpalign.align.affine import GlobalAffineAligner
from dpalign.align.linear import GlobalAligner, LocalAligner
from dpalign.align.result import AlignmentResult
from dpalign.core.scoring import ScoringModel
from dpalign.errors import UnknownModeError

Aligner = Union[GlobalAligner, LocalAligner, GlobalAffineAligner]
Mode = Literal["global", "local", "affine"]

# Run order used by the CLI
ALIGNERS = {
    "global": GlobalAligner,
    "local": LocalAligner,
    "affine": GlobalAffineAligner,
}

MODE_TITLES = {
    "global": "Needleman-Wunsch",
    "local": "Smith-Waterman",
    "affine": "Needleman-Wunsch-Gotoh",
}


def get_aligner(mode: Mode) -> Aligner:
    """Return a fresh aligner for mode."""
    try:
        return ALIGNERS[mode]()
    except (KeyError, TypeError):
        raise UnknownModeError(mode, ALIGNERS) from None


def align(
    target,
    query,
    mode: Mode = "global",
    scoring: Optional[ScoringModel] = None,
    keep_matrices: bool = False
) -> AlignmentResult:
    """
    Align two sequences.

    Args:
        target: Target sequence (string or Sequence)
        query: Query sequence (string or Sequence)
        mode: "global" (Needleman-Wunsch), "local" (Smith-Waterman) or
            "affine" (Needleman-Wunsch-Gotoh)
        scoring: Scoring model, defaults to ScoringModel()
        keep_matrices: Attach the filled DP matrices to the result

    Returns:
        AlignmentResult

    Example:
        >>> align("ACCAGT", "ACAGC").query_aligned
        'AC-AGC'
        >>> align("ACCAGT", "ACAGC", mode="local").target_aligned
        'CAG'
    """
    return get_aligner(mode).run(target, query, scoring, keep_matrices=keep_matrices)
