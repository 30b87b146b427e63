"""
Scoring model for pairwise alignment.

A ScoringModel is a match/mismatch substitution score plus the gap
parameters. Penalties are stored as positive costs and subtracted in the
recurrences.
"""

import math
from dataclasses import dataclass
from numbers import Real

import numpy as np

from dpalign.core.sequence import Sequence
from dpalign.errors import ScoringError

# Default scoring
DEFAULT_MATCH = 1
DEFAULT_MISMATCH = -1
DEFAULT_GAP_OPEN = 2
DEFAULT_GAP_EXTEND = 1

GAP_CHAR = "-"


@dataclass(frozen=True)
class ScoringModel:
    """
    Substitution score and gap costs.

    Attributes:
        match: Score for identical symbols
        mismatch: Score for differing symbols
        gap_open: Cost of one gap position in linear models, and of the
            first position of a gap run in the affine model
        gap_extend: Cost of every further position of a gap run (affine only)
    """
    match: float = DEFAULT_MATCH
    mismatch: float = DEFAULT_MISMATCH
    gap_open: float = DEFAULT_GAP_OPEN
    gap_extend: float = DEFAULT_GAP_EXTEND

    def __post_init__(self):
        for name in ("match", "mismatch", "gap_open", "gap_extend"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, Real)
                or not math.isfinite(value)
            ):
                raise ScoringError(name, value)

    def substitution(self, a: str, b: str) -> float:
        """Score for aligning symbol a against symbol b."""
        return self.match if a == b else self.mismatch

    def substitution_matrix(self, target: Sequence, query: Sequence) -> np.ndarray:
        """
        Substitution scores for every symbol pair.

        Args:
            target: Target sequence (rows)
            query: Query sequence (columns)

        Returns:
            float64 array of shape (len(target), len(query)); entry
            [i - 1, j - 1] is the score of target[i] against query[j]
        """
        t = np.array(list(str(target)), dtype="U1").reshape(-1, 1)
        q = np.array(list(str(query)), dtype="U1").reshape(1, -1)
        return np.where(t == q, self.match, self.mismatch).astype(np.float64)
