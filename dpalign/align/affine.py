"""
Needleman-Wunsch-Gotoh global alignment with an affine gap penalty.

Three layers are filled side by side:
- M: the alignment ends with target[i] paired against query[j]
- X: the alignment ends with target[i] against a gap
- Y: the alignment ends with a gap against query[j]

A gap run of length k costs gap_open + gap_extend * (k - 1). There is no
X <-> Y transition, so switching gap direction needs a match in between.
"""

import logging
from typing import Dict, Optional, Tuple

import numpy as np

from dpalign.align.linear import prepare_inputs
from dpalign.align.result import AlignmentResult
from dpalign.core.matrix import ScoreMatrix
from dpalign.core.scoring import GAP_CHAR, ScoringModel
from dpalign.core.sequence import Sequence

logger = logging.getLogger(__name__)

NEG_INF = -np.inf

# Terminal state tie order
STATES = ("M", "X", "Y")


def _sweep_gap_run(row_y: np.ndarray, row_m: np.ndarray, gap_open: float, gap_extend: float):
    """Fill Y left to right: Y[j] = max(M[j-1] - gap_open, Y[j-1] - gap_extend)."""
    y = row_y.tolist()
    mm = row_m.tolist()
    for j in range(1, len(y)):
        y[j] = max(mm[j - 1] - gap_open, y[j - 1] - gap_extend)
    row_y[:] = y


class GlobalAffineAligner:
    """
    Global alignment with affine gaps (Gotoh's three-state algorithm).

    Example:
        >>> scoring = ScoringModel(gap_open=3, gap_extend=1)
        >>> result = GlobalAffineAligner().run("ACGT", "AT", scoring)
        >>> result.target_aligned, result.query_aligned, result.score
        ('ACGT', 'A--T', -2.0)
    """

    mode = "affine"

    def fill(
        self,
        target: Sequence,
        query: Sequence,
        scoring: ScoringModel
    ) -> Dict[str, ScoreMatrix]:
        n, m = len(target), len(query)
        gap_open, gap_extend = scoring.gap_open, scoring.gap_extend
        sub = scoring.substitution_matrix(target, query)

        mat_m = ScoreMatrix(n, m, fill=NEG_INF, name="M")
        mat_x = ScoreMatrix(n, m, fill=NEG_INF, name="X")
        mat_y = ScoreMatrix(n, m, fill=NEG_INF, name="Y")

        mat_m.set(0, 0, 0.0)
        # Column 0 is a single run of target-only gaps, row 0 of query-only gaps
        for i in range(1, n + 1):
            if i == 1:
                mat_x.set(i, 0, -gap_open)
            else:
                mat_x.set(i, 0, mat_x.get(i - 1, 0) - gap_extend)
        for j in range(1, m + 1):
            if j == 1:
                mat_y.set(0, j, -gap_open)
            else:
                mat_y.set(0, j, mat_y.get(0, j - 1) - gap_extend)

        for i in range(1, n + 1):
            prev_m, prev_x, prev_y = mat_m.row(i - 1), mat_x.row(i - 1), mat_y.row(i - 1)
            s = sub[i - 1]

            row_m = mat_m.row(i)
            row_m[1:] = np.maximum(
                np.maximum(prev_m[:-1] + s, prev_x[:-1] + s),
                prev_y[:-1] + s,
            )

            row_x = mat_x.row(i)
            row_x[1:] = np.maximum(prev_m[1:] - gap_open, prev_x[1:] - gap_extend)

            _sweep_gap_run(mat_y.row(i), row_m, gap_open, gap_extend)

        return {"M": mat_m, "X": mat_x, "Y": mat_y}

    def terminal_state(self, matrices: Dict[str, ScoreMatrix], n: int, m: int) -> Tuple[str, float]:
        """Best layer at (n, m); ties resolve in M, X, Y order."""
        best_state, best_score = STATES[0], matrices[STATES[0]].get(n, m)
        for state in STATES[1:]:
            score = matrices[state].get(n, m)
            if score > best_score:
                best_state, best_score = state, score
        return best_state, float(best_score)

    def traceback(
        self,
        target: Sequence,
        query: Sequence,
        scoring: ScoringModel,
        matrices: Dict[str, ScoreMatrix],
        state: str
    ) -> Tuple[str, str]:
        """
        Walk the state machine from (len(target), len(query)) back to (0, 0).

        In each state the possible source layers are checked in order and
        the last one is taken when none of the earlier ones reproduces the
        current score.
        """
        gap_open = scoring.gap_open
        mat_m, mat_x = matrices["M"], matrices["X"]
        i, j = len(target), len(query)
        target_trace, query_trace = [], []

        while i > 0 or j > 0:
            score = matrices[state].get(i, j)

            if state == "M":
                s = scoring.substitution(target[i], query[j])
                if score == mat_m.get(i - 1, j - 1) + s:
                    state = "M"
                elif score == mat_x.get(i - 1, j - 1) + s:
                    state = "X"
                else:
                    state = "Y"
                target_trace.append(target[i])
                query_trace.append(query[j])
                i -= 1
                j -= 1
            elif state == "X":
                if score == mat_m.get(i - 1, j) - gap_open:
                    state = "M"
                else:
                    state = "X"
                target_trace.append(target[i])
                query_trace.append(GAP_CHAR)
                i -= 1
            else:
                if score == mat_m.get(i, j - 1) - gap_open:
                    state = "M"
                else:
                    state = "Y"
                target_trace.append(GAP_CHAR)
                query_trace.append(query[j])
                j -= 1

        logger.debug(f"Traceback emitted {len(target_trace)} columns")
        return "".join(reversed(target_trace)), "".join(reversed(query_trace))

    def run(
        self,
        target,
        query,
        scoring: Optional[ScoringModel] = None,
        keep_matrices: bool = False
    ) -> AlignmentResult:
        """
        Globally align target against query with affine gap costs.

        Args:
            target: Target sequence (string or Sequence)
            query: Query sequence (string or Sequence)
            scoring: Scoring model, defaults to ScoringModel()
            keep_matrices: Attach the M, X and Y matrices to the result

        Returns:
            AlignmentResult spanning both sequences
        """
        target, query, scoring = prepare_inputs(target, query, scoring)
        n, m = len(target), len(query)
        logger.debug(f"Affine fill: 3 x {n + 1} x {m + 1}")

        matrices = self.fill(target, query, scoring)
        state, score = self.terminal_state(matrices, n, m)
        logger.debug(f"Terminal state {state} = {score:g}")

        aligned_target, aligned_query = self.traceback(
            target, query, scoring, matrices, state
        )

        return AlignmentResult(
            score=score,
            target_aligned=aligned_target,
            query_aligned=aligned_query,
            mode=self.mode,
            target_start=0,
            target_end=n,
            query_start=0,
            query_end=m,
            matrices=matrices if keep_matrices else None,
        )
