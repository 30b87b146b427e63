"""
Linear gap penalty alignment.

Implements the two classic single-matrix algorithms:
- Needleman-Wunsch global alignment (GlobalAligner)
- Smith-Waterman local alignment (LocalAligner)

Both fill the matrix one row at a time: the diagonal and vertical
candidates come from the previous row as numpy vector operations, then the
horizontal dependency is resolved left to right. Traceback re-derives which
candidate produced each cell, checking up, then left, then diagonal.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from dpalign.align.result import AlignmentResult
from dpalign.core.matrix import ScoreMatrix
from dpalign.core.scoring import GAP_CHAR, ScoringModel
from dpalign.core.sequence import Sequence, as_sequence

logger = logging.getLogger(__name__)


def prepare_inputs(target, query, scoring: Optional[ScoringModel]):
    """Coerce raw inputs to Sequence objects and fill in default scoring."""
    if scoring is None:
        scoring = ScoringModel()
    return as_sequence(target), as_sequence(query), scoring


def sweep_left(row: np.ndarray, gap: float):
    """Apply the horizontal candidate row[j - 1] - gap in place, left to right."""
    values = row.tolist()
    for j in range(1, len(values)):
        left = values[j - 1] - gap
        if left > values[j]:
            values[j] = left
    row[:] = values


def _previous_move(matrix: ScoreMatrix, i: int, j: int, gap: float) -> str:
    """Which neighbour produced cell (i, j): 'up', 'left' or 'diag'."""
    score = matrix.get(i, j)
    if i > 0 and score == matrix.get(i - 1, j) - gap:
        return "up"
    if j > 0 and score == matrix.get(i, j - 1) - gap:
        return "left"
    return "diag"


def _walk(
    target: Sequence,
    query: Sequence,
    matrix: ScoreMatrix,
    gap: float,
    i: int,
    j: int,
    local: bool = False
) -> Tuple[str, str, int, int]:
    """
    Trace back from (i, j).

    Global walks stop at (0, 0). Local walks stop on reaching a cell
    whose score is 0; that cell contributes no characters.

    Returns:
        (target_aligned, query_aligned, i, j) where (i, j) is the cell
        the walk stopped on
    """
    target_trace: List[str] = []
    query_trace: List[str] = []

    while i > 0 or j > 0:
        if local and (i == 0 or j == 0 or matrix.get(i, j) <= 0):
            break
        move = _previous_move(matrix, i, j, gap)
        if move == "up":
            target_trace.append(target[i])
            query_trace.append(GAP_CHAR)
            i -= 1
        elif move == "left":
            target_trace.append(GAP_CHAR)
            query_trace.append(query[j])
            j -= 1
        else:
            target_trace.append(target[i])
            query_trace.append(query[j])
            i -= 1
            j -= 1

    logger.debug(f"Traceback emitted {len(target_trace)} columns, stopped at ({i}, {j})")
    return "".join(reversed(target_trace)), "".join(reversed(query_trace)), i, j


class GlobalAligner:
    """
    Needleman-Wunsch global alignment with a linear gap penalty.

    Every gap position costs scoring.gap_open; gap_extend is ignored.

    Example:
        >>> result = GlobalAligner().run("AC", "A")
        >>> result.target_aligned, result.query_aligned, result.score
        ('AC', 'A-', -1.0)
    """

    mode = "global"

    def fill(self, target: Sequence, query: Sequence, scoring: ScoringModel) -> ScoreMatrix:
        n, m = len(target), len(query)
        gap = scoring.gap_open
        sub = scoring.substitution_matrix(target, query)

        matrix = ScoreMatrix(n, m, name="M")
        # Boundary: a prefix against nothing costs one gap per symbol
        for j in range(1, m + 1):
            matrix.set(0, j, matrix.get(0, j - 1) - gap)
        for i in range(1, n + 1):
            matrix.set(i, 0, matrix.get(i - 1, 0) - gap)

        for i in range(1, n + 1):
            prev = matrix.row(i - 1)
            row = matrix.row(i)
            row[1:] = np.maximum(prev[:-1] + sub[i - 1], prev[1:] - gap)
            sweep_left(row, gap)

        return matrix

    def traceback(
        self,
        target: Sequence,
        query: Sequence,
        scoring: ScoringModel,
        matrix: ScoreMatrix
    ) -> Tuple[str, str]:
        aligned_target, aligned_query, _, _ = _walk(
            target, query, matrix, scoring.gap_open, len(target), len(query)
        )
        return aligned_target, aligned_query

    def run(
        self,
        target,
        query,
        scoring: Optional[ScoringModel] = None,
        keep_matrices: bool = False
    ) -> AlignmentResult:
        """
        Globally align target against query.

        Args:
            target: Target sequence (string or Sequence)
            query: Query sequence (string or Sequence)
            scoring: Scoring model, defaults to ScoringModel()
            keep_matrices: Attach the filled matrix to the result

        Returns:
            AlignmentResult spanning both sequences
        """
        target, query, scoring = prepare_inputs(target, query, scoring)
        logger.debug(f"Global fill: {len(target) + 1} x {len(query) + 1}")

        matrix = self.fill(target, query, scoring)
        aligned_target, aligned_query = self.traceback(target, query, scoring, matrix)

        return AlignmentResult(
            score=float(matrix.get(len(target), len(query))),
            target_aligned=aligned_target,
            query_aligned=aligned_query,
            mode=self.mode,
            target_start=0,
            target_end=len(target),
            query_start=0,
            query_end=len(query),
            matrices={"M": matrix} if keep_matrices else None,
        )


class LocalAligner:
    """
    Smith-Waterman local alignment with a linear gap penalty.

    Cells never drop below 0. The alignment ends at the first cell holding
    the maximum score (row-major order) and starts where the traceback
    reaches a zero cell.

    Example:
        >>> result = LocalAligner().run("AC", "A")
        >>> result.target_aligned, result.score
        ('A', 1.0)
    """

    mode = "local"

    def fill(
        self,
        target: Sequence,
        query: Sequence,
        scoring: ScoringModel
    ) -> Tuple[ScoreMatrix, Tuple[float, int, int]]:
        """
        Fill the local alignment matrix.

        Returns:
            (matrix, (best_score, best_i, best_j)); best is (0, 0, 0) when
            no cell scores above zero
        """
        n, m = len(target), len(query)
        gap = scoring.gap_open
        sub = scoring.substitution_matrix(target, query)

        matrix = ScoreMatrix(n, m, name="M")
        best = (0.0, 0, 0)

        for i in range(1, n + 1):
            prev = matrix.row(i - 1)
            row = matrix.row(i)
            candidates = np.maximum(prev[:-1] + sub[i - 1], prev[1:] - gap)
            row[1:] = np.maximum(candidates, 0.0)
            sweep_left(row, gap)

            if m > 0:
                j = int(np.argmax(row[1:])) + 1
                if row[j] > best[0]:
                    best = (float(row[j]), i, j)

        return matrix, best

    def traceback(
        self,
        target: Sequence,
        query: Sequence,
        scoring: ScoringModel,
        matrix: ScoreMatrix,
        best: Tuple[float, int, int]
    ) -> Tuple[str, str, int, int]:
        """
        Returns:
            (target_aligned, query_aligned, target_start, query_start)
        """
        _, best_i, best_j = best
        return _walk(target, query, matrix, scoring.gap_open, best_i, best_j, local=True)

    def run(
        self,
        target,
        query,
        scoring: Optional[ScoringModel] = None,
        keep_matrices: bool = False
    ) -> AlignmentResult:
        """
        Find the best-scoring local alignment of target and query.

        Args:
            target: Target sequence (string or Sequence)
            query: Query sequence (string or Sequence)
            scoring: Scoring model, defaults to ScoringModel()
            keep_matrices: Attach the filled matrix to the result

        Returns:
            AlignmentResult whose window coordinates locate the aligned
            segments in each sequence
        """
        target, query, scoring = prepare_inputs(target, query, scoring)
        logger.debug(f"Local fill: {len(target) + 1} x {len(query) + 1}")

        matrix, best = self.fill(target, query, scoring)
        best_score, best_i, best_j = best
        logger.debug(f"Best local cell ({best_i}, {best_j}) = {best_score:g}")

        aligned_target, aligned_query, start_i, start_j = self.traceback(
            target, query, scoring, matrix, best
        )

        return AlignmentResult(
            score=best_score,
            target_aligned=aligned_target,
            query_aligned=aligned_query,
            mode=self.mode,
            target_start=start_i,
            target_end=best_i,
            query_start=start_j,
            query_end=best_j,
            matrices={"M": matrix} if keep_matrices else None,
        )
