"""
Dense DP score matrix.
"""

import numpy as np


class ScoreMatrix:
    """
    (rows + 1) x (cols + 1) grid of alignment scores.

    Cell (i, j) holds the best score for the length-i target prefix against
    the length-j query prefix, so row 0 and column 0 are the boundary.

    Args:
        rows: Target length
        cols: Query length
        fill: Initial cell value
        name: Label used in debug dumps
    """

    def __init__(self, rows: int, cols: int, fill: float = 0.0, name: str = "M"):
        self.name = name
        self._cells = np.full((rows + 1, cols + 1), fill, dtype=np.float64)

    @property
    def shape(self):
        return self._cells.shape

    def _check(self, i: int, j: int):
        n_rows, n_cols = self._cells.shape
        if not (0 <= i < n_rows and 0 <= j < n_cols):
            raise IndexError(
                f"Cell ({i}, {j}) outside {self.name} matrix of shape {self._cells.shape}"
            )

    def get(self, i: int, j: int) -> float:
        self._check(i, j)
        return self._cells[i, j]

    def set(self, i: int, j: int, value: float):
        self._check(i, j)
        self._cells[i, j] = value

    def __getitem__(self, index):
        i, j = index
        return self.get(i, j)

    def __setitem__(self, index, value):
        i, j = index
        self.set(i, j, value)

    def row(self, i: int) -> np.ndarray:
        """Row i as a view; writes go through to the matrix."""
        self._check(i, 0)
        return self._cells[i]

    def set_row(self, i: int, values):
        self._check(i, 0)
        self._cells[i, :] = values

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def __str__(self) -> str:
        body = np.array2string(
            self._cells,
            max_line_width=200,
            formatter={"float_kind": lambda v: f"{v:g}"},
        )
        return f"{self.name}:\n{body}"

    def __repr__(self) -> str:
        return f"ScoreMatrix(name={self.name!r}, shape={self.shape})"
