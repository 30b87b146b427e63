"""
Alignment result container.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from dpalign.core.matrix import ScoreMatrix
from dpalign.core.scoring import GAP_CHAR


@dataclass
class AlignmentResult:
    """
    Result of a pairwise alignment.

    Window coordinates are 0-based and half-open: with gaps removed,
    target_aligned equals str(target)[target_start:target_end], and the
    same holds for the query. Global modes always span the whole sequences.
    """
    score: float
    target_aligned: str
    query_aligned: str
    mode: str
    target_start: int
    target_end: int
    query_start: int
    query_end: int
    matrices: Optional[Dict[str, ScoreMatrix]] = field(default=None, repr=False)

    def __len__(self) -> int:
        return len(self.target_aligned)

    @property
    def match_line(self) -> str:
        """'|' for identical columns, '.' for mismatches, ' ' for gaps."""
        line = []
        for t, q in zip(self.target_aligned, self.query_aligned):
            if t == GAP_CHAR or q == GAP_CHAR:
                line.append(" ")
            elif t == q:
                line.append("|")
            else:
                line.append(".")
        return "".join(line)

    @property
    def identity(self) -> float:
        """Fraction of alignment columns holding identical symbols."""
        if not self.target_aligned:
            return 0.0
        return self.match_line.count("|") / len(self.target_aligned)

    @property
    def gaps(self) -> int:
        return self.target_aligned.count(GAP_CHAR) + self.query_aligned.count(GAP_CHAR)

    def __str__(self) -> str:
        lines = []
        match_line = self.match_line

        chunk_size = 60
        for i in range(0, len(self.target_aligned), chunk_size):
            lines.append(self.target_aligned[i:i + chunk_size])
            lines.append(match_line[i:i + chunk_size])
            lines.append(self.query_aligned[i:i + chunk_size])
            lines.append("")

        lines.append(f"Score: {self.score:g}")
        return "\n".join(lines)
