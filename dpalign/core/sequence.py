"""
Immutable 1-indexed sequence view.

Alignment recurrences are written with position 1 as the first symbol and
row/column 0 of the DP matrix reserved for the empty prefix. Sequence keeps
that convention at its boundary; everything underneath stays 0-based.
"""

from typing import Iterator

from dpalign.errors import SequenceIndexError, SequenceTypeError


def _join_symbols(symbols) -> str:
    if isinstance(symbols, Sequence):
        return symbols._symbols
    if isinstance(symbols, str):
        return symbols
    try:
        items = list(symbols)
    except TypeError:
        raise SequenceTypeError(symbols) from None
    if not all(isinstance(s, str) and len(s) == 1 for s in items):
        raise SequenceTypeError(symbols)
    return "".join(items)


class Sequence:
    """
    Read-only view over a string of symbols, indexed from 1.

    Args:
        symbols: A string, or an iterable of one-character strings.
            No alphabet is enforced.

    Example:
        >>> seq = Sequence("ACGT")
        >>> seq[1], seq[4]
        ('A', 'T')
    """

    __slots__ = ("_symbols",)

    def __init__(self, symbols):
        object.__setattr__(self, "_symbols", _join_symbols(symbols))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, position: int) -> str:
        # Reject bool and slices; 1-based integer positions only
        if (
            not isinstance(position, int)
            or isinstance(position, bool)
            or not 1 <= position <= len(self._symbols)
        ):
            raise SequenceIndexError(position, len(self._symbols))
        return self._symbols[position - 1]

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        return self._symbols

    def __repr__(self) -> str:
        return f"Sequence({self._symbols!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Sequence):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def window(self, start: int, end: int) -> str:
        """Return the 0-based half-open slice [start:end] as a string."""
        return self._symbols[start:end]


def as_sequence(value) -> Sequence:
    """Wrap a plain string in a Sequence; pass Sequence objects through."""
    if isinstance(value, Sequence):
        return value
    return Sequence(value)
