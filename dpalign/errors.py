"""
Exceptions raised by dpalign.

Every error derives from DPAlignError and from the builtin exception a
caller would naturally catch (IndexError, ValueError, TypeError), so both
`except DPAlignError` and `except IndexError` work.
"""

from typing import Optional


class DPAlignError(Exception):
    """
    Base exception for dpalign errors.

    Args:
        message: What went wrong
        suggestion: What the caller can do about it
        context: Extra detail about the failing input
    """

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[str] = None
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Format message, context and suggestion for display."""
        msg = f"[ERROR] {self.message}"
        if self.context:
            msg += f"\n  Context: {self.context}"
        if self.suggestion:
            msg += f"\n  Suggestion: {self.suggestion}"
        return msg

    def __str__(self) -> str:
        return self.formatted()


class SequenceIndexError(DPAlignError, IndexError):
    """Raised when a sequence is indexed outside [1, length]."""

    def __init__(self, position, length: int):
        super().__init__(
            f"Sequence position {position!r} out of range",
            suggestion=f"Positions are 1-based and must lie in [1, {length}]",
        )
        self.position = position
        self.length = length


class ScoringError(DPAlignError, ValueError):
    """Raised when a scoring parameter is not a finite number."""

    def __init__(self, param_name: str, value):
        super().__init__(
            f"Invalid value for {param_name}: {value!r}",
            suggestion="Scoring parameters must be finite numbers",
        )
        self.param_name = param_name
        self.value = value


class UnknownModeError(DPAlignError, ValueError):
    """Raised when an alignment mode outside the supported set is requested."""

    def __init__(self, mode, choices):
        super().__init__(
            f"Unknown alignment mode: {mode!r}",
            suggestion=f"Expected one of: {', '.join(choices)}",
        )
        self.mode = mode
        self.choices = tuple(choices)


class SequenceTypeError(DPAlignError, TypeError):
    """Raised when a sequence is built from something other than symbols."""

    def __init__(self, value):
        super().__init__(
            f"Cannot build a sequence from {type(value).__name__}: {value!r}",
            suggestion="Pass a string or an iterable of one-character strings",
        )
        self.value = value
