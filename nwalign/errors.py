"""
errors.py — exception types raised by nwalign

Every error here is fatal for a command-line run: library code raises,
and nwalign.cli.main is the single place that turns an AlignmentError
into a diagnostic and a non-zero exit status.
"""

from __future__ import annotations

from typing import Optional


class AlignmentError(Exception):
    """Base class for all nwalign errors."""


class FileOpenFailure(AlignmentError, OSError):
    """An input file is missing or unreadable."""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        msg = f"cannot open file: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidSymbol(AlignmentError, ValueError):
    """A sequence contains a character outside the alignment alphabet."""

    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        msg = f"invalid nucleotide symbol: {symbol!r}"
        if position is not None:
            msg += f" at position {position}"
        super().__init__(msg)


class InvalidPenalty(AlignmentError, ValueError):
    """The gap penalty is not an integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"gap penalty must be an integer, got {value!r}")


class InvalidMatrix(AlignmentError, ValueError):
    """A substitution matrix does not hold exactly K*K integers."""


class ReconstructionInconsistency(AlignmentError, RuntimeError):
    """The score matrix cannot be traced back against the given inputs."""

    def __init__(self, i: int, j: int, detail: Optional[str] = None):
        self.i = i
        self.j = j
        msg = f"score matrix is inconsistent with the inputs at cell ({i}, {j})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class OutputWriteFailure(AlignmentError, OSError):
    """The exported artifact could not be written."""

    def __init__(self, path, reason: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        msg = f"cannot write output file: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
