"""
identity.py — match percentage of a finished alignment

A column is a *match* when both strands hold the same non-gap symbol,
a *gap* when either strand holds '-', and a *mismatch* otherwise.
The match percentage divides the match count by the full alignment
length (gap columns included).
"""

from __future__ import annotations

from typing import Dict

from .default import GAP_CHAR

MATCH = "match"
MISMATCH = "mismatch"
GAP = "gap"


def classify_column(x: str, y: str) -> str:
    """Return "match", "mismatch" or "gap" for one alignment column."""
    if x == GAP_CHAR or y == GAP_CHAR:
        return GAP
    if x == y:
        return MATCH
    return MISMATCH


def _check_lengths(X_aln: str, Y_aln: str) -> None:
    if len(X_aln) != len(Y_aln):
        raise ValueError(
            f"aligned strings differ in length: {len(X_aln)} != {len(Y_aln)}"
        )


def match_percentage(X_aln: str, Y_aln: str) -> float:
    """
    Percentage of alignment columns holding identical non-gap symbols.

    Parameters
    ----------
    X_aln, Y_aln : str
        Equal-length aligned strings (gaps as '-').

    Returns
    -------
    float
        Value in [0, 100].  An empty alignment (both inputs empty)
        is defined as 0.0.
    """
    _check_lengths(X_aln, Y_aln)
    total = len(X_aln)
    if total == 0:
        return 0.0
    matches = sum(1 for x, y in zip(X_aln, Y_aln) if x == y and x != GAP_CHAR)
    return matches / total * 100.0


def alignment_summary(X_aln: str, Y_aln: str) -> Dict[str, int]:
    """
    Count alignment columns by category.

    Returns a dict with keys "length", "match", "mismatch" and "gap".
    """
    _check_lengths(X_aln, Y_aln)
    counts = {"length": len(X_aln), MATCH: 0, MISMATCH: 0, GAP: 0}
    for x, y in zip(X_aln, Y_aln):
        counts[classify_column(x, y)] += 1
    return counts
