"""
validation.py — independent baselines and regression checks for nwalign

This module provides independent reimplementations of the linear-gap
Needleman-Wunsch score and small helpers for randomized regression tests.

The goals are:

  1. Verify that the row-major fill in dp_core agrees cell for cell with
     an anti-diagonal (wavefront) fill, since each cell depends only on
     (i-1, j-1), (i-1, j) and (i, j-1).

  2. Verify that the optimal score F(n, m) agrees with a two-row,
     linear-space computation.

  3. Verify that the reported score of an alignment equals the score
     recomputed column by column from the aligned strings.

This module is independent of dp_core's fill: the baselines reimplement
the recurrence directly so that bugs in dp_core cannot mask each other
during testing.
"""

from typing import Mapping, Tuple

import numpy as np
from numpy.typing import NDArray

from .aligners import align_global
from .default import GAP_CHAR
from . import default

# ---------------------------------------------------------------------------
# Default scoring and alphabet for tests and demos
# ---------------------------------------------------------------------------
# Use defaults from default.py
DEFAULT_ALPHABET_TO_INDEX = default.ALPHABET_TO_INDEX
DEFAULT_SCORE_MATRIX = default.SCORE_MATRIX
DEFAULT_GAP_PENALTY = default.GAP_PENALTY


def nw_matrix_antidiagonal(
    X: str,
    Y: str,
    score_matrix: NDArray[np.integer] = DEFAULT_SCORE_MATRIX,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    alphabet_to_index: Mapping[str, int] = DEFAULT_ALPHABET_TO_INDEX,
) -> NDArray[np.int64]:
    """
    Fill the linear-gap NW matrix one anti-diagonal d = i + j at a time.
    """
    n, m = len(X), len(Y)
    g = gap_penalty
    F = np.zeros((n + 1, m + 1), dtype=np.int64)

    for d in range(n + m + 1):
        for i in range(max(0, d - m), min(n, d) + 1):
            j = d - i
            if i == 0:
                F[i, j] = j * g
            elif j == 0:
                F[i, j] = i * g
            else:
                xi = alphabet_to_index[X[i - 1]]
                yj = alphabet_to_index[Y[j - 1]]
                F[i, j] = max(
                    F[i - 1, j - 1] + score_matrix[xi, yj],
                    F[i - 1, j] + g,
                    F[i, j - 1] + g,
                )
    return F


def nw_score_linear_space(
    X: str,
    Y: str,
    score_matrix: NDArray[np.integer] = DEFAULT_SCORE_MATRIX,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    alphabet_to_index: Mapping[str, int] = DEFAULT_ALPHABET_TO_INDEX,
) -> int:
    """
    Standard global NW score keeping only two rows of the matrix.
    """
    m = len(Y)
    g = gap_penalty
    prev = [j * g for j in range(m + 1)]
    for i, x in enumerate(X, start=1):
        xi = alphabet_to_index[x]
        cur = [i * g] + [0] * m
        for j in range(1, m + 1):
            yj = alphabet_to_index[Y[j - 1]]
            cur[j] = max(
                prev[j - 1] + int(score_matrix[xi, yj]),
                prev[j] + g,
                cur[j - 1] + g,
            )
        prev = cur
    return prev[m]


def score_alignment(
    X_aln: str,
    Y_aln: str,
    score_matrix: NDArray[np.integer] = DEFAULT_SCORE_MATRIX,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    alphabet_to_index: Mapping[str, int] = DEFAULT_ALPHABET_TO_INDEX,
) -> int:
    """Sum σ over aligned pairs and g over gap columns."""
    total = 0
    for x, y in zip(X_aln, Y_aln):
        if x == GAP_CHAR or y == GAP_CHAR:
            total += gap_penalty
        else:
            total += int(score_matrix[alphabet_to_index[x], alphabet_to_index[y]])
    return total


def check_fill_order_invariance(
    X: str,
    Y: str,
    score_matrix: NDArray[np.integer] = DEFAULT_SCORE_MATRIX,
    gap_penalty: int = DEFAULT_GAP_PENALTY,
    alphabet_to_index: Mapping[str, int] = DEFAULT_ALPHABET_TO_INDEX,
) -> Tuple[int, int]:
    """
    Compare the row-major score with the anti-diagonal baseline.

    Returns
    -------
    (row_major_score, wavefront_score)
    """
    result = align_global(
        X, Y,
        score_matrix=score_matrix,
        gap_penalty=gap_penalty,
        alphabet_to_index=alphabet_to_index,
    )
    F = nw_matrix_antidiagonal(X, Y, score_matrix, gap_penalty, alphabet_to_index)
    return result.score, int(F[len(X), len(Y)])


def check_alignment_validity(result,
                             score_matrix,
                             gap_penalty,
                             alphabet_to_index) -> Tuple[bool, str]:
    """
    Check that an AlignmentResult has valid alignment strings.

    Verifies that X_aln and Y_aln:
    - Have the same length
    - Don't have simultaneous gaps at any position
    - The reported alignment score matches the score recomputed from the alignment strings,
       using the provided scoring parameters.

    Parameters
    ----------
    result : AlignmentResult
        Output from align_global.

    Returns
    -------
    valid : bool
        True if the alignment strings pass all checks.
    message : str
        Description of what was checked or what failed.
    """
    X_aln = result.X_aln
    Y_aln = result.Y_aln

    # Check same length
    if len(X_aln) != len(Y_aln):
        return False, f"Length mismatch: X_aln={len(X_aln)}, Y_aln={len(Y_aln)}"

    for i, (x, y) in enumerate(zip(X_aln, Y_aln)):
        if x == GAP_CHAR and y == GAP_CHAR:
            return False, f"Double gap found in alignment at position {i}"

    # Check score matches
    computed_score = score_alignment(X_aln, Y_aln, score_matrix, gap_penalty, alphabet_to_index)
    if computed_score != result.score:
        return False, f"Score mismatch: computed {computed_score}, reported {result.score}"

    return True, f"Valid alignment of length {len(X_aln)}"
