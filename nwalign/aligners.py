"""
aligners.py — User-facing alignment helpers for nwalign

This module wraps the DP core: each function builds an AlignInput,
runs the fill and traceback, and returns an AlignmentResult.
"""

from __future__ import annotations

from typing import Mapping, Tuple

import numpy as np
from numpy.typing import NDArray

from .dp_core import AlignInput, AlignmentResult, run_nw_dp
from .default import GAP_CHAR
from .scoring import SubstitutionMatrix


def get_aligned_bases(X: str, Y: str) -> Tuple[str, str]:
    """
    Extracts bases of Y aligned to X, and bases of X aligned to Y.

    This function projects the alignment onto the coordinates of the unaligned sequences.

    Args:
        X: Aligned first string (may contain gaps '-').
        Y: Aligned second string (may contain gaps '-').

    Returns:
        A tuple (y_aligned_to_x, x_aligned_to_y) where:
        - y_aligned_to_x: The characters in Y corresponding to non-gap positions in X.
                          (Has the same length as the unaligned X).
        - x_aligned_to_y: The characters in X corresponding to non-gap positions in Y.
                          (Has the same length as the unaligned Y).
    """
    y_aligned_to_x = []
    x_aligned_to_y = []

    for x, y in zip(X, Y):
        if x != GAP_CHAR:
            y_aligned_to_x.append(y)
        if y != GAP_CHAR:
            x_aligned_to_y.append(x)
    return "".join(y_aligned_to_x), "".join(x_aligned_to_y)


def align_global(
    X: str,
    Y: str,
    score_matrix: NDArray[np.integer] | SubstitutionMatrix,
    gap_penalty: int,
    alphabet_to_index: Mapping[str, int],
    return_data: bool = False,
) -> AlignmentResult:
    """
    Global Needleman-Wunsch alignment of (X, Y) with a linear gap penalty.

    Parameters
    ----------
    X, Y : str
        Sequences to align (rows and columns of the DP).

    score_matrix : (K, K) array of int or SubstitutionMatrix
        Substitution matrix σ, indexed by alphabet_to_index[base].

    gap_penalty : int
        Score added for every gap column.

    alphabet_to_index : mapping str -> int
        Maps symbols to indices in score_matrix.

    return_data : bool, default False
        If True, also return the full score matrix.

    Returns
    -------
    AlignmentResult
    """
    config = AlignInput(
        X=X,
        Y=Y,
        score_matrix=score_matrix,
        gap_penalty=gap_penalty,
        alphabet_to_index=alphabet_to_index,
    )
    return run_nw_dp(config, return_data=return_data)


def align_with_matrix(
    X: str,
    Y: str,
    matrix: SubstitutionMatrix,
    gap_penalty: int,
    return_data: bool = False,
) -> AlignmentResult:
    """Align (X, Y) using the alphabet carried by a SubstitutionMatrix."""
    return align_global(
        X,
        Y,
        score_matrix=matrix.values,
        gap_penalty=gap_penalty,
        alphabet_to_index=matrix.alphabet_to_index,
        return_data=return_data,
    )
