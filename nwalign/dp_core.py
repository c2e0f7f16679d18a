"""
dp_core.py — linear-gap Needleman-Wunsch dynamic programming core

This module implements global alignment of two DNA sequences with a
substitution matrix σ and a constant gap penalty g:

    F(i, 0) = i·g,   F(0, j) = j·g
    F(i, j) = max( F(i-1, j-1) + σ(X_i, Y_j),
                   F(i-1, j)   + g,
                   F(i, j-1)   + g )

followed by a deterministic traceback that recovers one optimal
alignment from the filled matrix.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, List, Tuple, Optional

import numpy as np
from numpy.typing import NDArray

from .alphabet import encode_sequence, index_of
from .default import GAP_CHAR
from .errors import InvalidMatrix, InvalidPenalty, ReconstructionInconsistency
from .identity import match_percentage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input and output containers
# ---------------------------------------------------------------------------

@dataclass
class AlignInput:
    """
    Configuration for a single alignment run.

    Attributes
    ----------
    X, Y : str
        First (rows) and second (columns) sequences.

    score_matrix : (K, K) array of int
        Substitution score matrix σ over the alphabet, indexed by
        alphabet_to_index[base] for both X and Y.

    gap_penalty : int
        Linear gap score g, added once per gap column (typically negative).

    alphabet_to_index : mapping str -> int
        Maps each base to a row/column index in score_matrix.
    """

    X: str
    Y: str
    score_matrix: NDArray[np.integer]
    gap_penalty: int
    alphabet_to_index: Mapping[str, int]

    def __post_init__(self):
        self.score_matrix = _as_score_array(self.score_matrix, self.alphabet_to_index)

    def pair_score(self, i: int, j: int) -> int:
        """
        Return σ(X_i, Y_j) for DP indices i, j (1-based).

        Parameters
        ----------
        i, j : int
            DP row/column indices with 1 ≤ i ≤ len(X), 1 ≤ j ≤ len(Y).
        """
        xi = index_of(self.X[i - 1], self.alphabet_to_index)
        yj = index_of(self.Y[j - 1], self.alphabet_to_index)
        return int(self.score_matrix[xi, yj])


@dataclass
class AlignmentResult:
    """
    Result of a single global alignment run.

    Attributes
    ----------
    score : int
        Optimal alignment score F(n, m).

    X_aln, Y_aln : str
        Aligned sequences (including gaps '-').

    path : list of (i, j, move)
        DP path from (0, 0) to (n, m).  move is the step that *entered*
        cell (i, j): "diag", "up" (gap in Y), "left" (gap in X), or
        "start" for (0, 0).

    percent_identity : float
        Match percentage of the alignment, in [0, 100].

    data : ndarray or None
        The full (n+1, m+1) score matrix, if requested.
    """
    score: int
    X_aln: str
    Y_aln: str
    path: List[Tuple[int, int, str]]
    percent_identity: float
    data: Optional[NDArray[np.integer]] = None

    def to_tuple(self) -> Tuple[int, str, str, List[Tuple[int, int, str]], float]:
        """
        Returns
        -------
        tuple
            (score, X_aln, Y_aln, path, percent_identity)
        """
        return (self.score, self.X_aln, self.Y_aln, self.path, self.percent_identity)


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------

def check_gap_penalty(gap_penalty, warn: bool = True) -> int:
    """Return gap_penalty as a Python int, rejecting non-integers."""
    if isinstance(gap_penalty, (bool, np.bool_)) or not isinstance(gap_penalty, (int, np.integer)):
        raise InvalidPenalty(gap_penalty)
    if warn and gap_penalty > 0:
        logger.warning(
            "gap penalty %d is positive: gaps will increase the alignment score",
            gap_penalty,
        )
    return int(gap_penalty)


def _as_score_array(score_matrix, alphabet_to_index: Mapping[str, int]) -> NDArray[np.int64]:
    sigma = np.asarray(getattr(score_matrix, "values", score_matrix))
    k = len(alphabet_to_index)
    if sigma.shape != (k, k):
        raise InvalidMatrix(
            f"substitution matrix must be {k}x{k}, got shape {sigma.shape}"
        )
    if not np.issubdtype(sigma.dtype, np.integer):
        raise InvalidMatrix(f"substitution matrix must hold integers, got dtype {sigma.dtype}")
    return sigma.astype(np.int64, copy=False)


# ---------------------------------------------------------------------------
# Fill
# ---------------------------------------------------------------------------

def init_matrix(n: int, m: int, gap_penalty: int) -> NDArray[np.int64]:
    """
    Allocate the (n+1, m+1) score matrix with the global boundary
    conditions F(i, 0) = i·g and F(0, j) = j·g.
    """
    F = np.zeros((n + 1, m + 1), dtype=np.int64)
    F[:, 0] = np.arange(n + 1, dtype=np.int64) * gap_penalty
    F[0, :] = np.arange(m + 1, dtype=np.int64) * gap_penalty
    return F


def fill_score_matrix(config: AlignInput) -> NDArray[np.int64]:
    """
    Fill the score matrix row by row.

    Both sequences are encoded before anything is allocated, so an
    invalid symbol raises InvalidSymbol without building a matrix.
    The returned array is read-only.
    """
    X_codes = encode_sequence(config.X, config.alphabet_to_index)
    Y_codes = encode_sequence(config.Y, config.alphabet_to_index)
    sigma = config.score_matrix
    g = check_gap_penalty(config.gap_penalty)

    n, m = len(X_codes), len(Y_codes)
    logger.debug("filling %dx%d score matrix", n + 1, m + 1)
    F = init_matrix(n, m, g)

    for i in range(1, n + 1):
        prev_row = F[i - 1]
        row = F[i]
        sub = sigma[X_codes[i - 1]]
        for j in range(1, m + 1):
            diag = prev_row[j - 1] + sub[Y_codes[j - 1]]
            up   = prev_row[j] + g
            left = row[j - 1] + g
            row[j] = max(diag, up, left)

    F.setflags(write=False)
    return F


# ---------------------------------------------------------------------------
# Traceback
# ---------------------------------------------------------------------------

def traceback_alignment(
    config: AlignInput,
    F: NDArray[np.integer],
) -> Tuple[str, str, List[Tuple[int, int, str]]]:
    """
    Recover one optimal alignment from a filled score matrix.

    Starting at (n, m), each step takes the first rule that reproduces
    F(i, j):

      1. diag : F(i-1, j-1) + σ(X_i, Y_j)
      2. up   : F(i-1, j) + g      (X_i against a gap)
      3. left : F(i, j-1) + g      (gap against Y_j)

    Returns
    -------
    X_aln, Y_aln : str
        Aligned sequences (including gaps '-').
    path : list of (i, j, move)
        DP path from (0, 0) to (n, m).

    Raises
    ------
    ReconstructionInconsistency
        If F does not have shape (n+1, m+1) or no rule holds at some cell.
    InvalidPenalty
        If config.gap_penalty is not an integer.
    """
    X, Y = config.X, config.Y
    n, m = len(X), len(Y)
    if F.shape != (n + 1, m + 1):
        raise ReconstructionInconsistency(
            n, m, f"matrix shape {F.shape} does not match sequences ({n + 1}, {m + 1})"
        )
    g = check_gap_penalty(config.gap_penalty, warn=False)

    aln_X: List[str] = []
    aln_Y: List[str] = []
    path: List[Tuple[int, int, str]] = []

    i, j = n, m
    while i > 0 or j > 0:
        cell = F[i, j]
        if i > 0 and j > 0 and cell == F[i - 1, j - 1] + config.pair_score(i, j):
            move = "diag"
            aln_X.append(X[i - 1])
            aln_Y.append(Y[j - 1])
            path.append((i, j, move))
            i -= 1
            j -= 1
        elif i > 0 and cell == F[i - 1, j] + g:
            move = "up"
            aln_X.append(X[i - 1])
            aln_Y.append(GAP_CHAR)
            path.append((i, j, move))
            i -= 1
        elif j > 0 and cell == F[i, j - 1] + g:
            move = "left"
            aln_X.append(GAP_CHAR)
            aln_Y.append(Y[j - 1])
            path.append((i, j, move))
            j -= 1
        else:
            raise ReconstructionInconsistency(i, j)
    path.append((0, 0, "start"))

    aln_X.reverse()
    aln_Y.reverse()
    path.reverse()

    logger.debug("traceback produced an alignment of length %d", len(aln_X))
    return ''.join(aln_X), ''.join(aln_Y), path


# ---------------------------------------------------------------------------
# Top-level driver
# ---------------------------------------------------------------------------

def run_nw_dp(
    config: AlignInput,
    return_data: bool = False,
) -> AlignmentResult:
    """
    Fill, trace back and score a global alignment for a given AlignInput.

    Parameters
    ----------
    config : AlignInput
        Sequences, substitution matrix and gap penalty.
    return_data : bool, default False
        If True, attach the (read-only) score matrix to the result.

    Returns
    -------
    AlignmentResult
    """
    F = fill_score_matrix(config)
    X_aln, Y_aln, path = traceback_alignment(config, F)
    n, m = len(config.X), len(config.Y)

    return AlignmentResult(
        score=int(F[n, m]),
        X_aln=X_aln,
        Y_aln=Y_aln,
        path=path,
        percent_identity=match_percentage(X_aln, Y_aln),
        data=F if return_data else None,
    )
