"""
default.py — Default parameters for nwalign

Provides the DNA alphabet and the +1/-1 substitution scheme with a
linear gap penalty of -2 that is used throughout examples and tests.
"""

import numpy as np

# DNA alphabet
BASES = np.array(["A", "C", "G", "T"])
ALPHABET_TO_INDEX = {b: i for i, b in enumerate(BASES)}

# Substitution matrix: +1 for match, -1 for mismatch
SCORE_MATRIX = np.full((4, 4), -1, dtype=np.int64)
np.fill_diagonal(SCORE_MATRIX, 1)

## Linear gap penalty (added once per gap column)
GAP_PENALTY = -2

GAP_CHAR = "-"

# DOT export layout
ROW_WIDTH = 10
DEFAULT_DOT_FILE = "alignment.dot"


def align_params() -> dict:
    """
    Bundle default scoring parameters into a dict for easy unpacking.

    Usage:
        result = align_global(X, Y, **align_params())"""
    return {
        "score_matrix": SCORE_MATRIX,
        "gap_penalty": GAP_PENALTY,
        "alphabet_to_index": ALPHABET_TO_INDEX,
    }

def get_default_scoring():
    """
    Convenience helper returning the default scoring components:

        score_matrix, gap_penalty, alphabet_to_index
    """
    return (
        SCORE_MATRIX,
        GAP_PENALTY,
        ALPHABET_TO_INDEX,
    )
