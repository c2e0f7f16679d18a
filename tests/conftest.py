"""
conftest.py — Shared pytest fixtures for the nwalign test suite

Provides common scoring parameters, alphabet mappings, and random
number generators used across all test modules.
"""

import pytest
import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
# Default scoring fixtures (match default.py)
# ---------------------------------------------------------------------------

@pytest.fixture
def default_bases() -> NDArray:
    """Default DNA alphabet."""
    return np.array(["A", "C", "G", "T"])


@pytest.fixture
def alphabet_to_index(default_bases) -> dict:
    """Mapping from base to matrix index."""
    return {b: i for i, b in enumerate(default_bases)}


@pytest.fixture
def score_matrix() -> NDArray[np.integer]:
    """Simple match/mismatch matrix: +1 on diagonal, -1 off-diagonal."""
    mat = np.full((4, 4), -1, dtype=np.int64)
    np.fill_diagonal(mat, 1)
    return mat


@pytest.fixture
def gap_penalty() -> int:
    """Linear gap penalty."""
    return -2


@pytest.fixture
def scoring_params(score_matrix, gap_penalty, alphabet_to_index):
    """Bundle all scoring parameters into a dict for easy unpacking."""
    return {
        "score_matrix": score_matrix,
        "gap_penalty": gap_penalty,
        "alphabet_to_index": alphabet_to_index,
    }


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_dna_factory(default_bases):
    """Factory fixture returning a function to generate random DNA strings."""
    def _random_dna(length: int, rng: np.random.Generator) -> str:
        return "".join(rng.choice(default_bases, size=length))
    return _random_dna


@pytest.fixture
def random_matrix_factory():
    """Factory fixture returning random integer substitution matrices."""
    def _random_matrix(rng: np.random.Generator, symmetric: bool = False) -> NDArray[np.integer]:
        mat = rng.integers(-6, 7, size=(4, 4)).astype(np.int64)
        if symmetric:
            mat = np.triu(mat) + np.triu(mat, 1).T
        return mat
    return _random_matrix


# ---------------------------------------------------------------------------
# Input files for seqio / cli tests
# ---------------------------------------------------------------------------

@pytest.fixture
def input_files(tmp_path):
    """Factory writing sequence and matrix files into tmp_path."""
    def _write(seq1: str = "AC", seq2: str = "AG", matrix: str | None = None):
        if matrix is None:
            matrix = "1 -1 -1 -1\n-1 1 -1 -1\n-1 -1 1 -1\n-1 -1 -1 1\n"
        s1 = tmp_path / "seq1.txt"
        s2 = tmp_path / "seq2.txt"
        mx = tmp_path / "matrix.txt"
        s1.write_text(seq1 + "\n")
        s2.write_text(seq2 + "\n")
        mx.write_text(matrix)
        return s1, s2, mx
    return _write
