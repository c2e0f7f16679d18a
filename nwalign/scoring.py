"""
scoring.py — substitution matrix container

SubstitutionMatrix wraps a square, read-only integer array indexed by
alphabet position.  The engine does not require the matrix to be
symmetric.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

import numpy as np
from numpy.typing import NDArray

from .alphabet import index_of
from .default import ALPHABET_TO_INDEX
from .errors import InvalidMatrix


@dataclass(frozen=True)
class SubstitutionMatrix:
    """
    Immutable (K, K) table of integer substitution scores.

    Attributes
    ----------
    values : (K, K) array of int
        values[a, b] is the score for pairing alphabet index a (from the
        first sequence) with alphabet index b (from the second).

    alphabet_to_index : mapping str -> int
        Maps each symbol to a row/column of values.
    """
    values: NDArray[np.int64]
    alphabet_to_index: Mapping[str, int] = field(default_factory=lambda: dict(ALPHABET_TO_INDEX))

    def __post_init__(self):
        k = len(self.alphabet_to_index)
        arr = np.array(self.values, dtype=np.int64)
        if arr.shape != (k, k):
            raise InvalidMatrix(
                f"substitution matrix must be {k}x{k}, got shape {arr.shape}"
            )
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @classmethod
    def from_values(
        cls,
        values: Iterable[int],
        alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
    ) -> "SubstitutionMatrix":
        """
        Build a matrix from K*K integers given in row-major alphabet order.
        """
        k = len(alphabet_to_index)
        flat = list(values)
        if len(flat) != k * k:
            raise InvalidMatrix(
                f"expected {k * k} integers for a {k}x{k} substitution matrix, got {len(flat)}"
            )
        return cls(np.asarray(flat, dtype=np.int64).reshape(k, k), dict(alphabet_to_index))

    @property
    def size(self) -> int:
        return self.values.shape[0]

    @property
    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.values, self.values.T))

    def score_index(self, a: int, b: int) -> int:
        return int(self.values[a, b])

    def score(self, x: str, y: str) -> int:
        """Score for pairing symbol x with symbol y."""
        a = index_of(x, self.alphabet_to_index)
        b = index_of(y, self.alphabet_to_index)
        return int(self.values[a, b])
