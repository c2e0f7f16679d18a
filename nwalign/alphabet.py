"""
alphabet.py — map nucleotide symbols to substitution-matrix indices

Symbols are matched exactly (case-sensitive, no normalization).  Any
character outside the alphabet raises InvalidSymbol.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np

from .default import ALPHABET_TO_INDEX
from .errors import InvalidSymbol


def index_of(
    symbol: str,
    alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
) -> int:
    """Return the matrix index of a single symbol."""
    try:
        return int(alphabet_to_index[symbol])
    except (KeyError, TypeError):
        raise InvalidSymbol(symbol) from None


def encode_sequence(
    seq: str,
    alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
) -> np.ndarray:
    """
    Encode a sequence into int64 indices using alphabet_to_index.

    The first symbol that is not in the alphabet raises InvalidSymbol,
    reporting its 0-based position.
    """
    codes = np.empty(len(seq), dtype=np.int64)
    for i, ch in enumerate(seq):
        try:
            codes[i] = alphabet_to_index[ch]
        except KeyError:
            raise InvalidSymbol(ch, position=i) from None
    return codes


def validate_sequence(
    seq: str,
    alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
) -> str:
    """Check every symbol of seq and return it unchanged."""
    for i, ch in enumerate(seq):
        if ch not in alphabet_to_index:
            raise InvalidSymbol(ch, position=i)
    return seq
