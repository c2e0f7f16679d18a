"""
seqio.py — read alignment inputs from disk

  - read_sequence            : first whitespace-delimited token of a file.
  - read_substitution_matrix : K*K whitespace-delimited integers, row-major
                               in alphabet order.
  - parse_gap_penalty        : a signed integer given on the command line.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Mapping, Union

from .alphabet import validate_sequence
from .default import ALPHABET_TO_INDEX
from .errors import FileOpenFailure, InvalidMatrix, InvalidPenalty
from .scoring import SubstitutionMatrix

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_PENALTY_RE = re.compile(r"[+-]?\d+", re.ASCII)


def _read_tokens(path: PathLike) -> List[str]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOpenFailure(path, getattr(exc, "strerror", None) or str(exc)) from exc
    return text.split()


def read_sequence(
    path: PathLike,
    alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
) -> str:
    """
    Read a sequence file.

    Only the first whitespace-delimited token is used; an empty file
    yields the empty sequence.  Symbols outside the alphabet raise
    InvalidSymbol.
    """
    tokens = _read_tokens(path)
    seq = tokens[0] if tokens else ""
    if len(tokens) > 1:
        logger.debug("%s: ignoring %d tokens after the sequence", path, len(tokens) - 1)
    logger.debug("%s: read sequence of length %d", path, len(seq))
    return validate_sequence(seq, alphabet_to_index)


def read_substitution_matrix(
    path: PathLike,
    alphabet_to_index: Mapping[str, int] = ALPHABET_TO_INDEX,
) -> SubstitutionMatrix:
    """
    Read a substitution matrix file of exactly K*K integers.
    """
    tokens = _read_tokens(path)
    k = len(alphabet_to_index)
    if len(tokens) != k * k:
        raise InvalidMatrix(
            f"{path}: expected {k * k} integers, found {len(tokens)} values"
        )
    try:
        values = [int(tok) for tok in tokens]
    except ValueError:
        raise InvalidMatrix(f"{path}: substitution scores must be integers") from None
    return SubstitutionMatrix.from_values(values, alphabet_to_index)


def parse_gap_penalty(text) -> int:
    """Parse a signed integer gap penalty (ASCII digits, optional sign)."""
    token = str(text).strip()
    if not _PENALTY_RE.fullmatch(token):
        raise InvalidPenalty(text)
    return int(token)
