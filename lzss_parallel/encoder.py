"""
encoder.py -- Greedy token assembly.

Two entry points share one control flow:

* ``encode`` searches each cursor position on demand with
  ``find_best_match``.
* ``assemble`` reads precomputed per-position candidates (from the batch
  search) instead of searching.

Both are strictly greedy: a match of at least ``min_match`` bytes is
taken immediately and the cursor jumps past it, so candidates for the
skipped positions are never looked at.  No lazy matching.
"""

from __future__ import annotations

from typing import List, Sequence

from .matcher import find_best_match
from .params import DEFAULT_PARAMS, LZSSParams
from .tokens import Literal, Match, Token


def encode(data: bytes, params: LZSSParams = DEFAULT_PARAMS) -> List[Token]:
    """Encode ``data`` into a token list, searching at every cursor position."""
    tokens: List[Token] = []
    n = len(data)
    p = 0
    while p < n:
        length, distance = find_best_match(data, p, params.window_size, params.max_match)
        if length >= params.min_match:
            tokens.append(Match(distance, length))
            p += length
        else:
            tokens.append(Literal(data[p]))
            p += 1
    return tokens


def assemble(data: bytes, lengths: Sequence[int], distances: Sequence[int],
             params: LZSSParams = DEFAULT_PARAMS) -> List[Token]:
    """Build the token list from precomputed match candidates.

    ``lengths[p]``/``distances[p]`` must hold the ``find_best_match``
    result for position ``p``.  This pass is inherently sequential: the
    cursor only learns where to look next after consuming a token.
    """
    n = len(data)
    if len(lengths) != n or len(distances) != n:
        raise ValueError(
            f"Candidate arrays must match input length {n}: "
            f"got {len(lengths)} lengths, {len(distances)} distances"
        )
    tokens: List[Token] = []
    p = 0
    while p < n:
        # numpy scalars -> int so tokens compare and pack like the sequential path
        length = int(lengths[p])
        if length >= params.min_match:
            tokens.append(Match(int(distances[p]), length))
            p += length
        else:
            tokens.append(Literal(data[p]))
            p += 1
    return tokens
