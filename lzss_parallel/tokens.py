"""
tokens.py -- Token types and the packed binary token format.

Stream format (no header, no length prefix; self-delimiting by flag bit):

* Literal (2 bytes): ``0x00`` then the raw byte.
* Match (3 bytes):   ``0x80 | (distance >> 8) & 0x7F``, ``distance & 0xFF``,
  ``length - min_match``.

A leading byte with the top bit clear introduces a literal, with the top
bit set it is the first byte of a match.  Distances span 1..32767 and
lengths ``min_match``..``min_match + 255``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from .errors import TruncatedStreamError
from .params import MAX_DISTANCE_FIELD, MAX_LENGTH_FIELD, MIN_MATCH

MATCH_FLAG = 0x80
LITERAL_FLAG = 0x00
LITERAL_SIZE = 2
MATCH_SIZE = 3


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class Match:
    """Back-reference relative to the position the token starts at."""

    distance: int
    length: int


Token = Union[Literal, Match]


###############################################################################
# Packing
###############################################################################

def pack_token(token: Token, min_match: int = MIN_MATCH) -> bytes:
    """Serialize one token.

    Raises ``ValueError`` if a field does not fit its slot; that can only
    happen through an encoder defect, so it is never masked.
    """
    if isinstance(token, Literal):
        if not 0 <= token.value <= 0xFF:
            raise ValueError(f"Literal value out of range: {token.value}")
        return bytes((LITERAL_FLAG, token.value))
    if not 1 <= token.distance <= MAX_DISTANCE_FIELD:
        raise ValueError(f"Match distance out of range: {token.distance}")
    stored = token.length - min_match
    if not 0 <= stored <= MAX_LENGTH_FIELD:
        raise ValueError(f"Match length out of range: {token.length}")
    return bytes((
        MATCH_FLAG | ((token.distance >> 8) & 0x7F),
        token.distance & 0xFF,
        stored,
    ))


def serialize_tokens(tokens: Iterable[Token], min_match: int = MIN_MATCH) -> bytes:
    out = bytearray()
    for token in tokens:
        out += pack_token(token, min_match)
    return bytes(out)


###############################################################################
# Unpacking
###############################################################################

def unpack_match(b0: int, b1: int, b2: int, min_match: int = MIN_MATCH) -> Tuple[int, int]:
    """Return ``(distance, length)`` from the three bytes of a match token."""
    distance = ((b0 & 0x7F) << 8) | b1
    return distance, b2 + min_match


def parse_tokens(blob: bytes, min_match: int = MIN_MATCH) -> Iterator[Tuple[int, Token]]:
    """Yield ``(offset, token)`` pairs for every token in ``blob``.

    ``offset`` is the position of the token's flag byte.  Raises
    ``TruncatedStreamError`` when a token's fields run past the end.
    Back-references are not checked here; that needs the output length
    and is done by the decoder.
    """
    i = 0
    n = len(blob)
    while i < n:
        flag = blob[i]
        if flag & MATCH_FLAG:
            if i + MATCH_SIZE > n:
                raise TruncatedStreamError(i, MATCH_SIZE - 1, n - i - 1)
            distance, length = unpack_match(flag, blob[i + 1], blob[i + 2], min_match)
            yield i, Match(distance, length)
            i += MATCH_SIZE
        else:
            if i + LITERAL_SIZE > n:
                raise TruncatedStreamError(i, LITERAL_SIZE - 1, n - i - 1)
            yield i, Literal(blob[i + 1])
            i += LITERAL_SIZE
