"""
decoder.py -- Sequential replay of a token stream.

Decoding is never parallelised: every output byte may depend on any
earlier output byte, including bytes written earlier in the same match.
The output is a growable ``bytearray`` read back by index while it is
being appended to.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidBackReferenceError
from .params import MIN_MATCH
from .tokens import Literal, Token, parse_tokens


def _copy_match(out: bytearray, distance: int, length: int) -> None:
    # byte by byte: with distance < length the source overlaps what we write
    start = len(out) - distance
    for t in range(length):
        out.append(out[start + t])


def replay(tokens: Iterable[Token]) -> bytes:
    """Rebuild the original buffer from a token list.

    Errors report the index of the offending token as ``offset``.
    """
    out = bytearray()
    for index, token in enumerate(tokens):
        if isinstance(token, Literal):
            out.append(token.value)
            continue
        if not 1 <= token.distance <= len(out):
            raise InvalidBackReferenceError(index, token.distance, len(out))
        _copy_match(out, token.distance, token.length)
    return bytes(out)


def decode(blob: bytes, min_match: int = MIN_MATCH) -> bytes:
    """Decode a packed token stream.

    ``parse_tokens`` reads each flag byte and the fields it announces;
    this loop appends literals and replays matches.  Input must end
    exactly on a token boundary.

    Raises ``TruncatedStreamError`` if a token is cut short and
    ``InvalidBackReferenceError`` if a match reaches before the start of
    the output (or has distance 0).  Both carry the flag byte offset.
    Nothing is returned on failure.
    """
    out = bytearray()
    for offset, token in parse_tokens(blob, min_match):
        if isinstance(token, Literal):
            out.append(token.value)
            continue
        if not 1 <= token.distance <= len(out):
            raise InvalidBackReferenceError(offset, token.distance, len(out))
        _copy_match(out, token.distance, token.length)
    return bytes(out)
