"""
errors.py -- Error kinds raised by the LZSS engine.

Every error derives from ``LZSSError`` (itself a ``ValueError``) so callers
that only care about "bad data" can catch a single type.  Decoding errors
carry the byte offset of the token that failed so a corrupted stream can
be diagnosed without re-running the decoder.
"""

from __future__ import annotations


class LZSSError(ValueError):
    """Base class for all engine errors."""


class InvalidParametersError(LZSSError):
    """Window parameters that the packed token format cannot represent."""


class TruncatedStreamError(LZSSError, EOFError):
    """A token's flag byte was read but its fields run past end of input."""

    def __init__(self, offset: int, needed: int, available: int) -> None:
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated token at offset {offset}: "
            f"need {needed} more byte(s), {available} available"
        )


class InvalidBackReferenceError(LZSSError):
    """A match token points before the start of the produced output."""

    def __init__(self, offset: int, distance: int, produced: int) -> None:
        self.offset = offset
        self.distance = distance
        self.produced = produced
        super().__init__(
            f"Invalid back-reference at offset {offset}: "
            f"distance {distance} with only {produced} byte(s) produced"
        )


class OversizeInputError(LZSSError):
    """Input too large for the position-indexed batch arrays."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Input of {size} bytes exceeds batch limit of {limit} positions")
