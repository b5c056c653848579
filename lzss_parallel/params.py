"""
params.py -- Window parameters shared by every encoder and decoder path.

``W`` (window size), ``L`` (maximum match length) and ``M`` (minimum
match length) are fixed per stream: the packed format stores neither,
so the decoder must be given the same ``min_match`` the encoder used.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidParametersError

###############################################################################
# Format limits
###############################################################################

# 15 bits of distance: 7 in the flag byte, 8 in the following byte
MAX_DISTANCE_FIELD = 0x7FFF
# length is stored as (length - M) in one byte
MAX_LENGTH_FIELD = 0xFF

WINDOW_SIZE = 4096
MAX_MATCH = 18
MIN_MATCH = 3


@dataclass(frozen=True)
class LZSSParams:
    """Sliding window parameters.

    ``window_size`` bounds the backward search distance, ``max_match``
    caps a single match and ``min_match`` is the shortest run that is
    worth a match token over literals.  Values are checked against the
    packed token format on construction.
    """

    window_size: int = WINDOW_SIZE
    max_match: int = MAX_MATCH
    min_match: int = MIN_MATCH

    def __post_init__(self) -> None:
        if not 1 <= self.window_size <= MAX_DISTANCE_FIELD:
            raise InvalidParametersError(
                f"window_size must be in [1, {MAX_DISTANCE_FIELD}], got {self.window_size}"
            )
        if self.min_match < 1:
            raise InvalidParametersError(f"min_match must be >= 1, got {self.min_match}")
        if not self.min_match <= self.max_match <= self.min_match + MAX_LENGTH_FIELD:
            raise InvalidParametersError(
                f"max_match must be in [{self.min_match}, {self.min_match + MAX_LENGTH_FIELD}], "
                f"got {self.max_match}"
            )


DEFAULT_PARAMS = LZSSParams()
