"""
matcher.py -- Windowed longest-match search.

``find_best_match`` is the single search primitive shared by every
execution strategy.  It is a pure function of the input buffer and a
position: no hash chains, no suffix structures, just a brute-force scan
of the window, O(W*L) per position.  The batch kernel in ``batch.py``
reproduces exactly the same results, tie-break included.
"""

from __future__ import annotations

from typing import NamedTuple

from .params import MAX_MATCH, WINDOW_SIZE


class MatchCandidate(NamedTuple):
    """Best backward match found for one position.

    ``length == 0`` (with ``distance == 0``) means no byte matched.
    """

    length: int
    distance: int


NO_MATCH = MatchCandidate(0, 0)


def find_best_match(data: bytes, pos: int, window_size: int = WINDOW_SIZE,
                    max_match: int = MAX_MATCH) -> MatchCandidate:
    """Find the longest run starting at ``pos`` that also starts earlier.

    Candidate starts ``j`` are scanned from ``max(0, pos - window_size)``
    up to ``pos - 1``.  The run for ``j`` is the number of bytes with
    ``data[j + t] == data[pos + t]``, capped at ``max_match`` and at the
    end of the buffer.  The run may overlap ``pos`` itself (``j + t >=
    pos``); the decoder copies byte by byte so that is legal.

    A candidate only replaces the current best when it is strictly
    longer.  Since ``j`` ascends, ties keep the smallest ``j``, i.e. the
    farthest distance.
    """
    n = len(data)
    best_len = 0
    best_dist = 0
    limit = min(max_match, n - pos)
    for j in range(max(0, pos - window_size), pos):
        k = 0
        while k < limit and data[j + k] == data[pos + k]:
            k += 1
        if k > best_len:
            best_len = k
            best_dist = pos - j
    if best_len == 0:
        return NO_MATCH
    return MatchCandidate(best_len, best_dist)
