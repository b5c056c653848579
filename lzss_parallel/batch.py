"""
batch.py -- Data-parallel match search followed by sequential assembly.

Compression is split into two explicit phases:

1. ``compute_all`` finds the best match for *every* position of the
   input independently and stores it in two position-indexed arrays
   (``lengths``, ``distances``).  Each position only reads the shared,
   immutable input and only writes its own slot, so the whole phase is
   embarrassingly parallel.
2. ``encoder.assemble`` walks the arrays greedily.  This cannot be
   parallelised: a match moves the cursor past positions whose
   candidates are then discarded unread.

The phases meet at a single barrier: assembly starts only once the
arrays are complete.

Backends for phase 1:

* ``'numpy'`` -- one vectorised "kernel" over all positions.  For each
  distance ``d`` (farthest first) it compares the buffer against itself
  shifted by ``d`` and grows the run length of every position at once.
  Updating only on strictly longer runs keeps the farthest-distance
  tie-break of ``find_best_match``.
* ``'thread'`` / ``'process'`` -- positions are cut into spans and each
  span is searched with ``find_best_match`` on a pool worker.

All backends return identical arrays.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .encoder import assemble
from .errors import OversizeInputError
from .matcher import find_best_match
from .params import DEFAULT_PARAMS, LZSSParams
from .scheduler import default_workers, pool_class
from .tokens import serialize_tokens

BACKENDS = ('numpy', 'thread', 'process')

# positions are indexed with int32 arrays
MAX_BATCH_POSITIONS = int(np.iinfo(np.int32).max)

# spans handed out per worker; early positions have short windows, so
# more spans than workers keeps the pool busy
SPANS_PER_WORKER = 4


###############################################################################
# Vectorised kernel
###############################################################################

def _kernel_numpy(buf: np.ndarray, window_size: int, max_match: int,
                  lengths: np.ndarray, distances: np.ndarray) -> None:
    n = buf.shape[0]
    for d in range(min(window_size, n - 1), 0, -1):
        # eq[k] <=> buf[k] == buf[k + d]; position pos = k + d, candidate j = k
        eq = buf[d:] == buf[:-d]
        m = eq.shape[0]
        run = np.zeros(m, dtype=np.int32)
        alive = np.ones(m, dtype=bool)
        for t in range(min(max_match, m)):
            alive[:m - t] &= eq[t:]
            alive[m - t:] = False
            if not alive.any():
                break
            run += alive
        better = run > lengths[d:]
        if better.any():
            lengths[d:][better] = run[better]
            distances[d:][better] = d


###############################################################################
# Pool backend
###############################################################################

def span_window(n: int, start: int, stop: int, window_size: int,
                max_match: int) -> Tuple[int, int]:
    """Bytes that searching positions ``start..stop-1`` can read."""
    return max(0, start - window_size), min(n, stop + max_match)


def _search_span(chunk: bytes, base: int, start: int, stop: int, window_size: int,
                 max_match: int) -> Tuple[int, List[int], List[int]]:
    # chunk holds data[base:...], wide enough for every window and lookahead of the span
    span_lengths: List[int] = []
    span_distances: List[int] = []
    for pos in range(start - base, stop - base):
        length, distance = find_best_match(chunk, pos, window_size, max_match)
        span_lengths.append(length)
        span_distances.append(distance)
    return start, span_lengths, span_distances


def _spans(n: int, count: int) -> List[Tuple[int, int]]:
    size = max(1, -(-n // count))
    return [(start, min(start + size, n)) for start in range(0, n, size)]


###############################################################################
# Public API
###############################################################################

def compute_all(data: bytes, params: LZSSParams = DEFAULT_PARAMS,
                backend: str = 'numpy',
                workers: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(lengths, distances)`` for every position of ``data``.

    ``lengths[p]``/``distances[p]`` equal ``find_best_match(data, p, ...)``
    for the window parameters in ``params``.  Raises
    ``OversizeInputError`` before allocating anything when the input has
    more positions than the int32 arrays can index.
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown batch backend {backend!r}, expected one of {BACKENDS}")
    n = len(data)
    if n > MAX_BATCH_POSITIONS:
        raise OversizeInputError(n, MAX_BATCH_POSITIONS)
    data = bytes(data)
    lengths = np.zeros(n, dtype=np.int32)
    distances = np.zeros(n, dtype=np.int32)
    if n < 2:
        return lengths, distances

    if backend == 'numpy':
        buf = np.frombuffer(data, dtype=np.uint8)
        _kernel_numpy(buf, params.window_size, params.max_match, lengths, distances)
        return lengths, distances

    workers = workers or default_workers()
    pool_cls = pool_class(backend)
    futures = []
    with pool_cls(max_workers=workers) as pool:
        for start, stop in _spans(n, workers * SPANS_PER_WORKER):
            lo, hi = span_window(n, start, stop, params.window_size, params.max_match)
            futures.append(pool.submit(_search_span, data[lo:hi], lo, start, stop,
                                       params.window_size, params.max_match))
    # every span writes its own disjoint slice
    for fut in futures:
        start, span_lengths, span_distances = fut.result()
        stop = start + len(span_lengths)
        lengths[start:stop] = span_lengths
        distances[start:stop] = span_distances
    return lengths, distances


def compress_batch(data: bytes, params: LZSSParams = DEFAULT_PARAMS,
                   backend: str = 'numpy', workers: Optional[int] = None) -> bytes:
    """Batch search, then sequential assembly and serialization."""
    lengths, distances = compute_all(data, params, backend, workers)
    tokens = assemble(bytes(data), lengths, distances, params)
    return serialize_tokens(tokens, params.min_match)
