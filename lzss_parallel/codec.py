"""
codec.py -- ``compress`` / ``decompress``, the two boundary operations.

Three strategies produce a packed token stream from the same search
primitive:

* ``'sequential'`` -- search and assemble position by position.
* ``'blocks'``     -- independent blocks on a worker pool (window resets
  at every block boundary, so output may differ from sequential).
* ``'batch'``      -- search all positions in parallel, then assemble
  sequentially (byte-identical to sequential).

``decompress`` does not care which strategy produced the stream.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from .batch import compute_all
from .decoder import decode
from .encoder import assemble, encode
from .params import DEFAULT_PARAMS, LZSSParams
from .scheduler import compress_blocks
from .tokens import serialize_tokens

STRATEGIES = ('sequential', 'blocks', 'batch')


@dataclass(frozen=True)
class CompressionResult:
    """Compressed stream plus timings in milliseconds.

    ``search_ms`` is the parallel phase (batch search or block fan-out);
    for the sequential strategy search and assembly are interleaved, so
    it covers nearly all of ``total_ms``.
    """

    data: bytes
    total_ms: float
    search_ms: float
    strategy: str


def compress_timed(data: bytes, strategy: str = 'sequential',
                   params: LZSSParams = DEFAULT_PARAMS,
                   workers: Optional[int] = None, executor: str = 'thread',
                   backend: str = 'numpy') -> CompressionResult:
    """Compress ``data`` with the chosen strategy and time it."""
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}")
    # the caller's buffer is never touched again after this copy
    data = bytes(data)
    t0 = time.perf_counter()
    if strategy == 'sequential':
        blob = serialize_tokens(encode(data, params), params.min_match)
        search_ms = (time.perf_counter() - t0) * 1000.0
    elif strategy == 'blocks':
        streams = compress_blocks(data, workers, params, executor)
        search_ms = (time.perf_counter() - t0) * 1000.0
        blob = b"".join(streams)
    else:
        lengths, distances = compute_all(data, params, backend, workers)
        search_ms = (time.perf_counter() - t0) * 1000.0
        blob = serialize_tokens(assemble(data, lengths, distances, params), params.min_match)
    total_ms = (time.perf_counter() - t0) * 1000.0
    return CompressionResult(blob, total_ms, search_ms, strategy)


def compress(data: bytes, strategy: str = 'sequential',
             params: LZSSParams = DEFAULT_PARAMS,
             workers: Optional[int] = None, executor: str = 'thread',
             backend: str = 'numpy') -> bytes:
    """Compress ``data`` into a packed token stream."""
    return compress_timed(data, strategy, params, workers, executor, backend).data


def decompress(blob: bytes, params: LZSSParams = DEFAULT_PARAMS) -> bytes:
    """Decode a packed token stream produced by any strategy.

    Raises ``TruncatedStreamError`` or ``InvalidBackReferenceError`` on a
    malformed stream.
    """
    return decode(bytes(blob), params.min_match)
