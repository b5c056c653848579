"""
scheduler.py -- Block-parallel compression.

The input is cut into ``workers`` contiguous blocks of equal
(ceiling-divided) size and each block is encoded on its own: the window
restarts at every block boundary, so a block never references bytes of
the previous one.  That costs some ratio near the boundaries in exchange
for independent work.  Blocks are fanned out over a
``concurrent.futures`` pool and joined once, in block order, after every
worker has finished.

The concatenated output decodes as one continuous stream to the
concatenated input; the per-block streams from ``compress_blocks`` also
decode individually to their own block.
"""

from __future__ import annotations

import os
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple, Type

from .decoder import decode
from .encoder import encode
from .params import DEFAULT_PARAMS, LZSSParams
from .tokens import serialize_tokens

EXECUTORS = ('thread', 'process')


def pool_class(executor: str) -> Type[Executor]:
    """Map an executor name to its ``concurrent.futures`` pool class."""
    if executor == 'thread':
        return ThreadPoolExecutor
    if executor == 'process':
        return ProcessPoolExecutor
    raise ValueError(f"Unknown executor {executor!r}, expected one of {EXECUTORS}")


def default_workers() -> int:
    return os.cpu_count() or 4


def split_blocks(n: int, workers: int) -> List[Tuple[int, int]]:
    """Return ``(start, end)`` pairs covering ``range(n)`` in ``workers`` blocks.

    Block size is ``ceil(n / workers)``; trailing blocks that would be
    empty are dropped, so fewer than ``workers`` pairs may come back.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if n == 0:
        return []
    block_size = -(-n // workers)
    return [(start, min(start + block_size, n)) for start in range(0, n, block_size)]


def _compress_block(block: bytes, params: LZSSParams) -> bytes:
    return serialize_tokens(encode(block, params), params.min_match)


def compress_blocks(data: bytes, workers: Optional[int] = None,
                    params: LZSSParams = DEFAULT_PARAMS,
                    executor: str = 'thread') -> List[bytes]:
    """Compress each block independently and return the per-block streams.

    Every worker gets a private copy of its slice and produces a private
    output; results are only read once all of them are done.
    """
    workers = workers or default_workers()
    pool_cls = pool_class(executor)
    blocks = [bytes(data[a:b]) for a, b in split_blocks(len(data), workers)]
    if not blocks:
        return []
    if len(blocks) == 1:
        return [_compress_block(blocks[0], params)]
    with pool_cls(max_workers=min(workers, len(blocks))) as pool:
        futures = [pool.submit(_compress_block, block, params) for block in blocks]
        # leaving the pool joins every worker before any result is read
    return [fut.result() for fut in futures]


def compress_parallel(data: bytes, workers: Optional[int] = None,
                      params: LZSSParams = DEFAULT_PARAMS,
                      executor: str = 'thread') -> bytes:
    """Block-parallel compression, concatenated in block order."""
    return b"".join(compress_blocks(data, workers, params, executor))


def decompress_blocks(streams: Iterable[bytes], params: LZSSParams = DEFAULT_PARAMS) -> bytes:
    """Decode each block's stream on its own and concatenate the results."""
    return b"".join(decode(stream, params.min_match) for stream in streams)
