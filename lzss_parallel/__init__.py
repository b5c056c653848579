"""
lzss_parallel -- sliding-window LZSS compressor with sequential,
block-parallel and batch (per-position parallel) match search.

Quick use::

    from lzss_parallel import compress, decompress
    blob = compress(data, strategy='batch')
    assert decompress(blob) == data
"""

from .codec import STRATEGIES, CompressionResult, compress, compress_timed, decompress
from .errors import (
    InvalidBackReferenceError,
    InvalidParametersError,
    LZSSError,
    OversizeInputError,
    TruncatedStreamError,
)
from .params import DEFAULT_PARAMS, LZSSParams

__version__ = "0.1.0"

__all__ = [
    "STRATEGIES",
    "CompressionResult",
    "compress",
    "compress_timed",
    "decompress",
    "LZSSError",
    "InvalidBackReferenceError",
    "InvalidParametersError",
    "OversizeInputError",
    "TruncatedStreamError",
    "DEFAULT_PARAMS",
    "LZSSParams",
]
