"""
cli.py -- Command line front end.

Usage:
    # Compress (sequential search)
    lzss-parallel -i input.bin

    # Block-parallel on 8 threads
    lzss-parallel -i input.bin -s blocks -w 8

    # Batch search with the numpy kernel
    lzss-parallel -i input.bin -s batch --backend numpy

    # Decompress
    lzss-parallel -d -i input.bin.lzss

    # Built-in benchmark
    lzss-parallel --experiment

Compression decodes its own output again and reports the integrity
check, sizes, ratio and timings.
"""

from __future__ import annotations

import argparse
import os
import time
from typing import List, Optional

from .batch import BACKENDS
from .codec import STRATEGIES, compress_timed, decompress
from .errors import LZSSError
from .params import MAX_MATCH, MIN_MATCH, WINDOW_SIZE, LZSSParams
from .scheduler import EXECUTORS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lzss-parallel',
                                     description='Sliding-window LZSS compressor')
    parser.add_argument('-i', '--input', nargs='?', help='Input file to compress or decompress')
    parser.add_argument('-d', '--decompress', action='store_true', help='Decompress')
    parser.add_argument('-o', '--output', help='Output file')
    parser.add_argument('-s', '--strategy', choices=STRATEGIES, default='sequential',
                        help='Compression strategy (default sequential)')
    parser.add_argument('-w', '--workers', type=int, default=None,
                        help='Worker count for blocks/batch (default: CPU count)')
    parser.add_argument('--executor', choices=EXECUTORS, default='thread',
                        help='Pool used by the blocks strategy')
    parser.add_argument('--backend', choices=BACKENDS, default='numpy',
                        help='Search backend used by the batch strategy')
    parser.add_argument('--window', type=int, default=WINDOW_SIZE,
                        help=f'Maximum backward distance (default {WINDOW_SIZE})')
    parser.add_argument('--max-match', type=int, default=MAX_MATCH,
                        help=f'Maximum match length (default {MAX_MATCH})')
    parser.add_argument('--experiment', action='store_true', help='Run built-in benchmark')
    parser.add_argument('--plot', default='lzss_comparison_plot.png',
                        help='Plot written by --experiment')
    parser.add_argument('--progress', action='store_true', help='Show per-step progress')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        params = LZSSParams(window_size=args.window, max_match=args.max_match,
                            min_match=MIN_MATCH)
    except LZSSError as e:
        parser.error(str(e))

    if args.experiment:
        from . import benchmark
        benchmark.G_PROGRESS = bool(args.progress)
        benchmark.run_experiment(args.plot, params=params, workers=args.workers,
                                 executor=args.executor, backend=args.backend)
        return 0

    if not args.input:
        parser.print_help()
        return 0

    with open(args.input, 'rb') as f:
        data = f.read()

    if args.decompress:
        try:
            out = decompress(data, params)
        except LZSSError as e:
            print(f"Decompression failed: {e}")
            return 1
        outname = args.output or (os.path.splitext(args.input)[0] + '.out')
        with open(outname, 'wb') as f:
            f.write(out)
        print(f"Decompressed {len(data)} bytes to {len(out)} bytes → {outname}")
        return 0

    res = compress_timed(data, args.strategy, params, args.workers,
                         args.executor, args.backend)
    outname = args.output or (args.input + '.lzss')
    with open(outname, 'wb') as f:
        f.write(res.data)

    t0 = time.perf_counter()
    restored = decompress(res.data, params)
    decomp_ms = (time.perf_counter() - t0) * 1000.0
    ok = restored == data
    ratio = len(res.data) / len(data) if data else 1.0

    print(f"Strategy: {args.strategy}")
    print(f"Total compression time: {res.total_ms:.1f} ms")
    print(f"Search phase time: {res.search_ms:.1f} ms")
    print(f"Decompression time: {decomp_ms:.1f} ms")
    print(f"Integrity check: {'PASSED' if ok else 'FAILED'}")
    print(f"Original size: {len(data)} bytes")
    print(f"Compressed size: {len(res.data)} bytes → {outname}")
    print(f"Compression ratio: {ratio:.2%}")
    return 0 if ok else 1


if __name__ == '__main__':
    raise SystemExit(main())
