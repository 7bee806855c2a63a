from __future__ import annotations

import argparse
import time

from spanned import Spanned
from spanned.complete import anychar
from spanned.testing import generate_texts, reference_position


def _incremental(text: str, utf8: bool) -> int:
    span = Spanned.new(text, utf8=utf8)
    total = 0
    while span:
        span, _ = anychar(span)
        total += span.col
    return total


def _rescan(text: str, utf8: bool) -> int:
    total = 0
    for i in range(1, len(text) + 1):
        total += reference_position(text, i, utf8=utf8).column
    return total


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="bench_positions",
        description="Query the column after every element: incremental tracking vs rescanning",
    )
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=200)
    ap.add_argument("--repeat", type=int, default=4, help="concatenate the corpus this many times")
    ap.add_argument("--ascii", action="store_true", help="count columns in bytes")
    args = ap.parse_args(argv)

    text = "\n".join(generate_texts(seed=args.seed, count=args.count)) * args.repeat
    utf8 = not args.ascii
    print(f"input: {len(text)} code points, {len(text.encode('utf-8'))} bytes")

    for name, fn in (("incremental", _incremental), ("rescan", _rescan)):
        t0 = time.perf_counter()
        checksum = fn(text, utf8)
        dt = time.perf_counter() - t0
        print(f"{name:>12}: {dt:8.3f}s  checksum={checksum}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
