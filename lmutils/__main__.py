"""Example program demonstrating lmutils usage.

    python -m lmutils [--verbose] [TIMESTAMP ...]

Each TIMESTAMP is Unix seconds or an ISO-8601 string with a UTC offset, and is
described against the system clock. Without timestamps a fixed set of sample
offsets is shown instead.
"""

import argparse
import logging
import sys
from time import time as current_time

from lmutils.arithmetic import addition, subtraction
from lmutils.relative import Instant, ago, how_long_ago
from lmutils.util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

# Seconds before "now" described when no timestamps are given
SAMPLE_OFFSETS = (
    0,
    45,
    5 * MINUTE,
    3 * HOUR,
    2 * DAY,
    3 * WEEK,
    3 * MONTH,
    2 * YEAR,
    -MINUTE,
)


def _parse_instant(raw: str) -> Instant:
    try:
        return int(raw)
    except ValueError:
        return raw


def _print_arithmetic() -> None:
    print("\n--- Integer Operations ---")
    a, b = 15, 7
    print(f"Addition: {a} + {b} = {addition(a, b)}")
    print(f"Subtraction: {a} - {b} = {subtraction(a, b)}")

    print("\n--- Floating-Point Operations ---")
    x, y = 25.75, 12.25
    print(f"Addition: {x:.2f} + {y:.2f} = {addition(x, y):.2f}")
    print(f"Subtraction: {x:.2f} - {y:.2f} = {subtraction(x, y):.2f}")

    print("\n--- Additional Test Cases ---")
    neg_a, neg_b = -10, 5
    print(f"Addition (negative): {neg_a} + {neg_b} = {addition(neg_a, neg_b)}")
    print(
        f"Subtraction (negative): {neg_a} - {neg_b} = {subtraction(neg_a, neg_b)}"
    )
    print(f"Addition with zero: {a} + 0 = {addition(a, 0)}")
    print(f"Subtraction with zero: {a} - 0 = {subtraction(a, 0)}")
    large_x, large_y = 1000000.50, 999999.25
    print(
        f"Large number addition: {large_x:.2f} + {large_y:.2f} = "
        f"{addition(large_x, large_y):.2f}"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lmutils",
        description="Demonstrate lmutils arithmetic and relative time formatting.",
    )
    parser.add_argument(
        "timestamps",
        nargs="*",
        help="Unix seconds or ISO-8601 strings to describe against the clock",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print("=== lmutils Example Program ===")
    _print_arithmetic()

    print("\n--- Relative Time ---")
    if args.timestamps:
        for raw in args.timestamps:
            try:
                print(f"{raw}: {ago(_parse_instant(raw))}")
            except (TypeError, ValueError) as e:
                print(f"error: {e}", file=sys.stderr)
                return 2
    else:
        now = int(current_time())
        for offset in SAMPLE_OFFSETS:
            print(f"{offset:>9}s before now: {how_long_ago(now - offset, now)}")

    print("\n=== Example completed successfully! ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
