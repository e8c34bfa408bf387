"""Small demonstrations of context switching and a CPU-time timer."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, Optional, Sequence, TextIO

DEFAULT_CONTEXTS = 5
DEFAULT_INTERVAL = 1.5
DEFAULT_TICKS = 10


def run_contexts(count: int = DEFAULT_CONTEXTS, out: Optional[TextIO] = None) -> int:
    """Create ``count`` contexts, then switch into each until it returns.

    Returns the number of contexts that ran to completion.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    out = out if out is not None else sys.stdout

    def func() -> Iterator[None]:
        out.write("in func()\n")
        yield

    contexts = []
    for index in range(count):
        contexts.append(func())
        out.write(f"made context {index}\n")

    finished = 0
    for index, context in enumerate(contexts):
        out.write(f"{index}\n")
        for _ in context:
            pass
        finished += 1
    return finished


def _virtual_timer(interval: float) -> Iterator[None]:
    """Yield each time ``interval`` seconds of process CPU time have passed."""
    while True:
        deadline = time.process_time() + interval
        while time.process_time() < deadline:
            pass
        yield


def run_timer(
    ticks: int = DEFAULT_TICKS,
    interval: float = DEFAULT_INTERVAL,
    out: Optional[TextIO] = None,
) -> int:
    """Handle ``ticks`` expiries of a CPU-time timer, re-arming it each time."""
    if ticks < 0:
        raise ValueError("ticks must not be negative")
    if interval <= 0:
        raise ValueError("interval must be positive")
    out = out if out is not None else sys.stdout
    handled = 0
    timer = _virtual_timer(interval)
    while handled < ticks:
        next(timer)
        handled += 1
        out.write(f"({handled:2d}) handled a timer signal, setting timer\n")
    return handled


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Context and timer demonstrations.")
    commands = parser.add_subparsers(dest="command", required=True)

    contexts = commands.add_parser("contexts", help="switch through several contexts")
    contexts.add_argument("--count", type=int, default=DEFAULT_CONTEXTS)

    timer = commands.add_parser("timer", help="handle CPU-time timer expiries")
    timer.add_argument("--ticks", type=int, default=DEFAULT_TICKS)
    timer.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)

    args = parser.parse_args(argv)
    try:
        if args.command == "contexts":
            run_contexts(args.count)
        else:
            run_timer(args.ticks, args.interval)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())