"""Demo program: four counting tasks sharing the CPU by ticket."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, TextIO

from ticketsched.scheduler import (
    DEFAULT_STEPS_PER_SLICE,
    Scheduler,
    SchedulerType,
    TaskFunction,
)

TASK_TICKETS = (("func1", 10), ("func2", 20), ("func3", 30), ("func4", 40))


@dataclass
class Counters:
    """How many times each named task function has done its work."""

    counts: dict[str, int] = field(default_factory=dict)

    def increment(self, name: str) -> int:
        self.counts[name] = self.counts.get(name, 0) + 1
        return self.counts[name]

    def __getitem__(self, name: str) -> int:
        return self.counts.get(name, 0)

    def items(self):
        return self.counts.items()


def counting_task(name: str, counters: Counters, out: TextIO) -> TaskFunction:
    """Return a task function that counts forever under ``name``."""

    def run() -> Iterator[int]:
        out.write(f"{name}: started\n")
        while True:
            yield counters.increment(name)

    return run


def build_scheduler(
    kind: SchedulerType,
    counters: Counters,
    out: TextIO,
    rng: Optional[random.Random] = None,
) -> Scheduler:
    """Create a scheduler holding the four demo tasks."""
    scheduler = Scheduler(kind, rng=rng, out=out)
    for name, tickets in TASK_TICKETS:
        counters.counts.setdefault(name, 0)
        scheduler.create_task(counting_task(name, counters, out), tickets)
    return scheduler


def run_demo(
    kind: SchedulerType = SchedulerType.ROUND_ROBIN,
    out: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
    steps_per_slice: int = DEFAULT_STEPS_PER_SLICE,
) -> Counters:
    """Run the demo to completion and return the execution counters."""
    out = out if out is not None else sys.stdout
    kind = SchedulerType(kind)
    counters = Counters()
    out.write(f"Using scheduler type: {kind.value}\n")
    scheduler = build_scheduler(kind, counters, out, rng)

    out.write("Initial ticket allocation:\n")
    for task, (name, _) in zip(scheduler.tasks, TASK_TICKETS):
        out.write(f"Task {task.id} ({name}): {task.tickets} tickets\n")
    out.write("\nStarting scheduler...\n\n")

    scheduler.start(steps_per_slice)

    out.write("Function execution summary:\n")
    for name, count in counters.items():
        out.write(f"{name} executed {count} times\n")
    return counters


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the ticket scheduler demo.")
    parser.add_argument(
        "--scheduler",
        choices=("round-robin", "lottery"),
        default="round-robin",
        help="selection algorithm (default: round-robin)",
    )
    parser.add_argument("--seed", type=int, default=None, help="lottery random seed")
    parser.add_argument(
        "--steps",
        type=int,
        default=DEFAULT_STEPS_PER_SLICE,
        help="steps each task runs per time slice",
    )
    args = parser.parse_args(argv)
    kind = SchedulerType.LOTTERY if args.scheduler == "lottery" else SchedulerType.ROUND_ROBIN
    try:
        run_demo(kind, rng=random.Random(args.seed), steps_per_slice=args.steps)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())