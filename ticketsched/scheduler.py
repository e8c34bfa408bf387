"""Ticket-based task scheduler with round-robin and lottery selection.

Tasks are generator functions: each ``yield`` is one unit of work, and the
scheduler switches tasks between slices of a fixed number of steps, the
way a timer signal pre-empts a running thread.
"""

from __future__ import annotations

import enum
import random
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, TextIO

MAX_TASKS = 10
TIME_SLICE_USEC = 50000
DEFAULT_STEPS_PER_SLICE = 1000

TaskFunction = Callable[[], Iterator[object]]


class SchedulerType(enum.Enum):
    """The algorithm used to pick the next task."""

    ROUND_ROBIN = "Round Robin"
    LOTTERY = "Lottery"


class SchedulerError(Exception):
    """Raised when the scheduler cannot do what was asked."""


class AllTasksTerminated(SchedulerError):
    """Raised by a tick once no runnable task is left."""


@dataclass
class Task:
    """A schedulable unit of work holding a number of tickets."""

    id: int
    func: TaskFunction
    tickets: int
    terminated: bool = False
    steps: int = 0
    _runner: Optional[Iterator[object]] = field(default=None, repr=False)

    def runner(self) -> Iterator[object]:
        if self._runner is None:
            self._runner = iter(self.func())
        return self._runner


class Scheduler:
    """Holds tasks and decides which one runs in each time slice."""

    def __init__(
        self,
        kind: SchedulerType = SchedulerType.ROUND_ROBIN,
        rng: Optional[random.Random] = None,
        out: Optional[TextIO] = None,
        max_tasks: int = MAX_TASKS,
    ) -> None:
        self.kind = SchedulerType(kind)
        self.rng = rng if rng is not None else random.Random()
        self.out = out if out is not None else sys.stdout
        self.max_tasks = max_tasks
        self.tasks: list[Task] = []
        self.current_task = 0
        self.active_tasks = 0

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    def create_task(self, func: TaskFunction, tickets: int) -> int:
        """Add a task and return its id."""
        if self.task_count >= self.max_tasks:
            raise SchedulerError("Maximum number of tasks reached")
        if tickets < 1:
            raise ValueError("a task needs at least one ticket")
        task = Task(id=self.task_count, func=func, tickets=tickets)
        self.tasks.append(task)
        self.active_tasks += 1
        return task.id

    def _spend_ticket(self, task: Task) -> None:
        task.tickets -= 1
        if task.tickets == 0:
            self.out.write(f"Task {task.id} has run out of tickets, terminating\n")
            task.terminated = True
            self.active_tasks -= 1

    def _require_tasks(self) -> None:
        if not self.tasks:
            raise SchedulerError("No tasks to schedule")

    def round_robin_select(self) -> int:
        """Pick the next live task after the current one and spend a ticket."""
        self._require_tasks()
        count = self.task_count
        start = (self.current_task + 1) % count
        candidates = ((start + offset) % count for offset in range(count))
        chosen = next((i for i in candidates if not self.tasks[i].terminated), None)
        if chosen is None:
            # Every task is terminated; report the first one looked at.
            return start
        self._spend_ticket(self.tasks[chosen])
        return chosen

    def lottery_select(self) -> int:
        """Draw a ticket among live tasks and spend one of the winner's."""
        self._require_tasks()
        live = [task for task in self.tasks if not task.terminated]
        total = sum(task.tickets for task in live)
        if total == 0:
            return self.round_robin_select()
        winning = self.rng.randrange(total)
        counter = 0
        for task in live:
            counter += task.tickets
            if counter > winning:
                self._spend_ticket(task)
                return task.id
        return self.round_robin_select()

    def select_next(self) -> int:
        """Select the next task with the configured algorithm."""
        if self.kind is SchedulerType.LOTTERY:
            return self.lottery_select()
        return self.round_robin_select()

    def tick(self) -> int:
        """Switch to the next task and return its id.

        Raises AllTasksTerminated when nothing is left to run, including
        when the selected task has just spent its last ticket.
        """
        if self.active_tasks == 0:
            raise AllTasksTerminated("all tasks have terminated")
        chosen = self.select_next()
        if self.tasks[chosen].terminated:
            raise AllTasksTerminated("all tasks have terminated")
        self.current_task = chosen
        return chosen

    def run_slice(self, steps: int) -> bool:
        """Run the current task for up to ``steps`` steps.

        Returns False if the task's function returned during the slice.
        """
        self._require_tasks()
        task = self.tasks[self.current_task]
        runner = task.runner()
        for _ in range(steps):
            try:
                next(runner)
            except StopIteration:
                return False
            task.steps += 1
        return True

    def start(self, steps_per_slice: int = DEFAULT_STEPS_PER_SLICE) -> dict[int, int]:
        """Run tasks slice by slice, starting with the first, until done."""
        self._require_tasks()
        if steps_per_slice < 1:
            raise ValueError("steps_per_slice must be positive")
        self.current_task = 0
        while True:
            if not self.run_slice(steps_per_slice):
                self.out.write("Scheduler finished\n")
                break
            try:
                self.tick()
            except AllTasksTerminated:
                self.out.write("\n--- All tasks have terminated ---\n")
                break
        return self.summary()

    def summary(self) -> dict[int, int]:
        """Map each task id to the number of steps it has run."""
        return {task.id: task.steps for task in self.tasks}