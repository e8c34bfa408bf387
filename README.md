# ticketsched

`ticketsched` is a small user-level task scheduler. Tasks are generator
functions that all run in one thread. Each task gets a budget of tickets.
Every time the scheduler switches to a task, that task spends one ticket. When
a task spends its last ticket, it is terminated, and the run ends at that
switch.

There are two ways to pick the next task. Both are in `SchedulerType`:

- `SchedulerType.ROUND_ROBIN`: tasks take turns in creation order, and
  terminated tasks are skipped.
- `SchedulerType.LOTTERY`: one ticket is drawn at random from all live tasks,
  so a task with more tickets is picked more often.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line demo

```
ticketsched-demo [--scheduler {round-robin,lottery}] [--seed N] [--steps N]
```

This creates four counting tasks, `func1` to `func4`, with 10, 20, 30 and 40
tickets. It prints the initial ticket allocation and runs the scheduler until
the run ends. At the end it prints how many times each function counted.

- `--scheduler` picks the policy. The default is `round-robin`.
- `--seed` seeds the random draw used by the lottery policy.
- `--steps` sets how many steps a task runs in each time slice. The default
  is 1000, and the value must be positive.

## Examples command

```
ticketsched-examples contexts [--count N]
ticketsched-examples timer [--ticks N] [--interval SECONDS]
```

- `contexts` makes `N` contexts (default 5). It then switches into each one in
  turn and lets it run to completion. Each context prints `in func()`.
- `timer` handles `N` expiries (default 10) of a timer that measures process
  CPU time. Each expiry comes after `SECONDS` of CPU time (default 1.5), and
  the timer is re-armed every time. The program keeps the CPU busy while it
  waits, so the defaults take about 15 seconds of CPU time.

## Library use

```python
import random
from ticketsched.scheduler import Scheduler, SchedulerType

def worker():
    while True:
        yield

sched = Scheduler(SchedulerType.LOTTERY, rng=random.Random(1))
sched.create_task(worker, 50)
sched.create_task(worker, 100)
steps = sched.start(steps_per_slice=10)   # {task_id: steps_run}
```

A task is any callable that returns an iterator. Each item the iterator
yields counts as one step.

- `Scheduler(kind, rng, out, max_tasks)`: all arguments are optional. `out`
  receives status messages and defaults to standard output. `max_tasks`
  defaults to 10.
- `create_task(func, tickets)` returns the new task's id. It raises
  `SchedulerError` when `max_tasks` is already reached, and `ValueError` when
  `tickets` is less than 1.
- `start(steps_per_slice)` first runs task 0, then switches tasks between
  slices. The run stops in one of two ways. If `tick` raises
  `AllTasksTerminated`, the scheduler writes `--- All tasks have terminated ---`.
  If a task's iterator is exhausted, it writes `Scheduler finished`. Either
  way, `start` returns `summary()`. It raises `SchedulerError` when there are
  no tasks.
- `tick()` selects the next task, makes it current, and returns its id. It
  raises `AllTasksTerminated` when no task is active, or when the selected
  task has just spent its last ticket.
- `round_robin_select()`, `lottery_select()` and `select_next()` expose the
  selection step on its own.
- `run_slice(steps)` runs only the current task.
- `summary()` maps each task id to the number of steps it has run.

For the counting demo as a library, see `ticketsched.demo`:

- `Counters` holds the counts.
- `counting_task` makes a task function that counts.
- `build_scheduler` creates the four tasks.
- `run_demo` runs the whole demo and returns the `Counters`.

`ticketsched.examples.run_contexts` and `ticketsched.examples.run_timer` are
what the examples command calls.

## Limitations

Scheduling is cooperative. A task gives up control only at a `yield`, and a
slice is counted in steps, not in time. Nothing pre-empts a task from outside,
so a task that never yields will never be switched out.