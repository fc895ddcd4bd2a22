"""Example programs: an ordered list and two tasks toggling flags."""

from __future__ import annotations

import argparse
from typing import Callable, List as PyList, Optional, Sequence, Tuple

from .lists import List, ListItem
from .task import MAX_PRIORITIES, Scheduler

TASK_STACK_SIZE = 32
TASK_PRIORITY = 2


def list_demo() -> PyList[int]:
    """Insert items 3, 1 and 2 into a list and return their values in list order."""
    ready = List()
    item1, item2, item3 = ListItem(1), ListItem(2), ListItem(3)
    ready.insert(item3)
    ready.insert(item1)
    ready.insert(item2)
    return [item.value for item in ready]


def _flag_task(flag: str, log: PyList[Tuple[str, int]]) -> Callable:
    def entry(_parameters):
        while True:
            log.append((flag, 1))
            log.append((flag, 0))
            yield

    return entry


def task_demo(switches: int) -> PyList[Tuple[str, int]]:
    """Run two tasks that set and clear their flag, yielding after each pulse."""
    log: PyList[Tuple[str, int]] = []
    scheduler = Scheduler(MAX_PRIORITIES)
    for flag, name in (("flag1", "Taks1"), ("flag2", "Taks2")):
        tcb = scheduler.create_static(
            _flag_task(flag, log), name, TASK_STACK_SIZE, None, [0] * TASK_STACK_SIZE
        )
        scheduler.add_ready(tcb, TASK_PRIORITY)
    scheduler.start()
    scheduler.run(switches)
    return log


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the list and task examples.")
    parser.add_argument("--switches", type=int, default=4, help="context switches to run")
    args = parser.parse_args(argv)
    if args.switches < 0:
        parser.error("--switches cannot be negative")
    print("list:", " ".join(str(value) for value in list_demo()))
    for flag, value in task_demo(args.switches):
        print(f"{flag}={value}")
    return 0