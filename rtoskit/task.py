"""Task control blocks, ready lists and a round-robin scheduler."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generator, List as PyList, MutableSequence, Optional

from .lists import List, ListItem
from .port import PC_OFFSET, R0_OFFSET, aligned_top, initialise_stack, task_exit_error

MAX_PRIORITIES = 5
MAX_TASK_NAME_LEN = 16


@dataclass(eq=False)
class TaskControlBlock:
    """A task's name, stack and the list item that places it in a state list."""

    name: str
    stack: MutableSequence[Any] = field(repr=False)
    top_of_stack: int
    state_list_item: ListItem = field(default_factory=ListItem, repr=False)

    def __post_init__(self) -> None:
        self.state_list_item.owner = self

    @property
    def entry(self) -> Any:
        """Entry point saved in the task's stack frame."""
        return self.stack[self.top_of_stack + PC_OFFSET]

    @property
    def parameters(self) -> Any:
        """Argument saved in the task's stack frame."""
        return self.stack[self.top_of_stack + R0_OFFSET]


class Scheduler:
    """Keeps a ready list per priority and switches round robin among the highest."""

    def __init__(self, max_priorities: int = MAX_PRIORITIES) -> None:
        if max_priorities < 1:
            raise ValueError("at least one priority is needed")
        self.ready_lists = [List() for _ in range(max_priorities)]
        self.current: Optional[TaskControlBlock] = None
        self._contexts: Dict[TaskControlBlock, Generator[Any, None, None]] = {}

    def create_static(
        self,
        code: Callable[[Any], Any],
        name: str,
        stack_depth: int,
        parameters: Any,
        stack: Optional[MutableSequence[Any]],
    ) -> TaskControlBlock:
        """Create a task on a caller-supplied stack."""
        if stack is None:
            raise ValueError("a stack buffer is required")
        if len(stack) < stack_depth:
            raise ValueError("stack buffer is shorter than the stack depth")
        top = aligned_top(stack_depth)
        task_name = name.split("\0", 1)[0][: MAX_TASK_NAME_LEN - 1]
        top_of_stack = initialise_stack(stack, top, code, parameters)
        return TaskControlBlock(name=task_name, stack=stack, top_of_stack=top_of_stack)

    def add_ready(self, tcb: TaskControlBlock, priority: int) -> None:
        if not 0 <= priority < len(self.ready_lists):
            raise ValueError(f"priority must be in 0..{len(self.ready_lists) - 1}")
        self.ready_lists[priority].insert_end(tcb.state_list_item)

    def _highest_ready(self) -> List:
        for ready in reversed(self.ready_lists):
            if not ready.is_empty():
                return ready
        raise RuntimeError("no task is ready")

    def start(self) -> TaskControlBlock:
        """Select the first task to run."""
        self.current = self._highest_ready().next_owner()
        return self.current

    def switch_context(self) -> TaskControlBlock:
        """Move to the next ready task of the highest ready priority."""
        if self.current is None:
            raise RuntimeError("scheduler has not been started")
        self.current = self._highest_ready().next_owner()
        return self.current

    def _resume(self, tcb: TaskControlBlock) -> None:
        context = self._contexts.get(tcb)
        if context is None:
            entry = tcb.entry
            if not callable(entry):
                raise TypeError(f"task {tcb.name!r} has no callable entry point")
            result = entry(tcb.parameters)
            if not inspect.isgenerator(result):
                task_exit_error()
            context = result
            self._contexts[tcb] = context
        try:
            next(context)
        except StopIteration:
            task_exit_error()

    def run(self, switches: int) -> PyList[str]:
        """Run tasks until they have yielded ``switches`` times; return the names run."""
        if switches < 0:
            raise ValueError("switch count cannot be negative")
        if self.current is None:
            self.start()
        names = []
        for _ in range(switches):
            tcb = self.current
            names.append(tcb.name)
            self._resume(tcb)
            self.switch_context()
        return names