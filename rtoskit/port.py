"""Initial stack frame layout for a task, as the context switch expects it."""

from __future__ import annotations

import inspect
from typing import Any, Callable, MutableSequence, Union

INITIAL_XPSR = 0x01000000
START_ADDRESS_MASK = 0xFFFFFFFE

KERNEL_INTERRUPT_PRIORITY = 255
MAX_SYSCALL_INTERRUPT_PRIORITY = 191
NVIC_PENDSV_PRI = KERNEL_INTERRUPT_PRIORITY << 16
NVIC_SYSTICK_PRI = KERNEL_INTERRUPT_PRIORITY << 24

# Word offsets from the saved top of stack: R4-R11, R0-R3, R12, LR, PC, xPSR.
FRAME_WORDS = 16
R0_OFFSET = 8
LR_OFFSET = 13
PC_OFFSET = 14
XPSR_OFFSET = 15

# Stack words are 4 bytes, so 8-byte alignment means an even word index.
_WORDS_PER_ALIGNMENT = 2


class TaskExitError(RuntimeError):
    """Raised when a task returns from its entry function."""


def task_exit_error() -> None:
    """Return address of every task: a task must never return.

    The error names the function that ran the returning task, when known.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    where = caller.f_code.co_name if caller is not None else "<unknown>"
    del frame, caller
    raise TaskExitError(f"a task returned from its entry function (in {where})")


def aligned_top(stack_depth: int) -> int:
    """Index of the top stack word, rounded down to 8-byte alignment."""
    if stack_depth < 1:
        raise ValueError("stack depth must be at least one word")
    return (stack_depth - 1) & ~(_WORDS_PER_ALIGNMENT - 1)


def initialise_stack(
    stack: MutableSequence[Any],
    top: int,
    code: Union[Callable[[Any], Any], int],
    parameters: Any,
) -> int:
    """Lay down an exception frame below ``top`` and return the new top index."""
    if not FRAME_WORDS <= top <= len(stack):
        raise ValueError("stack too small for an initial frame")
    frame = top - FRAME_WORDS
    stack[frame + XPSR_OFFSET] = INITIAL_XPSR
    stack[frame + PC_OFFSET] = code & START_ADDRESS_MASK if isinstance(code, int) else code
    stack[frame + LR_OFFSET] = task_exit_error
    stack[frame + R0_OFFSET] = parameters
    return frame