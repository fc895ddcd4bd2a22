import pytest

from rtoskit import port
from rtoskit.port import (
    INITIAL_XPSR,
    TaskExitError,
    aligned_top,
    initialise_stack,
    task_exit_error,
)


def entry(_parameters):
    yield


@pytest.mark.parametrize("depth", range(1, 40))
def test_aligned_top_is_even_and_near_the_end(depth):
    top = aligned_top(depth)
    assert top % 2 == 0
    assert depth - 2 <= top <= depth - 1


def test_aligned_top_rejects_zero():
    with pytest.raises(ValueError):
        aligned_top(0)


def test_initialise_stack_frame_layout():
    stack = [0] * 32
    top = aligned_top(len(stack))
    new_top = initialise_stack(stack, top, entry, "params")
    assert top - new_top == 16
    assert stack[new_top + port.XPSR_OFFSET] == 0x01000000
    assert stack[new_top + port.XPSR_OFFSET] == INITIAL_XPSR
    assert stack[new_top + port.PC_OFFSET] is entry
    assert stack[new_top + port.LR_OFFSET] is task_exit_error
    assert stack[new_top + port.R0_OFFSET] == "params"


def test_integer_entry_address_has_thumb_bit_cleared():
    stack = [0] * 32
    new_top = initialise_stack(stack, 30, 0x08000101, None)
    assert stack[new_top + port.PC_OFFSET] == 0x08000100


def test_initialise_stack_too_small():
    stack = [0] * 8
    with pytest.raises(ValueError):
        initialise_stack(stack, aligned_top(len(stack)), entry, None)


def test_initialise_stack_top_beyond_stack():
    with pytest.raises(ValueError):
        initialise_stack([0] * 20, 21, entry, None)


def test_task_exit_error_raises():
    with pytest.raises(TaskExitError):
        task_exit_error()