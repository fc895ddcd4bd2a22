# rtoskit

A small, pure-Python model of the core pieces of a real-time kernel. It has no
dependencies outside the standard library.

## Modules

### `rtoskit.lists`

This is the kernel's circular doubly linked list. Each list has an end marker
that holds the maximum tick value, `PORT_MAX_DELAY` (`0xFFFFFFFF`).

- `ListItem(value=0, owner=None)` is a node. Its `value` must be a tick count
  in `0..PORT_MAX_DELAY`, and any other value raises `ValueError`.
  `ListItem.remove()` unlinks the item and returns how many items are left in
  its list. Calling it on an item that is not in a list raises `ValueError`.
- `List` has these methods:
  - `insert(item)` keeps items in ascending value order. A new item goes after
    any items with an equal value.
  - `insert_end(item)` puts the item just before the list's current index
    position.
  - `len()` gives the number of items, and iterating the list yields its items
    in order.
  - `is_empty()` tells whether the list has no items.
  - `head_entry()` and `head_owner()` return the first item and its owner.
    Both raise `IndexError` when the list is empty.
  - `head_value()` returns the first item's value. On an empty list it returns
    the end marker's value.
  - `next_owner()` moves the index on round robin, skipping the end marker,
    and returns the owner of the item it lands on.

An item that is already in a list cannot be inserted again. Doing so raises
`ValueError`.

### `rtoskit.port`

This module builds the initial stack frame for a task on a stack of words.

- `aligned_top(stack_depth)` returns the index of the top stack word, rounded
  down to 8-byte alignment.
- `initialise_stack(stack, top, code, parameters)` writes the initial frame
  below `top` and returns the new top index. The frame holds xPSR, then PC
  (`code`; an integer address is masked), then LR (`task_exit_error`), then R0
  (`parameters`).
- `task_exit_error()` raises `TaskExitError`. It marks a task returning from
  its entry function.

### `rtoskit.task`

- `TaskControlBlock` holds a task's name, its stack, its top of stack and its
  state list item. Its `entry` and `parameters` properties read the entry
  point and the argument back out of the stack frame.
- `Scheduler(max_priorities=5)` keeps one ready `List` per priority and offers
  these methods:
  - `create_static(code, name, stack_depth, parameters, stack)` creates a task
    on a stack you supply. The name is cut at a NUL character and shortened to
    15 characters.
  - `add_ready(tcb, priority)` adds a task to the ready list for that priority.
  - `start()` selects the first task.
  - `switch_context()` moves round robin to the next task in the
    highest-priority non-empty ready list.
  - `run(switches)` runs tasks for that many switches and returns the names of
    the tasks that ran.

A task's entry function is called with its parameters and must return a
generator. Each `yield` is the point where the task gives up the processor. If
a task returns, `TaskExitError` is raised.

### `rtoskit.demo`

- `list_demo()` inserts items with values 3, 1 and 2 and returns `[1, 2, 3]`.
- `task_demo(switches)` runs two tasks, `Taks1` and `Taks2`, at priority 2.
  Each sets its flag to 1 and then back to 0, and then yields. The function
  returns the log of `(flag, value)` pairs.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
rtoskit-demo [--switches N]
```

This prints the sorted list, then one `flagN=value` line for each flag change
in the task demo. `N` is the number of context switches and defaults to 4.

## Library use

```python
from rtoskit.lists import List, ListItem

ready = List()
for value in (3, 1, 2):
    ready.insert(ListItem(value=value))
print([item.value for item in ready])   # [1, 2, 3]
```

```python
from rtoskit.demo import task_demo

trace = task_demo(2)
# [('flag1', 1), ('flag1', 0), ('flag2', 1), ('flag2', 0)]
```

## What it does not do

This is a simulation that runs inside one Python process:

- There are no interrupts, no tick timer and no preemption. A task runs until
  it yields.
- There are no task delays, no blocked or suspended states, and no way to
  delete a task.
- Tasks can only be created on stacks you supply. There is no dynamic
  allocation.
- There are no queues, semaphores or other synchronisation objects.
- Stack frames are laid out as data. No registers are saved or restored.