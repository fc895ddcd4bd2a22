import pytest

from rtoskit.port import TaskExitError
from rtoskit.task import MAX_TASK_NAME_LEN, Scheduler


def forever(_parameters):
    while True:
        yield


def recorder(parameters):
    received, tag = parameters
    while True:
        received.append(tag)
        yield


def once(_parameters):
    yield


def make(scheduler, name, code=forever, parameters=None, depth=32):
    return scheduler.create_static(code, name, depth, parameters, [0] * depth)


def test_name_is_truncated():
    tcb = make(Scheduler(), "A" * 20)
    assert tcb.name == "A" * 15
    assert len(tcb.name) == MAX_TASK_NAME_LEN - 1


def test_name_stops_at_nul():
    assert make(Scheduler(), "ab\0cd").name == "ab"


def test_state_item_owned_by_tcb_and_frame_holds_entry():
    tcb = make(Scheduler(), "T", parameters="arg")
    assert tcb.state_list_item.owner is tcb
    assert tcb.entry is forever
    assert tcb.parameters == "arg"


def test_missing_or_short_stack_raises():
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.create_static(forever, "T", 32, None, None)
    with pytest.raises(ValueError):
        scheduler.create_static(forever, "T", 32, None, [0] * 10)


def test_add_ready_rejects_bad_priority():
    scheduler = Scheduler(3)
    tcb = make(scheduler, "T")
    with pytest.raises(ValueError):
        scheduler.add_ready(tcb, 3)
    with pytest.raises(ValueError):
        scheduler.add_ready(tcb, -1)


def test_start_without_tasks_raises():
    with pytest.raises(RuntimeError):
        Scheduler().start()


def test_switch_before_start_raises():
    scheduler = Scheduler()
    scheduler.add_ready(make(scheduler, "T"), 1)
    with pytest.raises(RuntimeError):
        scheduler.switch_context()


def test_start_and_switch_alternate():
    scheduler = Scheduler()
    a, b = make(scheduler, "A"), make(scheduler, "B")
    scheduler.add_ready(a, 2)
    scheduler.add_ready(b, 2)
    assert scheduler.start() is a
    assert scheduler.switch_context() is b
    assert scheduler.switch_context() is a
    assert scheduler.current is a


def test_highest_priority_is_chosen():
    scheduler = Scheduler()
    low, high = make(scheduler, "low"), make(scheduler, "high")
    scheduler.add_ready(low, 1)
    scheduler.add_ready(high, 3)
    assert scheduler.start() is high
    assert scheduler.switch_context() is high


def test_run_resumes_tasks_in_turn_with_parameters():
    received = []
    scheduler = Scheduler()
    scheduler.add_ready(make(scheduler, "A", recorder, (received, "pa")), 2)
    scheduler.add_ready(make(scheduler, "B", recorder, (received, "pb")), 2)
    assert scheduler.run(4) == ["A", "B", "A", "B"]
    assert received == ["pa", "pb", "pa", "pb"]


def test_task_returning_raises_exit_error():
    scheduler = Scheduler()
    scheduler.add_ready(make(scheduler, "T", lambda p: None), 0)
    with pytest.raises(TaskExitError):
        scheduler.run(1)


def test_generator_task_finishing_raises_exit_error():
    scheduler = Scheduler()
    scheduler.add_ready(make(scheduler, "T", once), 0)
    with pytest.raises(TaskExitError):
        scheduler.run(2)


def test_integer_entry_cannot_run():
    scheduler = Scheduler()
    scheduler.add_ready(make(scheduler, "T", 0x1000), 0)
    with pytest.raises(TypeError):
        scheduler.run(1)


def test_run_negative_raises():
    with pytest.raises(ValueError):
        Scheduler().run(-1)