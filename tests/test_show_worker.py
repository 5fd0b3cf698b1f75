import threading
from collections import deque

import pytest

from udpnotifier.messages import Message, MessageIcon
from udpnotifier.show_worker import MessageShowWorker


def make_worker(messages, idle_interval=0.1):
    events = []
    worker = MessageShowWorker(
        deque(messages),
        lambda m: events.append(("show", m)),
        lambda: events.append(("clear",)),
        lambda seconds: events.append(("sleep", seconds)),
        idle_interval,
    )
    return worker, events


def test_step_shows_sleeps_and_clears():
    message = Message("T", "x", MessageIcon.INFORMATION, 1500)
    worker, events = make_worker([message])
    assert worker.step() is True
    assert events == [("show", message), ("sleep", 1.5), ("clear",)]


def test_clear_only_after_last_message():
    first = Message("a", "1", MessageIcon.INFORMATION, 0)
    second = Message("b", "2", MessageIcon.INFORMATION, 0)
    worker, events = make_worker([first, second])
    worker.step()
    assert ("clear",) not in events
    worker.step()
    assert events[-1] == ("clear",)
    assert [e[1] for e in events if e[0] == "show"] == [first, second]


def test_idle_step_sleeps_idle_interval():
    worker, events = make_worker([], idle_interval=0.25)
    assert worker.step() is False
    assert events == [("sleep", 0.25)]


def test_thread_processes_messages():
    shown = []
    cleared = threading.Event()
    queue = deque([Message("T", "x", MessageIcon.NO_ICON, 0)])
    worker = MessageShowWorker(queue, shown.append, cleared.set, None, 0.01)
    worker.start()
    try:
        assert cleared.wait(5)
    finally:
        worker.stop()
    assert [m.title for m in shown] == ["T"]
    assert len(queue) == 0


def test_start_twice_raises():
    worker = MessageShowWorker(deque(), lambda m: None, lambda: None, None, 0.01)
    worker.start()
    try:
        with pytest.raises(RuntimeError):
            worker.start()
    finally:
        worker.stop()