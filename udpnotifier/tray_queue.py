"""A queue that shows notifications one after another."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Optional, Protocol

from udpnotifier.messages import Message, MessageIcon

DEFAULT_DELAY_MS = 3000
MESSAGE_GAP_MS = 500


class _Timer(Protocol):
    is_active: bool

    def start(self, interval_ms: int) -> None: ...

    def stop(self) -> None: ...


class _RepeatingTimer:
    """Calls a callback every interval until stopped or restarted."""

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._cancel: Optional[threading.Event] = None

    def start(self, interval_ms: int) -> None:
        with self._lock:
            if self._cancel is not None:
                self._cancel.set()
            cancel = threading.Event()
            self._cancel = cancel
        thread = threading.Thread(
            target=self._loop, args=(interval_ms / 1000, cancel), daemon=True
        )
        thread.start()

    def _loop(self, interval: float, cancel: threading.Event) -> None:
        while not cancel.wait(interval):
            self._callback()

    def stop(self) -> None:
        with self._lock:
            if self._cancel is not None:
                self._cancel.set()
            self._cancel = None

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._cancel is not None and not self._cancel.is_set()


class TrayMessageQueue:
    """Shows queued messages in the tray, or through a fallback when the tray is unavailable."""

    def __init__(
        self,
        show: Callable[[Message], object],
        fallback: Optional[Callable[[Message], object]] = None,
        tray_available: Optional[Callable[[], bool]] = None,
        default_delay: int = DEFAULT_DELAY_MS,
        timer_factory: Optional[Callable[[Callable[[], object]], _Timer]] = None,
    ) -> None:
        self._show = show
        self._fallback = fallback if fallback is not None else show
        self._tray_available = tray_available if tray_available is not None else (lambda: True)
        self.default_delay = default_delay
        self._queue: deque[Message] = deque()
        self._lock = threading.RLock()
        factory = timer_factory if timer_factory is not None else _RepeatingTimer
        self._timer = factory(self.show_next_message)

    def add_message(
        self,
        title: str,
        text: str,
        icon: MessageIcon = MessageIcon.INFORMATION,
        delay: int = 0,
    ) -> None:
        """Queue a message; show it at once if nothing is being timed."""
        message = Message(title, text, icon, delay).with_default_delay(self.default_delay)
        with self._lock:
            self._queue.append(message)
            idle = not self._timer.is_active
        if idle:
            self.show_next_message()

    def show_next_message(self) -> Optional[Message]:
        """Show the oldest queued message and return it, or None if the queue is empty."""
        with self._lock:
            if not self._queue:
                return None
            message = self._queue.popleft()
        if self._tray_available():
            self._show(message)
        else:
            self._fallback(message)
        with self._lock:
            if self._queue:
                self._timer.start(message.delay + MESSAGE_GAP_MS)
        return message

    def timer_active(self) -> bool:
        """Whether the timer for the next message is running."""
        return bool(self._timer.is_active)

    def __len__(self) -> int:
        with self._lock:
            return len(self._queue)