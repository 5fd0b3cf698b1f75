"""A background worker that shows queued messages one at a time."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Optional

from udpnotifier.messages import Message


class MessageShowWorker:
    """Takes messages from a shared deque, shows each for its delay, then clears."""

    def __init__(
        self,
        queue: deque[Message],
        show: Callable[[Message], object],
        clear: Callable[[], object],
        sleep: Optional[Callable[[float], object]] = None,
        idle_interval: float = 0.1,
    ) -> None:
        self.queue = queue
        self._show = show
        self._clear = clear
        self._stopped = threading.Event()
        self._sleep = sleep if sleep is not None else self._stopped.wait
        self.idle_interval = idle_interval
        self._thread: Optional[threading.Thread] = None

    def step(self) -> bool:
        """Show one message if there is one; return whether one was shown."""
        try:
            message = self.queue.popleft()
        except IndexError:
            self._sleep(self.idle_interval)
            return False
        self._show(message)
        self._sleep(message.delay / 1000)
        if not self.queue:
            self._clear()
        return True

    def run(self) -> None:
        """Process messages until stopped."""
        while not self._stopped.is_set():
            self.step()

    def start(self) -> None:
        """Run in a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("worker already running")
        self._stopped.clear()
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker to finish and wait for its thread."""
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None