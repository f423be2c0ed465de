"""A simple thread-safe scheduler running posted tasks in order."""

from __future__ import annotations

import threading
from collections import deque
from typing import Callable, Optional

__all__ = ["LoopScheduler"]

Task = Optional[Callable[[], None]]


class LoopScheduler:
    """Runs posted tasks one at a time until stopped."""

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._running = True
        self._cond = threading.Condition()

    def __enter__(self) -> "LoopScheduler":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def stop(self) -> None:
        """Stop the scheduler and wake every waiting thread."""
        with self._cond:
            self._running = False
            self._cond.notify_all()

    def run(self) -> None:
        """Run tasks until the scheduler is stopped."""
        while self.exec_one():
            pass

    def stopped(self) -> bool:
        """Return True once the scheduler has been stopped."""
        with self._cond:
            return not self._running

    def post(self, task: Task) -> None:
        """Queue ``task`` for execution."""
        with self._cond:
            self._tasks.append(task)
            self._cond.notify_all()

    def exec_one(self) -> bool:
        """Wait for a task and run it; return False if stopped."""
        with self._cond:
            self._cond.wait_for(lambda: not self._running or self._tasks)
            if not self._running:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True

    def poll_one(self) -> bool:
        """Run one queued task without waiting; return False if none ran."""
        with self._cond:
            if not self._running or not self._tasks:
                return False
            task = self._tasks.popleft()
        if task is not None:
            task()
        return True