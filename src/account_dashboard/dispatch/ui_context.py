"""
UI Context - Run Work on the Owner Thread.

A UIContext is bound to one thread, the UI-owning one. Work submitted
from that thread runs immediately; work submitted from any other thread
is queued until the owner drains it with run_pending() or wait_for().

Design Notes:
    - Plain thread-identity check plus a queue put, no main-thread marker
    - Thread-safe submission via queue.SimpleQueue
    - Draining is owner-only; other threads get a RuntimeError
"""

from __future__ import annotations

import queue
import threading
import time
from typing import Callable, Optional


class UIContext:
    """
    Owner-thread bound dispatcher.

    Usage:
        ui = UIContext()                      # bound to the current thread
        client.load(lambda r: ui.run_on_ui_context(lambda: show(r)))

        # host loop, on the owner thread
        ui.run_pending()
    """

    def __init__(
        self,
        owner: Optional[threading.Thread] = None,
        poll_interval_seconds: float = 0.005,
    ) -> None:
        """
        Initialize UI context.

        Args:
            owner: Thread that owns the UI (current thread if None)
            poll_interval_seconds: Max blocking time per wait_for() poll
        """
        owner = owner or threading.current_thread()
        self._owner_ident = owner.ident
        self._poll_interval = poll_interval_seconds
        self._queue: "queue.SimpleQueue[Callable[[], None]]" = queue.SimpleQueue()

    @property
    def is_current(self) -> bool:
        """True when called from the owner thread."""
        return threading.get_ident() == self._owner_ident

    def run_on_ui_context(self, work: Callable[[], None]) -> None:
        """Run `work` now if on the owner thread, otherwise enqueue it."""
        if self.is_current:
            work()
        else:
            self._queue.put(work)

    def run_pending(self) -> int:
        """
        Run all queued work on the owner thread.

        Work queued while draining (e.g. by a completion that kicks off
        the next fallback link) is run in the same pass.

        Returns:
            Number of callables run

        Raises:
            RuntimeError: If called from another thread
        """
        self._assert_owner("run_pending")
        ran = 0
        while True:
            try:
                work = self._queue.get_nowait()
            except queue.Empty:
                return ran
            work()
            ran += 1

    def wait_for(
        self,
        predicate: Callable[[], bool],
        timeout: float = 1.0,
    ) -> None:
        """
        Pump queued work until `predicate` holds.

        Args:
            predicate: Condition checked after each drained batch
            timeout: Seconds to wait before giving up

        Raises:
            TimeoutError: If the predicate still fails after `timeout`
            RuntimeError: If called from another thread
        """
        self._assert_owner("wait_for")
        deadline = time.monotonic() + timeout
        while True:
            self.run_pending()
            if predicate():
                return
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"condition not met within {timeout:.2f}s")
            try:
                work = self._queue.get(timeout=min(remaining, self._poll_interval))
            except queue.Empty:
                continue
            work()

    def _assert_owner(self, operation: str) -> None:
        if not self.is_current:
            raise RuntimeError(f"{operation}() must be called on the UI thread")


class ImmediateDispatcher:
    """Dispatcher that runs work inline on whatever thread calls it."""

    def run_on_ui_context(self, work: Callable[[], None]) -> None:
        work()
