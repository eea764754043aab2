"""Main-loop event queue - callbacks deferred to the next frame."""

from __future__ import annotations
from collections import deque
from typing import Callable, Deque

from .types import UIEvent
from .logging import log


class EventQueue:
    """FIFO of callbacks drained once per frame, in arrival order."""

    def __init__(self):
        self._events: Deque[UIEvent] = deque()

    def __len__(self) -> int:
        return len(self._events)

    def post(self, callback: Callable, *args) -> None:
        self._events.append(UIEvent(callback, args))

    def poll(self, max_events: int = 100) -> int:
        """Run up to max_events queued callbacks. Returns how many ran.

        Callbacks posted while polling wait for the next poll.
        """
        batch = []
        while self._events and len(batch) < max_events:
            batch.append(self._events.popleft())

        for event in batch:
            try:
                event.callback(*event.args)
            except Exception as e:
                log(f"[UI_EVENT][ERR] {e!r}")
        return len(batch)

    def clear(self) -> None:
        self._events.clear()
