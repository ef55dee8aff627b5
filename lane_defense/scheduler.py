"""
Deferred actions keyed by simulated time.
NO UI DEPENDENCIES.

Replaces wall-clock timers: actions only come due as the simulation clock
advances, so pausing the game freezes them and a seeded run replays
exactly.
"""
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Tuple


@dataclass
class ScheduledAction:
    """Handle for a pending action. Pass to cancel() to drop it."""
    due: float
    label: str
    action: Callable[[], None] = field(repr=False)
    cancelled: bool = False


class Scheduler:
    """
    Priority queue of actions ordered by (due time, scheduling order).

    Actions scheduled for the same instant run in the order they were
    scheduled.
    """

    def __init__(self):
        self.now: float = 0.0
        self._heap: List[Tuple[float, int, ScheduledAction]] = []
        self._order = itertools.count()

    def schedule(self, delay: float, action: Callable[[], None], label: str = "") -> ScheduledAction:
        """Run `action` once the clock reaches now + delay."""
        handle = ScheduledAction(due=self.now + max(0.0, delay), label=label, action=action)
        heapq.heappush(self._heap, (handle.due, next(self._order), handle))
        return handle

    def cancel(self, handle: ScheduledAction) -> None:
        """Cancel a pending action. Cancelling twice is harmless."""
        handle.cancelled = True

    def advance(self, dt: float) -> int:
        """
        Move the clock forward and run every action that came due.
        Returns the number of actions run.
        """
        target = self.now + dt
        ran = 0
        while self._heap and self._heap[0][0] <= target:
            due, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self.now = due
            handle.action()
            ran += 1
        self.now = target
        return ran

    def clear(self) -> None:
        """Drop every pending action. The clock keeps its value."""
        for _, _, handle in self._heap:
            handle.cancelled = True
        self._heap.clear()

    def reset(self) -> None:
        """Drop every pending action and rewind the clock to zero."""
        self.clear()
        self.now = 0.0

    @property
    def pending(self) -> int:
        """Number of actions still waiting to run."""
        return sum(1 for _, _, handle in self._heap if not handle.cancelled)
