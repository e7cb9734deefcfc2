"""
Chronological interleaver: walk every node's timeline in global time order

Nothing is concatenated up front. At each step the consumer asks which
node(s) hold the next event, then dequeues from exactly those nodes:

    interleaver = ChronologicalInterleaver(timeline)
    while interleaver:
        for node in interleaver.next_nodes():
            event = interleaver.dequeue(node)

Several nodes are returned when their next events share a timestamp, which
is common with second-precision clocks.
"""

from collections import deque
from datetime import datetime
from typing import Deque, Dict, Iterator, List, Optional, Tuple

from logweave.context.merging import is_before
from logweave.models import LogContext, LogEvent
from logweave.services.timeline import Timeline


def _next_timestamp(queue: Deque[LogEvent]) -> Optional[datetime]:
    for event in queue:
        if event.timestamp is not None and event.is_authoritative:
            return event.timestamp
    return None


class ChronologicalInterleaver:
    """
    Consumes a copy of a Timeline's events, oldest first across nodes.

    The registry itself is left untouched.
    """

    def __init__(self, timeline: Timeline):
        self.timeline = timeline
        self._queues: Dict[str, Deque[LogEvent]] = {
            node: deque(events) for node, events in timeline.items()
        }

    def next_nodes(self) -> List[str]:
        """
        Nodes whose next authoritative event is the earliest of all.

        Empty nodes are skipped. A node with only untimed or informational
        events left counts as unset, which is the earliest.
        """
        next_time: Optional[datetime] = None
        next_nodes: List[str] = []
        for node, queue in self._queues.items():
            if not queue:
                continue
            current = _next_timestamp(queue)
            if not next_nodes or is_before(current, next_time):
                next_time = current
                next_nodes = [node]
            elif current == next_time:
                next_nodes.append(node)
        return next_nodes

    def dequeue(self, node: str) -> Optional[LogEvent]:
        """Remove and return the oldest remaining event of a node."""
        queue = self._queues.get(node)
        if not queue:
            return None
        return queue.popleft()

    def remaining(self, node: str) -> int:
        return len(self._queues.get(node, ()))

    def latest_contexts(self) -> Dict[str, LogContext]:
        """Most recent known context of every node, for column headers."""
        return self.timeline.latest_contexts()

    def drain(self) -> Iterator[Tuple[str, LogEvent]]:
        """Yield (node, event) pairs until every queue is empty."""
        while self:
            for node in self.next_nodes():
                event = self.dequeue(node)
                if event is not None:
                    yield node, event

    def __bool__(self):
        return any(self._queues.values())
