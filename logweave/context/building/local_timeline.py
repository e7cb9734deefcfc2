"""
Local timeline: the ordered, deduplicated events of one source segment

Repeated events are folded as they are appended. A run of identical events
keeps two entries only:
- the first occurrence, carrying the repetition count
- the latest occurrence, so the last timestamp of the run is not lost

A run that starts with the very first event of the timeline is not folded
until two events are stored. This corner case is accepted as is.
"""

from dataclasses import replace
from typing import Iterable, Optional

from logweave.models import LogEvent
from logweave.protocols import DuplicateComparatorProtocol


class PatternComparator(DuplicateComparatorProtocol):
    """Events are duplicates when the same matcher produced the same message."""

    def is_duplicate(self, event: LogEvent, base: LogEvent, previous: LogEvent) -> bool:
        return (
            base.pattern == previous.pattern == event.pattern
            and base.message == previous.message == event.message
        )


class LocalTimeline(list):
    """
    Events of a single segment, kept sorted by timestamp.

    Example:
        timeline = LocalTimeline()
        for event in parsed_events:
            timeline = timeline.add(event)
    """

    def __init__(self, events: Iterable[LogEvent] = (),
                 comparator: Optional[DuplicateComparatorProtocol] = None):
        super().__init__(events)
        self.comparator = comparator or PatternComparator()

    def add(self, event: LogEvent) -> 'LocalTimeline':
        """
        Append an event, folding it into the current duplicate run if it is one.

        Returns:
            The updated timeline; callers must keep using the returned value
        """
        if len(self) > 1 and self.comparator.is_duplicate(event, self[-2], self[-1]):
            # stored events may be shared with other timelines, never mutate them
            self[-2] = replace(self[-2], repetition_count=self[-2].repetition_count + 1)
            self[-1] = replace(event)
        else:
            self.append(replace(event))
        return self

    def derive(self, events: Iterable[LogEvent]) -> 'LocalTimeline':
        """New timeline over `events` sharing this timeline's comparator."""
        return LocalTimeline(events, comparator=self.comparator)

    def __add__(self, other):
        return self.derive(list.__add__(self, other))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.derive(list.__getitem__(self, index))
        return list.__getitem__(self, index)
