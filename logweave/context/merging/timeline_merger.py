"""
Timeline merger: reconcile two segments of the same node into one timeline

Log files of one node are often split by date or rotated, and collected
copies can overlap. Two local timelines are merged with fixed precedence:

    equal start   keep the one that ends strictly later
    containment   the earlier one already covers the other
    overlap       drop the later one's events up to the earlier one's end
    disjoint      concatenate

Only authoritative events (see LogContext.is_authoritative) define start and
end. Missing timestamps are "unset" and order before any real timestamp, so
timelines without authoritative timestamps end up concatenated.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from logweave.context.building import LocalTimeline

logger = logging.getLogger(__name__)


def first_timestamp(timeline: LocalTimeline) -> Optional[datetime]:
    """Timestamp of the first authoritative event, None when there is none."""
    for event in timeline:
        if event.timestamp is not None and event.is_authoritative:
            return event.timestamp
    return None


def last_timestamp(timeline: LocalTimeline) -> Optional[datetime]:
    """Timestamp of the last authoritative event, None when there is none."""
    for event in reversed(timeline):
        if event.timestamp is not None and event.is_authoritative:
            return event.timestamp
    return None


def is_before(a: Optional[datetime], b: Optional[datetime]) -> bool:
    """Strict ordering where an unset timestamp is the earliest possible one."""
    if a is None:
        return b is not None
    if b is None:
        return False
    return a < b


def cut_timeline_at(timeline: LocalTimeline, at: Optional[datetime]) -> LocalTimeline:
    """
    Drop the prefix of a timeline up to a point in time.

    The result starts at the first event timestamped strictly after `at`.
    Events exactly at `at` are dropped; untimed events after the cut stay.
    """
    for i, event in enumerate(timeline):
        if event.timestamp is not None and is_before(at, event.timestamp):
            return timeline[i:]
    return timeline[len(timeline):]


def merge_timelines(t1: LocalTimeline, t2: LocalTimeline) -> LocalTimeline:
    """
    Merge two timelines believed to come from the same node.

    Neither input is modified. The result is sorted and does not repeat the
    overlapping range twice.

    Args:
        t1: A local timeline
        t2: Another local timeline of the same node, in any order

    Returns:
        The merged timeline (possibly one of the inputs unchanged)
    """
    if len(t1) == 0:
        return t2
    if len(t2) == 0:
        return t1

    start1 = first_timestamp(t1)
    start2 = first_timestamp(t2)

    # t1: ---O----?--
    # t2: --O-----?--
    if is_before(start2, start1):
        return merge_timelines(t2, t1)

    end1 = last_timestamp(t1)
    end2 = last_timestamp(t2)

    # same recording, one may have been collected later
    if start1 is not None and start1 == start2:
        if is_before(end1, end2):
            logger.debug("Equal start %s, later end %s supersedes %s", start1, end2, end1)
            return t2
        logger.debug("Equal start %s, keeping timeline ending %s", start1, end1)
        return t1

    # t1: --O-----O--
    # t2: ---O---O---
    if end1 is not None and not is_before(end1, end2):
        logger.debug("Timeline [%s, %s] contains [%s, %s]", start1, end1, start2, end2)
        return t1

    # t1: --O----O----
    # t2: ----O----O--
    # the overlapping range is assumed identical, only t2's tail is new
    if is_before(start2, end1):
        logger.debug("Overlap until %s, cutting later timeline", end1)
        t2 = cut_timeline_at(t2, end1)
        if len(t2) == 0:
            return t1

    # t1: --O--O------
    # t2: ------O--O--
    t2 = t2[:]
    t2[-1] = replace(t2[-1], context=t2[-1].context.inherit(t1[-1].context))
    return t1 + t2
