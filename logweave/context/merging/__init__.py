"""
Timeline merging.
"""

from logweave.context.merging.timeline_merger import (
    merge_timelines,
    cut_timeline_at,
    first_timestamp,
    last_timestamp,
    is_before,
)

__all__ = [
    'merge_timelines',
    'cut_timeline_at',
    'first_timestamp',
    'last_timestamp',
    'is_before',
]
