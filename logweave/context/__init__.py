"""
Context layer - domain-specific implementations.
"""

from logweave.context.building import LocalTimeline, PatternComparator
from logweave.context.merging import merge_timelines, cut_timeline_at, first_timestamp, last_timestamp
from logweave.context.identity import IdentityTranslator, node_identifier

__all__ = [
    'LocalTimeline',
    'PatternComparator',
    'merge_timelines',
    'cut_timeline_at',
    'first_timestamp',
    'last_timestamp',
    'IdentityTranslator',
    'node_identifier',
]
