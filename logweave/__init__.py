"""
logweave - Chronological merging of multi-node log timelines

Rebuilds one deduplicated, time-ordered view of events coming from several
nodes, each node's history possibly split across overlapping log files.

MCP Architecture:
- Models: Pure data structures (LogDate, LogContext, LogEvent)
- Protocols: Interface contracts (DuplicateComparatorProtocol)
- Context: Domain implementations (LocalTimeline, merging, node identity)
- Services: Application orchestration (Timeline registry, ChronologicalInterleaver)
- CLI: User interface (interleave command)
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core MCP layers
from logweave import models, protocols
from logweave.models import LogDate, LogContext, LogEvent
from logweave.context import (
    LocalTimeline,
    PatternComparator,
    merge_timelines,
    cut_timeline_at,
    IdentityTranslator,
    node_identifier,
)
from logweave.services import Timeline, ChronologicalInterleaver, Interleaver

__all__ = [
    # MCP Architecture
    'models',
    'protocols',
    'LogDate',
    'LogContext',
    'LogEvent',
    'LocalTimeline',
    'PatternComparator',
    'merge_timelines',
    'cut_timeline_at',
    'IdentityTranslator',
    'node_identifier',
    'Timeline',
    'ChronologicalInterleaver',
    'Interleaver',
]
