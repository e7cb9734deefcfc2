"""
Local timeline building.
"""

from logweave.context.building.local_timeline import LocalTimeline, PatternComparator

__all__ = ['LocalTimeline', 'PatternComparator']
