"""
Services layer - application orchestration.
"""

from logweave.services.timeline import Timeline
from logweave.services.interleaver import ChronologicalInterleaver

# Provide consistent naming
Interleaver = ChronologicalInterleaver

__all__ = [
    'Timeline',
    'ChronologicalInterleaver',
    # Aliases
    'Interleaver',
]
