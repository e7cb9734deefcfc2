"""
CLI layer - user interface.
"""

from logweave.cli.commands import interleave, read_segment

__all__ = ['interleave', 'read_segment']
