"""
Timeline: registry of every node's local timeline

Segments are built one by one into local timelines, then handed to the
registry which decides which node they belong to:
- by identifier, when the segment's context tells who the node is
- by directory, when segments are collected in one directory per node

When the node already has a timeline, both are merged before storing.
"""

import logging
import os
from typing import Dict, Iterator, Optional

from logweave.context.building import LocalTimeline
from logweave.context.identity import IdentityTranslator, node_identifier
from logweave.context.merging import merge_timelines, last_timestamp
from logweave.models import LogContext

logger = logging.getLogger(__name__)


def _parent_dir_name(path: str) -> str:
    return os.path.basename(os.path.dirname(path))


class Timeline:
    """
    Node identifier → LocalTimeline.

    Values are replaced on every merge, never updated in place, so a
    timeline handed to the registry should not be used by the caller again.
    """

    def __init__(self, translator: Optional[IdentityTranslator] = None):
        self.translator = translator
        self._nodes: Dict[str, LocalTimeline] = {}

    def merge_by_identifier(self, timeline: LocalTimeline) -> Optional[str]:
        """
        Store a segment's timeline under the node its last event identifies.

        Returns:
            The node identifier used, None for an empty timeline
        """
        if len(timeline) == 0:
            logger.debug("Ignoring empty timeline")
            return None

        node = node_identifier(timeline[-1].context, last_timestamp(timeline), self.translator)
        if node in self._nodes:
            logger.debug("Merging %d events into node %s", len(timeline), node)
            timeline = merge_timelines(self._nodes[node], timeline)
        self._nodes[node] = timeline
        return node

    def merge_by_directory(self, path: str, timeline: LocalTimeline) -> str:
        """
        Store a segment's timeline under the name of the directory it was read from.

        Every node whose first event comes from a directory with the same
        name is merged with it, and so is a node already stored under that
        name. Matches stored under another key are moved to the new key.

        Args:
            path: Path of the segment's file
            timeline: Events of that segment

        Returns:
            The node identifier used
        """
        node = _parent_dir_name(path)
        for key, existing in list(self._nodes.items()):
            if len(existing) == 0:
                continue
            if key == node or _parent_dir_name(existing[0].context.file_path) == node:
                logger.debug("Segment %s joins node %s", path, key)
                timeline = merge_timelines(existing, timeline)
                if key != node:
                    del self._nodes[key]
        self._nodes[node] = timeline
        return node

    def latest_contexts(self) -> Dict[str, LogContext]:
        """Context of the last event of every non-empty node."""
        return {
            node: timeline[-1].context
            for node, timeline in self._nodes.items()
            if len(timeline) > 0
        }

    def __getitem__(self, node: str) -> LocalTimeline:
        return self._nodes[node]

    def __contains__(self, node: str) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def items(self):
        return self._nodes.items()

    def __repr__(self):
        sizes = ", ".join(f"{node}={len(t)}" for node, t in self._nodes.items())
        return f"Timeline({sizes})"
