"""
Node identifiers: the readable name a node's column is labelled with

A node can be known by several things over its life: names it announced,
IPs it listened on, cluster hashes it was given. The identifier picks the
easiest one to read, in this order:

1. the last name the node gave itself
2. its last IP, or the node name that IP belonged to at that time
3. the first hash that was known under a name at that time, else its last hash
4. the file name of the segment
"""

import os
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from logweave.context.merging import is_before
from logweave.models import LogContext


@dataclass(frozen=True)
class NameObservation:
    """A name seen for an IP or hash, valid from `since` onwards."""
    name: str
    since: Optional[datetime]


class IdentityTranslator:
    """
    Remembers which node name an IP or hash stood for, and since when.

    IPs get reused when nodes are rebuilt, so a lookup is always made at a
    point in time: the most recent observation at or before it wins.
    """

    def __init__(self):
        self._ip_names: Dict[str, List[NameObservation]] = defaultdict(list)
        self._hash_names: Dict[str, List[NameObservation]] = defaultdict(list)

    def add_ip_name(self, ip: str, name: str, since: Optional[datetime] = None):
        self._record(self._ip_names[ip], name, since)

    def add_hash_name(self, node_hash: str, name: str, since: Optional[datetime] = None):
        self._record(self._hash_names[node_hash], name, since)

    def name_for_ip(self, ip: str, at: Optional[datetime]) -> Optional[str]:
        return self._lookup(self._ip_names.get(ip, []), at)

    def name_for_hash(self, node_hash: str, at: Optional[datetime]) -> Optional[str]:
        return self._lookup(self._hash_names.get(node_hash, []), at)

    @staticmethod
    def _record(observations: List[NameObservation], name: str, since: Optional[datetime]):
        position = len(observations)
        while position > 0 and is_before(since, observations[position - 1].since):
            position -= 1
        observations.insert(position, NameObservation(name, since))

    @staticmethod
    def _lookup(observations: List[NameObservation], at: Optional[datetime]) -> Optional[str]:
        found = None
        for observation in observations:
            if is_before(at, observation.since):
                break
            found = observation.name
        return found


def node_identifier(context: LogContext, at: Optional[datetime],
                    translator: Optional[IdentityTranslator] = None) -> str:
    """
    Derive the identifier of the node a context belongs to.

    Args:
        context: Context of the node's most recent event
        at: Time the identity should be valid at (usually the last timestamp)
        translator: Optional IP/hash to name knowledge

    Returns:
        Deterministic, human readable identifier
    """
    if context.own_names:
        return context.own_names[-1]

    if context.own_ips:
        ip = context.own_ips[-1]
        if translator is not None:
            return translator.name_for_ip(ip, at) or ip
        return ip

    if translator is not None:
        for node_hash in context.own_hashes:
            name = translator.name_for_hash(node_hash, at)
            if name:
                return name
    if context.own_hashes:
        return context.own_hashes[-1]

    return os.path.basename(context.file_path)
