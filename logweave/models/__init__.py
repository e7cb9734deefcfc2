"""
Data models for logweave.

This module contains pure data structures with no merge or ordering logic.
"""

from dataclasses import dataclass, field as dataclass_field, replace
from datetime import datetime
from typing import List, Optional, Union

from dateutil import parser as date_parser, tz

__all__ = [
    'AUTHORITATIVE_FILE_TYPES',
    'LogDate',
    'LogContext',
    'LogEvent',
]

# File types whose timestamps define a node's clock. Untagged segments count.
AUTHORITATIVE_FILE_TYPES = frozenset({"error.log", ""})


@dataclass(frozen=True)
class LogDate:
    """A parsed timestamp together with the text it was read from."""
    time: datetime
    display: str = ""

    @classmethod
    def parse(cls, value: Union[str, int, float, None]) -> Optional['LogDate']:
        """
        Build a LogDate from a timestamp string or Unix epoch seconds.

        Accepts anything dateutil understands ("2024-03-01 10:15:32.123",
        "2024-03-01T10:15:32Z", "Mar  1 10:15:32", ...). Times carrying an
        offset are converted to UTC and stored naive, like every other time,
        so all parsed dates compare with each other.

        Returns:
            LogDate, or None for empty, unparseable or unsupported values
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            try:
                parsed = datetime.fromtimestamp(value, tz=tz.UTC)
            except (ValueError, OverflowError, OSError):
                return None
            return cls(time=parsed.replace(tzinfo=None), display=str(value))

        if not isinstance(value, str) or not value.strip():
            return None
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(tz.UTC).replace(tzinfo=None)
        return cls(time=parsed, display=value.strip())


def _merge_unique(earlier: List[str], later: List[str]) -> List[str]:
    merged: List[str] = []
    for value in earlier + later:
        if value not in merged:
            merged.append(value)
    return merged


@dataclass
class LogContext:
    """
    Provenance of an event: which file it came from and what the node
    was known as at that point.

    Identity lists are ordered oldest first, so the last item is the most
    recent thing the node called itself.
    """
    file_path: str
    file_type: str = ""
    own_ips: List[str] = dataclass_field(default_factory=list)
    own_hashes: List[str] = dataclass_field(default_factory=list)
    own_names: List[str] = dataclass_field(default_factory=list)
    version: str = ""

    @property
    def is_authoritative(self) -> bool:
        return self.file_type in AUTHORITATIVE_FILE_TYPES

    def inherit(self, earlier: 'LogContext') -> 'LogContext':
        """
        Adopt the identity of a context from an earlier segment of the same node.

        Only identity fields are copied: IPs, hashes and names are prefixed
        with the earlier values, and version is filled when unknown here.
        File path and type stay untouched. Returns a new context.
        """
        return replace(
            self,
            own_ips=_merge_unique(earlier.own_ips, self.own_ips),
            own_hashes=_merge_unique(earlier.own_hashes, self.own_hashes),
            own_names=_merge_unique(earlier.own_names, self.own_names),
            version=self.version or earlier.version,
        )


@dataclass
class LogEvent:
    """One parsed log occurrence."""
    date: Optional[LogDate]
    context: LogContext
    message: str = ""
    raw: str = ""
    pattern: str = ""  # name of the matcher that recognized the line
    repetition_count: int = 1

    @property
    def timestamp(self) -> Optional[datetime]:
        return self.date.time if self.date is not None else None

    @property
    def is_authoritative(self) -> bool:
        return self.context.is_authoritative

    def __repr__(self):
        when = (self.date.display or self.date.time.isoformat()) if self.date else "-"
        return (f"LogEvent({when}, '{self.message[:30]}', "
                f"file={self.context.file_path}, x{self.repetition_count})")
