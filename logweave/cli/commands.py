"""
CLI commands for logweave.

Input segments are already parsed: one JSON object per line, e.g.

    {"timestamp": "2024-03-01 10:15:32", "message": "joined cluster",
     "pattern": "member-joined", "file_type": "error.log",
     "ips": ["10.0.0.1"], "hashes": [], "names": ["db-1"], "version": "8.0.35"}
"""

import json
import logging
import sys
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.table import Table

from logweave.context.building import LocalTimeline
from logweave.models import LogContext, LogDate, LogEvent
from logweave.services import ChronologicalInterleaver, Timeline

logger = logging.getLogger(__name__)


def _text(value) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _text_list(value) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value if item is not None]


def event_from_record(record: dict, file_path: str) -> LogEvent:
    """
    Build an event from one decoded JSON object.

    Missing or null fields take their defaults, scalars are read as text and
    a single string is accepted where a list is expected.
    """
    context = LogContext(
        file_path=file_path,
        file_type=_text(record.get('file_type')),
        own_ips=_text_list(record.get('ips')),
        own_hashes=_text_list(record.get('hashes')),
        own_names=_text_list(record.get('names')),
        version=_text(record.get('version')),
    )
    return LogEvent(
        date=LogDate.parse(record.get('timestamp')),
        context=context,
        message=_text(record.get('message')),
        raw=_text(record.get('raw')),
        pattern=_text(record.get('pattern')),
    )


def read_segment(path: Path) -> LocalTimeline:
    """Read one segment file into a deduplicated local timeline."""
    timeline = LocalTimeline()
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                logger.warning("%s:%d: not valid JSON, skipped", path, line_number)
                continue
            if not isinstance(record, dict):
                logger.warning("%s:%d: not a JSON object, skipped", path, line_number)
                continue
            timeline = timeline.add(event_from_record(record, str(path)))
    return timeline


@click.command()
@click.argument('files', nargs=-1, required=True)
@click.option('--group-by', type=click.Choice(['directory', 'identifier']), default='directory',
              help='How segments are assigned to nodes (default: directory)')
@click.option('--limit', type=click.IntRange(min=0), default=0, help='Max events to display (default: all)')
@click.option('--verbose', '-v', is_flag=True, help='Log merge decisions')
def interleave(files, group_by, limit, verbose):
    """
    Merge segments per node and print every event in time order.

    Example:
        logweave interleave logs/node1/*.jsonl logs/node2/*.jsonl --limit 50
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    timeline = Timeline()
    for file in files:
        path = Path(file)
        if not path.exists():
            click.echo(f"Error: Input file not found: {file}", err=True)
            sys.exit(1)

        segment = read_segment(path)
        if group_by == 'directory':
            timeline.merge_by_directory(str(path), segment)
        else:
            timeline.merge_by_identifier(segment)

    click.echo(f"Nodes: {len(timeline)}")

    table = Table(title="Interleaved timeline")
    table.add_column("Time")
    table.add_column("Node")
    table.add_column("Message")
    table.add_column("Repeats", justify="right")

    shown = 0
    for node, event in ChronologicalInterleaver(timeline).drain():
        if limit and shown >= limit:
            break
        when = event.date.display if event.date else ""
        repeats = str(event.repetition_count) if event.repetition_count > 1 else ""
        table.add_row(when, node, event.message, repeats)
        shown += 1

    Console().print(table)
