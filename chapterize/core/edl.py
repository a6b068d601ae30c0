"""Parse the marker list an editor exports as a CMX-style EDL.

The export is CRLF text. A blank line separates the header from the first
record and each record from the next. A record is two lines::

    002  001      V     C        00:02:10:15 00:02:10:16 00:02:10:15 00:02:10:16
     |C:ResolveColorBlue |M:Stuff |D:1

The first line holds whitespace separated fields (record number, reel, track,
transition and timecodes); the second holds ``|`` separated marker metadata.
"""
from __future__ import annotations

import re
from datetime import timedelta
from enum import Enum
from typing import List, Optional

from .entry import Entry
from .errors import InvalidEntryFormatError, InvalidIndexFormatError, NoEntriesError
from .timecode import parse_timecode

RECORD_SEPARATOR = "\r\n\r\n"
LINE_SEPARATOR = "\r\n"
DEFAULT_FRAME_RATE = 60

_INDEX_RE = re.compile(r"\+?\d+", re.ASCII)

COLOR_TAG = "C:"
NAME_TAG = "M:"
DURATION_TAG = "D:"


class Layout(str, Enum):
    """Field layout of the record's first line.

    ``SOURCE_RANGE`` records carry source-in and source-out timecodes at
    fields 4 and 5. ``EXPLICIT_DURATION`` records carry only the start at
    field 4 and give the length in a ``D:`` metadata tag.
    """

    SOURCE_RANGE = "source-range"
    EXPLICIT_DURATION = "explicit-duration"

    @property
    def min_fields(self) -> int:
        return 6 if self is Layout.SOURCE_RANGE else 5


def split_records(data: str) -> List[str]:
    """Return the raw record chunks of *data*, header dropped."""
    chunks = data.split(RECORD_SEPARATOR)
    if len(chunks) < 2:
        raise NoEntriesError()
    if chunks[-1] == "":
        chunks = chunks[:-1]
    records = chunks[1:]
    if not records:
        raise NoEntriesError()
    return records


def _scan_tags(fields: List[str], tags: tuple) -> dict:
    # first occurrence of each tag wins
    found = {}
    for field in fields:
        field = field.lstrip()
        tag = field[:2]
        if tag in tags and tag not in found:
            found[tag] = field[2:].strip()
    return found


def parse_entry(
    chunk: str,
    frame_rate=DEFAULT_FRAME_RATE,
    layout: Layout = Layout.SOURCE_RANGE,
) -> Entry:
    """Parse one record chunk into an :class:`Entry`."""
    lines = chunk.split(LINE_SEPARATOR)
    if len(lines) != 2:
        raise InvalidEntryFormatError(f"expected 2 lines, got {len(lines)}")
    fields_line, meta_line = lines

    fields = fields_line.split()
    if len(fields) < layout.min_fields:
        raise InvalidEntryFormatError(
            f"expected at least {layout.min_fields} fields, got {len(fields)}"
        )

    if not _INDEX_RE.fullmatch(fields[0]):
        raise InvalidIndexFormatError(fields[0])
    index = int(fields[0])

    fractional = layout is Layout.SOURCE_RANGE
    timestamp = parse_timecode(fields[4], frame_rate, fractional_frames=fractional)

    meta = meta_line.split("|")
    description: Optional[str] = meta[0].strip() or None

    tags = (COLOR_TAG, NAME_TAG)
    if layout is Layout.EXPLICIT_DURATION:
        tags += (DURATION_TAG,)
    found = _scan_tags(meta[1:], tags)

    if layout is Layout.SOURCE_RANGE:
        # end >= start is not checked; a reversed range gives a negative duration
        duration = parse_timecode(fields[5], frame_rate) - timestamp
    elif DURATION_TAG in found:
        duration = parse_timecode(found[DURATION_TAG], frame_rate, fractional_frames=False)
    else:
        duration = timedelta(0)

    return Entry(
        index=index,
        timestamp=timestamp,
        duration=duration,
        color=found.get(COLOR_TAG),
        name=found.get(NAME_TAG),
        description=description,
    )


def parse(
    data: str,
    frame_rate=DEFAULT_FRAME_RATE,
    layout: Layout = Layout.SOURCE_RANGE,
) -> List[Entry]:
    """Parse a whole EDL export into entries, in file order.

    The first malformed record aborts the parse; no partial list is returned.
    Entries are not sorted, use :func:`chapterize.core.chapters.select_entries`.
    """
    return [parse_entry(chunk, frame_rate, layout) for chunk in split_records(data)]


__all__ = [
    "DEFAULT_FRAME_RATE",
    "Layout",
    "split_records",
    "parse_entry",
    "parse",
]
