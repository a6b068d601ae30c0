"""Turn parsed entries into a chapter list for a video description."""
from __future__ import annotations

import json
from datetime import timedelta
from typing import Iterable, List, Optional, Sequence

from .entry import Entry
from .timecode import format_timecode

DEFAULT_NAME = "-"
ONE_HOUR = timedelta(hours=1)


def select_entries(
    entries: Iterable[Entry], colors: Optional[Sequence[str]] = None
) -> List[Entry]:
    """Sort *entries* by record number and keep the allowed colors.

    An empty or missing *colors* keeps everything. Otherwise an entry is kept
    only when it has a color and that color is in *colors*.
    """
    selected = sorted(entries, key=lambda e: e.index)
    if colors:
        allowed = set(colors)
        selected = [e for e in selected if e.color is not None and e.color in allowed]
    return selected


def format_timestamp(delta: timedelta, with_hours: bool = False) -> str:
    """Return ``MM:SS`` or ``HH:MM:SS`` for *delta*, dropping sub-seconds."""
    total = int(delta.total_seconds())
    hours, rem = divmod(total, 3600)
    minutes, seconds = divmod(rem, 60)
    if hours > 0 or with_hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def render_chapters(entries: Sequence[Entry]) -> str:
    """Render one ``timestamp name`` line per entry.

    Every line gets an hours field as soon as one entry is an hour or more
    into the timeline.
    """
    with_hours = any(e.timestamp >= ONE_HOUR for e in entries)
    lines = [
        f"{format_timestamp(e.timestamp, with_hours)} "
        f"{e.name if e.name is not None else DEFAULT_NAME}"
        for e in entries
    ]
    return "".join(f"{line}\n" for line in lines)


def entries_to_json(entries: Sequence[Entry], frame_rate) -> str:
    """Serialise *entries* with both seconds and timecodes."""
    data = []
    for e in entries:
        rec = e.to_dict()
        rec["start_timecode"] = format_timecode(e.timestamp, frame_rate)
        rec["end_timecode"] = format_timecode(e.end, frame_rate)
        data.append(rec)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


__all__ = [
    "select_entries",
    "format_timestamp",
    "render_chapters",
    "entries_to_json",
]
