"""The parsed form of one EDL record."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional


@dataclass(frozen=True)
class Entry:
    """One edit/marker record from an EDL export.

    ``timestamp`` is where the marker sits on the timeline and ``duration``
    its length. ``color``, ``name`` and ``description`` come from the
    metadata line and are ``None`` when the record does not carry them.
    """

    index: int
    timestamp: timedelta
    duration: timedelta
    color: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @property
    def end(self) -> timedelta:
        return self.timestamp + self.duration

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping with times in seconds."""
        return {
            "index": self.index,
            "start": self.timestamp.total_seconds(),
            "end": self.end.total_seconds(),
            "duration": self.duration.total_seconds(),
            "color": self.color,
            "name": self.name,
            "description": self.description,
        }


__all__ = ["Entry"]
