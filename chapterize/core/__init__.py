"""Core EDL parsing and chapter utilities package."""

from . import (
    errors,
    entry,
    timecode,
    edl,
    chapters,
    io,
)

__all__ = [
    "errors",
    "entry",
    "timecode",
    "edl",
    "chapters",
    "io",
]
