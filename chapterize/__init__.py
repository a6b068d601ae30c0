"""Chapterize package."""

from .core import chapters, edl, entry, errors, io, timecode

__all__ = [
    "chapters",
    "edl",
    "entry",
    "errors",
    "io",
    "timecode",
]
