"""Exceptions raised while parsing EDL exports."""
from __future__ import annotations


class EDLError(Exception):
    """Base exception for EDL parsing."""


class NoEntriesError(EDLError):
    """The file holds no records past the header."""

    def __init__(self) -> None:
        super().__init__("No entries")


class InvalidEntryFormatError(EDLError):
    """A record is not a fields line plus a metadata line."""

    def __init__(self, detail: str | None = None) -> None:
        msg = "Invalid entry format"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class InvalidIndexFormatError(EDLError):
    """The record number is not a non-negative integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid index format: {token!r}")


class InvalidTimestampError(EDLError):
    """A timecode is empty or has a non-numeric component."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid timestamp: {value!r} ({reason})")
