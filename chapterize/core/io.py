"""Reading EDL exports and writing results."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

_BOM = "\ufeff"


def _is_stdio(path: Optional[PathLike]) -> bool:
    return path is None or str(path) == "-"


def read_edl(path: Optional[PathLike] = None) -> str:
    """Return the text of *path*, or of stdin when *path* is ``None``/``"-"``.

    Bytes are decoded as UTF-8 without newline translation; record and line
    separators in an EDL are CRLF and must reach the parser unchanged.
    """
    if _is_stdio(path):
        raw = sys.stdin.buffer.read()
    else:
        raw = Path(path).read_bytes()
    text = raw.decode("utf-8")
    if text.startswith(_BOM):
        text = text[1:]
    return text


def write_text(text: str, path: Optional[PathLike] = None) -> None:
    """Write *text* to *path*, or to stdout when *path* is ``None``/``"-"``."""
    if _is_stdio(path):
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    Path(path).write_text(text, encoding="utf-8")


__all__ = ["read_edl", "write_text"]
