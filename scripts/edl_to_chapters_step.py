#!/usr/bin/env python3
"""Convert an EDL marker export into a chapter list without the Typer CLI."""
import argparse
import sys

from chapterize.core import chapters, edl, io
from chapterize.core.errors import EDLError


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Create a chapter list from an EDL export")
    p.add_argument("edl", nargs="?", default="-", help="EDL file ('-' for stdin)")
    p.add_argument("--out", default=None, help="Output TXT file (stdout when omitted)")
    p.add_argument("--frame-rate", type=float, default=edl.DEFAULT_FRAME_RATE, help="Timeline FPS")
    p.add_argument("--color", action="append", default=[], help="Keep only this marker color")
    p.add_argument(
        "--layout",
        choices=[layout.value for layout in edl.Layout],
        default=edl.Layout.SOURCE_RANGE.value,
        help="Record layout",
    )
    args = p.parse_args(argv)

    try:
        entries = edl.parse(io.read_edl(args.edl), args.frame_rate, edl.Layout(args.layout))
        selected = chapters.select_entries(entries, args.color)
        io.write_text(chapters.render_chapters(selected), args.out)
    except (EDLError, OSError, ValueError) as exc:
        print(f"❌  {exc}", file=sys.stderr)
        return 1
    if args.out and args.out != "-":
        print(f"✅  {len(selected)} chapter(s) → {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
