"""Typer-based command line interface for Chapterize."""

from __future__ import annotations
from pathlib import Path
from typing import List, NoReturn, Optional
import typer
from dotenv import load_dotenv

from .core import chapters, edl, io
from .core.edl import DEFAULT_FRAME_RATE, Layout
from .core.entry import Entry
from .core.errors import EDLError

load_dotenv()

app = typer.Typer(help="Turn EDL marker exports into chapter lists")


def _positive_rate(value: float) -> float:
    if value <= 0:
        raise typer.BadParameter("frame rate must be greater than zero")
    return value


def _fail(message: str) -> NoReturn:
    typer.echo(f"❌  {message}", err=True)
    raise typer.Exit(code=1)


def _load_entries(
    edl_file: Optional[Path],
    frame_rate: float,
    layout: Layout,
    colors: Optional[List[str]],
) -> List[Entry]:
    try:
        data = io.read_edl(edl_file)
        entries = edl.parse(data, frame_rate, layout)
    except FileNotFoundError:
        _fail(f"EDL file not found: {edl_file}")
    except (EDLError, OSError, ValueError) as exc:
        _fail(str(exc))
    return chapters.select_entries(entries, colors)


def _write(text: str, out: Optional[Path]) -> None:
    try:
        io.write_text(text, out)
    except OSError as exc:
        _fail(f"could not write {out}: {exc}")


# ---------------------------------------------------------------------
# shared options
EDL_ARG = typer.Argument(
    None,
    help="EDL file exported from the editor; stdin when omitted or '-'",
    show_default=False,
)
OUT_OPT = typer.Option(
    None,
    "--output",
    "-o",
    help="Destination file; stdout when omitted",
)
RATE_OPT = typer.Option(
    float(DEFAULT_FRAME_RATE),
    "--frame-rate",
    "-f",
    envvar="CHAPTERIZE_FRAME_RATE",
    callback=_positive_rate,
    help="Frame rate (FPS) of the timeline",
)
COLOR_OPT = typer.Option(
    None,
    "--color-filter",
    "-c",
    envvar="CHAPTERIZE_COLOR",
    help="Only keep markers of this color (repeatable), e.g. ResolveColorBlue",
)
LAYOUT_OPT = typer.Option(
    Layout.SOURCE_RANGE,
    "--layout",
    "-l",
    envvar="CHAPTERIZE_LAYOUT",
    case_sensitive=False,
    help="Record layout: source in/out timecodes or a D: duration tag",
)


@app.command("chapters")
def chapters_cmd(
    edl_file: Optional[Path] = EDL_ARG,
    out: Optional[Path] = OUT_OPT,
    frame_rate: float = RATE_OPT,
    color_filter: Optional[List[str]] = COLOR_OPT,
    layout: Layout = LAYOUT_OPT,
) -> None:
    """
    Write ``MM:SS name`` chapter lines sorted by record number.

    Hours are added to every line once a marker is an hour or more into the
    timeline. Markers without a name are listed as ``-``.
    """
    entries = _load_entries(edl_file, frame_rate, layout, color_filter)
    _write(chapters.render_chapters(entries), out)
    if out is not None and str(out) != "-":
        typer.echo(f"✅  {len(entries)} chapter(s) → {out}")


@app.command("entries")
def entries_cmd(
    edl_file: Optional[Path] = EDL_ARG,
    out: Optional[Path] = OUT_OPT,
    frame_rate: float = RATE_OPT,
    color_filter: Optional[List[str]] = COLOR_OPT,
    layout: Layout = LAYOUT_OPT,
) -> None:
    """Dump the parsed markers as JSON, sorted by record number."""
    entries = _load_entries(edl_file, frame_rate, layout, color_filter)
    _write(chapters.entries_to_json(entries, frame_rate), out)
    if out is not None and str(out) != "-":
        typer.echo(f"✅  {len(entries)} entr{'y' if len(entries) == 1 else 'ies'} → {out}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
