import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chapterize import cli

SAMPLE = Path(__file__).resolve().parents[1] / "videos" / "Example_Timeline" / "Example_Timeline.edl"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("CHAPTERIZE_FRAME_RATE", "CHAPTERIZE_COLOR", "CHAPTERIZE_LAYOUT"):
        monkeypatch.delenv(var, raising=False)


def test_chapters_to_stdout():
    result = runner.invoke(cli.app, ["chapters", str(SAMPLE)])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "00:00 Intro",
        "02:10 Stuff",
        "03:03 Don't export this!",
        "04:32 Outro",
    ]


def test_chapters_color_filter_to_file(tmp_path):
    out = tmp_path / "chapters.txt"
    result = runner.invoke(
        cli.app,
        ["chapters", str(SAMPLE), "-o", str(out), "-c", "ResolveColorBlue", "-f", "60"],
    )
    assert result.exit_code == 0, result.output
    assert out.read_text() == "00:00 Intro\n02:10 Stuff\n04:32 Outro\n"
    assert "✅" in result.stdout


def test_chapters_repeated_color_filter():
    result = runner.invoke(
        cli.app,
        ["chapters", str(SAMPLE), "-c", "ResolveColorGreen", "--color-filter", "ResolveColorRed"],
    )
    assert result.exit_code == 0, result.output
    assert result.stdout == "03:03 Don't export this!\n"


def test_chapters_from_stdin():
    result = runner.invoke(cli.app, ["chapters"], input=SAMPLE.read_bytes())
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("00:00 Intro\n")


def test_chapters_dash_reads_stdin():
    result = runner.invoke(cli.app, ["chapters", "-"], input=SAMPLE.read_bytes())
    assert result.exit_code == 0, result.output
    assert len(result.stdout.splitlines()) == 4


def test_frame_rate_from_env(monkeypatch):
    # at 30 fps frame 54 is 1.8 s, carrying 00:03:03 into 00:03:04
    monkeypatch.setenv("CHAPTERIZE_FRAME_RATE", "30")
    result = runner.invoke(cli.app, ["chapters", str(SAMPLE), "-c", "ResolveColorGreen"])
    assert result.exit_code == 0, result.output
    assert result.stdout == "03:04 Don't export this!\n"


def test_explicit_duration_layout(tmp_path):
    edl_file = tmp_path / "markers.edl"
    edl_file.write_bytes(
        b"TITLE: Five\r\nFCM: NON-DROP FRAME\r\n\r\n"
        b"001  001      V     C        01:00:00:00  \r\n |C:ResolveColorBlue |M:Late |D:1\r\n\r\n"
        b"002  001      V     C        00:00:05:00  \r\n |M:Early\r\n\r\n"
    )
    result = runner.invoke(cli.app, ["chapters", str(edl_file), "--layout", "explicit-duration"])
    assert result.exit_code == 0, result.output
    assert result.stdout == "01:00:00 Late\n00:00:05 Early\n"


def test_missing_file_fails(tmp_path):
    result = runner.invoke(cli.app, ["chapters", str(tmp_path / "missing.edl")])
    assert result.exit_code == 1
    assert "❌" in result.output
    assert "not found" in result.output


def test_parse_error_fails(tmp_path):
    edl_file = tmp_path / "bad.edl"
    edl_file.write_bytes(b"TITLE: Bad\r\n\r\nxyz  001  V  C  00:00:00:00 00:00:00:01\r\n |M:a\r\n\r\n")
    result = runner.invoke(cli.app, ["chapters", str(edl_file)])
    assert result.exit_code == 1
    assert "Invalid index format" in result.output


def test_header_only_fails(tmp_path):
    edl_file = tmp_path / "empty.edl"
    edl_file.write_bytes(b"TITLE: Empty\r\nFCM: NON-DROP FRAME\r\n")
    result = runner.invoke(cli.app, ["chapters", str(edl_file)])
    assert result.exit_code == 1
    assert "No entries" in result.output


def test_bad_frame_rate_rejected():
    result = runner.invoke(cli.app, ["chapters", str(SAMPLE), "-f", "0"])
    assert result.exit_code != 0


def test_entries_json(tmp_path):
    out = tmp_path / "entries.json"
    result = runner.invoke(cli.app, ["entries", str(SAMPLE), "-o", str(out), "-c", "ResolveColorBlue"])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text())
    assert [d["index"] for d in data] == [1, 2, 4]
    assert data[2]["name"] == "Outro"
    assert data[2]["start_timecode"] == "00:04:32:13"


def test_chapters_direct_call(tmp_path, capsys):
    out = tmp_path / "chapters.txt"
    cli.chapters_cmd(
        edl_file=SAMPLE,
        out=out,
        frame_rate=60.0,
        color_filter=["ResolveColorBlue"],
        layout=cli.Layout.SOURCE_RANGE,
    )
    assert out.read_text().splitlines()[-1] == "04:32 Outro"
    assert "✅" in capsys.readouterr().out


def test_out_of_range_timecode_fails_cleanly(tmp_path):
    edl_file = tmp_path / "big.edl"
    edl_file.write_bytes(
        b"TITLE: Big\r\n\r\n001  001  V  C  99999999999:00:00:00 99999999999:00:00:01\r\n |M:a\r\n\r\n"
    )
    result = runner.invoke(cli.app, ["chapters", str(edl_file)])
    assert result.exit_code == 1
    assert "❌" in result.output
    assert "out of range" in result.output
