"""Frame-rate aware conversion between EDL timecodes and durations.

A timecode is ``[hours:][minutes:][seconds:]frames``. Everything left of the
frame count is a whole unit of wall-clock time; the frame count is turned into
microseconds with ``floor(frames * 1_000_000 / frame_rate)``. The arithmetic is
done on :class:`fractions.Fraction` values so the floor is the only rounding
step, whatever the frame rate or layout.
"""
from __future__ import annotations

import math
import re
from datetime import timedelta
from fractions import Fraction

from .errors import InvalidTimestampError

MICROS_PER_SECOND = 1_000_000
MAX_COMPONENTS = 4

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)


def frame_rate_fraction(frame_rate) -> Fraction:
    """Return *frame_rate* as an exact positive :class:`Fraction`.

    Floats go through ``str`` first so ``29.97`` becomes ``2997/100`` rather
    than its binary approximation.
    """
    try:
        rate = Fraction(str(frame_rate))
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"frame rate must be a positive number, got {frame_rate!r}")
    if rate <= 0:
        raise ValueError(f"frame rate must be a positive number, got {frame_rate!r}")
    return rate


def frames_to_micros(frames, frame_rate) -> int:
    """Microseconds covered by *frames* at *frame_rate*, rounded down."""
    return math.floor(Fraction(frames) * MICROS_PER_SECOND / frame_rate_fraction(frame_rate))


def parse_timecode(value: str, frame_rate, fractional_frames: bool = True) -> timedelta:
    """Convert an EDL timecode into elapsed time.

    Components are read right to left, so ``"15"`` is fifteen frames and
    ``"00:02:10:15"`` is two minutes, ten seconds and fifteen frames. Frame
    counts at or above the frame rate are not carried into seconds, they are
    simply converted: ``"00:00:00:60"`` at 60 fps is one second.

    With ``fractional_frames=False`` a frame count such as ``"12.5"`` is
    rejected instead of converted.

    Raises:
        InvalidTimestampError: empty input, more than four components or a
            component that is not a non-negative decimal number.
        ValueError: *frame_rate* is not positive.
    """
    rate = frame_rate_fraction(frame_rate)
    if not value:
        raise InvalidTimestampError(value, "empty")

    parts = value.split(":")
    if len(parts) > MAX_COMPONENTS:
        raise InvalidTimestampError(value, f"more than {MAX_COMPONENTS} components")

    numbers = []
    for part in parts:
        if not _NUMBER_RE.fullmatch(part):
            raise InvalidTimestampError(value, f"{part!r} is not a number")
        numbers.append(Fraction(part))

    numbers.reverse()
    numbers += [Fraction(0)] * (MAX_COMPONENTS - len(numbers))
    frames, seconds, minutes, hours = numbers

    if not fractional_frames and frames.denominator != 1:
        raise InvalidTimestampError(value, "fractional frame count")

    try:
        return timedelta(
            hours=int(hours),
            minutes=int(minutes),
            seconds=int(seconds),
            microseconds=math.floor(frames * MICROS_PER_SECOND / rate),
        )
    except OverflowError:
        raise InvalidTimestampError(value, "out of range")


def format_timecode(delta: timedelta, frame_rate) -> str:
    """Render *delta* as ``HH:MM:SS:FF`` at *frame_rate*.

    The sub-second part is converted to the nearest frame so that a value
    produced by :func:`parse_timecode` formats back to the same frame number.
    """
    rate = frame_rate_fraction(frame_rate)
    micros = delta // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    whole, rest = divmod(abs(micros), MICROS_PER_SECOND)
    frames = round(Fraction(rest) * rate / MICROS_PER_SECOND)
    if frames >= math.ceil(rate):
        whole += 1
        frames = 0
    hours, rem = divmod(whole, 3600)
    minutes, seconds = divmod(rem, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}:{frames:02d}"


__all__ = [
    "MICROS_PER_SECOND",
    "frame_rate_fraction",
    "frames_to_micros",
    "parse_timecode",
    "format_timecode",
]
