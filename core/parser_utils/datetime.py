"""Fixed-pattern date/time parsing shared by the deadline and event parsers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Dict, Iterable, Optional, Pattern, Tuple, Union

from core.tasks import PointInTime


class MomentShape(Enum):
    DATE_TIME = "date_time"
    DATE = "date"
    TIME = "time"


# Most specific first; callers narrow the set but never reorder it.
_SHAPE_ORDER: Tuple[MomentShape, ...] = (MomentShape.DATE_TIME, MomentShape.DATE, MomentShape.TIME)
DATE_OR_DATE_TIME: Tuple[MomentShape, ...] = (MomentShape.DATE_TIME, MomentShape.DATE)
ANY_SHAPE: Tuple[MomentShape, ...] = _SHAPE_ORDER

_DATE = r"(?P<day>\d{1,2})/(?P<month>\d{1,2})/(?P<year>\d{4})"
_TIME = r"(?P<hour>\d{2})(?P<minute>\d{2})"
_PATTERNS: Dict[MomentShape, Pattern[str]] = {
    MomentShape.DATE_TIME: re.compile(rf"{_DATE}\s+{_TIME}", re.ASCII),
    MomentShape.DATE: re.compile(_DATE, re.ASCII),
    MomentShape.TIME: re.compile(_TIME, re.ASCII),
}

DATETIME_FORMAT_HINT = "d/M/yyyy HHmm"

_MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True)
class ParsedMoment:
    shape: MomentShape
    value: Union[datetime, date, time]


def parse_moment(text: str, shapes: Iterable[MomentShape] = DATE_OR_DATE_TIME) -> Optional[ParsedMoment]:
    """Return the most specific reading of ``text`` among the allowed ``shapes``.

    Each shape is a single fixed pattern; the first one that both matches the
    whole text and names a real calendar value wins. ``None`` means the text
    fits none of the allowed shapes.
    """
    if not text:
        return None
    candidate = text.strip()
    allowed = set(shapes)
    for shape in _SHAPE_ORDER:
        if shape not in allowed:
            continue
        parsed = _try_shape(candidate, shape)
        if parsed is not None:
            return parsed
    return None


def _try_shape(text: str, shape: MomentShape) -> Optional[ParsedMoment]:
    match = _PATTERNS[shape].fullmatch(text)
    if not match:
        return None
    fields = {key: int(value) for key, value in match.groupdict().items()}
    try:
        if shape is MomentShape.DATE_TIME:
            value: Union[datetime, date, time] = datetime(
                fields["year"], fields["month"], fields["day"], fields["hour"], fields["minute"]
            )
        elif shape is MomentShape.DATE:
            value = date(fields["year"], fields["month"], fields["day"])
        else:
            value = time(fields["hour"], fields["minute"])
    except ValueError:
        # 31/2/2019 or 2460 match the pattern but are not real values.
        return None
    return ParsedMoment(shape=shape, value=value)


def to_point(parsed: ParsedMoment) -> PointInTime:
    """Convert a dated moment into a ``PointInTime`` (time-only has no date to anchor)."""
    if parsed.shape is MomentShape.DATE_TIME:
        return PointInTime(parsed.value, has_time=True)  # type: ignore[arg-type]
    if parsed.shape is MomentShape.DATE:
        return PointInTime(datetime.combine(parsed.value, time()), has_time=False)  # type: ignore[arg-type]
    raise ValueError("A time of day alone cannot be converted without a date")


def on_day_of(point: PointInTime, clock: time) -> PointInTime:
    """Place ``clock`` on the calendar day of ``point``."""
    return PointInTime(datetime.combine(point.value.date(), clock), has_time=True)


def format_point(point: PointInTime) -> str:
    """Render ``point`` in the accepted input pattern, e.g. ``2/12/2019 1800``."""
    value = point.value
    text = f"{value.day}/{value.month}/{value.year:04d}"
    if point.has_time:
        text += f" {value.hour:02d}{value.minute:02d}"
    return text


def render_point(point: PointInTime) -> str:
    """Render ``point`` for display, e.g. ``Dec 2 2019`` or ``Dec 2 2019 18:00``."""
    value = point.value
    text = f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.day} {value.year}"
    if point.has_time:
        text += f" {value.hour:02d}:{value.minute:02d}"
    return text


__all__ = [
    "ANY_SHAPE",
    "DATE_OR_DATE_TIME",
    "DATETIME_FORMAT_HINT",
    "MomentShape",
    "ParsedMoment",
    "on_day_of",
    "format_point",
    "parse_moment",
    "render_point",
    "to_point",
]
