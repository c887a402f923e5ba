"""
freshness.py
Decides whether the feed is current.

The publisher writes its last update as ``DD/MM HH:MM`` local time with no
year. The evaluator attaches the year of ``now`` (in the same zone), adds the
freshness window and compares against ``now``. Records written in late December
and checked in early January therefore land a year in the future and read as
fresh; the stored format carries no information to do better.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from .errors import TimestampParseError
from .schemas import FreshnessReport

TIMESTAMP_LAYOUT = "%d/%m %H:%M"
FRESHNESS_WINDOW = timedelta(minutes=45)

# strptime accepts unpadded day/month/minute; the publisher always pads them.
_LAYOUT_SHAPES = {
    TIMESTAMP_LAYOUT: re.compile(r"\d{2}/\d{2} \d{1,2}:\d{2}"),
}


@dataclass(frozen=True)
class Freshness:
    last_update: datetime
    next_update: datetime
    now: datetime
    layout: str = TIMESTAMP_LAYOUT

    @property
    def fresh(self) -> bool:
        return self.next_update > self.now

    def report(self) -> FreshnessReport:
        return FreshnessReport(
            lastupdate=self.last_update.strftime(self.layout),
            nextupdate=self.next_update.strftime(self.layout),
            now=self.now.strftime(self.layout),
        )


def parse_update_time(
    raw: str,
    year: int,
    tz: tzinfo,
    layout: str = TIMESTAMP_LAYOUT,
) -> datetime:
    """Parse a year-less timestamp and pin it to ``year`` in ``tz``.

    The year goes in before parsing so that ``29/02`` is accepted in leap years.
    """
    text = raw.strip()
    error = TimestampParseError(f"cannot parse update time {raw!r} with layout {layout!r}")
    shape = _LAYOUT_SHAPES.get(layout)
    if shape is not None and not shape.fullmatch(text):
        raise error
    try:
        parsed = datetime.strptime(f"{year:04d} {text}", f"%Y {layout}")
    except ValueError as exc:
        raise error from exc
    return parsed.replace(tzinfo=tz)


def evaluate_freshness(
    raw: str,
    now: datetime,
    *,
    tz: tzinfo,
    layout: str = TIMESTAMP_LAYOUT,
    window: timedelta = FRESHNESS_WINDOW,
) -> Freshness:
    now = now.astimezone(tz)
    last_update = parse_update_time(raw, now.year, tz, layout)
    return Freshness(
        last_update=last_update,
        next_update=last_update + window,
        now=now,
        layout=layout,
    )
