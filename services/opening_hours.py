"""
Weekly opening-hours schedules and their compact display text.

A schedule is seven OpeningHourEntry records, one per weekday. Consecutive
open days with identical hours collapse into one range:

    Mon–Fri 09:00-18:00, Sat 10:00-14:00
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from schemas.service import OpeningHourEntry

logger = logging.getLogger(__name__)

DAY_ORDER = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

DAY_ABBREVIATIONS = {
    "en": {
        "mon": "Mon", "tue": "Tue", "wed": "Wed", "thu": "Thu",
        "fri": "Fri", "sat": "Sat", "sun": "Sun",
    },
    "pt": {
        "mon": "Seg", "tue": "Ter", "wed": "Qua", "thu": "Qui",
        "fri": "Sex", "sat": "Sáb", "sun": "Dom",
    },
}

DAY_NAMES = {
    "mon": ("Monday", "Segunda"),
    "tue": ("Tuesday", "Terça"),
    "wed": ("Wednesday", "Quarta"),
    "thu": ("Thursday", "Quinta"),
    "fri": ("Friday", "Sexta"),
    "sat": ("Saturday", "Sábado"),
    "sun": ("Sunday", "Domingo"),
}

RANGE_DASH = "–"


def _entry(day_key: str, open_: str, close: str, closed: bool) -> OpeningHourEntry:
    label_en, label_pt = DAY_NAMES[day_key]
    return OpeningHourEntry(
        day_key=day_key,
        label_en=label_en,
        label_pt=label_pt,
        open=open_,
        close=close,
        closed=closed,
    )


def default_schedule() -> List[OpeningHourEntry]:
    """Starting schedule for a new profile: weekdays 09:00-18:00, weekend closed."""
    return [
        _entry(day, "09:00", "18:00", False) if day not in ("sat", "sun")
        else _entry(day, "10:00", "14:00", True)
        for day in DAY_ORDER
    ]


def closed_schedule() -> List[OpeningHourEntry]:
    """Fallback for missing or malformed data: every day closed."""
    return [_entry(day, "", "", True) for day in DAY_ORDER]


def parse_schedule(raw: Any) -> List[OpeningHourEntry]:
    """Build a seven-day schedule from a stored JSON value.

    A value that is not a list gives the fully closed schedule. Inside a
    list, malformed entries are skipped and any day without a valid entry
    is filled in as closed.
    """
    if not isinstance(raw, list) or not raw:
        return closed_schedule()

    by_key: Dict[str, OpeningHourEntry] = {}
    for item in raw:
        if isinstance(item, OpeningHourEntry):
            by_key[item.day_key] = item
            continue
        if not isinstance(item, dict):
            continue
        try:
            entry = OpeningHourEntry.model_validate(item)
        except ValidationError:
            logger.warning(f"Skipping malformed opening-hours entry: {item!r}")
            continue
        by_key[entry.day_key] = entry

    missing = [day for day in DAY_ORDER if day not in by_key]
    if missing:
        logger.warning(f"Opening hours missing for {', '.join(missing)}; treating as closed")
    return [by_key.get(day) or _entry(day, "", "", True) for day in DAY_ORDER]


def serialize_schedule(schedule: List[OpeningHourEntry]) -> List[dict]:
    """Stored JSON shape (camelCase keys)."""
    return [entry.model_dump(by_alias=True) for entry in schedule]


def _day_label(day_key: str, locale: str) -> str:
    return DAY_ABBREVIATIONS.get(locale, DAY_ABBREVIATIONS["en"])[day_key]


def format_opening_hours(schedule: Optional[List[OpeningHourEntry]], locale: str = "en") -> str:
    """Compact a weekly schedule into ranges of identical consecutive days.

    Returns an empty string when no day is open.
    """
    if not schedule:
        return ""

    by_key = {entry.day_key: entry for entry in schedule}
    open_days = [day for day in DAY_ORDER if day in by_key and by_key[day].is_open]

    runs: List[dict] = []
    current = None
    for day in open_days:
        entry = by_key[day]
        if (
            current is None
            or entry.open != current["open"]
            or entry.close != current["close"]
            or DAY_ORDER.index(day) != DAY_ORDER.index(current["end"]) + 1
        ):
            current = {"start": day, "end": day, "open": entry.open, "close": entry.close}
            runs.append(current)
        else:
            current["end"] = day

    parts = []
    for run in runs:
        start_label = _day_label(run["start"], locale)
        if run["start"] == run["end"]:
            day_part = start_label
        else:
            day_part = f"{start_label}{RANGE_DASH}{_day_label(run['end'], locale)}"
        parts.append(f"{day_part} {run['open']}-{run['close']}")

    return ", ".join(parts)
