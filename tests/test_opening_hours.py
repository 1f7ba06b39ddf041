from schemas.service import OpeningHourEntry
from services.opening_hours import (
    DAY_ORDER, closed_schedule, default_schedule, format_opening_hours,
    parse_schedule, serialize_schedule
)


def week(**days):
    """Schedule where each keyword is a day key mapped to (open, close)."""
    entries = []
    for day in DAY_ORDER:
        if day in days:
            open_, close = days[day]
            entries.append(OpeningHourEntry(day_key=day, open=open_, close=close, closed=False))
        else:
            entries.append(OpeningHourEntry(day_key=day, open="09:00", close="18:00", closed=True))
    return entries


def test_default_schedule_compacts_weekdays():
    assert format_opening_hours(default_schedule(), "en") == "Mon–Fri 09:00-18:00"
    assert format_opening_hours(default_schedule(), "pt") == "Seg–Sex 09:00-18:00"


def test_default_schedule_keeps_weekend_times_while_closed():
    saturday = default_schedule()[5]
    assert saturday.day_key == "sat"
    assert saturday.closed
    assert (saturday.open, saturday.close) == ("10:00", "14:00")


def test_changing_hours_start_a_new_run():
    schedule = week(
        mon=("09:00", "18:00"), tue=("09:00", "18:00"), wed=("09:00", "18:00"),
        thu=("09:00", "13:00"), fri=("09:00", "18:00"),
    )
    assert format_opening_hours(schedule, "en") == (
        "Mon–Wed 09:00-18:00, Thu 09:00-13:00, Fri 09:00-18:00"
    )


def test_gap_breaks_a_run_even_with_equal_hours():
    schedule = week(mon=("09:00", "17:00"), wed=("09:00", "17:00"))
    assert format_opening_hours(schedule, "en") == "Mon 09:00-17:00, Wed 09:00-17:00"


def test_weekend_labels_in_portuguese():
    schedule = week(sat=("10:00", "14:00"), sun=("10:00", "14:00"))
    assert format_opening_hours(schedule, "pt") == "Sáb–Dom 10:00-14:00"


def test_storage_order_does_not_matter():
    schedule = week(mon=("08:00", "12:00"), tue=("08:00", "12:00"))
    assert format_opening_hours(list(reversed(schedule)), "en") == "Mon–Tue 08:00-12:00"


def test_day_without_both_times_is_not_open():
    schedule = week(mon=("09:00", ""), tue=("09:00", "18:00"))
    assert format_opening_hours(schedule, "en") == "Tue 09:00-18:00"


def test_same_hours_every_day_collapse_to_one_range():
    schedule = week(**{day: ("09:00", "18:00") for day in DAY_ORDER})
    assert format_opening_hours(schedule, "en") == "Mon–Sun 09:00-18:00"
    assert format_opening_hours(schedule, "pt") == "Seg–Dom 09:00-18:00"


def test_compacting_is_stable():
    schedule = week(mon=("09:00", "18:00"), tue=("09:00", "18:00"), sat=("10:00", "14:00"))
    first = format_opening_hours(schedule, "en")
    assert format_opening_hours(schedule, "en") == first
    assert format_opening_hours(parse_schedule(serialize_schedule(schedule)), "en") == first


def test_fully_closed_week_is_empty_text():
    assert format_opening_hours(closed_schedule(), "en") == ""
    assert format_opening_hours([], "en") == ""


class TestParseSchedule:

    def test_round_trips_stored_json(self):
        stored = serialize_schedule(default_schedule())
        assert stored[0]["dayKey"] == "mon"
        assert stored[0]["labelPt"] == "Segunda"
        assert parse_schedule(stored) == default_schedule()

    def test_malformed_values_fall_back_to_closed_week(self):
        for raw in (None, "Mon-Fri 9-5", {"mon": "09:00"}, []):
            schedule = parse_schedule(raw)
            assert len(schedule) == 7
            assert all(entry.closed for entry in schedule)

    def test_missing_days_are_closed_and_the_rest_kept(self):
        stored = serialize_schedule(default_schedule())[:3]
        schedule = parse_schedule(stored)
        assert [entry.day_key for entry in schedule] == DAY_ORDER
        assert all(entry.closed for entry in schedule[3:])
        assert format_opening_hours(schedule, "en") == "Mon–Wed 09:00-18:00"

    def test_entry_with_numeric_time_closes_only_that_day(self):
        stored = serialize_schedule(default_schedule())
        stored[2] = dict(stored[2], open=9)
        schedule = parse_schedule(stored)
        assert schedule[2].closed
        assert format_opening_hours(schedule, "en") == "Mon–Tue 09:00-18:00, Thu–Fri 09:00-18:00"

    def test_bad_entry_is_skipped(self):
        stored = serialize_schedule(default_schedule()) + [{"dayKey": "someday"}]
        assert format_opening_hours(parse_schedule(stored), "en") == "Mon–Fri 09:00-18:00"
