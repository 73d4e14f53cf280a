import datetime

from icalendar import Calendar

from fastlonn.core.calendar_export import generate_ical, group_runs
from fastlonn.core.models import DayStatus


def jan(day):
    return datetime.date(2025, 1, day)


FERIE_ACROSS_WEEKEND = {
    jan(6): DayStatus.FERIE,
    jan(7): DayStatus.FERIE,
    jan(8): DayStatus.FERIE,
    jan(9): DayStatus.FERIE,
    jan(10): DayStatus.FERIE,
    jan(13): DayStatus.FERIE,
    jan(14): DayStatus.FERIE,
    jan(15): DayStatus.SYKEMELDING,
}


def test_group_runs_spans_weekend():
    runs = group_runs(FERIE_ACROSS_WEEKEND)

    assert runs == [
        (jan(6), jan(14), DayStatus.FERIE),
        (jan(15), jan(15), DayStatus.SYKEMELDING),
    ]


def test_group_runs_breaks_on_gap():
    runs = group_runs({jan(6): DayStatus.FERIE, jan(8): DayStatus.FERIE})
    assert len(runs) == 2


def test_group_runs_spans_holiday():
    # Skjærtorsdag 17. april til andre påskedag 21. april 2025
    days = {
        datetime.date(2025, 4, 16): DayStatus.FERIE,
        datetime.date(2025, 4, 22): DayStatus.FERIE,
    }
    assert group_runs(days) == [(datetime.date(2025, 4, 16), datetime.date(2025, 4, 22), DayStatus.FERIE)]


def test_generate_ical():
    ical = generate_ical(2025, FERIE_ACROSS_WEEKEND)
    cal = Calendar.from_ical(ical)

    events = [c for c in cal.walk() if c.name == "VEVENT"]
    assert len(events) == 2

    first = events[0]
    assert str(first.get("summary")) == "Ferie"
    assert first.decoded("dtstart") == jan(6)
    assert first.decoded("dtend") == jan(15)
    assert str(first.get("uid")) == "2025-01-06_ferie@fastlonn"

    assert str(events[1].get("summary")) == "Sykemelding"
    assert "-//Fastlonn//fastlonn.app//" in ical


def test_generate_ical_only_includes_requested_year():
    days = {jan(6): DayStatus.FERIE, datetime.date(2024, 12, 30): DayStatus.FERIE}
    cal = Calendar.from_ical(generate_ical(2025, days))

    events = [c for c in cal.walk() if c.name == "VEVENT"]
    assert len(events) == 1


def test_generate_ical_empty():
    cal = Calendar.from_ical(generate_ical(2025, {}))
    assert [c for c in cal.walk() if c.name == "VEVENT"] == []
