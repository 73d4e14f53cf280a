"""Eksport av merkede dager til iCal."""

import datetime

from icalendar import Calendar, Event

from fastlonn.core.day_states import DayStateMap
from fastlonn.core.holidays import holidays_for_year, is_paintable
from fastlonn.core.models import DAY_STATUS_LABELS, DayStatus


def _next_work_day(date: datetime.date, holiday_set: frozenset[datetime.date]) -> datetime.date:
    d = date + datetime.timedelta(days=1)
    while not is_paintable(d, holiday_set):
        d += datetime.timedelta(days=1)
    return d


def group_runs(days: DayStateMap) -> list[tuple[datetime.date, datetime.date, DayStatus]]:
    """
    Slår sammen påfølgende arbeidsdager med samme status.

    Helger og helligdager mellom to like dager bryter ikke en periode.

    Returns:
        Liste med (første dag, siste dag, status) sortert på dato
    """
    runs: list[tuple[datetime.date, datetime.date, DayStatus]] = []
    holiday_sets: dict[int, frozenset[datetime.date]] = {}

    for d, status in sorted(days.items()):
        if runs:
            start, end, run_status = runs[-1]
            holiday_set = holiday_sets.setdefault(end.year, holidays_for_year(end.year))
            if run_status == status and _next_work_day(end, holiday_set) == d:
                runs[-1] = (start, d, status)
                continue
        runs.append((d, d, status))
    return runs


def generate_ical(year: int, days: DayStateMap) -> str:
    """
    Genererer en iCal-fil med merkede perioder for et år.

    Args:
        year: Året som eksporteres
        days: Dagstatus for året

    Returns:
        iCal-formatert streng
    """
    cal = Calendar()
    cal.add("prodid", "-//Fastlonn//fastlonn.app//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", f"Fravær {year}")
    cal.add("x-wr-timezone", "Europe/Oslo")

    stamp = datetime.datetime.now(datetime.timezone.utc)
    for start, end, status in group_runs({d: s for d, s in days.items() if d.year == year}):
        cal.add_component(_create_event(start, end, status, stamp))

    return cal.to_ical().decode("utf-8")


def _create_event(
    start: datetime.date,
    end: datetime.date,
    status: DayStatus,
    stamp: datetime.datetime,
) -> Event:
    """Heldagshendelse fra første til og med siste dag."""
    event = Event()
    event.add("summary", DAY_STATUS_LABELS[status])
    event.add("uid", f"{start.isoformat()}_{status.value}@fastlonn")
    event.add("dtstart", start)
    event.add("dtend", end + datetime.timedelta(days=1))
    event.add("categories", [status.value])
    event.add("dtstamp", stamp)
    return event
