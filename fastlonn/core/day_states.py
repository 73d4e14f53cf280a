"""
Dagstatus per år.

Kartet inneholder bare dager med en status; en dag uten nøkkel er umerket.
Aktivt år holdes i minnet, og bytte av år bytter ut hele kartet.
"""

import datetime
from collections import Counter

from fastlonn.core.constants import MONTH_KEYS, day_states_key
from fastlonn.core.holidays import holidays_for_year, is_paintable
from fastlonn.core.logging_config import get_logger
from fastlonn.core.models import DayStatus
from fastlonn.core.state import CalculatorState

logger = get_logger(__name__)

DayStateMap = dict[datetime.date, DayStatus]


def day_key(date: datetime.date) -> str:
    """Lagret nøkkel for en dato, for eksempel "2025-jan-3"."""
    return f"{date.year}-{MONTH_KEYS[date.month - 1]}-{date.day}"


def parse_day_key(key: str) -> datetime.date:
    """
    Motsatt av day_key.

    Raises:
        ValueError: Hvis nøkkelen ikke er på formen år-måned-dag
    """
    parts = key.split("-")
    if len(parts) != 3:
        raise ValueError(f"Invalid day key: {key!r}")
    year, month_key, day = parts
    try:
        month = MONTH_KEYS.index(month_key.lower()) + 1
    except ValueError:
        raise ValueError(f"Invalid month in day key: {key!r}") from None
    return datetime.date(int(year), month, int(day))


def serialize_day_states(days: DayStateMap) -> dict[str, str]:
    return {day_key(d): status.value for d, status in sorted(days.items())}


def deserialize_day_states(raw: dict | None, year: int) -> DayStateMap:
    """Leser et lagret kart. Ugyldige eller utdaterte oppføringer hoppes over."""
    days: DayStateMap = {}
    if not raw:
        return days
    if not isinstance(raw, dict):
        logger.warning("Ignoring day states for %s: expected dict, got %s", year, type(raw).__name__)
        return days

    holiday_set = holidays_for_year(year)
    for key, value in raw.items():
        try:
            d = parse_day_key(key)
            status = DayStatus(value)
        except ValueError:
            logger.warning("Skipping invalid day state %r=%r for %s", key, value, year)
            continue
        if d.year != year or not is_paintable(d, holiday_set):
            logger.warning("Skipping day state %s outside working days of %s", key, year)
            continue
        days[d] = status
    return days


class DayStateStore:
    """Kilden til sannhet for hva som er merket i kalenderen."""

    def __init__(self, state: CalculatorState, year: int | None = None):
        self._state = state
        self._year = year if year is not None else state.selected_year
        self._days = self._load(self._year)

    @property
    def year(self) -> int:
        return self._year

    def _load(self, year: int) -> DayStateMap:
        return deserialize_day_states(self._state.get(day_states_key(year)), year)

    def _map_for(self, year: int) -> DayStateMap:
        return self._days if year == self._year else self._load(year)

    def _save(self, year: int, days: DayStateMap) -> None:
        self._state.set(day_states_key(year), serialize_day_states(days))

    def switch_year(self, year: int) -> None:
        """Gjør et annet år aktivt. Kartet for det nye året lastes fra lageret."""
        if year == self._year:
            return
        self._year = year
        self._days = self._load(year)

    def days(self, year: int | None = None) -> DayStateMap:
        return dict(self._map_for(self._year if year is None else year))

    def get_date(self, date: datetime.date) -> DayStatus | None:
        return self._map_for(date.year).get(date)

    def get(self, year: int, month: int, day: int) -> DayStatus | None:
        return self.get_date(datetime.date(year, month, day))

    def set_date(self, date: datetime.date, status: DayStatus | None) -> bool:
        """
        Setter eller fjerner status for en dato.

        Returnerer False når ingenting endres: samme status som før, eller
        forsøk på å merke helg eller helligdag.
        """
        days = self._map_for(date.year)
        current = days.get(date)
        if current == status:
            return False
        if status is not None and not is_paintable(date):
            logger.debug("Refusing to mark non-working day %s as %s", date, status.value)
            return False

        if status is None:
            del days[date]
        else:
            days[date] = status
        self._save(date.year, days)
        return True

    def set(self, year: int, month: int, day: int, status: DayStatus | None) -> bool:
        return self.set_date(datetime.date(year, month, day), status)

    def counts_by_type(self, year: int | None = None) -> dict[DayStatus, int]:
        """Antall dager per status. Statuser uten dager er ikke med."""
        return dict(Counter(self._map_for(self._year if year is None else year).values()))

    def clear(self, year: int | None = None) -> None:
        year = self._year if year is None else year
        days = self._map_for(year)
        if not days:
            return
        days.clear()
        self._save(year, days)
