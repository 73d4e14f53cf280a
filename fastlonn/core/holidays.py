"""Norske helligdager og arbeidsdager."""

import datetime
from functools import lru_cache


def easter_sunday(year: int) -> datetime.date:
    """Anonymous Gregorian algorithm."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def nyttarsdag(year: int) -> datetime.date:
    """Første nyttårsdag, 1. januar."""
    return datetime.date(year, 1, 1)


def skjaertorsdag(year: int) -> datetime.date:
    """Skjærtorsdag: torsdagen før første påskedag."""
    return easter_sunday(year) - datetime.timedelta(days=3)


def langfredag(year: int) -> datetime.date:
    """Langfredag: fredagen før første påskedag."""
    return easter_sunday(year) - datetime.timedelta(days=2)


def andre_paskedag(year: int) -> datetime.date:
    """Andre påskedag: mandagen etter første påskedag."""
    return easter_sunday(year) + datetime.timedelta(days=1)


def arbeidernes_dag(year: int) -> datetime.date:
    """Offentlig høytidsdag, 1. mai."""
    return datetime.date(year, 5, 1)


def grunnlovsdag(year: int) -> datetime.date:
    """Grunnlovsdagen, 17. mai."""
    return datetime.date(year, 5, 17)


def kristi_himmelfartsdag(year: int) -> datetime.date:
    """Kristi himmelfartsdag: 39 dager etter første påskedag (torsdag)."""
    return easter_sunday(year) + datetime.timedelta(days=39)


def andre_pinsedag(year: int) -> datetime.date:
    """Andre pinsedag: 50 dager etter første påskedag (mandag)."""
    return easter_sunday(year) + datetime.timedelta(days=50)


def forste_juledag(year: int) -> datetime.date:
    """Første juledag, 25. desember."""
    return datetime.date(year, 12, 25)


def andre_juledag(year: int) -> datetime.date:
    """Andre juledag, 26. desember."""
    return datetime.date(year, 12, 26)


# Søndagene (første påskedag, første pinsedag) fanges av søndagsregelen i is_holiday.
_HOLIDAY_FUNCTIONS = (
    (nyttarsdag, "Første nyttårsdag"),
    (skjaertorsdag, "Skjærtorsdag"),
    (langfredag, "Langfredag"),
    (andre_paskedag, "Andre påskedag"),
    (arbeidernes_dag, "Arbeidernes dag"),
    (grunnlovsdag, "Grunnlovsdag"),
    (kristi_himmelfartsdag, "Kristi himmelfartsdag"),
    (andre_pinsedag, "Andre pinsedag"),
    (forste_juledag, "Første juledag"),
    (andre_juledag, "Andre juledag"),
)


@lru_cache(maxsize=64)
def holiday_names_for_year(year: int) -> dict[datetime.date, str]:
    """
    Helligdager med navn for et år.

    Når to helligdager faller på samme dato (for eksempel 17. mai og
    Kristi himmelfartsdag) slås navnene sammen.
    """
    names: dict[datetime.date, str] = {}
    for func, name in _HOLIDAY_FUNCTIONS:
        d = func(year)
        names[d] = f"{names[d]} / {name}" if d in names else name
    return dict(sorted(names.items()))


def holidays_for_year(year: int) -> frozenset[datetime.date]:
    """Mengden av faste og påskebaserte helligdager i et år."""
    return frozenset(holiday_names_for_year(year))


def is_holiday(date: datetime.date, holiday_set: frozenset[datetime.date] | None = None) -> bool:
    """
    Sjekker om en dato er helligdag.

    Alle søndager regnes som helligdag uavhengig av mengden.
    Uten holiday_set brukes årets helligdager.
    """
    if date.weekday() == 6:
        return True
    if holiday_set is None:
        holiday_set = holidays_for_year(date.year)
    return date in holiday_set


def is_weekend(date: datetime.date) -> bool:
    return date.weekday() >= 5


def is_paintable(date: datetime.date, holiday_set: frozenset[datetime.date] | None = None) -> bool:
    """Hverdag (mandag til fredag) som ikke er helligdag."""
    return not is_weekend(date) and not is_holiday(date, holiday_set)


@lru_cache(maxsize=64)
def actual_work_days(year: int) -> int:
    """Antall hverdager i året som ikke er helligdager."""
    holiday_set = holidays_for_year(year)
    d = datetime.date(year, 1, 1)
    count = 0
    while d.year == year:
        if is_paintable(d, holiday_set):
            count += 1
        d += datetime.timedelta(days=1)
    return count
