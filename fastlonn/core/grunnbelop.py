"""
Grunnbeløpet (G) i folketrygden.

Kjente verdier gjelder fra 1. mai hvert år. År utenfor tabellen anslås med
gjennomsnittlig årlig vekst; anslagene er tilnærminger og ikke offisielle tall.
"""

import math
from typing import Final

from fastlonn.core.config import G_MULTIPLIER_CAP

#: Grunnbeløp i kroner per år.
KNOWN_GRUNNBELOP: Final[dict[int, int]] = {
    2020: 101351,
    2021: 106399,
    2022: 111477,
    2023: 118620,
    2024: 124028,
    2025: 130160,
}


def _average_growth_rate() -> float:
    years = sorted(KNOWN_GRUNNBELOP)
    rates = [
        KNOWN_GRUNNBELOP[cur] / KNOWN_GRUNNBELOP[prev] - 1
        for prev, cur in zip(years, years[1:])
    ]
    return sum(rates) / len(rates)


AVERAGE_GROWTH_RATE: Final[float] = _average_growth_rate()


def _round_kroner(amount: float) -> int:
    return math.floor(amount + 0.5)


def is_estimated(year: int) -> bool:
    """True når grunnbeløpet for året er et anslag."""
    return year not in KNOWN_GRUNNBELOP


def grunnbelop_for_year(year: int) -> int:
    """
    Grunnbeløpet for et år, i hele kroner.

    Fremover: siste kjente * (1 + r) ** år etter.
    Bakover: første kjente / (1 + r) ** år før.
    """
    if year in KNOWN_GRUNNBELOP:
        return KNOWN_GRUNNBELOP[year]

    first_year = min(KNOWN_GRUNNBELOP)
    last_year = max(KNOWN_GRUNNBELOP)
    growth = 1 + AVERAGE_GROWTH_RATE

    if year > last_year:
        return _round_kroner(KNOWN_GRUNNBELOP[last_year] * growth ** (year - last_year))
    return _round_kroner(KNOWN_GRUNNBELOP[first_year] / growth ** (first_year - year))


def six_g_for_year(year: int) -> int:
    """6G, taket for hva Nav dekker av foreldrepenger og sykepenger."""
    return G_MULTIPLIER_CAP * grunnbelop_for_year(year)
