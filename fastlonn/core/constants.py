# fastlonn/core/constants.py
from typing import Final

# ==========================
# Nøkler i lageret
# ==========================

#: Valgt år (global).
KEY_SELECTED_YEAR: Final[str] = "selectedYear"

#: Årslønn som tekst med mellomrom mellom siffergruppene.
KEY_YEARLY_INCOME: Final[str] = "yearlyIncome"

#: Feriepengeprosent som tall og som tekst slik brukeren skrev den.
KEY_VACATION_PAY: Final[str] = "vacationPay"
KEY_VACATION_PAY_DISPLAY: Final[str] = "vacationPayDisplay"

#: Timer per dag som tall og som tekst.
KEY_HOURS_PER_DAY: Final[str] = "hoursPerDay"
KEY_HOURS_PER_DAY_DISPLAY: Final[str] = "hoursPerDayDisplay"

#: Valgt beregningsmetode.
KEY_CALCULATION_METHOD: Final[str] = "calculationMethod"

#: Arbeidsgiver dekker foreldrepenger over 6G.
KEY_EMPLOYER_COVERS_ABOVE_6G: Final[str] = "employerCoversAbove6G"

#: Arbeidsgiver dekker sykepenger over 6G.
KEY_EMPLOYER_COVERS_SYKE_ABOVE_6G: Final[str] = "employerCoversSykeAbove6G"

#: Arbeidsgiver betaler feriepenger av Navs sykepenger etter dag 48.
KEY_EMPLOYER_PAYS_VACATION_ON_NAV_SICK: Final[str] = "employerPaysVacationOnNavSick"

#: Prefiks for dagstatus per år, for eksempel "dayStates_2025".
KEY_DAY_STATES_PREFIX: Final[str] = "dayStates_"


def day_states_key(year: int) -> str:
    """Lagernøkkel for dagstatusene i et gitt år."""
    return f"{KEY_DAY_STATES_PREFIX}{year}"


# ==========================
# Kalendernavn
# ==========================

#: Korte engelske månedsnavn brukt i lagrede dagnøkler ("2025-jan-3").
MONTH_KEYS: Final[tuple[str, ...]] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

#: Norske månedsnavn for visning.
MONTH_NAMES_NO: Final[tuple[str, ...]] = (
    "januar", "februar", "mars", "april", "mai", "juni",
    "juli", "august", "september", "oktober", "november", "desember",
)

#: Norske ukedagsforkortelser, mandag først.
WEEKDAY_NAMES_NO: Final[tuple[str, ...]] = ("man", "tir", "ons", "tor", "fre", "lør", "søn")
