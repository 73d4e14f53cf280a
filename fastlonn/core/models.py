# fastlonn/core/models.py
import enum

from pydantic import BaseModel

from fastlonn.core.config import (
    DEFAULT_CALCULATION_METHOD,
    DEFAULT_HOURS_PER_DAY,
    DEFAULT_VACATION_PAY_PERCENT,
)


class DayStatus(str, enum.Enum):
    """Fraværskategori for en dag. Umerket dag representeres med None."""

    FERIE = "ferie"  # Ferie
    PERMISJON_MED_LONN = "permisjon_med_lonn"  # Permisjon med lønn
    PERMISJON_UTEN_LONN = "permisjon_uten_lonn"  # Permisjon uten lønn
    FORELDREPERMISJON = "foreldrepermisjon"  # Foreldrepermisjon, 100 %
    FORELDREPERMISJON_80 = "foreldrepermisjon_80"  # Foreldrepermisjon, 80 % sats
    SYKEMELDING = "sykemelding"  # Sykemelding


#: Visningsnavn per status.
DAY_STATUS_LABELS: dict[DayStatus, str] = {
    DayStatus.FERIE: "Ferie",
    DayStatus.PERMISJON_MED_LONN: "Permisjon med lønn",
    DayStatus.PERMISJON_UTEN_LONN: "Permisjon uten lønn",
    DayStatus.FORELDREPERMISJON: "Foreldrepermisjon (100 %)",
    DayStatus.FORELDREPERMISJON_80: "Foreldrepermisjon (80 %)",
    DayStatus.SYKEMELDING: "Sykemelding",
}


class CalculationMethod(str, enum.Enum):
    """Hvordan fastlønnen reduseres i ferieåret."""

    STANDARD = "standard"
    GENEROUS = "generous"
    STINGY = "stingy"
    ANAL = "anal"


class CalculationInputs(BaseModel):
    """Inndata til lønnsberegningen, allerede tolket fra skjemaet."""

    yearly_income_nominal: float
    hours_per_day: float = DEFAULT_HOURS_PER_DAY
    vacation_pay_percent: float = DEFAULT_VACATION_PAY_PERCENT
    calculation_method: CalculationMethod = CalculationMethod(DEFAULT_CALCULATION_METHOD)
    employer_covers_above_6g: bool = False
    employer_covers_syke_above_6g: bool = False
    employer_pays_vacation_on_nav_sick: bool = False


class EarningsBreakdown(BaseModel):
    """Delbeløpene som faktisk lønn er satt sammen av."""

    nominal_hourly_rate: float
    daily_rate: float
    nav_daily_rate: float
    six_g: int
    base: float
    unpaid_leave_deduction: float
    vacation_pay: float
    nav_parental_pay: float
    employer_parental_pay: float
    nav_sick_pay: float
    employer_sick_pay: float
    nav_sick_vacation_pay: float
    employer_sick_vacation_pay: float
    actual_hours_worked: float


class EarningsResult(BaseModel):
    """Resultatet av en lønnsberegning."""

    actual_earnings: float
    actual_hourly_rate: float
    explanation: str
    breakdown: EarningsBreakdown
