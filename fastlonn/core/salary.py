"""
Lønnsberegning for fastlønnede.

Fire metoder for hvordan fastlønnen reduseres i måneden(e) med
feriepenger, pluss foreldrepenger og sykepenger fra Nav begrenset til 6G.

Felles størrelser:
    nominell timelønn = årslønn / (timer per dag * 5 * 52)
    trekk for ulønnet permisjon = dager * timer per dag * nominell timelønn
    dagsats = årslønn / faktiske arbeidsdager
    Navs dagsats = min(årslønn, 6G) / faktiske arbeidsdager
"""

from fastlonn.core.config import NAV_SICK_VACATION_DAY_CAP, NOMINAL_WORK_DAYS_PER_YEAR
from fastlonn.core.day_states import DayStateStore
from fastlonn.core.formatting import format_decimal, format_nok, parse_income
from fastlonn.core.grunnbelop import six_g_for_year
from fastlonn.core.holidays import actual_work_days as work_days_in_year
from fastlonn.core.logging_config import get_logger
from fastlonn.core.models import (
    CalculationInputs,
    CalculationMethod,
    DayStatus,
    EarningsBreakdown,
    EarningsResult,
)
from fastlonn.core.state import CalculatorState

logger = get_logger(__name__)


def _safe_div(numerator: float, denominator: float) -> float:
    """Deling der null i nevneren gir 0 i stedet for inf/NaN."""
    if denominator == 0:
        return 0.0
    return numerator / denominator


class SalaryContext:
    """Mellomregninger som alle metodene bruker."""

    def __init__(
        self,
        inputs: CalculationInputs,
        day_counts: dict[DayStatus, int],
        actual_work_days: int,
    ):
        self.nominal_salary = inputs.yearly_income_nominal
        self.hours_per_day = inputs.hours_per_day
        self.vacation_percent = inputs.vacation_pay_percent
        self.actual_work_days = actual_work_days

        self.ferie_days = day_counts.get(DayStatus.FERIE, 0)
        self.paid_leave_days = day_counts.get(DayStatus.PERMISJON_MED_LONN, 0)
        self.unpaid_leave_days = day_counts.get(DayStatus.PERMISJON_UTEN_LONN, 0)
        self.parental_days = day_counts.get(DayStatus.FORELDREPERMISJON, 0)
        self.parental_80_days = day_counts.get(DayStatus.FORELDREPERMISJON_80, 0)
        self.sick_days = day_counts.get(DayStatus.SYKEMELDING, 0)

        self.nominal_hourly_rate = _safe_div(
            self.nominal_salary, self.hours_per_day * NOMINAL_WORK_DAYS_PER_YEAR
        )
        self.unpaid_leave_deduction = self.unpaid_leave_days * self.hours_per_day * self.nominal_hourly_rate
        self.daily_rate = _safe_div(self.nominal_salary, actual_work_days)

    @property
    def all_parental_days(self) -> int:
        return self.parental_days + self.parental_80_days

    @property
    def absent_days(self) -> int:
        return (
            self.ferie_days
            + self.paid_leave_days
            + self.unpaid_leave_days
            + self.parental_days
            + self.parental_80_days
            + self.sick_days
        )

    @property
    def actual_hours_worked(self) -> float:
        return (self.actual_work_days - self.absent_days) * self.hours_per_day


# ============ Beregningsmetoder ============


class CalculationStrategy:
    """Grunnlaget (før feriepenger) for en beregningsmetode."""

    method: CalculationMethod
    title: str

    def compute_base(self, ctx: SalaryContext) -> float:
        raise NotImplementedError

    def describe(self, ctx: SalaryContext) -> str:
        raise NotImplementedError


class StandardMethod(CalculationStrategy):
    """Vanlig praksis: ingen lønn i én måned, feriepenger utbetales i stedet."""

    method = CalculationMethod.STANDARD
    title = "Standard"

    def compute_base(self, ctx: SalaryContext) -> float:
        return ctx.nominal_salary * 11 / 12 - ctx.unpaid_leave_deduction

    def describe(self, ctx: SalaryContext) -> str:
        return "Du får lønn i 11 av 12 måneder. Feriepengene erstatter lønnen i ferimåneden."


class GenerousMethod(CalculationStrategy):
    """Full lønn hele året, feriepenger i tillegg."""

    method = CalculationMethod.GENEROUS
    title = "Raus"

    def compute_base(self, ctx: SalaryContext) -> float:
        return ctx.nominal_salary - ctx.unpaid_leave_deduction

    def describe(self, ctx: SalaryContext) -> str:
        return "Arbeidsgiver trekker ikke lønn for ferien. Feriepengene kommer på toppen av full årslønn."


class StingyMethod(CalculationStrategy):
    """Trekk for hver feriedag etter nominell timelønn."""

    method = CalculationMethod.STINGY
    title = "Gjerrig"

    def compute_base(self, ctx: SalaryContext) -> float:
        ferie_deduction = ctx.ferie_days * ctx.hours_per_day * ctx.nominal_hourly_rate
        return ctx.nominal_salary - ferie_deduction - ctx.unpaid_leave_deduction

    def describe(self, ctx: SalaryContext) -> str:
        return (
            f"Hver feriedag trekkes med nominell timelønn "
            f"({format_decimal(ctx.nominal_hourly_rate)} kr) ganger timer per dag."
        )


class AnalMethod(CalculationStrategy):
    """Trekk for ferie og ulønnet permisjon etter reell timelønn."""

    method = CalculationMethod.ANAL
    title = "Pedantisk"

    def real_hourly_rate(self, ctx: SalaryContext) -> float:
        return _safe_div(ctx.nominal_salary, ctx.actual_work_days * ctx.hours_per_day)

    def compute_base(self, ctx: SalaryContext) -> float:
        days = ctx.ferie_days + ctx.unpaid_leave_days
        return ctx.nominal_salary - days * ctx.hours_per_day * self.real_hourly_rate(ctx)

    def describe(self, ctx: SalaryContext) -> str:
        return (
            f"Ferie og ulønnet permisjon trekkes med reell timelønn basert på "
            f"{ctx.actual_work_days} faktiske arbeidsdager."
        )


METHODS: dict[CalculationMethod, CalculationStrategy] = {
    strategy.method: strategy
    for strategy in (StandardMethod(), GenerousMethod(), StingyMethod(), AnalMethod())
}


# ============ Beregning ============


def compute_actual_earnings(
    inputs: CalculationInputs,
    day_counts: dict[DayStatus, int],
    actual_work_days: int,
    year: int,
) -> EarningsResult:
    """
    Beregner faktisk årsinntekt og faktisk timelønn.

    Grunnlaget kommer fra beregningsmetoden alene. Navs dagsats for
    foreldrepermisjon og sykemelding, og arbeidsgivers eventuelle tillegg
    opp til full dagsats, legges til på toppen.

    Feriepenger beregnes av grunnlaget pluss arbeidsgivers tillegg. Nav
    betaler feriepenger av sykepenger for de første 48 sykedagene.

    Args:
        inputs: Tolkede inndata
        day_counts: Antall dager per status
        actual_work_days: Hverdager i året som ikke er helligdager
        year: Året, brukes til å finne 6G

    Returns:
        EarningsResult med beløp, timelønn, forklaring og delbeløp
    """
    ctx = SalaryContext(inputs, day_counts, actual_work_days)
    strategy = METHODS[inputs.calculation_method]
    pct = inputs.vacation_pay_percent / 100

    six_g = six_g_for_year(year)
    nav_daily_rate = _safe_div(min(ctx.nominal_salary, six_g), actual_work_days)
    top_up = max(0.0, ctx.daily_rate - nav_daily_rate)

    base = strategy.compute_base(ctx)

    # Foreldrepermisjon: 80 %-varianten gir samme dagsats fra Nav i denne modellen.
    nav_parental_pay = ctx.all_parental_days * nav_daily_rate
    employer_parental_pay = ctx.all_parental_days * top_up if inputs.employer_covers_above_6g else 0.0

    nav_sick_pay = ctx.sick_days * nav_daily_rate
    employer_sick_pay = ctx.sick_days * top_up if inputs.employer_covers_syke_above_6g else 0.0

    capped_sick_days = min(ctx.sick_days, NAV_SICK_VACATION_DAY_CAP)
    remaining_sick_days = ctx.sick_days - capped_sick_days
    nav_sick_vacation_pay = capped_sick_days * nav_daily_rate * pct
    if inputs.employer_pays_vacation_on_nav_sick:
        employer_sick_vacation_pay = remaining_sick_days * nav_daily_rate * pct
    else:
        employer_sick_vacation_pay = 0.0

    vacation_pay = (base + employer_parental_pay + employer_sick_pay) * pct

    actual_earnings = (
        base
        + vacation_pay
        + employer_parental_pay
        + employer_sick_pay
        + nav_parental_pay
        + nav_sick_pay
        + nav_sick_vacation_pay
        + employer_sick_vacation_pay
    )

    hours_worked = ctx.actual_hours_worked
    actual_hourly_rate = actual_earnings / hours_worked if hours_worked > 0 else 0.0

    breakdown = EarningsBreakdown(
        nominal_hourly_rate=ctx.nominal_hourly_rate,
        daily_rate=ctx.daily_rate,
        nav_daily_rate=nav_daily_rate,
        six_g=six_g,
        base=base,
        unpaid_leave_deduction=ctx.unpaid_leave_deduction,
        vacation_pay=vacation_pay,
        nav_parental_pay=nav_parental_pay,
        employer_parental_pay=employer_parental_pay,
        nav_sick_pay=nav_sick_pay,
        employer_sick_pay=employer_sick_pay,
        nav_sick_vacation_pay=nav_sick_vacation_pay,
        employer_sick_vacation_pay=employer_sick_vacation_pay,
        actual_hours_worked=hours_worked,
    )

    return EarningsResult(
        actual_earnings=actual_earnings,
        actual_hourly_rate=actual_hourly_rate,
        explanation=_explain(strategy, ctx, breakdown),
        breakdown=breakdown,
    )


def _explain(strategy: CalculationStrategy, ctx: SalaryContext, breakdown: EarningsBreakdown) -> str:
    lines = [
        f"{strategy.title}: {strategy.describe(ctx)}",
        f"Grunnlag: {format_nok(breakdown.base)}, feriepenger ({format_decimal(ctx.vacation_percent, 1)} %): "
        f"{format_nok(breakdown.vacation_pay)}.",
    ]
    if ctx.unpaid_leave_days:
        lines.append(
            f"Trekk for {ctx.unpaid_leave_days} dager ulønnet permisjon: "
            f"{format_nok(breakdown.unpaid_leave_deduction)}."
        )
    if ctx.all_parental_days:
        lines.append(
            f"Foreldrepermisjon {ctx.all_parental_days} dager: Nav {format_nok(breakdown.nav_parental_pay)}, "
            f"arbeidsgiver {format_nok(breakdown.employer_parental_pay)}."
        )
    if ctx.sick_days:
        lines.append(
            f"Sykemelding {ctx.sick_days} dager: Nav {format_nok(breakdown.nav_sick_pay)}, "
            f"arbeidsgiver {format_nok(breakdown.employer_sick_pay)}. Feriepenger fra Nav for "
            f"{min(ctx.sick_days, NAV_SICK_VACATION_DAY_CAP)} dager: "
            f"{format_nok(breakdown.nav_sick_vacation_pay)}."
        )
    return " ".join(lines)


def inputs_from_state(state: CalculatorState) -> CalculationInputs | None:
    """
    Leser inndata fra skjemaet.

    Returnerer None når årslønn, timer per dag eller feriepengeprosent
    mangler eller ikke er et tall; resultatet holdes da tilbake.
    """
    form = state.form()
    income = parse_income(form.yearly_income)
    if income is None or form.hours_per_day is None or form.vacation_pay is None:
        return None
    return CalculationInputs(
        yearly_income_nominal=income,
        hours_per_day=form.hours_per_day,
        vacation_pay_percent=form.vacation_pay,
        calculation_method=form.calculation_method,
        employer_covers_above_6g=form.employer_covers_above_6g,
        employer_covers_syke_above_6g=form.employer_covers_syke_above_6g,
        employer_pays_vacation_on_nav_sick=form.employer_pays_vacation_on_nav_sick,
    )


def compute_for_state(
    state: CalculatorState,
    day_store: DayStateStore,
    year: int | None = None,
) -> EarningsResult | None:
    """Beregning for lagret skjema og dagstatus for et år (standard: aktivt år)."""
    inputs = inputs_from_state(state)
    if inputs is None:
        return None
    year = day_store.year if year is None else year
    return compute_actual_earnings(
        inputs,
        day_store.counts_by_type(year),
        work_days_in_year(year),
        year,
    )
