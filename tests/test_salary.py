"""
Tests for the salary calculation.

2025 has 252 actual work days and 6G = 780 960 kr.
"""

import pytest

from fastlonn.core.models import CalculationInputs, CalculationMethod, DayStatus
from fastlonn.core.salary import (
    METHODS,
    compute_actual_earnings,
    compute_for_state,
    inputs_from_state,
)
from fastlonn.core.state import FormUpdate

YEAR = 2025
WORK_DAYS = 252
SIX_G = 780960


def inputs(income=600_000, **kwargs) -> CalculationInputs:
    return CalculationInputs(yearly_income_nominal=income, **kwargs)


def compute(day_counts=None, **kwargs):
    return compute_actual_earnings(inputs(**kwargs), day_counts or {}, WORK_DAYS, YEAR)


class TestMethods:
    def test_every_method_has_a_strategy(self):
        assert set(METHODS) == set(CalculationMethod)

    def test_standard_without_absence(self):
        result = compute()

        assert result.breakdown.base == pytest.approx(550_000)
        assert result.breakdown.vacation_pay == pytest.approx(66_000)
        assert result.actual_earnings == pytest.approx(616_000)
        assert result.breakdown.actual_hours_worked == pytest.approx(1890)
        assert result.actual_hourly_rate == pytest.approx(616_000 / 1890)

    def test_standard_ferie_changes_hours_not_earnings(self):
        result = compute({DayStatus.FERIE: 25})

        assert result.actual_earnings == pytest.approx(616_000)
        assert result.breakdown.actual_hours_worked == pytest.approx((252 - 25) * 7.5)

    def test_generous(self):
        result = compute(calculation_method=CalculationMethod.GENEROUS)
        assert result.actual_earnings == pytest.approx(672_000)

    def test_stingy_deducts_nominal_hourly_rate(self):
        result = compute({DayStatus.FERIE: 25}, calculation_method=CalculationMethod.STINGY)

        nominal_hourly = 600_000 / (7.5 * 260)
        base = 600_000 - 25 * 7.5 * nominal_hourly
        assert result.breakdown.nominal_hourly_rate == pytest.approx(nominal_hourly)
        assert result.breakdown.base == pytest.approx(base)
        assert result.actual_earnings == pytest.approx(base * 1.12)

    def test_anal_deducts_real_hourly_rate(self):
        result = compute({DayStatus.FERIE: 25}, calculation_method=CalculationMethod.ANAL)

        base = 600_000 - 600_000 * 25 / 252
        assert result.breakdown.base == pytest.approx(base)
        assert result.actual_earnings == pytest.approx(base * 1.12)

    def test_unpaid_leave_is_deducted(self):
        result = compute({DayStatus.PERMISJON_UTEN_LONN: 10})

        deduction = 10 * 7.5 * 600_000 / 1950
        assert result.breakdown.unpaid_leave_deduction == pytest.approx(deduction)
        assert result.breakdown.base == pytest.approx(550_000 - deduction)
        assert "ulønnet permisjon" in result.explanation

    def test_paid_leave_only_reduces_hours(self):
        result = compute({DayStatus.PERMISJON_MED_LONN: 5})

        assert result.actual_earnings == pytest.approx(616_000)
        assert result.breakdown.actual_hours_worked == pytest.approx(247 * 7.5)

    def test_vacation_percent(self):
        result = compute(vacation_pay_percent=10.2)
        assert result.actual_earnings == pytest.approx(550_000 * 1.102)


class TestSickLeave:
    def test_sick_days_do_not_reduce_base(self):
        result = compute({DayStatus.SYKEMELDING: 10})
        daily = 600_000 / WORK_DAYS

        assert result.breakdown.base == pytest.approx(550_000)
        assert result.breakdown.nav_daily_rate == pytest.approx(daily)
        assert result.breakdown.nav_sick_pay == pytest.approx(10 * daily)
        assert result.breakdown.employer_sick_pay == 0
        assert result.actual_earnings == pytest.approx(550_000 * 1.12 + 10 * daily * 1.12)

    def test_nav_vacation_pay_capped_at_48_days(self):
        result = compute({DayStatus.SYKEMELDING: 60})
        daily = 600_000 / WORK_DAYS

        assert result.breakdown.nav_sick_vacation_pay == pytest.approx(48 * daily * 0.12)
        assert result.breakdown.employer_sick_vacation_pay == 0
        assert result.actual_earnings == pytest.approx(616_000 + 60 * daily + 48 * daily * 0.12)

    def test_employer_pays_vacation_after_48_days(self):
        result = compute({DayStatus.SYKEMELDING: 60}, employer_pays_vacation_on_nav_sick=True)
        daily = 600_000 / WORK_DAYS

        assert result.breakdown.employer_sick_vacation_pay == pytest.approx(12 * daily * 0.12)
        assert result.actual_earnings == pytest.approx(616_000 + 60 * daily * 1.12)

    def test_above_6g_employer_top_up(self):
        days = {DayStatus.SYKEMELDING: 20}
        without = compute(days, income=1_000_000)
        with_top_up = compute(days, income=1_000_000, employer_covers_syke_above_6g=True)

        top_up = (1_000_000 - SIX_G) / WORK_DAYS
        assert with_top_up.breakdown.employer_sick_pay == pytest.approx(20 * top_up)
        assert with_top_up.actual_earnings - without.actual_earnings == pytest.approx(20 * top_up * 1.12)


class TestParentalLeave:
    def test_nav_pays_up_to_6g(self):
        result = compute({DayStatus.FORELDREPERMISJON: 20}, income=1_000_000)

        nav_daily = SIX_G / WORK_DAYS
        assert result.breakdown.six_g == SIX_G
        assert result.breakdown.nav_parental_pay == pytest.approx(20 * nav_daily)
        assert result.breakdown.employer_parental_pay == 0

        base = 1_000_000 * 11 / 12
        assert result.breakdown.base == pytest.approx(base)
        assert result.actual_earnings == pytest.approx(base * 1.12 + 20 * nav_daily)

    def test_employer_covers_above_6g(self):
        days = {DayStatus.FORELDREPERMISJON: 20}
        without = compute(days, income=1_000_000)
        with_top_up = compute(days, income=1_000_000, employer_covers_above_6g=True)

        top_up = (1_000_000 - SIX_G) / WORK_DAYS
        assert with_top_up.breakdown.employer_parental_pay == pytest.approx(20 * top_up)
        assert with_top_up.actual_earnings - without.actual_earnings == pytest.approx(20 * top_up * 1.12)

    def test_80_percent_variant_pays_like_100_percent(self):
        full = compute({DayStatus.FORELDREPERMISJON: 30}, income=900_000)
        reduced = compute({DayStatus.FORELDREPERMISJON_80: 30}, income=900_000)

        assert reduced.actual_earnings == pytest.approx(full.actual_earnings)

    def test_toggle_has_no_effect_below_6g(self):
        days = {DayStatus.FORELDREPERMISJON: 20}
        assert compute(days, employer_covers_above_6g=True).actual_earnings == pytest.approx(
            compute(days).actual_earnings
        )


class TestEdgeCases:
    def test_zero_hours_gives_zero_rate(self):
        result = compute(hours_per_day=0)

        assert result.actual_hourly_rate == 0
        assert result.breakdown.nominal_hourly_rate == 0

    def test_more_absence_than_work_days_gives_zero_rate(self):
        result = compute({DayStatus.FERIE: 300})
        assert result.actual_hourly_rate == 0

    def test_zero_income(self):
        result = compute(income=0)
        assert result.actual_earnings == 0
        assert result.actual_hourly_rate == 0

    def test_explanation_names_method(self):
        assert compute().explanation.startswith("Standard:")
        assert compute(calculation_method=CalculationMethod.ANAL).explanation.startswith("Pedantisk:")


class TestFromState:
    def test_missing_income_gives_no_result(self, state):
        assert inputs_from_state(state) is None

    def test_unparseable_hours_gives_no_result(self, state):
        state.update_form(FormUpdate(yearly_income="600000", hours_per_day="x"))
        assert inputs_from_state(state) is None

    def test_inputs_from_state(self, state):
        state.update_form(FormUpdate(yearly_income="600 000", vacation_pay="10,2", hours_per_day="8"))
        parsed = inputs_from_state(state)

        assert parsed.yearly_income_nominal == 600_000
        assert parsed.vacation_pay_percent == pytest.approx(10.2)
        assert parsed.hours_per_day == 8

    def test_compute_for_state_uses_marked_days(self, session):
        session.state.update_form(FormUpdate(yearly_income="600000"))
        session.days.set(2025, 1, 6, DayStatus.PERMISJON_UTEN_LONN)

        result = compute_for_state(session.state, session.days)
        assert result.breakdown.unpaid_leave_deduction == pytest.approx(7.5 * 600_000 / 1950)
        assert result.breakdown.actual_hours_worked == pytest.approx(251 * 7.5)
