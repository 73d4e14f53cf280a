"""Unit tests for the grunnbeløp table and projections."""

import math

from fastlonn.core.grunnbelop import (
    AVERAGE_GROWTH_RATE,
    KNOWN_GRUNNBELOP,
    grunnbelop_for_year,
    is_estimated,
    six_g_for_year,
)


def test_known_values():
    assert grunnbelop_for_year(2020) == 101351
    assert grunnbelop_for_year(2025) == 130160
    assert not is_estimated(2023)


def test_six_g():
    assert six_g_for_year(2025) == 6 * 130160
    assert six_g_for_year(2024) == 744168


def test_average_growth_rate_is_mean_of_yearly_rates():
    years = sorted(KNOWN_GRUNNBELOP)
    rates = [KNOWN_GRUNNBELOP[b] / KNOWN_GRUNNBELOP[a] - 1 for a, b in zip(years, years[1:])]
    assert math.isclose(AVERAGE_GROWTH_RATE, sum(rates) / len(rates))
    assert 0.04 < AVERAGE_GROWTH_RATE < 0.06


def test_forward_projection_compounds_from_last_known():
    expected = math.floor(130160 * (1 + AVERAGE_GROWTH_RATE) ** 2 + 0.5)
    assert grunnbelop_for_year(2027) == expected
    assert is_estimated(2027)
    assert grunnbelop_for_year(2026) > grunnbelop_for_year(2025)


def test_backward_projection_discounts_from_first_known():
    expected = math.floor(101351 / (1 + AVERAGE_GROWTH_RATE) ** 3 + 0.5)
    assert grunnbelop_for_year(2017) == expected
    assert grunnbelop_for_year(2019) < 101351


def test_projection_returns_whole_kroner():
    assert isinstance(grunnbelop_for_year(2030), int)
