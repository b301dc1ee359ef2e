"""
Test cases for the static seasonality tables: month, weekend and holiday multipliers and the seasonal component annotation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import dataclasses
from datetime import date

import pytest

from engine.seasonal.profile import (
    HOLIDAY_WINDOWS,
    MONTHLY_FACTORS,
    WEEKEND_FACTOR,
    holiday_factor,
    monthly_factor,
    seasonal_component,
    weekend_factor,
)

SATURDAY = date(2024, 6, 1)
MONDAY = date(2024, 6, 3)


def test_monthly_table():
    assert MONTHLY_FACTORS == (0.8, 0.7, 0.9, 1.1, 1.2, 1.3, 1.1, 1.0, 0.9, 1.1, 1.4, 1.6)
    assert monthly_factor(0) == 0.8
    assert monthly_factor(11) == 1.6
    with pytest.raises(ValueError):
        monthly_factor(12)
    with pytest.raises(ValueError):
        monthly_factor(-1)


def test_weekend_factor():
    assert weekend_factor(SATURDAY) == WEEKEND_FACTOR == 0.7
    assert weekend_factor(date(2024, 6, 2)) == 0.7
    assert weekend_factor(MONDAY) == 1.0


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2024, 11, 19), 1.0),
        (date(2024, 11, 20), 1.5),
        (date(2024, 11, 30), 1.5),
        (date(2024, 12, 1), 1.8),
        (date(2024, 12, 31), 1.8),
        (date(2025, 1, 5), 1.3),
        (date(2025, 1, 6), 1.0),
        (date(2025, 2, 14), 1.2),
        (date(2025, 2, 19), 1.0),
        (date(2025, 5, 12), 1.1),
        (date(2025, 7, 4), 1.0),
    ],
)
def test_holiday_windows(day, expected):
    assert holiday_factor(day) == expected


def test_seasonal_component_ignores_holidays():
    assert seasonal_component(MONDAY, 100) == pytest.approx(130.0)
    assert seasonal_component(SATURDAY, 100) == pytest.approx(91.0)
    # 2024-12-02 is a Monday inside the December window
    assert seasonal_component(date(2024, 12, 2), 100) == pytest.approx(160.0)


def test_tables_are_immutable():
    assert isinstance(MONTHLY_FACTORS, tuple)
    assert isinstance(HOLIDAY_WINDOWS, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        HOLIDAY_WINDOWS[0].multiplier = 9.9
