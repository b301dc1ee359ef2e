"""
Static retail seasonality profile: a month-of-year multiplier table, a weekend multiplier and an ordered list of holiday windows. The per-point seasonal annotation uses month and weekend only; the holiday windows feed the synthetic history generator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

# indexed by month, January = 0
MONTHLY_FACTORS: Tuple[float, ...] = (
    0.8,  # Jan
    0.7,  # Feb
    0.9,  # Mar
    1.1,  # Apr
    1.2,  # May
    1.3,  # Jun
    1.1,  # Jul
    1.0,  # Aug
    0.9,  # Sep
    1.1,  # Oct
    1.4,  # Nov
    1.6,  # Dec
)

WEEKEND_FACTOR: float = 0.7
# date.weekday(): Saturday = 5, Sunday = 6
_WEEKEND_DAYS = frozenset({5, 6})


@dataclass(frozen=True)
class HolidayWindow:
    name: str
    month_index: int
    first_day: int
    last_day: int
    multiplier: float

    def contains(self, d: date) -> bool:
        return d.month - 1 == self.month_index and self.first_day <= d.day <= self.last_day


# first match wins
HOLIDAY_WINDOWS: Tuple[HolidayWindow, ...] = (
    HolidayWindow("black_friday", month_index=10, first_day=20, last_day=31, multiplier=1.5),
    HolidayWindow("december", month_index=11, first_day=1, last_day=31, multiplier=1.8),
    HolidayWindow("new_year", month_index=0, first_day=1, last_day=5, multiplier=1.3),
    HolidayWindow("valentines", month_index=1, first_day=10, last_day=18, multiplier=1.2),
    HolidayWindow("mothers_day", month_index=4, first_day=10, last_day=20, multiplier=1.1),
)


def monthly_factor(month_index: int) -> float:
    if not 0 <= month_index < len(MONTHLY_FACTORS):
        raise ValueError(f"month index out of range: {month_index}")
    return MONTHLY_FACTORS[month_index]


def weekend_factor(d: date) -> float:
    return WEEKEND_FACTOR if d.weekday() in _WEEKEND_DAYS else 1.0


def holiday_factor(d: date) -> float:
    for window in HOLIDAY_WINDOWS:
        if window.contains(d):
            return window.multiplier
    return 1.0


def seasonal_component(d: date, value: float) -> float:
    return value * monthly_factor(d.month - 1) * weekend_factor(d)
