"""
Monthly seasonal pattern analysis over an observed history, and a deterministic-when-seeded synthetic daily history built from the seasonal profile for demos and tests.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Any, List, Optional, Sequence

import numpy as np

from api.responses import SeasonalAnalysis
from config import settings
from engine.errors import InvalidInputError
from engine.seasonal.profile import holiday_factor, monthly_factor, weekend_factor
from engine.series import Observation

MONTHS = 12


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _validate_days(days: Any) -> int:
    if isinstance(days, bool) or not isinstance(days, int) or days < 0:
        raise InvalidInputError(f"days must be a non-negative integer, got {days!r}")
    return days


def generate_history(
    days: int,
    *,
    seed: Optional[int] = None,
    end: Optional[date] = None,
) -> List[Observation]:
    days = _validate_days(days)
    if end is None:
        end = date.today()
    start = end - timedelta(days=days)
    rng = np.random.default_rng(seed)

    history: List[Observation] = []
    for i in range(days):
        d = start + timedelta(days=i)
        base = settings.synthetic_base_value + i * settings.synthetic_daily_growth
        noise = (rng.random() - 0.5) * settings.synthetic_noise_amplitude
        value = (
            base
            * monthly_factor(d.month - 1)
            * weekend_factor(d)
            * holiday_factor(d)
            * (1.0 + noise)
        )
        history.append(Observation(date=d, value=float(_round_half_up(value))))
    return history


def analyze_seasonal_patterns(observations: Sequence[Observation]) -> SeasonalAnalysis:
    totals = np.zeros(MONTHS)
    counts = np.zeros(MONTHS)
    for o in observations:
        m = o.date.month - 1
        totals[m] += o.value
        counts[m] += 1

    averages = np.divide(totals, counts, out=np.zeros(MONTHS), where=counts > 0)
    # empty months count as zero
    overall = float(averages.mean())
    if overall != 0:
        factors = averages / overall
    else:
        factors = np.zeros(MONTHS)

    return SeasonalAnalysis(
        monthly_averages=averages.tolist(),
        overall_average=overall,
        seasonal_factors=factors.tolist(),
        peak_month=int(np.argmax(averages)),
        low_month=int(np.argmin(averages)),
    )
