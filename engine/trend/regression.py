"""
Closed-form ordinary least squares fit of a value against its sequential index, used as the long-run trend component of a forecast, plus the R-squared fit quality over the observed points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class TrendModel:
    slope: float
    intercept: float

    @classmethod
    def fit(cls, x: Sequence[float], y: Sequence[float]) -> TrendModel:
        if len(x) != len(y):
            raise ValueError(f"x and y differ in length ({len(x)} != {len(y)})")
        n = len(x)
        if n < 2:
            raise ValueError("a trend needs at least two points")

        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        sum_x = float(xs.sum())
        sum_y = float(ys.sum())
        sum_xy = float((xs * ys).sum())
        sum_xx = float((xs * xs).sum())

        denominator = n * sum_xx - sum_x * sum_x
        if denominator == 0:
            return cls(slope=0.0, intercept=sum_y / n)

        slope = (n * sum_xy - sum_x * sum_y) / denominator
        intercept = (sum_y - slope * sum_x) / n
        return cls(slope=slope, intercept=intercept)

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def r_squared(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if a.size == 0:
        return 0.0
    ss_res = float(np.sum((a - p) ** 2))
    if np.ptp(a) == 0:
        # constant series: nothing to explain
        return 1.0 if np.isclose(ss_res, 0.0, atol=1e-9) else 0.0
    ss_tot = float(np.sum((a - a.mean()) ** 2))
    return 1.0 - ss_res / ss_tot
