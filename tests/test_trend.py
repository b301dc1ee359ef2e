"""
Test cases for the least squares trend model, including exact recovery of linear data, agreement with an independent regression, degenerate inputs and R-squared edge cases.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import dataclasses

import numpy as np
import pytest
from scipy.stats import linregress

from engine.trend.regression import TrendModel, r_squared


def test_recovers_exact_linear_series():
    x = list(range(20))
    y = [2 * i + 5 for i in x]
    model = TrendModel.fit(x, y)
    assert model.slope == pytest.approx(2.0, abs=1e-6)
    assert model.intercept == pytest.approx(5.0, abs=1e-6)
    assert model.predict(25) == pytest.approx(55.0, abs=1e-6)
    assert r_squared(y, [model.predict(i) for i in x]) == pytest.approx(1.0, abs=1e-6)


def test_matches_scipy_on_noisy_series():
    rng = np.random.default_rng(3)
    x = np.arange(50)
    y = 3.5 * x - 12 + rng.normal(0, 4, size=50)
    model = TrendModel.fit(x.tolist(), y.tolist())
    ref = linregress(x, y)
    assert model.slope == pytest.approx(ref.slope, rel=1e-7)
    assert model.intercept == pytest.approx(ref.intercept, rel=1e-7)
    fit = r_squared(y, [model.predict(i) for i in x])
    assert fit == pytest.approx(ref.rvalue ** 2, rel=1e-7)


def test_fit_rejects_short_or_mismatched_input():
    with pytest.raises(ValueError):
        TrendModel.fit([0], [1])
    with pytest.raises(ValueError):
        TrendModel.fit([0, 1, 2], [1, 2])


def test_all_equal_x_does_not_raise():
    model = TrendModel.fit([3, 3, 3], [1, 2, 6])
    assert model.slope == 0.0
    assert model.intercept == pytest.approx(3.0)


def test_model_is_immutable():
    model = TrendModel(slope=1.0, intercept=0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        model.slope = 2.0


def test_r_squared_constant_series():
    assert r_squared([5, 5, 5], [5, 5, 5]) == 1.0
    assert r_squared([5, 5, 5], [4, 5, 5]) == 0.0
    assert r_squared([], []) == 0.0
