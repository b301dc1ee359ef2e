"""
Route-level tests for the forecasting endpoints and their error mapping.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

import main as app_main
from api.requests import ForecastRequest, PeakAnalysisRequest
from api.responses import ForecastResult, PeakAnalysis
from api.routes import forecast as forecast_route
from config import settings
from engine.enums import TrendDirection


def _records(values):
    return [{"date": f"2024-02-{i + 1:02d}", "value": v} for i, v in enumerate(values)]


@pytest.mark.asyncio
async def test_forecast_route_returns_engine_result():
    req = ForecastRequest(data=_records([100, 200, 300, 400]), forecast_period=2)
    result = await forecast_route.forecast_series(req)
    assert isinstance(result, ForecastResult)
    assert result.trend_direction == TrendDirection.increasing
    assert len(result.series) == 6


@pytest.mark.asyncio
async def test_forecast_route_maps_invalid_input_to_400():
    req = ForecastRequest(data=[{"date": "not-a-date", "value": 1}])
    with pytest.raises(HTTPException) as exc:
        await forecast_route.forecast_series(req)
    assert exc.value.status_code == 400
    assert "not-a-date" in exc.value.detail


@pytest.mark.asyncio
async def test_forecast_route_hides_unexpected_failures(monkeypatch):
    def boom(records, horizon_days=None):
        raise RuntimeError("division exploded at 0x1234")

    monkeypatch.setattr(forecast_route, "forecast", boom)
    with pytest.raises(HTTPException) as exc:
        await forecast_route.forecast_series(ForecastRequest(data=_records([1, 2])))
    assert exc.value.status_code == 500
    assert "0x1234" not in exc.value.detail


@pytest.mark.asyncio
async def test_peak_analysis_route_counts():
    req = PeakAnalysisRequest(data=_records([10, 10, 10, 50, 10, 10, 10]))
    result = await forecast_route.peak_analysis(req)
    assert isinstance(result, PeakAnalysis)
    assert (result.peak_count, result.trough_count, result.high_severity_count) == (1, 0, 1)


@pytest.mark.asyncio
async def test_peak_analysis_route_rejects_oversized_values_with_400():
    req = PeakAnalysisRequest(data=_records([1.5e308, 1.6e308, 1.7e308]))
    with pytest.raises(HTTPException) as exc:
        await forecast_route.peak_analysis(req)
    assert exc.value.status_code == 400


@pytest.mark.asyncio
async def test_seasonal_routes_apply_query_defaults(monkeypatch):
    captured = {}

    def fake_trends(days, horizon_days):
        captured["trends"] = (days, horizon_days)
        return "trends"

    def fake_analysis(days):
        captured["analysis"] = days
        return "analysis"

    monkeypatch.setattr(forecast_route, "seasonal_trends_with_forecast", fake_trends)
    monkeypatch.setattr(forecast_route, "seasonal_analysis_report", fake_analysis)

    assert await forecast_route.seasonal_trends() == "trends"
    assert await forecast_route.seasonal_analysis(days=120) == "analysis"
    assert captured["trends"] == (settings.default_history_days, settings.default_horizon_days)
    assert captured["analysis"] == 120


def test_http_round_trip():
    client = TestClient(app_main.app)

    assert client.get("/api/v1/health").json() == {"status": "ok"}

    ok = client.post(
        "/api/v1/forecasting/forecast",
        json={"data": _records([5, 7, 9, 11]), "forecast_period": 3},
    )
    assert ok.status_code == 200
    body = ok.json()
    assert body["trend_direction"] == "increasing"
    assert body["series"][-1]["is_forecast"] is True
    assert body["series"][-1]["actual"] is None

    bad_shape = client.post("/api/v1/forecasting/forecast", json={"data": "nope"})
    assert bad_shape.status_code == 422

    bad_value = client.post(
        "/api/v1/forecasting/peak-analysis",
        json={"data": [{"date": "2024-01-01", "value": "x"}]},
    )
    assert bad_value.status_code == 400

    trends = client.get("/api/v1/forecasting/seasonal-trends", params={"days": 60, "forecast_days": 5})
    assert trends.status_code == 200
    assert len(trends.json()["series"]) == 65
    assert len(trends.json()["seasonal_analysis"]["monthly_averages"]) == 12

    analysis = client.get("/api/v1/forecasting/seasonal-analysis", params={"days": 30})
    assert analysis.status_code == 200
    assert len(analysis.json()["historical_data"]) == 30

    too_far = client.get("/api/v1/forecasting/seasonal-trends", params={"forecast_days": -1})
    assert too_far.status_code == 422
