"""
Forecasting: linear trend projection with seasonal and confidence annotations, anomaly flags and fit quality, plus seasonal trend reporting built on top of it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.orchestrator import confidence_at, forecast, forecast_observations
from engine.forecast.seasonal_trends import (
    build_recommendations,
    seasonal_analysis_report,
    seasonal_trends_with_forecast,
)

__all__ = [
    "confidence_at",
    "forecast",
    "forecast_observations",
    "build_recommendations",
    "seasonal_analysis_report",
    "seasonal_trends_with_forecast",
]
