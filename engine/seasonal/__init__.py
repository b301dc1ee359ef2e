"""
Calendar seasonality: fixed month, weekend and holiday multiplier tables, plus monthly pattern analysis and synthetic history generation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.seasonal.patterns import analyze_seasonal_patterns, generate_history
from engine.seasonal.profile import (
    HOLIDAY_WINDOWS,
    MONTHLY_FACTORS,
    WEEKEND_FACTOR,
    HolidayWindow,
    holiday_factor,
    monthly_factor,
    seasonal_component,
    weekend_factor,
)

__all__ = [
    "HOLIDAY_WINDOWS",
    "MONTHLY_FACTORS",
    "WEEKEND_FACTOR",
    "HolidayWindow",
    "holiday_factor",
    "monthly_factor",
    "seasonal_component",
    "weekend_factor",
    "analyze_seasonal_patterns",
    "generate_history",
]
