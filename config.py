"""
Constants and configuration for Seasoncast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


SEASONCAST_HOST = os.getenv("SEASONCAST_HOST", "0.0.0.0")
SEASONCAST_PORT = int(os.getenv("SEASONCAST_PORT", "4323"))
SEASONCAST_LOG_LEVEL = os.getenv("SEASONCAST_LOG_LEVEL", "info").lower()

API_PREFIX = "/api/v1"
HEALTH_PATH = "/health"


class Settings(BaseSettings):
    host: str = SEASONCAST_HOST
    port: int = SEASONCAST_PORT
    log_level: str = SEASONCAST_LOG_LEVEL

    # request bounds
    default_horizon_days: int = 30
    max_horizon_days: int = 3650
    default_history_days: int = 365
    max_history_days: int = 3650

    # anomaly detection: neighbour ratio multiplier
    anomaly_threshold: float = 1.5

    # |slope| at or below this is reported as a stable trend
    trend_slope_threshold: float = 0.1

    # confidence decay away from the last observed index
    confidence_floor: float = 0.5
    confidence_decay: float = 0.8

    # recommendation cutoffs
    high_volatility_percent: float = 50.0

    # synthetic history generator
    synthetic_base_value: float = 1000.0
    synthetic_daily_growth: float = 2.0
    # full width of the uniform noise band, 0.2 gives +/-10%
    synthetic_noise_amplitude: float = 0.2

    # trailing window of synthetic history returned by the seasonal analysis
    preview_days: int = 90

    model_config = {
        "env_prefix": "SEASONCAST_",
        "extra": "ignore",
    }


settings = Settings()
