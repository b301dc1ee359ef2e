"""
Peak and trough detection for time series, usable on forecast output or on arbitrary caller-supplied series with a custom neighbour-ratio threshold.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import analyze_peaks, detect

__all__ = ["detect", "analyze_peaks"]
