"""
Linear trend fitting by ordinary least squares, with prediction and coefficient of determination helpers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.regression import TrendModel, r_squared

__all__ = ["TrendModel", "r_squared"]
