"""
Boundary adapter that turns raw ``{date, value}`` records from callers into validated, date-sorted observations, accepting the value under either ``actual`` or ``value`` and rejecting malformed records with a single error type.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List

from engine.errors import InvalidInputError

log = logging.getLogger(__name__)

_VALUE_FIELDS = ("actual", "value")

# squares and sums of values stay finite in float64 below this magnitude
MAX_ABS_VALUE = 1e100


@dataclass(frozen=True)
class Observation:
    date: date
    value: float


def parse_date(raw: Any) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInputError(f"date must be an ISO-8601 string, got {raw!r}")
    text = raw.strip()
    try:
        if "T" in text or " " in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInputError(f"unparseable date {raw!r}") from exc


def _as_number(raw: Any, field: str, index: int) -> float:
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        raise InvalidInputError(f"record {index}: {field} must be numeric, got {raw!r}")
    try:
        value = float(raw)
    except OverflowError as exc:
        raise InvalidInputError(f"record {index}: {field} is out of range, got {raw!r}") from exc
    if not math.isfinite(value):
        raise InvalidInputError(f"record {index}: {field} must be finite, got {raw!r}")
    if abs(value) > MAX_ABS_VALUE:
        raise InvalidInputError(
            f"record {index}: {field} magnitude exceeds {MAX_ABS_VALUE:g}, got {raw!r}"
        )
    return value


def resolve_value(record: Mapping[str, Any], index: int = 0) -> float:
    for field in _VALUE_FIELDS:
        raw = record.get(field)
        if raw is not None:
            return _as_number(raw, field, index)
    log.warning("record %d has neither 'actual' nor 'value'; defaulting to 0", index)
    return 0.0


def parse_records(records: Any) -> List[Observation]:
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Sequence):
        raise InvalidInputError(
            f"expected a sequence of {{date, value}} records, got {type(records).__name__}"
        )

    observations: List[Observation] = []
    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidInputError(f"record {i} is not a mapping: {type(record).__name__}")
        if record.get("date") is None:
            raise InvalidInputError(f"record {i} is missing 'date'")
        observations.append(Observation(date=parse_date(record["date"]), value=resolve_value(record, i)))

    observations.sort(key=lambda o: o.date)
    for prev, cur in zip(observations, observations[1:]):
        if prev.date == cur.date:
            raise InvalidInputError(f"duplicate date {cur.date.isoformat()}")
    return observations
