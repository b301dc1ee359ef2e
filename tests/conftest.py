import os
import sys
from datetime import date, timedelta

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def daily_records():
    """Build ``{date, value}`` records for consecutive days starting 2024-03-04."""

    def _build(values, start=date(2024, 3, 4), field="value"):
        return [
            {"date": (start + timedelta(days=i)).isoformat(), field: v}
            for i, v in enumerate(values)
        ]

    return _build


# Prevent pytest from attempting to collect any modules inside the engine
# package itself. Ignoring engine files keeps collection focused on the
# tests directory.

def pytest_ignore_collect(collection_path, config):
    text = str(collection_path)
    if os.path.sep + 'engine' + os.path.sep in text:
        return True
