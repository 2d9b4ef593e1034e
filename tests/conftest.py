"""
Test configuration: repo root on sys.path and a fixed clock.

The "today" default for null/empty dates depends on the wall clock, so tests
always inject FIXED_TODAY instead.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from overlap_core.domain.dates import DateNormalizer  # noqa: E402

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TODAY


@pytest.fixture
def normalizer(fixed_clock):
    return DateNormalizer(clock=fixed_clock)
