"""Shared pytest configuration for the project test suite."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure the repository root (which contains the ``journey`` package) is importable.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from journey.utils import INITIAL_DRIVING_HOURS  # noqa: E402


@pytest.fixture
def history():
    """The seed Jan-Jun driving hours."""
    return list(INITIAL_DRIVING_HOURS)


@pytest.fixture
def predicted():
    return 76
