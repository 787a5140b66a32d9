"""Input checks for the cost projection engine."""
import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

import numpy as np

from .utils import HISTORY_MONTHS, MONTHS, FIRST_SPELL_MONTH


class InvalidInputError(ValueError):
    """Raised when driving hours or a scenario choice are malformed."""


class UndefinedRatioError(ZeroDivisionError):
    """Raised when a ratio is taken against a zero one-time cost."""


def _is_hour(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        value = float(value)
    except OverflowError:
        return False
    return math.isfinite(value) and value >= 0


def validate_hours(hours: Any) -> list:
    """Return the hours as a list; raise if empty, not a sequence, or not all non-negative numbers."""
    if isinstance(hours, (str, bytes)) or not isinstance(hours, (Sequence, np.ndarray)):
        raise InvalidInputError('Invalid driving hours data')
    if isinstance(hours, np.ndarray) and hours.ndim != 1:
        raise InvalidInputError('Invalid driving hours data')
    values = list(hours)
    if not values:
        raise InvalidInputError('Invalid driving hours data')
    if not all(_is_hour(h) for h in values):
        raise InvalidInputError('Invalid hours data')
    return values


def validate_history(hours: Any) -> list:
    values = validate_hours(hours)
    if len(values) != HISTORY_MONTHS:
        raise InvalidInputError(f'Expected {HISTORY_MONTHS} months of driving hours, got {len(values)}')
    return values


def validate_spell_month(month: Any) -> int:
    if isinstance(month, bool) or not isinstance(month, (int, np.integer)):
        raise InvalidInputError(f'Spell month must be an integer, got {month!r}')
    if not FIRST_SPELL_MONTH <= month < len(MONTHS):
        raise InvalidInputError(
            f'Spell month must be between {FIRST_SPELL_MONTH} and {len(MONTHS) - 1}, got {month}'
        )
    return int(month)
