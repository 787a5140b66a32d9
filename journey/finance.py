import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from .spells import assess_risk
from .utils import (
    BASE_COST_PER_HOUR, HISTORY_MONTHS, MONTHS, PREDICTION_WINDOW,
    ScenarioAnalysis, ScenarioConfig, UpgradeOption,
)
from .validation import UndefinedRatioError, validate_history, validate_hours, validate_spell_month

logger = logging.getLogger(__name__)


def predict_future_usage(historical_hours: Sequence[float]) -> int:
    """Weighted average of the most recent months, later months weighing more.

    The last ``PREDICTION_WINDOW`` months get weights 1..k in order; the result
    is rounded half up to whole hours.
    """
    hours = validate_hours(historical_hours)
    window = np.asarray(hours[-PREDICTION_WINDOW:], dtype=float)
    weights = np.arange(1, len(window) + 1)
    weighted = float(np.average(window, weights=weights))
    predicted = int(math.floor(weighted + 0.5))
    logger.debug('Predicted %s hours/month from %s', predicted, window.tolist())
    return predicted


def monthly_cost(hours: float, cost_per_hour: float = BASE_COST_PER_HOUR) -> float:
    return max(0, hours * cost_per_hour)


def build_baseline_series(historical_hours: Sequence[float], predicted_hours: float,
                          base_rate: float = BASE_COST_PER_HOUR) -> List[float]:
    """Monthly spend if no spell is ever cast."""
    hours = validate_history(historical_hours)
    series = [monthly_cost(h, base_rate) for h in hours]
    series += [monthly_cost(predicted_hours, base_rate)] * (len(MONTHS) - HISTORY_MONTHS)
    return series


def build_scenario_series(historical_hours: Sequence[float], predicted_hours: float,
                          spell: UpgradeOption, spell_month: int,
                          base_rate: float = BASE_COST_PER_HOUR) -> List[float]:
    """Monthly spend when ``spell`` is cast in ``spell_month``.

    The spell's one-time cost lands entirely in the month it is cast, on top of
    that month's running cost at the new hourly rate.
    """
    hours = validate_history(historical_hours)
    spell_month = validate_spell_month(spell_month)
    series = [monthly_cost(h, base_rate) for h in hours]
    for month in range(HISTORY_MONTHS, len(MONTHS)):
        if month < spell_month:
            series.append(monthly_cost(predicted_hours, base_rate))
            continue
        cost = monthly_cost(predicted_hours, spell.hourly_rate)
        if month == spell_month:
            cost = spell.one_time_cost + cost
        series.append(cost)
    return series


def return_on_investment(savings: float, one_time_cost: float) -> float:
    if one_time_cost == 0:
        raise UndefinedRatioError('ROI is undefined for a spell with no one-time cost')
    return savings / one_time_cost * 100


def evaluate_scenario(baseline: Sequence[float], scenario: Sequence[float], spell: UpgradeOption,
                      description: str = '', config: Optional[ScenarioConfig] = None) -> ScenarioAnalysis:
    total_baseline = sum(baseline)
    total_scenario = sum(scenario)
    savings = total_baseline - total_scenario
    try:
        roi = return_on_investment(savings, spell.one_time_cost)
    except UndefinedRatioError:
        roi = None
    return ScenarioAnalysis(
        savings=savings,
        roi=roi,
        description=description or spell.label,
        total_baseline=total_baseline,
        total_scenario=total_scenario,
        investment=spell.one_time_cost,
        config=config,
    )


def journey_summary(scenarios: Iterable[ScenarioConfig], historical_hours: Sequence[float],
                    predicted_hours: float, base_rate: float = BASE_COST_PER_HOUR) -> Dict:
    """Totals shown under the chart.

    ``selected_total`` adds up the full-year cost of every selected scenario.
    """
    scenarios = list(scenarios)
    baseline_total = sum(build_baseline_series(historical_hours, predicted_hours, base_rate))
    selected_total = sum(
        sum(build_scenario_series(historical_hours, predicted_hours, c.spell, c.month, base_rate))
        for c in scenarios
    )
    return {
        'baseline_total': baseline_total,
        'selected_total': selected_total,
        'total_savings': baseline_total - selected_total,
        'risk_assessment': assess_risk(c.spell for c in scenarios),
    }
