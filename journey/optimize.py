import logging
from typing import Iterable, List, Optional, Sequence

from .finance import build_baseline_series, build_scenario_series, evaluate_scenario, predict_future_usage
from .utils import (
    BASE_COST_PER_HOUR, CURRENCY, INITIAL_DRIVING_HOURS,
    Recommendation, ScenarioAnalysis, ScenarioConfig,
)

logger = logging.getLogger(__name__)

NO_SAVINGS_MESSAGE = 'None of the current scenarios provide cost savings.'


def analyse_scenarios(scenarios: Iterable[ScenarioConfig],
                      historical_hours: Sequence[float] = INITIAL_DRIVING_HOURS,
                      predicted_hours: Optional[float] = None,
                      base_rate: float = BASE_COST_PER_HOUR) -> List[ScenarioAnalysis]:
    """Savings and ROI of each scenario against the no-spell baseline, in input order."""
    if predicted_hours is None:
        predicted_hours = predict_future_usage(historical_hours)
    baseline = build_baseline_series(historical_hours, predicted_hours, base_rate)
    analyses = []
    for config in scenarios:
        series = build_scenario_series(historical_hours, predicted_hours, config.spell, config.month, base_rate)
        analyses.append(evaluate_scenario(baseline, series, config.spell, config.label, config))
    return analyses


def recommendation_message(best: ScenarioAnalysis) -> str:
    if not best.saves_money:
        return NO_SAVINGS_MESSAGE
    roi = f"{best.roi:.1f}%" if best.roi is not None else 'n/a'
    return (f"Recommended: {best.description} provides the highest savings of "
            f"{best.savings:.2f} {CURRENCY} with an ROI of {roi}")


def select_best_scenario(scenarios: Iterable[ScenarioConfig],
                         historical_hours: Sequence[float] = INITIAL_DRIVING_HOURS,
                         predicted_hours: Optional[float] = None,
                         base_rate: float = BASE_COST_PER_HOUR) -> Optional[Recommendation]:
    """Pick the scenario with the largest savings; None when there is nothing to compare.

    On equal savings the scenario listed first is kept.
    """
    analyses = analyse_scenarios(scenarios, historical_hours, predicted_hours, base_rate)
    if not analyses:
        return None
    best = analyses[0]
    for current in analyses[1:]:
        if current.savings > best.savings:
            best = current
    logger.debug('Best of %d scenarios: %s (savings %s)', len(analyses), best.description, best.savings)
    return Recommendation(best=best, message=recommendation_message(best), analyses=analyses)
