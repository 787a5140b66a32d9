"""
Dorothy's journey cost projection: spell scenarios, monthly cost series and
the best-scenario recommendation.
"""

from .finance import (
    build_baseline_series,
    build_scenario_series,
    evaluate_scenario,
    journey_summary,
    monthly_cost,
    predict_future_usage,
    return_on_investment,
)
from .optimize import analyse_scenarios, select_best_scenario
from .scenarios import ScenarioBook
from .spells import SPELL_OPTIONS, assess_risk, get_spell
from .validation import InvalidInputError, UndefinedRatioError

__all__ = [
    "build_baseline_series",
    "build_scenario_series",
    "evaluate_scenario",
    "journey_summary",
    "monthly_cost",
    "predict_future_usage",
    "return_on_investment",
    "analyse_scenarios",
    "select_best_scenario",
    "ScenarioBook",
    "SPELL_OPTIONS",
    "assess_risk",
    "get_spell",
    "InvalidInputError",
    "UndefinedRatioError",
]
