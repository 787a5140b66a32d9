from dataclasses import dataclass, field
from typing import List, Optional, Tuple

BASE_COST_PER_HOUR = 100
# Hours driven Jan-Jun of the prior period
INITIAL_DRIVING_HOURS: Tuple[int, ...] = (23, 48, 43, 29, 50, 108)
HISTORY_MONTHS = 6
PREDICTION_WINDOW = 3
FIRST_SPELL_MONTH = HISTORY_MONTHS
CURRENCY = 'gold coins'
MONTHS: Tuple[str, ...] = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
)


@dataclass(frozen=True)
class UpgradeOption:
    key: str
    label: str
    tire_cost: float
    engine_cost: float
    hourly_rate: float  # replaces the base rate once active
    description: str
    efficiency: float = 1.0
    risk: float = 0.0

    @property
    def one_time_cost(self) -> float:
        return self.tire_cost + self.engine_cost


@dataclass
class ScenarioConfig:
    id: int
    spell: UpgradeOption
    month: int = FIRST_SPELL_MONTH

    @property
    def label(self) -> str:
        return f"{self.spell.label} in {MONTHS[self.month]}"


@dataclass(frozen=True)
class ScenarioAnalysis:
    savings: float
    roi: Optional[float]  # None when the spell costs nothing up front
    description: str
    total_baseline: float
    total_scenario: float
    investment: float
    config: Optional[ScenarioConfig] = None

    @property
    def saves_money(self) -> bool:
        return self.savings > 0


@dataclass(frozen=True)
class Recommendation:
    best: ScenarioAnalysis
    message: str
    analyses: List[ScenarioAnalysis] = field(default_factory=list)

    @property
    def saves_money(self) -> bool:
        return self.best.saves_money
