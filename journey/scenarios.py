import itertools
import logging
from typing import Dict, Iterator, List

from .spells import NO_SPELL
from .utils import FIRST_SPELL_MONTH, ScenarioConfig, UpgradeOption
from .validation import validate_spell_month

logger = logging.getLogger(__name__)


class ScenarioBook:
    """The user's list of spell scenarios, in the order they were added."""

    def __init__(self):
        self._ids = itertools.count(1)
        self._scenarios: Dict[int, ScenarioConfig] = {}

    def add(self, spell: UpgradeOption = NO_SPELL, month: int = FIRST_SPELL_MONTH) -> ScenarioConfig:
        config = ScenarioConfig(id=next(self._ids), spell=spell, month=validate_spell_month(month))
        self._scenarios[config.id] = config
        logger.debug('Added scenario %d: %s', config.id, config.label)
        return config

    def update(self, scenario_id: int, spell: UpgradeOption, month: int) -> ScenarioConfig:
        config = self._scenarios[scenario_id]
        config.month = validate_spell_month(month)
        config.spell = spell
        return config

    def remove(self, scenario_id: int) -> None:
        del self._scenarios[scenario_id]
        logger.debug('Removed scenario %d', scenario_id)

    def scenarios(self) -> List[ScenarioConfig]:
        return list(self._scenarios.values())

    def __iter__(self) -> Iterator[ScenarioConfig]:
        return iter(self.scenarios())

    def __len__(self) -> int:
        return len(self._scenarios)
