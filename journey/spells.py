from types import MappingProxyType
from typing import Iterable, Mapping

from .utils import BASE_COST_PER_HOUR, UpgradeOption
from .validation import InvalidInputError

NO_SPELL = UpgradeOption(
    key='NONE', label='No Spell', tire_cost=0, engine_cost=0,
    hourly_rate=BASE_COST_PER_HOUR,
    description='Continue journey with original car efficiency',
    efficiency=1.0, risk=0.0,
)
TIRE_SPELL = UpgradeOption(
    key='TIRE', label='Tire Spell', tire_cost=10, engine_cost=0, hourly_rate=93,
    description='Upgrade tires for slightly improved efficiency',
    efficiency=1.07, risk=0.1,
)
ENGINE_SPELL = UpgradeOption(
    key='ENGINE', label='Engine Spell', tire_cost=0, engine_cost=32, hourly_rate=83,
    description='Upgrade engine for significant efficiency improvement',
    efficiency=1.17, risk=0.2,
)
BOTH_SPELLS = UpgradeOption(
    key='BOTH', label='Both Spells', tire_cost=10, engine_cost=32, hourly_rate=83,
    description='Comprehensive magical upgrade for maximum efficiency',
    efficiency=1.25, risk=0.3,
)

SPELL_OPTIONS: Mapping[str, UpgradeOption] = MappingProxyType({
    s.key: s for s in (NO_SPELL, TIRE_SPELL, ENGINE_SPELL, BOTH_SPELLS)
})


def get_spell(key: str) -> UpgradeOption:
    try:
        return SPELL_OPTIONS[key]
    except KeyError:
        raise InvalidInputError(f'Unknown spell: {key!r}') from None


def assess_risk(spells: Iterable[UpgradeOption]) -> str:
    """Label the riskiest of the chosen spells."""
    risk = max((s.risk for s in spells), default=0.0)
    if risk == 0:
        return 'No Additional Risk'
    if risk <= 0.1:
        return 'Low Risk'
    if risk <= 0.2:
        return 'Medium Risk'
    return 'High Risk'
