"""Targeting System for battle simulation.

Handles target selection by focus strategy:
- Lowest/Highest current HP
- Lowest/Highest damage potential
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .combat_unit import Combatant


class FocusStrategy(Enum):
    """Focus strategy types."""

    LOWEST_HP = auto()  # Lowest current HP
    HIGHEST_HP = auto()  # Highest current HP
    LOWEST_DAMAGE = auto()  # Lowest damage potential
    HIGHEST_DAMAGE = auto()  # Highest damage potential

    @classmethod
    def from_name(cls, name: str) -> "FocusStrategy":
        """
        Parse a strategy from its name ("lowest_hp", "HighestDamage", ...).

        Raises:
            ValueError: If the name matches no strategy.
        """
        normalized = name.strip().replace("-", "_").upper()
        if normalized in cls.__members__:
            return cls[normalized]
        compact = normalized.replace("_", "")
        for member in cls:
            if member.name.replace("_", "") == compact:
                return member
        raise ValueError(f"Unknown focus strategy: {name!r}")


def _health(unit: "Combatant") -> int:
    return unit.health


def _damage_potential(unit: "Combatant") -> int:
    return unit.get_damage_potential()


# strategy -> (selector, key). min/max keep the first candidate on ties.
_STRATEGY_RULES: Dict[FocusStrategy, tuple[Callable, Callable[["Combatant"], int]]] = {
    FocusStrategy.LOWEST_HP: (min, _health),
    FocusStrategy.HIGHEST_HP: (max, _health),
    FocusStrategy.LOWEST_DAMAGE: (min, _damage_potential),
    FocusStrategy.HIGHEST_DAMAGE: (max, _damage_potential),
}


def get_living(candidates: Sequence["Combatant"]) -> List["Combatant"]:
    """Get living candidates in their original order."""
    return [unit for unit in candidates if unit.is_alive]


def select_target(
    candidates: Sequence["Combatant"],
    strategy: FocusStrategy = FocusStrategy.LOWEST_HP,
) -> Optional["Combatant"]:
    """
    Select one target from the candidates.

    Dead candidates are ignored. Ties go to the earliest candidate in list
    order. Nothing is mutated.

    Args:
        candidates: Opposing group in turn order.
        strategy: Focus strategy.

    Returns:
        The chosen combatant, or None if no candidate is alive.
    """
    living = get_living(candidates)
    if not living:
        return None

    selector, key = _STRATEGY_RULES[strategy]
    return selector(living, key=key)


def build_focus_map(
    group1: Sequence["Combatant"],
    group2: Sequence["Combatant"],
    strategy: FocusStrategy,
) -> Dict[str, Optional[str]]:
    """
    Map every combatant id to the id of the enemy it would focus right now.

    The map holds ids only and is recomputed whenever it is needed.

    Args:
        group1: First group.
        group2: Second group.
        strategy: Focus strategy.

    Returns:
        {attacker_id: target_id or None}
    """
    focus: Dict[str, Optional[str]] = {}
    for attackers, defenders in ((group1, group2), (group2, group1)):
        for attacker in attackers:
            target = select_target(defenders, strategy)
            focus[attacker.id] = target.id if target is not None else None
    return focus
