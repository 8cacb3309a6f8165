"""Stat Calculator for the battle simulator.

Derive a combatant's stat block and signature spells from its class and level.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import List

from src.core.constants import (
    ATTACK_LEVEL_MULTIPLIER,
    ATTACK_STAT_BY_CLASS,
    BASE_HEALTH_BY_CLASS,
    CLASS_STAT_COEFFICIENTS,
    HEALTH_PER_STRENGTH,
    MANA_PER_INTELLIGENCE,
    SPELL_DAMAGE_FORMULAS,
    SPELL_MANA_COSTS,
    SPELL_NAMES_BY_CLASS,
)
from src.data.models.spell import Spell


class ClassKind(StrEnum):
    """Combatant class."""
    WARRIOR = "warrior"
    ARCHER = "archer"
    MAGE = "mage"


@dataclass(frozen=True)
class CalculatedStats:
    """Complete derived stats for a class at a given level."""

    strength: int
    dexterity: int
    intelligence: int
    max_health: int
    max_mana: int


class StatCalculator:
    """
    Calculate stats for a combatant from its class kind and level.

    All values are closed-form in the level; nothing is clamped.
    """

    def calculate_stats(self, class_kind: ClassKind, level: int) -> CalculatedStats:
        """
        Calculate the stat block.

        Args:
            class_kind: Combatant class.
            level: Combatant level.

        Returns:
            CalculatedStats for that class and level.
        """
        coefficients = CLASS_STAT_COEFFICIENTS[class_kind.value]

        def scaled(stat: str) -> int:
            base, per_level = coefficients[stat]
            return base + per_level * level

        strength = scaled("strength")
        dexterity = scaled("dexterity")
        intelligence = scaled("intelligence")

        return CalculatedStats(
            strength=strength,
            dexterity=dexterity,
            intelligence=intelligence,
            max_health=BASE_HEALTH_BY_CLASS[class_kind.value] + HEALTH_PER_STRENGTH * strength,
            max_mana=MANA_PER_INTELLIGENCE * intelligence,
        )

    def calculate_base_damage(
        self, class_kind: ClassKind, level: int, stats: CalculatedStats
    ) -> int:
        """Base attack damage: primary class stat plus a level multiple."""
        primary = getattr(stats, ATTACK_STAT_BY_CLASS[class_kind.value])
        return primary + ATTACK_LEVEL_MULTIPLIER[class_kind.value] * level

    def signature_spells(self, class_kind: ClassKind, level: int) -> List[Spell]:
        """Build the two signature spells for a class at a level."""
        names = SPELL_NAMES_BY_CLASS[class_kind.value]
        return [
            Spell(name=name, damage=base + per_level * level, mana_cost=cost)
            for name, (base, per_level), cost in zip(
                names, SPELL_DAMAGE_FORMULAS, SPELL_MANA_COSTS
            )
        ]
