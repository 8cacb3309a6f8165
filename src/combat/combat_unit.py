"""Combatant for the battle simulator.

Manages a unit's derived stats, equipment, spells and its mutable
health/mana during combat.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
import uuid

from src.core.constants import ATTACK_VERBS, MAX_LEVEL, MIN_LEVEL
from src.core.stat_calculator import ClassKind, StatCalculator
from src.data.models.equipment import Armor, Weapon
from src.data.models.spell import Spell
from src.combat.attack import AttackResult, DamageResult, SpellCastResult


class InvalidCombatantError(ValueError):
    """Raised when a combatant cannot be built from the given inputs."""


@dataclass(eq=False)
class Combatant:
    """
    A unit participating in combat.

    Stats are fixed at creation from (class_kind, level); only health and
    mana change, and only while a round is being resolved.
    """

    # Identification
    id: str
    name: str
    class_kind: ClassKind
    level: int

    # Derived stats
    strength: int
    dexterity: int
    intelligence: int
    max_health: int
    max_mana: int
    base_damage: int

    # Known spells (exactly two, in signature order)
    spells: Tuple[Spell, ...]

    # Equipment
    weapon: Optional[Weapon] = None
    armor: Optional[Armor] = None

    # Mutable combat state (initialized to max in __post_init__)
    health: int = field(default=-1)
    mana: int = field(default=-1)

    def __post_init__(self):
        """Start at full health and mana."""
        if self.health < 0:
            self.health = self.max_health
        if self.mana < 0:
            self.mana = self.max_mana

    @property
    def is_alive(self) -> bool:
        """Check if unit is alive."""
        return self.health > 0

    @property
    def weapon_bonus(self) -> int:
        return self.weapon.damage_bonus if self.weapon else 0

    def get_damage_potential(self) -> int:
        """
        Damage rating used for targeting comparisons.

        Stat-based only: the weapon bonus is not included.
        """
        return self.base_damage

    def take_damage(self, raw: int) -> DamageResult:
        """
        Receive damage.

        Args:
            raw: Damage before armor.

        Returns:
            DamageResult with the damage actually taken and a description.
        """
        was_alive = self.is_alive
        actual = self.armor.reduce_damage(raw) if self.armor else max(0, raw)
        self.health = max(0, self.health - actual)

        killed = was_alive and self.health == 0
        description = f"{self.name} takes {actual} damage. Health is now {self.health}."
        if killed:
            description += f" {self.name} dies!"

        return DamageResult(
            raw_damage=raw,
            actual_damage=actual,
            health_after=self.health,
            killed=killed,
            description=description,
        )

    def attack(self, target: "Combatant") -> AttackResult:
        """
        Perform a basic attack.

        Damage is the class base damage plus the weapon bonus and is applied
        to the target once.

        Args:
            target: The defending unit.

        Returns:
            AttackResult with the rolled damage and the target's damage result.
        """
        damage = self.base_damage + self.weapon_bonus
        damage_result = target.take_damage(damage)
        verb = ATTACK_VERBS[self.class_kind.value]
        return AttackResult(
            damage=damage,
            damage_result=damage_result,
            description=f"{self.name} {verb} {target.name}, dealing {damage} damage!",
        )

    def cast_spell(self, spell: Spell, target: "Combatant") -> SpellCastResult:
        """
        Cast a spell at a target.

        Fails without any state change when mana is short.

        Args:
            spell: Spell to cast.
            target: The defending unit.

        Returns:
            SpellCastResult; success is False on insufficient mana.
        """
        if not spell.is_affordable(self.mana):
            return SpellCastResult(
                success=False,
                spell_name=spell.name,
                mana_cost=spell.mana_cost,
                description=f"{self.name} doesn't have enough mana to cast {spell.name}!",
            )

        self.mana -= spell.mana_cost
        damage_result = target.take_damage(spell.damage)
        return SpellCastResult(
            success=True,
            spell_name=spell.name,
            mana_cost=spell.mana_cost,
            damage_result=damage_result,
            description=(
                f"{self.name} casts {spell.name} on {target.name}, "
                f"dealing {spell.damage} damage!"
            ),
        )

    def reset_health(self) -> None:
        """Restore health to max."""
        self.health = self.max_health

    def restore_mana(self) -> None:
        """Restore mana to max."""
        self.mana = self.max_mana

    def reset_for_round(self, restore_mana: bool = False) -> None:
        """Reset unit state for a new round."""
        self.reset_health()
        if restore_mana:
            self.restore_mana()

    def to_dict(self) -> dict:
        """Snapshot for presentation layers."""
        return {
            "id": self.id,
            "name": self.name,
            "class_kind": self.class_kind.value,
            "level": self.level,
            "strength": self.strength,
            "dexterity": self.dexterity,
            "intelligence": self.intelligence,
            "health": self.health,
            "max_health": self.max_health,
            "mana": self.mana,
            "max_mana": self.max_mana,
            "weapon": self.weapon.model_dump() if self.weapon else None,
            "armor": self.armor.model_dump() if self.armor else None,
            "spells": [spell.model_dump() for spell in self.spells],
        }

    def __repr__(self) -> str:
        return (
            f"{self.name} ({self.class_kind.value} L{self.level}, "
            f"{self.health}/{self.max_health} HP, {self.mana}/{self.max_mana} MP)"
        )


def _parse_class_kind(class_kind: Union[ClassKind, str]) -> ClassKind:
    if isinstance(class_kind, ClassKind):
        return class_kind
    try:
        return ClassKind(str(class_kind).strip().lower())
    except ValueError:
        raise InvalidCombatantError(f"Unknown class: {class_kind!r}") from None


def create_combatant(
    name: str,
    class_kind: Union[ClassKind, str],
    level: int,
    weapon: Optional[Weapon] = None,
    armor: Optional[Armor] = None,
    combatant_id: Optional[str] = None,
) -> Combatant:
    """
    Create a Combatant with stats and spells derived from class and level.

    Args:
        name: Display name.
        class_kind: Warrior, archer or mage (enum or its name).
        level: Level in [1, 100].
        weapon: Optional weapon from the catalog.
        armor: Optional armor from the catalog.
        combatant_id: Stable handle; a random UUID when omitted.

    Returns:
        New Combatant at full health and mana.

    Raises:
        InvalidCombatantError: For an empty name, unknown class or bad level.
    """
    if not name or not name.strip():
        raise InvalidCombatantError("Combatant name must not be empty")

    kind = _parse_class_kind(class_kind)

    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidCombatantError(f"Level must be an integer, got {level!r}")
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise InvalidCombatantError(
            f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}"
        )

    calculator = StatCalculator()
    stats = calculator.calculate_stats(kind, level)

    return Combatant(
        id=combatant_id or str(uuid.uuid4()),
        name=name,
        class_kind=kind,
        level=level,
        strength=stats.strength,
        dexterity=stats.dexterity,
        intelligence=stats.intelligence,
        max_health=stats.max_health,
        max_mana=stats.max_mana,
        base_damage=calculator.calculate_base_damage(kind, level, stats),
        spells=tuple(calculator.signature_spells(kind, level)),
        weapon=weapon,
        armor=armor,
    )
