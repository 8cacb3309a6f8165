"""Combat action records.

Structured results for the three things that can happen in a turn:
- A basic attack
- A spell cast (or a failed attempt for lack of mana)
- Damage being absorbed by the defender
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ActionType(Enum):
    """Types of combat actions."""

    ATTACK = "attack"
    SPELL = "spell"
    SPELL_FAILED = "spell_failed"


@dataclass
class DamageResult:
    """Outcome of a single take_damage call."""

    raw_damage: int  # Pre-mitigation damage
    actual_damage: int  # Damage after armor
    health_after: int
    killed: bool  # Health reached 0 on this call
    description: str


@dataclass
class AttackResult:
    """Result of a basic attack."""

    damage: int  # Damage rolled by the attacker (before armor)
    damage_result: DamageResult
    description: str

    @property
    def target_killed(self) -> bool:
        return self.damage_result.killed


@dataclass
class SpellCastResult:
    """Result of a spell cast attempt."""

    success: bool
    spell_name: str
    mana_cost: int
    damage_result: Optional[DamageResult] = None
    description: str = ""

    @property
    def target_killed(self) -> bool:
        return self.damage_result is not None and self.damage_result.killed


@dataclass
class CombatEvent:
    """
    One recorded action in a round.

    Presentation layers render these; the engine never prints.
    """

    round_number: int
    exchange: int  # Full pass (group 1 then group 2) within the round
    action: ActionType
    attacker_id: str
    attacker_name: str
    defender_id: str
    defender_name: str
    amount: int  # Damage actually dealt (0 for failed casts)
    defender_health: int
    killed: bool = False
    spell_name: Optional[str] = None
    description: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "round_number": self.round_number,
            "exchange": self.exchange,
            "action": self.action.value,
            "attacker_id": self.attacker_id,
            "attacker_name": self.attacker_name,
            "defender_id": self.defender_id,
            "defender_name": self.defender_name,
            "amount": self.amount,
            "defender_health": self.defender_health,
            "killed": self.killed,
            "spell_name": self.spell_name,
            "description": self.description,
        }
