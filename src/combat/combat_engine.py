"""Round Resolver for the battle simulator.

Plays one round between two groups:
- Per-round reset
- Alternating passes (group 1, then group 2)
- Attack, then an optional follow-up spell
- Win detection when a side has nobody left to target
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence
import logging
import random

from src.core.config import get_settings
from .attack import ActionType, AttackResult, CombatEvent, SpellCastResult
from .combat_unit import Combatant
from .targeting import FocusStrategy, build_focus_map, get_living, select_target

logger = logging.getLogger(__name__)


class BattleConfigurationError(ValueError):
    """Raised when a round or battle is set up with invalid inputs."""


class RoundState(Enum):
    """Round states."""

    IN_PROGRESS = auto()
    SIDE1_WON = auto()
    SIDE2_WON = auto()


@dataclass
class RoundResult:
    """Result of a single round."""

    round_number: int
    winner: RoundState
    exchanges: int  # Passes started, including the one that found no target
    group1_survivors: int
    group2_survivors: int

    events: List[CombatEvent] = field(default_factory=list)
    focus_map: Dict[str, Optional[str]] = field(default_factory=dict)


class RoundResolver:
    """
    Resolves rounds between two groups.

    Usage:
        resolver = RoundResolver(FocusStrategy.LOWEST_HP, rng=random.Random(7))
        result = resolver.resolve(group1, group2)
        if result.winner == RoundState.SIDE1_WON:
            ...
    """

    def __init__(
        self,
        strategy: FocusStrategy = FocusStrategy.LOWEST_HP,
        rng: Optional[random.Random] = None,
        spell_cast_chance: Optional[float] = None,
        restore_mana: bool = False,
        record_events: bool = False,
    ):
        """
        Initialize round resolver.

        Args:
            strategy: Focus strategy used by every attacker.
            rng: Random number generator for the spell coin flip.
            spell_cast_chance: Probability of trying the follow-up spell
                (configured SPELL_CAST_CHANCE when None).
            restore_mana: Also restore mana in the per-round reset.
            record_events: Keep CombatEvent records in the result.
        """
        if spell_cast_chance is None:
            spell_cast_chance = get_settings().SPELL_CAST_CHANCE
        if not 0.0 <= spell_cast_chance <= 1.0:
            raise BattleConfigurationError(
                f"Spell cast chance must be within [0, 1], got {spell_cast_chance}"
            )
        self.strategy = strategy
        self.rng = rng or random.Random()
        self.spell_cast_chance = spell_cast_chance
        self.restore_mana = restore_mana
        self.record_events = record_events

        self._events: List[CombatEvent] = []
        self._round_number = 0
        self._exchange = 0

    def resolve(
        self,
        group1: Sequence[Combatant],
        group2: Sequence[Combatant],
        round_number: int = 1,
    ) -> RoundResult:
        """
        Play one full round.

        Args:
            group1: First group, in turn order.
            group2: Second group, in turn order.
            round_number: Label used in events and logs.

        Returns:
            RoundResult with the terminal state.
        """
        if not group1 or not group2:
            raise BattleConfigurationError("Both groups need at least one combatant")

        self._events = []
        self._round_number = round_number
        self._exchange = 0

        for unit in (*group1, *group2):
            unit.reset_for_round(restore_mana=self.restore_mana)

        focus_map = build_focus_map(group1, group2, self.strategy)

        state = RoundState.IN_PROGRESS
        while state == RoundState.IN_PROGRESS:
            self._exchange += 1
            state = self._play_pass(group1, group2, RoundState.SIDE1_WON)
            if state != RoundState.IN_PROGRESS:
                break
            state = self._play_pass(group2, group1, RoundState.SIDE2_WON)

        logger.debug(
            "Round %d finished after %d exchange(s): %s",
            round_number, self._exchange, state.name,
        )

        return RoundResult(
            round_number=round_number,
            winner=state,
            exchanges=self._exchange,
            group1_survivors=len(get_living(group1)),
            group2_survivors=len(get_living(group2)),
            events=self._events if self.record_events else [],
            focus_map=focus_map,
        )

    def _play_pass(
        self,
        attackers: Sequence[Combatant],
        defenders: Sequence[Combatant],
        win_state: RoundState,
    ) -> RoundState:
        """
        Let every living attacker act once.

        Returns win_state as soon as an attacker finds no living defender.
        """
        for attacker in attackers:
            if not attacker.is_alive:
                continue

            defender = select_target(defenders, self.strategy)
            if defender is None:
                return win_state

            self._take_turn(attacker, defender)

        return RoundState.IN_PROGRESS

    def _take_turn(self, attacker: Combatant, defender: Combatant) -> None:
        """Attack, then maybe follow up with the first signature spell."""
        attack = attacker.attack(defender)
        self._record_attack(attacker, defender, attack)

        if attack.target_killed:
            return

        if not attacker.spells or self.rng.random() >= self.spell_cast_chance:
            return

        cast = attacker.cast_spell(attacker.spells[0], defender)
        self._record_cast(attacker, defender, cast)

    def _record_attack(
        self, attacker: Combatant, defender: Combatant, attack: AttackResult
    ) -> None:
        damage = attack.damage_result
        self._record(
            CombatEvent(
                round_number=self._round_number,
                exchange=self._exchange,
                action=ActionType.ATTACK,
                attacker_id=attacker.id,
                attacker_name=attacker.name,
                defender_id=defender.id,
                defender_name=defender.name,
                amount=damage.actual_damage,
                defender_health=damage.health_after,
                killed=damage.killed,
                description=f"{attack.description} {damage.description}",
            )
        )

    def _record_cast(
        self, attacker: Combatant, defender: Combatant, cast: SpellCastResult
    ) -> None:
        if cast.success and cast.damage_result is not None:
            damage = cast.damage_result
            event = CombatEvent(
                round_number=self._round_number,
                exchange=self._exchange,
                action=ActionType.SPELL,
                attacker_id=attacker.id,
                attacker_name=attacker.name,
                defender_id=defender.id,
                defender_name=defender.name,
                amount=damage.actual_damage,
                defender_health=damage.health_after,
                killed=damage.killed,
                spell_name=cast.spell_name,
                description=f"{cast.description} {damage.description}",
            )
        else:
            event = CombatEvent(
                round_number=self._round_number,
                exchange=self._exchange,
                action=ActionType.SPELL_FAILED,
                attacker_id=attacker.id,
                attacker_name=attacker.name,
                defender_id=defender.id,
                defender_name=defender.name,
                amount=0,
                defender_health=defender.health,
                spell_name=cast.spell_name,
                description=cast.description,
            )
        self._record(event)

    def _record(self, event: CombatEvent) -> None:
        logger.debug("[round %d] %s", event.round_number, event.description)
        if self.record_events:
            self._events.append(event)
