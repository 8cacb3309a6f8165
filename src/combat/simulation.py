"""Monte Carlo Battle Simulation.

Runs many independent rounds between two groups to estimate
each side's win probability.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging
import random
import statistics

from src.core.config import get_settings
from .combat_engine import BattleConfigurationError, RoundResolver, RoundResult, RoundState
from .combat_unit import Combatant
from .targeting import FocusStrategy

logger = logging.getLogger(__name__)


@dataclass
class BattleResult:
    """
    Result of a battle (a batch of rounds).

    Percentages are in the 0-100 range.
    """

    group1_wins: int
    group2_wins: int
    rounds: int
    win_pct1: float
    win_pct2: float

    # Average number of exchanges per round
    avg_exchanges: float = 0.0

    # Confidence interval (95%) for group 1's win rate, 0.0 to 1.0
    win_rate_confidence: Tuple[float, float] = (0.0, 1.0)

    # Per-round results for detailed analysis
    round_results: List[RoundResult] = field(default_factory=list)

    @property
    def rounds_played(self) -> int:
        return self.group1_wins + self.group2_wins


class BattleSimulator:
    """
    Monte Carlo battle simulator.

    Usage:
        simulator = BattleSimulator(seed=42)
        result = simulator.run_battle(group1, group2, FocusStrategy.LOWEST_HP, rounds=100)
        print(f"Group 1 win rate: {result.win_pct1:.1f}%")
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        spell_cast_chance: Optional[float] = None,
        restore_mana: Optional[bool] = None,
        record_events: Optional[bool] = None,
        max_rounds: Optional[int] = None,
    ):
        """
        Initialize simulator.

        Unset arguments fall back to the configured settings.

        Args:
            seed: Seed for a fresh RNG (ignored when rng is given).
            rng: Random number generator shared by every round.
            spell_cast_chance: Probability of the follow-up spell roll.
            restore_mana: Restore mana at every per-round reset.
            record_events: Keep per-round combat events.
            max_rounds: Largest accepted round count.
        """
        settings = get_settings()
        if seed is None:
            seed = settings.RANDOM_SEED
        self.rng = rng or random.Random(seed)
        self.spell_cast_chance = (
            settings.SPELL_CAST_CHANCE if spell_cast_chance is None else spell_cast_chance
        )
        self.restore_mana = (
            settings.RESTORE_MANA_BETWEEN_ROUNDS if restore_mana is None else restore_mana
        )
        self.record_events = settings.RECORD_EVENTS if record_events is None else record_events
        self.max_rounds = settings.MAX_ROUNDS if max_rounds is None else max_rounds

    def run_battle(
        self,
        group1: Sequence[Combatant],
        group2: Sequence[Combatant],
        strategy: FocusStrategy = FocusStrategy.LOWEST_HP,
        rounds: Optional[int] = None,
    ) -> BattleResult:
        """
        Run a battle of independent rounds.

        Args:
            group1: First group, in turn order.
            group2: Second group, in turn order.
            strategy: Focus strategy for every attacker.
            rounds: Number of rounds (settings default when None).

        Returns:
            BattleResult with tallies and win percentages.

        Raises:
            BattleConfigurationError: If the setup is invalid.
        """
        if rounds is None:
            rounds = get_settings().DEFAULT_ROUNDS
        self._validate(group1, group2, rounds)

        resolver = RoundResolver(
            strategy=strategy,
            rng=self.rng,
            spell_cast_chance=self.spell_cast_chance,
            restore_mana=self.restore_mana,
            record_events=self.record_events,
        )

        results: List[RoundResult] = []
        group1_wins = 0
        group2_wins = 0

        for i in range(rounds):
            result = resolver.resolve(group1, group2, round_number=i + 1)
            if result.winner == RoundState.SIDE1_WON:
                group1_wins += 1
            elif result.winner == RoundState.SIDE2_WON:
                group2_wins += 1
            results.append(result)

        battle = self._analyze_results(results, group1_wins, group2_wins, rounds)
        logger.info(
            "Battle finished after %d rounds (%s): group 1 won %d (%.1f%%), group 2 won %d (%.1f%%)",
            rounds, strategy.name, group1_wins, battle.win_pct1, group2_wins, battle.win_pct2,
        )
        return battle

    def _validate(
        self,
        group1: Sequence[Combatant],
        group2: Sequence[Combatant],
        rounds: int,
    ) -> None:
        """Reject setups that must never reach the round loop."""
        if not group1 or not group2:
            raise BattleConfigurationError("Both groups must have at least one combatant")

        if isinstance(rounds, bool) or not isinstance(rounds, int):
            raise BattleConfigurationError(f"Rounds must be an integer, got {rounds!r}")
        if rounds < 1:
            raise BattleConfigurationError(f"Rounds must be at least 1, got {rounds}")
        if rounds > self.max_rounds:
            raise BattleConfigurationError(
                f"Rounds must be at most {self.max_rounds}, got {rounds}"
            )

        group1_ids = {id(unit) for unit in group1}
        group2_ids = {id(unit) for unit in group2}
        if len(group1_ids) != len(group1) or len(group2_ids) != len(group2):
            raise BattleConfigurationError("A combatant cannot appear twice in one group")
        if group1_ids & group2_ids:
            raise BattleConfigurationError("A combatant cannot belong to both groups")

    def _analyze_results(
        self,
        results: List[RoundResult],
        group1_wins: int,
        group2_wins: int,
        rounds: int,
    ) -> BattleResult:
        """Analyze round results."""
        exchanges = [r.exchanges for r in results]
        avg_exchanges = statistics.mean(exchanges) if exchanges else 0.0

        return BattleResult(
            group1_wins=group1_wins,
            group2_wins=group2_wins,
            rounds=rounds,
            win_pct1=group1_wins * 100 / rounds,
            win_pct2=group2_wins * 100 / rounds,
            avg_exchanges=avg_exchanges,
            win_rate_confidence=self._calculate_confidence_interval(group1_wins, rounds),
            round_results=results,
        )

    def _calculate_confidence_interval(
        self, successes: int, n: int
    ) -> Tuple[float, float]:
        """Calculate Wilson score confidence interval (95%)."""
        if n == 0:
            return (0.0, 1.0)

        z = 1.96
        p = successes / n

        denominator = 1 + z * z / n
        center = (p + z * z / (2 * n)) / denominator

        spread = z * ((p * (1 - p) / n + z * z / (4 * n * n)) ** 0.5) / denominator

        lower = max(0.0, center - spread)
        upper = min(1.0, center + spread)

        return (lower, upper)


def run_battle(
    group1: Sequence[Combatant],
    group2: Sequence[Combatant],
    strategy: FocusStrategy = FocusStrategy.LOWEST_HP,
    rounds: Optional[int] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> BattleResult:
    """
    Run a battle with default simulator settings.

    Args:
        group1: First group.
        group2: Second group.
        strategy: Focus strategy.
        rounds: Number of rounds.
        rng: Random number generator (takes precedence over seed).
        seed: Seed for reproducible results.

    Returns:
        BattleResult.
    """
    simulator = BattleSimulator(seed=seed, rng=rng)
    return simulator.run_battle(group1, group2, strategy, rounds)
