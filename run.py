#!/usr/bin/env python3
"""Run a battle simulation between two sample groups.

Usage:
    python run.py --rounds 100 --strategy highest_damage --seed 7
"""

import argparse
import logging
import random

from src.core.config import get_settings
from src.combat import FocusStrategy, BattleSimulator, create_combatant
from src.data.loaders import random_armor, random_weapon


def build_groups(rng: random.Random, level: int):
    """Two mixed groups with catalog equipment picked by rng."""
    group1 = [
        create_combatant("Aldric", "warrior", level, weapon=random_weapon(rng), armor=random_armor(rng)),
        create_combatant("Sylva", "archer", level, weapon=random_weapon(rng)),
    ]
    group2 = [
        create_combatant("Morgana", "mage", level, armor=random_armor(rng)),
        create_combatant("Brutus", "warrior", level),
    ]
    return group1, group2


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Simulate a group battle")
    parser.add_argument("--rounds", type=int, default=settings.DEFAULT_ROUNDS, help="Rounds to play")
    parser.add_argument("--strategy", type=str, default=settings.DEFAULT_STRATEGY,
                        help="lowest_hp, highest_hp, lowest_damage or highest_damage")
    parser.add_argument("--level", type=int, default=10, help="Level of every sample combatant")
    parser.add_argument("--seed", type=int, default=settings.RANDOM_SEED, help="Random seed")
    parser.add_argument("--log", action="store_true", help="Print the combat log of every round")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.log else settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    rng = random.Random(args.seed)
    group1, group2 = build_groups(rng, args.level)
    try:
        strategy = FocusStrategy.from_name(args.strategy)
    except ValueError as e:
        parser.error(str(e))

    simulator = BattleSimulator(rng=rng, record_events=args.log)
    result = simulator.run_battle(group1, group2, strategy, args.rounds)

    print(f"\nResults after {result.rounds} rounds:")
    print(f"Group 1 won: {result.group1_wins} time(s).")
    print(f"Group 2 won: {result.group2_wins} time(s).")
    print(f"Group 1 win probability: {result.win_pct1:.1f}%")
    print(f"Group 2 win probability: {result.win_pct2:.1f}%")
    low, high = result.win_rate_confidence
    print(f"Group 1 95% interval: {low:.1%} - {high:.1%}")


if __name__ == "__main__":
    main()
