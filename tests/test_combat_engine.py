"""Tests for the Round Resolver."""

import random

import pytest

from src.combat.attack import ActionType
from src.combat.combat_engine import (
    BattleConfigurationError,
    RoundResolver,
    RoundState,
)
from src.combat.combat_unit import create_combatant
from src.combat.targeting import FocusStrategy
from src.core.config import get_settings


def make_duel():
    """Level 1 warrior (group 1) against level 1 mage (group 2)."""
    warrior = create_combatant("Aldric", "warrior", 1, combatant_id="w")
    mage = create_combatant("Morgana", "mage", 1, combatant_id="m")
    return warrior, mage


class TestRoundResolverNoSpells:
    """Deterministic rounds with the spell roll disabled."""

    @pytest.fixture
    def resolver(self):
        return RoundResolver(
            FocusStrategy.LOWEST_HP,
            rng=random.Random(0),
            spell_cast_chance=0.0,
            record_events=True,
        )

    def test_mage_wins_duel(self, resolver):
        warrior, mage = make_duel()

        result = resolver.resolve([warrior], [mage])

        assert result.winner == RoundState.SIDE2_WON
        # W: 60 -> 42 -> 24 -> 6 -> 0, M: 74 -> 67 -> 60 -> 53 -> 46
        assert warrior.health == 0
        assert mage.health == 46
        assert result.exchanges == 5
        assert result.group1_survivors == 0
        assert result.group2_survivors == 1

    def test_events_alternate(self, resolver):
        warrior, mage = make_duel()

        result = resolver.resolve([warrior], [mage])

        assert [e.attacker_id for e in result.events] == ["w", "m"] * 4
        assert all(e.action == ActionType.ATTACK for e in result.events)
        assert [e.amount for e in result.events[:2]] == [7, 18]
        assert result.events[0].defender_health == 67
        assert result.events[-1].killed
        assert result.events[-1].description.endswith("Aldric dies!")
        assert not any(e.killed for e in result.events[:-1])

    def test_resets_health_each_round(self, resolver):
        warrior, mage = make_duel()

        first = resolver.resolve([warrior], [mage], round_number=1)
        second = resolver.resolve([warrior], [mage], round_number=2)

        assert first.winner == second.winner
        assert mage.health == 46
        assert second.events[0].round_number == 2

    def test_group1_wins_when_stronger(self, resolver):
        champion = create_combatant("Hero", "warrior", 100)
        minion = create_combatant("Minion", "mage", 1)

        result = resolver.resolve([champion], [minion])

        assert result.winner == RoundState.SIDE1_WON
        assert champion.health == champion.max_health
        assert result.exchanges == 2

    def test_dead_attackers_skip_turns(self, resolver):
        """A group keeps fighting with whoever is still alive."""
        hero = create_combatant("Hero", "warrior", 100, combatant_id="hero")
        weak = create_combatant("Weak", "mage", 1, combatant_id="weak")
        foe = create_combatant("Foe", "archer", 100, combatant_id="foe")

        result = resolver.resolve([weak, hero], [foe])

        assert result.winner == RoundState.SIDE1_WON
        assert weak.health == 0
        assert all(e.attacker_id != "weak" or e.exchange == 1 for e in result.events)

    def test_focus_map_attached(self, resolver):
        warrior, mage = make_duel()

        result = resolver.resolve([warrior], [mage])

        assert result.focus_map == {"w": "m", "m": "w"}

    def test_rejects_empty_group(self, resolver):
        warrior, _ = make_duel()
        with pytest.raises(BattleConfigurationError):
            resolver.resolve([warrior], [])


class TestRoundResolverSpells:
    """Rounds where every surviving hit is followed by a spell roll."""

    def test_always_cast(self):
        warrior, mage = make_duel()
        resolver = RoundResolver(
            FocusStrategy.LOWEST_HP,
            rng=random.Random(0),
            spell_cast_chance=1.0,
            record_events=True,
        )

        result = resolver.resolve([warrior], [mage])

        actions = [(e.attacker_id, e.action) for e in result.events]
        assert actions == [
            ("w", ActionType.ATTACK),
            ("w", ActionType.SPELL),
            ("m", ActionType.ATTACK),
            ("m", ActionType.SPELL),
            ("w", ActionType.ATTACK),
            ("w", ActionType.SPELL_FAILED),
            ("m", ActionType.ATTACK),
            ("m", ActionType.SPELL),
        ]
        assert result.winner == RoundState.SIDE2_WON
        assert result.exchanges == 3
        assert mage.health == 47
        assert warrior.mana == 3
        assert mage.mana == 20
        assert result.events[1].spell_name == "Heavy Slash"
        assert result.events[5].amount == 0

    def test_no_spell_after_kill(self):
        hero = create_combatant("Hero", "mage", 100)
        minion = create_combatant("Minion", "warrior", 1)
        resolver = RoundResolver(spell_cast_chance=1.0, record_events=True)

        result = resolver.resolve([hero], [minion])

        assert [e.action for e in result.events] == [ActionType.ATTACK]
        assert hero.mana == hero.max_mana

    def test_mana_persists_across_rounds(self):
        warrior, mage = make_duel()
        resolver = RoundResolver(spell_cast_chance=1.0, rng=random.Random(1))

        resolver.resolve([warrior], [mage])
        resolver.resolve([warrior], [mage])

        assert warrior.mana == 3
        assert mage.mana == 10

    def test_mana_restored_when_enabled(self):
        warrior, mage = make_duel()
        resolver = RoundResolver(
            spell_cast_chance=1.0, rng=random.Random(1), restore_mana=True
        )

        resolver.resolve([warrior], [mage])
        resolver.resolve([warrior], [mage])

        assert warrior.mana == 3
        assert mage.mana == 20

    def test_events_not_recorded_by_default(self):
        warrior, mage = make_duel()
        result = RoundResolver(rng=random.Random(3)).resolve([warrior], [mage])
        assert result.events == []

    def test_cast_chance_from_settings(self, monkeypatch):
        monkeypatch.setenv("BATTLE_SIM_SPELL_CAST_CHANCE", "0.2")
        get_settings.cache_clear()
        try:
            assert RoundResolver().spell_cast_chance == 0.2
            assert RoundResolver(spell_cast_chance=0.9).spell_cast_chance == 0.9
        finally:
            monkeypatch.delenv("BATTLE_SIM_SPELL_CAST_CHANCE")
            get_settings.cache_clear()

    @pytest.mark.parametrize("chance", [-0.1, 1.5])
    def test_invalid_cast_chance(self, chance):
        with pytest.raises(BattleConfigurationError):
            RoundResolver(spell_cast_chance=chance)

    def test_same_seed_same_round(self):
        def play(seed):
            group1 = [
                create_combatant("A", "archer", 12, combatant_id="a"),
                create_combatant("B", "mage", 9, combatant_id="b"),
            ]
            group2 = [
                create_combatant("C", "warrior", 11, combatant_id="c"),
                create_combatant("D", "mage", 10, combatant_id="d"),
            ]
            resolver = RoundResolver(
                FocusStrategy.HIGHEST_DAMAGE, rng=random.Random(seed), record_events=True
            )
            result = resolver.resolve(group1, group2)
            return [e.to_dict() for e in result.events], result.winner

        assert play(99) == play(99)
