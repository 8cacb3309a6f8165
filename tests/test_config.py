"""Tests for simulator settings."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings, get_settings


class TestSettings:
    """Settings loading tests."""

    def test_defaults(self, monkeypatch):
        for name in ("DEFAULT_ROUNDS", "SPELL_CAST_CHANCE", "RESTORE_MANA_BETWEEN_ROUNDS"):
            monkeypatch.delenv(f"BATTLE_SIM_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.DEFAULT_ROUNDS == 100
        assert settings.SPELL_CAST_CHANCE == 0.5
        assert settings.RESTORE_MANA_BETWEEN_ROUNDS is False
        assert settings.RANDOM_SEED is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BATTLE_SIM_DEFAULT_ROUNDS", "250")
        monkeypatch.setenv("BATTLE_SIM_RESTORE_MANA_BETWEEN_ROUNDS", "true")
        monkeypatch.setenv("BATTLE_SIM_RANDOM_SEED", "7")

        settings = Settings(_env_file=None)

        assert settings.DEFAULT_ROUNDS == 250
        assert settings.RESTORE_MANA_BETWEEN_ROUNDS is True
        assert settings.RANDOM_SEED == 7

    def test_invalid_cast_chance(self, monkeypatch):
        monkeypatch.setenv("BATTLE_SIM_SPELL_CAST_CHANCE", "1.5")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize(
        "value,expected",
        [("highest_damage", "highest_damage"), ("Lowest-HP", "lowest_hp"), ("HighestHp", "highest_hp")],
    )
    def test_strategy_normalized(self, monkeypatch, value, expected):
        monkeypatch.setenv("BATTLE_SIM_DEFAULT_STRATEGY", value)
        assert Settings(_env_file=None).DEFAULT_STRATEGY == expected

    def test_unknown_strategy_rejected(self, monkeypatch):
        monkeypatch.setenv("BATTLE_SIM_DEFAULT_STRATEGY", "nearest")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
