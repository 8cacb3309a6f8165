"""
Battle simulator configuration settings.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import SPELL_CAST_CHANCE


class Settings(BaseSettings):
    """Simulator settings."""

    model_config = SettingsConfigDict(
        env_prefix="BATTLE_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Simulation
    DEFAULT_ROUNDS: int = Field(default=100, ge=1)
    MAX_ROUNDS: int = Field(default=10000, ge=1)
    SPELL_CAST_CHANCE: float = Field(default=SPELL_CAST_CHANCE, ge=0.0, le=1.0)
    DEFAULT_STRATEGY: str = "lowest_hp"
    RESTORE_MANA_BETWEEN_ROUNDS: bool = False
    RANDOM_SEED: Optional[int] = None

    # Diagnostics
    RECORD_EVENTS: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("DEFAULT_STRATEGY")
    @classmethod
    def validate_strategy(cls, value: str) -> str:
        """Normalize to the snake_case strategy name."""
        # Imported here: src.combat imports this module.
        from src.combat.targeting import FocusStrategy

        return FocusStrategy.from_name(value).name.lower()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
