# Core simulation modules
from .constants import (
    MIN_LEVEL,
    MAX_LEVEL,
    SPELL_CAST_CHANCE,
    ARMOR_CURVE_STEEPNESS,
)

from .config import Settings, get_settings, settings
from .stat_calculator import CalculatedStats, ClassKind, StatCalculator

__all__ = [
    "MIN_LEVEL",
    "MAX_LEVEL",
    "SPELL_CAST_CHANCE",
    "ARMOR_CURVE_STEEPNESS",
    "Settings",
    "get_settings",
    "settings",
    "CalculatedStats",
    "ClassKind",
    "StatCalculator",
]
