"""Battle Simulator Game Constants."""

from typing import Final

# =============================================================================
# LEVELS
# =============================================================================
MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 100

# =============================================================================
# CLASS STAT COEFFICIENTS
# =============================================================================
# Each stat is derived as `base + per_level * level`.
# Format: {class: {stat: (base, per_level)}}
CLASS_STAT_COEFFICIENTS: Final[dict[str, dict[str, tuple[int, int]]]] = {
    "warrior": {
        "strength": (0, 5),
        "dexterity": (5, 1),
        "intelligence": (2, 2),
    },
    "archer": {
        "strength": (5, 2),
        "dexterity": (10, 5),
        "intelligence": (2, 1),
    },
    "mage": {
        "strength": (5, 1),
        "dexterity": (2, 2),
        "intelligence": (10, 5),
    },
}

# max_health = base + HEALTH_PER_STRENGTH * strength
BASE_HEALTH_BY_CLASS: Final[dict[str, int]] = {
    "warrior": 40,
    "archer": 40,
    "mage": 50,
}
HEALTH_PER_STRENGTH: Final[int] = 4

# max_mana = MANA_PER_INTELLIGENCE * intelligence
MANA_PER_INTELLIGENCE: Final[int] = 2

# =============================================================================
# ATTACK DAMAGE
# =============================================================================
# Base attack damage = primary stat + LEVEL_MULTIPLIER * level
ATTACK_STAT_BY_CLASS: Final[dict[str, str]] = {
    "warrior": "strength",
    "archer": "dexterity",
    "mage": "intelligence",
}
ATTACK_LEVEL_MULTIPLIER: Final[dict[str, int]] = {
    "warrior": 2,
    "archer": 1,
    "mage": 3,
}

ATTACK_VERBS: Final[dict[str, str]] = {
    "warrior": "swings a sword at",
    "archer": "shoots an arrow at",
    "mage": "shoots a firebolt at",
}

# =============================================================================
# SPELLS
# =============================================================================
# Two signature spells per class, same formulas for every class.
# damage = base + per_level * level
SPELL_DAMAGE_FORMULAS: Final[list[tuple[int, int]]] = [
    (10, 3),  # first signature spell
    (10, 4),  # second signature spell
]
SPELL_MANA_COSTS: Final[list[int]] = [5, 8]

SPELL_NAMES_BY_CLASS: Final[dict[str, tuple[str, str]]] = {
    "warrior": ("Heavy Slash", "Smite"),
    "archer": ("Power Shot", "Bear Trap"),
    "mage": ("Ice Shard", "Fire Blast"),
}

# Chance to follow an attack with the first signature spell
SPELL_CAST_CHANCE: Final[float] = 0.5

# =============================================================================
# ARMOR
# =============================================================================
# reduction = 1 - exp(-ARMOR_CURVE_STEEPNESS * defense_bonus)
ARMOR_CURVE_STEEPNESS: Final[float] = 0.01
MIN_DAMAGE_TAKEN: Final[int] = 1
