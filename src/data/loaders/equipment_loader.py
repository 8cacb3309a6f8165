"""Equipment catalog loader."""

import json
import random
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.equipment import Armor, Weapon


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
EQUIPMENT_FILE = DATA_DIR / "equipment.json"


@lru_cache(maxsize=1)
def _load_catalog() -> dict:
    with open(EQUIPMENT_FILE, "r", encoding="utf-8") as f:
        return json.load(f)


@lru_cache(maxsize=1)
def load_weapons() -> tuple[Weapon, ...]:
    """Load all catalog weapons from JSON file.

    Returns:
        Tuple of Weapon objects in catalog order.
    """
    return tuple(Weapon(**item) for item in _load_catalog()["weapons"])


@lru_cache(maxsize=1)
def load_armors() -> tuple[Armor, ...]:
    """Load all catalog armors from JSON file.

    Returns:
        Tuple of Armor objects in catalog order.
    """
    return tuple(Armor(**item) for item in _load_catalog()["armors"])


def get_weapon_by_name(name: str) -> Weapon:
    """Get a catalog weapon by name.

    Raises:
        KeyError: If no weapon has that name.
    """
    for weapon in load_weapons():
        if weapon.name.lower() == name.lower():
            return weapon
    raise KeyError(f"Unknown weapon: {name}")


def get_armor_by_name(name: str) -> Armor:
    """Get a catalog armor by name.

    Raises:
        KeyError: If no armor has that name.
    """
    for armor in load_armors():
        if armor.name.lower() == name.lower():
            return armor
    raise KeyError(f"Unknown armor: {name}")


def random_weapon(rng: Optional[random.Random] = None) -> Weapon:
    """Pick a catalog weapon uniformly at random.

    Args:
        rng: Random number generator for deterministic selection.
    """
    rng = rng or random.Random()
    return rng.choice(load_weapons())


def random_armor(rng: Optional[random.Random] = None) -> Armor:
    """Pick a catalog armor uniformly at random.

    Args:
        rng: Random number generator for deterministic selection.
    """
    rng = rng or random.Random()
    return rng.choice(load_armors())
