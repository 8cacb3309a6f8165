# Data Loaders
from .equipment_loader import (
    load_weapons,
    load_armors,
    get_weapon_by_name,
    get_armor_by_name,
    random_weapon,
    random_armor,
)

__all__ = [
    "load_weapons",
    "load_armors",
    "get_weapon_by_name",
    "get_armor_by_name",
    "random_weapon",
    "random_armor",
]
