# Data Models
from .equipment import Armor, EquipmentType, Weapon
from .spell import Spell

__all__ = [
    "Armor",
    "EquipmentType",
    "Weapon",
    "Spell",
]
