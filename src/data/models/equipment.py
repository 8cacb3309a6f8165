"""Equipment data models (weapons and armor)."""

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from src.core.constants import ARMOR_CURVE_STEEPNESS, MIN_DAMAGE_TAKEN


class EquipmentType(StrEnum):
    """Equipment classification."""
    WEAPON = "weapon"
    ARMOR = "armor"


class Weapon(BaseModel):
    """Weapon model. Its bonus is added verbatim to every attack."""
    name: str = Field(..., description="Display name")
    damage_bonus: int = Field(default=0, ge=0, description="Flat damage added to attacks")

    model_config = ConfigDict(frozen=True)

    @property
    def type(self) -> EquipmentType:
        return EquipmentType.WEAPON

    @property
    def bonus(self) -> int:
        return self.damage_bonus


class Armor(BaseModel):
    """Armor model with an exponential damage mitigation curve."""
    name: str = Field(..., description="Display name")
    defense_bonus: int = Field(default=0, ge=0, description="Defense rating")

    model_config = ConfigDict(frozen=True)

    @property
    def type(self) -> EquipmentType:
        return EquipmentType.ARMOR

    @property
    def bonus(self) -> int:
        return self.defense_bonus

    @property
    def reduction(self) -> float:
        """Fraction of incoming damage absorbed (0.0 to just under 1.0)."""
        return 1 - math.exp(-ARMOR_CURVE_STEEPNESS * self.defense_bonus)

    def reduce_damage(self, incoming: int) -> int:
        """
        Mitigate incoming damage.

        Formula: floor(incoming * (1 - reduction)), never below 1 for a
        positive hit. A zero hit stays zero.

        Args:
            incoming: Raw damage before mitigation.

        Returns:
            Damage that gets through the armor.
        """
        if incoming <= 0:
            return 0
        reduced = math.floor(incoming * (1.0 - self.reduction))
        return max(MIN_DAMAGE_TAKEN, reduced)
