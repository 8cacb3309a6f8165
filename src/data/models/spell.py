"""Spell data model."""

from pydantic import BaseModel, ConfigDict, Field


class Spell(BaseModel):
    """A named ability with a fixed damage value and mana cost."""
    name: str = Field(..., description="Display name")
    damage: int = Field(..., ge=0, description="Damage dealt to the target")
    mana_cost: int = Field(..., ge=0, description="Mana spent per cast")

    model_config = ConfigDict(frozen=True)

    def is_affordable(self, mana: int) -> bool:
        return mana >= self.mana_cost
