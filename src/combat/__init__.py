"""Combat simulation module for the battle simulator.

This module provides the combat-resolution engine:
- Combatants with class-derived stats, equipment and spells
- Focus-strategy targeting
- Round resolution between two groups
- Monte Carlo win rate simulation
"""

# Combatants
from .combat_unit import Combatant, InvalidCombatantError, create_combatant

# Action records
from .attack import (
    ActionType,
    AttackResult,
    CombatEvent,
    DamageResult,
    SpellCastResult,
)

# Targeting
from .targeting import (
    FocusStrategy,
    build_focus_map,
    select_target,
)

# Round Resolver
from .combat_engine import (
    BattleConfigurationError,
    RoundResolver,
    RoundResult,
    RoundState,
)

# Simulation
from .simulation import (
    BattleResult,
    BattleSimulator,
    run_battle,
)

__all__ = [
    # Combatants
    "Combatant",
    "InvalidCombatantError",
    "create_combatant",
    # Action records
    "ActionType",
    "AttackResult",
    "CombatEvent",
    "DamageResult",
    "SpellCastResult",
    # Targeting
    "FocusStrategy",
    "build_focus_map",
    "select_target",
    # Round Resolver
    "BattleConfigurationError",
    "RoundResolver",
    "RoundResult",
    "RoundState",
    # Simulation
    "BattleResult",
    "BattleSimulator",
    "run_battle",
]
