"""Charges, cooldowns and resource pools for abilities in tick-driven games."""
from tick_abilities.ability import AbilitySet, ability_ready, trigger_ability
from tick_abilities.charges import (
    Charges,
    ChargeState,
    CooldownStrategy,
    ReplenishStrategy,
)
from tick_abilities.config import AbilityConfig, AbilityDef
from tick_abilities.cooldown import Cooldown, CooldownState
from tick_abilities.errors import CannotUseAbility, MaxPoolLessThanMinError
from tick_abilities.input import ActionState, PressedSource
from tick_abilities.pool import AbilityCosts, Pool
from tick_abilities.premade_pools import LifePool, ManaPool
from tick_abilities.scheduler import Clock, Scheduler, StepContext
from tick_abilities.store import AbilityStore, EntityId
from tick_abilities.systems import (
    make_cooldown_system,
    make_input_system,
    make_pool_regen_system,
)

__all__ = [
    "AbilityConfig",
    "AbilityCosts",
    "AbilityDef",
    "AbilitySet",
    "AbilityStore",
    "ActionState",
    "CannotUseAbility",
    "ChargeState",
    "Charges",
    "Clock",
    "Cooldown",
    "CooldownState",
    "CooldownStrategy",
    "EntityId",
    "LifePool",
    "ManaPool",
    "MaxPoolLessThanMinError",
    "Pool",
    "PressedSource",
    "ReplenishStrategy",
    "Scheduler",
    "StepContext",
    "ability_ready",
    "make_cooldown_system",
    "make_input_system",
    "make_pool_regen_system",
    "trigger_ability",
]
