"""Declarative ability configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable

from tick_abilities.ability import AbilitySet
from tick_abilities.charges import (
    MAX_CHARGES,
    Charges,
    ChargeState,
    CooldownStrategy,
    ReplenishStrategy,
)
from tick_abilities.cooldown import Cooldown, CooldownState
from tick_abilities.pool import AbilityCosts

if TYPE_CHECKING:
    from tick_abilities.pool import Pool


@dataclass(frozen=True)
class AbilityDef:
    """Immutable configuration for one action.

    Attributes:
        action: The action this entry configures.
        cooldown: Seconds before reuse (None for no cooldown).
        max_charges: Uses before recharging (None for untracked).
        replenish: How many charges one replenish restores.
        cooldown_strategy: How the cooldown recharges the charges.
        cost: Pool quantity spent per use (None for free).
    """

    action: Hashable
    cooldown: float | None = None
    max_charges: int | None = None
    replenish: ReplenishStrategy = ReplenishStrategy.ONE_AT_A_TIME
    cooldown_strategy: CooldownStrategy = CooldownStrategy.CONSTANTLY_REFRESH
    cost: float | None = None

    def __post_init__(self) -> None:
        if self.cooldown is not None and self.cooldown <= 0:
            raise ValueError(f"cooldown must be > 0, got {self.cooldown}")
        if self.max_charges is not None and not 0 <= self.max_charges <= MAX_CHARGES:
            raise ValueError(
                f"max_charges must be in [0, {MAX_CHARGES}], got {self.max_charges}"
            )
        if self.cost is not None and self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")

    def make_cooldown(self) -> Cooldown | None:
        if self.cooldown is None:
            return None
        return Cooldown(self.cooldown)

    def make_charges(self) -> Charges | None:
        if self.max_charges is None:
            return None
        return Charges(self.max_charges, self.replenish, self.cooldown_strategy)


@dataclass(frozen=True)
class AbilityConfig:
    """Immutable configuration for a whole action set.

    Attributes:
        abilities: One AbilityDef per configured action.
        global_cooldown: Seconds of shared cooldown after any use (None to disable).
    """

    abilities: tuple[AbilityDef, ...] = ()
    global_cooldown: float | None = None

    def __post_init__(self) -> None:
        if self.global_cooldown is not None and self.global_cooldown <= 0:
            raise ValueError(
                f"global_cooldown must be > 0, got {self.global_cooldown}"
            )
        seen: set[Hashable] = set()
        for defn in self.abilities:
            if defn.action in seen:
                raise ValueError(f"Duplicate ability definition for {defn.action!r}")
            seen.add(defn.action)

    def get(self, action: Hashable) -> AbilityDef | None:
        for defn in self.abilities:
            if defn.action == action:
                return defn
        return None

    def build(self, pool: Pool | None = None) -> AbilitySet:
        """Create fresh stores for one entity.

        Costs are only attached when a *pool* is given.
        """
        charges = ChargeState()
        cooldowns = CooldownState()
        costs = AbilityCosts()
        if self.global_cooldown is not None:
            cooldowns.global_cooldown = Cooldown(self.global_cooldown)

        for defn in self.abilities:
            action_charges = defn.make_charges()
            if action_charges is not None:
                charges.set(defn.action, action_charges)
            cooldown = defn.make_cooldown()
            if cooldown is not None:
                cooldowns.set(defn.action, cooldown)
            if defn.cost is not None:
                costs.set(defn.action, defn.cost)

        if pool is None:
            return AbilitySet(charges=charges, cooldowns=cooldowns)
        return AbilitySet(charges=charges, cooldowns=cooldowns, pool=pool, costs=costs)
