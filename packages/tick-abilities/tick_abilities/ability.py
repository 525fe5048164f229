"""Combining charges, cooldowns and pool costs into one ready/trigger decision."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Hashable

from tick_abilities.charges import ChargeState, CooldownStrategy
from tick_abilities.cooldown import CooldownState
from tick_abilities.errors import CannotUseAbility

if TYPE_CHECKING:
    from tick_abilities.charges import Charges
    from tick_abilities.cooldown import Cooldown
    from tick_abilities.input import PressedSource
    from tick_abilities.pool import AbilityCosts, Pool


def ability_ready(
    action: Hashable,
    charges: ChargeState,
    cooldowns: CooldownState,
    pool: Pool | None = None,
    costs: AbilityCosts | None = None,
) -> CannotUseAbility | None:
    """Is *action* ready? Returns None if so, else the reason it is not.

    The first configured gate decides:

    1. charges: at least one must be available
    2. cooldown: the global and the action's own cooldown must be ready
    3. pool cost: the pool must hold at least the cost
    4. otherwise the action is always ready
    """
    action_charges = charges.get(action)
    if action_charges is not None:
        if action_charges.available():
            return None
        return CannotUseAbility.NO_CHARGES

    if action in cooldowns:
        return cooldowns.ready(action)

    if pool is not None and costs is not None:
        cost = costs.get(action)
        if cost is None:
            return None
        return pool.available(cost)

    return None


def trigger_ability(
    action: Hashable,
    charges: ChargeState,
    cooldowns: CooldownState,
    pool: Pool | None = None,
    costs: AbilityCosts | None = None,
) -> CannotUseAbility | None:
    """Use *action*: spend a charge or start its cooldown, then pay its cost.

    The pool cost is paid on top of whichever of charges or cooldown
    gated the action. On any failure nothing is mutated.
    """
    err = ability_ready(action, charges, cooldowns, pool, costs)
    if err is not None:
        return err

    cost = None
    if pool is not None and costs is not None:
        cost = costs.get(action)
        if cost is not None:
            err = pool.available(cost)
            if err is not None:
                return err

    action_charges = charges.get_mut(action)
    if action_charges is not None:
        action_charges.expend()
        _start_recharge(action_charges, cooldowns.get_mut(action))
    elif action in cooldowns:
        cooldowns.trigger(action)

    if cost is not None:
        # Affordability was checked above, so this cannot fail.
        pool.expend(cost)
    return None


def _start_recharge(charges: Charges, cooldown: Cooldown | None) -> None:
    """Kick off an idle coupled cooldown once a spend needs recharging."""
    if cooldown is None or not cooldown.is_ready():
        return
    strategy = charges.cooldown_strategy
    if strategy is CooldownStrategy.CONSTANTLY_REFRESH:
        cooldown.restart()
    elif strategy is CooldownStrategy.REFRESH_WHEN_EMPTY and not charges.available():
        cooldown.restart()


@dataclass
class AbilitySet:
    """All ability state of one entity: charges, cooldowns and a pool.

    ``pool`` and ``costs`` are optional; without both, abilities are free.
    """

    charges: ChargeState = field(default_factory=ChargeState)
    cooldowns: CooldownState = field(default_factory=CooldownState)
    pool: Pool | None = None
    costs: AbilityCosts | None = None

    def ready(self, action: Hashable) -> CannotUseAbility | None:
        return ability_ready(
            action, self.charges, self.cooldowns, self.pool, self.costs
        )

    def trigger(self, action: Hashable) -> CannotUseAbility | None:
        return trigger_ability(
            action, self.charges, self.cooldowns, self.pool, self.costs
        )

    def ready_and_pressed(
        self, action: Hashable, inputs: PressedSource
    ) -> CannotUseAbility | None:
        """Ready and held. NOT_PRESSED wins over any readiness failure."""
        if not inputs.pressed(action):
            return CannotUseAbility.NOT_PRESSED
        return self.ready(action)

    def ready_and_just_pressed(
        self, action: Hashable, inputs: PressedSource
    ) -> CannotUseAbility | None:
        """Ready and pressed this step. NOT_PRESSED wins."""
        if not inputs.just_pressed(action):
            return CannotUseAbility.NOT_PRESSED
        return self.ready(action)

    def trigger_if_pressed(
        self, action: Hashable, inputs: PressedSource
    ) -> CannotUseAbility | None:
        if not inputs.pressed(action):
            return CannotUseAbility.NOT_PRESSED
        return self.trigger(action)

    def trigger_if_just_pressed(
        self, action: Hashable, inputs: PressedSource
    ) -> CannotUseAbility | None:
        if not inputs.just_pressed(action):
            return CannotUseAbility.NOT_PRESSED
        return self.trigger(action)

    def tick(self, delta: float) -> None:
        """Advance cooldowns (recharging charges) and regenerate the pool.

        Meant for a pool owned by this set alone. When several sets share
        one pool, drive them with ``make_pool_regen_system`` instead so the
        pool regenerates once per step.
        """
        self.cooldowns.tick(delta, self.charges)
        if self.pool is not None:
            self.pool.regenerate(delta)
