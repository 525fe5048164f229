"""System factories that advance ability state each step."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Hashable, Mapping

if TYPE_CHECKING:
    from tick_abilities.input import ActionState
    from tick_abilities.scheduler import StepContext, System
    from tick_abilities.store import AbilityStore, EntityId


def make_cooldown_system(
    on_ready: Callable[[AbilityStore, StepContext, EntityId, Hashable], None]
    | None = None,
) -> System:
    """Return a system that ticks every entity's cooldowns by ``ctx.dt``.

    Each per-action cooldown recharges the entity's matching charges.
    ``on_ready(store, ctx, entity_id, action)`` fires for each per-action
    cooldown that became ready during the step.
    """

    def cooldown_system(store: AbilityStore, ctx: StepContext) -> None:
        for eid, ability_set in store:
            cooldowns = ability_set.cooldowns
            if on_ready is None:
                cooldowns.tick(ctx.dt, ability_set.charges)
                continue

            waiting = [action for action, cd in cooldowns if not cd.is_ready()]
            cooldowns.tick(ctx.dt, ability_set.charges)
            for action in waiting:
                cooldown = cooldowns.get(action)
                if cooldown is not None and cooldown.is_ready():
                    on_ready(store, ctx, eid, action)

    return cooldown_system


def make_pool_regen_system() -> System:
    """Return a system that regenerates every entity's pool by ``ctx.dt``.

    A pool shared by several entities regenerates once per step.
    """

    def pool_regen_system(store: AbilityStore, ctx: StepContext) -> None:
        seen: set[int] = set()
        for _eid, ability_set in store:
            pool = ability_set.pool
            if pool is None or id(pool) in seen:
                continue
            seen.add(id(pool))
            pool.regenerate(ctx.dt)

    return pool_regen_system


def make_input_system(inputs: Mapping[EntityId, ActionState]) -> System:
    """Return a system that ends the input step for each entity.

    Register it last so gameplay systems still see this step's
    just-pressed actions.
    """

    def input_system(store: AbilityStore, ctx: StepContext) -> None:
        for action_state in inputs.values():
            action_state.tick()

    return input_system
