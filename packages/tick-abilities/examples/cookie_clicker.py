"""Cookie Clicker -- per-action cooldowns driven by a scheduler.

Demonstrates:
- Declaring abilities with AbilityConfig / AbilityDef
- Spawning an entity with its own AbilitySet
- Scripted input through ActionState
- Registering cooldown, cast and input systems in order
- Reading CannotUseAbility reasons when a press is rejected

Run: python -m examples.cookie_clicker
"""

import enum

from tick_abilities import (
    AbilityConfig,
    AbilityDef,
    AbilityStore,
    ActionState,
    CannotUseAbility,
    Scheduler,
    StepContext,
    make_cooldown_system,
    make_input_system,
)


class CookieAbility(enum.Enum):
    ADD_ONE = enum.auto()
    DOUBLE_COOKIES = enum.auto()


CONFIG = AbilityConfig(
    abilities=(
        AbilityDef(CookieAbility.ADD_ONE, cooldown=0.1),
        AbilityDef(CookieAbility.DOUBLE_COOKIES, cooldown=5.0),
    ),
)

# Tick at which each ability is pressed.
SCRIPT = {
    1: [CookieAbility.ADD_ONE],
    2: [CookieAbility.ADD_ONE],
    3: [CookieAbility.ADD_ONE, CookieAbility.DOUBLE_COOKIES],
    5: [CookieAbility.ADD_ONE],
    6: [CookieAbility.DOUBLE_COOKIES],
    60: [CookieAbility.DOUBLE_COOKIES],
}


def main() -> None:
    print("=== Cookie Clicker ===\n")

    store = AbilityStore()
    cookie = store.spawn(CONFIG.build())
    inputs = {cookie: ActionState()}
    score = {"cookies": 0}

    def script_system(s: AbilityStore, ctx: StepContext) -> None:
        action_state = inputs[cookie]
        action_state.release_all()
        for ability in SCRIPT.get(ctx.tick_number, []):
            action_state.press(ability)

    def cookie_system(s: AbilityStore, ctx: StepContext) -> None:
        abilities = s.get(cookie)
        action_state = inputs[cookie]
        for ability in CookieAbility:
            result = abilities.trigger_if_just_pressed(ability, action_state)
            if result is CannotUseAbility.NOT_PRESSED:
                continue
            if result is not None:
                print(f"  tick {ctx.tick_number:>2}  |  {ability.name}: {result.message}")
                continue
            if ability is CookieAbility.ADD_ONE:
                score["cookies"] += 1
            else:
                score["cookies"] *= 2
            print(
                f"  tick {ctx.tick_number:>2}  |  {ability.name}"
                f"  ->  {score['cookies']} cookies"
            )

    # 20 ticks per second: ADD_ONE recovers every 2 ticks.
    scheduler = Scheduler(store, tps=20)
    scheduler.add_system(make_cooldown_system())
    scheduler.add_system(script_system)
    scheduler.add_system(cookie_system)
    scheduler.add_system(make_input_system(inputs))

    scheduler.run(120)

    print(f"\nDone. {score['cookies']} cookies after {scheduler.clock.elapsed:.1f}s.")


if __name__ == "__main__":
    main()
