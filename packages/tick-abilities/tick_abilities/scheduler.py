"""Scheduler - fixed-timestep stepping of ability systems."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_abilities.store import AbilityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StepContext:
    tick_number: int
    dt: float
    elapsed: float


System = Callable[["AbilityStore", StepContext], None]


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> StepContext:
        """Move one step forward. *dt* overrides the fixed step length."""
        step_dt = self._dt if dt is None else dt
        if step_dt < 0:
            raise ValueError(f"dt must be >= 0, got {step_dt}")
        self._tick_number += 1
        self._elapsed += step_dt
        return StepContext(
            tick_number=self._tick_number, dt=step_dt, elapsed=self._elapsed
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0


class Scheduler:
    """Runs registered systems once per step, in registration order.

    Register time-advance systems (cooldowns, pool regeneration) before
    the systems that trigger abilities from input, so every store is
    ticked exactly once per step before any trigger.
    """

    def __init__(self, store: AbilityStore, tps: int = 20) -> None:
        self._store = store
        self._clock = Clock(tps)
        self._systems: list[System] = []

    @property
    def store(self) -> AbilityStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, dt: float | None = None) -> StepContext:
        """Run one step. Pass *dt* for a variable-length step (e.g. a stall)."""
        ctx = self._clock.advance(dt)
        logger.debug("step %d (dt=%.4fs)", ctx.tick_number, ctx.dt)
        for system in self._systems:
            system(self._store, ctx)
        return ctx

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
