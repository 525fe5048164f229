"""Cooldowns: recovery timers that must fully elapse before reuse."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Hashable, Iterable, Iterator

from tick_abilities.charges import CooldownStrategy
from tick_abilities.errors import CannotUseAbility

if TYPE_CHECKING:
    from tick_abilities.charges import Charges, ChargeState

logger = logging.getLogger(__name__)

_NANOS_PER_SECOND = 1_000_000_000


def _to_nanos(seconds: float) -> int:
    return round(seconds * _NANOS_PER_SECOND)


def _check_duration(name: str, seconds: float) -> int:
    nanos = _to_nanos(seconds)
    if nanos <= 0:
        raise ValueError(f"{name} must be > 0, got {seconds}")
    return nanos


class Cooldown:
    """A timer counting up from zero to ``max_time``.

    The cooldown is ready once the elapsed time reaches ``max_time``
    (inclusive). Fresh cooldowns start ready. Times are seconds on the
    public API and whole nanoseconds internally, so repeated small ticks
    land exactly on the boundary.
    """

    __slots__ = ("_max_ns", "_elapsed_ns")

    def __init__(self, max_time: float) -> None:
        self._max_ns = _check_duration("max_time", max_time)
        self._elapsed_ns = self._max_ns

    @classmethod
    def from_secs(cls, seconds: float) -> Cooldown:
        return cls(seconds)

    # --- Time accessors ---

    @property
    def max_time(self) -> float:
        return self._max_ns / _NANOS_PER_SECOND

    def set_max_time(self, max_time: float) -> None:
        """Change the period. Elapsed time is clamped to the new period."""
        self._max_ns = _check_duration("max_time", max_time)
        self._elapsed_ns = min(self._elapsed_ns, self._max_ns)

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_ns / _NANOS_PER_SECOND

    def set_elapsed(self, elapsed_time: float) -> None:
        self._elapsed_ns = min(max(_to_nanos(elapsed_time), 0), self._max_ns)

    @property
    def remaining(self) -> float:
        return (self._max_ns - self._elapsed_ns) / _NANOS_PER_SECOND

    def set_remaining(self, remaining: float) -> None:
        remaining_ns = min(max(_to_nanos(remaining), 0), self._max_ns)
        self._elapsed_ns = self._max_ns - remaining_ns

    # --- State ---

    def is_ready(self) -> bool:
        return self._elapsed_ns >= self._max_ns

    def ready(self) -> CannotUseAbility | None:
        """None when ready, ON_COOLDOWN otherwise."""
        if self.is_ready():
            return None
        return CannotUseAbility.ON_COOLDOWN

    def trigger(self) -> CannotUseAbility | None:
        """Start the cooldown if it is ready. Unchanged on failure."""
        err = self.ready()
        if err is not None:
            return err
        self._elapsed_ns = 0
        return None

    def refresh(self) -> None:
        """Make the cooldown immediately ready."""
        self._elapsed_ns = self._max_ns

    def restart(self) -> None:
        """Start a new cycle regardless of readiness."""
        self._elapsed_ns = 0

    def tick(self, delta: float, charges: Charges | None = None) -> None:
        """Advance by *delta* seconds, optionally recharging *charges*.

        Without coupled charges the timer simply fills up to ``max_time``.
        With coupled charges every completed cycle is fed to the charges
        according to their cooldown strategy; the leftover time carries
        into the next cycle. Once the charges cannot take any more, or a
        refresh-when-empty reload has happened, the timer stops at
        ``max_time``.
        """
        if delta < 0:
            raise ValueError(f"delta must be >= 0, got {delta}")
        if self._elapsed_ns >= self._max_ns:
            return

        delta_ns = _to_nanos(delta)
        if charges is None or charges.cooldown_strategy is CooldownStrategy.IGNORE:
            self._elapsed_ns = min(self._elapsed_ns + delta_ns, self._max_ns)
            return

        completed, remainder = divmod(self._elapsed_ns + delta_ns, self._max_ns)
        excess = _recharge(charges, completed)
        # A reload ends the cycle; the next one starts when the charges empty.
        reloaded = (
            completed > 0
            and charges.cooldown_strategy is CooldownStrategy.REFRESH_WHEN_EMPTY
            and charges.available()
        )
        if excess == 0 and not reloaded:
            self._elapsed_ns = remainder
            return
        self._elapsed_ns = self._max_ns
        if excess:
            logger.debug(
                "cooldown pinned: charges saturated at %s with %d excess",
                charges,
                excess,
            )

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cooldown):
            return NotImplemented
        return self._max_ns == other._max_ns and self._elapsed_ns == other._elapsed_ns

    def __repr__(self) -> str:
        return f"Cooldown(max_time={self.max_time}, elapsed_time={self.elapsed_time})"


def _recharge(charges: Charges, completed: int) -> int:
    """Apply *completed* cycles to *charges*. Returns what did not fit."""
    if completed == 0:
        return 0
    if charges.cooldown_strategy is CooldownStrategy.REFRESH_WHEN_EMPTY:
        if charges.available():
            return completed
        # Only the first cycle can reload an empty magazine.
        return charges.replenish() + completed - 1
    return charges.add_charges(completed * charges.replenish_amount())


class CooldownState:
    """Per-action cooldowns of one entity plus an optional global cooldown.

    Actions without an entry have no cooldown of their own, but the
    global cooldown still gates them.
    """

    def __init__(
        self,
        pairs: Iterable[tuple[Hashable, Cooldown]] = (),
        global_cooldown: Cooldown | None = None,
    ) -> None:
        self._cooldowns: dict[Hashable, Cooldown] = {}
        self.global_cooldown = global_cooldown
        for action, cooldown in pairs:
            self.set(action, cooldown)

    # --- Configuration ---

    def set(self, action: Hashable, cooldown: Cooldown) -> CooldownState:
        """Configure a cooldown for *action*. Returns self for chaining."""
        self._cooldowns[action] = cooldown
        return self

    def get(self, action: Hashable) -> Cooldown | None:
        return self._cooldowns.get(action)

    def get_mut(self, action: Hashable) -> Cooldown | None:
        """Live cooldown for *action*; mutations apply to this store."""
        return self._cooldowns.get(action)

    def remove(self, action: Hashable) -> Cooldown | None:
        return self._cooldowns.pop(action, None)

    def actions(self) -> list[Hashable]:
        return list(self._cooldowns)

    # --- Readiness ---

    def gcd_ready(self) -> CannotUseAbility | None:
        if self.global_cooldown is None or self.global_cooldown.is_ready():
            return None
        return CannotUseAbility.ON_GLOBAL_COOLDOWN

    def ready(self, action: Hashable) -> CannotUseAbility | None:
        """Global cooldown first, then the action's own cooldown."""
        err = self.gcd_ready()
        if err is not None:
            return err
        cooldown = self._cooldowns.get(action)
        if cooldown is None:
            return None
        return cooldown.ready()

    def trigger(self, action: Hashable) -> CannotUseAbility | None:
        """Restart *action*'s cooldown and the global cooldown.

        Nothing changes unless ``ready(action)`` passes.
        """
        err = self.ready(action)
        if err is not None:
            return err
        cooldown = self._cooldowns.get(action)
        if cooldown is not None:
            cooldown.restart()
        if self.global_cooldown is not None:
            self.global_cooldown.restart()
        return None

    # --- Time ---

    def tick(self, delta: float, charges: ChargeState | None = None) -> None:
        """Advance every cooldown by *delta* seconds.

        Each per-action cooldown recharges the matching entry of *charges*
        (when given). The global cooldown never drives charges.
        """
        for action, cooldown in list(self._cooldowns.items()):
            coupled = charges.get_mut(action) if charges is not None else None
            cooldown.tick(delta, coupled)
        if self.global_cooldown is not None:
            self.global_cooldown.tick(delta)

    # --- Dunder ---

    def __contains__(self, action: object) -> bool:
        return action in self._cooldowns

    def __len__(self) -> int:
        return len(self._cooldowns)

    def __iter__(self) -> Iterator[tuple[Hashable, Cooldown]]:
        return iter(list(self._cooldowns.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CooldownState):
            return NotImplemented
        return (
            self._cooldowns == other._cooldowns
            and self.global_cooldown == other.global_cooldown
        )

    def __repr__(self) -> str:
        return (
            f"CooldownState({self._cooldowns!r}, "
            f"global_cooldown={self.global_cooldown!r})"
        )
