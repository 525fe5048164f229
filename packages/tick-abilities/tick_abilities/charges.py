"""Charges: limited uses of an action.

An action with charges may only be used while at least one charge is
available. Unlike pools, charges belong to a single action.
"""
from __future__ import annotations

import enum
from typing import Hashable, Iterable, Iterator

from tick_abilities.errors import CannotUseAbility

MAX_CHARGES = 255


class ReplenishStrategy(enum.Enum):
    """How many charges a single replenish restores."""

    ONE_AT_A_TIME = "one_at_a_time"
    ALL_AT_ONCE = "all_at_once"


class CooldownStrategy(enum.Enum):
    """How the action's cooldown drives these charges when it ticks."""

    IGNORE = "ignore"
    CONSTANTLY_REFRESH = "constantly_refresh"
    REFRESH_WHEN_EMPTY = "refresh_when_empty"


def _check_count(name: str, value: int) -> None:
    if not 0 <= value <= MAX_CHARGES:
        raise ValueError(f"{name} must be in [0, {MAX_CHARGES}], got {value}")


class Charges:
    """How many times an action can be used before it must recharge.

    Charges start full. ``current`` always stays within ``[0, max_charges]``.
    """

    __slots__ = ("_current", "_max", "replenish_strategy", "cooldown_strategy")

    def __init__(
        self,
        max_charges: int,
        replenish: ReplenishStrategy = ReplenishStrategy.ONE_AT_A_TIME,
        cooldown_strategy: CooldownStrategy = CooldownStrategy.CONSTANTLY_REFRESH,
    ) -> None:
        _check_count("max_charges", max_charges)
        self._current = max_charges
        self._max = max_charges
        self.replenish_strategy = replenish
        self.cooldown_strategy = cooldown_strategy

    # --- Presets ---

    @classmethod
    def simple(cls, max_charges: int) -> Charges:
        """One at a time, untouched by cooldowns."""
        return cls(max_charges, ReplenishStrategy.ONE_AT_A_TIME, CooldownStrategy.IGNORE)

    @classmethod
    def ammo(cls, max_charges: int) -> Charges:
        """All at once, untouched by cooldowns."""
        return cls(max_charges, ReplenishStrategy.ALL_AT_ONCE, CooldownStrategy.IGNORE)

    @classmethod
    def replenish_one(cls, max_charges: int) -> Charges:
        """One charge back per completed cooldown cycle."""
        return cls(
            max_charges,
            ReplenishStrategy.ONE_AT_A_TIME,
            CooldownStrategy.CONSTANTLY_REFRESH,
        )

    @classmethod
    def replenish_all(cls, max_charges: int) -> Charges:
        """Full reload once the charges run dry and a cycle completes."""
        return cls(
            max_charges,
            ReplenishStrategy.ALL_AT_ONCE,
            CooldownStrategy.REFRESH_WHEN_EMPTY,
        )

    # --- Counts ---

    @property
    def current(self) -> int:
        return self._current

    @property
    def max_charges(self) -> int:
        return self._max

    def available(self) -> bool:
        """Is at least one charge available?"""
        return self._current > 0

    def is_full(self) -> bool:
        return self._current == self._max

    def add_charges(self, charges: int) -> int:
        """Add charges up to the max. Returns the number that did not fit."""
        if charges < 0:
            raise ValueError(f"charges must be >= 0, got {charges}")
        total = self._current + charges
        self._current = min(total, self._max)
        return total - self._current

    def set_charges(self, charges: int) -> int:
        """Set the current count, clamped to ``[0, max]``. Returns the excess."""
        excess = max(charges - self._max, 0)
        self._current = min(max(charges, 0), self._max)
        return excess

    def set_max_charges(self, max_charges: int) -> None:
        """Change the cap. Current charges above it are cut down."""
        _check_count("max_charges", max_charges)
        self._max = max_charges
        self._current = min(self._current, self._max)

    # --- Use ---

    def expend(self) -> CannotUseAbility | None:
        """Spend one charge. Returns NO_CHARGES and changes nothing if empty."""
        if self._current == 0:
            return CannotUseAbility.NO_CHARGES
        self._current -= 1
        return None

    def replenish_amount(self) -> int:
        """Charges restored by one replenish under the current strategy."""
        if self.replenish_strategy is ReplenishStrategy.ALL_AT_ONCE:
            return self._max
        return 1

    def replenish(self) -> int:
        """Restore charges per the replenish strategy. Returns the overflow."""
        return self.add_charges(self.replenish_amount())

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Charges):
            return NotImplemented
        return (
            self._current == other._current
            and self._max == other._max
            and self.replenish_strategy is other.replenish_strategy
            and self.cooldown_strategy is other.cooldown_strategy
        )

    def __repr__(self) -> str:
        return (
            f"Charges(current={self._current}, max_charges={self._max}, "
            f"replenish={self.replenish_strategy.name}, "
            f"cooldown_strategy={self.cooldown_strategy.name})"
        )

    def __str__(self) -> str:
        return f"{self._current}/{self._max}"


class ChargeState:
    """Charges for each action of one entity.

    Actions without an entry are unconstrained: they always have a charge.
    """

    def __init__(
        self, pairs: Iterable[tuple[Hashable, Charges]] = ()
    ) -> None:
        self._charges: dict[Hashable, Charges] = {}
        for action, charges in pairs:
            self.set(action, charges)

    def set(self, action: Hashable, charges: Charges) -> ChargeState:
        """Configure charges for *action*. Returns self for chaining."""
        self._charges[action] = charges
        return self

    def get(self, action: Hashable) -> Charges | None:
        return self._charges.get(action)

    def get_mut(self, action: Hashable) -> Charges | None:
        """Live charges for *action*; mutations apply to this store."""
        return self._charges.get(action)

    def remove(self, action: Hashable) -> Charges | None:
        """Drop the entry for *action*, making it unconstrained."""
        return self._charges.pop(action, None)

    def available(self, action: Hashable) -> bool:
        charges = self._charges.get(action)
        if charges is None:
            return True
        return charges.available()

    def expend(self, action: Hashable) -> CannotUseAbility | None:
        charges = self._charges.get(action)
        if charges is None:
            return None
        return charges.expend()

    def replenish(self, action: Hashable) -> int:
        """Replenish *action*'s charges. No-op (0) when unconfigured."""
        charges = self._charges.get(action)
        if charges is None:
            return 0
        return charges.replenish()

    def actions(self) -> list[Hashable]:
        return list(self._charges)

    def __contains__(self, action: object) -> bool:
        return action in self._charges

    def __len__(self) -> int:
        return len(self._charges)

    def __iter__(self) -> Iterator[tuple[Hashable, Charges]]:
        return iter(list(self._charges.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChargeState):
            return NotImplemented
        return self._charges == other._charges

    def __repr__(self) -> str:
        return f"ChargeState({self._charges!r})"
