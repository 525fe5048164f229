"""Pools: bounded, regenerating quantities that abilities spend.

Life, mana, energy and rage can all be modelled as pools. Unlike charges,
a pool is usually shared by several abilities, each with its own cost
recorded in an :class:`AbilityCosts` table.
"""
from __future__ import annotations

from typing import Hashable, Iterable, Iterator

from tick_abilities.errors import CannotUseAbility, MaxPoolLessThanMinError


class Pool:
    """A reservoir of some quantity between ``MIN`` and ``max``.

    Subclasses set ``MIN`` (almost always zero) and pick a display name.
    ``regen_per_second`` may be negative to model decay.
    """

    MIN: float = 0.0

    def __init__(
        self, current: float, max_: float, regen_per_second: float = 0.0
    ) -> None:
        if max_ < self.MIN:
            raise MaxPoolLessThanMinError(max_, self.MIN)
        if not self.MIN <= current <= max_:
            raise ValueError(
                f"current must be in [{self.MIN}, {max_}], got {current}"
            )
        self._current = current
        self._max = max_
        self.regen_per_second = regen_per_second

    # --- Quantities ---

    @property
    def current(self) -> float:
        return self._current

    def set_current(self, new_quantity: float) -> float:
        """Set the quantity, clamped to ``[MIN, max]``. Returns the stored value."""
        self._current = min(max(new_quantity, self.MIN), self._max)
        return self._current

    @property
    def max(self) -> float:
        return self._max

    def set_max(self, new_max: float) -> None:
        """Change the cap. Raises and leaves the pool untouched below ``MIN``."""
        if new_max < self.MIN:
            raise MaxPoolLessThanMinError(new_max, self.MIN)
        self._max = new_max
        self.set_current(self._current)

    def set_regen_per_second(self, regen_per_second: float) -> None:
        self.regen_per_second = regen_per_second

    def is_full(self) -> bool:
        return self._current == self._max

    def is_empty(self) -> bool:
        return self._current == self.MIN

    # --- Spending ---

    def available(self, amount: float) -> CannotUseAbility | None:
        """None if *amount* can be paid, POOL_INSUFFICIENT otherwise."""
        if self._current >= amount:
            return None
        return CannotUseAbility.POOL_INSUFFICIENT

    def expend(self, amount: float) -> CannotUseAbility | None:
        """Spend *amount*. Nothing is spent if the pool cannot cover it."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        err = self.available(amount)
        if err is not None:
            return err
        self.set_current(self._current - amount)
        return None

    def replenish(self, amount: float) -> None:
        """Add *amount*, silently capped at ``max`` (and floored at ``MIN``)."""
        self.set_current(self._current + amount)

    def regenerate(self, delta: float) -> None:
        """Apply ``regen_per_second`` over *delta* seconds."""
        self.replenish(self.regen_per_second * delta)

    # --- Dunder ---

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._current == other._current
            and self._max == other._max
            and self.regen_per_second == other.regen_per_second
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current={self._current}, max={self._max}, "
            f"regen_per_second={self.regen_per_second})"
        )

    def __str__(self) -> str:
        return f"{self._current}/{self._max}"


class AbilityCosts:
    """What each action costs from one pool.

    Actions without an entry are free.
    """

    def __init__(self, pairs: Iterable[tuple[Hashable, float]] = ()) -> None:
        self._costs: dict[Hashable, float] = {}
        for action, cost in pairs:
            self.set(action, cost)

    def set(self, action: Hashable, cost: float) -> AbilityCosts:
        """Configure *action*'s cost. Returns self for chaining."""
        if cost < 0:
            raise ValueError(f"cost must be >= 0, got {cost}")
        self._costs[action] = cost
        return self

    def get(self, action: Hashable) -> float | None:
        return self._costs.get(action)

    def remove(self, action: Hashable) -> float | None:
        return self._costs.pop(action, None)

    def available(self, action: Hashable, pool: Pool) -> bool:
        """Can *pool* currently pay for *action*?"""
        cost = self._costs.get(action)
        if cost is None:
            return True
        return pool.available(cost) is None

    def pay_cost(self, action: Hashable, pool: Pool) -> CannotUseAbility | None:
        """Expend *action*'s cost from *pool*. Free actions always succeed."""
        cost = self._costs.get(action)
        if cost is None:
            return None
        return pool.expend(cost)

    def __contains__(self, action: object) -> bool:
        return action in self._costs

    def __len__(self) -> int:
        return len(self._costs)

    def __iter__(self) -> Iterator[tuple[Hashable, float]]:
        return iter(list(self._costs.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbilityCosts):
            return NotImplemented
        return self._costs == other._costs

    def __repr__(self) -> str:
        return f"AbilityCosts({self._costs!r})"
