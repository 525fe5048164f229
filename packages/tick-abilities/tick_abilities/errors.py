"""Reasons an ability cannot be used, and configuration errors."""
from __future__ import annotations

import enum


class CannotUseAbility(enum.IntEnum):
    """Why an ability could not be used.

    Only one reason is reported per check. An ability that was not
    pressed reports ``NOT_PRESSED`` even if it is also out of charges,
    and a running global cooldown is reported before the action's own.
    """

    NOT_PRESSED = 0
    NO_CHARGES = 1
    ON_COOLDOWN = 2
    ON_GLOBAL_COOLDOWN = 3
    POOL_INSUFFICIENT = 4

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    CannotUseAbility.NOT_PRESSED: "The ability was not pressed.",
    CannotUseAbility.NO_CHARGES: "No charges available.",
    CannotUseAbility.ON_COOLDOWN: "Cooldown not ready.",
    CannotUseAbility.ON_GLOBAL_COOLDOWN: "Global cooldown not ready.",
    CannotUseAbility.POOL_INSUFFICIENT: "Not enough resources.",
}


class MaxPoolLessThanMinError(ValueError):
    """Raised when a pool's maximum would drop below its minimum."""

    def __init__(self, new_max: float, minimum: float) -> None:
        self.new_max = new_max
        self.minimum = minimum
        super().__init__(
            f"Pool max must be >= {minimum}, got {new_max}"
        )
