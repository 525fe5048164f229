"""Pressed-state of actions, as reported by an input layer."""
from __future__ import annotations

from typing import Hashable, Protocol


class PressedSource(Protocol):
    def pressed(self, action: Hashable) -> bool: ...
    def just_pressed(self, action: Hashable) -> bool: ...


class ActionState:
    """Which actions are held, and which were pressed during this step.

    Call :meth:`press` / :meth:`release` while processing input, then
    :meth:`tick` once the step is over so ``just_pressed`` only reports
    the first step of a hold.
    """

    def __init__(self) -> None:
        self._held: set[Hashable] = set()
        self._just_pressed: set[Hashable] = set()

    def press(self, action: Hashable) -> None:
        if action not in self._held:
            self._just_pressed.add(action)
        self._held.add(action)

    def release(self, action: Hashable) -> None:
        self._held.discard(action)
        self._just_pressed.discard(action)

    def release_all(self) -> None:
        self._held.clear()
        self._just_pressed.clear()

    def pressed(self, action: Hashable) -> bool:
        return action in self._held

    def just_pressed(self, action: Hashable) -> bool:
        return action in self._just_pressed

    def released(self, action: Hashable) -> bool:
        return action not in self._held

    def tick(self) -> None:
        """End the current step. Held actions stay pressed."""
        self._just_pressed.clear()
