"""AbilityStore - per-entity ability state."""
from __future__ import annotations

import logging
from typing import Callable, Iterator

from tick_abilities.ability import AbilitySet

logger = logging.getLogger(__name__)

EntityId = int

# Hook callback signature.
StoreHook = Callable[["AbilityStore", EntityId, AbilitySet], None]


class AbilityStore:
    """Maps entity ids to the AbilitySet each entity owns.

    Stores are installed when an entity is created and dropped when it is
    destroyed; no two entities share an AbilitySet unless the caller
    installs the same object twice.
    """

    def __init__(self) -> None:
        self._sets: dict[EntityId, AbilitySet] = {}
        self._next_id: int = 0
        self._on_install: list[StoreHook] = []
        self._on_remove: list[StoreHook] = []

    def spawn(self, ability_set: AbilitySet | None = None) -> EntityId:
        """Create a new entity owning *ability_set* (empty if None)."""
        eid = self._next_id
        self._next_id += 1
        self.install(eid, ability_set if ability_set is not None else AbilitySet())
        return eid

    def install(self, entity_id: EntityId, ability_set: AbilitySet) -> None:
        """Attach *ability_set* to *entity_id*, replacing any previous one."""
        self._sets[entity_id] = ability_set
        self._next_id = max(self._next_id, entity_id + 1)
        logger.debug("installed ability set on entity %d", entity_id)
        for cb in list(self._on_install):
            cb(self, entity_id, ability_set)

    def remove(self, entity_id: EntityId) -> AbilitySet:
        """Drop *entity_id*'s ability state. Raises KeyError if unknown."""
        if entity_id not in self._sets:
            raise KeyError(f"Entity {entity_id} has no ability set")
        ability_set = self._sets.pop(entity_id)
        logger.debug("removed ability set from entity %d", entity_id)
        for cb in list(self._on_remove):
            cb(self, entity_id, ability_set)
        return ability_set

    def get(self, entity_id: EntityId) -> AbilitySet:
        if entity_id not in self._sets:
            raise KeyError(f"Entity {entity_id} has no ability set")
        return self._sets[entity_id]

    def has(self, entity_id: EntityId) -> bool:
        return entity_id in self._sets

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._sets)

    def __iter__(self) -> Iterator[tuple[EntityId, AbilitySet]]:
        return iter(list(self._sets.items()))

    def __len__(self) -> int:
        return len(self._sets)

    # -- Lifecycle hooks --

    def on_install(self, callback: StoreHook) -> None:
        self._on_install.append(callback)

    def on_remove(self, callback: StoreHook) -> None:
        self._on_remove.append(callback)
