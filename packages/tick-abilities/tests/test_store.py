"""Tests for tick_abilities.store — AbilityStore."""
from __future__ import annotations

import pytest

from tick_abilities.ability import AbilitySet
from tick_abilities.cooldown import Cooldown, CooldownState
from tick_abilities.store import AbilityStore


def test_spawn_assigns_sequential_ids():
    store = AbilityStore()
    assert store.spawn() == 0
    assert store.spawn() == 1
    assert len(store) == 2


def test_spawn_without_set_installs_empty_set():
    store = AbilityStore()
    eid = store.spawn()
    assert store.get(eid) == AbilitySet()


def test_install_and_get():
    store = AbilityStore()
    ability_set = AbilitySet(cooldowns=CooldownState([("dash", Cooldown(1.0))]))
    store.install(7, ability_set)
    assert store.has(7)
    assert store.get(7) is ability_set


def test_install_bumps_next_id():
    store = AbilityStore()
    store.install(5, AbilitySet())
    assert store.spawn() == 6


def test_get_unknown_raises():
    store = AbilityStore()
    with pytest.raises(KeyError, match="Entity 3 has no ability set"):
        store.get(3)


def test_remove():
    store = AbilityStore()
    eid = store.spawn()
    removed = store.remove(eid)
    assert isinstance(removed, AbilitySet)
    assert not store.has(eid)
    with pytest.raises(KeyError):
        store.remove(eid)


def test_entities_and_iteration():
    store = AbilityStore()
    a = store.spawn()
    b = store.spawn()
    assert store.entities() == frozenset({a, b})
    assert [eid for eid, _ in store] == [a, b]


def test_removing_during_iteration_is_safe():
    store = AbilityStore()
    for _ in range(3):
        store.spawn()
    for eid, _ in store:
        store.remove(eid)
    assert len(store) == 0


def test_hooks_fire_on_install_and_remove():
    store = AbilityStore()
    installed = []
    removed = []
    store.on_install(lambda s, e, a: installed.append(e))
    store.on_remove(lambda s, e, a: removed.append(e))

    eid = store.spawn()
    store.remove(eid)

    assert installed == [eid]
    assert removed == [eid]


def test_entities_do_not_share_state():
    store = AbilityStore()
    a = store.spawn(AbilitySet(cooldowns=CooldownState([("dash", Cooldown(1.0))])))
    b = store.spawn(AbilitySet(cooldowns=CooldownState([("dash", Cooldown(1.0))])))
    assert store.get(a).trigger("dash") is None
    assert store.get(b).ready("dash") is None
