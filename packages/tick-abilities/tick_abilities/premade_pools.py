"""Premade pools for the two most common resources."""
from __future__ import annotations

from tick_abilities.pool import Pool


class LifePool(Pool):
    """Life (health, hit points). A unit that runs out dies or passes out."""


class ManaPool(Pool):
    """Mana, spent to cast spells according to an AbilityCosts table."""
