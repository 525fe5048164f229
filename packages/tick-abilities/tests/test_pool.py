"""Tests for tick_abilities.pool — Pool, premade pools and AbilityCosts."""
from __future__ import annotations

import pytest

from tick_abilities.errors import CannotUseAbility, MaxPoolLessThanMinError
from tick_abilities.pool import AbilityCosts, Pool
from tick_abilities.premade_pools import LifePool, ManaPool


class TestPoolConstruction:
    def test_fields(self) -> None:
        pool = ManaPool(5.0, 10.0, 1.5)
        assert pool.current == 5.0
        assert pool.max == 10.0
        assert pool.regen_per_second == 1.5

    def test_keyword_construction(self) -> None:
        pool = LifePool(current=4.0, max_=8.0, regen_per_second=0.5)
        assert pool.max == 8.0
        assert str(pool) == "4.0/8.0"

    def test_current_above_max_raises(self) -> None:
        with pytest.raises(ValueError, match="current must be in"):
            ManaPool(11.0, 10.0)

    def test_negative_current_raises(self) -> None:
        with pytest.raises(ValueError, match="current must be in"):
            LifePool(-1.0, 10.0)

    def test_max_below_min_raises(self) -> None:
        with pytest.raises(MaxPoolLessThanMinError):
            Pool(0.0, -1.0)

    def test_str_and_equality(self) -> None:
        assert str(LifePool(3.0, 10.0)) == "3.0/10.0"
        assert LifePool(3.0, 10.0) == LifePool(3.0, 10.0)
        assert LifePool(3.0, 10.0) != ManaPool(3.0, 10.0)


class TestPoolBounds:
    def test_set_current_cannot_go_below_min(self) -> None:
        pool = ManaPool(0.0, 10.0)
        pool.set_current(-3.0)
        assert pool.current == ManaPool.MIN
        assert pool.is_empty()

    def test_set_current_cannot_exceed_max(self) -> None:
        pool = ManaPool(10.0, 10.0)
        assert pool.set_current(100.0) == 10.0
        assert pool.is_full()

    def test_reducing_max_decreases_current(self) -> None:
        pool = ManaPool(10.0, 10.0)
        pool.set_max(5.0)
        assert pool.max == 5.0
        assert pool.current == 5.0

    def test_raising_max_keeps_current(self) -> None:
        pool = ManaPool(10.0, 10.0)
        pool.set_max(20.0)
        assert pool.current == 10.0
        assert not pool.is_full()

    def test_setting_max_below_min_fails_and_leaves_pool_unchanged(self) -> None:
        pool = ManaPool(10.0, 10.0)
        with pytest.raises(MaxPoolLessThanMinError, match="Pool max must be >= 0.0"):
            pool.set_max(-7.0)
        assert pool.max == 10.0
        assert pool.current == 10.0

    def test_max_pool_error_is_value_error(self) -> None:
        assert issubclass(MaxPoolLessThanMinError, ValueError)


class TestPoolSpending:
    def test_expending_depletes_pool(self) -> None:
        pool = ManaPool(11.0, 11.0)
        assert pool.expend(5.0) is None
        assert pool.current == 6.0
        assert pool.expend(5.0) is None
        assert pool.current == 1.0
        assert pool.expend(5.0) is CannotUseAbility.POOL_INSUFFICIENT
        assert pool.current == 1.0

    def test_expend_exact_amount(self) -> None:
        pool = ManaPool(5.0, 10.0)
        assert pool.expend(5.0) is None
        assert pool.is_empty()

    def test_expend_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            ManaPool(5.0, 10.0).expend(-1.0)

    def test_available(self) -> None:
        pool = ManaPool(5.0, 10.0)
        assert pool.available(5.0) is None
        assert pool.available(5.1) is CannotUseAbility.POOL_INSUFFICIENT

    def test_replenish_caps_at_max(self) -> None:
        pool = LifePool(8.0, 10.0)
        pool.replenish(5.0)
        assert pool.current == 10.0


class TestPoolRegeneration:
    def test_pool_can_regenerate(self) -> None:
        pool = ManaPool(0.0, 10.0, 1.3)
        pool.regenerate(1.0)
        assert pool.current == pytest.approx(1.3)

    def test_regeneration_scales_with_delta(self) -> None:
        pool = ManaPool(0.0, 10.0, 2.0)
        pool.regenerate(0.25)
        assert pool.current == pytest.approx(0.5)

    def test_regeneration_caps_at_max(self) -> None:
        pool = ManaPool(9.0, 10.0, 5.0)
        pool.regenerate(1.0)
        assert pool.current == 10.0

    def test_negative_regen_decays_to_min(self) -> None:
        pool = LifePool(3.0, 10.0, -2.0)
        pool.regenerate(1.0)
        assert pool.current == pytest.approx(1.0)
        pool.regenerate(1.0)
        assert pool.current == 0.0

    def test_set_regen_per_second(self) -> None:
        pool = ManaPool(0.0, 10.0)
        pool.set_regen_per_second(4.0)
        pool.regenerate(0.5)
        assert pool.current == pytest.approx(2.0)


class TestAbilityCosts:
    def test_unconfigured_action_is_free(self) -> None:
        costs = AbilityCosts()
        pool = ManaPool(0.0, 10.0)
        assert costs.get("fireball") is None
        assert costs.available("fireball", pool)
        assert costs.pay_cost("fireball", pool) is None
        assert pool.current == 0.0

    def test_pay_cost(self) -> None:
        costs = AbilityCosts([("fireball", 4.0)])
        pool = ManaPool(10.0, 10.0)
        assert costs.pay_cost("fireball", pool) is None
        assert pool.current == 6.0

    def test_pay_cost_insufficient(self) -> None:
        costs = AbilityCosts().set("fireball", 4.0)
        pool = ManaPool(3.0, 10.0)
        assert not costs.available("fireball", pool)
        assert costs.pay_cost("fireball", pool) is CannotUseAbility.POOL_INSUFFICIENT
        assert pool.current == 3.0

    def test_negative_cost_raises(self) -> None:
        with pytest.raises(ValueError, match="cost must be >= 0"):
            AbilityCosts().set("fireball", -1.0)

    def test_container_protocol(self) -> None:
        costs = AbilityCosts([("fireball", 4.0), ("heal", 2.0)])
        assert len(costs) == 2
        assert "heal" in costs
        assert list(costs) == [("fireball", 4.0), ("heal", 2.0)]
        assert costs.remove("heal") == 2.0
        assert "heal" not in costs
