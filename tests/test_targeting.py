"""
Tests for the hit-test strategies.

Both strategies must pick at most one missile, fall back to the
missile closest to impact, and do nothing on an empty field.
"""

import pytest

from planet_defense.models.missile import Missile
from planet_defense.models.targeting import (
    HitTest,
    RadialHitTest,
    ShapeHitTest,
    make_hit_test,
)


def _field():
    return [
        Missile(x=100, y=100, radius=20, speed=40),
        Missile(x=300, y=200, radius=20, speed=40),
    ]


# ── Shared contract ────────────────────────────────────────────────────────


@pytest.mark.parametrize("strategy", [RadialHitTest(), ShapeHitTest()])
class TestHitTestContract:
    def test_empty_field_selects_nothing(self, strategy):
        assert strategy.select([], 10, 10) is None

    def test_direct_hit_on_centre(self, strategy):
        assert strategy.select(_field(), 300, 200) == 1

    def test_miss_falls_back_to_lowest(self, strategy):
        assert strategy.select(_field(), 700, 10) == 1

    def test_fallback_tie_takes_first(self, strategy):
        missiles = [
            Missile(x=100, y=250, radius=20, speed=40),
            Missile(x=300, y=250, radius=20, speed=40),
        ]
        assert strategy.select(missiles, 700, 10) == 0

    def test_overlap_takes_first_in_order(self, strategy):
        missiles = [
            Missile(x=100, y=100, radius=20, speed=40),
            Missile(x=101, y=101, radius=20, speed=40),
        ]
        assert strategy.select(missiles, 100, 100) == 0


# ── Radial ─────────────────────────────────────────────────────────────────


class TestRadialHitTest:
    def test_enlarged_reach(self):
        ht = RadialHitTest()
        m = Missile(x=0, y=0, radius=20, speed=40)
        assert ht.hits(m, 25.9, 0)
        assert ht.hits(m, 18, 18)
        assert not ht.hits(m, 26.1, 0)

    def test_custom_enlargement(self):
        ht = RadialHitTest(enlargement=1.0)
        m = Missile(x=0, y=0, radius=20, speed=40)
        assert not ht.hits(m, 21, 0)

    def test_near_hit_beats_fallback(self):
        # (115, 100) is inside the radial reach of the upper missile
        assert RadialHitTest().select(_field(), 115, 100) == 0


# ── Shape ──────────────────────────────────────────────────────────────────


class TestShapeHitTest:
    def test_body(self):
        m = Missile(x=100, y=100, radius=20, speed=40)
        assert ShapeHitTest().hits(m, 103, 115)

    def test_nose(self):
        m = Missile(x=100, y=100, radius=20, speed=40)
        assert ShapeHitTest().hits(m, 100, 75)
        assert not ShapeHitTest().hits(m, 103, 75)

    def test_fins(self):
        m = Missile(x=100, y=100, radius=20, speed=40)
        assert ShapeHitTest().hits(m, 94, 124)
        assert ShapeHitTest().hits(m, 106, 124)

    def test_beside_body_misses(self):
        m = Missile(x=100, y=100, radius=20, speed=40)
        assert not ShapeHitTest().hits(m, 115, 100)

    def test_outside_silhouette_uses_fallback(self):
        # Radial would take missile 0 here; the exact shape does not
        assert ShapeHitTest().select(_field(), 115, 100) == 1


# ── Factory ────────────────────────────────────────────────────────────────


class TestFactory:
    def test_by_name(self):
        assert isinstance(make_hit_test("radial"), RadialHitTest)
        assert isinstance(make_hit_test("shape"), ShapeHitTest)

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            make_hit_test("cone")

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            HitTest()

    def test_subclass_must_implement_find(self):
        class Incomplete(HitTest):
            name = "incomplete"

        with pytest.raises(TypeError):
            Incomplete()

    def test_subclass_inherits_fallback(self):
        class NeverHits(HitTest):
            name = "never"

            def find(self, missiles, x, y):
                return None

        assert NeverHits().select(_field(), 100, 100) == 1
