"""
Unit tests for Planet Defense models.

Covers missile kinematics, silhouette geometry, the missile store,
explosion lifecycle, spawner difficulty ramp and the geometry helpers.
"""

import random

import pytest

from planet_defense.config import (
    EXPLOSION_DURATION,
    MISSILE_RADIUS_MIN,
    SPAWN_DECAY,
    SPAWN_INTERVAL_INITIAL,
    SPAWN_INTERVAL_MIN,
)
from planet_defense.models.explosion import Explosion, ExplosionManager
from planet_defense.models.missile import (
    Missile,
    MissileManager,
    Silhouette,
    nearest_impact_index,
)
from planet_defense.models.spawner import Spawner
from planet_defense.utils.functions import (
    clamp,
    distance_squared,
    point_in_rect,
    point_in_triangle,
)


class FixedRandom(random.Random):
    """Random source that always returns the same value."""

    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


# ── Geometry helpers ───────────────────────────────────────────────────────


class TestGeometry:
    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_distance_squared(self):
        assert distance_squared(0, 0, 3, 4) == 25

    def test_point_in_rect_edges_inclusive(self):
        assert point_in_rect(0, 0, 0, 0, 10, 10)
        assert point_in_rect(10, 10, 0, 0, 10, 10)
        assert not point_in_rect(10.1, 5, 0, 0, 10, 10)

    def test_point_in_triangle_either_winding(self):
        a, b, c = (0, 0), (10, 0), (0, 10)
        assert point_in_triangle(2, 2, a, b, c)
        assert point_in_triangle(2, 2, a, c, b)
        assert not point_in_triangle(8, 8, a, b, c)

    def test_degenerate_triangle_contains_nothing(self):
        assert not point_in_triangle(1, 0, (0, 0), (2, 0), (4, 0))


# ── Missile ────────────────────────────────────────────────────────────────


class TestMissile:
    def test_update_moves_down_by_speed(self):
        m = Missile(x=100, y=0, radius=20, speed=50)
        m.update(1000)
        assert m.y == pytest.approx(50)
        m.update(500)
        assert m.y == pytest.approx(75)

    def test_zero_delta_does_not_move(self):
        m = Missile(x=100, y=10, radius=20, speed=50)
        m.update(0)
        assert m.y == 10

    def test_landed_only_when_fully_below_ground(self):
        m = Missile(x=100, y=620, radius=20, speed=50)
        assert not m.has_landed(600)
        m.y = 620.5
        assert m.has_landed(600)

    def test_huge_delta_is_finite(self):
        m = Missile(x=100, y=0, radius=20, speed=70)
        m.update(1e12)
        assert m.has_landed(600)


class TestSilhouette:
    def test_proportions(self):
        shape = Silhouette.for_radius(20)
        assert shape.body == pytest.approx((-4, -16, 8, 32))
        assert shape.nose[2] == pytest.approx((0, -32))

    def test_fins_mirror_each_other(self):
        shape = Silhouette.for_radius(20)
        for (lx, ly), (rx, ry) in zip(shape.left_fin, shape.right_fin):
            assert lx == pytest.approx(-rx)
            assert ly == pytest.approx(ry)

    def test_fin_extends_below_body(self):
        shape = Silhouette.for_radius(20)
        _, top, _, height = shape.body
        assert max(p[1] for p in shape.left_fin) > top + height


class TestMissileManager:
    def test_add_and_pop(self):
        mgr = MissileManager()
        m = Missile(x=1, y=2, radius=20, speed=40)
        mgr.add(m)
        assert len(mgr) == 1
        assert mgr.pop(0) is m
        assert mgr.active_count == 0

    def test_advance_moves_all(self):
        mgr = MissileManager()
        mgr.add(Missile(x=0, y=0, radius=20, speed=100))
        mgr.add(Missile(x=0, y=10, radius=20, speed=50))
        mgr.advance(100)
        assert [m.y for m in mgr] == pytest.approx([10, 15])

    def test_nearest_impact_empty(self):
        assert nearest_impact_index([]) is None

    def test_nearest_impact_largest_y(self):
        mgr = MissileManager()
        for y in (10, 300, 200):
            mgr.add(Missile(x=0, y=y, radius=20, speed=40))
        assert nearest_impact_index(mgr) == 1

    def test_nearest_impact_tie_goes_to_first(self):
        mgr = MissileManager()
        for y in (300, 300):
            mgr.add(Missile(x=0, y=y, radius=20, speed=40))
        assert nearest_impact_index(mgr) == 0

    def test_reset(self):
        mgr = MissileManager()
        mgr.add(Missile(x=0, y=0, radius=20, speed=40))
        mgr.reset()
        assert len(mgr) == 0


# ── Explosion ──────────────────────────────────────────────────────────────


class TestExplosion:
    def test_initial_state(self):
        exp = Explosion.at(10, 20, 20)
        assert exp.current_radius == 0
        assert exp.alpha == 1.0
        assert exp.max_radius == 60
        assert exp.duration == EXPLOSION_DURATION

    def test_default_base_radius(self):
        assert Explosion.at(0, 0).max_radius == 60

    def test_from_missile_keeps_last_position(self):
        m = Missile(x=120, y=340, radius=18, speed=40)
        exp = Explosion.from_missile(m)
        assert exp.center_pos == (120, 340)
        assert exp.max_radius == pytest.approx(54)

    def test_halfway(self):
        exp = Explosion.at(0, 0, 20)
        exp.update(400)
        assert exp.current_radius == pytest.approx(30)
        assert exp.alpha == pytest.approx(0.5)
        assert exp.is_active

    def test_radius_grows_and_alpha_fades(self):
        exp = Explosion.at(0, 0, 20)
        radii, alphas = [], []
        for _ in range(60):
            exp.update(16)
            radii.append(exp.current_radius)
            alphas.append(exp.alpha)
        assert radii == sorted(radii)
        assert alphas == sorted(alphas, reverse=True)

    def test_finishes_at_duration(self):
        exp = Explosion.at(0, 0, 20)
        exp.update(EXPLOSION_DURATION)
        assert not exp.is_active
        assert exp.current_radius == pytest.approx(60)
        assert exp.alpha == pytest.approx(0)

    def test_elapsed_clamped_on_long_frame(self):
        exp = Explosion.at(0, 0, 20)
        exp.update(10_000)
        assert exp.elapsed == EXPLOSION_DURATION
        assert exp.progress == 1.0

    def test_zero_duration_finishes_immediately(self):
        exp = Explosion(center_x=0, center_y=0, max_radius=10, duration=0)
        exp.update(0)
        assert not exp.is_active


class TestExplosionManager:
    def test_finished_removed_same_update(self):
        mgr = ExplosionManager()
        mgr.add(Explosion.at(0, 0, 20))
        mgr.add(Explosion.at(0, 0, 20))
        mgr.explosions[0].elapsed = EXPLOSION_DURATION
        remaining = mgr.update(0)
        assert len(remaining) == 1
        assert len(mgr) == 1

    def test_all_expire(self):
        mgr = ExplosionManager()
        for _ in range(3):
            mgr.add(Explosion.at(0, 0, 20))
        mgr.update(EXPLOSION_DURATION)
        assert mgr.active_count == 0
        assert len(mgr) == 0

    def test_reset(self):
        mgr = ExplosionManager()
        mgr.add(Explosion.at(0, 0))
        mgr.reset()
        assert len(mgr) == 0


# ── Spawner ────────────────────────────────────────────────────────────────


class TestSpawner:
    def test_initial_interval(self):
        sp = Spawner()
        assert sp.interval == SPAWN_INTERVAL_INITIAL
        assert sp.last_spawn_time is None

    def test_not_due_until_interval_passes(self):
        sp = Spawner()
        assert not sp.due(SPAWN_INTERVAL_INITIAL)
        assert sp.due(SPAWN_INTERVAL_INITIAL + 0.1)

    def test_spawn_records_time_and_decays(self):
        sp = Spawner(rng=random.Random(1))
        missile = sp.spawn(2001, score=0, width=800)
        assert missile is not None
        assert sp.last_spawn_time == 2001
        assert sp.interval == pytest.approx(SPAWN_INTERVAL_INITIAL * SPAWN_DECAY)

    def test_spawn_returns_none_when_not_due(self):
        sp = Spawner()
        assert sp.spawn(100, score=0, width=800) is None
        assert sp.interval == SPAWN_INTERVAL_INITIAL

    def test_interval_sequence_clamped_to_floor(self):
        sp = Spawner(rng=random.Random(2))
        t = 0.0
        previous = sp.interval
        for _ in range(500):
            t += sp.interval + 1
            assert sp.spawn(t, score=0, width=800) is not None
            assert sp.interval == pytest.approx(max(SPAWN_INTERVAL_MIN, previous * SPAWN_DECAY))
            assert sp.interval <= previous
            assert sp.interval >= SPAWN_INTERVAL_MIN
            previous = sp.interval
        assert sp.interval == SPAWN_INTERVAL_MIN

    def test_missile_ranges(self):
        sp = Spawner(rng=random.Random(3))
        for _ in range(200):
            m = sp.make_missile(score=0, width=800)
            assert 15 <= m.radius < 25
            assert 40 <= m.speed < 70
            assert m.radius <= m.x <= 800 - m.radius
            assert m.y == -m.radius

    def test_speed_includes_score(self):
        sp = Spawner(rng=FixedRandom(0.0))
        m = sp.make_missile(score=10, width=800)
        assert m.speed >= 50
        assert m.radius == MISSILE_RADIUS_MIN

    def test_full_width_fits_at_extremes(self):
        high = Spawner(rng=FixedRandom(0.999999)).make_missile(0, 800)
        assert high.x + high.radius <= 800

    def test_narrow_viewport_centres_missile(self):
        m = Spawner(rng=FixedRandom(0.5)).make_missile(0, width=10)
        assert m.x == 5

    def test_reset(self):
        sp = Spawner(rng=random.Random(4))
        sp.spawn(5000, 0, 800)
        sp.reset()
        assert sp.interval == SPAWN_INTERVAL_INITIAL
        assert sp.last_spawn_time is None

    def test_invalid_decay_rejected(self):
        with pytest.raises(ValueError):
            Spawner(decay=1.5)

    def test_invalid_floor_rejected(self):
        with pytest.raises(ValueError):
            Spawner(floor=0)
