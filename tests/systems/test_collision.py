"""
test_collision.py
-----------------
Geometry helpers and gameplay hit tests.

Covers:
1. Segment/point distance with endpoint clamping
2. Laser threshold at rival half-width + laser half-width
3. Single-pass laser scan (first hit only)
4. Hazard, body and dodge checks honour invulnerability and per-cycle flags
"""

import pytest

from viral_dash.entities.entity_state import HazardPhase
from viral_dash.entities.items.collectible import Collectible
from viral_dash.entities.environments.target_zone import TargetZone
from viral_dash.systems.collision.collision_manager import CollisionManager
from viral_dash.systems.collision.collision_shapes import (
    in_annulus,
    rects_overlap,
    segment_circle_hit,
    segment_point_distance_sq,
)


@pytest.fixture
def collisions():
    return CollisionManager()


def _activate_hazard(rival, target):
    rival.hazard_phase = HazardPhase.ACTIVE
    rival.hazard_target.update(target)
    rival.hazard_timer = 10.0


# ===========================================================
# Pure Geometry
# ===========================================================

class TestShapes:

    def test_projection_clamped_to_segment(self):
        # Beyond the end point the distance is measured to the end point
        assert segment_point_distance_sq((0, 0), (10, 0), (13, 4)) == pytest.approx(25)
        # Behind the start point
        assert segment_point_distance_sq((0, 0), (10, 0), (-3, 4)) == pytest.approx(25)
        # Alongside
        assert segment_point_distance_sq((0, 0), (10, 0), (5, 4)) == pytest.approx(16)

    def test_zero_length_segment(self):
        assert segment_point_distance_sq((2, 2), (2, 2), (5, 6)) == pytest.approx(25)

    def test_segment_circle_hit_is_strict(self):
        assert segment_circle_hit((0, 0), (10, 0), (5, 2.9), 3)
        assert not segment_circle_hit((0, 0), (10, 0), (5, 3), 3)

    def test_rects_overlap_center_based(self):
        assert rects_overlap((0, 0), (10, 10), (9, 0), (10, 10))
        assert not rects_overlap((0, 0), (10, 10), (10, 0), (10, 10))

    def test_annulus_bounds_are_exclusive(self):
        assert in_annulus((5, 0), (0, 0), 4, 6)
        assert not in_annulus((4, 0), (0, 0), 4, 6)
        assert not in_annulus((6, 0), (0, 0), 4, 6)


# ===========================================================
# Laser
# ===========================================================

class TestLaser:
    """Rival 38 px wide, beam 5 px wide: threshold is 19 + 2.5 = 21.5 px."""

    def _fire(self, make_player):
        player = make_player(x=100, y=100, bounds=(1280, 720))
        assert player.try_fire_laser(0.0)
        return player

    def test_rival_on_ray_is_hit(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        rival = make_rival(x=250, y=100)
        assert collisions.laser_scan(player, [rival]) is rival

    def test_rival_just_inside_threshold_is_hit(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        rival = make_rival(x=250, y=121)
        assert collisions.laser_scan(player, [rival]) is rival

    def test_rival_beyond_threshold_is_missed(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        rival = make_rival(x=250, y=122)
        assert collisions.laser_scan(player, [rival]) is None

    def test_rival_past_range_is_missed(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        rival = make_rival(x=100 + 300 + 22, y=100)
        assert collisions.laser_scan(player, [rival]) is None

    def test_only_first_rival_in_list_is_hit(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        far = make_rival(x=350, y=100, seed=1)
        near = make_rival(x=200, y=100, seed=2)
        assert collisions.laser_scan(player, [far, near]) is far

    def test_destroyed_rivals_are_skipped(self, collisions, make_player, make_rival):
        player = self._fire(make_player)
        dead = make_rival(x=200, y=100, seed=1)
        dead.destroy()
        live = make_rival(x=300, y=100, seed=2)
        assert collisions.laser_scan(player, [dead, live]) is live


# ===========================================================
# Rival Threats
# ===========================================================

class TestThreats:

    def test_hazard_hits_only_when_active(self, collisions, make_player, make_rival):
        player = make_player(x=300, y=300)
        rival = make_rival()
        rival.hazard_target.update(300, 300)
        assert not collisions.hazard_hits(rival, player)

        _activate_hazard(rival, (300, 300))
        assert collisions.hazard_hits(rival, player)

    def test_hazard_ignored_when_invulnerable_or_already_hit(self, collisions, make_player, make_rival):
        player = make_player(x=300, y=300)
        rival = make_rival()
        _activate_hazard(rival, (300, 300))

        rival.hazard_hit_given = True
        assert not collisions.hazard_hits(rival, player)

        rival.hazard_hit_given = False
        player.take_hit(0.0)
        assert not collisions.hazard_hits(rival, player)

    def test_body_hit(self, collisions, make_player, make_rival):
        player = make_player(x=400, y=300)
        rival = make_rival(x=440, y=300)
        assert collisions.body_hits(rival, player)
        rival.destroy()
        assert not collisions.body_hits(rival, player)


# ===========================================================
# Dodge
# ===========================================================

class TestDodge:
    """Hazard radius 50, player half-width 28: band is (22, 92) px."""

    def test_dashing_player_in_band_dodges(self, collisions, make_player, make_rival):
        player = make_player(x=460, y=300)
        player.try_dash(0.0)
        rival = make_rival()
        _activate_hazard(rival, (400, 300))
        assert collisions.dodged(rival, player)

    def test_outside_band_is_not_a_dodge(self, collisions, make_player, make_rival):
        rival = make_rival()
        _activate_hazard(rival, (400, 300))

        far = make_player(x=400 + 92, y=300)
        far.try_dash(0.0)
        assert not collisions.dodged(rival, far)

        inside = make_player(x=400 + 22, y=300)
        inside.try_dash(0.0)
        assert not collisions.dodged(rival, inside)

    def test_requires_dash_and_one_per_cycle(self, collisions, make_player, make_rival):
        rival = make_rival()
        _activate_hazard(rival, (400, 300))
        player = make_player(x=460, y=300)
        assert not collisions.dodged(rival, player)

        player.try_dash(0.0)
        rival.dodge_given = True
        assert not collisions.dodged(rival, player)


# ===========================================================
# Pickups & Zone
# ===========================================================

def test_gathered_collects_touching_items(collisions, make_player):
    player = make_player(x=100, y=100)
    near = Collectible(130, 100)
    far = Collectible(300, 100)
    assert collisions.gathered([near, far], player) == [near]
    assert near.collected and not far.collected
    assert collisions.gathered([near, far], player) == []


def test_reached_zone_requires_active_zone(collisions, make_player):
    player = make_player(x=100, y=100)
    zone = TargetZone(150, 100, radius=40)
    assert not collisions.reached_zone(zone, player)
    zone.activate()
    assert collisions.reached_zone(zone, player)
