"""
test_rival.py
-------------
Tests for rival patrol and the hazard cycle state machine.
"""

import pytest

from viral_dash.entities.entity_state import HazardPhase, check_hazard_transition


BOUNDS = (800, 600)


# ===========================================================
# Hazard Cycle
# ===========================================================

class TestHazardCycle:
    """IDLE -> WARNING -> ACTIVE -> IDLE, driven by countdowns."""

    def test_full_cycle(self, make_rival, make_player):
        rival = make_rival(hazard_jitter=0)
        player = make_player(x=200, y=300)
        rival.hazard_timer = 0.1

        assert rival.update(0.2, BOUNDS, player) is True
        assert rival.hazard_phase == HazardPhase.WARNING
        assert rival.hazard_timer == pytest.approx(0.8)

        assert rival.update(0.8, BOUNDS, player) is False
        assert rival.hazard_active

        rival.dodge_given = True
        rival.hazard_hit_given = True
        rival.update(1.0, BOUNDS, player)
        assert rival.hazard_phase == HazardPhase.IDLE
        assert rival.hazard_timer == pytest.approx(rival.hazard_cooldown)
        assert not rival.dodge_given
        assert not rival.hazard_hit_given

    def test_first_attack_waits_past_grace(self, make_rival):
        for seed in range(20):
            rival = make_rival(seed=seed)
            # cooldown + jitter + 2 * grace - U(0, cooldown) >= 2 * grace
            assert rival.hazard_timer >= 4.0

    def test_no_warning_without_player(self, make_rival):
        rival = make_rival()
        rival.hazard_timer = 0.0
        assert rival.update(0.1, BOUNDS, None) is False
        assert rival.hazard_phase == HazardPhase.IDLE

    def test_target_leads_player_and_stays_on_canvas(self, make_rival, make_player):
        rival = make_rival()
        player = make_player(x=10, y=10, bounds=BOUNDS)
        player.last_dir.update(-1, 0)
        rival.hazard_timer = 0.0
        rival.update(0.01, BOUNDS, player)
        assert tuple(rival.hazard_target) == pytest.approx((50, 50))

    def test_target_is_ahead_of_player(self, make_rival, make_player):
        rival = make_rival(target_jitter=0)
        player = make_player(x=300, y=300, bounds=BOUNDS)
        player.last_dir.update(1, 0)
        rival.hazard_timer = 0.0
        rival.update(0.01, BOUNDS, player)
        assert tuple(rival.hazard_target) == pytest.approx((350, 300))

    def test_illegal_transition_raises(self):
        with pytest.raises(ValueError):
            check_hazard_transition(HazardPhase.IDLE, HazardPhase.ACTIVE)
        with pytest.raises(ValueError):
            check_hazard_transition(HazardPhase.ACTIVE, HazardPhase.WARNING)

    def test_destroy_clears_hazard(self, make_rival, make_player):
        rival = make_rival()
        rival.hazard_timer = 0.0
        rival.update(0.01, BOUNDS, make_player())
        assert rival.hazard_warning

        rival.destroy()
        assert rival.destroyed
        assert rival.hazard_phase == HazardPhase.IDLE
        assert rival.update(10.0, BOUNDS, make_player()) is False


# ===========================================================
# Patrol
# ===========================================================

class TestPatrol:

    def test_patrol_stays_within_range(self, make_rival):
        rival = make_rival(x=400, y=300)
        rival.hazard_timer = 1000
        for _ in range(600):
            rival.update(1 / 60, BOUNDS)
            assert abs(rival.pos.x - rival.spawn.x) <= rival.patrol_range + 1e-6

    def test_patrol_bounces(self, make_rival):
        rival = make_rival(x=400, y=300)
        rival.hazard_timer = 1000
        seen = set()
        for _ in range(600):
            rival.update(1 / 60, BOUNDS)
            seen.add(rival.direction)
        assert seen == {1, -1}

    def test_patrol_respects_canvas_edge(self, make_rival):
        rival = make_rival(x=30, y=300)
        rival.hazard_timer = 1000
        for _ in range(600):
            rival.update(1 / 60, BOUNDS)
            assert rival.pos.x >= rival.half_width
