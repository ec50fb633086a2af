"""
collision_manager.py
--------------------
Gameplay hit tests between the player and everything it can touch.

Detects collisions but lets the gameplay controller decide what happens:
every check is a query, none of them mutate approval or fire feedback.

Responsibilities
----------------
- Hazard circle and rival body overlap (both ignored while invulnerable).
- Dodge detection around active hazards while dashing.
- Collectible pickup.
- Single-pass laser scan that stops at the first rival hit.
- Target zone arrival.
"""

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.systems.collision.collision_shapes import (
    circle_overlap,
    in_annulus,
    rects_overlap,
    segment_circle_hit,
)


class CollisionManager:
    """Stateless collision queries over the current level's entities."""

    # Dodge band outer edge, in player half-widths past the hazard radius
    DODGE_OUTER_FACTOR = 1.5

    def __init__(self):
        DebugLogger.init_entry("CollisionManager")

    # ===========================================================
    # Rival Threats
    # ===========================================================

    def hazard_hits(self, rival, player) -> bool:
        """Player overlaps an active hazard circle and can take damage."""
        if rival.destroyed or not rival.hazard_active or rival.hazard_hit_given:
            return False
        if player.invulnerable:
            return False
        return circle_overlap(player.pos, rival.hazard_target,
                              rival.hazard_radius + player.half_width)

    def body_hits(self, rival, player) -> bool:
        """Player box overlaps a live rival box."""
        if rival.destroyed or player.invulnerable:
            return False
        return rects_overlap(player.pos, player.size, rival.pos, rival.size)

    def dodged(self, rival, player) -> bool:
        """Dashing player skims the edge of an active hazard."""
        if rival.destroyed or not rival.hazard_active or rival.dodge_given:
            return False
        if not player.dashing:
            return False
        r = rival.hazard_radius
        hw = player.half_width
        return in_annulus(player.pos, rival.hazard_target,
                          r - hw, r + self.DODGE_OUTER_FACTOR * hw)

    # ===========================================================
    # Pickups & Goals
    # ===========================================================

    def gathered(self, collectibles, player) -> list:
        """Collect every uncollected item the player touches. Returns the new pickups."""
        picked = []
        for item in collectibles:
            if item.collected:
                continue
            if circle_overlap(player.pos, item.pos, item.radius + player.half_width):
                item.collect()
                picked.append(item)
        return picked

    def reached_zone(self, zone, player) -> bool:
        if not zone.active:
            return False
        return circle_overlap(player.pos, zone.pos, zone.radius + player.half_width)

    # ===========================================================
    # Laser
    # ===========================================================

    def laser_scan(self, player, rivals):
        """
        Test the beam once against live rivals in order.

        Returns:
            The first rival hit, or None. Later rivals are not tested.
        """
        start, end = player.laser_start, player.laser_end
        beam_half = player.laser_width / 2

        for rival in rivals:
            if rival.destroyed:
                continue
            if segment_circle_hit(start, end, rival.pos, rival.half_width + beam_half):
                DebugLogger.action(
                    f"Laser hit rival at ({rival.pos.x:.0f}, {rival.pos.y:.0f})",
                    category="collision",
                )
                return rival
        return None
