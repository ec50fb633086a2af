"""
player_ability.py
-----------------
Handles the player's timed abilities:
- Dash: short speed burst with particle burst and trail.
- Laser: instant single-pass beam along the last movement direction.

Attempts return an AbilityResult instead of raising; a denied attempt
carries the remaining cooldown.
"""

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.results import AbilityResult


# ===========================================================
# Dash
# ===========================================================

def try_dash(player, now) -> AbilityResult:
    """
    Start a dash if none is running and the cooldown has elapsed.

    Args:
        player: Player instance
        now: Simulation clock in seconds
    """
    if player.dashing:
        return AbilityResult.denied("already dashing")

    if player.last_dash_time is not None:
        elapsed = now - player.last_dash_time
        if elapsed < player.dash_cooldown:
            return AbilityResult.denied("cooldown", player.dash_cooldown - elapsed)

    player.dashing = True
    player.dash_timer = player.dash_duration
    player.last_dash_time = now
    player.trail_timer = 0.0
    player.dash_particles.burst("dash_burst", player.pos, direction=player.last_dir)

    DebugLogger.action("Dash started", category="ability")
    return AbilityResult.ok()


def update_dash(player, dt):
    """Count down an active dash and lay trail particles at a fixed cadence."""
    if not player.dashing:
        return

    player.trail_timer += dt
    while player.trail_timer >= player.trail_interval:
        player.trail_timer -= player.trail_interval
        player.dash_particles.emit_trail(player.pos, player.last_dir)

    player.dash_timer -= dt
    if player.dash_timer <= 0:
        player.dashing = False
        player.dash_timer = 0.0
        player.trail_timer = 0.0


# ===========================================================
# Laser
# ===========================================================

def try_fire_laser(player, now) -> AbilityResult:
    """
    Fire the laser if it is idle and off cooldown.

    The beam runs from the player center along last_dir for laser_range.
    Hit testing against rivals is done once by the caller, right after a
    granted fire.
    """
    if player.laser_active:
        return AbilityResult.denied("already firing")

    if player.last_laser_time is not None:
        elapsed = now - player.last_laser_time
        if elapsed < player.laser_cooldown:
            return AbilityResult.denied("cooldown", player.laser_cooldown - elapsed)

    player.laser_active = True
    player.laser_timer = player.laser_duration
    player.last_laser_time = now
    player.laser_dir.update(player.last_dir)
    player.laser_start.update(player.pos)
    player.laser_end.update(player.pos + player.laser_dir * player.laser_range)

    DebugLogger.action("Laser fired", category="ability")
    return AbilityResult.ok()


def update_laser(player, dt):
    """Count down the visible beam."""
    if not player.laser_active:
        return

    player.laser_timer -= dt
    if player.laser_timer <= 0:
        player.laser_active = False
        player.laser_timer = 0.0
