"""
player_logic.py
---------------
Damage intake and invulnerability window for the player.
"""

from viral_dash.core.debug.debug_logger import DebugLogger


def take_hit(player, now) -> bool:
    """
    Register a damaging collision.

    Returns:
        bool: True if the hit landed, False if absorbed by invulnerability
    """
    if player.invulnerable:
        return False

    player.invulnerable = True
    player.invuln_timer = player.invuln_duration
    player.last_hit_time = now
    DebugLogger.state("Player hit -> INVULNERABLE", category="collision")
    return True


def update_invulnerability(player, now, dt):
    """
    Clear invulnerability once its window is over.

    The countdown and the elapsed-time check agree on the same clock, and
    clearing an already-cleared state is a no-op.
    """
    if not player.invulnerable:
        return

    player.invuln_timer -= dt
    elapsed = now - player.last_hit_time if player.last_hit_time is not None else player.invuln_duration
    if player.invuln_timer <= 0 or elapsed >= player.invuln_duration:
        player.invulnerable = False
        player.invuln_timer = 0.0


def blink_visible(player) -> bool:
    """Flicker the sprite while invulnerable."""
    if not player.invulnerable or player.blink_interval <= 0:
        return True
    return int(player.invuln_timer / player.blink_interval) % 2 == 0
