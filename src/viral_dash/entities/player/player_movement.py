"""
player_movement.py
------------------
Handles player movement and canvas-boundary logic.

Responsibilities
----------------
- Translate input direction into velocity (boosted while dashing).
- Remember the last nonzero direction for laser aim and hazard prediction.
- Clamp player position to the canvas.
"""

import pygame


def update_movement(player, move_vec, dt):
    """
    Integrate the player's position for one step.

    Args:
        player (Player): The player instance being updated.
        move_vec: Input direction with magnitude <= 1.
        dt (float): Step length in seconds.
    """
    move = pygame.Vector2(move_vec)

    if move.length_squared() > 0:
        player.last_dir = move.normalize()

    speed = player.speed * (player.dash_multiplier if player.dashing else 1.0)
    player.velocity = move * speed

    player.pos += player.velocity * dt
    clamp_to_screen(player)
    player.sync_rect()


def clamp_to_screen(player):
    """Keep the whole player body inside its bounds."""
    screen_w, screen_h = player.bounds
    half_w = player.half_width
    half_h = player.half_height

    player.pos.x = max(half_w, min(player.pos.x, screen_w - half_w))
    player.pos.y = max(half_h, min(player.pos.y, screen_h - half_h))
