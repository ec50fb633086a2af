"""
particle_manager.py
-------------------
Lightweight cosmetic particle system.

Usage:
    particles = ParticleSystem()
    particles.burst("explosion_gold", rival.pos)
    particles.burst("dash_burst", player.pos, direction=player.last_dir)
    particles.update(dt)
    particles.draw(draw_manager)

Particles live in one list that is compacted in place each update, so
the storage is reused instead of rebuilt every frame.
"""

import math
import random

import pygame

from viral_dash.core.runtime.game_settings import Layers, Physics
from viral_dash.core.services.config_manager import load_config


# ===========================================================
# Load Presets from JSON
# ===========================================================

DEFAULT_PRESET = {
    "count": 8,
    "color": (255, 255, 255),
    "speed_range": (60, 120),
    "size_range": (2, 4),
    "life_range": (0.5, 1.0),
    "shrink": 1.0,
    "drag": 1.0,
}


def _load_presets():
    """Load particle presets from config, convert lists to tuples."""
    data = load_config("particles.json", default_dict={})

    # JSON can't store tuples
    for preset in data.values():
        for key in ("color", "size_range", "speed_range", "life_range", "fade_rate_range"):
            if key in preset:
                preset[key] = tuple(preset[key])

    return data


PARTICLE_PRESETS = _load_presets()


# ===========================================================
# Single Particle
# ===========================================================

class Particle:
    """Individual particle with position, velocity and remaining life."""

    __slots__ = ("x", "y", "vx", "vy", "size", "color",
                 "life", "max_life", "fade_rate", "drag", "shrink")

    def __init__(self, x, y, vx, vy, size, color, life,
                 fade_rate=0.0, drag=1.0, shrink=1.0):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.color = color
        self.life = life
        self.max_life = life
        self.fade_rate = fade_rate
        self.drag = drag
        self.shrink = shrink

    def update(self, dt):
        """Advance one step. Returns False once life is spent."""
        frames = dt * Physics.UPDATE_RATE

        self.x += self.vx * dt
        self.y += self.vy * dt

        if self.drag != 1.0:
            factor = self.drag ** frames
            self.vx *= factor
            self.vy *= factor

        if self.shrink != 1.0:
            self.size *= self.shrink ** frames

        # fade_rate, when set, replaces real time as the life drain
        self.life -= (self.fade_rate or 1.0) * dt
        return self.life > 0

    @property
    def alive(self):
        return self.life > 0

    @property
    def alpha(self):
        if self.max_life <= 0:
            return 0
        return int(255 * max(0.0, min(1.0, self.life / self.max_life)))


# ===========================================================
# Particle System
# ===========================================================

class ParticleSystem:
    """Owns a bounded set of particles and spawns them from presets."""

    def __init__(self, limit=500, layer=Layers.PARTICLES, rng=None):
        self.particles = []
        self.limit = limit
        self.layer = layer
        self.rng = rng or random

    def __len__(self):
        return len(self.particles)

    # ===========================================================
    # Spawning
    # ===========================================================

    def burst(self, preset_name, pos, direction=None, count=None):
        """
        Spawn a one-shot burst at pos.

        Args:
            preset_name: Key from PARTICLE_PRESETS
            pos: (x, y) or pygame.Vector2
            direction: Travel direction; directed presets fly opposite to it
            count: Override the preset's count
        """
        preset = PARTICLE_PRESETS.get(preset_name, DEFAULT_PRESET)
        total = preset.get("count", 1) if count is None else count
        for _ in range(total):
            if len(self.particles) >= self.limit:
                break
            self.particles.append(self._spawn(preset, pos, direction))

    def emit_trail(self, pos, direction):
        """Spawn a single trail particle behind a moving entity."""
        self.burst("dash_trail", pos, direction, count=1)

    def _spawn(self, preset, pos, direction):
        rng = self.rng
        x, y = pos[0], pos[1]

        spread = preset.get("spread", 0)
        if spread:
            x += rng.uniform(-spread, spread)
            y += rng.uniform(-spread, spread)

        jitter = preset.get("jitter", 0)
        has_direction = direction is not None and (direction[0] or direction[1])

        if "axis_speed" in preset:
            s = preset["axis_speed"]
            vx, vy = rng.uniform(-s, s), rng.uniform(-s, s)
        elif has_direction and "directed_speed" in preset:
            s = preset["directed_speed"]
            vx, vy = -direction[0] * s, -direction[1] * s
        else:
            angle = rng.uniform(0, math.tau)
            speed = rng.uniform(*preset.get("speed_range", (0, 0)))
            vx, vy = math.cos(angle) * speed, math.sin(angle) * speed

        if jitter:
            vx += rng.uniform(-jitter, jitter)
            vy += rng.uniform(-jitter, jitter)

        fade = preset.get("fade_rate_range")
        return Particle(
            x, y, vx, vy,
            size=rng.uniform(*preset.get("size_range", (2, 4))),
            color=preset.get("color", (255, 255, 255)),
            life=rng.uniform(*preset.get("life_range", (0.5, 1.0))),
            fade_rate=rng.uniform(*fade) if fade else 0.0,
            drag=preset.get("drag", 1.0),
            shrink=preset.get("shrink", 1.0),
        )

    # ===========================================================
    # Update & Render
    # ===========================================================

    def update(self, dt):
        """Advance all particles and compact out the dead ones in place."""
        particles = self.particles
        write = 0
        for p in particles:
            if p.update(dt):
                particles[write] = p
                write += 1
        del particles[write:]

    def draw(self, draw_manager):
        for p in self.particles:
            radius = max(1, int(p.size))
            rect = pygame.Rect(0, 0, radius * 2, radius * 2)
            rect.center = (int(p.x), int(p.y))
            draw_manager.queue_shape("circle", rect, (*p.color, p.alpha), self.layer)

    def clear(self):
        self.particles.clear()
