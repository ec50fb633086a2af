"""
test_particle_manager.py
------------------------
Particle spawning from presets and in-place compaction.
"""

import random

import pytest

from viral_dash.graphics.particles.particle_manager import (
    PARTICLE_PRESETS,
    Particle,
    ParticleSystem,
)


@pytest.fixture
def particles():
    return ParticleSystem(rng=random.Random(0))


def test_presets_loaded_from_config():
    assert PARTICLE_PRESETS["explosion_gold"]["count"] == 30
    assert PARTICLE_PRESETS["explosion_ember"]["count"] == 15
    assert PARTICLE_PRESETS["explosion_gold"]["color"] == (255, 215, 0)


def test_rival_explosion_counts(particles):
    particles.burst("explosion_gold", (100, 100))
    particles.burst("explosion_ember", (100, 100))
    assert len(particles) == 45


def test_update_compacts_in_place(particles):
    particles.burst("explosion_gold", (0, 0))
    storage = particles.particles

    particles.update(0.1)
    assert len(particles) == 30
    particles.update(5.0)

    assert len(particles) == 0
    assert particles.particles is storage


def test_mixed_lifetimes_keep_survivors_in_order():
    system = ParticleSystem()
    short = Particle(0, 0, 0, 0, 2, (255, 255, 255), life=0.1)
    long_a = Particle(1, 0, 0, 0, 2, (255, 255, 255), life=2.0)
    long_b = Particle(2, 0, 0, 0, 2, (255, 255, 255), life=2.0)
    system.particles.extend([long_a, short, long_b])

    system.update(0.5)
    assert system.particles == [long_a, long_b]


def test_limit_caps_spawns():
    system = ParticleSystem(limit=10, rng=random.Random(0))
    system.burst("explosion_gold", (0, 0))
    assert len(system) == 10


def test_dash_trail_flies_opposite_to_travel(particles):
    particles.burst("dash_burst", (0, 0), direction=(1, 0), count=20)
    # Directed speed 180 minus at most 60 jitter keeps every particle moving left
    assert all(p.vx < 0 for p in particles.particles)


def test_alpha_fades_with_life():
    p = Particle(0, 0, 0, 0, 2, (255, 255, 255), life=1.0)
    assert p.alpha == 255
    p.update(0.5)
    assert p.alpha == pytest.approx(127, abs=1)


def test_explosion_fade_rate_sets_lifetime(particles):
    # life 1.0 drained at 0.3-0.5 per second lasts 2 to 3.3 seconds
    particles.burst("explosion_gold", (0, 0))
    particles.update(1.9)
    assert len(particles) == 30
    particles.update(1.5)
    assert len(particles) == 0
