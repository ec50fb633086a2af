"""
test_sound_manager.py
---------------------
Note parsing and tone rendering for synthesized effects.
"""

import pytest

from viral_dash.audio.sound_manager import (
    SOUND_PRESETS,
    SoundManager,
    note_to_frequency,
    render_tone,
)


@pytest.mark.parametrize("note, hz", [
    ("A4", 440.0),
    ("A5", 880.0),
    ("C5", 523.25),
    ("C#5", 554.37),
    ("Bb3", 233.08),
])
def test_note_to_frequency(note, hz):
    assert note_to_frequency(note) == pytest.approx(hz, abs=0.01)


def test_bad_note_raises():
    with pytest.raises(ValueError):
        note_to_frequency("H2")


def test_render_tone_length_and_range():
    samples = render_tone("sine", 440.0, 0.1, (0.01, 0.02, 0.5, 0.02), sample_rate=8000)
    assert len(samples) == 800
    assert max(abs(s) for s in samples) <= 32767


def test_stereo_interleaves_channels():
    samples = render_tone("square", 220.0, 0.01, (0, 0, 1, 0), sample_rate=1000, channels=2)
    assert len(samples) == 20
    assert samples[0] == samples[1]


def test_feedback_sounds_have_presets():
    for sound in ("dash", "collect", "win", "feedbackPositive", "playerHit",
                  "rivalDestroyed", "laserFire", "hazardWarn", "gameOver"):
        assert sound in SOUND_PRESETS


def test_disabled_manager_is_silent():
    manager = SoundManager(enabled=False)
    manager.play("dash")
    manager.play("no-such-sound")
    assert manager.sounds == {}


def test_master_volume_is_perceptual_and_clamped():
    manager = SoundManager(enabled=False)
    manager.set_master_volume(50)
    assert manager.master_volume == pytest.approx(0.25)
    manager.set_master_volume(150)
    assert manager.master_volume == 1.0
    manager.set_master_volume(-5)
    assert manager.master_volume == 0
