"""
sound_manager.py
----------------
Synthesized sound effects played through pygame.mixer.

Every sound id maps to a small tone preset (waveform, default note,
length, envelope). Tones are rendered to 16-bit PCM on first use and
cached per (sound id, note). Without an audio device the manager stays
silent and logs once; playing never raises into the game.
"""

import array
import math
import random
import re

import pygame

from viral_dash.core.debug.debug_logger import DebugLogger

# ===========================================================
# Tone Presets
# ===========================================================

SOUND_PRESETS = {
    # id: waveform, default note, seconds, (attack, decay, sustain level, release)
    "dash": ("triangle", "C4", 0.25, (0.01, 0.1, 0.1, 0.1)),
    "collect": ("sine", "C5", 0.3, (0.005, 0.1, 0.05, 0.2)),
    "win": ("sawtooth", "C5", 0.8, (0.05, 0.2, 0.3, 0.5)),
    "feedbackPositive": ("triangle", "E5", 0.3, (0.002, 0.15, 0.0, 0.1)),
    "feedbackNegative": ("noise", None, 0.25, (0.01, 0.1, 0.0, 0.1)),
    "hazardWarn": ("pulse", "A4", 0.15, (0.01, 0.05, 0.1, 0.1)),
    "laserFire": ("square", "G5", 0.15, (0.005, 0.2, 0.01, 0.1)),
    "rivalDestroyed": ("noise", None, 0.5, (0.01, 0.4, 0.0, 0.2)),
    "playerHit": ("square", "C3", 0.3, (0.01, 0.2, 0.0, 0.2)),
    "gameOver": ("sawtooth", "C2", 1.5, (0.1, 0.5, 0.1, 0.8)),
}

NOTE_OFFSETS = {"C": -9, "D": -7, "E": -5, "F": -4, "G": -2, "A": 0, "B": 2}
NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]?)(-?\d)$")


def note_to_frequency(note) -> float:
    """
    Convert scientific pitch notation ("A4", "C#5", "Bb3") to Hz.

    Raises:
        ValueError: If the note cannot be parsed
    """
    match = NOTE_PATTERN.match(note.strip())
    if not match:
        raise ValueError(f"Bad note: {note!r}")

    letter, accidental, octave = match.groups()
    semitones = NOTE_OFFSETS[letter.upper()] + (int(octave) - 4) * 12
    if accidental == "#":
        semitones += 1
    elif accidental == "b":
        semitones -= 1
    return 440.0 * 2 ** (semitones / 12)


def _oscillator(waveform, phase, rng):
    """Sample one waveform at phase in [0, 1)."""
    if waveform == "sine":
        return math.sin(2 * math.pi * phase)
    if waveform == "square":
        return 1.0 if phase < 0.5 else -1.0
    if waveform == "pulse":
        return 1.0 if phase < 0.3 else -1.0
    if waveform == "triangle":
        return 4 * abs(phase - 0.5) - 1
    if waveform == "sawtooth":
        return 2 * phase - 1
    return rng.uniform(-1.0, 1.0)


def _envelope(t, length, attack, decay, sustain, release):
    """ADSR gain at time t for a note of the given length."""
    if t < attack:
        return t / attack if attack > 0 else 1.0
    if t < attack + decay:
        return 1.0 - (1.0 - sustain) * ((t - attack) / decay)
    release_start = max(attack + decay, length - release)
    if t < release_start:
        return sustain
    if release <= 0:
        return 0.0
    return sustain * max(0.0, 1.0 - (t - release_start) / release)


def render_tone(waveform, frequency, length, envelope, sample_rate=22050,
                channels=1, volume=0.4, seed=0):
    """
    Render a tone to signed 16-bit PCM.

    Returns:
        array.array('h') of interleaved samples
    """
    rng = random.Random(seed)
    count = int(length * sample_rate)
    peak = int(32767 * volume)
    samples = array.array("h")

    for i in range(count):
        t = i / sample_rate
        phase = (t * frequency) % 1.0 if frequency else 0.0
        value = _oscillator(waveform, phase, rng) * _envelope(t, length, *envelope)
        sample = int(max(-1.0, min(1.0, value)) * peak)
        for _ in range(channels):
            samples.append(sample)
    return samples


# ===========================================================
# Sound Manager
# ===========================================================

class SoundManager:
    """Fire-and-forget player for synthesized effects."""

    def __init__(self, enabled=True):
        self.sounds = {}
        self.master_level = 100
        self.master_volume = 1.0
        self.sample_rate = 22050
        self.channels = 1
        self.enabled = enabled and self._init_mixer()

        DebugLogger.init_entry("SoundManager", "OK" if self.enabled else "FALLBACK")

    def _init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
            freq, _size, channels = pygame.mixer.get_init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio unavailable: {e} - sounds disabled", category="audio")
            return False

        self.sample_rate = freq
        self.channels = channels
        return True

    def volume_scale(self, level):
        """Map a 0-100 UI level to a perceptual 0.0-1.0 gain."""
        if level < 0:
            return 0
        return min(max((level / 100) ** 2, 0.0), 1.0)

    def set_master_volume(self, level):
        """Set the 0-100 master level; cached sounds pick it up immediately."""
        self.master_level = level
        self.master_volume = self.volume_scale(level)
        for sound in self.sounds.values():
            sound.set_volume(self.master_volume)

    def play(self, sound_id, note=None):
        """Play a sound by id, optionally at a given note. Never raises."""
        if not self.enabled:
            return

        preset = SOUND_PRESETS.get(sound_id)
        if preset is None:
            DebugLogger.warn(f"Unknown sound '{sound_id}'", category="audio")
            return

        try:
            sound = self._get_sound(sound_id, note, preset)
            sound.play()
        except (pygame.error, ValueError) as e:
            DebugLogger.warn(f"Failed to play '{sound_id}': {e}", category="audio")

    def _get_sound(self, sound_id, note, preset):
        waveform, default_note, length, envelope = preset
        key = (sound_id, note or default_note)
        if key in self.sounds:
            return self.sounds[key]

        pitch = note or default_note
        frequency = note_to_frequency(pitch) if pitch else 0.0
        samples = render_tone(waveform, frequency, length, envelope,
                              sample_rate=self.sample_rate, channels=self.channels)

        sound = pygame.mixer.Sound(buffer=samples.tobytes())
        sound.set_volume(self.master_volume)
        self.sounds[key] = sound
        DebugLogger.trace(f"Synthesized '{sound_id}' ({pitch})", category="audio")
        return sound
