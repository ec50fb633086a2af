"""
results.py
----------
Explicit outcome types for operations that can be refused or fall short.

None of these are errors: a denied dash, a missing sprite or a crowded
level all leave the session running. Callers inspect the result and log
or react as they see fit.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pygame


# ===========================================================
# Ability Attempts
# ===========================================================

@dataclass(frozen=True)
class AbilityResult:
    """
    Outcome of a dash or laser attempt.

    Truthiness equals `granted`, so `if player.try_dash(now):` reads naturally.
    """
    granted: bool
    cooldown_remaining: float = 0.0
    reason: str = ""

    def __bool__(self) -> bool:
        return self.granted

    @classmethod
    def ok(cls) -> "AbilityResult":
        return cls(True)

    @classmethod
    def denied(cls, reason: str, cooldown_remaining: float = 0.0) -> "AbilityResult":
        return cls(False, max(0.0, cooldown_remaining), reason)


# ===========================================================
# Asset Loading
# ===========================================================

@dataclass(frozen=True)
class AssetLoadResult:
    """Outcome of loading one image asset."""
    key: str
    path: Optional[str]
    surface: Optional[pygame.Surface] = None
    error: str = ""

    @property
    def loaded(self) -> bool:
        return self.surface is not None


# ===========================================================
# Collectible Placement
# ===========================================================

@dataclass
class PlacementReport:
    """
    Outcome of a batch placement.

    `shortfall` counts collectibles that found no valid spot within the
    attempt budget and were left out.
    """
    collectibles: List = field(default_factory=list)
    requested: int = 0
    attempts: int = 0

    @property
    def placed(self) -> int:
        return len(self.collectibles)

    @property
    def shortfall(self) -> int:
        return max(0, self.requested - self.placed)
