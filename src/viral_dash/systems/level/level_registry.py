"""
level_registry.py
-----------------
Ordered level descriptors, loaded once from levels.json.

Responsibilities
----------------
- Parse level definitions into LevelConfig records
- Look up a level by its 1-based number
- Tell the game when the sequence is exhausted (overall win)
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.services.config_manager import load_config


@dataclass(frozen=True)
class LevelConfig:
    """Static description of one level. Read-only once loaded."""
    number: int
    rivals: int
    collectibles: int
    target_ratio: Tuple[float, float]
    speed_multiplier: float
    hazard_cooldown: float
    objective: str

    @classmethod
    def from_dict(cls, number: int, data: dict) -> "LevelConfig":
        target = data.get("target", (0.5, 0.5))
        return cls(
            number=number,
            rivals=int(data.get("rivals", 0)),
            collectibles=int(data.get("collectibles", 0)),
            target_ratio=(float(target[0]), float(target[1])),
            speed_multiplier=float(data.get("speed_multiplier", 1.0)),
            hazard_cooldown=float(data.get("hazard_cooldown", 3.0)),
            objective=data.get("objective", "Objective: Reach the zone!"),
        )

    def target_position(self, width, height):
        return width * self.target_ratio[0], height * self.target_ratio[1]


class LevelRegistry:
    """Global registry for the level sequence."""

    _levels: List[LevelConfig] = []
    _initialized = False

    # ===========================================================
    # Initialization
    # ===========================================================

    @classmethod
    def load_config(cls, filename: str = "levels.json", levels: Optional[list] = None):
        """
        Load level definitions.

        Args:
            filename: Config file to read
            levels: Raw level dicts to use instead of the file (tests, mods)
        """
        if levels is None:
            levels = load_config(filename, {"levels": []}).get("levels", [])

        cls._levels = [LevelConfig.from_dict(i + 1, data) for i, data in enumerate(levels)]
        cls._initialized = True

        if not cls._levels:
            DebugLogger.warn("No levels defined", category="level")
        DebugLogger.init_sub(f"Levels loaded: {len(cls._levels)}")

    @classmethod
    def _ensure_loaded(cls):
        if not cls._initialized:
            cls.load_config()

    @classmethod
    def reset(cls):
        """Forget loaded levels (next access reloads from disk)."""
        cls._levels = []
        cls._initialized = False

    # ===========================================================
    # Queries
    # ===========================================================

    @classmethod
    def get(cls, number: int) -> Optional[LevelConfig]:
        """Level by 1-based number, or None past the end."""
        cls._ensure_loaded()
        if 1 <= number <= len(cls._levels):
            return cls._levels[number - 1]
        return None

    @classmethod
    def count(cls) -> int:
        cls._ensure_loaded()
        return len(cls._levels)

    @classmethod
    def has_next(cls, number: int) -> bool:
        """True if another level follows `number`."""
        return number < cls.count()
