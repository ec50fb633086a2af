from .level_registry import LevelConfig, LevelRegistry

__all__ = ["LevelConfig", "LevelRegistry"]
