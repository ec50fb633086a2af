from .target_zone import TargetZone

__all__ = ["TargetZone"]
