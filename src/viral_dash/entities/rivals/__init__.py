from .rival import Rival

__all__ = ["Rival"]
