"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the gameplay core announce what happened without knowing who
draws the HUD or plays the sounds.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type
from viral_dash.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class FeedbackEvent(BaseEvent):
    """Dispatched when a feedback table entry fires."""
    trigger: str
    text: str
    delta: int
    approval: int
    sound: Optional[str] = None
    note: Optional[str] = None
    negative: bool = False


@dataclass(frozen=True)
class RivalDestroyedEvent(BaseEvent):
    """Dispatched when the laser destroys a rival."""
    position: tuple
    destroyed: int
    total: int


@dataclass(frozen=True)
class CollectibleGatheredEvent(BaseEvent):
    """Dispatched when the player picks up a data packet."""
    collected: int
    total: int


@dataclass(frozen=True)
class TargetZoneActivatedEvent(BaseEvent):
    """Dispatched once per level when the exit zone opens."""
    level: int
    position: tuple


@dataclass(frozen=True)
class LevelLoadedEvent(BaseEvent):
    """Dispatched after a level has been built."""
    level: int
    rivals: int
    collectibles: int
    objective_text: str


@dataclass(frozen=True)
class GamePhaseChangedEvent(BaseEvent):
    """Dispatched on every game phase transition."""
    previous: object
    current: object


@dataclass(frozen=True)
class SoundRequestEvent(BaseEvent):
    """Dispatched for sound cues not tied to a feedback entry."""
    sound: str
    note: Optional[str] = None



# ===========================================================
# Event Bus
# ===========================================================

class EventManager:
    """
    Type-keyed publish/subscribe bus.

    Handlers are called synchronously in subscription order. A handler
    that raises is logged and skipped; the remaining handlers still run.
    """

    def __init__(self):
        self._handlers: Dict[Type[BaseEvent], List[Callable]] = defaultdict(list)
        DebugLogger.init("EventManager ready", category="event_manager")

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        handlers = self._handlers[event_type]
        if callback in handlers:
            return
        handlers.append(callback)
        DebugLogger.system(
            f"{_name(callback)} listens for {event_type.__name__}",
            category="event_manager",
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and callback in handlers:
            handlers.remove(callback)

    def unsubscribe_all(self, callback: Callable) -> None:
        """Drop callback from every event type it listens to."""
        for handlers in self._handlers.values():
            if callback in handlers:
                handlers.remove(callback)

    def dispatch(self, event: BaseEvent) -> None:
        # Copy so handlers may unsubscribe while being called
        for callback in tuple(self._handlers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                DebugLogger.fail(
                    f"{_name(callback)} failed on {type(event).__name__}: {e}",
                    category="event_manager",
                )

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """Handlers for event_type, or across all types when None."""
        if event_type is not None:
            return len(self._handlers.get(event_type, ()))
        return sum(map(len, self._handlers.values()))


def _name(callback) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


# ===========================================================
# Shared Instance
# ===========================================================

_events = None


def get_events() -> EventManager:
    """The process-wide bus, created on first use."""
    global _events
    if _events is None:
        _events = EventManager()
    return _events


def reset_events() -> None:
    """Forget the shared bus; the next get_events() builds a fresh one."""
    global _events
    _events = None
