"""
feedback_system.py
------------------
Maps gameplay triggers to approval changes, HUD messages and sound cues.

The table is ordered; the first entry whose trigger matches wins.
Approval is clamped to [0, max_approval]. The system only announces
results through FeedbackEvent; the UI controller does the showing and
playing.
"""

from dataclasses import dataclass
from typing import Optional

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.services.config_manager import load_config
from viral_dash.core.services.event_manager import get_events, FeedbackEvent


@dataclass(frozen=True)
class FeedbackEntry:
    trigger: str
    text: str
    delta: int
    sound: Optional[str] = None
    note: Optional[str] = None
    negative: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackEntry":
        return cls(
            trigger=data["trigger"],
            text=data.get("text", ""),
            delta=int(data.get("delta", 0)),
            sound=data.get("sound"),
            note=data.get("note"),
            negative=bool(data.get("negative", False)),
        )


def load_feedback_table(filename="feedback.json"):
    data = load_config(filename, {"feedback": []})
    return [FeedbackEntry.from_dict(entry) for entry in data.get("feedback", [])]


class FeedbackSystem:
    """Owns the approval value and applies feedback entries to it."""

    def __init__(self, table=None, starting_approval=10, max_approval=100, events=None):
        self.table = list(table) if table is not None else load_feedback_table()
        self.starting_approval = starting_approval
        self.max_approval = max_approval
        self.approval = starting_approval
        self.events = events or get_events()

    def reset(self):
        self.approval = self.starting_approval

    def lookup(self, trigger) -> Optional[FeedbackEntry]:
        for entry in self.table:
            if entry.trigger == trigger:
                return entry
        return None

    def trigger(self, name) -> Optional[FeedbackEntry]:
        """
        Apply the entry for `name` and announce it.

        Returns:
            The matching entry, or None when the table has no such trigger
        """
        entry = self.lookup(name)
        if entry is None:
            DebugLogger.warn(f"No feedback entry for '{name}'", category="feedback")
            return None

        self.approval = max(0, min(self.max_approval, self.approval + entry.delta))
        DebugLogger.action(
            f"{name}: {entry.delta:+d} -> approval {self.approval}", category="feedback"
        )

        self.events.dispatch(FeedbackEvent(
            trigger=entry.trigger,
            text=entry.text,
            delta=entry.delta,
            approval=self.approval,
            sound=entry.sound,
            note=entry.note,
            negative=entry.negative,
        ))
        return entry

    @property
    def depleted(self) -> bool:
        return self.approval <= 0
