from .feedback_system import FeedbackEntry, FeedbackSystem

__all__ = ["FeedbackEntry", "FeedbackSystem"]
