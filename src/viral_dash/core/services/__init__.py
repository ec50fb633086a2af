"""
Core service exports.

Configuration loading, event dispatch and input handling shared by all
scenes and systems.
"""

from viral_dash.core.services.config_manager import load_config
from viral_dash.core.services.event_manager import get_events, reset_events

__all__ = [
    'load_config',
    'get_events',
    'reset_events',
]
