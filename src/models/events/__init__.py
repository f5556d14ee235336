"""
Event system for settings change notification
"""

from models.events.types import EventType
from models.events.base import Event
from models.events.sources import EventSource

from models.events.settings_events import (
    AnimationSettingsChangedEvent,
    MotionBlurChangedEvent,
    CanvasDimensionsChangedEvent,
)

__all__ = [
    "EventType",
    "Event",
    "EventSource",
    "AnimationSettingsChangedEvent",
    "MotionBlurChangedEvent",
    "CanvasDimensionsChangedEvent",
]
