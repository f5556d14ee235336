from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.domain.animation import SpringAnimationState, MotionBlurSettings
from models.domain.canvas import CanvasDimensions
from models.enums import AnimationTarget
from models.events.base import Event
from models.events.types import EventType
from models.events.sources import EventSource


@dataclass(init=False)
class AnimationSettingsChangedEvent(Event):
    """A cursor or zoom spring record was replaced"""
    target: AnimationTarget
    old: SpringAnimationState
    new: SpringAnimationState
    changes: Dict[str, Any]

    def __init__(
        self,
        target: AnimationTarget,
        old: SpringAnimationState,
        new: SpringAnimationState,
        changes: Dict[str, Any],
    ):
        super().__init__(
            type=EventType.ANIMATION_SETTINGS_CHANGED,
            source=EventSource.ANIMATION_SETTINGS,
        )
        self.target = target
        self.old = old
        self.new = new
        self.changes = changes


@dataclass(init=False)
class MotionBlurChangedEvent(Event):
    settings: MotionBlurSettings
    changes: Dict[str, Any]

    def __init__(self, settings: MotionBlurSettings, changes: Dict[str, Any]):
        super().__init__(
            type=EventType.MOTION_BLUR_CHANGED,
            source=EventSource.ANIMATION_SETTINGS,
        )
        self.settings = settings
        self.changes = changes


@dataclass(init=False)
class CanvasDimensionsChangedEvent(Event):
    aspect_ratio: str
    old: Optional[CanvasDimensions]
    new: CanvasDimensions

    def __init__(self, aspect_ratio: str, old: Optional[CanvasDimensions], new: CanvasDimensions):
        super().__init__(
            type=EventType.CANVAS_DIMENSIONS_CHANGED,
            source=EventSource.CANVAS,
        )
        self.aspect_ratio = aspect_ratio
        self.old = old
        self.new = new
