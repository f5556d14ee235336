from enum import Enum, auto


class EventSource(Enum):
    """Event source identifiers for application events"""
    ANIMATION_SETTINGS = auto()   # AnimationSettingsService
    CANVAS = auto()               # CanvasService
