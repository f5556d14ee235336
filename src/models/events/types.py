from enum import Enum, auto


class EventType(Enum):
    # Animation settings
    ANIMATION_SETTINGS_CHANGED = auto()
    MOTION_BLUR_CHANGED = auto()

    # Canvas
    CANVAS_DIMENSIONS_CHANGED = auto()
