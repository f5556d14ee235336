"""
Enums for the spring-motion settings core
"""

from enum import Enum, auto


class AnimationStyle(str, Enum):
    """
    Style tag of a spring animation record

    Named members map to entries in SPRING_PHYSICS_PRESETS.
    CUSTOM marks values that were manually diverged from any preset.
    """
    DEFAULT = "default"
    GENTLE = "gentle"
    WOBBLY = "wobbly"
    STIFF = "stiff"
    SLOW = "slow"
    CUSTOM = "custom"


class AnimationTarget(Enum):
    """Which spring record an update applies to"""
    CURSOR = auto()
    ZOOM = auto()


class DampingRegime(Enum):
    """Decay behaviour of a damped harmonic oscillator"""
    UNDERDAMPED = auto()        # zeta < 1, oscillates
    CRITICALLY_DAMPED = auto()  # zeta == 1
    OVERDAMPED = auto()         # zeta > 1, no overshoot


class ParamID(Enum):
    """Identifiers of user-adjustable numeric settings"""
    SPRING_MASS = auto()
    SPRING_TENSION = auto()
    SPRING_FRICTION = auto()
    SPRING_TRANSITION_DURATION = auto()
    MOTION_BLUR_AMOUNT = auto()
    MOTION_BLUR_CURSOR = auto()
    MOTION_BLUR_ZOOM = auto()
    MOTION_BLUR_PAN = auto()


class ParameterType(Enum):
    """Parameter value types with validation rules"""
    PERCENTAGE = auto()      # 0-100 (displayed with %)
    RANGE_CUSTOM = auto()    # Custom min/max range


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    STATE = auto()       # Settings changes
    ANIMATION = auto()   # Spring evaluation, presets
    CANVAS = auto()      # Canvas dimension derivation
    EVENT = auto()       # Event bus events and handling
    SYSTEM = auto()      # Startup, wiring, errors

    GENERAL = auto()    # Default general category
