"""
Animation domain models

Defines the spring configuration, per-target spring records, motion blur
settings and the settings aggregate owned by AnimationSettingsService.
"""

from dataclasses import dataclass, field
from typing import Union
from models.enums import AnimationStyle

# Named preset tag, or the literal string of an unknown style
StyleTag = Union[AnimationStyle, str]


@dataclass(frozen=True)
class SpringConfig:
    """
    Damped harmonic oscillator parameters

    Attributes:
        mass: Inertia (> 0)
        tension: Spring stiffness (> 0)
        friction: Damping coefficient (>= 0)
        transition_duration: Animation length in seconds (> 0)
    """
    mass: float = 1.0
    tension: float = 170.0
    friction: float = 26.0
    transition_duration: float = 1.0


@dataclass
class SpringAnimationState:
    """Mutable spring record for one animation target (cursor or zoom)"""
    style: StyleTag = AnimationStyle.DEFAULT
    mass: float = 1.0
    tension: float = 170.0
    friction: float = 26.0
    transition_duration: float = 1.0

    def to_spring_config(self) -> SpringConfig:
        """Snapshot numeric fields as an immutable SpringConfig"""
        return SpringConfig(
            mass=self.mass,
            tension=self.tension,
            friction=self.friction,
            transition_duration=self.transition_duration,
        )


@dataclass
class MotionBlurSettings:
    """
    Motion blur state

    amount is the master strength; cursor/zoom/pan are percentages of
    the master. All intended in [0, 100], not enforced here.
    """
    enabled: bool = False
    amount: float = 50
    cursor: float = 70
    zoom: float = 100
    pan: float = 100


@dataclass
class AnimationSettingsState:
    """
    Settings aggregate

    Owned by a single AnimationSettingsService and passed by reference to
    consumers. Default values defined here are the single source of truth
    used when config does not override them.
    """
    motion_blur: MotionBlurSettings = field(default_factory=MotionBlurSettings)
    cursor_animation: SpringAnimationState = field(default_factory=SpringAnimationState)
    zoom_animation: SpringAnimationState = field(default_factory=SpringAnimationState)
