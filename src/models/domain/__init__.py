"""Domain models - Config and state objects"""

from models.domain.animation import (
    SpringConfig,
    SpringAnimationState,
    MotionBlurSettings,
    AnimationSettingsState,
    StyleTag,
)
from models.domain.canvas import ScreenSize, CanvasDimensions, CanvasState
from models.domain.parameter import ParameterConfig

__all__ = [
    "SpringConfig",
    "SpringAnimationState",
    "MotionBlurSettings",
    "AnimationSettingsState",
    "StyleTag",
    "ScreenSize",
    "CanvasDimensions",
    "CanvasState",
    "ParameterConfig",
]
