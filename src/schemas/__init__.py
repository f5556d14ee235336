"""Pydantic schemas for settings payloads"""

from .animation import (
    SpringAnimationUpdate,
    MotionBlurUpdate,
    SpringAnimationSchema,
    MotionBlurSchema,
    AnimationSettingsSchema,
)

__all__ = [
    "SpringAnimationUpdate",
    "MotionBlurUpdate",
    "SpringAnimationSchema",
    "MotionBlurSchema",
    "AnimationSettingsSchema",
]
