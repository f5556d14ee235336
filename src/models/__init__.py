"""
Models package - Data models for the spring-motion settings core
"""

from .enums import AnimationStyle, AnimationTarget, DampingRegime, ParamID, ParameterType, LogLevel, LogCategory
from .presets import SpringPreset, EasingPreset, SPRING_PHYSICS_PRESETS, EASING_PRESETS

__all__ = [
    'AnimationStyle',
    'AnimationTarget',
    'DampingRegime',
    'ParamID',
    'ParameterType',
    'LogLevel',
    'LogCategory',
    'SpringPreset',
    'EasingPreset',
    'SPRING_PHYSICS_PRESETS',
    'EASING_PRESETS',
]
