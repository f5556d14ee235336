"""
Preset catalog

Two read-only tables:
- SPRING_PHYSICS_PRESETS: mass/tension/friction bundles for natural,
  interruptible motion (camera zoom/pan and cursor tracking)
- EASING_PRESETS: curve-based easings for simple UI effects

Values are literal and never loaded from config.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union
from models.enums import AnimationStyle
from models.easing import EasingFunction, ease_in_out_cubic, ease_in_out_quint, ease_out_quint


@dataclass(frozen=True)
class SpringPreset:
    """Immutable spring-physics preset"""
    display_name: str
    mass: float
    tension: float
    friction: float


@dataclass(frozen=True)
class EasingPreset:
    """Immutable curve-easing preset"""
    display_name: str
    easing: EasingFunction


SPRING_PHYSICS_PRESETS: Mapping[AnimationStyle, SpringPreset] = MappingProxyType({
    AnimationStyle.DEFAULT: SpringPreset("Default", mass=1, tension=170, friction=26),
    AnimationStyle.GENTLE: SpringPreset("Gentle", mass=1, tension=120, friction=14),
    AnimationStyle.WOBBLY: SpringPreset("Wobbly", mass=1, tension=180, friction=12),
    AnimationStyle.STIFF: SpringPreset("Stiff", mass=1, tension=210, friction=20),
    AnimationStyle.SLOW: SpringPreset("Slow", mass=1, tension=280, friction=60),
})

EASING_PRESETS: Mapping[str, EasingPreset] = MappingProxyType({
    "smooth": EasingPreset("Smooth", ease_out_quint),
    "balanced": EasingPreset("Balanced", ease_in_out_quint),
    "dynamic": EasingPreset("Dynamic", ease_in_out_cubic),
})


def get_spring_preset(style: Union[AnimationStyle, str, None]) -> Optional[SpringPreset]:
    """
    Look up a spring preset by style tag

    Accepts enum members or their string values. Returns None for CUSTOM,
    None, and any name not in the catalog.
    """
    if style is None:
        return None
    try:
        key = AnimationStyle(style)
    except ValueError:
        return None
    return SPRING_PHYSICS_PRESETS.get(key)


def get_easing(name: str) -> EasingFunction:
    """Get curve easing by preset name (raises KeyError if unknown)"""
    return EASING_PRESETS[name].easing
