"""
Spring record update rule

Preset/custom state machine shared by AnimationSettingsService and
DataAssembler. Order of the steps matters:

1. style names a preset  -> copy the preset's mass/tension/friction
2. merge every supplied field (style included)
3. numeric field supplied without style -> style becomes CUSTOM
4. style supplied -> style is exactly that value

So {"style": "gentle", "tension": 300} stays "gentle" with tension 300,
while {"tension": 300} alone turns the record "custom".
"""

from dataclasses import replace
from typing import Any, Dict
from models.domain.animation import SpringAnimationState
from models.enums import AnimationStyle, LogCategory
from models.presets import get_spring_preset
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)

NUMERIC_FIELDS = ("mass", "tension", "friction", "transition_duration")
SPRING_FIELDS = ("style",) + NUMERIC_FIELDS


def apply_spring_update(record: SpringAnimationState, changes: Dict[str, Any]) -> SpringAnimationState:
    """
    Return a new record with changes applied; the input is not modified

    Args:
        record: Current record
        changes: Supplied fields only (absent keys are left untouched)

    Raises:
        KeyError: if changes contains a field that is not part of the record
    """
    unknown = set(changes) - set(SPRING_FIELDS)
    if unknown:
        raise KeyError(f"Unknown spring fields: {sorted(unknown)}")

    working = replace(record)
    has_style = "style" in changes

    if has_style:
        preset = get_spring_preset(changes["style"])
        if preset is not None:
            working.mass = preset.mass
            working.tension = preset.tension
            working.friction = preset.friction
        elif changes["style"] != AnimationStyle.CUSTOM:
            # Lenient: unknown names skip the preset copy but are still stored
            log.warn("Unknown animation style, keeping current values", style=changes["style"])

    for name, value in changes.items():
        setattr(working, name, value)

    if not has_style and any(name in changes for name in NUMERIC_FIELDS):
        working.style = AnimationStyle.CUSTOM

    if has_style:
        working.style = changes["style"]

    return working
