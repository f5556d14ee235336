"""
Serialization utilities - Enum and settings serialization

Provides bidirectional conversion between:
- Enums and style tags → strings
- Settings aggregate ↔ plain dicts (persistence contract)

The persistence contract allows only finite numbers, bools and strings;
every conversion goes through the pydantic schemas, which reject nan/inf.
"""

from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, Optional

from models.domain.animation import (
    AnimationSettingsState,
    MotionBlurSettings,
    SpringAnimationState,
    StyleTag,
)
from models.domain.canvas import CanvasDimensions
from models.enums import AnimationStyle, LogCategory
from schemas.animation import AnimationSettingsSchema, SpringAnimationSchema
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.GENERAL)


class Serializer:
    """Central enum and settings serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    # ========================================================================
    # STYLE TAGS
    # ========================================================================

    @staticmethod
    def style_to_str(style: StyleTag) -> str:
        """AnimationStyle → its value ('gentle'); unknown literal strings pass through"""
        if isinstance(style, AnimationStyle):
            return style.value
        return str(style)

    @staticmethod
    def str_to_style(value: str) -> StyleTag:
        """'gentle' → AnimationStyle.GENTLE; unknown strings are kept as-is"""
        try:
            return AnimationStyle(value)
        except ValueError:
            return value

    # ========================================================================
    # SETTINGS AGGREGATE
    # ========================================================================

    @staticmethod
    def spring_to_dict(record: SpringAnimationState) -> Dict[str, Any]:
        raw = asdict(record)
        raw["style"] = Serializer.style_to_str(record.style)
        return SpringAnimationSchema.model_validate(raw).model_dump()

    @staticmethod
    def settings_to_dict(state: AnimationSettingsState) -> Dict[str, Any]:
        """
        Serialize the settings aggregate

        Raises:
            pydantic.ValidationError: if any numeric field is nan/inf
        """
        raw = {
            "motion_blur": asdict(state.motion_blur),
            "cursor_animation": Serializer.spring_to_dict(state.cursor_animation),
            "zoom_animation": Serializer.spring_to_dict(state.zoom_animation),
        }
        return AnimationSettingsSchema.model_validate(raw).model_dump()

    @staticmethod
    def dict_to_settings(data: Dict[str, Any]) -> AnimationSettingsState:
        """
        Deserialize the settings aggregate

        Raises:
            pydantic.ValidationError: on missing fields or nan/inf values
        """
        try:
            schema = AnimationSettingsSchema.model_validate(data)
        except ValueError as e:
            log.error(f"Failed to deserialize animation settings: {e}")
            raise

        def spring(s: SpringAnimationSchema) -> SpringAnimationState:
            return SpringAnimationState(
                style=Serializer.str_to_style(s.style),
                mass=s.mass,
                tension=s.tension,
                friction=s.friction,
                transition_duration=s.transition_duration,
            )

        return AnimationSettingsState(
            motion_blur=MotionBlurSettings(**schema.motion_blur.model_dump()),
            cursor_animation=spring(schema.cursor_animation),
            zoom_animation=spring(schema.zoom_animation),
        )

    # ========================================================================
    # CANVAS
    # ========================================================================

    @staticmethod
    def canvas_to_dict(dimensions: CanvasDimensions) -> Dict[str, int]:
        return {"width": dimensions.width, "height": dimensions.height}
