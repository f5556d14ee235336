"""
Animation schemas - Pydantic models for settings updates and persistence

Update models are partial: a field counts as supplied only when the caller
set it (model_fields_set) and its value is not None. Numeric fields are not
range-checked here; see ParameterManager for slider ranges.

The *Schema models describe the serialized aggregate. They reject nan/inf
so persisted settings round-trip through any text format.
"""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from models.enums import AnimationStyle


def _coerce_style(value: Any) -> Any:
    """Known preset names become AnimationStyle, unknown strings pass through"""
    if isinstance(value, str):
        try:
            return AnimationStyle(value)
        except ValueError:
            return value
    return value


class _PartialUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def supplied(self) -> Dict[str, Any]:
        """Fields explicitly set by the caller, None values dropped"""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class SpringAnimationUpdate(_PartialUpdate):
    """Partial update for a cursor or zoom spring record"""
    style: Optional[Union[AnimationStyle, str]] = Field(
        None,
        description="Preset name ('default', 'gentle', 'wobbly', 'stiff', 'slow') or 'custom'"
    )
    mass: Optional[float] = Field(None, description="Spring mass")
    tension: Optional[float] = Field(None, description="Spring tension / stiffness")
    friction: Optional[float] = Field(None, description="Damping")
    transition_duration: Optional[float] = Field(None, description="Duration in seconds")

    @field_validator("style", mode="after")
    @classmethod
    def normalize_style(cls, value: Any) -> Any:
        return _coerce_style(value)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {"style": "gentle"},
                {"style": "gentle", "tension": 300},
                {"friction": 40},
            ]
        },
    )


class MotionBlurUpdate(_PartialUpdate):
    """Partial update for motion blur settings"""
    enabled: Optional[bool] = None
    amount: Optional[float] = Field(None, description="Master amount (0-100)")
    cursor: Optional[float] = Field(None, description="Cursor movement, % of master")
    zoom: Optional[float] = Field(None, description="Screen zooming, % of master")
    pan: Optional[float] = Field(None, description="Screen panning, % of master")


class SpringAnimationSchema(BaseModel):
    """Serialized spring record"""
    model_config = ConfigDict(allow_inf_nan=False)

    style: str
    mass: float
    tension: float
    friction: float
    transition_duration: float


class MotionBlurSchema(BaseModel):
    """Serialized motion blur settings"""
    model_config = ConfigDict(allow_inf_nan=False)

    enabled: bool
    amount: float
    cursor: float
    zoom: float
    pan: float


class AnimationSettingsSchema(BaseModel):
    """Serialized settings aggregate"""
    model_config = ConfigDict(allow_inf_nan=False)

    motion_blur: MotionBlurSchema
    cursor_animation: SpringAnimationSchema
    zoom_animation: SpringAnimationSchema
