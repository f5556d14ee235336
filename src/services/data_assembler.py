"""Data assembler - Builds domain objects from loaded config"""

from dataclasses import fields
from typing import Any, Dict, Mapping
from managers import ConfigManager
from models.domain import AnimationSettingsState, MotionBlurSettings, ParameterConfig, SpringAnimationState
from models.domain.canvas import CanvasDimensions, CanvasState
from engine.canvas import FALLBACK_DIMENSIONS, InvalidAspectRatioError, parse_aspect_ratio
from schemas.animation import SpringAnimationUpdate
from services.spring_updates import apply_spring_update
from models.enums import LogCategory, ParamID
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

DEFAULT_ASPECT_RATIO = "16:9"
_PARAM_PREFIXES = ("SPRING_", "MOTION_BLUR_")


def _field_name(param_id: ParamID) -> str:
    """SPRING_TRANSITION_DURATION -> transition_duration, MOTION_BLUR_PAN -> pan"""
    name = param_id.name
    for prefix in _PARAM_PREFIXES:
        if name.startswith(prefix):
            return name[len(prefix):].lower()
    return name.lower()


class DataAssembler:
    """
    Assembles domain objects from ConfigManager sections

    Every missing or broken section falls back to the dataclass defaults,
    which are the literal initial values (default preset, motion blur off).
    """

    def __init__(self, config_manager: ConfigManager):
        self.config_manager = config_manager
        log.debug("DataAssembler initialized")

    # ------------------------------------------------------------------
    # Animation settings
    # ------------------------------------------------------------------

    def build_animation_settings(self) -> AnimationSettingsState:
        """Build a fresh settings aggregate from animation_defaults"""
        defaults = self.config_manager.animation_defaults
        params = self.config_manager.parameter_manager

        state = AnimationSettingsState(
            motion_blur=self._build_motion_blur(defaults.get("motion_blur") or {}),
            cursor_animation=self._build_spring(defaults.get("cursor_animation") or {}, "cursor_animation"),
            zoom_animation=self._build_spring(defaults.get("zoom_animation") or {}, "zoom_animation"),
        )
        log.info(
            "Animation settings assembled",
            cursor=state.cursor_animation.style,
            zoom=state.zoom_animation.style,
            motion_blur="on" if state.motion_blur.enabled else "off",
        )

        spring_params = params.get_spring_parameters()
        self._check_ranges(state.cursor_animation, spring_params, "cursor_animation")
        self._check_ranges(state.zoom_animation, spring_params, "zoom_animation")
        self._check_ranges(state.motion_blur, params.get_motion_blur_parameters(), "motion_blur")
        return state

    def _build_motion_blur(self, data: Dict[str, Any]) -> MotionBlurSettings:
        known = {f.name for f in fields(MotionBlurSettings)}
        values = {}
        for key, value in data.items():
            if key not in known:
                log.warn("Unknown motion_blur field in config", field=key)
                continue
            values[key] = value
        return MotionBlurSettings(**values)

    def _build_spring(self, data: Dict[str, Any], section: str) -> SpringAnimationState:
        try:
            update = SpringAnimationUpdate.model_validate(data)
        except ValueError as ex:
            log.error(f"Invalid {section} in config, using defaults", error=str(ex))
            return SpringAnimationState()
        return apply_spring_update(SpringAnimationState(), update.supplied())

    @staticmethod
    def _check_ranges(record: Any, params: Mapping[ParamID, ParameterConfig], section: str) -> None:
        """Warn about initial values outside the configured slider ranges (values are kept)"""
        for param_id, param in params.items():
            name = _field_name(param_id)
            value = getattr(record, name, None)
            if value is not None and not param.validate(value):
                log.warn(
                    f"{section}.{name} outside slider range",
                    value=value,
                    range=f"{param.min}..{param.max}",
                )

    # ------------------------------------------------------------------
    # Canvas
    # ------------------------------------------------------------------

    def build_canvas_fallback(self) -> CanvasDimensions:
        """Dimensions used while the screen size is unknown"""
        fallback = self.config_manager.canvas.get("fallback") or {}
        try:
            return CanvasDimensions(
                width=int(fallback.get("width", FALLBACK_DIMENSIONS.width)),
                height=int(fallback.get("height", FALLBACK_DIMENSIONS.height)),
            )
        except (TypeError, ValueError) as ex:
            log.error("Invalid canvas fallback in config, using 1920x1080", error=str(ex))
            return FALLBACK_DIMENSIONS

    def build_canvas_state(self) -> CanvasState:
        """Build the canvas slice (no screen size yet, fallback dimensions)"""
        aspect_ratio = self.config_manager.canvas.get("aspect_ratio", DEFAULT_ASPECT_RATIO)
        try:
            parse_aspect_ratio(aspect_ratio)
        except InvalidAspectRatioError as ex:
            log.error(f"{ex}, using {DEFAULT_ASPECT_RATIO}")
            aspect_ratio = DEFAULT_ASPECT_RATIO

        return CanvasState(
            screen_size=None,
            aspect_ratio=aspect_ratio,
            canvas_dimensions=self.build_canvas_fallback(),
        )
