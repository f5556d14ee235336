"""Animation settings service - Owns cursor/zoom spring records and motion blur"""

from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional, Union
from models.domain import AnimationSettingsState, MotionBlurSettings, SpringAnimationState
from models.enums import AnimationTarget, LogCategory
from models.events import AnimationSettingsChangedEvent, MotionBlurChangedEvent
from schemas.animation import MotionBlurUpdate, SpringAnimationUpdate
from engine.spring import create_spring_easing, damping_ratio
from services.data_assembler import DataAssembler
from services.event_bus import EventBus
from services.spring_updates import apply_spring_update
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.STATE)

SpringUpdateLike = Union[SpringAnimationUpdate, Mapping[str, Any]]
MotionBlurUpdateLike = Union[MotionBlurUpdate, Mapping[str, Any]]

_RECORD_ATTRS = {
    AnimationTarget.CURSOR: "cursor_animation",
    AnimationTarget.ZOOM: "zoom_animation",
}


class AnimationSettingsService:
    """
    Single owner of the AnimationSettingsState aggregate.

    Consumers receive the aggregate via get_state() and read it by
    reference. Every update is computed on a copy of the affected record
    and committed with one attribute assignment, so a reader never sees a
    half-applied update. Callers serialize updates (single writer).

    Payloads may be pydantic update models, plain mappings or keyword
    arguments; only supplied fields are applied.

    Example:
        service.update_cursor_animation(style="gentle")
        service.update_cursor_animation({"tension": 300})   # -> style "custom"
        ease = service.create_easing(AnimationTarget.ZOOM, 1.0, 2.5)
        value = ease(0.4)
    """

    def __init__(self, assembler: DataAssembler, event_bus: Optional[EventBus] = None):
        """
        Args:
            assembler: Builds the initial aggregate from config
            event_bus: Optional bus for change notifications
        """
        self.assembler = assembler
        self.event_bus = event_bus
        self.state: AnimationSettingsState = assembler.build_animation_settings()

    # === Read access ===

    def get_state(self) -> AnimationSettingsState:
        return self.state

    def get_animation(self, target: AnimationTarget) -> SpringAnimationState:
        return getattr(self.state, _RECORD_ATTRS[target])

    # === Motion blur ===

    def update_motion_blur(self, update: Optional[MotionBlurUpdateLike] = None, **fields) -> MotionBlurSettings:
        """
        Shallow-merge supplied motion blur fields (no clamping)

        Returns:
            The committed MotionBlurSettings
        """
        changes = self._coerce(MotionBlurUpdate, update, fields).supplied()
        if not changes:
            return self.state.motion_blur

        new = replace(self.state.motion_blur, **changes)
        self.state.motion_blur = new

        log.info("Motion blur updated", **changes)
        self._publish(MotionBlurChangedEvent(settings=new, changes=changes))
        return new

    # === Spring animations ===

    def update_cursor_animation(self, update: Optional[SpringUpdateLike] = None, **fields) -> SpringAnimationState:
        """Apply a partial update to the cursor spring record"""
        return self.update_animation(AnimationTarget.CURSOR, update, **fields)

    def update_zoom_animation(self, update: Optional[SpringUpdateLike] = None, **fields) -> SpringAnimationState:
        """Apply a partial update to the zoom spring record"""
        return self.update_animation(AnimationTarget.ZOOM, update, **fields)

    def update_animation(
        self,
        target: AnimationTarget,
        update: Optional[SpringUpdateLike] = None,
        **fields
    ) -> SpringAnimationState:
        """
        Apply a partial update to one spring record

        Preset snapping and custom detection follow apply_spring_update().

        Returns:
            The committed SpringAnimationState
        """
        changes = self._coerce(SpringAnimationUpdate, update, fields).supplied()
        attr = _RECORD_ATTRS[target]
        old: SpringAnimationState = getattr(self.state, attr)
        if not changes:
            return old

        new = apply_spring_update(old, changes)
        setattr(self.state, attr, new)

        log.info(
            f"{target.name.capitalize()} animation updated",
            style=new.style,
            mass=new.mass,
            tension=new.tension,
            friction=new.friction,
            zeta=f"{damping_ratio(new):.3f}",
        )
        self._publish(AnimationSettingsChangedEvent(target=target, old=old, new=new, changes=changes))
        return new

    def create_easing(self, target: AnimationTarget, start: float, end: float) -> Callable[[float], float]:
        """Spring easing bound to the target's current parameters"""
        return create_spring_easing(start, end, self.get_animation(target))

    def cursor_easing(self, start: float, end: float) -> Callable[[float], float]:
        return self.create_easing(AnimationTarget.CURSOR, start, end)

    def zoom_easing(self, start: float, end: float) -> Callable[[float], float]:
        return self.create_easing(AnimationTarget.ZOOM, start, end)

    def reset(self) -> AnimationSettingsState:
        """Restore the configured initial settings (publishes one event per record)"""
        fresh = self.assembler.build_animation_settings()
        for target, attr in _RECORD_ATTRS.items():
            old = getattr(self.state, attr)
            new = getattr(fresh, attr)
            setattr(self.state, attr, new)
            self._publish(AnimationSettingsChangedEvent(target=target, old=old, new=new, changes={}))
        self.state.motion_blur = fresh.motion_blur
        self._publish(MotionBlurChangedEvent(settings=fresh.motion_blur, changes={}))
        log.info("Animation settings reset")
        return self.state

    # === Internal ===

    @staticmethod
    def _coerce(model, update, fields: Dict[str, Any]):
        if update is None:
            return model.model_validate(fields)
        if isinstance(update, model):
            if not fields:
                return update
            update = update.supplied()
        return model.model_validate({**update, **fields})

    def _publish(self, event) -> None:
        if self.event_bus is not None:
            self.event_bus.publish_nowait(event)
