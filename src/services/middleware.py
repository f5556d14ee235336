"""
Middleware for EventBus

Middleware = pipeline functions that process events before handlers.
Can modify events, block events, or log/validate events.
"""

from models.domain.canvas import CanvasDimensions
from models.events import (
    AnimationSettingsChangedEvent,
    CanvasDimensionsChangedEvent,
    Event,
    MotionBlurChangedEvent,
)
from models.enums import LogCategory
from utils.logger import get_logger
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.EVENT)


def _size(dimensions: CanvasDimensions) -> str:
    return f"{dimensions.width}x{dimensions.height}" if dimensions else "none"


def describe_event(event: Event) -> str:
    """
    One-line summary of a settings event

    Examples:
        "CURSOR default -> custom (tension=300.0)"
        "ZOOM gentle (reset)"
        "motion blur enabled=True"
        "canvas 1920x1080 -> 608x1080 (9:16)"
    """
    if isinstance(event, AnimationSettingsChangedEvent):
        old_style = Serializer.style_to_str(event.old.style)
        new_style = Serializer.style_to_str(event.new.style)
        styles = new_style if old_style == new_style else f"{old_style} -> {new_style}"
        numeric = ", ".join(f"{k}={v}" for k, v in event.changes.items() if k != "style")
        detail = f"({numeric})" if numeric else ("(reset)" if not event.changes else "")
        return f"{Serializer.enum_to_str(event.target)} {styles} {detail}".rstrip()

    if isinstance(event, MotionBlurChangedEvent):
        if not event.changes:
            return "motion blur (reset)"
        return "motion blur " + ", ".join(f"{k}={v}" for k, v in event.changes.items())

    if isinstance(event, CanvasDimensionsChangedEvent):
        return f"canvas {_size(event.old)} -> {_size(event.new)} ({event.aspect_ratio})"

    return str(event.to_data())


def log_middleware(event: Event) -> Event:
    """
    Log all events for debugging

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source_str = Serializer.enum_to_str(event.source)
    log.debug(f"Event: {event.type.name} from {source_str} | {describe_event(event)}")
    return event
