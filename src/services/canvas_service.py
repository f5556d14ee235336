"""Canvas service - Screen size, aspect ratio and derived canvas dimensions"""

from typing import Optional
from models.domain.canvas import CanvasDimensions, CanvasState, ScreenSize
from models.enums import LogCategory
from models.events import CanvasDimensionsChangedEvent
from engine.canvas import recalculate_canvas_dimensions
from services.data_assembler import DataAssembler
from services.event_bus import EventBus
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CANVAS)


class CanvasService:
    """
    Owns the canvas slice and keeps canvas_dimensions in sync with
    screen_size and aspect_ratio.

    Setters compute the new dimensions before touching state, so an invalid
    aspect ratio or screen size raises (InvalidAspectRatioError,
    InvalidScreenSizeError) and leaves the slice as it was.
    """

    def __init__(self, assembler: DataAssembler, event_bus: Optional[EventBus] = None):
        self.event_bus = event_bus
        self.fallback = assembler.build_canvas_fallback()
        self.state: CanvasState = assembler.build_canvas_state()

    def get_state(self) -> CanvasState:
        return self.state

    def get_dimensions(self) -> CanvasDimensions:
        return self.state.canvas_dimensions

    def set_screen_size(self, screen_size: Optional[ScreenSize]) -> CanvasDimensions:
        """Record the screen size (None clears it) and recalculate"""
        dimensions = recalculate_canvas_dimensions(screen_size, self.state.aspect_ratio, self.fallback)
        self.state.screen_size = screen_size
        self._commit(dimensions)
        return dimensions

    def set_aspect_ratio(self, aspect_ratio: str) -> CanvasDimensions:
        """Change the target aspect ratio ('W:H') and recalculate"""
        dimensions = recalculate_canvas_dimensions(self.state.screen_size, aspect_ratio, self.fallback)
        self.state.aspect_ratio = aspect_ratio
        self._commit(dimensions)
        return dimensions

    def _commit(self, dimensions: CanvasDimensions) -> None:
        old = self.state.canvas_dimensions
        self.state.canvas_dimensions = dimensions

        log.info(
            "Canvas dimensions recalculated",
            aspect_ratio=self.state.aspect_ratio,
            screen=f"{self.state.screen_size.width}x{self.state.screen_size.height}" if self.state.screen_size else "unknown",
            canvas=f"{dimensions.width}x{dimensions.height}",
        )

        if self.event_bus is not None and old != dimensions:
            self.event_bus.publish_nowait(
                CanvasDimensionsChangedEvent(aspect_ratio=self.state.aspect_ratio, old=old, new=dimensions)
            )
