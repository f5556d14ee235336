"""Canvas domain models"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ScreenSize:
    """Pixel size of the recorded screen"""
    width: int
    height: int

    @property
    def aspect(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class CanvasDimensions:
    """Output canvas size, both values positive and even"""
    width: int
    height: int


@dataclass
class CanvasState:
    """Mutable canvas slice: inputs plus the derived dimensions"""
    screen_size: Optional[ScreenSize] = None
    aspect_ratio: str = "16:9"
    canvas_dimensions: CanvasDimensions = field(default_factory=lambda: CanvasDimensions(1920, 1080))
