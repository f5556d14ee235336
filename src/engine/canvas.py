"""
Canvas dimension resolver

Derives output canvas dimensions from the recorded screen size and a
target aspect ratio. The canvas fits inside the screen and both sides are
forced even, since chroma-subsampled video encoders (yuv420) reject odd
pixel counts.
"""

import math
import re
from typing import Optional, Tuple
from models.domain.canvas import CanvasDimensions, ScreenSize

FALLBACK_DIMENSIONS = CanvasDimensions(1920, 1080)

_ASPECT_RATIO_PATTERN = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")


class InvalidAspectRatioError(ValueError):
    """Raised when an aspect ratio is not of the form 'W:H' with positive integers"""

    def __init__(self, aspect_ratio: object):
        super().__init__(f"Invalid aspect ratio: {aspect_ratio!r} (expected 'W:H', e.g. '16:9')")
        self.aspect_ratio = aspect_ratio


class InvalidScreenSizeError(ValueError):
    """Raised when a recorded screen size has a non-positive side"""

    def __init__(self, screen_size: ScreenSize):
        super().__init__(f"Invalid screen size: {screen_size.width}x{screen_size.height} (both sides must be positive)")
        self.screen_size = screen_size


def parse_aspect_ratio(aspect_ratio: str) -> Tuple[int, int]:
    """
    Parse 'W:H' into a pair of positive integers

    Raises:
        InvalidAspectRatioError: on anything else
    """
    if not isinstance(aspect_ratio, str):
        raise InvalidAspectRatioError(aspect_ratio)
    match = _ASPECT_RATIO_PATTERN.match(aspect_ratio)
    if not match:
        raise InvalidAspectRatioError(aspect_ratio)
    ratio_w, ratio_h = int(match.group(1)), int(match.group(2))
    if ratio_w <= 0 or ratio_h <= 0:
        raise InvalidAspectRatioError(aspect_ratio)
    return ratio_w, ratio_h


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up (2.5 -> 3), unlike round()'s ties-to-even"""
    return int(math.floor(value + 0.5))


def _make_even(value: int) -> int:
    return value if value % 2 == 0 else value + 1


def recalculate_canvas_dimensions(
    screen_size: Optional[ScreenSize],
    aspect_ratio: Optional[str],
    fallback: CanvasDimensions = FALLBACK_DIMENSIONS,
) -> CanvasDimensions:
    """
    Fit the target aspect ratio inside the screen

    Args:
        screen_size: Recorded screen size, None when not yet known
        aspect_ratio: Target ratio string 'W:H'
        fallback: Returned when screen size or aspect ratio is missing

    Returns:
        CanvasDimensions with both sides even

    Raises:
        InvalidAspectRatioError: if aspect_ratio is malformed
        InvalidScreenSizeError: if screen_size has a zero or negative side
    """
    if screen_size is None or not aspect_ratio:
        return fallback
    if screen_size.width <= 0 or screen_size.height <= 0:
        raise InvalidScreenSizeError(screen_size)

    ratio_w, ratio_h = parse_aspect_ratio(aspect_ratio)
    screen_aspect = screen_size.aspect
    target_aspect = ratio_w / ratio_h

    if target_aspect > screen_aspect:
        # Wider than the screen: full width, letterboxed height
        width = screen_size.width
        height = round_half_up(screen_size.width / target_aspect)
    else:
        height = screen_size.height
        width = round_half_up(screen_size.height * target_aspect)

    return CanvasDimensions(width=_make_even(width), height=_make_even(height))
