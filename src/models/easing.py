"""
Easing Models

Curve-based (non-physical) easing functions for simple, predictable UI
effects such as click ripples and cursor scaling. Camera and cursor motion
uses spring physics instead (see engine.spring).

All functions map progress t (0.0-1.0) to a factor (0.0 at start, 1.0 at end).
"""

from typing import Callable

EasingFunction = Callable[[float], float]


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_in_out_quint(t: float) -> float:
    """Quintic ease-in-out (slow start → fast middle → slow end, sharper than cubic)"""
    return 16 * t ** 5 if t < 0.5 else 1 - (-2 * t + 2) ** 5 / 2


def ease_out_quint(t: float) -> float:
    """
    Quintic ease-out (fast start → long gentle settle)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Factor (0.0 to 1.0)
    """
    return 1 - (1 - t) ** 5
