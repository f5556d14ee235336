"""
Spring easing

Closed-form position of a damped harmonic oscillator released from `start`
towards `end`. Used for camera zoom/pan and cursor tracking, sampled once
per rendered frame through a bound easing function.

Regimes are chosen by the damping ratio zeta:
  zeta < 1   underdamped, overshoots and oscillates
  zeta == 1  critically damped (exact comparison, no tolerance band)
  zeta > 1   overdamped, approaches without overshoot

Invalid configs (mass <= 0, tension <= 0) are not rejected; they produce
nan/inf and callers are expected to validate beforehand.
"""

import math
from typing import Callable, Union
from models.domain.animation import SpringConfig, SpringAnimationState
from models.enums import DampingRegime

SpringLike = Union[SpringConfig, SpringAnimationState]


def _sqrt(x: float) -> float:
    # nan instead of ValueError for negative input
    return math.sqrt(x) if x >= 0 else math.nan


def natural_frequency(config: SpringLike) -> float:
    """Undamped angular frequency w0 = sqrt(tension / mass)"""
    try:
        return _sqrt(config.tension / config.mass)
    except ZeroDivisionError:
        return math.inf if config.tension > 0 else math.nan


def damping_ratio(config: SpringLike) -> float:
    """Damping ratio zeta = friction / (2 * sqrt(tension * mass))"""
    try:
        return config.friction / (2 * _sqrt(config.tension * config.mass))
    except ZeroDivisionError:
        return math.inf if config.friction > 0 else math.nan


def damping_regime(config: SpringLike) -> DampingRegime:
    zeta = damping_ratio(config)
    if zeta < 1:
        return DampingRegime.UNDERDAMPED
    if zeta == 1:
        return DampingRegime.CRITICALLY_DAMPED
    return DampingRegime.OVERDAMPED


def _exp(x: float) -> float:
    # Large positive exponents only come from invalid configs
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def simulate_spring(t: float, start: float, end: float, config: SpringLike) -> float:
    """
    Position of a spring animation at normalized time t

    Args:
        t: Normalized time, clamped to [0, 1]
        start: Value at t=0
        end: Target value
        config: Spring parameters; transition_duration (seconds) maps t=1
                to elapsed physical time

    Returns:
        Interpolated value. Exactly `end` at t=1, since exponential decay
        never reaches the target in finite time.
    """
    t = max(0.0, min(1.0, t))
    if t == 1:
        return end

    displacement = end - start
    w0 = natural_frequency(config)
    zeta = damping_ratio(config)
    elapsed = t * config.transition_duration

    if zeta < 1:
        # Underdamped (oscillates)
        wd = w0 * _sqrt(1 - zeta * zeta)
        b = (zeta * w0) / wd if wd else math.nan
        envelope = _exp(-zeta * w0 * elapsed)
        phase = wd * elapsed
        if not math.isfinite(phase):
            # cos/sin reject infinite input
            return math.nan
        return start + displacement * (1 - envelope * (math.cos(phase) + b * math.sin(phase)))
    elif zeta == 1:
        # Critically damped
        scaled = w0 * elapsed
        return start + displacement * (1 - (1 + scaled) * _exp(-scaled))
    else:
        # Overdamped (also reached by nan zeta from invalid configs)
        root = _sqrt(zeta * zeta - 1)
        r1 = -w0 * (zeta - root)
        r2 = -w0 * (zeta + root)
        a = r2 / (r2 - r1) if r2 != r1 else math.nan
        b = 1 - a
        return start + displacement * (1 - a * _exp(r1 * elapsed) - b * _exp(r2 * elapsed))


def create_spring_easing(start: float, end: float, config: SpringLike) -> Callable[[float], float]:
    """
    Bind start/end/config into a single-argument easing f(t)

    The config is snapshotted, so later edits to a mutable record do not
    affect an animation that is already running.
    """
    frozen = config if isinstance(config, SpringConfig) else config.to_spring_config()

    def easing(t: float) -> float:
        return simulate_spring(t, start, end, frozen)

    return easing
