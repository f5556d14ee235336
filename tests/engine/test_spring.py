"""
Tests for the spring easing evaluator.

Covers the three damping regimes, the boundary values at t=0 and t=1,
continuity around zeta=1 and the bound easing closure.
"""

import math

import pytest

from engine.spring import (
    create_spring_easing,
    damping_ratio,
    damping_regime,
    natural_frequency,
    simulate_spring,
)
from models.domain.animation import SpringConfig, SpringAnimationState
from models.enums import DampingRegime
from models.presets import SPRING_PHYSICS_PRESETS

UNDERDAMPED = SpringConfig(mass=1, tension=180, friction=12, transition_duration=1.0)   # wobbly
CRITICAL = SpringConfig(mass=1, tension=100, friction=20, transition_duration=1.0)      # zeta == 1
OVERDAMPED = SpringConfig(mass=1, tension=280, friction=60, transition_duration=1.0)    # slow

ALL_REGIMES = [UNDERDAMPED, CRITICAL, OVERDAMPED]


class TestRegimes:
    """Damping ratio and regime classification."""

    def test_regime_classification(self):
        assert damping_regime(UNDERDAMPED) == DampingRegime.UNDERDAMPED
        assert damping_regime(CRITICAL) == DampingRegime.CRITICALLY_DAMPED
        assert damping_regime(OVERDAMPED) == DampingRegime.OVERDAMPED

    def test_critical_is_exact(self):
        assert damping_ratio(CRITICAL) == 1.0
        assert natural_frequency(CRITICAL) == 10.0

    def test_presets_regimes(self):
        """Every shipped preset except 'slow' oscillates."""
        regimes = {style.value: damping_regime(SpringConfig(p.mass, p.tension, p.friction))
                   for style, p in SPRING_PHYSICS_PRESETS.items()}
        assert regimes["slow"] == DampingRegime.OVERDAMPED
        assert regimes["default"] == DampingRegime.UNDERDAMPED
        assert regimes["wobbly"] == DampingRegime.UNDERDAMPED


class TestBoundaries:
    """Values at the ends of the normalized time range."""

    @pytest.mark.parametrize("config", ALL_REGIMES)
    def test_starts_at_from(self, config):
        assert simulate_spring(0, 3.0, 7.0, config) == 3.0

    @pytest.mark.parametrize("config", ALL_REGIMES)
    def test_ends_exactly_at_to(self, config):
        assert simulate_spring(1, 3.0, 7.0, config) == 7.0

    @pytest.mark.parametrize("config", ALL_REGIMES)
    def test_time_is_clamped(self, config):
        assert simulate_spring(-0.5, 3.0, 7.0, config) == 3.0
        assert simulate_spring(1.5, 3.0, 7.0, config) == 7.0

    def test_zero_displacement_stays_put(self):
        for t in (0.1, 0.5, 0.9):
            assert simulate_spring(t, 2.0, 2.0, UNDERDAMPED) == 2.0


class TestTrajectory:
    """Shape of the curve in each regime."""

    def test_continuity_across_critical_boundary(self):
        critical = simulate_spring(0.5, 0, 1, CRITICAL)
        below = simulate_spring(0.5, 0, 1, SpringConfig(mass=1, tension=100, friction=19.98))
        above = simulate_spring(0.5, 0, 1, SpringConfig(mass=1, tension=100, friction=20.02))

        assert below == pytest.approx(critical, abs=1e-3)
        assert above == pytest.approx(critical, abs=1e-3)

    def test_critical_closed_form(self):
        # w0 = 10, te = 0.5 -> 1 - 6 * e^-5
        assert simulate_spring(0.5, 0, 1, CRITICAL) == pytest.approx(1 - 6 * math.exp(-5))

    def test_underdamped_overshoots(self):
        samples = [simulate_spring(i / 100, 0, 1, UNDERDAMPED) for i in range(100)]
        assert max(samples) > 1.0

    def test_overdamped_never_overshoots(self):
        samples = [simulate_spring(i / 100, 0, 1, OVERDAMPED) for i in range(100)]
        assert all(0.0 <= s <= 1.0 for s in samples)
        assert samples == sorted(samples)

    def test_reverse_direction(self):
        forward = simulate_spring(0.3, 0, 10, OVERDAMPED)
        backward = simulate_spring(0.3, 10, 0, OVERDAMPED)
        assert backward == pytest.approx(10 - forward)

    def test_duration_scales_time(self):
        """Doubling the duration at half the t gives the same physical time."""
        short = SpringConfig(mass=1, tension=170, friction=26, transition_duration=1.0)
        long = SpringConfig(mass=1, tension=170, friction=26, transition_duration=2.0)
        assert simulate_spring(0.2, 0, 1, long) == pytest.approx(simulate_spring(0.4, 0, 1, short))

    def test_accepts_mutable_record(self):
        record = SpringAnimationState(mass=1, tension=100, friction=20, transition_duration=1.0)
        assert simulate_spring(0.5, 0, 1, record) == simulate_spring(0.5, 0, 1, CRITICAL)


class TestInvalidConfigs:
    """Invalid configs propagate to nan/inf instead of raising."""

    @pytest.mark.parametrize("config", [
        SpringConfig(mass=0, tension=170, friction=26),
        SpringConfig(mass=-1, tension=170, friction=26),
        SpringConfig(mass=1, tension=0, friction=26),
        SpringConfig(mass=1, tension=-5, friction=26),
        SpringConfig(mass=1, tension=math.inf, friction=0),
        SpringConfig(mass=1e-300, tension=1e300, friction=0),
        SpringConfig(mass=1, tension=170, friction=0, transition_duration=math.inf),
    ])
    def test_no_exception(self, config):
        value = simulate_spring(0.5, 0, 1, config)
        assert math.isnan(value) or math.isinf(value)

    def test_terminal_value_still_exact(self):
        assert simulate_spring(1, 0, 1, SpringConfig(mass=0, tension=0, friction=0)) == 1


class TestCreateEasing:
    """Bound easing closure."""

    @pytest.mark.parametrize("config", ALL_REGIMES)
    def test_matches_simulate(self, config):
        ease = create_spring_easing(-2.0, 5.0, config)
        for i in range(-2, 13):
            t = i / 10
            assert ease(t) == simulate_spring(t, -2.0, 5.0, config)

    def test_idempotent(self):
        ease = create_spring_easing(0, 1, UNDERDAMPED)
        assert ease(0.37) == ease(0.37)

    def test_snapshots_mutable_record(self):
        record = SpringAnimationState(mass=1, tension=100, friction=20)
        ease = create_spring_easing(0, 1, record)
        before = ease(0.5)

        record.tension = 400
        assert ease(0.5) == before
