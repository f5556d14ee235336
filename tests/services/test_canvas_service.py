"""Tests for CanvasService (screen size / aspect ratio slice)."""

import pytest

from engine.canvas import InvalidAspectRatioError, InvalidScreenSizeError
from models.domain.canvas import CanvasDimensions, ScreenSize


class TestCanvasService:

    def test_initial_state(self, canvas_service):
        state = canvas_service.get_state()
        assert state.screen_size is None
        assert state.aspect_ratio == "16:9"
        assert canvas_service.get_dimensions() == CanvasDimensions(1920, 1080)

    def test_set_screen_size(self, canvas_service):
        dims = canvas_service.set_screen_size(ScreenSize(2560, 1600))
        # 16:9 is wider than 16:10 -> full width, 1440 high
        assert dims == CanvasDimensions(2560, 1440)
        assert canvas_service.get_dimensions() == dims

    def test_set_aspect_ratio(self, canvas_service):
        canvas_service.set_screen_size(ScreenSize(1920, 1080))
        assert canvas_service.set_aspect_ratio("9:16") == CanvasDimensions(608, 1080)
        assert canvas_service.get_state().aspect_ratio == "9:16"

    def test_aspect_ratio_without_screen_uses_fallback(self, canvas_service):
        assert canvas_service.set_aspect_ratio("1:1") == CanvasDimensions(1920, 1080)

    def test_clearing_screen_size(self, canvas_service):
        canvas_service.set_screen_size(ScreenSize(1280, 1024))
        assert canvas_service.set_screen_size(None) == CanvasDimensions(1920, 1080)

    def test_invalid_ratio_leaves_state_unchanged(self, canvas_service):
        canvas_service.set_screen_size(ScreenSize(1920, 1080))
        canvas_service.set_aspect_ratio("4:3")
        before = canvas_service.get_dimensions()

        with pytest.raises(InvalidAspectRatioError):
            canvas_service.set_aspect_ratio("4by3")

        assert canvas_service.get_state().aspect_ratio == "4:3"
        assert canvas_service.get_dimensions() == before

    def test_zero_screen_size_leaves_state_unchanged(self, canvas_service):
        canvas_service.set_screen_size(ScreenSize(1920, 1080))
        canvas_service.set_aspect_ratio("9:16")

        with pytest.raises(InvalidScreenSizeError):
            canvas_service.set_screen_size(ScreenSize(1920, 0))

        assert canvas_service.get_state().screen_size == ScreenSize(1920, 1080)
        assert canvas_service.get_dimensions() == CanvasDimensions(608, 1080)
