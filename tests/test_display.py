"""Tests for DisplayState and EngineConfig."""

import dataclasses

import pytest

from monarrange.config.settings import DEFAULT_SLIDE_STEP, EngineConfig
from monarrange.core.display import DisplayState
from monarrange.layout.engine import LayoutEngine


class TestDisplayState:
    """Logical size and conversion to the layout."""

    def test_logical_size_rounds_up(self):
        d = DisplayState("DP-1", 2560, 1440, scale=1.5)
        assert d.logical_width == 1707
        assert d.logical_height == 960

    def test_to_layout(self):
        d = DisplayState("DP-1", 3840, 2160, x=-100, y=20, scale=2.0)
        m = d.to_layout()
        assert (m.id, m.x, m.y, m.w, m.h) == ("DP-1", -100, 20, 1920, 1080)

    @pytest.mark.parametrize("scale", [0, -1.0])
    def test_rejects_bad_scale(self, scale):
        with pytest.raises(ValueError):
            DisplayState("DP-1", 1920, 1080, scale=scale)

    def test_str(self):
        assert str(DisplayState("DP-1", 1920, 1080, refresh_rate=144.0)) == "Display(DP-1 1920x1080@144Hz +0+0 x1)"
        assert "disabled" in str(DisplayState("DP-2", 1920, 1080, disabled=True))

    def test_record_fields(self):
        names = [f.name for f in dataclasses.fields(DisplayState)]
        assert names == ["name", "width", "height", "x", "y", "scale", "disabled", "refresh_rate"]


class TestEngineConfig:
    """Validation of engine settings."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.slide_step == DEFAULT_SLIDE_STEP == 50
        assert config.max_repair_passes is None
        assert LayoutEngine().slide_step == 50

    @pytest.mark.parametrize("kwargs", [
        {"slide_step": 0},
        {"slide_step": -10},
        {"max_repair_passes": 0},
    ])
    def test_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_frozen(self):
        config = EngineConfig()
        with pytest.raises(AttributeError):
            config.slide_step = 10
