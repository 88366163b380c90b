"""Tests for the gradient driver."""

import pytest
import io
import logging
import numpy as np

from lumenray.vec3 import Color
from lumenray.image import color_to_triple, to_bytes
from lumenray.gradient import GradientSettings, GradientRenderer, pixel_color


class TestGradientSettings:
    """Test GradientSettings configuration."""

    def test_default_values(self):
        settings = GradientSettings()
        assert settings.width == 256
        assert settings.height == 256
        assert settings.blue == 0.25

    def test_custom_values(self):
        settings = GradientSettings(width=400, height=200, blue=0.5)
        assert settings.width == 400
        assert settings.height == 200

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_rejects_bad_dimensions(self, width, height):
        with pytest.raises(ValueError):
            GradientSettings(width=width, height=height)

    def test_rejects_bad_blue(self):
        with pytest.raises(ValueError):
            GradientSettings(blue=1.5)


class TestPixelColor:
    """Test per-pixel colors."""

    def test_corners(self):
        settings = GradientSettings()
        assert pixel_color(0, 0, settings) == Color(0.0, 0.0, 0.25)
        assert pixel_color(255, 255, settings) == Color(1.0, 1.0, 0.25)

    def test_known_samples(self):
        settings = GradientSettings()
        assert color_to_triple(pixel_color(0, 255, settings)) == (0, 255, 63)
        assert color_to_triple(pixel_color(255, 0, settings)) == (255, 0, 63)

    def test_single_pixel_image(self):
        settings = GradientSettings(width=1, height=1)
        assert pixel_color(0, 0, settings) == Color(0.0, 0.0, 0.25)


class TestGradientRenderer:
    """Test rendering the full image."""

    def test_shape_and_dtype(self):
        image = GradientRenderer(GradientSettings(width=8, height=4)).render()
        assert image.shape == (4, 8, 3)
        assert image.dtype == np.float64

    def test_rows_run_top_to_bottom(self):
        settings = GradientSettings()
        pixels = to_bytes(GradientRenderer(settings).render())
        # Row 0 of the image is j = 255
        assert tuple(pixels[0, 0]) == (0, 255, 63)
        assert tuple(pixels[255, 255]) == (255, 0, 63)
        assert tuple(pixels[0, 255]) == (255, 255, 63)
        assert tuple(pixels[255, 0]) == (0, 0, 63)

    def test_blue_is_constant(self):
        image = GradientRenderer(GradientSettings(width=5, height=5, blue=0.75)).render()
        assert np.all(image[:, :, 2] == 0.75)

    def test_default_settings(self):
        renderer = GradientRenderer()
        assert renderer.settings == GradientSettings()

    def test_progress_callback(self):
        remaining = []
        renderer = GradientRenderer(GradientSettings(width=3, height=4))
        renderer.set_progress_callback(remaining.append)
        renderer.render()
        assert remaining == [3, 2, 1, 0]

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lumenray.gradient"):
            GradientRenderer(GradientSettings(width=2, height=2)).render()
        assert "Rendering 2x2 gradient" in caplog.text

    def test_write(self):
        out = io.StringIO()
        GradientRenderer(GradientSettings(width=2, height=2)).write(out)
        assert out.getvalue() == (
            "P3\n2 2\n255\n"
            "0 255 63\n"
            "255 255 63\n"
            "0 0 63\n"
            "255 0 63\n"
        )

    def test_full_image_line_count(self):
        out = io.StringIO()
        GradientRenderer().write(out)
        lines = out.getvalue().splitlines()
        assert lines[:3] == ["P3", "256 256", "255"]
        assert len(lines) == 3 + 256 * 256
