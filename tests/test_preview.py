"""Tests for the display pipeline and image export.

Tests cover:
- Tone mapping and gamma
- Float to 8-bit conversion with clamping and rounding
- Plain PPM text: header, pixel data, line wrapping and trailing newline
- PNG and PPM files written to disk
- RMSE between images
"""

import numpy as np
import pytest


class TestToneMapping:
    """Tests for tone mapping and gamma."""

    def test_reinhard_maps_into_unit_range(self):
        from whitted.preview.display import tone_map_reinhard

        image = np.array([[[0.0, 1.0, 3.0]]])
        np.testing.assert_allclose(tone_map_reinhard(image), [[[0.0, 0.5, 0.75]]])

    def test_exposure(self):
        from whitted.preview.display import tone_map_exposure

        image = np.array([[[0.0, 1.0, 2.0]]])
        expected = 1.0 - np.exp(-image)
        np.testing.assert_allclose(tone_map_exposure(image), expected)

    def test_gamma_one_is_identity(self):
        from whitted.preview.display import apply_gamma

        image = np.array([[[0.25, 0.5, 0.75]]])
        np.testing.assert_array_equal(apply_gamma(image, 1.0), image)

    def test_gamma_two(self):
        from whitted.preview.display import apply_gamma

        image = np.array([[[0.25, 0.0, 1.0]]])
        np.testing.assert_allclose(apply_gamma(image, 2.0), [[[0.5, 0.0, 1.0]]])

    def test_non_positive_gamma_raises(self):
        from whitted.preview.display import apply_gamma

        with pytest.raises(ValueError):
            apply_gamma(np.zeros((1, 1, 3)), 0.0)

    def test_pipeline_clamps(self):
        from whitted.preview.display import process_image_for_display

        result = process_image_for_display(np.array([[[-1.0, 0.5, 2.0]]]))
        np.testing.assert_allclose(result, [[[0.0, 0.5, 1.0]]])

    def test_unknown_tone_map_raises(self):
        from whitted.preview.display import process_image_for_display

        with pytest.raises(ValueError):
            process_image_for_display(np.zeros((1, 1, 3)), tone_map="filmic")


class TestUint8:
    """Tests for image_to_uint8."""

    def test_scales_clamps_and_rounds_half_up(self):
        from whitted.preview.export import image_to_uint8

        image = np.array([[[1.5, 0.5, -0.5], [0.0, 1.0, 0.8]]])
        result = image_to_uint8(image)
        assert result.dtype == np.uint8
        np.testing.assert_array_equal(result, [[[255, 128, 0], [0, 255, 204]]])

    def test_accepts_canvas(self):
        from whitted.core.canvas import Canvas
        from whitted.core.tuples import color
        from whitted.preview.export import image_to_uint8

        c = Canvas(2, 1)
        c.write_pixel(1, 0, color(1, 0, 0))
        np.testing.assert_array_equal(image_to_uint8(c), [[[0, 0, 0], [255, 0, 0]]])


class TestPpm:
    """Tests for plain PPM output."""

    def test_header(self):
        from whitted.core.canvas import Canvas
        from whitted.preview.export import canvas_to_ppm

        lines = canvas_to_ppm(Canvas(5, 3)).splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        from whitted.core.canvas import Canvas
        from whitted.core.tuples import color
        from whitted.preview.export import canvas_to_ppm

        c = Canvas(5, 3)
        c.write_pixel(0, 0, color(1.5, 0, 0))
        c.write_pixel(2, 1, color(0, 0.5, 0))
        c.write_pixel(4, 2, color(-0.5, 0, 1))
        lines = canvas_to_ppm(c).splitlines()
        assert lines[3:6] == [
            "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
            "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
        ]

    def test_long_lines_are_split(self):
        from whitted.core.canvas import Canvas
        from whitted.core.tuples import color
        from whitted.preview.export import canvas_to_ppm

        c = Canvas(10, 2)
        c.fill(color(1, 0.8, 0.6))
        lines = canvas_to_ppm(c).splitlines()
        first = "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204"
        second = "153 255 204 153 255 204 153 255 204 153 255 204 153"
        assert lines[3:7] == [first, second, first, second]
        assert all(len(line) <= 70 for line in lines)

    def test_ends_with_newline(self):
        from whitted.core.canvas import Canvas
        from whitted.preview.export import canvas_to_ppm

        assert canvas_to_ppm(Canvas(5, 3)).endswith("\n")

    def test_save_ppm(self, tmp_path):
        from whitted.core.canvas import Canvas
        from whitted.preview.export import canvas_to_ppm, save_ppm

        c = Canvas(3, 2)
        path = tmp_path / "out.ppm"
        save_ppm(c, path)
        assert path.read_text() == canvas_to_ppm(c)


class TestPng:
    """Tests for PNG output."""

    def test_save_png_round_trips_pixels(self, tmp_path):
        from PIL import Image

        from whitted.core.canvas import Canvas
        from whitted.core.tuples import color
        from whitted.preview.export import save_png

        c = Canvas(4, 3)
        c.write_pixel(1, 2, color(1, 0.5, 0))
        path = tmp_path / "out.png"
        save_png(c, path)

        with Image.open(path) as img:
            assert img.size == (4, 3)
            assert img.mode == "RGB"
            assert img.getpixel((1, 2)) == (255, 128, 0)
            assert img.getpixel((0, 0)) == (0, 0, 0)


class TestRmse:
    """Tests for compute_rmse."""

    def test_identical_images(self):
        from whitted.preview.export import compute_rmse

        a = np.random.default_rng(0).random((4, 4, 3))
        assert compute_rmse(a, a) == 0.0

    def test_known_difference(self):
        from whitted.preview.export import compute_rmse

        a = np.zeros((2, 2, 3))
        b = np.full((2, 2, 3), 0.5)
        assert compute_rmse(a, b) == pytest.approx(0.5)

    def test_shape_mismatch_raises(self):
        from whitted.preview.export import compute_rmse

        with pytest.raises(ValueError):
            compute_rmse(np.zeros((2, 2, 3)), np.zeros((2, 3, 3)))
