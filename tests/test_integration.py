"""Integration tests for end-to-end rendering pipeline.

This module tests the complete rendering pipeline from scene creation through
final image output. It verifies that all components work together correctly
and that the output meets basic quality criteria.

Tests are designed to be fast (low resolution, one sample per pixel) while
still exercising the full pipeline.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np


class TestShowcaseIntegration:
    """Integration tests for the showcase scene."""

    def test_showcase_scene_contents(self) -> None:
        """The scene contains every shape family and one light."""
        from whitted.geometry.shape import ShapeKind
        from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

        world, camera = create_showcase_scene(ShowcaseParams(width=40, height=20))
        kinds = {shape.kind for shape in world.objects}

        assert len(world.lights) == 1
        assert {ShapeKind.PLANE, ShapeKind.SPHERE, ShapeKind.CSG, ShapeKind.CONE} <= kinds
        assert ShapeKind.GROUP in kinds
        assert camera.hsize == 40
        assert camera.vsize == 20

    def test_showcase_end_to_end_renders_successfully(self) -> None:
        """Rendering produces a finite, non-black image."""
        from whitted.core.renderer import RenderOptions, render
        from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

        world, camera = create_showcase_scene(ShowcaseParams(width=24, height=12))
        canvas = render(camera, world, RenderOptions(threads=2, max_depth=3))

        image = canvas.pixels
        assert image.shape == (12, 24, 3)
        assert np.all(np.isfinite(image))
        assert np.all(image >= 0.0)
        assert image.mean() > 0.05

    def test_showcase_threads_do_not_change_image(self) -> None:
        """Thread count does not affect the result."""
        from whitted.core.renderer import RenderOptions, render
        from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

        world, camera = create_showcase_scene(ShowcaseParams(width=16, height=8))
        one = render(camera, world, RenderOptions(threads=1, max_depth=2))
        four = render(camera, world, RenderOptions(threads=4, max_depth=2))
        np.testing.assert_array_equal(one.pixels, four.pixels)

    def test_subdivision_does_not_change_image(self) -> None:
        """Bounding-volume subdivision only speeds things up."""
        from whitted.core.renderer import RenderOptions, render
        from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

        options = RenderOptions(threads=2, max_depth=2)
        flat_world, camera = create_showcase_scene(
            ShowcaseParams(width=16, height=8, subdivision_threshold=0)
        )
        divided_world, _ = create_showcase_scene(
            ShowcaseParams(width=16, height=8, subdivision_threshold=2)
        )
        flat = render(camera, flat_world, options)
        divided = render(camera, divided_world, options)
        np.testing.assert_allclose(divided.pixels, flat.pixels, atol=1e-9)


class TestRenderScript:
    """Integration tests for the command-line render script."""

    def test_render_showcase_writes_ppm(self, tmp_path: Path) -> None:
        from examples.render_scene import render_showcase

        output = render_showcase(
            width=12,
            height=6,
            threads=2,
            depth=2,
            output_path=str(tmp_path / "showcase.ppm"),
            quiet=True,
        )

        text = output.read_text()
        assert text.startswith("P3\n12 6\n255\n")

    def test_render_showcase_with_obj_mesh(self, tmp_path: Path) -> None:
        from PIL import Image

        from examples.render_scene import render_showcase

        mesh = tmp_path / "pyramid.obj"
        mesh.write_text(
            "v 0 2 0\nv -1 0 -1\nv 1 0 -1\nv 1 0 1\nv -1 0 1\n"
            "f 1 2 3\nf 1 3 4\nf 1 4 5\nf 1 5 2\n"
        )
        output = render_showcase(
            width=12,
            height=6,
            threads=2,
            depth=1,
            obj_path=str(mesh),
            output_path=str(tmp_path / "showcase.png"),
            quiet=True,
        )

        with Image.open(output) as img:
            assert img.size == (12, 6)

    def test_compare_with_serial_is_zero(self) -> None:
        from whitted.core.renderer import RenderOptions, render
        from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

        from examples.render_scene import compare_with_serial

        world, camera = create_showcase_scene(ShowcaseParams(width=10, height=6))
        options = RenderOptions(threads=3, max_depth=2)
        canvas = render(camera, world, options)
        assert compare_with_serial(camera, world, options, canvas) == 0.0

    def test_render_showcase_with_verify(self, tmp_path: Path) -> None:
        from examples.render_scene import render_showcase

        output = render_showcase(
            width=8,
            height=4,
            threads=2,
            depth=1,
            output_path=str(tmp_path / "verified.ppm"),
            verify=True,
            quiet=True,
        )
        assert output.exists()
