#!/usr/bin/env python3
"""Render the showcase scene.

This script renders the showcase scene end to end: it builds the world and
camera, optionally adds an OBJ mesh, renders on a pool of worker threads and
writes a PNG or PPM depending on the output file's extension.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH         Image width in pixels (default: 400)
    --height HEIGHT       Image height in pixels (default: 200)
    --threads N           Worker threads (default: 4)
    --aa {1,2,4,8,16}     Rays per pixel (default: 1)
    --depth DEPTH         Reflection/refraction depth (default: 5)
    --obj PATH            Add a Wavefront OBJ mesh to the scene
    --tone-map METHOD     none, reinhard or exposure (default: none)
    --output OUTPUT       Output file, .png or .ppm (default: showcase.png)
    --preview             Show the result in a Matplotlib window
    --verify              Re-render serially and report the RMSE against it
    --verbose             Log debug output
    --quiet               Suppress progress output

Example:
    python -m examples.render_scene --width 800 --height 400 --threads 8 --aa 4
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

logger = logging.getLogger("render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=4,
        help="Number of worker threads (default: 4)",
    )
    parser.add_argument(
        "--aa",
        type=int,
        choices=[1, 2, 4, 8, 16],
        default=1,
        help="Anti-aliasing rays per pixel (default: 1)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Maximum reflection/refraction depth (default: 5)",
    )
    parser.add_argument(
        "--obj",
        type=str,
        default=None,
        help="Wavefront OBJ mesh to add to the scene",
    )
    parser.add_argument(
        "--tone-map",
        choices=["none", "reinhard", "exposure"],
        default="none",
        help="Tone mapping method (default: none)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="showcase.png",
        help="Output file path, .png or .ppm (default: showcase.png)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the rendered image in a Matplotlib window",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-render on the calling thread and report the RMSE against it",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def compare_with_serial(camera, world, options, canvas) -> float:
    """RMSE between `canvas` and a serial render of the same scene.

    A threaded render must reproduce the serial one exactly, so anything
    above zero is logged as a warning.
    """
    from whitted.core.renderer import render_serial
    from whitted.preview.export import compute_rmse

    reference = render_serial(camera, world, options)
    rmse = compute_rmse(canvas.pixels, reference.pixels)
    if rmse > 0.0:
        logger.warning("Threaded render differs from serial render (RMSE %.6g)", rmse)
    else:
        logger.info("Threaded render matches serial render")
    return rmse


def render_showcase(
    width: int = 400,
    height: int = 200,
    threads: int = 4,
    aa: int = 1,
    depth: int = 5,
    obj_path: str | None = None,
    tone_map: str = "none",
    output_path: str = "showcase.png",
    preview: bool = False,
    verify: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the showcase scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        threads: Number of worker threads.
        aa: Rays per pixel (1, 2, 4, 8 or 16).
        depth: Maximum reflection/refraction depth.
        obj_path: Optional OBJ mesh, placed on the floor behind the glass sphere.
        tone_map: Tone mapping method for the output.
        output_path: Output file; the extension selects PNG or PPM.
        preview: Show the result in a window after saving.
        verify: Also render serially and log the RMSE between the two images.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from whitted.camera.pinhole import AASamples
    from whitted.core.matrix import scaling, translation
    from whitted.core.renderer import RenderOptions, render
    from whitted.preview.export import save_png, save_ppm
    from whitted.scene.obj_file import load_obj
    from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

    logger.info("Creating showcase scene (%dx%d)", width, height)
    world, camera = create_showcase_scene(ShowcaseParams(width=width, height=height))

    if obj_path is not None:
        mesh = load_obj(obj_path).to_group()
        mesh.transform = translation(1.0, 0.0, 2.5) @ scaling(0.5, 0.5, 0.5)
        world.add_object(mesh)
        world.divide(8)

    options = RenderOptions(threads=threads, aa_samples=AASamples(aa), max_depth=depth)
    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {elapsed:.1f}s",
                end="",
                flush=True,
            )

    canvas = render(camera, world, options, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file, tone_map=tone_map)
    else:
        save_png(canvas, output_file, tone_map=tone_map)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if verify:
        rmse = compare_with_serial(camera, world, options, canvas)
        if not quiet:
            print(f"RMSE vs serial render: {rmse:.6f}")

    if preview:
        from whitted.preview.display import show_preview

        show_preview(canvas, tone_map=tone_map)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        render_showcase(
            width=args.width,
            height=args.height,
            threads=args.threads,
            aa=args.aa,
            depth=args.depth,
            obj_path=args.obj,
            tone_map=args.tone_map,
            output_path=args.output,
            preview=args.preview,
            verify=args.verify,
            quiet=args.quiet,
        )
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
