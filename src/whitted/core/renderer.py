"""Parallel rendering loop.

Rendering is embarrassingly parallel across pixels. `render` splits the
image rows into `threads` contiguous ranges (rows // threads each, with the
remainder going to the last range) and runs one task per range on a thread
pool. Each task traces its rows into a private buffer and returns it; only
the coordinating thread writes into the Canvas, in row order, after each
task completes.

Workers share the World and Camera read-only. `render` calls
`World.prepare()` before starting them so no cached bounding box is filled
in lazily from several threads at once.

Any exception raised while tracing propagates out of `render` through
`Future.result()`.

Example:
    >>> import math
    >>> from whitted.camera.pinhole import AASamples, Camera
    >>> from whitted.core.renderer import RenderOptions, render
    >>> from whitted.scene.world import default_world
    >>> camera = Camera(64, 48, math.pi / 3)
    >>> options = RenderOptions(threads=4, aa_samples=AASamples.X4)
    >>> canvas = render(camera, default_world(), options)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from whitted.camera.pinhole import AASamples, Camera
from whitted.core.canvas import Canvas
from whitted.core.tuples import Color, black
from whitted.scene.world import MAX_RECURSION_DEPTH, World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


# =============================================================================
# Render Configuration
# =============================================================================


@dataclass(frozen=True)
class RenderOptions:
    """Settings for a render.

    Attributes:
        threads: Number of worker threads (>= 1).
        aa_samples: Rays traced per pixel.
        max_depth: Reflection/refraction bounces per primary ray (>= 0).

    Example:
        >>> RenderOptions(threads=8, aa_samples=AASamples.X16)
        >>> RenderOptions(threads=0)  # raises ValueError
    """

    threads: int = 1
    aa_samples: AASamples = AASamples.X1
    max_depth: int = MAX_RECURSION_DEPTH

    def __post_init__(self) -> None:
        if self.threads < 1:
            raise ValueError(f"threads must be >= 1, got {self.threads}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        # Accept plain ints such as 4; anything else raises ValueError
        object.__setattr__(self, "aa_samples", AASamples(self.aa_samples))


# =============================================================================
# Work partitioning
# =============================================================================


def row_ranges(rows: int, threads: int) -> list[tuple[int, int]]:
    """Split [0, rows) into `threads` contiguous half-open ranges.

    Each range gets rows // threads rows and the last one also takes the
    remainder. With more threads than rows, the leading ranges are empty.
    """
    if threads < 1:
        raise ValueError(f"threads must be >= 1, got {threads}")
    per_thread = rows // threads
    ranges = [(i * per_thread, (i + 1) * per_thread) for i in range(threads)]
    ranges[-1] = (ranges[-1][0], rows)
    return ranges


# =============================================================================
# Tracing
# =============================================================================


def pixel_color(camera: Camera, world: World, px: int, py: int, options: RenderOptions) -> Color:
    """Average color of all sample rays for one pixel."""
    rays = camera.rays_for_pixel(px, py, options.aa_samples)
    if len(rays) == 1:
        return world.color_at(rays[0], options.max_depth)

    total = black()
    for ray in rays:
        total = total + world.color_at(ray, options.max_depth)
    return total / len(rays)


def render_rows(
    camera: Camera, world: World, start: int, end: int, options: RenderOptions
) -> npt.NDArray[np.float64]:
    """Trace rows [start, end) into a new (end - start, hsize, 3) buffer."""
    buffer = np.zeros((end - start, camera.hsize, 3), dtype=np.float64)
    for row, py in enumerate(range(start, end)):
        for px in range(camera.hsize):
            buffer[row, px] = pixel_color(camera, world, px, py, options)
    return buffer


def render(
    camera: Camera,
    world: World,
    options: RenderOptions | None = None,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render the world through the camera on a pool of worker threads.

    Args:
        camera: The camera; its hsize/vsize set the canvas size.
        world: The scene. It is prepared and then only read.
        options: Thread count, sampling and recursion depth.
        callback: Optional function called on the calling thread with
            (rows_done, total_rows) each time a row range is written.

    Returns:
        The rendered canvas.
    """
    if options is None:
        options = RenderOptions()

    world.prepare()
    canvas = Canvas(camera.hsize, camera.vsize)
    ranges = row_ranges(camera.vsize, options.threads)

    logger.info(
        "Rendering %dx%d with %d threads: %d rows per thread, %d samples per pixel",
        camera.hsize,
        camera.vsize,
        options.threads,
        camera.vsize // options.threads,
        int(options.aa_samples),
    )
    started = time.perf_counter()

    rows_done = 0
    with ThreadPoolExecutor(max_workers=options.threads, thread_name_prefix="render") as pool:
        futures = [
            (start, end, pool.submit(render_rows, camera, world, start, end, options))
            for start, end in ranges
            if end > start
        ]
        for start, end, future in futures:
            buffer = future.result()
            for row, py in enumerate(range(start, end)):
                canvas.write_row(py, buffer[row])
            rows_done += end - start
            logger.debug("Rows %d-%d done (%d/%d)", start, end - 1, rows_done, camera.vsize)
            if callback is not None:
                callback(rows_done, camera.vsize)

    logger.info("Render finished in %.2fs", time.perf_counter() - started)
    return canvas


def render_serial(camera: Camera, world: World, options: RenderOptions | None = None) -> Canvas:
    """Render on the calling thread, pixel by pixel.

    Produces exactly the same canvas as `render` with any thread count.
    """
    if options is None:
        options = RenderOptions()

    world.prepare()
    canvas = Canvas(camera.hsize, camera.vsize)
    for py in range(camera.vsize):
        for px in range(camera.hsize):
            canvas.write_pixel(px, py, pixel_color(camera, world, px, py, options))
    return canvas
