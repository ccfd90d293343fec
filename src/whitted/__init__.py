"""whitted: a recursive Whitted-style ray tracer.

Subpackages:
    core: Tuples, matrices, rays, the canvas and the parallel renderer
    geometry: Shapes, bounding boxes, CSG and intersection bookkeeping
    materials: Phong materials and procedural patterns
    scene: Lights, the World, OBJ import and a showcase scene
    camera: Pinhole camera with fixed-offset supersampling
    preview: Tone mapping, Matplotlib preview, PNG/PPM export
"""

__version__ = "0.1.0"
