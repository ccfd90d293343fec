"""Scene module for world assembly and shading.

This module holds everything that turns shapes into a lit scene:

Components:
    light: Point light source
    world: World container and the recursive Whitted shading algorithm
    obj_file: Wavefront OBJ import into Groups of triangles
    showcase: Ready-made demo scene exercising every shape and material

The World is built once, prepared, and then only read during rendering:
    - Shapes and lights are added with add_object / add_light
    - divide() builds the bounding-volume hierarchy
    - prepare() refreshes cached bounds before worker threads start
"""

from .light import PointLight
from .obj_file import ObjFile, ObjParseError, load_obj, parse_obj
from .showcase import ShowcaseParams, create_hexagon, create_rounded_cube, create_showcase_scene
from .world import MAX_RECURSION_DEPTH, World, default_world

__all__ = [
    # Lights
    "PointLight",
    # World
    "World",
    "default_world",
    "MAX_RECURSION_DEPTH",
    # Mesh import
    "ObjFile",
    "ObjParseError",
    "parse_obj",
    "load_obj",
    # Showcase scene
    "ShowcaseParams",
    "create_showcase_scene",
    "create_hexagon",
    "create_rounded_cube",
]
