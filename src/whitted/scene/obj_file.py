"""Wavefront OBJ import.

Reads the subset of OBJ that describes polygon meshes and turns it into
triangles collected in Groups:

    v x y z           vertex (1-based index order)
    vn x y z          vertex normal
    f 1 2 3 4         face; polygons are fan-triangulated from vertex 1
    f 1/2/3 4/5/6 ..  face with v/vt/vn references -> smooth triangles
    f 1//3 4//6 ..    face with v//vn references   -> smooth triangles
    g name            following faces go into the named group

Every other statement (comments, texture coordinates, materials, ...) is
counted in `ObjFile.ignored` and otherwise skipped. Malformed numbers and
out-of-range indices raise `ObjParseError` naming the offending line.

Example:
    >>> from whitted.scene.obj_file import parse_obj
    >>> obj = parse_obj("v -1 1 0\\nv -1 0 0\\nv 1 0 0\\nf 1 2 3\\n")
    >>> mesh = obj.to_group()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from whitted.core.tuples import Tuple4, point, vector
from whitted.geometry.group import Group
from whitted.geometry.shape import Shape
from whitted.geometry.triangle import SmoothTriangle, Triangle

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "default"


class ObjParseError(ValueError):
    """Raised when an OBJ statement cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {line.strip()!r}")
        self.line_number = line_number
        self.line = line
        self.reason = reason


@dataclass
class ObjFile:
    """Parsed contents of an OBJ file.

    Attributes:
        vertices: Vertex positions in file order (index 1 is vertices[0]).
        normals: Vertex normals in file order.
        groups: Named groups in order of first appearance; always starts
            with the default group.
        ignored: Number of statements that were skipped.
    """

    vertices: list[Tuple4] = field(default_factory=list)
    normals: list[Tuple4] = field(default_factory=list)
    groups: dict[str, Group] = field(default_factory=lambda: {DEFAULT_GROUP: Group()})
    ignored: int = 0

    def vertex(self, index: int) -> Tuple4:
        """Return the vertex with the given 1-based index."""
        return self.vertices[index - 1]

    def normal(self, index: int) -> Tuple4:
        """Return the normal with the given 1-based index."""
        return self.normals[index - 1]

    @property
    def default_group(self) -> Group:
        return self.groups[DEFAULT_GROUP]

    def to_group(self) -> Group:
        """Collect the parsed triangles into a single Group.

        Returns:
            The default group itself when no named groups were declared,
            otherwise a new Group whose children are the non-empty groups.
        """
        if len(self.groups) == 1:
            return self.default_group
        return Group(g for g in self.groups.values() if not g.is_empty())


# =============================================================================
# Parsing
# =============================================================================


def _parse_floats(args: list[str], line_number: int, line: str) -> tuple[float, float, float]:
    if len(args) < 3:
        raise ObjParseError(line_number, line, "expected three coordinates")
    try:
        x, y, z = (float(a) for a in args[:3])
    except ValueError as e:
        raise ObjParseError(line_number, line, "malformed number") from e
    return x, y, z


def _parse_index(token: str, count: int, kind: str, line_number: int, line: str) -> int:
    try:
        index = int(token)
    except ValueError as e:
        raise ObjParseError(line_number, line, f"malformed {kind} index {token!r}") from e
    if not 1 <= index <= count:
        raise ObjParseError(line_number, line, f"{kind} index {index} out of range 1..{count}")
    return index


def _face_triangles(obj: ObjFile, args: list[str], line_number: int, line: str) -> list[Shape]:
    if len(args) < 3:
        raise ObjParseError(line_number, line, "a face needs at least three vertices")

    vertex_ids: list[int] = []
    normal_ids: list[int | None] = []
    for ref in args:
        parts = ref.split("/")
        vertex_ids.append(_parse_index(parts[0], len(obj.vertices), "vertex", line_number, line))
        if len(parts) >= 3 and parts[2]:
            normal_ids.append(
                _parse_index(parts[2], len(obj.normals), "normal", line_number, line)
            )
        else:
            normal_ids.append(None)

    smooth = all(n is not None for n in normal_ids)
    normals = [obj.normal(n) for n in normal_ids if n is not None]
    triangles: list[Shape] = []

    # Fan triangulation around the first vertex
    for i in range(1, len(vertex_ids) - 1):
        p1, p2, p3 = (obj.vertex(vertex_ids[k]) for k in (0, i, i + 1))
        if smooth:
            triangles.append(SmoothTriangle(p1, p2, p3, normals[0], normals[i], normals[i + 1]))
        else:
            triangles.append(Triangle(p1, p2, p3))
    return triangles


def parse_obj(text: str) -> ObjFile:
    """Parse OBJ source text.

    Args:
        text: Full contents of an OBJ file.

    Returns:
        The parsed ObjFile.

    Raises:
        ObjParseError: On a malformed vertex, normal, face or group statement.
    """
    obj = ObjFile()
    current = obj.default_group

    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue

        keyword, args = tokens[0], tokens[1:]
        if keyword == "v":
            obj.vertices.append(point(*_parse_floats(args, line_number, line)))
        elif keyword == "vn":
            obj.normals.append(vector(*_parse_floats(args, line_number, line)))
        elif keyword == "f":
            current.add_children(_face_triangles(obj, args, line_number, line))
        elif keyword == "g":
            if not args:
                raise ObjParseError(line_number, line, "group statement without a name")
            current = obj.groups.setdefault(args[0], Group())
        else:
            obj.ignored += 1
            logger.debug("Ignoring OBJ line %d: %s", line_number, line.strip())

    return obj


def load_obj(path: str | Path) -> ObjFile:
    """Read and parse an OBJ file from disk."""
    path = Path(path)
    obj = parse_obj(path.read_text())
    triangles = sum(len(g.children) for g in obj.groups.values())
    logger.info(
        "Loaded %s: %d vertices, %d normals, %d triangles, %d ignored lines",
        path,
        len(obj.vertices),
        len(obj.normals),
        triangles,
        obj.ignored,
    )
    return obj
