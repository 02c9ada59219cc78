"""Geometry for 2D shapes: vertices and triangle indices ready to draw."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from quadkit.color import WHITE, Color
from quadkit.vector import Vec2

_F32_EPSILON = 1.1920929e-07


class DrawMode(Enum):
    """How indices are assembled into primitives."""

    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, texture coordinates and color."""

    x: float
    y: float
    z: float
    u: float
    v: float
    color: Color

    @property
    def position(self) -> Vec2:
        """The vertex position in the xy plane."""
        return Vec2(self.x, self.y)


@dataclass
class Mesh:
    """Vertices plus indices into them, drawn in ``draw_mode``."""

    vertices: List[Vertex]
    indices: List[int]
    draw_mode: DrawMode = DrawMode.TRIANGLES


@dataclass
class DrawRectangleParams:
    """Offset (fraction of size), rotation in radians and color of a rectangle."""

    offset: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    color: Color = WHITE


def triangle(v1: Vec2, v2: Vec2, v3: Vec2, color: Color) -> Mesh:
    """A solid triangle through three points."""
    vertices = [Vertex(p.x, p.y, 0.0, 0.0, 0.0, color) for p in (v1, v2, v3)]
    return Mesh(vertices, [0, 1, 2])


def triangle_lines(
    v1: Vec2, v2: Vec2, v3: Vec2, thickness: float, color: Color
) -> List[Mesh]:
    """Outline of a triangle as thick line segments."""
    segments = ((v1, v2), (v2, v3), (v3, v1))
    return _collect(line(a.x, a.y, b.x, b.y, thickness, color) for a, b in segments)


def rectangle(x: float, y: float, w: float, h: float, color: Color) -> Mesh:
    """A solid rectangle with top-left corner (x, y)."""
    vertices = [
        Vertex(x, y, 0.0, 0.0, 0.0, color),
        Vertex(x + w, y, 0.0, 1.0, 0.0, color),
        Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        Vertex(x, y + h, 0.0, 0.0, 1.0, color),
    ]
    return Mesh(vertices, [0, 1, 2, 0, 2, 3])


def rectangle_lines(
    x: float, y: float, w: float, h: float, thickness: float, color: Color
) -> Mesh:
    """Outline of a rectangle; the border lies inside the rectangle."""
    t = thickness / 2.0
    vertices = [
        Vertex(x, y, 0.0, 0.0, 1.0, color),
        Vertex(x + w, y, 0.0, 1.0, 0.0, color),
        Vertex(x + w, y + h, 0.0, 1.0, 1.0, color),
        Vertex(x, y + h, 0.0, 0.0, 0.0, color),
        Vertex(x + t, y + t, 0.0, 0.0, 0.0, color),
        Vertex(x + w - t, y + t, 0.0, 0.0, 0.0, color),
        Vertex(x + w - t, y + h - t, 0.0, 0.0, 0.0, color),
        Vertex(x + t, y + h - t, 0.0, 0.0, 0.0, color),
    ]
    indices = [
        0, 1, 4, 1, 4, 5, 1, 5, 6, 1, 2, 6,
        3, 7, 2, 2, 7, 6, 0, 4, 3, 3, 4, 7,
    ]
    return Mesh(vertices, indices)


def rectangle_ex(
    x: float, y: float, w: float, h: float, params: Optional[DrawRectangleParams] = None
) -> Mesh:
    """A rectangle at (x, y), scaled, rotated about (x, y) and shifted by the offset."""
    if params is None:
        params = DrawRectangleParams()
    cos_r = math.cos(params.rotation)
    sin_r = math.sin(params.rotation)
    ox, oy = params.offset.x, params.offset.y

    def transform(px: float, py: float) -> tuple:
        sx = (px - ox) * w
        sy = (py - oy) * h
        return (x + cos_r * sx - sin_r * sy, y + sin_r * sx + cos_r * sy)

    corners = [
        (transform(0.0, 0.0), (0.0, 1.0)),
        (transform(0.0, 1.0), (1.0, 0.0)),
        (transform(1.0, 1.0), (1.0, 1.0)),
        (transform(1.0, 0.0), (1.0, 0.0)),
    ]
    vertices = [
        Vertex(px, py, 0.0, u, v, params.color) for (px, py), (u, v) in corners
    ]
    return Mesh(vertices, [0, 1, 2, 0, 2, 3])


def hexagon(
    x: float,
    y: float,
    size: float,
    border: float,
    vertical: bool,
    border_color: Color,
    fill_color: Color,
) -> List[Mesh]:
    """A filled hexagon, followed by its outline meshes when ``border`` > 0."""
    rotation = 90.0 if vertical else 0.0
    meshes = [poly(x, y, 6, size, rotation, fill_color)]
    if border > 0.0:
        meshes.extend(poly_lines(x, y, 6, size, rotation, border, border_color))
    return meshes


def _check_sides(sides: int) -> None:
    if not 1 <= sides <= 255:
        raise ValueError(f"a polygon needs 1..255 sides, got {sides}")


def _rim(sides: int, rotation: float, i: int) -> tuple:
    angle = i / sides * math.pi * 2.0 + math.radians(rotation)
    return math.cos(angle), math.sin(angle)


def poly(
    x: float, y: float, sides: int, radius: float, rotation: float, color: Color
) -> Mesh:
    """A solid regular polygon; ``rotation`` is in degrees, clockwise."""
    _check_sides(sides)
    vertices = [Vertex(x, y, 0.0, 0.0, 0.0, color)]
    indices: List[int] = []
    for i in range(sides + 1):
        rx, ry = _rim(sides, rotation, i)
        vertices.append(Vertex(x + radius * rx, y + radius * ry, 0.0, rx, ry, color))
        if i != sides:
            indices.extend((0, i + 1, i + 2))
    return Mesh(vertices, indices)


def poly_lines(
    x: float,
    y: float,
    sides: int,
    radius: float,
    rotation: float,
    thickness: float,
    color: Color,
) -> List[Mesh]:
    """Outline of a regular polygon as thick line segments."""
    _check_sides(sides)
    segments = []
    for i in range(sides):
        rx0, ry0 = _rim(sides, rotation, i)
        rx1, ry1 = _rim(sides, rotation, i + 1)
        segments.append(
            line(
                x + radius * rx0,
                y + radius * ry0,
                x + radius * rx1,
                y + radius * ry1,
                thickness,
                color,
            )
        )
    return _collect(segments)


def circle(x: float, y: float, r: float, color: Color) -> Mesh:
    """A solid circle, approximated by a 20-sided polygon."""
    return poly(x, y, 20, r, 0.0, color)


def circle_lines(x: float, y: float, r: float, thickness: float, color: Color) -> List[Mesh]:
    """Outline of a circle, approximated by a 20-sided polygon."""
    return poly_lines(x, y, 20, r, 0.0, thickness, color)


def line(
    x1: float, y1: float, x2: float, y2: float, thickness: float, color: Color
) -> Optional[Mesh]:
    """A thick line segment as a quad, or None when it is too short to draw."""
    nx = -(y2 - y1)
    ny = x2 - x1
    length = math.sqrt(nx * nx + ny * ny)
    half = thickness * 0.5
    if half != 0.0:
        tlen = length / half
    else:
        tlen = math.inf if length > 0.0 else math.nan
    if tlen < _F32_EPSILON:
        return None
    tx = nx / tlen
    ty = ny / tlen
    vertices = [
        Vertex(x1 + tx, y1 + ty, 0.0, 0.0, 0.0, color),
        Vertex(x1 - tx, y1 - ty, 0.0, 0.0, 0.0, color),
        Vertex(x2 + tx, y2 + ty, 0.0, 0.0, 0.0, color),
        Vertex(x2 - tx, y2 - ty, 0.0, 0.0, 0.0, color),
    ]
    return Mesh(vertices, [0, 1, 2, 2, 1, 3])


def _collect(meshes) -> List[Mesh]:
    return [mesh for mesh in meshes if mesh is not None]