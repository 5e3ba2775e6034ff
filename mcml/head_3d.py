"""Three-quarter view of a skin's head as a textured cube."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from PIL import Image

Matrix = tuple[tuple[float, float, float, float], ...]
Point = tuple[float, float]
Point3 = tuple[float, float, float]

_SIZE = 400
_EPS = 1e-6

_CUBE_VERTICES: tuple[Point3, ...] = (
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.125, -1.125, 1.125),
    (1.125, -1.125, 1.125),
    (1.125, 1.125, 1.125),
    (-1.125, 1.125, 1.125),
    (-1.125, -1.125, -1.125),
    (1.125, -1.125, -1.125),
    (1.125, 1.125, -1.125),
    (-1.125, 1.125, -1.125),
)

# Faces in drawing order: four cube corners and the texture rectangle of each.
_FACES: tuple[tuple[tuple[int, int, int, int], tuple[int, int, int, int]], ...] = (
    ((8, 12, 15, 11), (56, 8, 64, 16)),
    ((8, 12, 13, 9), (48, 0, 56, 8)),
    ((8, 9, 10, 11), (48, 8, 56, 16)),
    ((0, 4, 7, 3), (24, 8, 32, 16)),
    ((0, 4, 5, 1), (16, 0, 24, 8)),
    ((0, 1, 2, 3), (16, 8, 24, 16)),
    ((3, 7, 6, 2), (8, 0, 16, 8)),
    ((4, 5, 6, 7), (0, 8, 8, 16)),
    ((1, 5, 6, 2), (8, 8, 16, 16)),
    ((11, 15, 14, 10), (40, 0, 48, 8)),
    ((12, 13, 14, 15), (32, 8, 40, 16)),
    ((9, 13, 14, 10), (40, 8, 48, 16)),
)

_BACK = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))
_BOTTOM = ((1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
_RIGHT = ((1.0, 1.0), (0.0, 1.0), (0.0, 0.0), (1.0, 0.0))
_TOP = ((1.0, 0.0), (0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
_LEFT = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))
_FRONT = ((1.0, 1.0), (0.0, 1.0), (0.0, 0.0), (1.0, 0.0))

_TEX_COORDS = (
    _BACK, _BOTTOM, _RIGHT, _BACK, _BOTTOM, _RIGHT,
    _TOP, _LEFT, _FRONT, _TOP, _LEFT, _FRONT,
)


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4)) for r in range(4)
    )


def _rotation_x(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return ((1.0, 0.0, 0.0, 0.0), (0.0, c, -s, 0.0), (0.0, s, c, 0.0), (0.0, 0.0, 0.0, 1.0))


def _rotation_y(angle: float) -> Matrix:
    c, s = math.cos(angle), math.sin(angle)
    return ((c, 0.0, s, 0.0), (0.0, 1.0, 0.0, 0.0), (-s, 0.0, c, 0.0), (0.0, 0.0, 0.0, 1.0))


def create_transform() -> Matrix:
    """World-to-screen matrix: turn 45 degrees, tilt 30, scale 100, centre at (200, 200)."""
    rot_y = _rotation_y(math.radians(45.0))
    rot_x = _rotation_x(math.radians(-30.0))
    scaling = (
        (100.0, 0.0, 0.0, 0.0),
        (0.0, -100.0, 0.0, 0.0),
        (0.0, 0.0, 100.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    translation = (
        (1.0, 0.0, 0.0, 200.0),
        (0.0, 1.0, 0.0, 200.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _matmul(_matmul(_matmul(translation, scaling), rot_x), rot_y)


def project(transform: Sequence[Sequence[float]], point: Point3) -> Point:
    """Screen position of a 3D point under ``transform``."""
    vec = (point[0], point[1], point[2], 1.0)
    x, y, _, w = (sum(row[k] * vec[k] for k in range(4)) for row in transform)
    if w != 0.0:
        x /= w
        y /= w
    return (x, y)


class _Triangle:
    """A screen triangle with texture coordinates, rasterised by pixel centres."""

    def __init__(self, pos: Sequence[Point], tex: Sequence[Point]) -> None:
        self.pos = pos
        self.tex = tex
        a, b, c = pos
        self.area = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])

    def _weight(self, q: Point, r: Point, px: float, py: float) -> float:
        return ((r[0] - q[0]) * (py - q[1]) - (r[1] - q[1]) * (px - q[0])) / self.area

    def weights(self, px: float, py: float) -> tuple[float, float, float]:
        a, b, c = self.pos
        return (self._weight(b, c, px, py), self._weight(c, a, px, py), self._weight(a, b, px, py))

    def span(self, py: float) -> Optional[tuple[float, float]]:
        """Range of x where the pixel centre row ``py`` lies inside the triangle."""
        lo, hi = -math.inf, math.inf
        a, b, c = self.pos
        for q, r in ((b, c), (c, a), (a, b)):
            coef = -(r[1] - q[1]) / self.area
            const = ((r[0] - q[0]) * (py - q[1]) + (r[1] - q[1]) * q[0]) / self.area
            if coef == 0.0:
                if const < -_EPS:
                    return None
                continue
            bound = (-_EPS - const) / coef
            if coef > 0:
                lo = max(lo, bound)
            else:
                hi = min(hi, bound)
        return (lo, hi) if lo <= hi else None


def _blend(pixels: bytearray, offset: int, color: tuple[int, int, int, int]) -> None:
    sa = color[3] / 255.0
    if sa == 0.0:
        return
    da = pixels[offset + 3] / 255.0
    out_a = sa + da * (1.0 - sa)
    for ch in range(3):
        value = (color[ch] * sa + pixels[offset + ch] * da * (1.0 - sa)) / out_a
        pixels[offset + ch] = min(255, int(round(value)))
    pixels[offset + 3] = min(255, int(round(out_a * 255.0)))


def _draw_face(
    pixels: bytearray, texture: Image.Image, transform: Matrix, index: int
) -> None:
    corners, rect = _FACES[index]
    face = texture.crop(rect)
    positions = [project(transform, _CUBE_VERTICES[k]) for k in corners]
    tex = [(u * 8.0, v * 8.0) for u, v in _TEX_COORDS[index]]
    triangles = [
        _Triangle([positions[i] for i in fan], [tex[i] for i in fan])
        for fan in ((0, 1, 2), (0, 2, 3))
    ]
    covered: set[tuple[int, int]] = set()
    for tri in triangles:
        if abs(tri.area) < 1e-9:
            continue
        ys = [p[1] for p in tri.pos]
        y_start = max(0, math.floor(min(ys)))
        y_end = min(_SIZE - 1, math.ceil(max(ys)))
        for y in range(y_start, y_end + 1):
            py = y + 0.5
            span = tri.span(py)
            if span is None:
                continue
            x_start = max(0, math.ceil(span[0] - 0.5))
            x_end = min(_SIZE - 1, math.floor(span[1] - 0.5))
            for x in range(x_start, x_end + 1):
                if (x, y) in covered:
                    continue
                covered.add((x, y))
                w0, w1, w2 = tri.weights(x + 0.5, py)
                t0, t1, t2 = tri.tex
                u = w0 * t0[0] + w1 * t1[0] + w2 * t2[0]
                v = w0 * t0[1] + w1 * t1[1] + w2 * t2[1]
                tx = min(max(math.floor(u), 0), 7)
                ty = min(max(math.floor(v), 0), 7)
                _blend(pixels, (y * _SIZE + x) * 4, face.getpixel((tx, ty)))


def draw_head_3d(image: Image.Image) -> Image.Image:
    """A 400x400 RGBA render of the head cube with its overlay layer."""
    texture = image if image.mode == "RGBA" else image.convert("RGBA")
    transform = create_transform()
    pixels = bytearray(_SIZE * _SIZE * 4)
    for index in range(len(_FACES)):
        _draw_face(pixels, texture, transform, index)
    return Image.frombytes("RGBA", (_SIZE, _SIZE), bytes(pixels))