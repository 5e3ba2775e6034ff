"""Flat renders of capes and heads from skin textures."""

from __future__ import annotations

from PIL import Image

from mcml.skin_draw import (
    SCALE_TYPEA,
    SCALE_TYPEB,
    draw,
    draw_mix,
    draw_with_fill_image,
    draw_with_fill_image_mix,
    new_canvas,
    scale,
)


def _rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def _cape(image: Image.Image, src_x: int) -> Image.Image:
    dest = new_canvas(10, 16)
    draw(dest, _rgba(image), 0, 0, src_x, 1, 10, 16)
    return scale(dest, SCALE_TYPEA)


def draw_cape_2d(image: Image.Image) -> Image.Image:
    """The front of a cape, enlarged 16 times."""
    return _cape(image, 1)


def draw_cape_back_2d(image: Image.Image) -> Image.Image:
    """The back of a cape, enlarged 16 times."""
    return _cape(image, 12)


def head_2d_draw_typea(image: Image.Image) -> Image.Image:
    """The face with its overlay, enlarged 16 times."""
    image = _rgba(image)
    dest = new_canvas(8, 8)
    draw(dest, image, 0, 0, 8, 8, 8, 8)
    draw_mix(dest, image, 0, 0, 40, 8, 8, 8)
    return scale(dest, SCALE_TYPEA)


def head_2d_draw_typeb(image: Image.Image) -> Image.Image:
    """The face with a slightly larger overlay on top, enlarged twice."""
    image = _rgba(image)
    dest = new_canvas(72, 72)
    draw_with_fill_image(dest, image, 4, 4, 8, 8, 8, 8, 8, 8)
    draw_with_fill_image_mix(dest, image, 0, 0, 40, 8, 8, 8, 9, 9)
    return scale(dest, SCALE_TYPEB)