"""Flat front views of a whole player from a skin texture."""

from __future__ import annotations

from enum import Enum
from typing import Union

from PIL import Image

from mcml.skin_draw import (
    SCALE_TYPEB,
    SCALE_TYPEC,
    SkinDrawError,
    draw_mix,
    draw_with_fill_image,
    draw_with_fill_image_mix,
    fill_image,
    mix_color,
    new_canvas,
    scale,
)


class SkinType(Enum):
    """Layout of a skin texture."""

    OLD = "Old"
    NEW = "New"
    NEW_SLIM = "NewSlim"


def _rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def _has_overlay(skin_type: SkinType) -> bool:
    return skin_type in (SkinType.NEW, SkinType.NEW_SLIM)


def _check_region(image: Image.Image, x: int, y: int, width: int, height: int) -> None:
    if x < 0 or y < 0 or x + width > image.width or y + height > image.height:
        raise SkinDrawError("limb region out of bounds")


def _copy_limb_mixed(
    canvas: Image.Image,
    image: Image.Image,
    src: tuple[int, int],
    dst: tuple[int, int],
    tex: tuple[int, int],
) -> None:
    """Copy a 4x12 limb of ``canvas`` to ``dst``, blending the texture at ``tex`` over it."""
    _check_region(canvas, *src, 4, 12)
    _check_region(canvas, *dst, 4, 12)
    _check_region(image, *tex, 4, 12)
    for i in reversed(range(4)):
        for j in range(12):
            below = canvas.getpixel((src[0] + i, src[1] + j))
            over = image.getpixel((tex[0] + i, tex[1] + j))
            canvas.putpixel((dst[0] + i, dst[1] + j), mix_color(below, over))


def _fill_limb_blocks(
    canvas: Image.Image, image: Image.Image, x: int, y: int, tex: tuple[int, int]
) -> None:
    """Paint a 4x12 limb of the texture at ``tex`` as 8x8 blocks from ``(x, y)``."""
    _check_region(image, *tex, 4, 12)
    for i in reversed(range(4)):
        for j in range(12):
            color = image.getpixel((tex[0] + i, tex[1] + j))
            fill_image(canvas, x + i * 8, y + j * 8, 8, 8, color)


def skin_2d_draw_typea(image: Image.Image, skin_type: Union[SkinType, str]) -> Image.Image:
    """The player seen from the front, 128x256, overlays blended flat."""
    skin_type = SkinType(skin_type)
    image = _rgba(image)
    canvas = new_canvas(16, 32)

    draw_mix(canvas, image, 4, 0, 8, 8, 8, 8)
    draw_mix(canvas, image, 4, 0, 40, 8, 8, 8)
    draw_mix(canvas, image, 4, 8, 20, 20, 8, 12)
    if _has_overlay(skin_type):
        draw_mix(canvas, image, 4, 8, 20, 36, 8, 12)

    if skin_type is SkinType.NEW_SLIM:
        draw_mix(canvas, image, 1, 8, 44, 20, 3, 12)
        draw_mix(canvas, image, 1, 8, 44, 36, 3, 12)
    else:
        draw_mix(canvas, image, 0, 8, 44, 20, 4, 12)
        if skin_type is not SkinType.OLD:
            draw_mix(canvas, image, 0, 8, 44, 36, 4, 12)

    if skin_type is SkinType.NEW_SLIM:
        draw_mix(canvas, image, 12, 8, 36, 52, 3, 12)
        draw_mix(canvas, image, 12, 8, 52, 52, 3, 12)
    elif skin_type is SkinType.OLD:
        _copy_limb_mixed(canvas, image, (0, 8), (12, 8), (44, 20))
    else:
        draw_mix(canvas, image, 12, 8, 36, 52, 4, 12)
        draw_mix(canvas, image, 12, 8, 52, 52, 4, 12)

    draw_mix(canvas, image, 4, 20, 4, 20, 4, 12)
    if _has_overlay(skin_type):
        draw_mix(canvas, image, 4, 20, 4, 36, 4, 12)

    if skin_type is SkinType.OLD:
        _copy_limb_mixed(canvas, image, (0, 20), (8, 20), (4, 20))
    else:
        draw_mix(canvas, image, 8, 20, 20, 52, 4, 12)
        draw_mix(canvas, image, 8, 20, 4, 52, 4, 12)

    return scale(canvas, SCALE_TYPEC)


def skin_2d_draw_typeb(image: Image.Image, skin_type: Union[SkinType, str]) -> Image.Image:
    """The player seen from the front, 272x532, overlays drawn slightly larger."""
    skin_type = SkinType(skin_type)
    image = _rgba(image)
    canvas = new_canvas(136, 266)

    draw_with_fill_image(canvas, image, 4 + 8 * 4, 4, 8, 8, 8, 8, 8, 8)
    draw_with_fill_image(canvas, image, 4 + 8 * 4, 4 + 8 * 8, 20, 20, 8, 12, 8, 8)

    if skin_type is SkinType.NEW_SLIM:
        draw_with_fill_image(canvas, image, 4 + 8, 4 + 8 * 8, 44, 20, 3, 12, 8, 8)
    else:
        draw_with_fill_image(canvas, image, 4, 4 + 8 * 8, 44, 20, 4, 12, 8, 8)

    if skin_type is SkinType.NEW_SLIM:
        draw_with_fill_image(canvas, image, 4 + 12 * 8, 4 + 8 * 8, 36, 52, 3, 12, 8, 8)
    elif skin_type is SkinType.OLD:
        _fill_limb_blocks(canvas, image, 4 + 12 * 8, 4 + 8 * 8, (44, 20))
    else:
        draw_with_fill_image(canvas, image, 4 + 12 * 8, 4 + 8 * 8, 36, 52, 4, 12, 8, 8)

    draw_with_fill_image(canvas, image, 4 + 4 * 8, 4 + 20 * 8, 4, 20, 4, 12, 8, 8)

    if skin_type is SkinType.OLD:
        _fill_limb_blocks(canvas, image, 4 + 8 * 8, 4 + 20 * 8, (4, 20))
    else:
        draw_with_fill_image(canvas, image, 4 + 8 * 8, 4 + 20 * 8, 20, 52, 4, 12, 8, 8)

    if _has_overlay(skin_type):
        draw_with_fill_image_mix(canvas, image, 4 * 8, 8 * 8 - 2, 20, 36, 8, 12, 9, 9)

    draw_with_fill_image_mix(canvas, image, 4 * 9 - 4, 0, 40, 8, 8, 8, 9, 9)

    if skin_type is SkinType.NEW_SLIM:
        draw_with_fill_image_mix(canvas, image, 8 + 1, 8 * 8 + 2, 44, 36, 3, 12, 9, 9)
        draw_with_fill_image_mix(canvas, image, 12 * 8 + 4, 8 * 8 + 2, 52, 52, 3, 12, 9, 9)
    elif skin_type is SkinType.NEW:
        draw_with_fill_image_mix(canvas, image, 0, 8 * 8 + 2, 44, 36, 4, 12, 9, 9)
        draw_with_fill_image_mix(canvas, image, 12 * 8 + 4, 8 * 8 + 2, 52, 52, 4, 12, 9, 9)

    if _has_overlay(skin_type):
        draw_with_fill_image_mix(canvas, image, 4 * 8 + 2, 20 * 8 - 2, 4, 36, 4, 12, 9, 9)
        draw_with_fill_image_mix(canvas, image, 8 * 8 + 2, 20 * 8 - 2, 4, 52, 4, 12, 9, 9)

    return scale(canvas, SCALE_TYPEB)