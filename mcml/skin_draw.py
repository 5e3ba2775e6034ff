"""Pixel-level drawing primitives for skin textures.

Images are Pillow ``RGBA`` images; colours are ``(r, g, b, a)`` tuples.
Drawing functions change ``dest`` in place and raise :class:`SkinDrawError`
when a region does not fit inside an image.
"""

from __future__ import annotations

import struct
from typing import Iterator

from PIL import Image

SCALE_TYPEA = 16
SCALE_TYPEB = 2
SCALE_TYPEC = 8

Color = tuple[int, int, int, int]

_MODE = "RGBA"


class SkinDrawError(ValueError):
    """Raised when a drawing operation cannot be carried out."""


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _as_rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == _MODE else image.convert(_MODE)


def _require_rgba(image: Image.Image) -> None:
    if image.mode != _MODE:
        raise SkinDrawError(f"destination must be RGBA, got {image.mode}")


def _fits(image: Image.Image, x: int, y: int, width: int, height: int) -> bool:
    return x >= 0 and y >= 0 and x + width <= image.width and y + height <= image.height


def _pixels(image: Image.Image) -> Iterator[Color]:
    data = image.tobytes()
    it = iter(data)
    return zip(it, it, it, it)


def _mix_into(dest: Image.Image, x: int, y: int, patch: Image.Image) -> None:
    box = (x, y, x + patch.width, y + patch.height)
    below = dest.crop(box)
    mixed = bytearray()
    for base, over in zip(_pixels(below), _pixels(patch)):
        mixed.extend(mix_color(base, over))
    dest.paste(Image.frombytes(_MODE, patch.size, bytes(mixed)), (x, y))


def new_canvas(width: int, height: int) -> Image.Image:
    """A fully transparent RGBA image of the given size."""
    if width < 0 or height < 0:
        raise SkinDrawError(f"invalid canvas size {width}x{height}")
    return Image.new(_MODE, (width, height), (0, 0, 0, 0))


def mix_color(base: Color, over: Color) -> Color:
    """Blend ``over`` onto ``base`` by the alpha of ``over``.

    The result is opaque unless both colours are fully transparent.
    """
    ap = _f32(over[3] / 255.0)
    dp = _f32(1.0 - ap)
    channels = tuple(
        int(_f32(_f32(o * ap) + _f32(b * dp))) for b, o in zip(base[:3], over[:3])
    )
    alpha = 0 if base[3] == 0 and over[3] == 0 else 255
    return (channels[0], channels[1], channels[2], alpha)


def draw(
    dest: Image.Image,
    source: Image.Image,
    dest_x: int,
    dest_y: int,
    src_x: int,
    src_y: int,
    width: int,
    height: int,
) -> None:
    """Copy a ``width`` x ``height`` region of ``source`` into ``dest``."""
    if width <= 0 or height <= 0:
        return
    _require_rgba(dest)
    if not (_fits(dest, dest_x, dest_y, width, height) and _fits(source, src_x, src_y, width, height)):
        raise SkinDrawError("draw region out of bounds")
    region = _as_rgba(source).crop((src_x, src_y, src_x + width, src_y + height))
    dest.paste(region, (dest_x, dest_y))


def draw_mix(
    dest: Image.Image,
    source: Image.Image,
    dest_x: int,
    dest_y: int,
    src_x: int,
    src_y: int,
    width: int,
    height: int,
) -> None:
    """Blend a region of ``source`` onto ``dest`` pixel by pixel."""
    if width <= 0 or height <= 0:
        return
    _require_rgba(dest)
    if not (_fits(dest, dest_x, dest_y, width, height) and _fits(source, src_x, src_y, width, height)):
        raise SkinDrawError("draw region out of bounds")
    region = _as_rgba(source).crop((src_x, src_y, src_x + width, src_y + height))
    _mix_into(dest, dest_x, dest_y, region)


def scale(source: Image.Image, factor: int) -> Image.Image:
    """A new image enlarged ``factor`` times by nearest-neighbour sampling."""
    if factor < 1:
        raise SkinDrawError(f"invalid scale factor {factor}")
    image = _as_rgba(source)
    return image.resize((image.width * factor, image.height * factor), Image.NEAREST)


def fill_image(dest: Image.Image, x: int, y: int, width: int, height: int, color: Color) -> None:
    """Fill a rectangle of ``dest`` with ``color``."""
    if width <= 0 or height <= 0:
        return
    _require_rgba(dest)
    if not _fits(dest, x, y, width, height):
        raise SkinDrawError("fill region out of bounds")
    dest.paste(tuple(color), (x, y, x + width, y + height))


def fill_image_mix(dest: Image.Image, x: int, y: int, width: int, height: int, color: Color) -> None:
    """Blend ``color`` onto every pixel of a rectangle of ``dest``."""
    if width <= 0 or height <= 0:
        return
    _require_rgba(dest)
    if not _fits(dest, x, y, width, height):
        raise SkinDrawError("fill region out of bounds")
    _mix_into(dest, x, y, Image.new(_MODE, (width, height), tuple(color)))


def _blocks(
    source: Image.Image,
    sx: int,
    sy: int,
    swidth: int,
    sheight: int,
    width: int,
    height: int,
) -> Image.Image:
    region = _as_rgba(source).crop((sx, sy, sx + swidth, sy + sheight))
    return region.resize((swidth * width, sheight * height), Image.NEAREST)


def _check_block_bounds(
    dest: Image.Image,
    source: Image.Image,
    x: int,
    y: int,
    sx: int,
    sy: int,
    swidth: int,
    sheight: int,
    width: int,
    height: int,
) -> None:
    _require_rgba(dest)
    if not (_fits(source, sx, sy, swidth, sheight) and _fits(dest, x, y, swidth * width, sheight * height)):
        raise SkinDrawError("block region out of bounds")


def draw_with_fill_image(
    dest: Image.Image,
    source: Image.Image,
    x: int,
    y: int,
    sx: int,
    sy: int,
    swidth: int,
    sheight: int,
    width: int,
    height: int,
) -> None:
    """Copy each source pixel of a region into ``dest`` as a ``width`` x ``height`` block."""
    if swidth <= 0 or sheight <= 0 or width <= 0 or height <= 0:
        return
    _check_block_bounds(dest, source, x, y, sx, sy, swidth, sheight, width, height)
    dest.paste(_blocks(source, sx, sy, swidth, sheight, width, height), (x, y))


def draw_with_fill_image_mix(
    dest: Image.Image,
    source: Image.Image,
    x: int,
    y: int,
    sx: int,
    sy: int,
    swidth: int,
    sheight: int,
    width: int,
    height: int,
) -> None:
    """Blend each source pixel of a region onto ``dest`` as a ``width`` x ``height`` block."""
    if swidth <= 0 or sheight <= 0 or width <= 0 or height <= 0:
        return
    _check_block_bounds(dest, source, x, y, sx, sy, swidth, sheight, width, height)
    _mix_into(dest, x, y, _blocks(source, sx, sy, swidth, sheight, width, height))