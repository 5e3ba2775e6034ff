import pytest
from PIL import Image

from mcml.skin_draw import (
    SCALE_TYPEA,
    SCALE_TYPEB,
    SCALE_TYPEC,
    SkinDrawError,
    draw,
    draw_mix,
    draw_with_fill_image,
    draw_with_fill_image_mix,
    fill_image,
    fill_image_mix,
    mix_color,
    new_canvas,
    scale,
)


def _gradient(width, height, alpha=255):
    img = Image.new("RGBA", (width, height))
    img.putdata([((x * 7) % 256, (y * 11) % 256, (x + y) % 256, alpha)
                 for y in range(height) for x in range(width)])
    return img


def test_scale_constants():
    src = _gradient(1, 1)
    assert scale(src, SCALE_TYPEA).size == (16, 16)
    assert scale(src, SCALE_TYPEB).size == (2, 2)
    assert scale(src, SCALE_TYPEC).size == (8, 8)


def test_new_canvas_is_transparent():
    canvas = new_canvas(3, 2)
    assert canvas.size == (3, 2)
    assert set(canvas.getdata()) == {(0, 0, 0, 0)}


def test_mix_opaque_over_replaces():
    assert mix_color((10, 20, 30, 255), (40, 50, 60, 255)) == (40, 50, 60, 255)


def test_mix_transparent_over_keeps_base_opaque():
    assert mix_color((10, 20, 30, 128), (40, 50, 60, 0)) == (10, 20, 30, 255)


def test_mix_both_transparent_stays_transparent():
    assert mix_color((10, 20, 30, 0), (40, 50, 60, 0))[3] == 0


def test_mix_partial_is_between():
    r, g, b, a = mix_color((0, 0, 0, 255), (200, 200, 200, 100))
    assert 0 < r < 200 and r == g == b
    assert a == 255


def test_draw_copies_region():
    src = _gradient(8, 8)
    dest = new_canvas(4, 4)
    draw(dest, src, 1, 1, 2, 3, 3, 3)
    assert dest.getpixel((1, 1)) == src.getpixel((2, 3))
    assert dest.getpixel((3, 3)) == src.getpixel((4, 5))
    assert dest.getpixel((0, 0)) == (0, 0, 0, 0)


def test_draw_out_of_bounds_raises():
    with pytest.raises(SkinDrawError):
        draw(new_canvas(4, 4), _gradient(8, 8), 2, 2, 0, 0, 3, 3)
    with pytest.raises(SkinDrawError):
        draw(new_canvas(4, 4), _gradient(8, 8), 0, 0, 6, 0, 3, 3)


def test_draw_zero_size_is_noop():
    dest = new_canvas(2, 2)
    draw(dest, _gradient(2, 2), 5, 5, 5, 5, 0, 3)
    assert set(dest.getdata()) == {(0, 0, 0, 0)}


def test_draw_mix_opaque_matches_draw():
    src = _gradient(6, 6)
    a = new_canvas(6, 6)
    b = new_canvas(6, 6)
    draw(a, src, 0, 0, 0, 0, 6, 6)
    draw_mix(b, src, 0, 0, 0, 0, 6, 6)
    assert a.tobytes() == b.tobytes()


def test_draw_mix_transparent_source_keeps_dest():
    dest = _gradient(4, 4)
    before = dest.copy()
    draw_mix(dest, _gradient(4, 4, alpha=0), 0, 0, 0, 0, 4, 4)
    assert dest.tobytes() == before.tobytes()


def test_draw_mix_out_of_bounds_raises():
    with pytest.raises(SkinDrawError):
        draw_mix(new_canvas(2, 2), _gradient(4, 4), -1, 0, 0, 0, 2, 2)


def test_scale_size_and_blocks():
    src = _gradient(3, 2)
    out = scale(src, 4)
    assert out.size == (12, 8)
    for y in range(8):
        for x in range(12):
            assert out.getpixel((x, y)) == src.getpixel((x // 4, y // 4))


def test_scale_invalid_factor():
    with pytest.raises(SkinDrawError):
        scale(_gradient(2, 2), 0)


def test_fill_image():
    dest = new_canvas(5, 5)
    fill_image(dest, 1, 1, 2, 3, (9, 8, 7, 6))
    assert dest.getpixel((2, 3)) == (9, 8, 7, 6)
    assert dest.getpixel((3, 3)) == (0, 0, 0, 0)
    with pytest.raises(SkinDrawError):
        fill_image(dest, 4, 4, 2, 2, (1, 1, 1, 1))


def test_fill_image_mix_opaque_equals_fill():
    a = _gradient(4, 4)
    b = a.copy()
    fill_image(a, 0, 0, 4, 4, (1, 2, 3, 255))
    fill_image_mix(b, 0, 0, 4, 4, (1, 2, 3, 255))
    assert a.tobytes() == b.tobytes()


def test_draw_with_fill_image_matches_scale():
    src = _gradient(4, 4)
    dest = new_canvas(16, 16)
    draw_with_fill_image(dest, src, 0, 0, 0, 0, 4, 4, 4, 4)
    assert dest.tobytes() == scale(src, 4).tobytes()


def test_draw_with_fill_image_bounds():
    with pytest.raises(SkinDrawError):
        draw_with_fill_image(new_canvas(15, 16), _gradient(4, 4), 0, 0, 0, 0, 4, 4, 4, 4)


def test_draw_with_fill_image_mix_transparent_keeps_dest():
    dest = _gradient(18, 18)
    before = dest.copy()
    draw_with_fill_image_mix(dest, _gradient(2, 2, alpha=0), 0, 0, 0, 0, 2, 2, 9, 9)
    assert dest.tobytes() == before.tobytes()


def test_draw_with_fill_image_mix_opaque_matches_copy():
    src = _gradient(2, 2)
    a = new_canvas(6, 6)
    b = new_canvas(6, 6)
    draw_with_fill_image(a, src, 0, 0, 0, 0, 2, 2, 3, 3)
    draw_with_fill_image_mix(b, src, 0, 0, 0, 0, 2, 2, 3, 3)
    assert a.tobytes() == b.tobytes()