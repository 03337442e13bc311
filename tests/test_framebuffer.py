import pytest

from itzamna.framebuffer import Framebuffer

BACKGROUND = 0xFF202020
BLACK = 0xFF000000


def _pattern(width=8, height=8):
    fb = Framebuffer(width, height)
    fb.draw_test_pattern()
    return fb


def test_new_framebuffer_has_size_and_zero_pixels():
    fb = Framebuffer(4, 3)
    assert (fb.width, fb.height) == (4, 3)
    assert fb.pixels == [0] * 12


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Framebuffer(-1, 4)


def test_resize_changes_dimensions():
    fb = Framebuffer(4, 3)
    fb.clear(0xFF123456)
    fb.resize(6, 5)
    assert (fb.width, fb.height) == (6, 5)
    assert len(fb.pixels) == 30
    assert set(fb.pixels) == {0}


def test_clear_sets_every_pixel():
    fb = Framebuffer(5, 5)
    fb.clear(0xFFABCDEF)
    assert set(fb.pixels) == {0xFFABCDEF}


def test_pixel_out_of_range_raises():
    fb = Framebuffer(2, 2)
    with pytest.raises(IndexError):
        fb.pixel(2, 0)
    with pytest.raises(IndexError):
        fb.pixel(0, -1)


def test_test_pattern_diagonal_and_symmetry():
    fb = _pattern()
    for i in range(8):
        assert fb.pixel(i, i) == BLACK
    for x in range(8):
        for y in range(8):
            assert fb.pixel(x, y) == fb.pixel(y, x)
            assert fb.pixel(x, y) >> 24 == 0xFF


def test_rotate_uniform_image_keeps_center_and_uses_background():
    color = 0xFF112233
    fb = Framebuffer(9, 9)
    fb.clear(color)
    fb.rotate(1.0)
    assert (fb.width, fb.height) == (9, 9)
    assert set(fb.pixels) <= {color, BACKGROUND}
    assert fb.pixel(4, 4) == color
    assert fb.pixel(0, 0) == BACKGROUND


def test_shade_with_white_keeps_colors():
    fb = _pattern()
    before = list(fb.pixels)
    fb.shade(0xFFFFFFFF)
    assert fb.pixels == before


def test_shade_with_black_gives_black():
    fb = _pattern()
    fb.shade(0)
    assert set(fb.pixels) == {BLACK}


def test_blur_with_tiny_sigma_is_identity():
    fb = _pattern()
    before = list(fb.pixels)
    fb.gaussian_blur(0.2)
    assert fb.pixels == before


def test_blur_of_uniform_black_stays_black():
    fb = Framebuffer(6, 4)
    fb.clear(BLACK)
    fb.gaussian_blur(1.0)
    assert set(fb.pixels) == {BLACK}


def test_blur_spreads_a_bright_pixel():
    fb = Framebuffer(5, 5)
    fb.clear(BLACK)
    fb.pixels[2 * 5 + 2] = 0xFFFFFFFF
    fb.gaussian_blur(1.0)
    center_red = (fb.pixel(2, 2) >> 16) & 0xFF
    neighbour_red = (fb.pixel(3, 2) >> 16) & 0xFF
    assert 0 < center_red < 255
    assert 0 < neighbour_red <= center_red
    assert all(p >> 24 == 0xFF for p in fb.pixels)


def test_blur_rejects_non_positive_sigma():
    fb = Framebuffer(2, 2)
    with pytest.raises(ValueError):
        fb.gaussian_blur(0.0)


def test_bilinear_scale_by_one_is_identity():
    fb = _pattern()
    before = list(fb.pixels)
    fb.bilinear_scale(1.0, 1.0)
    assert (fb.width, fb.height) == (8, 8)
    assert fb.pixels == before


def test_bilinear_scale_doubles_size_of_uniform_image():
    color = 0xFF408020
    fb = Framebuffer(3, 2)
    fb.clear(color)
    fb.bilinear_scale(2.0, 2.0)
    assert (fb.width, fb.height) == (6, 4)
    assert set(fb.pixels) == {color}


def test_bilinear_scale_rejects_non_positive_factor():
    fb = Framebuffer(2, 2)
    with pytest.raises(ValueError):
        fb.bilinear_scale(0.0, 1.0)