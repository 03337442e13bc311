import pytest

from itzamna.zbuffer import ZBuffer


def test_new_buffer_dimensions_and_zeros():
    zb = ZBuffer(4, 3)
    assert (zb.width, zb.height) == (4, 3)
    assert zb.depths == [0.0] * 12


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ZBuffer(3, -2)


def test_clear_sets_every_cell():
    zb = ZBuffer(3, 3)
    zb.clear(1.5)
    assert set(zb.depths) == {1.5}
    assert zb.depth(2, 2) == 1.5


def test_depth_reads_row_major():
    zb = ZBuffer(3, 2)
    zb.depths[1 * 3 + 2] = 7.0
    assert zb.depth(2, 1) == 7.0
    assert zb.depth(1, 2 - 1) == 0.0


def test_depth_out_of_range():
    zb = ZBuffer(2, 2)
    with pytest.raises(IndexError):
        zb.depth(2, 0)
    with pytest.raises(IndexError):
        zb.depth(0, -1)


def test_resize_grow_keeps_prefix():
    zb = ZBuffer(2, 2)
    zb.clear(3.0)
    zb.resize(3, 3)
    assert (zb.width, zb.height) == (3, 3)
    assert len(zb.depths) == 9
    assert zb.depths[:4] == [3.0] * 4
    assert zb.depths[4:] == [0.0] * 5


def test_resize_shrink_truncates():
    zb = ZBuffer(3, 3)
    zb.clear(2.0)
    zb.resize(2, 1)
    assert zb.depths == [2.0, 2.0]
    with pytest.raises(IndexError):
        zb.depth(0, 1)


def test_resize_rejects_negative():
    zb = ZBuffer(1, 1)
    with pytest.raises(ValueError):
        zb.resize(-1, 1)