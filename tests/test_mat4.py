import pytest

from itzamna.mat4 import Mat4
from itzamna.trig import PI

EPSILON = 1e-6


def test_identity():
    identity = Mat4.identity()
    for i in range(4):
        for j in range(4):
            expected = 1.0 if i == j else 0.0
            assert identity[i][j] == pytest.approx(expected, abs=EPSILON)


def test_translate():
    t = Mat4.translate(1.0, 2.0, 3.0)
    assert t[3][0] == pytest.approx(1.0, abs=EPSILON)
    assert t[3][1] == pytest.approx(2.0, abs=EPSILON)
    assert t[3][2] == pytest.approx(3.0, abs=EPSILON)


def test_scale():
    s = Mat4.scale(2.0, 3.0, 4.0)
    assert s[0][0] == pytest.approx(2.0, abs=EPSILON)
    assert s[1][1] == pytest.approx(3.0, abs=EPSILON)
    assert s[2][2] == pytest.approx(4.0, abs=EPSILON)


def test_rotate_x_quarter_turn():
    r = Mat4.rotate_x(PI / 2)
    assert r[1][1] == pytest.approx(0.0, abs=EPSILON)
    assert r[1][2] == pytest.approx(1.0, abs=EPSILON)
    assert r[2][1] == pytest.approx(-1.0, abs=EPSILON)
    assert r[2][2] == pytest.approx(0.0, abs=EPSILON)


def test_rotate_y_quarter_turn():
    r = Mat4.rotate_y(PI / 2)
    assert r[0, 0] == pytest.approx(0.0, abs=EPSILON)
    assert r[0, 2] == pytest.approx(-1.0, abs=EPSILON)
    assert r[2, 0] == pytest.approx(1.0, abs=EPSILON)
    assert r[1, 1] == 1.0


def test_rotate_z_quarter_turn():
    r = Mat4.rotate_z(PI / 2)
    assert r[0, 1] == pytest.approx(1.0, abs=EPSILON)
    assert r[1, 0] == pytest.approx(-1.0, abs=EPSILON)
    assert r[2, 2] == 1.0


def test_multiply_scale_by_translate():
    c = Mat4.scale(2.0, 3.0, 4.0) @ Mat4.translate(1.0, 2.0, 3.0)
    assert c[0][0] == pytest.approx(2.0, abs=EPSILON)
    assert c[1][1] == pytest.approx(3.0, abs=EPSILON)
    assert c[2][2] == pytest.approx(4.0, abs=EPSILON)
    assert c[3][0] == pytest.approx(1.0, abs=EPSILON)
    assert c[3][1] == pytest.approx(2.0, abs=EPSILON)
    assert c[3][2] == pytest.approx(3.0, abs=EPSILON)


def test_identity_is_neutral():
    m = Mat4.rotate_x(0.3) @ Mat4.translate(4.0, 5.0, 6.0)
    assert Mat4.identity() @ m == m
    assert m @ Mat4.identity() == m


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Mat4(((1.0, 0.0), (0.0, 1.0)))