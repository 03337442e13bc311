"""Fast approximations of trigonometric functions."""

from __future__ import annotations

import math

PI = 3.14159265358979323846
PI_2 = 1.57079632679489661923
INV_PI = 0.31830988618379067154

_SIN_B = 4.0 / PI
_SIN_C = -4.0 / (PI * PI)
_SIN_P = 0.225


def fast_fabs(x: float) -> float:
    """Return the absolute value of ``x``; negative zero becomes positive zero."""
    return math.fabs(x)


def fast_sin(x: float) -> float:
    """Approximate sine using a corrected parabola.

    The argument is wrapped once into [-pi, pi], so it is accurate for
    inputs within one period of that range.
    """
    if x < -PI:
        x += 2 * PI
    elif x > PI:
        x -= 2 * PI
    y = _SIN_B * x + _SIN_C * x * abs(x)
    return _SIN_P * (y * abs(y) - y) + y


def fast_cos(x: float) -> float:
    """Approximate cosine as a phase-shifted :func:`fast_sin`."""
    return fast_sin(x + PI_2)


def fast_tan(x: float) -> float:
    """Approximate tangent as the ratio of the sine and cosine approximations."""
    return fast_sin(x) / fast_cos(x)


def fast_asin(x: float) -> float:
    """Approximate arcsine; the input is clamped to [-1, 1]."""
    x = max(-1.0, min(1.0, x))
    negative = x < 0
    x = abs(x)
    poly = 1.5707288 - 0.2121144 * x + 0.0742610 * x * x - 0.0187293 * x * x * x
    result = PI_2 - math.sqrt(1.0 - x) * poly
    return -result if negative else result


def fast_acos(x: float) -> float:
    """Approximate arccosine from :func:`fast_asin`."""
    return PI_2 - fast_asin(x)


def fast_atan(x: float) -> float:
    """Approximate arctangent, accurate for inputs in [-1, 1]."""
    ax = fast_fabs(x)
    return (PI / 4.0) * x - x * (ax - 1.0) * (0.2447 + 0.0663 * ax)


def fast_atan2(y: float, x: float) -> float:
    """Approximate the angle of the point (x, y), in the range [-pi, pi]."""
    if x == 0.0:
        if y > 0.0:
            return PI_2
        if y < 0.0:
            return -PI_2
        return 0.0
    z = y / x
    if fast_fabs(z) < 1.0:
        angle = fast_atan(z)
        if x < 0.0:
            angle += PI if y >= 0.0 else -PI
    else:
        angle = PI_2 - fast_atan(1.0 / z)
        if y < 0.0:
            angle -= PI
    return angle