# -*- coding: utf-8 -*-
"""
sin / cos / asin / acos evaluated with the Cephes polynomials.

The published reference boxes were produced with these exact kernels (the
ones Go's math package ships), which round the last bits differently from the
platform libm behind Python's math module. Using them here keeps the computed
boxes identical to those values.

Notes:
  - Non-finite arguments give NaN instead of raising.
  - asin/acos give NaN outside [-1, 1].
  - |x| >= 2**29 skips the Cephes range reduction and uses math.sin/math.cos.
"""

from __future__ import annotations
import math

# Pi/4 split into three parts for extended precision range reduction
_PI4A = 7.85398125648498535156e-1
_PI4B = 3.77489470793079817668e-8
_PI4C = 2.69515142907905952645e-15
# 4/Pi rounded from the exact value (not 4 / math.pi)
_FOUR_OVER_PI = float.fromhex("0x1.45f306dc9c883p+0")
_REDUCE_THRESHOLD = 1 << 29

_SIN = (
    1.58962301576546568060e-10,
    -2.50507477628578072866e-8,
    2.75573136213857245213e-6,
    -1.98412698295895385996e-4,
    8.33333333332211858878e-3,
    -1.66666666666666307295e-1,
)
_COS = (
    -1.13585365213876817300e-11,
    2.08757008419747316778e-9,
    -2.75573141792967388112e-7,
    2.48015872888517045348e-5,
    -1.38888888888730564116e-3,
    4.16666666666665929218e-2,
)

# atan rational approximation on [0, 0.66]
_P0 = -8.750608600031904122785e-01
_P1 = -1.615753718733365076637e+01
_P2 = -7.500855792314704667340e+01
_P3 = -1.228866684490136173410e+02
_P4 = -6.485021904942025371773e+01
_Q0 = +2.485846490142306297962e+01
_Q1 = +1.650270098316988542046e+02
_Q2 = +4.328810604912902668951e+02
_Q3 = +4.853903996359136964868e+02
_Q4 = +1.945506571482613964425e+02

_MOREBITS = 6.123233995736765886130e-17  # pi/2 = PIO2 + MOREBITS
_TAN3PIO8 = 2.41421356237309504880  # tan(3*pi/8)


def _sin_poly(z: float, zz: float) -> float:
    s = _SIN
    return z + z * zz * ((((((s[0] * zz) + s[1]) * zz + s[2]) * zz + s[3]) * zz + s[4]) * zz + s[5])


def _cos_poly(zz: float) -> float:
    c = _COS
    return 1.0 - 0.5 * zz + zz * zz * ((((((c[0] * zz) + c[1]) * zz + c[2]) * zz + c[3]) * zz + c[4]) * zz + c[5])


def _octant(x: float) -> tuple[int, float]:
    """Octant (mod 8, zeros mapped to the origin) and reduced argument for x >= 0."""
    j = int(x * _FOUR_OVER_PI)
    y = float(j)
    if j & 1 == 1:
        j += 1
        y += 1
    j &= 7
    z = ((x - y * _PI4A) - y * _PI4B) - y * _PI4C
    return j, z


def sin(x: float) -> float:
    if x == 0 or math.isnan(x):
        return x
    if math.isinf(x):
        return math.nan

    sign = False
    if x < 0:
        x = -x
        sign = True
    if x >= _REDUCE_THRESHOLD:
        y = math.sin(x)
        return -y if sign else y

    j, z = _octant(x)
    if j > 3:
        sign = not sign
        j -= 4
    zz = z * z
    if j == 1 or j == 2:
        y = _cos_poly(zz)
    else:
        y = _sin_poly(z, zz)
    return -y if sign else y


def cos(x: float) -> float:
    if not math.isfinite(x):
        return math.nan

    sign = False
    x = abs(x)
    if x >= _REDUCE_THRESHOLD:
        return math.cos(x)

    j, z = _octant(x)
    if j > 3:
        j -= 4
        sign = not sign
    if j > 1:
        sign = not sign
    zz = z * z
    if j == 1 or j == 2:
        y = _sin_poly(z, zz)
    else:
        y = _cos_poly(zz)
    return -y if sign else y


def _xatan(x: float) -> float:
    z = x * x
    z = z * ((((_P0 * z + _P1) * z + _P2) * z + _P3) * z + _P4) / (((((z + _Q0) * z + _Q1) * z + _Q2) * z + _Q3) * z + _Q4)
    return x * z + x


def _satan(x: float) -> float:
    """atan for x >= 0, reduced to [0, 0.66]."""
    if x <= 0.66:
        return _xatan(x)
    if x > _TAN3PIO8:
        return math.pi / 2 - _xatan(1 / x) + _MOREBITS
    return math.pi / 4 + _xatan((x - 1) / (x + 1)) + 0.5 * _MOREBITS


def asin(x: float) -> float:
    if x == 0 or math.isnan(x):
        return x
    sign = False
    if x < 0:
        x = -x
        sign = True
    if x > 1:
        return math.nan

    temp = math.sqrt(1 - x * x)
    if x > 0.7:
        temp = math.pi / 2 - _satan(temp / x)
    else:
        temp = _satan(x / temp)
    return -temp if sign else temp


def acos(x: float) -> float:
    return math.pi / 2 - asin(x)
