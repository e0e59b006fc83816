#!/usr/bin/env python3
# coding: utf-8
r"""Inverse circular and hyperbolic functions.

Each function first checks whether `z` lies on the part of the real axis
where the result is real and then uses the real helper of
`complexn.lib.numerical`; otherwise the logarithmic identity applies, e.g.

.. math::

    \arcsin z = -i \ln\left(iz + \sqrt{1 - z^2}\right)

References
----------
.. [1] T. E. Hull, T. F. Fairgrieve and P. T. P. Tang, "Implementing the
   complex arcsine and arccosine functions using exception handling",
   ACM Trans. Math. Softw. 23, 299 (1997).
.. [2] Boost.Math, ``boost/math/complex/atanh.hpp``.
"""

from complexn.functions.elementary import ln, sqrt, square
from complexn.lib.backend import (ATANH_CROSSOVER, ATANH_MAX, ATANH_MIN,
                                  FLOAT, PI, PI_2, np)
from complexn.lib.numerical import (arc_cos, arc_cosec, arc_cosech, arc_cot,
                                    arc_sec, arc_sech, arc_sin, arc_tan,
                                    signbit)
from complexn.lib.tools import ieee754
from complexn.number import IMAGINARY_ONE, ONE, ComplexNumber

_I = IMAGINARY_ONE
_MINUS_I = -IMAGINARY_ONE
_HALF_I = ComplexNumber(0., 0.5)


def _in_unit_interval(z):
    return z.im == 0. and (-1. <= z.re <= 1. or np.isinf(z.re))


def _outside_unit_interval(z):
    re = z.re
    return z.im == 0. and (re <= -1. or re >= 1. or re == 0. or np.isinf(re))


def asin(z):
    if _in_unit_interval(z):
        if z.re == np.inf:
            return ComplexNumber(0., -np.inf)
        elif z.re == -np.inf:
            return ComplexNumber(0., np.inf)
        return arc_sin(z.re).as_complex()
    return _MINUS_I * ln(_I * z + sqrt(ONE - square(z)))


def acos(z):
    if _in_unit_interval(z):
        if z.re == np.inf:
            return ComplexNumber(0., np.inf)
        elif z.re == -np.inf:
            return ComplexNumber(0., -np.inf)
        return arc_cos(z.re).as_complex()
    return _MINUS_I * ln(z + _I * sqrt(ONE - square(z)))


def atan(z):
    if z.im == 0.:
        return ComplexNumber(arc_tan(z.re), 0.)
    iz = _I * z
    return _HALF_I * (ln(ONE - iz) - ln(ONE + iz))


def acot(z):
    if z.im == 0.:
        return ComplexNumber(arc_cot(z.re), 0.)
    return atan(ONE / z)


def asec(z):
    if _outside_unit_interval(z):
        return arc_sec(z.re).as_complex()
    return acos(ONE / z)


def acosec(z):
    if _outside_unit_interval(z):
        return arc_cosec(z.re).as_complex()
    return asin(ONE / z)


def asinh(z):
    return ln(z + sqrt(square(z) + ONE))


def acosh(z):
    """Inverse hyperbolic cosine from ``acos(z)`` rotated by ``+i`` or
    ``-i``.
    """
    result = acos(z)
    if z.im == 0.:
        if z.re >= -1.:
            if z.re > 1.:
                return _MINUS_I * result
            elif not np.isnan(result.im) and not signbit(result.im):
                return _I * result
            return _MINUS_I * result
        return _I * result
    elif z.im < 0.:
        return _MINUS_I * result
    return _I * result


@ieee754
def atanh(z):
    r"""Inverse hyperbolic tangent.

    Inside a safe band of magnitudes the real part is

    .. math::

        \frac{1}{4}\left[\ln(1 + \alpha) - \ln(1 - \alpha)\right],\quad
        \alpha = \frac{2x}{1 + x^2 + y^2}

    with the difference of logarithms replaced by
    :math:`\ln((1 + x)^2 + y^2) - \ln((x - 1)^2 + y^2)` once
    :math:`\alpha` exceeds a crossover; outside the band the terms are
    rescaled so that nothing overflows.  The signs of the parts follow the
    signs of `z` (see [2]_).
    """
    x, y = np.abs(z.re), np.abs(z.im)

    if np.isnan(x):
        if np.isnan(y):
            return ComplexNumber(x, x)
        elif np.isinf(y):
            return ComplexNumber(0., -PI_2 if signbit(z.im) else PI_2)
        return ComplexNumber(x, x)
    elif np.isnan(y):
        if x == 0.:
            return ComplexNumber(x, y)
        elif np.isinf(x):
            return ComplexNumber(0., y)
        return ComplexNumber(y, y)

    safe_upper = np.sqrt(ATANH_MAX) / 2.
    safe_lower = np.sqrt(ATANH_MIN) * 2.

    if safe_lower < x < safe_upper and safe_lower < y < safe_upper:
        xx = x * x
        yy = y * y
        alpha = 2. * x / (1. + xx + yy)
        if alpha < ATANH_CROSSOVER:
            real = np.log1p(alpha) - np.log1p(-alpha)
        else:
            real = np.log1p(2. * x + xx + yy) - np.log((x - 1.) * (x - 1.) + yy)
        real = real / 4.
        if signbit(z.re):
            real = -real
        imag = np.arctan2(2. * y, 1. - xx - yy) / 2.
        if z.im < 0.:
            imag = -imag
        return ComplexNumber(real, imag)

    # Rescaled evaluation near zero, near the overflow threshold and at the
    # infinities.
    if x >= safe_upper:
        if np.isinf(x) or np.isinf(y):
            alpha = FLOAT(0.)
        elif y >= safe_upper:
            alpha = (2. / y) / (x / y + y / x)
        elif y > 1.:
            alpha = 2. / (x + y * y / x)
        else:
            alpha = 2. / x
    elif y >= safe_upper:
        if x > 1.:
            alpha = (2. * x / y) / (y + x * x / y)
        else:
            alpha = FLOAT(0.)
    else:
        div = 1.
        if x > safe_lower:
            div = div + x * x
        if y > safe_lower:
            div = div + y * y
        alpha = 2. * x / div

    if alpha < ATANH_CROSSOVER:
        real = np.log1p(alpha) - np.log1p(-alpha)
    else:
        xm1 = x - 1.
        real = np.log1p(2. * x + x * x) - np.log(xm1 * xm1)
    real = real / 4.
    if signbit(z.re):
        real = -real

    if x >= safe_upper or y >= safe_upper:
        imag = PI
    elif x <= safe_lower:
        if y <= safe_lower:
            imag = np.arctan2(2. * y, 1.)
        elif x == 0. and y == 0.:
            imag = FLOAT(0.)
        else:
            imag = np.arctan2(2. * y, 1. - y * y)
    elif y == 0. and x == 1.:
        imag = FLOAT(0.)
    else:
        imag = np.arctan2(2. * y, 1. - x * x)
    imag = imag / 2.
    if signbit(z.im):
        imag = -imag
    elif z.im == 0. and z.re > 1.:
        imag = -imag
    return ComplexNumber(real, imag)


def acoth(z):
    if z.im == 0.:
        if z.re == 0.:
            return ComplexNumber(0., PI_2)
        elif np.isinf(z.re):
            return ComplexNumber(0., 0.)
        elif z.re == 1.:
            return ComplexNumber(np.inf, 0.)
        elif z.re == -1.:
            return ComplexNumber(-np.inf, 0.)
    return atanh(ONE / z)


def asech(z):
    re = z.re
    if z.im == 0. and (re == 0. or re == 1. or re == -1. or 0. < re < 1.):
        if re == -1.:
            return ComplexNumber(0., PI)
        return arc_sech(re).as_complex()
    return acosh(ONE / z)


def acosech(z):
    if z.im == 0.:
        return ComplexNumber(arc_cosech(z.re), 0.)
    inv = ONE / z
    return ln(sqrt(ONE + inv * inv) + inv)
