#!/usr/bin/env python3
# coding: utf-8
"""Real-valued numerical kernel.

Scaled hypotenuse, exact factorials, the real Gamma function and the
real-axis helpers of the inverse, logarithm and square root functions.

A real helper whose argument may leave the real domain returns a
`RealResult` or a `ComplexResult`; both resolve with ``as_complex()``.
Such helpers delegate to the general complex formulas, never the other way
round.

References
----------
.. [1] Cephes Math Library Release 2.8, S. L. Moshier (2000).
"""

import math
from collections import namedtuple

from complexn.lib.backend import (FLOAT, LN10, MAX_FACTORIAL, MAXGAM, PI,
                                  PI_2, PI_4, np)
from complexn.lib.tools import ieee754


class RealResult(namedtuple('RealResult', ['value'])):
    """Result of a real helper that stayed on the real axis."""
    __slots__ = ()

    def as_complex(self):
        from complexn.number import ComplexNumber
        return ComplexNumber(self.value, 0.)


class ComplexResult(namedtuple('ComplexResult', ['value'])):
    """Result of a real helper whose argument left the real domain."""
    __slots__ = ()

    def as_complex(self):
        return self.value


_NAN = RealResult(FLOAT(np.nan))


def stable_hypot(a, b):
    r"""Compute :math:`\sqrt{a^2 + b^2}` without destructive underflow or
    overflow.

    Parameters
    ----------
    a : float
    b : float

    Returns
    -------
    hypot : float
    """
    a, b = FLOAT(a), FLOAT(b)
    if np.isinf(a) or np.isinf(b):
        return FLOAT(np.inf)
    if np.abs(a) > np.abs(b):
        r = b / a
        return np.abs(a) * np.sqrt(1. + r * r)
    # Exact test, not an almost-zero one: iterative callers converge on it.
    if b != 0.:
        r = a / b
        return np.abs(b) * np.sqrt(1. + r * r)
    return FLOAT(0.)


def signbit(x):
    return bool(np.signbit(x))


def is_integer(x):
    """True for integral values and infinities."""
    return bool(np.floor(x) == x)


def sign(x):
    """-1, 0 or 1 according to the sign of `x`; NaN for NaN."""
    x = FLOAT(x)
    if np.isnan(x):
        return x
    elif x == 0.:
        return FLOAT(0.)
    return FLOAT(1.) if x > 0. else FLOAT(-1.)


# Real helpers of the logarithmic family

@ieee754
def real_ln(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == np.inf:
        return RealResult(x)
    elif x == 0.:
        return RealResult(FLOAT(-np.inf))
    elif x < 0.:
        from complexn.functions.elementary import ln_principal
        from complexn.number import ComplexNumber
        return ComplexResult(ln_principal(ComplexNumber(x, 0.)))
    return RealResult(np.log(x))


@ieee754
def real_log10(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == np.inf:
        return RealResult(x)
    elif x == 0.:
        return RealResult(FLOAT(-np.inf))
    elif x < 0.:
        from complexn.functions.elementary import ln_principal
        from complexn.number import ComplexNumber
        return ComplexResult(ln_principal(ComplexNumber(x, 0.)) / LN10)
    return RealResult(np.log10(x))


@ieee754
def real_sqrt(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == np.inf or x == 0.:
        return RealResult(x)
    elif x < 0.:
        from complexn.functions.elementary import sqrt
        from complexn.number import ComplexNumber
        return ComplexResult(sqrt(ComplexNumber(x, 0.)))
    return RealResult(np.sqrt(x))


# Real helpers of the inverse family

def arc_sin(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == -1.:
        return RealResult(-PI_2)
    elif x == 0.:
        return RealResult(x)
    elif x == 1.:
        return RealResult(PI_2)
    elif -1. < x < 1.:
        return RealResult(np.arcsin(x))
    from complexn.functions.inverse import asin
    from complexn.number import ComplexNumber
    return ComplexResult(asin(ComplexNumber(x, 0.)))


def arc_cos(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == -1.:
        return RealResult(PI)
    elif x == 0.:
        return RealResult(PI_2)
    elif x == 1.:
        return RealResult(FLOAT(0.))
    elif -1. < x < 1.:
        return RealResult(np.arccos(x))
    from complexn.functions.inverse import acos
    from complexn.number import ComplexNumber
    return ComplexResult(acos(ComplexNumber(x, 0.)))


def arc_tan(x):
    x = FLOAT(x)
    if np.isnan(x):
        return x
    elif x == -1.:
        return -PI_4
    elif x == 0.:
        return x
    elif x == 1.:
        return PI_4
    elif x == np.inf:
        return PI_2
    elif x == -np.inf:
        return -PI_2
    return np.arctan(x)


@ieee754
def arc_cot(x):
    x = FLOAT(x)
    if np.isnan(x):
        return x
    elif np.isinf(x):
        return FLOAT(0.)
    elif x == 0.:
        return PI_2
    elif x == -1.:
        return -PI_4
    elif x == 1.:
        return PI_4
    return np.arctan(1. / x)


@ieee754
def arc_sec(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif np.isinf(x):
        return RealResult(PI_2)
    elif x < -1. or x > 1.:
        return RealResult(np.arccos(1. / x))
    elif x == -1.:
        return RealResult(PI)
    elif x == 1.:
        return RealResult(FLOAT(0.))
    elif x == 0.:
        return RealResult(FLOAT(np.inf))
    from complexn.functions.inverse import asec
    from complexn.number import ComplexNumber
    return ComplexResult(asec(ComplexNumber(x, 0.)))


@ieee754
def arc_sech(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif x == 0.:
        return RealResult(FLOAT(np.inf))
    elif x == 1.:
        return RealResult(FLOAT(0.))
    elif 0. < x < 1.:
        inv = 1. / x
        return RealResult(np.log(inv + np.sqrt(inv + 1.) * np.sqrt(inv - 1.)))
    from complexn.functions.inverse import asech
    from complexn.number import ComplexNumber
    return ComplexResult(asech(ComplexNumber(x, 0.)))


@ieee754
def arc_cosec(x):
    x = FLOAT(x)
    if np.isnan(x):
        return _NAN
    elif np.isinf(x):
        return RealResult(FLOAT(0.))
    elif x == -1.:
        return RealResult(-PI_2)
    elif x == 0.:
        return RealResult(FLOAT(np.inf))
    elif x == 1.:
        return RealResult(PI_2)
    elif x < -1. or x > 1.:
        return RealResult(np.arcsin(1. / x))
    from complexn.functions.inverse import acosec
    from complexn.number import ComplexNumber
    return ComplexResult(acosec(ComplexNumber(x, 0.)))


@ieee754
def arc_cosech(x):
    x = FLOAT(x)
    if np.isnan(x):
        return x
    elif np.isinf(x):
        return FLOAT(0.)
    elif x == 0.:
        return FLOAT(np.inf)
    return np.log(1. / x + np.sqrt(1. / (x * x) + 1.))


# Factorials and the real Gamma function

def fact_int(n):
    """Exact factorial of a non-negative integer.

    Returns
    -------
    fact : int
    """
    return math.factorial(int(n))


def fact_double(x):
    """Factorial of a real number as a float.

    Non-negative integers are exact (``+inf`` once ``x!`` leaves the float
    range), negative integers are poles (``+inf``), other values go through
    the real Gamma function.
    """
    x = FLOAT(x)
    if np.isnan(x):
        return x
    elif x == np.inf:
        return x
    elif x == -np.inf:
        return FLOAT(np.nan)
    elif is_integer(x):
        if x < 0.:
            return FLOAT(np.inf)
        elif x > MAX_FACTORIAL:
            return FLOAT(np.inf)
        return FLOAT(fact_int(x))
    return gamma_real(1. + x)


@ieee754
def gamma_stirling(x):
    """Gamma function by Stirling's formula, for large `x` (> 33)."""
    x = FLOAT(x)
    w = 1. / x
    stir = 7.87311395793093628397E-4
    stir = -2.29549961613378126380E-4 + w * stir
    stir = -2.68132617805781232825E-3 + w * stir
    stir = 3.47222221605458667310E-3 + w * stir
    stir = 8.33333333333482257126E-2 + w * stir
    w = 1. + w * stir
    y = np.exp(x)
    if x > 143.01608:
        # avoid overflow in pow()
        v = np.power(x, 0.5 * x - 0.25)
        y = v * (v / y)
    else:
        y = np.power(x, x - 0.5) / y
    return 2.50662827463100050242 * y * w


@ieee754
def gamma_real(x):
    """Gamma function of a real argument.

    Rational approximation on [2, 3] with the recurrence relation
    elsewhere, Stirling's formula for ``|x| > 33`` and the reflection
    formula for large negative `x`.

    Relative error::

        domain        peak       rms
        -170, -33     2.3e-15    3.3e-16
        -33, 33       9.4e-16    2.2e-16
        33, 171.6     2.3e-15    3.2e-16

    Parameters
    ----------
    x : float

    Returns
    -------
    gamma : float
    """
    x = FLOAT(x)
    if np.isnan(x) or x == -np.inf:
        return FLOAT(np.nan)
    elif x > MAXGAM:
        return FLOAT(np.inf)

    sgngam = 1.
    q = np.abs(x)
    if q > 33.:
        if x < 0.:
            p = np.floor(q)
            if int(p) % 2 == 0:
                sgngam = -1.
            z = q - p
            if z > 0.5:
                p = p + 1.
                z = q - p
            z = np.abs(q * np.sin(PI * z))
            z = PI / (z * gamma_stirling(q))
        else:
            z = gamma_stirling(x)
        return sgngam * z

    z = FLOAT(1.)
    while x >= 3.:
        x = x - 1.
        z = z * x
    while x < 0.:
        if x > -1.e-9:
            return z / ((1. + 0.5772156649015329 * x) * x)
        z = z / x
        x = x + 1.
    while x < 2.:
        if x < 1.e-9:
            return z / ((1. + 0.5772156649015329 * x) * x)
        z = z / x
        x = x + 1.
    if x == 2.:
        return z

    x = x - 2.
    pp = 1.60119522476751861407E-4
    pp = 1.19135147006586384913E-3 + x * pp
    pp = 1.04213797561761569935E-2 + x * pp
    pp = 4.76367800457137231464E-2 + x * pp
    pp = 2.07448227648435975150E-1 + x * pp
    pp = 4.94214826801497100753E-1 + x * pp
    pp = 9.99999999999999996796E-1 + x * pp
    qq = -2.31581873324120129819E-5
    qq = 5.39605580493303397842E-4 + x * qq
    qq = -4.45641913851797240494E-3 + x * qq
    qq = 1.18139785222060435552E-2 + x * qq
    qq = 3.58236398605498653373E-2 + x * qq
    qq = -2.34591795718243348568E-1 + x * qq
    qq = 7.14304917030273074085E-2 + x * qq
    qq = 1.00000000000000000320 + x * qq
    return z * pp / qq
