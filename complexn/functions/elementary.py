#!/usr/bin/env python3
# coding: utf-8
r"""Elementary kernel and the exponential/logarithmic family.

Square, square and cubic roots, unit sign, exponential, logarithms and
powers of `ComplexNumber` values.  Functions return IEEE sentinels instead
of raising; only `pow_real_complex` rejects a negative real base.
"""

import numbers

from complexn.lib.backend import (ACCURACY, FLOAT, LN2, LN10, PI2, SQRT1_2,
                                  np)
from complexn.lib.exceptions import ComplexDomainError
from complexn.lib.numerical import real_ln, real_log10, real_sqrt, stable_hypot
from complexn.lib.tools import ieee754
from complexn.number import ONE, ZERO, ComplexNumber


@ieee754
def square(z):
    """:math:`z^2` as :math:`((x - y)(x + y), 2xy)`."""
    return ComplexNumber((z.re - z.im) * (z.re + z.im), 2. * z.re * z.im)


@ieee754
def sqrt(z):
    r"""Principal square root.

    The real part is obtained from the larger of :math:`|x|` and :math:`|y|`
    so that no intermediate overflows:

    .. math::

        w = \sqrt{|x|}\sqrt{\frac{1 + \sqrt{1 + (y/x)^2}}{2}},\ |x| \ge |y|

        w = \sqrt{|y|}\sqrt{\frac{|x/y| + \sqrt{1 + (x/y)^2}}{2}},\ |x| < |y|
    """
    if z.is_real_non_negative():
        return real_sqrt(z.re).as_complex()
    re, im = z.re, z.im
    abs_re, abs_im = np.abs(re), np.abs(im)
    if abs_re >= abs_im:
        ratio = im / re
        w = np.sqrt(abs_re) * np.sqrt(0.5 * (1. + np.sqrt(1. + ratio * ratio)))
    else:
        ratio = re / im
        w = np.sqrt(abs_im) * np.sqrt(
            0.5 * (np.abs(ratio) + np.sqrt(1. + ratio * ratio))
        )
    if re >= 0.:
        return ComplexNumber(w, im / (2. * w))
    elif im >= 0.:
        return ComplexNumber(abs_im / (2. * w), w)
    return ComplexNumber(abs_im / (2. * w), -w)


square_root = sqrt


def square_roots(z):
    root = sqrt(z)
    return root, -root


@ieee754
def cubic_roots(z):
    """The three cubic roots, principal first."""
    r = np.power(z.magnitude, 1. / 3.)
    theta = z.phase / 3.
    shift = PI2 / 3.
    return (ComplexNumber.from_polar(r, theta),
            ComplexNumber.from_polar(r, theta + shift),
            ComplexNumber.from_polar(r, theta - shift))


@ieee754
def sign(z):
    """Unit vector in the direction of `z`; zero for zero."""
    re, im = z.re, z.im
    if np.isinf(re) and np.isinf(im):
        return ComplexNumber(np.copysign(SQRT1_2, re), np.copysign(SQRT1_2, im))
    mod = stable_hypot(re, im)
    if mod == 0.:
        return ZERO
    return ComplexNumber(re / mod, im / mod)


@ieee754
def exp(z):
    m = np.exp(z.re)
    if z.im == 0.:
        return ComplexNumber(m, z.im)
    return ComplexNumber(m * np.cos(z.im), m * np.sin(z.im))


@ieee754
def ln_principal(z):
    r"""Principal logarithm :math:`\frac{1}{2}\ln(x^2 + y^2) + i\arg z`."""
    return ComplexNumber(0.5 * np.log(z.magnitude_squared()), z.phase)


def ln(z):
    """Natural logarithm, principal branch."""
    if z.im == 0. and (z.re >= 0. or np.isinf(z.re)):
        return real_ln(z.re).as_complex()
    return ln_principal(z)


def log(z, base=None):
    """Logarithm to `base`, natural when omitted.

    Parameters
    ----------
    z : ComplexNumber
    base : float or ComplexNumber, optional
    """
    if base is None:
        return ln(z)
    elif isinstance(base, numbers.Real):
        with np.errstate(all='ignore'):
            return ln(z) / np.log(FLOAT(base))
    return log_base(z, ComplexNumber.cast(base))


def log_base(z, base):
    return ln(z) / ln(base)


def log10(z):
    if z.im == 0. and (z.re >= 0. or np.isinf(z.re)):
        return real_log10(z.re).as_complex()
    return ln(z) / LN10


@ieee754
def log2(z):
    if z.im == 0. and (z.re >= 0. or z.re == np.inf):
        return ComplexNumber(np.log2(z.re), 0.)
    return ln(z) / LN2


@ieee754
def pow_complex_real(z, p):
    """:math:`z^p` for a real exponent, from the polar form of `z`."""
    p = FLOAT(p)
    m = np.power(z.magnitude, p)
    t = z.phase * p
    return ComplexNumber(m * np.cos(t), m * np.sin(t))


@ieee754
def pow_real_complex(x, w):
    """:math:`x^w` for a non-negative real base.

    Raises
    ------
    ComplexDomainError
        If `x` is negative.
    """
    x = FLOAT(x)
    if x < 0.:
        raise ComplexDomainError(
            "Base {} of a real-to-complex power must be non-negative."
            .format(float(x))
        )
    if w.is_zero():
        return ONE
    elif x == 0.:
        return ZERO
    m = np.power(x, w.re)
    t = np.log(x) * w.im
    return ComplexNumber(m * np.cos(t), m * np.sin(t))


@ieee754
def pow_complex(z, w):
    r"""Principal value of :math:`z^w`.

    .. math::

        z^w = r^{\Re w} e^{-\Im w\,\varphi}
              e^{i(\Re w\,\varphi + \Im w \ln r)}

    An exponent of magnitude below `ACCURACY` gives one; a base of
    magnitude below `ACCURACY` gives zero.
    """
    r = z.magnitude
    if w.magnitude < ACCURACY:
        return ONE
    elif r < ACCURACY:
        return ZERO
    phi = z.phase
    theta = w.re * phi + w.im * np.log(r)
    m = np.power(r, w.re) * np.exp(-w.im * phi)
    return ComplexNumber(m * np.cos(theta), m * np.sin(theta))


def pow(base, exponent):
    """Dispatch to `pow_real_complex`, `pow_complex_real` or `pow_complex`
    by the types of the arguments.
    """
    if isinstance(base, numbers.Real):
        return pow_real_complex(base, ComplexNumber.cast(exponent))
    elif isinstance(exponent, numbers.Real):
        return pow_complex_real(ComplexNumber.cast(base), exponent)
    return pow_complex(ComplexNumber.cast(base), ComplexNumber.cast(exponent))


def power(z, exponent):
    """:math:`z^e` with the cases of a zero base spelled out.

    A zero base gives one for a zero exponent, zero for a positive real part
    of the exponent and an infinity for a negative one.
    """
    z, exponent = ComplexNumber.cast(z), ComplexNumber.cast(exponent)
    if z.is_zero():
        if exponent.is_zero():
            return ONE
        elif exponent.re > 0.:
            return ZERO
        elif exponent.re < 0.:
            if exponent.im == 0.:
                return ComplexNumber(np.inf, 0.)
            return ComplexNumber(np.inf, np.inf)
        return ComplexNumber(np.nan, np.nan)
    return pow_complex(z, exponent)


def root(z, root_exponent):
    """:math:`z^{1/r}`."""
    return pow_complex(z, ONE / ComplexNumber.cast(root_exponent))
