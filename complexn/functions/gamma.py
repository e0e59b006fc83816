#!/usr/bin/env python3
# coding: utf-8
r"""Gamma function and friends for a complex argument.

`gamma` and `ln_gamma` use the Lanczos approximation with :math:`g = 5`
and six coefficients, with the reflection formula

.. math::

    \Gamma(z)\Gamma(1 - z) = \frac{\pi}{\sin \pi z}

for :math:`\Re z < 1`.  Real integers go through the exact factorial.

References
----------
.. [1] W. H. Press et al., Numerical Recipes, 2nd ed., section 6.1.
"""

import logging

from complexn.functions.elementary import ln, pow_complex, pow_real_complex
from complexn.functions.trigonometric import cos, sin
from complexn.lib.backend import (ACCURACY, EULER_GAMMA, FLOAT,
                                  LANCZOS_COEFFS, LANCZOS_G, LANCZOS_SQRT_2PI,
                                  LN2, LN_PI, PI, SINH_LIMIT, SQRT5, np)
from complexn.lib.numerical import fact_double, is_integer, sign
from complexn.lib.tools import __, ieee754
from complexn.number import ONE, ZERO, ComplexNumber

# Terms of the Weierstrass product in `ln_gamma` for Re z < 0.
MAX_SERIES_TERMS = 10000


def _lanczos_sum(x):
    s = ONE
    anum = x
    for c in LANCZOS_COEFFS:
        anum = anum + 1.
        s = s + c / anum
    return LANCZOS_SQRT_2PI * s


def _shifted(z):
    """``(x, reflected)`` with ``x = z - 1`` or ``x = 1 - z`` for the left
    half-plane.
    """
    if z.re >= 1.:
        return ComplexNumber(z.re - 1., z.im), False
    return ComplexNumber(1. - z.re, -z.im), True


def gamma(z):
    """Gamma function.

    Parameters
    ----------
    z : ComplexNumber

    Returns
    -------
    ComplexNumber
    """
    if z.im == 0. and is_integer(z.re):
        return ComplexNumber(fact_double(z.re - 1.), 0.)
    return _lanczos_gamma(z)


@ieee754
def _lanczos_gamma(z):
    if np.isinf(z.im):
        return ZERO
    elif z.re == np.inf:
        return ComplexNumber(np.inf, 0.)
    elif z.re == -np.inf:
        return ComplexNumber(np.nan, np.nan)

    x, reflected = _shifted(z)
    s = _lanczos_sum(x)
    xh = x + 0.5
    xgh = x + (LANCZOS_G + 0.5)
    g = pow_complex(xgh, xh) * s / pow_real_complex(np.e, xgh)
    if not reflected:
        return g
    if np.abs(x.im) > SINH_LIMIT:
        # sin(pi x) overflows; the true value underflows anyway
        logging.debug(__('gamma: |Im(1 - z)| = {} > {}, returning zero',
                         float(np.abs(x.im)), SINH_LIMIT))
        return ZERO
    pix = x * PI
    return pix / (g * sin(pix))


@ieee754
def ln_sin(z):
    r""":math:`\ln \sin z`, asymptotic for large :math:`|\Im z|`.

    .. math::

        \ln \sin(x + iy) \approx |y| - \ln 2
        + i\,\mathrm{atan2}(\mathrm{sgn}(y)\cos x, \sin x)
    """
    if np.abs(z.im) <= SINH_LIMIT:
        return ln(sin(z))
    logging.debug(__('ln_sin: asymptotic form for Im z = {}', float(z.im)))
    return ComplexNumber(
        np.abs(z.im) - LN2,
        np.arctan2(sign(z.im) * np.cos(z.re), np.sin(z.re))
    )


def ln_gamma(z):
    r"""Principal logarithm of the Gamma function.

    For :math:`\Re z < 0` the real part comes from the reflection formula
    and the imaginary part from the Weierstrass product

    .. math::

        \ln\Gamma(z) = -\ln z - \gamma z
        + \sum_{n \ge 1} \left[\frac{z}{n} - \ln\left(1 + \frac{z}{n}\right)
        \right],

    truncated after ``min(|Re z| / ACCURACY, MAX_SERIES_TERMS)`` terms; the
    imaginary part is only accurate to about three decimals there.
    """
    if z.re < 0.:
        if z.im == 0. and is_integer(z.re):
            return ComplexNumber(np.inf, 0.)
        return ComplexNumber(_ln_gamma_reflected_re(z), _ln_gamma_series_im(z))
    return _lanczos_ln_gamma(z)


def _ln_gamma_reflected_re(z):
    t = z * sin(z * PI)
    if t.re < 0.:
        t = -t
    return (LN_PI - ln_gamma(-z) - ln(t)).re


@ieee754
def _ln_gamma_series_im(z):
    w = -(ln(z) + z * EULER_GAMMA)
    n_terms = int(min(np.abs(z.re) / ACCURACY, MAX_SERIES_TERMS))
    logging.debug(__('ln_gamma: {} series terms for z = {!r}', n_terms, z))
    for n in range(1, n_terms + 1):
        zn = z * (1. / n)
        w = w + zn - ln(ONE + zn)
    return w.im


@ieee754
def _lanczos_ln_gamma(z):
    x, reflected = _shifted(z)
    s = _lanczos_sum(x)
    xh = x + 0.5
    xgh = x + (LANCZOS_G + 0.5)
    g = xh * ln(xgh) + ln(s) - xgh
    if not reflected:
        return g
    pix = x * PI
    return ln(pix) - g - ln_sin(pix)


def fact(z):
    """Factorial :math:`z! = \\Gamma(z + 1)`, exact for real integers."""
    if z.im == 0. and is_integer(z.re):
        return ComplexNumber(fact_double(z.re), 0.)
    if np.isfinite(z.re):
        z = ComplexNumber(z.re + 1., z.im)
    return gamma(z)


@ieee754
def lucas(z):
    r"""Lucas numbers continued to the complex plane.

    .. math::

        L(z) = \frac{\cos(\pi z)(\sqrt 5 - 1)^z + (1 + \sqrt 5)^z}{2^z}
    """
    return (cos(z * PI) * pow_real_complex(SQRT5 - 1., z) +
            pow_real_complex(1. + SQRT5, z)) / pow_real_complex(FLOAT(2.), z)


def fib(z):
    """Fibonacci numbers, :math:`F(z) = (L(z - 1) + L(z + 1)) / 5`."""
    return 0.2 * (lucas(z - 1.) + lucas(z + 1.))
