#!/usr/bin/env python3
# coding: utf-8
r"""Immutable double-precision complex number.

Cartesian parts are stored as ``numpy.float64`` together with the cached
magnitude (by `stable_hypot`) and phase (``arctan2(im, re)``).  Arithmetic
follows IEEE-754: no operation raises on division by zero or overflow.

Products repair the NaN that ``inf * 0`` produces in a part whenever one of
the contributing factor parts is an exact zero, e.g.
:math:`(\infty + 0i)(1 + 0i) = \infty + 0i`.
"""

import logging
import numbers

from complexn.lib.backend import DEG_TO_RAD, FLOAT, PI, PI2, np
from complexn.lib.exceptions import ComplexCastError, UndefinedArgumentError
from complexn.lib.numerical import stable_hypot
from complexn.lib.tools import ieee754
from complexn.text.formatter import to_expression, to_string


def _coerce(other):
    if isinstance(other, ComplexNumber):
        return other
    elif isinstance(other, numbers.Real):
        return ComplexNumber(other, 0.)
    elif isinstance(other, numbers.Complex):
        return ComplexNumber(other.real, other.imag)
    return NotImplemented


def _fix_nan(value, *factors):
    """Zero a NaN part when any factor contributing to it is zero."""
    if np.isnan(value) and any(f == 0. for f in factors):
        return FLOAT(0.)
    return value


class ComplexNumber(object):
    """Complex number with double-precision parts.

    Parameters
    ----------
    re : float, optional
    im : float, optional
    """
    __slots__ = ('_re', '_im', '_magnitude', '_phase')
    # numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    ZERO = None
    ONE = None
    IMAGINARY_ONE = None

    def __init__(self, re=0., im=0.):
        for part in (re, im):
            if not isinstance(part, numbers.Real):
                raise ComplexCastError(
                    "Cannot use {!r} as a part of a complex number."
                    .format(part)
                )
        self._re = FLOAT(re)
        self._im = FLOAT(im)
        self._magnitude = stable_hypot(self._re, self._im)
        self._phase = np.arctan2(self._im, self._re)

    # Constructors

    @classmethod
    def from_polar(cls, magnitude, phase):
        """Build from polar coordinates; the phase is folded into
        :math:`[-\\pi, \\pi]` before use.
        """
        magnitude, phase = FLOAT(magnitude), FLOAT(phase)
        if np.abs(phase) > PI2:
            phase = np.fmod(phase, PI2)
        if phase > PI:
            phase = phase - PI2
        elif phase < -PI:
            phase = phase + PI2
        with np.errstate(all='ignore'):
            return cls(magnitude * np.cos(phase), magnitude * np.sin(phase))

    @classmethod
    def from_polar_degrees(cls, magnitude, degrees):
        return cls.from_polar(magnitude, FLOAT(degrees) * DEG_TO_RAD)

    @classmethod
    def from_complex(cls, value):
        """Build from a builtin or numpy complex."""
        return cls(value.real, value.imag)

    @classmethod
    def cast(cls, obj):
        """Interpret `obj` as a complex number.

        Raises
        ------
        UndefinedArgumentError
            If `obj` is ``None``.
        ComplexCastError
            If `obj` is not a number.
        """
        if obj is None:
            raise UndefinedArgumentError("Cannot cast None to a complex number.")
        value = _coerce(obj)
        if value is NotImplemented:
            raise ComplexCastError(
                "Cannot cast {} to a complex number.".format(type(obj).__name__)
            )
        return value

    @classmethod
    def parse(cls, text, options=None):
        from complexn.text.parser import parse
        return parse(text, options)

    @classmethod
    def try_parse(cls, text, options=None):
        from complexn.text.parser import try_parse
        return try_parse(text, options)

    def replace(self, re=None, im=None):
        """Return a copy with the given parts replaced."""
        return type(self)(self._re if re is None else re,
                          self._im if im is None else im)

    # Properties

    @property
    def re(self):
        return self._re

    @property
    def im(self):
        return self._im

    real = re
    imag = im
    imaginary = im

    @property
    def magnitude(self):
        return self._magnitude

    @property
    def phase(self):
        """Argument in :math:`(-\\pi, \\pi]`."""
        return self._phase

    # Predicates

    def is_zero(self):
        return bool(self._re == 0. and self._im == 0.)

    def is_one(self):
        return bool(self._re == 1. and self._im == 0.)

    def is_imaginary_one(self):
        return bool(self._re == 0. and self._im == 1.)

    def is_nan(self):
        return bool(np.isnan(self._re) or np.isnan(self._im))

    def is_infinity(self):
        return bool(np.isinf(self._re) or np.isinf(self._im))

    def is_real(self):
        return bool(self._im == 0.)

    def is_real_non_negative(self):
        return bool(self._im == 0. and self._re >= 0.)

    is_true_real = is_real

    # Measures

    def magnitude_squared(self):
        with np.errstate(all='ignore'):
            return self._re * self._re + self._im * self._im

    def norm(self):
        return self.magnitude_squared()

    def norm_of_difference(self, other):
        return (self - ComplexNumber.cast(other)).magnitude_squared()

    # Unary operations

    def conjugate(self):
        return ComplexNumber(self._re, -self._im)

    def reciprocal(self):
        """``1 / z``; zero maps to zero."""
        if self.is_zero():
            return ComplexNumber.ZERO
        return ComplexNumber.ONE / self

    def round(self, ndigits=0):
        """Round both parts, ties to even."""
        return ComplexNumber(np.round(self._re, ndigits),
                             np.round(self._im, ndigits))

    def ceiling(self):
        return ComplexNumber(np.ceil(self._re), self._im)

    def floor(self):
        return ComplexNumber(np.floor(self._re), self._im)

    def __round__(self, ndigits=None):
        return self.round(0 if ndigits is None else ndigits)

    def __neg__(self):
        return ComplexNumber(-self._re, -self._im)

    def __pos__(self):
        return self

    def __abs__(self):
        return self._magnitude

    # Binary operations

    @ieee754
    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(self._re + other._re, self._im + other._im)

    __radd__ = __add__

    @ieee754
    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(self._re - other._re, self._im - other._im)

    @ieee754
    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return ComplexNumber(other._re - self._re, other._im - self._im)

    @ieee754
    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self._scale(FLOAT(other))
        other = _coerce(other)
        if other is NotImplemented:
            return other
        a, b, c, d = self._re, self._im, other._re, other._im
        factors = (a, b, c, d)
        return ComplexNumber(_fix_nan(a * c - b * d, *factors),
                             _fix_nan(a * d + b * c, *factors))

    __rmul__ = __mul__

    def _scale(self, x):
        return ComplexNumber(_fix_nan(x * self._re, x, self._re),
                             _fix_nan(x * self._im, x, self._im))

    @ieee754
    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            x = FLOAT(other)
            return ComplexNumber(self._re / x, self._im / x)
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return _divide(self, other)

    @ieee754
    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return _divide(other, self)

    def __pow__(self, other):
        from complexn.functions.elementary import power
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return power(self, other)

    def __rpow__(self, other):
        from complexn.functions.elementary import power
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return power(other, self)

    # Comparisons

    def __eq__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return bool(self._re == other._re and self._im == other._im)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(complex(float(self._re), float(self._im)))

    # Ordering compares magnitudes; equal values also satisfy <= and >=.

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return bool(self._magnitude < other._magnitude)

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return bool(self == other or self._magnitude <= other._magnitude)

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return bool(self._magnitude > other._magnitude)

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return bool(self == other or self._magnitude >= other._magnitude)

    # Conversions

    def __complex__(self):
        return complex(float(self._re), float(self._im))

    def __bool__(self):
        return not self.is_zero()

    def to_complex(self):
        return complex(self)

    def __reduce__(self):
        return (type(self), (float(self._re), float(self._im)))

    # Text

    def to_string(self, fmt=None, options=None):
        """See `complexn.text.formatter.to_string`."""
        return to_string(self, fmt, options)

    def to_expression(self, num_dec=-1, options=None):
        """See `complexn.text.formatter.to_expression`."""
        return to_expression(self, num_dec, options)

    def __str__(self):
        return to_string(self)

    def __format__(self, format_spec):
        return to_string(self, format_spec or None)

    def __repr__(self):
        return 'ComplexNumber({!r}, {!r})'.format(float(self._re),
                                                  float(self._im))


def _divide(z, w):
    """Smith's scaled division ``z / w``."""
    a, b, c, d = z._re, z._im, w._re, w._im
    if np.abs(c) >= np.abs(d):
        r = d / c
        den = c + d * r
        return ComplexNumber((a + b * r) / den, (b - a * r) / den)
    r = c / d
    den = c * r + d
    return ComplexNumber((a * r + b) / den, (b * r - a) / den)


ComplexNumber.ZERO = ZERO = ComplexNumber(0., 0.)
ComplexNumber.ONE = ONE = ComplexNumber(1., 0.)
ComplexNumber.IMAGINARY_ONE = IMAGINARY_ONE = ComplexNumber(0., 1.)


if __name__ == '__main__':
    # use the importable class, not the one of this script
    from complexn.number import IMAGINARY_ONE, ComplexNumber
    from complexn.functions.elementary import ln, power, sqrt
    from complexn.functions.gamma import gamma
    from complexn.functions.inverse import atanh
    from complexn.lib.logging import Logger

    logger = Logger(level='debug', stream_fmt='%(message)s')
    z = ComplexNumber(3., 4.)
    logging.info('z = {}'.format(z.to_string('I')))
    logging.info('|z| = {}, arg z = {}'.format(z.magnitude, z.phase))
    logging.info('sqrt(z) = {}'.format(sqrt(z).to_string('I')))
    logging.info('ln(z) = {}'.format(ln(z).to_string('I|6')))
    logging.info('z ** i = {}'.format(power(z, IMAGINARY_ONE).to_string('AD|4')))
    logging.info('Gamma(z) = {}'.format(gamma(z).to_string('I|6')))
    logging.info('atanh(z) = {}'.format(atanh(z).to_string('I|6')))
    logging.info('parse("(-3.45; -5.23)") = {!r}'
                 .format(ComplexNumber.parse('(-3.45; -5.23)')))
    logger.close()
