#!/usr/bin/env python3
# coding: utf-8
r"""Complex numbers as text.

Format strings understood by `to_string`::

    I|n     Cartesian ``a+bi``
    J|n     Cartesian ``a+bj``
    AR|n    polar ``rAtheta``, angle in radians
    AD|n    polar, angle in degrees
    AG|n    polar, angle in grads

``n`` is an optional number of decimals (half-to-even rounding); codes are
case insensitive.  Any other non-empty string is a Python format spec applied
to both parts of the default ``(re, im)`` form.
"""

from complexn.lib.backend import FLOAT, RAD_TO_DEG, RAD_TO_GRAD, np
from complexn.lib.exceptions import ComplexFormatError
from complexn.text.options import DEFAULT_OPTIONS

_CARTESIAN = {'I': 'i', 'J': 'j'}
_POLAR = {'AR': None, 'AD': RAD_TO_DEG, 'AG': RAD_TO_GRAD}


def format_float(x, options=None):
    """Shortest round-trip text of `x`, without a trailing ``.0``."""
    options = DEFAULT_OPTIONS if options is None else options
    x = float(x)
    if np.isnan(x):
        return options.nan_symbol
    elif x == np.inf:
        return options.positive_infinity_symbol
    elif x == -np.inf:
        return options.negative_infinity_symbol
    text = repr(x)
    if text.endswith('.0'):
        text = text[:-2]
    return text.replace('.', options.decimal_separator)


def _rounded(x, num_dec):
    return x if num_dec < 0 else np.round(FLOAT(x), num_dec)


def expression_string(z, num_dec=-1, imaginary_symbol='i', options=None):
    """Cartesian form ``a+bi``.

    An imaginary part of exactly 1 or -1 prints as the bare marker; a zero
    real part prints the imaginary term only; zero prints ``0``.
    """
    im = z.im
    if im == 1.:
        im_text = imaginary_symbol
    elif im == -1.:
        im_text = '-' + imaginary_symbol
    elif im != 0.:
        im_text = format_float(_rounded(im, num_dec), options) + imaginary_symbol
    else:
        im_text = ''

    if z.re != 0.:
        text = format_float(_rounded(z.re, num_dec), options)
        if im != 0.:
            text += ('' if im < 0. else '+') + im_text
        return text
    elif im == 0.:
        return '0'
    return im_text


def polar_string(z, num_dec=-1, factor=None, options=None):
    """Polar form ``rAtheta``; `factor` converts the angle from radians."""
    options = DEFAULT_OPTIONS if options is None else options
    phase = z.phase if factor is None else z.phase * factor
    return ''.join([
        format_float(_rounded(z.magnitude, num_dec), options),
        options.polar_angle_symbol,
        format_float(_rounded(phase, num_dec), options),
    ])


def _format_part(x, fmt, options):
    if not fmt:
        return format_float(x, options)
    try:
        text = format(float(x), fmt)
    except ValueError as e:
        raise ComplexFormatError(
            "Invalid format {!r} for a complex number.".format(fmt)
        ) from e
    return text.replace('.', options.decimal_separator)


def to_string(z, fmt=None, options=None):
    """Text of `z` according to the format string `fmt`.

    Parameters
    ----------
    z : ComplexNumber
    fmt : str, optional
        One of the codes of this module, or a Python format spec.
    options : FormatOptions, optional

    Returns
    -------
    text : str
    """
    options = DEFAULT_OPTIONS if options is None else options
    if fmt is not None and fmt.strip():
        code, _, digits = fmt.partition('|')
        code = code.strip().upper()
        try:
            num_dec = int(digits)
        except ValueError:
            num_dec = -1
        if code in _CARTESIAN:
            return expression_string(z, num_dec, _CARTESIAN[code], options)
        elif code in _POLAR:
            return polar_string(z, num_dec, _POLAR[code], options)
    else:
        fmt = None
    return '({}, {})'.format(_format_part(z.re, fmt, options),
                             _format_part(z.im, fmt, options))


def to_expression(z, num_dec=-1, options=None):
    """Cartesian form with the imaginary marker of `options`."""
    options = DEFAULT_OPTIONS if options is None else options
    return expression_string(z, num_dec, options.imaginary_symbol, options)
