#!/usr/bin/env python3
# coding: utf-8
"""Conversion between `ComplexNumber` values and numpy arrays.
"""

from functools import wraps

from complexn.lib.backend import DTYPE, np
from complexn.lib.tools import time_this
from complexn.number import ComplexNumber

_to_complex = np.frompyfunc(lambda z: complex(ComplexNumber.cast(z)), 1, 1)
_from_complex = np.frompyfunc(ComplexNumber.from_complex, 1, 1)


def as_array(values):
    """Array of dtype `DTYPE` from a (nested) sequence of numbers.

    Parameters
    ----------
    values : array_like
        `ComplexNumber`, Python or numpy numbers.

    Returns
    -------
    array : (...) ndarray
    """
    objects = np.empty(np.shape(values), dtype=object)
    objects[...] = values
    return np.asarray(_to_complex(objects), dtype=DTYPE)


def from_array(array):
    """Object array of `ComplexNumber` with the shape of `array`."""
    array = np.asarray(array, dtype=DTYPE)
    result = np.empty(array.shape, dtype=object)
    result[...] = _from_complex(array)
    return result


def elementwise(func):
    """Wrap a function of one `ComplexNumber` so that it maps arrays of
    dtype `DTYPE` to arrays of the same shape.

    >>> from complexn.functions.elementary import sqrt
    >>> elementwise(sqrt)(np.array([-4., 9.]))
    array([0.+2.j, 3.+0.j])
    """
    ufunc = np.frompyfunc(
        lambda c: complex(func(ComplexNumber.from_complex(c))), 1, 1
    )

    @time_this
    @wraps(func)
    def _elementwise(array):
        array = np.asarray(array, dtype=DTYPE)
        return np.asarray(ufunc(array), dtype=DTYPE)

    return _elementwise
