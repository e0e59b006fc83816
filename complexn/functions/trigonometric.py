#!/usr/bin/env python3
# coding: utf-8
r"""Circular and hyperbolic functions of a complex argument.

The reciprocal functions use closed forms in the double angle, e.g.

.. math::

    \cot(a + bi) = \frac{\sin 2a - i \sinh 2b}{\cosh 2b - \cos 2a}

instead of ``1 / tan``, so that no intermediate quotient is formed.
"""

from complexn.lib.backend import np
from complexn.lib.tools import ieee754
from complexn.number import ComplexNumber


@ieee754
def sin(z):
    a, b = z.re, z.im
    return ComplexNumber(np.sin(a) * np.cosh(b), np.cos(a) * np.sinh(b))


@ieee754
def cos(z):
    a, b = z.re, z.im
    return ComplexNumber(np.cos(a) * np.cosh(b), -np.sin(a) * np.sinh(b))


def tan(z):
    return sin(z) / cos(z)


@ieee754
def cot(z):
    a, b = z.re, z.im
    den = np.cosh(2. * b) - np.cos(2. * a)
    return ComplexNumber(np.sin(2. * a) / den, -np.sinh(2. * b) / den)


@ieee754
def sec(z):
    a, b = z.re, z.im
    den = np.cosh(2. * b) + np.cos(2. * a)
    return ComplexNumber(2. * np.cos(a) * np.cosh(b) / den,
                         2. * np.sin(a) * np.sinh(b) / den)


@ieee754
def cosec(z):
    a, b = z.re, z.im
    den = np.cosh(2. * b) - np.cos(2. * a)
    return ComplexNumber(2. * np.sin(a) * np.cosh(b) / den,
                         -2. * np.cos(a) * np.sinh(b) / den)


@ieee754
def sinh(z):
    a, b = z.re, z.im
    return ComplexNumber(np.sinh(a) * np.cos(b), np.cosh(a) * np.sin(b))


@ieee754
def cosh(z):
    a, b = z.re, z.im
    return ComplexNumber(np.cosh(a) * np.cos(b), np.sinh(a) * np.sin(b))


def tanh(z):
    return sinh(z) / cosh(z)


@ieee754
def coth(z):
    a, b = z.re, z.im
    den = np.cosh(2. * a) - np.cos(2. * b)
    return ComplexNumber(np.sinh(2. * a) / den, -np.sin(2. * b) / den)


@ieee754
def sech(z):
    a, b = z.re, z.im
    den = np.cosh(2. * a) + np.cos(2. * b)
    return ComplexNumber(2. * np.cosh(a) * np.cos(b) / den,
                         -2. * np.sinh(a) * np.sin(b) / den)


@ieee754
def cosech(z):
    a, b = z.re, z.im
    den = np.cosh(2. * a) - np.cos(2. * b)
    return ComplexNumber(2. * np.sinh(a) * np.cos(b) / den,
                         -2. * np.cosh(a) * np.sin(b) / den)
