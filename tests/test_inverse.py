#!/usr/bin/env python3
# coding: utf-8
import cmath
import math

import pytest
import sympy

from complexn.functions import inverse as iv
from complexn.number import ComplexNumber

inf = float('inf')
nan = float('nan')
PI = math.pi

# off every branch cut
SAMPLES = [0.3 + 0.4j, -1.2 + 2.5j, 2. - 0.7j, -0.5 - 3.j, 4. + 1e-3j,
           -0.9 - 0.1j]


def _c(z):
    return ComplexNumber.from_complex(z)


def _assert_close(value, expected, rel=1e-12):
    assert value.re == pytest.approx(expected.real, rel=rel, abs=1e-320)
    assert value.im == pytest.approx(expected.imag, rel=rel, abs=1e-320)


@pytest.mark.parametrize('z', SAMPLES)
@pytest.mark.parametrize('name, reference', [
    ('asin', cmath.asin),
    ('acos', cmath.acos),
    ('atan', cmath.atan),
    ('asinh', cmath.asinh),
    ('acosh', cmath.acosh),
    ('atanh', cmath.atanh),
    ('acot', lambda z: cmath.atan(1 / z)),
    ('asec', lambda z: cmath.acos(1 / z)),
    ('acosec', lambda z: cmath.asin(1 / z)),
    ('acoth', lambda z: cmath.atanh(1 / z)),
    ('asech', lambda z: cmath.acosh(1 / z)),
    ('acosech', lambda z: cmath.asinh(1 / z)),
])
def test_inverse_functions_match_cmath(name, reference, z):
    value = getattr(iv, name)(_c(z))
    assert complex(value) == pytest.approx(reference(z), rel=1e-10)


@pytest.mark.parametrize('name, x, expected', [
    ('asin', 0.5, math.asin(0.5)),
    ('asin', -1., -PI / 2.),
    ('asin', inf, complex(0., -inf)),
    ('asin', -inf, complex(0., inf)),
    ('acos', -1., PI),
    ('acos', 0., PI / 2.),
    ('acos', inf, complex(0., inf)),
    ('acos', -inf, complex(0., -inf)),
    ('atan', inf, PI / 2.),
    ('atan', -3., math.atan(-3.)),
    ('acot', 0., PI / 2.),
    ('acot', inf, 0.),
    ('acot', 2., math.atan(0.5)),
    ('asec', 0., inf),
    ('asec', inf, PI / 2.),
    ('asec', -1., PI),
    ('asec', 1., 0.),
    ('asec', 2., PI / 3.),
    ('acosec', 0., inf),
    ('acosec', -inf, 0.),
    ('acosec', -1., -PI / 2.),
    ('acosec', 2., PI / 6.),
    ('asech', 0., inf),
    ('asech', 1., 0.),
    ('asech', -1., complex(0., PI)),
    ('asech', 0.5, math.acosh(2.)),
    ('acosech', 0., inf),
    ('acosech', inf, 0.),
    ('acosech', 2., math.asinh(0.5)),
    ('acoth', 0., complex(0., PI / 2.)),
    ('acoth', inf, 0.),
    ('acoth', -inf, 0.),
    ('acoth', 1., inf),
    ('acoth', -1., -inf),
    ('acosh', 2., math.acosh(2.)),
    ('acosh', 0.5, complex(0., math.acos(0.5))),
    ('acosh', -2., complex(math.acosh(2.), PI)),
    ('atanh', 0.5, math.atanh(0.5)),
    ('atanh', 0., 0.),
    ('atanh', 1., inf),
    ('atanh', -1., -inf),
])
def test_real_axis(name, x, expected):
    value = getattr(iv, name)(ComplexNumber(x, 0.))
    expected = complex(expected)
    for part, ref in ((value.re, expected.real), (value.im, expected.imag)):
        if math.isinf(ref):
            assert part == ref
        else:
            assert part == pytest.approx(ref, rel=1e-14, abs=1e-15)


def test_real_helpers_leave_the_real_axis():
    # outside [-1, 1] the result is complex
    z = iv.asin(ComplexNumber(2., 0.))
    assert z.re == pytest.approx(PI / 2.)
    assert abs(z.im) == pytest.approx(math.acosh(2.))
    w = iv.asec(ComplexNumber(0.5, 0.))
    assert abs(w.im) == pytest.approx(math.acosh(2.))


@pytest.mark.parametrize('z, expected', [
    (ComplexNumber(nan, nan), (nan, nan)),
    (ComplexNumber(nan, inf), (0., PI / 2.)),
    (ComplexNumber(nan, -inf), (0., -PI / 2.)),
    (ComplexNumber(nan, 1.), (nan, nan)),
    (ComplexNumber(0., nan), (0., nan)),
    (ComplexNumber(inf, nan), (0., nan)),
    (ComplexNumber(1., nan), (nan, nan)),
    (ComplexNumber(inf, 1.), (0., PI / 2.)),
    (ComplexNumber(-inf, -1.), (-0., -PI / 2.)),
])
def test_atanh_special_values(z, expected):
    value = iv.atanh(z)
    for part, ref in zip((value.re, value.im), expected):
        if math.isnan(ref):
            assert math.isnan(part)
        else:
            assert part == pytest.approx(ref)


def test_atanh_is_odd():
    z = ComplexNumber(0.7, -1.3)
    assert complex(iv.atanh(-z)) == pytest.approx(-complex(iv.atanh(z)))


@pytest.mark.parametrize('z', [
    0.3 + 0.4j,
    1e-300 + 1e-300j,
    1e300 + 1e300j,
    1e155 + 2j,
    -3e170 - 5e-3j,
    0.5 + 1e200j,
    2. - 1e-200j,
])
def test_atanh_against_high_precision(z):
    # log(1 + z) - log(1 - z) cancels about 400 digits at these magnitudes
    exact = sympy.atanh(sympy.Float(z.real, 800) +
                        sympy.I * sympy.Float(z.imag, 800))
    expected = complex(sympy.N(exact, 40))
    _assert_close(iv.atanh(_c(z)), expected)
