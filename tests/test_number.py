#!/usr/bin/env python3
# coding: utf-8
import cmath
import math
import pickle

import numpy as np
import pytest

from complexn.lib import numerical
from complexn.lib.exceptions import ComplexCastError, UndefinedArgumentError
from complexn.lib.numerical import stable_hypot
from complexn.number import IMAGINARY_ONE, ONE, ZERO, ComplexNumber

inf = float('inf')
nan = float('nan')


def test_magnitude_and_phase():
    z = ComplexNumber(3., 4.)
    assert z.magnitude == 5.
    assert abs(z) == 5.
    assert z.phase == pytest.approx(math.atan2(4., 3.))
    assert z.real == z.re == 3.
    assert z.imag == z.imaginary == z.im == 4.


@pytest.mark.parametrize('a, b', [
    (1e300, 1e300),
    (-1e308, 1e308),
    (1e-200, 3e-200),
])
def test_hypot_no_overflow(a, b):
    h = stable_hypot(a, b)
    assert np.isfinite(h)
    assert h == pytest.approx(math.hypot(a, b), rel=1e-14)


def test_hypot_special_values():
    assert stable_hypot(0., 0.) == 0.
    assert stable_hypot(inf, 1.) == inf
    assert stable_hypot(-inf, inf) == inf
    assert np.isnan(stable_hypot(nan, 1.))


def test_constants():
    assert ComplexNumber.ZERO is ZERO and ZERO.is_zero()
    assert ComplexNumber.ONE is ONE and ONE.is_one()
    assert ComplexNumber.IMAGINARY_ONE is IMAGINARY_ONE
    assert IMAGINARY_ONE.is_imaginary_one()
    assert ComplexNumber() == ZERO


def test_immutable():
    z = ComplexNumber(1., 2.)
    with pytest.raises(AttributeError):
        z.re = 3.
    w = z.replace(im=-2.)
    assert w == ComplexNumber(1., -2.)
    assert z == ComplexNumber(1., 2.)


@pytest.mark.parametrize('bad', ['1', None, [1.], 1j])
def test_constructor_rejects_non_reals(bad):
    with pytest.raises(ComplexCastError):
        ComplexNumber(bad, 0.)


def test_polar_constructors():
    z = ComplexNumber.from_polar(2., math.pi / 2.)
    assert z.re == pytest.approx(0., abs=1e-15)
    assert z.im == pytest.approx(2.)
    w = ComplexNumber.from_polar(1., 5. * math.pi / 2.)
    assert w.im == pytest.approx(1.)
    assert w.phase == pytest.approx(math.pi / 2.)
    d = ComplexNumber.from_polar_degrees(1., 180.)
    assert d.re == pytest.approx(-1.)
    # the magnitude is used as given
    n = ComplexNumber.from_polar(-1., 0.)
    assert n == ComplexNumber(-1., 0.)


def test_equality_and_hash():
    assert ComplexNumber(0., 0.) == ComplexNumber(-0., -0.)
    z = ComplexNumber(nan, 0.)
    assert z != z
    assert ComplexNumber(2., 0.) == 2
    assert ComplexNumber(2., 3.) == 2 + 3j
    assert ComplexNumber(2., 3.) == np.complex128(2 + 3j)
    assert hash(ComplexNumber(2., 3.)) == hash(2 + 3j)
    assert hash(ComplexNumber(2., 0.)) == hash(2)
    assert ComplexNumber(1., 0.) != 'one'


def test_ordering_by_magnitude():
    assert ComplexNumber(0., 1.) < ComplexNumber(2., 0.)
    assert ComplexNumber(3., 4.) > 4
    assert ComplexNumber(3., 4.) >= ComplexNumber(-4., 3.)
    assert ComplexNumber(3., 4.) <= ComplexNumber(-4., 3.)
    assert ComplexNumber(1., 1.) <= ComplexNumber(1., 1.)
    assert sorted([ComplexNumber(2., 2.), ONE, ZERO]) == \
        [ZERO, ONE, ComplexNumber(2., 2.)]


@pytest.mark.parametrize('a, b', [
    (1 + 2j, 3 - 4j),
    (-1.5 + 0.5j, 2j),
    (1e200 + 1e200j, 1e-200 + 1e200j),
])
def test_arithmetic(a, b):
    za, zb = ComplexNumber.from_complex(a), ComplexNumber.from_complex(b)
    assert complex(za + zb) == pytest.approx(a + b)
    assert complex(za - zb) == pytest.approx(a - b)
    assert complex(za / zb) == pytest.approx(a / b, rel=1e-14)
    if abs(a) < 1e100:
        assert complex(za * zb) == pytest.approx(a * b)


def test_mixed_arithmetic():
    z = ComplexNumber(1., 2.)
    assert 2 * z == ComplexNumber(2., 4.)
    assert z * 2. == ComplexNumber(2., 4.)
    assert np.float64(2.) * z == ComplexNumber(2., 4.)
    assert 1 + z == ComplexNumber(2., 2.)
    assert 1 - z == ComplexNumber(0., -2.)
    assert z - 1j == ComplexNumber(1., 1.)
    assert complex(1 / z) == pytest.approx(1 / (1 + 2j))
    assert z / 2 == ComplexNumber(0.5, 1.)
    assert -z == ComplexNumber(-1., -2.)
    assert +z is z


def test_product_repairs_nan():
    assert ComplexNumber(inf, 0.) * ComplexNumber(1., 0.) == \
        ComplexNumber(inf, 0.)
    assert ComplexNumber(inf, 1.) * 2. == ComplexNumber(inf, 2.)
    assert ComplexNumber(inf, 1.) * 0. == ComplexNumber(0., 0.)


def test_division_special_values():
    assert (ONE / ComplexNumber(inf, 0.)).is_zero()
    q = ONE / ZERO
    assert q.is_nan() or q.is_infinity()
    assert (ComplexNumber(1., 0.) / 0.).re == inf


def test_smith_division_no_overflow():
    q = ComplexNumber(1e300, 1e300) / ComplexNumber(1e300, 1e300)
    assert q.re == pytest.approx(1.)
    assert q.im == pytest.approx(0., abs=1e-15)


def test_predicates():
    assert ComplexNumber(nan, 1.).is_nan()
    assert ComplexNumber(1., -inf).is_infinity()
    assert ComplexNumber(-2., 0.).is_real()
    assert not ComplexNumber(-2., 0.).is_real_non_negative()
    assert ComplexNumber(inf, 0.).is_real_non_negative()
    assert ComplexNumber(3., 0.).is_true_real()
    assert not ComplexNumber(3., 1.).is_true_real()
    assert bool(ComplexNumber(0., 1e-300))
    assert not bool(ZERO)


def test_measures():
    z = ComplexNumber(3., 4.)
    assert z.magnitude_squared() == 25.
    assert z.norm() == 25.
    assert z.norm_of_difference(ComplexNumber(0., 4.)) == 9.
    assert z.norm_of_difference(3 + 3j) == 1.


def test_unary_methods():
    z = ComplexNumber(2.5, -3.5)
    assert z.conjugate() == ComplexNumber(2.5, 3.5)
    assert z.round() == ComplexNumber(2., -4.)
    assert round(ComplexNumber(1.25, -0.75), 1) == ComplexNumber(1.2, -0.8)
    assert z.ceiling() == ComplexNumber(3., -3.5)
    assert z.floor() == ComplexNumber(2., -3.5)
    assert ZERO.reciprocal() is ZERO
    r = ComplexNumber(1., 1.).reciprocal()
    assert complex(r) == pytest.approx(0.5 - 0.5j)
    assert complex(ComplexNumber(3., 4.) * ComplexNumber(3., 4.).reciprocal()) \
        == pytest.approx(1.)


def test_cast():
    z = ComplexNumber(1., 1.)
    assert ComplexNumber.cast(z) is z
    assert ComplexNumber.cast(2) == ComplexNumber(2., 0.)
    assert ComplexNumber.cast(np.int32(2)) == ComplexNumber(2., 0.)
    assert ComplexNumber.cast(np.complex64(1 - 1j)) == ComplexNumber(1., -1.)
    with pytest.raises(UndefinedArgumentError):
        ComplexNumber.cast(None)
    with pytest.raises(ComplexCastError):
        ComplexNumber.cast('1+i')
    with pytest.raises(TypeError):
        ComplexNumber.cast(object())


def test_power_operator():
    z = ComplexNumber(1., 1.)
    assert complex(z ** 2) == pytest.approx((1 + 1j) ** 2)
    assert complex(2 ** z) == pytest.approx(cmath.exp((1 + 1j) * math.log(2)))
    assert ZERO ** 0 == ONE


def test_conversions_and_pickle():
    z = ComplexNumber(1.5, -2.)
    assert complex(z) == 1.5 - 2j
    assert z.to_complex() == 1.5 - 2j
    assert pickle.loads(pickle.dumps(z)) == z
    assert repr(z) == 'ComplexNumber(1.5, -2.0)'
    assert eval(repr(z)) == z


def test_real_sign_helpers():
    assert numerical.sign(-3.) == -1.
    assert numerical.sign(0.) == 0.
    assert numerical.sign(inf) == 1.
    assert np.isnan(numerical.sign(nan))
    assert numerical.signbit(-0.)
    assert not numerical.signbit(0.)
    assert numerical.is_integer(4.)
    assert not numerical.is_integer(4.5)


@pytest.mark.parametrize('re, im', [
    (1.5, 2.), (-1.5, 2.), (-1.5, -2.), (1.5, -2.),
    (3., 0.), (-3., 0.), (0., 4.), (0., -4.),
    (0., 0.), (-0., 0.), (0., -0.), (-0., -0.),
    (inf, -inf), (1e-300, 1e300),
])
def test_conjugate_is_an_involution(re, im):
    z = ComplexNumber(re, im)
    w = z.conjugate().conjugate()
    assert w == z
    assert np.signbit(w.re) == np.signbit(z.re)
    assert np.signbit(w.im) == np.signbit(z.im)
    assert z.conjugate().im == -z.im
