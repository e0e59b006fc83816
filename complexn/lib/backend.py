#!/usr/bin/env python3
# coding: utf-8
"""Global mathmatical library, data types and numeric constants.

All floating point work of the package is done on ``FLOAT`` scalars so that
division by zero, overflow and invalid operations give IEEE-754 sentinels
(see ``complexn.lib.tools.ieee754``) instead of Python exceptions.
"""

import numpy as np

DTYPE = np.complex128
FLOAT = np.float64

# Tolerance of the near-zero tests in `pow_complex` and the LnGamma series.
ACCURACY = 1.e-10

PI = FLOAT(3.1415926535897932384626433832795028841971693993751058)
PI_2 = FLOAT(1.5707963267948966192313216916397514420985846996875529)
PI_4 = FLOAT(0.78539816339744830961566084581987572104929234984378)
PI2 = FLOAT(6.2831853071795864769252867665590057683943387987502)
SQRT1_2 = FLOAT(0.70710678118654752440084436210484903928483593768845)
LN2 = FLOAT(0.69314718055994530941723212145817656807550013436026)
LN10 = FLOAT(2.3025850929940456840179914546843642076011014886288)
LN_PI = FLOAT(1.1447298858494001741434273513530587116472948129153)
SQRT5 = FLOAT(2.2360679774997896964091736687312762354406183638)

# Euler-Mascheroni constant
EULER_GAMMA = FLOAT(0.577215664901532860605)

# Angle conversions
DEG_TO_RAD = FLOAT(0.017453292519943295769236907684886127134428718885417)
RAD_TO_DEG = FLOAT(57.29577951308232087679815481410517033240547246656432)
GRAD_TO_RAD = FLOAT(0.015707963267948966192313216916397514420985846996876)
RAD_TO_GRAD = FLOAT(63.66197723675813430755350534900574481378385829618258)

# Literals bounding the safe band of `atanh`, kept as published.
ATANH_MAX = FLOAT(1.79769e+308)
ATANH_MIN = FLOAT(2.2250738585072014e-308)
ATANH_CROSSOVER = FLOAT(0.3)

# Above this value the real Gamma function overflows.
MAXGAM = FLOAT(171.624376956302725)

# |Im z| above which sinh/cosh overflow.
SINH_LIMIT = 709.

# Largest n such that float(n!) is finite.
MAX_FACTORIAL = 170

# Lanczos (g = 5) coefficients, shared by Gamma and LnGamma.
LANCZOS_G = 5.
LANCZOS_COEFFS = (
    76.18009173, -86.50532033, 24.01409822,
    -1.231739516, 0.00120858003, -5.36382e-6
)
LANCZOS_SQRT_2PI = 2.506628275
