"""
Unit tests for continuous probability density functions.

This module validates:
1. Known values and agreement with scipy.stats
2. Boundary conventions at support endpoints
3. nan propagation and infinite arguments
4. Numerical stability in far tails and for extreme parameters
5. Evaluators never raise, whatever the input
"""

import math

import numpy as np
import pytest
from scipy import stats

from distviz.core import continuous as c
from distviz.catalog.registry import DISTRIBUTIONS, list_distributions

CONTINUOUS_NAMES = [spec.name for spec in list_distributions("continuous")]


# ===========================
# Known Values
# ===========================


def test_standard_normal_peak():
    assert abs(c.normal_pdf(0.0, 0.0, 1.0) - 0.3989423) < 1e-7


def test_uniform_beta_is_flat():
    assert c.beta_pdf(0.5, 1.0, 1.0) == pytest.approx(1.0, rel=1e-12)


def test_gamma_and_exponential_at_zero():
    """Shape 1 gamma and the exponential both start at their rate."""
    assert c.gamma_pdf(0.0, 1.0, 1.0) == 1.0
    assert c.exponential_pdf(0.0, 1.0) == 1.0
    assert c.gamma_pdf(0.0, 1.0, 2.5) == 2.5


def test_uniform_density():
    assert c.uniform_pdf(0.3, 0.0, 2.0) == 0.5
    assert c.uniform_pdf(2.0, 0.0, 2.0) == 0.5
    assert c.uniform_pdf(2.1, 0.0, 2.0) == 0.0


def test_triangular_peak_and_edges():
    assert c.triangular_pdf(0.5, 0.0, 0.5, 1.0) == 2.0
    assert c.triangular_pdf(0.0, 0.0, 0.5, 1.0) == 0.0
    assert c.triangular_pdf(1.0, 0.0, 0.5, 1.0) == 0.0
    assert c.triangular_pdf(0.25, 0.0, 0.5, 1.0) == pytest.approx(1.0)


def test_asymmetric_laplace_with_unit_kappa_is_laplace():
    for x in (-2.0, -0.3, 0.0, 1.7):
        assert c.asymmetric_laplace_pdf(x, 0.0, 1.5, 1.0) == pytest.approx(c.laplace_pdf(x, 0.0, 1.5))


def test_rice_with_zero_signal_is_rayleigh():
    for x in (0.2, 1.0, 3.0):
        assert c.rice_pdf(x, 0.0, 1.0) == pytest.approx(x * math.exp(-x * x / 2), rel=1e-6)


def test_skew_normal_with_zero_shape_is_normal():
    for x in (-1.5, 0.0, 2.0):
        assert c.skew_normal_pdf(x, 0.0, 1.0, 0.0) == pytest.approx(c.normal_pdf(x, 0.0, 1.0), rel=1e-6)


def test_truncated_normal_with_infinite_bounds_is_normal():
    for x in (-1.0, 0.0, 0.7):
        assert c.truncated_normal_pdf(x, 0.0, 1.0, -math.inf, math.inf) == pytest.approx(
            c.normal_pdf(x, 0.0, 1.0), rel=1e-6
        )


# ===========================
# Agreement with scipy.stats
# ===========================


REFERENCE_CASES = [
    ("normal", (1.3, -0.5, 2.0), lambda x, mu, s: stats.norm.pdf(x, mu, s)),
    ("beta", (0.3, 2.5, 0.7), lambda x, a, b: stats.beta.pdf(x, a, b)),
    ("gamma", (2.2, 3.0, 1.5), lambda x, a, b: stats.gamma.pdf(x, a, scale=1 / b)),
    ("gamma", (150.0, 200.0, 1.5), lambda x, a, b: stats.gamma.pdf(x, a, scale=1 / b)),
    ("exponential", (0.8, 2.0), lambda x, lam: stats.expon.pdf(x, scale=1 / lam)),
    ("lognormal", (1.7, 0.2, 0.6), lambda x, mu, s: stats.lognorm.pdf(x, s, scale=math.exp(mu))),
    ("chi2", (3.1, 4.0), lambda x, k: stats.chi2.pdf(x, k)),
    ("chi2", (0.4, 1.0), lambda x, k: stats.chi2.pdf(x, k)),
    ("student", (1.2, 3.0), lambda x, nu: stats.t.pdf(x, nu)),
    ("student", (-0.4, 0.5), lambda x, nu: stats.t.pdf(x, nu)),
    ("cauchy", (2.0, 1.0, 0.5), lambda x, x0, g: stats.cauchy.pdf(x, x0, g)),
    ("laplace", (-1.0, 0.5, 2.0), lambda x, mu, b: stats.laplace.pdf(x, mu, b)),
    ("logistic", (0.9, 0.3, 0.8), lambda x, mu, s: stats.logistic.pdf(x, mu, s)),
    ("gumbel", (2.5, 0.5, 1.5), lambda x, mu, b: stats.gumbel_r.pdf(x, mu, b)),
    ("weibull", (1.1, 1.5, 2.0), lambda x, a, b: stats.weibull_min.pdf(x, a, scale=b)),
    ("pareto", (3.0, 2.5, 1.5), lambda x, a, m: stats.pareto.pdf(x, a, scale=m)),
    ("half_normal", (0.9, 1.7), lambda x, s: stats.halfnorm.pdf(x, scale=s)),
    ("half_cauchy", (2.2, 0.8), lambda x, b: stats.halfcauchy.pdf(x, scale=b)),
    ("inverse_gamma", (0.7, 3.0, 2.0), lambda x, a, b: stats.invgamma.pdf(x, a, scale=b)),
    ("half_student_t", (1.4, 3.0, 2.0), lambda x, nu, s: 2 * stats.t.pdf(x / s, nu) / s),
    (
        "triangular",
        (1.2, 0.0, 1.5, 4.0),
        lambda x, lo, mode, hi: stats.triang.pdf(x, (mode - lo) / (hi - lo), lo, hi - lo),
    ),
    (
        "kumaraswamy",
        (0.35, 2.0, 5.0),
        lambda x, a, b: a * b * x ** (a - 1) * (1 - x**a) ** (b - 1),
    ),
    (
        "logit_normal",
        (0.3, 0.5, 2.0),
        lambda x, mu, tau: math.sqrt(tau / (2 * math.pi)) / (x * (1 - x))
        * math.exp(-tau / 2 * (math.log(x / (1 - x)) - mu) ** 2),
    ),
    (
        "asymmetric_laplace",
        (-0.8, 0.5, 1.2, 2.0),
        lambda x, mu, b, k: stats.laplace_asymmetric.pdf(x, k, loc=mu, scale=b),
    ),
    (
        "asymmetric_laplace",
        (1.3, 0.5, 1.2, 2.0),
        lambda x, mu, b, k: stats.laplace_asymmetric.pdf(x, k, loc=mu, scale=b),
    ),
    (
        "skew_normal",
        (0.4, 0.0, 1.5, 3.0),
        lambda x, mu, s, a: stats.skewnorm.pdf(x, a, mu, s),
    ),
    ("wald", (0.8, 1.5, 2.0), lambda x, mu, lam: stats.invgauss.pdf(x, mu / lam, scale=lam)),
    ("moyal", (1.0, 0.5, 1.3), lambda x, mu, s: stats.moyal.pdf(x, mu, s)),
    (
        "ex_gaussian",
        (1.1, 0.0, 0.7, 1.5),
        lambda x, mu, s, lam: stats.exponnorm.pdf(x, 1 / (s * lam), loc=mu, scale=s),
    ),
    ("von_mises", (0.5, 0.2, 2.0), lambda x, mu, k: stats.vonmises.pdf(x, k, loc=mu)),
    ("von_mises", (0.1, 0.0, 40.0), lambda x, mu, k: stats.vonmises.pdf(x, k, loc=mu)),
    ("rice", (2.1, 1.5, 0.8), lambda x, nu, s: stats.rice.pdf(x, nu / s, scale=s)),
    ("rice", (50.0, 50.0, 1.0), lambda x, nu, s: stats.rice.pdf(x, nu / s, scale=s)),
    (
        "truncated_normal",
        (0.5, 0.0, 1.0, -1.0, 2.0),
        lambda x, mu, s, lo, hi: stats.truncnorm.pdf(x, (lo - mu) / s, (hi - mu) / s, mu, s),
    ),
]


@pytest.mark.parametrize(
    "name,args,reference",
    REFERENCE_CASES,
    ids=[f"{case[0]}-{i}" for i, case in enumerate(REFERENCE_CASES)],
)
def test_matches_reference_density(name, args, reference):
    pdf = DISTRIBUTIONS[name].pdf
    assert pdf(*args) == pytest.approx(float(reference(*args)), rel=1e-5, abs=1e-12)


# ===========================
# Boundary Conventions
# ===========================


@pytest.mark.parametrize(
    "x,alpha,beta,expected",
    [
        (0.0, 0.5, 0.5, math.inf),
        (1.0, 0.5, 0.5, math.inf),
        (0.0, 2.0, 2.0, 0.0),
        (1.0, 2.0, 2.0, 0.0),
        (0.0, 1.0, 3.0, 3.0),
        (1.0, 3.0, 1.0, 3.0),
        (-0.1, 2.0, 2.0, 0.0),
        (1.1, 2.0, 2.0, 0.0),
    ],
)
def test_beta_boundaries(x, alpha, beta, expected):
    assert c.beta_pdf(x, alpha, beta) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("toward_one", [False, True])
def test_arcsine_beta_diverges_at_both_ends(toward_one):
    """Beta(0.5, 0.5) grows without bound as x approaches 0 or 1 from inside."""
    values = []
    for k in (2, 4, 8, 16):
        x = 1.0 - 10.0 ** -k if toward_one else 10.0 ** -k
        value = c.beta_pdf(x, 0.5, 0.5)
        assert value == pytest.approx(1.0 / (math.pi * math.sqrt(x * (1.0 - x))), rel=1e-6)
        values.append(value)
    assert all(later > earlier for earlier, later in zip(values, values[1:]))
    assert values[-1] > 1e7


@pytest.mark.parametrize(
    "pdf,shape_args",
    [
        (c.gamma_pdf, lambda shape: (shape, 2.0)),
        (c.weibull_pdf, lambda shape: (shape, 0.5)),
    ],
)
def test_shape_governed_value_at_zero(pdf, shape_args):
    assert pdf(0.0, *shape_args(0.5)) == math.inf
    assert pdf(0.0, *shape_args(3.0)) == 0.0
    assert pdf(0.0, *shape_args(1.0)) == 2.0


def test_chi2_at_zero():
    assert c.chi2_pdf(0.0, 1.0) == math.inf
    assert c.chi2_pdf(0.0, 2.0) == 0.5
    assert c.chi2_pdf(0.0, 3.0) == 0.0


def test_kumaraswamy_endpoints():
    assert c.kumaraswamy_pdf(0.0, 0.5, 2.0) == math.inf
    assert c.kumaraswamy_pdf(0.0, 1.0, 2.0) == 2.0
    assert c.kumaraswamy_pdf(1.0, 3.0, 1.0) == 3.0
    assert c.kumaraswamy_pdf(1.0, 3.0, 0.5) == math.inf
    assert c.kumaraswamy_pdf(1.0, 3.0, 2.0) == 0.0


def test_open_supports_exclude_endpoints():
    assert c.logit_normal_pdf(0.0, 0.0, 1.0) == 0.0
    assert c.logit_normal_pdf(1.0, 0.0, 1.0) == 0.0
    assert c.lognormal_pdf(0.0, 0.0, 1.0) == 0.0
    assert c.inverse_gamma_pdf(0.0, 2.0, 1.0) == 0.0
    assert c.wald_pdf(0.0, 1.0, 1.0) == 0.0


def test_pareto_support_starts_at_scale():
    assert c.pareto_pdf(0.99, 2.0, 1.0) == 0.0
    assert c.pareto_pdf(1.0, 2.0, 1.0) == pytest.approx(2.0)


def test_von_mises_support_is_one_turn():
    assert c.von_mises_pdf(math.pi + 0.01, 0.0, 1.0) == 0.0
    assert c.von_mises_pdf(-math.pi - 0.01, 0.0, 1.0) == 0.0
    assert c.von_mises_pdf(math.pi, 0.0, 1.0) > 0


@pytest.mark.parametrize(
    "pdf,args",
    [
        (c.normal_pdf, (0.0, 0.0, 0.0)),
        (c.normal_pdf, (0.0, 0.0, -1.0)),
        (c.uniform_pdf, (0.5, 1.0, 1.0)),
        (c.uniform_pdf, (0.5, 2.0, 1.0)),
        (c.triangular_pdf, (0.5, 0.0, 0.0, 1.0)),
        (c.triangular_pdf, (0.5, 0.0, 1.5, 1.0)),
        (c.truncated_normal_pdf, (0.5, 0.0, 1.0, 1.0, 1.0)),
        (c.gamma_pdf, (1.0, -2.0, 1.0)),
        (c.student_pdf, (0.0, 0.0)),
        (c.rice_pdf, (1.0, -0.5, 1.0)),
        (c.von_mises_pdf, (0.0, 0.0, 0.0)),
        (c.ex_gaussian_pdf, (0.0, 0.0, 1.0, 0.0)),
    ],
)
def test_invalid_parameters_give_zero(pdf, args):
    assert pdf(*args) == 0.0


# ===========================
# nan and Infinity
# ===========================


def test_nan_propagates(continuous_distribution):
    spec = continuous_distribution
    defaults = list(spec.defaults().values())
    assert math.isnan(spec.pdf(math.nan, *defaults))
    for i in range(len(defaults)):
        args = defaults.copy()
        args[i] = math.nan
        assert math.isnan(spec.pdf(0.5, *args)), f"{spec.name} parameter {i}"


@pytest.mark.parametrize("x", [math.inf, -math.inf])
def test_infinite_point_has_zero_density(continuous_distribution, x):
    spec = continuous_distribution
    assert spec.pdf(x, *spec.defaults().values()) == 0.0


def test_infinite_location_gives_zero():
    assert c.normal_pdf(0.0, math.inf, 1.0) == 0.0
    assert c.normal_pdf(0.0, 0.0, math.inf) == 0.0
    assert c.cauchy_pdf(0.0, -math.inf, 1.0) == 0.0
    assert c.von_mises_pdf(0.0, math.inf, 1.0) == 0.0
    assert c.von_mises_pdf(0.0, 0.0, math.inf) == 0.0


def test_student_infinite_dof_is_normal():
    assert c.student_pdf(0.7, math.inf) == pytest.approx(c.normal_pdf(0.7, 0.0, 1.0))
    assert c.half_student_t_pdf(0.7, math.inf, 1.0) == pytest.approx(c.half_normal_pdf(0.7, 1.0))


# ===========================
# Numerical Stability
# ===========================


def test_normal_far_tail_underflows_cleanly():
    assert c.normal_pdf(50.0, 0.0, 1.0) == 0.0
    assert c.normal_pdf(1e200, 0.0, 1.0) == 0.0


def test_tiny_scale_gives_large_finite_peak():
    peak = c.normal_pdf(0.0, 0.0, 1e-300)
    assert math.isfinite(peak)
    assert peak > 1e299


def test_subnormal_scale_peak_overflows():
    """1/(σ√(2π)) is not representable for σ below about 2.2e-309."""
    assert c.normal_pdf(0.0, 0.0, 1e-310) == math.inf
    assert c.normal_pdf(1e-308, 0.0, 1e-310) == 0.0


@pytest.mark.parametrize("nu", [1e6, 1e9, 1e12, 1e15])
def test_student_huge_dof_approaches_normal(nu):
    expected = c.normal_pdf(0.5, 0.0, 1.0)
    assert c.student_pdf(0.5, nu) == pytest.approx(expected, rel=10.0 / nu + 1e-12)


def test_student_normalizer_is_continuous_across_expansion():
    below = c.student_pdf(0.5, c.STUDENT_ASYMPTOTIC_NU)
    above = c.student_pdf(0.5, c.STUDENT_ASYMPTOTIC_NU * (1 + 1e-12))
    assert above == pytest.approx(below, rel=1e-9)
    assert below == pytest.approx(stats.t.pdf(0.5, c.STUDENT_ASYMPTOTIC_NU), rel=1e-9)


def test_gamma_large_shape_stays_finite():
    """Γ(500) overflows, but the density at the mode is moderate."""
    value = c.gamma_pdf(499.0, 500.0, 1.0)
    assert value == pytest.approx(stats.gamma.pdf(499.0, 500.0), rel=1e-6)


def test_beta_large_shapes():
    value = c.beta_pdf(0.5, 200.0, 200.0)
    assert value == pytest.approx(stats.beta.pdf(0.5, 200.0, 200.0), rel=1e-6)


def test_ex_gaussian_left_tail_is_tiny_not_overflowing():
    value = c.ex_gaussian_pdf(-20.0, 0.0, 1.0, 1.0)
    assert 0 < value < 1e-80
    assert value == pytest.approx(stats.exponnorm.pdf(-20.0, 1.0), rel=1e-5)


def test_von_mises_high_concentration():
    value = c.von_mises_pdf(0.0, 0.0, 500.0)
    assert math.isfinite(value)
    assert value == pytest.approx(stats.vonmises.pdf(0.0, 500.0), rel=1e-5)


def test_rice_large_argument_uses_scaled_bessel():
    value = c.rice_pdf(800.0, 800.0, 1.0)
    assert value == pytest.approx(stats.rice.pdf(800.0, 800.0), rel=1e-5)


def test_wald_tiny_argument():
    assert c.wald_pdf(1e-200, 1.0, 1.0) == 0.0


def test_truncated_normal_far_tail_window():
    """A window deep in the upper tail keeps its mass from cancelling to zero."""
    value = c.truncated_normal_pdf(8.5, 0.0, 1.0, 8.0, 9.0)
    assert value == pytest.approx(stats.truncnorm.pdf(8.5, 8.0, 9.0), rel=1e-8)


@pytest.mark.parametrize(
    "x,lower,upper",
    [
        (6.5, 6.0, 7.0),
        (-6.5, -7.0, -6.0),
        (12.0, 10.0, math.inf),
        (-12.0, -math.inf, -10.0),
    ],
)
def test_truncated_normal_tail_windows_match_reference(x, lower, upper):
    expected = stats.truncnorm.pdf(x, lower, upper)
    assert c.truncated_normal_pdf(x, 0.0, 1.0, lower, upper) == pytest.approx(expected, rel=1e-8)


def test_kumaraswamy_near_one():
    x = 1.0 - 1e-12
    assert math.isfinite(c.kumaraswamy_pdf(x, 2.0, 0.5))


# ===========================
# Never Raise
# ===========================


EXTREME_VALUES = [-math.inf, -1e300, -1.0, 0.0, 5e-324, 1e-300, 0.5, 1.0, 2.0, 1e300, math.inf]


@pytest.mark.parametrize("name", CONTINUOUS_NAMES)
def test_never_raises(name):
    """Every point and one-at-a-time extreme parameter gives a non-negative value."""
    spec = DISTRIBUTIONS[name]
    defaults = list(spec.defaults().values())
    for i in range(len(defaults)):
        for value in EXTREME_VALUES:
            args = defaults.copy()
            args[i] = value
            for x in EXTREME_VALUES:
                result = spec.pdf(x, *args)
                assert isinstance(result, float)
                assert not math.isnan(result), f"{name}({x}, {args})"
                assert result >= 0, f"{name}({x}, {args})"


@pytest.mark.parametrize("name", CONTINUOUS_NAMES)
def test_accepts_numpy_scalars(name):
    spec = DISTRIBUTIONS[name]
    defaults = [np.float64(v) for v in spec.defaults().values()]
    assert isinstance(spec.pdf(np.float64(0.5), *defaults), float)
