"""
Plotting window heuristics for every distribution.

Each estimator maps a parameter mapping to a PlotRange that captures the
visually significant part of the density. Missing, non-finite or invalid
parameters fall back to the catalog defaults, so an estimator never fails:

    >>> normal_range({"mu": 1.0, "sigma": 2.0}).as_tuple()
    (-7.0, 9.0)
    >>> normal_range({}).as_tuple()
    (-4.0, 4.0)

Bounded supports return the closed support regardless of shape. Windows
for unbounded supports scale with the spread parameters, and for counting
distributions with the mean.
"""

import math
import sys
from typing import Mapping

from distviz.core.special_functions import safe_exp, safe_log, safe_pow
from distviz.utils.constants import DEFAULT_PLOT_RANGE, DEGENERATE_RANGE_PADDING, MAX_PLOT_BOUND
from distviz.utils.types import PlotRange

Params = Mapping[str, float]

# Tail mass targeted by the Weibull and Geometric windows
TAIL_PROBABILITY_WEIBULL = 0.001
TAIL_PROBABILITY_GEOMETRIC = 0.01

LOG_3 = math.log(3.0)

# Discrete Weibull: stop once k^β·ln q drops below this log-mass
DISCRETE_WEIBULL_LOG_CUTOFF = -10.0
DISCRETE_WEIBULL_SEARCH_LIMIT = 50
DISCRETE_WEIBULL_MAX_UPPER = 30


# ===========================
# Parameter Extraction
# ===========================


def _real(params: Params, key: str, default: float) -> float:
    value = params.get(key)
    if value is None or not math.isfinite(value):
        return default
    return float(value)


def _positive(params: Params, key: str, default: float) -> float:
    value = _real(params, key, default)
    return value if value > 0 else default


def _non_negative(params: Params, key: str, default: float) -> float:
    value = _real(params, key, default)
    return value if value >= 0 else default


def _probability(params: Params, key: str, default: float, allow_one: bool = True) -> float:
    """Probability in (0, 1], or (0, 1) when allow_one is False."""
    value = _real(params, key, default)
    if value <= 0 or value > 1 or (value == 1 and not allow_one):
        return default
    return value


def _ceil(value: float) -> float:
    return float(math.ceil(value)) if math.isfinite(value) else value


def _window(lower: float, upper: float) -> PlotRange:
    """
    Build a PlotRange, repairing windows the heuristics cannot express.

    Bounds that overflow are clamped to ±MAX_PLOT_BOUND, so a window keeps
    widening with its spread parameter up to that limit. A nan bound falls
    back to DEFAULT_PLOT_RANGE. Inverted bounds are swapped and a zero-width
    window is widened around its point.
    """
    if math.isnan(lower) or math.isnan(upper):
        return PlotRange(*DEFAULT_PLOT_RANGE)
    lower = min(max(lower, -MAX_PLOT_BOUND), MAX_PLOT_BOUND)
    upper = min(max(upper, -MAX_PLOT_BOUND), MAX_PLOT_BOUND)
    if lower > upper:
        lower, upper = upper, lower
    if lower == upper:
        padding = max(DEGENERATE_RANGE_PADDING, abs(lower) * 1e-6)
        lower, upper = lower - padding, upper + padding
    return PlotRange(lower, upper)


def _padded(lower: float, upper: float, fraction: float) -> PlotRange:
    padding = (upper - lower) * fraction
    return _window(lower - padding, upper + padding)


# ===========================
# Continuous
# ===========================


def normal_range(params: Params) -> PlotRange:
    """μ ± 4σ."""
    mu = _real(params, "mu", 0.0)
    sigma = _positive(params, "sigma", 1.0)
    return _window(mu - 4 * sigma, mu + 4 * sigma)


def beta_range(params: Params) -> PlotRange:
    return _window(0.0, 1.0)


def gamma_range(params: Params) -> PlotRange:
    """(0, max(5, (α + 3√α)/β)): mean plus three standard deviations."""
    alpha = _positive(params, "alpha", 2.0)
    beta = _positive(params, "beta", 1.0)
    return _window(0.0, max(5.0, (alpha + 3 * math.sqrt(alpha)) / beta))


def exponential_range(params: Params) -> PlotRange:
    lam = _positive(params, "lambda", 1.0)
    return _window(0.0, 5.0 / lam)


def uniform_range(params: Params) -> PlotRange:
    """Support padded by 10% of its width on each side."""
    a = _real(params, "a", 0.0)
    b = _real(params, "b", 1.0)
    return _padded(a, b, 0.1)


def lognormal_range(params: Params) -> PlotRange:
    """
    (0, mean + 3·sd) of the log-normal variable itself.

    The bound is summed in log space, so a huge σ saturates at MAX_PLOT_BOUND
    instead of overflowing, and a tiny one keeps the window on x > 0.
    """
    mu = _real(params, "mu", 0.0)
    sigma = _positive(params, "sigma", 1.0)
    variance = sigma * sigma
    log_mean = mu + variance / 2
    if math.isinf(log_mean):
        return _window(0.0, math.inf)
    if variance < 1:
        log_expm1 = safe_log(math.expm1(variance))
    else:
        log_expm1 = variance + math.log1p(-math.exp(-variance))
    log_sd = log_mean + log_expm1 / 2
    high, low = max(log_mean, LOG_3 + log_sd), min(log_mean, LOG_3 + log_sd)
    upper = safe_exp(high + math.log1p(math.exp(low - high)))
    return _window(0.0, max(upper, sys.float_info.min))


def chi2_range(params: Params) -> PlotRange:
    k = _positive(params, "k", 1.0)
    return _window(0.0, k + 4 * math.sqrt(2 * k))


def student_range(params: Params) -> PlotRange:
    """±4 standard deviations, or ±12 when the variance is infinite (ν <= 2)."""
    nu = _positive(params, "nu", 1.0)
    scale = math.sqrt(nu / (nu - 2)) if nu > 2 else 3.0
    return _window(-4 * scale, 4 * scale)


def cauchy_range(params: Params) -> PlotRange:
    x0 = _real(params, "x0", 0.0)
    gamma = _positive(params, "gamma", 1.0)
    return _window(x0 - 10 * gamma, x0 + 10 * gamma)


def laplace_range(params: Params) -> PlotRange:
    mu = _real(params, "mu", 0.0)
    b = _positive(params, "b", 1.0)
    return _window(mu - 6 * b, mu + 6 * b)


def logistic_range(params: Params) -> PlotRange:
    mu = _real(params, "mu", 0.0)
    s = _positive(params, "s", 1.0)
    return _window(mu - 6 * s, mu + 6 * s)


def gumbel_range(params: Params) -> PlotRange:
    """Skewed window (μ - 3β, μ + 8β) following the long right tail."""
    mu = _real(params, "mu", 0.0)
    beta = _positive(params, "beta", 1.0)
    return _window(mu - 3 * beta, mu + 8 * beta)


def weibull_range(params: Params) -> PlotRange:
    """
    (0, x_q) where x_q is the 99.9% quantile β(-ln 0.001)^(1/α), capped at 5β.
    """
    alpha = _positive(params, "alpha", 2.0)
    beta = _positive(params, "beta", 1.0)
    quantile = beta * safe_pow(-math.log(TAIL_PROBABILITY_WEIBULL), 1 / alpha)
    return _window(0.0, min(quantile, 5 * beta))


def pareto_range(params: Params) -> PlotRange:
    """(m, m·1000^(1/α)) capped at 10m."""
    alpha = _positive(params, "alpha", 1.0)
    m = _positive(params, "m", 1.0)
    upper = m * safe_pow(1000.0, 1 / alpha)
    return _window(m, min(upper, 10 * m))


def half_normal_range(params: Params) -> PlotRange:
    sigma = _positive(params, "sigma", 1.0)
    return _window(0.0, 4 * sigma)


def half_cauchy_range(params: Params) -> PlotRange:
    beta = _positive(params, "beta", 1.0)
    return _window(0.0, 10 * beta)


def inverse_gamma_range(params: Params) -> PlotRange:
    """(0.001, 5·mean), using β as the mean when it is undefined (α <= 1)."""
    alpha = _positive(params, "alpha", 2.0)
    beta = _positive(params, "beta", 1.0)
    mean = beta / (alpha - 1) if alpha > 1 else beta
    return _window(0.001, 5 * mean)


def triangular_range(params: Params) -> PlotRange:
    lower = _real(params, "lower", 0.0)
    upper = _real(params, "upper", 1.0)
    return _padded(lower, upper, 0.1)


def kumaraswamy_range(params: Params) -> PlotRange:
    return _window(0.0, 1.0)


def asymmetric_laplace_range(params: Params) -> PlotRange:
    """Six scale lengths per side, b/κ on the left and b·κ on the right."""
    mu = _real(params, "mu", 0.0)
    b = _positive(params, "b", 1.0)
    kappa = _positive(params, "kappa", 1.0)
    return _window(mu - 6 * (b / kappa), mu + 6 * (b * kappa))


def skew_normal_range(params: Params) -> PlotRange:
    """μ ± 4σ, widened by half again for strong skew (|α| > 2)."""
    mu = _real(params, "mu", 0.0)
    sigma = _positive(params, "sigma", 1.0)
    alpha = _real(params, "alpha", 0.0)
    extension = 1.5 if abs(alpha) > 2 else 1.0
    return _window(mu - 4 * sigma * extension, mu + 4 * sigma * extension)


def half_student_t_range(params: Params) -> PlotRange:
    nu = _positive(params, "nu", 2.0)
    sigma = _positive(params, "sigma", 1.0)
    scale = math.sqrt(nu / (nu - 2)) if nu > 2 else 2.0
    return _window(0.0, 5 * sigma * scale)


def logit_normal_range(params: Params) -> PlotRange:
    # Open support (0, 1); the endpoints themselves carry no density
    return _window(0.001, 0.999)


def wald_range(params: Params) -> PlotRange:
    """(0.001, μ + 4μ·√(μ/λ)), four standard deviations above the mean."""
    mu = _positive(params, "mu", 1.0)
    lam = _positive(params, "lam", 1.0)
    return _window(0.001, mu + 4 * mu * math.sqrt(mu / lam))


def moyal_range(params: Params) -> PlotRange:
    mu = _real(params, "mu", 0.0)
    sigma = _positive(params, "sigma", 1.0)
    return _window(mu - 3 * sigma, mu + 10 * sigma)


def ex_gaussian_range(params: Params) -> PlotRange:
    """(μ - 3σ, μ + 4σ + 3/λ): the exponential tail extends the right side."""
    mu = _real(params, "mu", 0.0)
    sigma = _positive(params, "sigma", 1.0)
    lam = _positive(params, "lam", 1.0)
    return _window(mu - 3 * sigma, mu + 4 * sigma + 3 / lam)


def von_mises_range(params: Params) -> PlotRange:
    return _window(-math.pi, math.pi)


def rice_range(params: Params) -> PlotRange:
    """(0, max(ν + 4σ, m + 4σ)) where m = σ√(π/2)·exp(-ν²/(4σ²))."""
    nu = _non_negative(params, "nu", 1.0)
    sigma = _positive(params, "sigma", 1.0)
    ratio = nu / sigma
    mean = sigma * math.sqrt(math.pi / 2) * math.exp(-0.25 * ratio * ratio)
    return _window(0.0, max(nu + 4 * sigma, mean + 4 * sigma))


def truncated_normal_range(params: Params) -> PlotRange:
    lower = _real(params, "lower", -2.0)
    upper = _real(params, "upper", 2.0)
    return _padded(lower, upper, 0.05)


# ===========================
# Discrete
# ===========================


def binomial_range(params: Params) -> PlotRange:
    n = _non_negative(params, "n", 10.0)
    return _window(0.0, n)


def poisson_range(params: Params) -> PlotRange:
    """(0, max(20, ⌈λ + 4√λ⌉)), about 99.9% of the mass."""
    lam = _positive(params, "lambda", 3.0)
    return _window(0.0, max(20.0, _ceil(lam + 4 * math.sqrt(lam))))


def geometric_range(params: Params) -> PlotRange:
    """(1, max(10, k99)) where k99 = ⌈ln 0.01 / ln(1 - p)⌉ covers 99% of the mass."""
    p = _probability(params, "p", 0.3)
    tail = math.log(TAIL_PROBABILITY_GEOMETRIC) / math.log1p(-p) if p < 1 else 0.0
    return _window(1.0, max(10.0, _ceil(tail)))


def negative_binomial_range(params: Params) -> PlotRange:
    """(r, max(r + 10, ⌈mean + 4·sd⌉)) with mean r/p."""
    r = _positive(params, "r", 5.0)
    p = _probability(params, "p", 0.3)
    mean = r / p
    upper = _ceil(mean + 4 * math.sqrt(mean * (1 - p) / p))
    return _window(r, max(r + 10, upper))


def bernoulli_range(params: Params) -> PlotRange:
    return _window(0.0, 1.0)


def discrete_uniform_range(params: Params) -> PlotRange:
    lower = _real(params, "lower", 1.0)
    upper = _real(params, "upper", 6.0)
    return _window(lower, upper)


def hypergeometric_range(params: Params) -> PlotRange:
    """Exact support max(0, n - (N - K)) .. min(n, K)."""
    N = _positive(params, "N", 50.0)
    K = _non_negative(params, "K", 20.0)
    n = _positive(params, "n", 10.0)
    return _window(max(0.0, n - (N - K)), min(n, K))


def beta_binomial_range(params: Params) -> PlotRange:
    n = _non_negative(params, "n", 10.0)
    return _window(0.0, n)


def discrete_weibull_range(params: Params) -> PlotRange:
    """
    (0, k*) where k* is the first k with k^β·ln q < -10, i.e. q^(k^β) < 4.5e-5.

    Defaults to 10 when no such k <= 50 exists and never exceeds 30.
    """
    q = _probability(params, "q", 0.5, allow_one=False)
    beta = _positive(params, "beta", 1.0)
    log_q = math.log(q)

    upper = 10
    for k in range(1, DISCRETE_WEIBULL_SEARCH_LIMIT + 1):
        if safe_pow(k, beta) * log_q < DISCRETE_WEIBULL_LOG_CUTOFF:
            upper = k
            break
    return _window(0.0, min(upper, DISCRETE_WEIBULL_MAX_UPPER))
