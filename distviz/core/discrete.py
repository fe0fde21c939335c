"""
Probability mass functions for discrete distributions.

Every evaluator has the signature ``name_pmf(k, *params) -> float``. Mass is
only assigned to integer points: any non-integer k (including nan and ±inf)
gives 0.0. Otherwise the conventions of the continuous evaluators apply:
invalid parameters give 0.0, nan parameters give nan, and combinatorial
terms are evaluated in log space whenever the direct product would
overflow or underflow.
"""

import functools
import math

from distviz.core.special_functions import log_beta, log_factorial, safe_exp, safe_pow
from distviz.utils.constants import DISCRETE_WEIBULL_MAX_EXPONENT

# Direct binomial coefficients are built term by term up to this many factors
MAX_DIRECT_TERMS = 1000


def _is_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer()


def _discrete(pmf):
    """
    Apply the shared integer-support and nan policy to a mass function.

    The point is checked first, so a non-integer k gives 0.0 even when a
    parameter is nan. Integral floats are passed on as ints.
    """
    @functools.wraps(pmf)
    def wrapper(k, *params):
        if not _is_integer(k):
            return 0.0
        if any(math.isnan(p) for p in params):
            return math.nan
        try:
            result = pmf(int(k), *params)
        except (ArithmeticError, ValueError):
            return 0.0
        return 0.0 if math.isnan(result) else float(result)

    return wrapper


def _binomial_mass(n: int, k: int, p: float) -> float:
    """
    C(n, k)·p^k·(1-p)^(n-k) for 0 <= k <= n and 0 < p < 1.

    The coefficient is accumulated as a running multiply-divide over the
    shorter side of the triangle. When that product overflows or the powers
    underflow the whole mass is recomputed from log-factorials.
    """
    terms = min(k, n - k)
    if terms <= MAX_DIRECT_TERMS:
        coefficient = 1.0
        for i in range(terms):
            coefficient = coefficient * (n - i) / (i + 1)
        mass = coefficient * math.pow(p, k) * math.pow(1.0 - p, n - k)
        if math.isfinite(mass) and mass > 0:
            return mass

    log_mass = (
        log_factorial(n)
        - log_factorial(k)
        - log_factorial(n - k)
        + k * math.log(p)
        + (n - k) * math.log1p(-p)
    )
    return safe_exp(log_mass)


# ===========================
# Bernoulli Trials
# ===========================


@_discrete
def binomial_pmf(k: int, n: float, p: float) -> float:
    """
    Binomial probability mass function.

    Args:
        k: Number of successes
        n: Number of trials (non-negative integer)
        p: Success probability in [0, 1]

    Returns:
        P(X = k), 0 outside 0 <= k <= n or for invalid parameters

    Formula:
        P(X = k) = C(n, k) · p^k · (1-p)^(n-k)

    Examples:
        >>> binomial_pmf(5, 10, 0.5)
        0.24609375
        >>> binomial_pmf(5.5, 10, 0.5)  # Non-integer support point
        0.0

    Edge Cases:
        p = 0 puts all mass on k = 0 and p = 1 puts all mass on k = n.
    """
    if not _is_integer(n) or n < 0 or p < 0 or p > 1:
        return 0.0
    n = int(n)
    if k < 0 or k > n:
        return 0.0
    if p == 0:
        return 1.0 if k == 0 else 0.0
    if p == 1:
        return 1.0 if k == n else 0.0
    return _binomial_mass(n, k, p)


@_discrete
def bernoulli_pmf(k: int, p: float) -> float:
    """Bernoulli mass: p at k = 1, 1 - p at k = 0."""
    if p < 0 or p > 1:
        return 0.0
    if k == 1:
        return p
    if k == 0:
        return 1.0 - p
    return 0.0


@_discrete
def geometric_pmf(k: int, p: float) -> float:
    """
    Geometric mass for the trial of the first success.

    P(X = k) = (1-p)^(k-1)·p on k = 1, 2, ...
    """
    if p <= 0 or p > 1 or k < 1:
        return 0.0
    return math.pow(1.0 - p, k - 1) * p


@_discrete
def negative_binomial_pmf(k: int, r: float, p: float) -> float:
    """
    Negative binomial mass for the trial of the r-th success.

    Args:
        k: Trial on which the r-th success occurs (k >= r)
        r: Required number of successes (integer >= 1)
        p: Success probability in (0, 1]

    Formula:
        P(X = k) = C(k-1, r-1) · p^r · (1-p)^(k-r)
    """
    if not _is_integer(r) or r < 1 or p <= 0 or p > 1:
        return 0.0
    r = int(r)
    if k < r:
        return 0.0
    if p == 1:
        return 1.0 if k == r else 0.0
    return _binomial_mass(k - 1, r - 1, p) * p


# ===========================
# Counting and Sampling
# ===========================


@_discrete
def poisson_pmf(k: int, lam: float) -> float:
    """
    Poisson probability mass function.

    Args:
        k: Number of events
        lam: Expected number of events (> 0)

    Formula:
        P(X = k) = exp(k·ln λ - λ - ln k!)

    Examples:
        >>> abs(poisson_pmf(3, 3.0) - 0.2240418) < 1e-7
        True
    """
    if lam <= 0 or k < 0 or math.isinf(lam):
        return 0.0
    return safe_exp(k * math.log(lam) - lam - log_factorial(k))


@_discrete
def discrete_uniform_pmf(k: int, lower: float, upper: float) -> float:
    """Equal mass 1/(upper - lower + 1) on the integers lower..upper."""
    if not (_is_integer(lower) and _is_integer(upper)) or lower > upper:
        return 0.0
    if k < lower or k > upper:
        return 0.0
    return 1.0 / (upper - lower + 1.0)


@_discrete
def hypergeometric_pmf(k: int, N: float, K: float, n: float) -> float:
    """
    Hypergeometric mass: k successes in n draws without replacement.

    Args:
        k: Number of observed successes
        N: Population size
        K: Number of success states in the population
        n: Number of draws

    Formula:
        P(X = k) = C(K, k)·C(N-K, n-k) / C(N, n), combined from log-factorials

    Support is max(0, n - (N - K)) <= k <= min(n, K).
    """
    if not (_is_integer(N) and _is_integer(K) and _is_integer(n)):
        return 0.0
    N, K, n = int(N), int(K), int(n)
    if K < 0 or n < 0 or N < K or N < n:
        return 0.0
    if k < 0 or k > n or k > K or (n - k) > (N - K):
        return 0.0

    log_successes = log_factorial(K) - log_factorial(k) - log_factorial(K - k)
    log_failures = log_factorial(N - K) - log_factorial(n - k) - log_factorial(N - K - n + k)
    log_total = log_factorial(N) - log_factorial(n) - log_factorial(N - n)
    return safe_exp(log_successes + log_failures - log_total)


@_discrete
def beta_binomial_pmf(k: int, n: float, alpha: float, beta: float) -> float:
    """
    Beta-binomial mass C(n, k)·B(k + α, n - k + β) / B(α, β).

    Computed entirely from log-factorials and log-Beta values.
    """
    if not _is_integer(n) or n < 0 or alpha <= 0 or beta <= 0:
        return 0.0
    n = int(n)
    if k < 0 or k > n:
        return 0.0

    log_coefficient = log_factorial(n) - log_factorial(k) - log_factorial(n - k)
    log_ratio = log_beta(k + alpha, n - k + beta) - log_beta(alpha, beta)
    return safe_exp(log_coefficient + log_ratio)


@_discrete
def discrete_weibull_pmf(k: int, q: float, beta: float) -> float:
    """
    Discrete Weibull (type I) mass q^(k^β) - q^((k+1)^β) on k = 0, 1, ...

    Args:
        k: Support point
        q: Scale in the open interval (0, 1)
        beta: Shape (> 0)

    Edge Cases:
        Once k^β exceeds 700 the mass is treated as 0.
    """
    if q <= 0 or q >= 1 or beta <= 0 or k < 0:
        return 0.0

    exponent = safe_pow(k, beta)
    if exponent > DISCRETE_WEIBULL_MAX_EXPONENT:
        return 0.0

    mass = math.pow(q, exponent) - math.pow(q, safe_pow(k + 1, beta))
    return mass if mass > 0 else 0.0
