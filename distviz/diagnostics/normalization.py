"""
Density diagnostics for catalog distributions.

This module implements validation checks including:
- Total mass (the density integrates or the mass function sums to 1)
- Window coverage (the plotting window captures most of the mass)
- Non-negativity of sampled values
"""

import logging
import math
from typing import Mapping, Optional

from scipy import integrate

from distviz.catalog.plot_data import support_points
from distviz.catalog.registry import get_distribution, resolve_parameters
from distviz.utils.constants import (
    DEFAULT_NUM_POINTS,
    DISCRETE_SUM_CUTOFF,
    DISCRETE_SUM_LIMIT,
    NORMALIZATION_TOLERANCE,
    WINDOW_MIN_MASS,
)
from distviz.utils.types import DensityFunction, DiagnosticCheck

log = logging.getLogger(__name__)

# Subintervals allowed per quad call; step densities need more than the default 50
QUAD_LIMIT = 200


def _integrate(pdf: DensityFunction, args: tuple, lower: float, upper: float) -> tuple[float, float]:
    value, error = integrate.quad(pdf, lower, upper, args=args, limit=QUAD_LIMIT)
    return value, error


def _sum_mass(pmf: DensityFunction, args: tuple, first: int, last: int) -> float:
    """
    Sum a mass function over first..last, then onward until the tail vanishes.

    The tail stops after a term below DISCRETE_SUM_CUTOFF or after
    DISCRETE_SUM_LIMIT further terms.
    """
    total = math.fsum(pmf(k, *args) for k in range(first, last + 1))
    k = last + 1
    for _ in range(DISCRETE_SUM_LIMIT):
        term = pmf(k, *args)
        total += term
        k += 1
        if term < DISCRETE_SUM_CUTOFF:
            break
    return total


def check_normalization(
    name: str,
    params: Optional[Mapping[str, float]] = None,
    tolerance: float = NORMALIZATION_TOLERANCE,
) -> DiagnosticCheck:
    """
    Check that a distribution carries unit total mass.

    Continuous densities are integrated with scipy.integrate.quad over the
    whole real line, split at the plotting window edges so that the bulk
    of the mass sits in a finite interval. Mass functions are summed from
    the smaller of 0 and the window's left edge until the tail vanishes.

    Args:
        name: Distribution identifier
        params: Parameter values; missing keys take the catalog defaults
        tolerance: Allowed |total mass - 1|

    Returns:
        DiagnosticCheck with the total mass (and integration error estimate)
        in details
    """
    spec = get_distribution(name)
    values = resolve_parameters(name, params)
    window = spec.range_estimator(values)
    args = tuple(values.values())

    details = {}
    if spec.kind == "continuous":
        pieces = [
            _integrate(spec.pdf, args, -math.inf, window.min),
            _integrate(spec.pdf, args, window.min, window.max),
            _integrate(spec.pdf, args, window.max, math.inf),
        ]
        total = sum(value for value, _ in pieces)
        details["integration_error"] = sum(error for _, error in pieces)
    else:
        first = min(0, math.floor(window.min))
        total = _sum_mass(spec.pdf, args, first, math.floor(window.max))

    details["total_mass"] = total
    deviation = abs(total - 1.0)
    details["deviation"] = deviation

    violations = []
    if not deviation <= tolerance:
        violations.append(
            f"Total mass of {name} is {total:.6f}, expected 1 within {tolerance:g}"
        )

    log.debug("Normalization of %s with %s: total mass %.8f", name, values, total)
    return DiagnosticCheck(is_valid=not violations, violations=violations, details=details)


def check_window_coverage(
    name: str,
    params: Optional[Mapping[str, float]] = None,
    min_mass: float = WINDOW_MIN_MASS,
) -> DiagnosticCheck:
    """
    Check that the plotting window captures at least min_mass of the distribution.

    For discrete distributions only the integer points a plot would show
    (see support_points) are counted.

    Args:
        name: Distribution identifier
        params: Parameter values; missing keys take the catalog defaults
        min_mass: Required captured probability

    Returns:
        DiagnosticCheck with the captured mass and window edges in details
    """
    spec = get_distribution(name)
    values = resolve_parameters(name, params)
    window = spec.range_estimator(values)
    args = tuple(values.values())

    if spec.kind == "continuous":
        captured, _ = _integrate(spec.pdf, args, window.min, window.max)
    else:
        captured = math.fsum(
            spec.pdf(k, *args) for k in support_points(spec.kind, window, DEFAULT_NUM_POINTS)
        )

    violations = []
    if not captured >= min_mass:
        violations.append(
            f"Window [{window.min:.4g}, {window.max:.4g}] captures {captured:.4f} "
            f"of {name}, expected at least {min_mass:g}"
        )

    details = {"captured_mass": captured, "window_min": window.min, "window_max": window.max}
    return DiagnosticCheck(is_valid=not violations, violations=violations, details=details)


def check_non_negative(
    name: str,
    params: Optional[Mapping[str, float]] = None,
    num_points: int = DEFAULT_NUM_POINTS,
) -> DiagnosticCheck:
    """
    Check raw density samples over the plotting window.

    Negative and nan samples are violations. inf samples are counted but
    allowed, since several densities have documented singular endpoints.
    """
    spec = get_distribution(name)
    values = resolve_parameters(name, params)
    window = spec.range_estimator(values)
    args = tuple(values.values())

    negative = nan = infinite = 0
    points = support_points(spec.kind, window, num_points)
    for point in points:
        density = spec.pdf(point, *args)
        if math.isnan(density):
            nan += 1
        elif density < 0:
            negative += 1
        elif math.isinf(density):
            infinite += 1

    violations = []
    if negative:
        violations.append(f"{negative} negative density samples for {name}")
    if nan:
        violations.append(f"{nan} nan density samples for {name}")

    details = {"samples": len(points), "negative": negative, "nan": nan, "infinite": infinite}
    return DiagnosticCheck(is_valid=not violations, violations=violations, details=details)
