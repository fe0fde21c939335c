"""
Numerical constants and thresholds for special functions and densities.

This module defines the fixed coefficient tables behind the special-function
kernel, the switchover points between approximation regimes, and the
defaults used when sampling densities for plotting. All values are
calibrated for double precision.
"""

import math
import sys

# Lanczos approximation of the Gamma function (g = 7, n = 9)
LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
REFLECTION_THRESHOLD = 0.5  # Below this, use Γ(z)Γ(1-z) = π/sin(πz)

# Above this, Gamma-based formulas switch to log space
STIRLING_THRESHOLD = 50.0

# Abramowitz & Stegun 7.1.26 (|error| <= 1.5e-7)
ERFC_P = 0.3275911
ERFC_COEFFICIENTS = (
    0.254829592,
    -0.284496736,
    1.421413741,
    -1.453152027,
    1.061405429,
)

# Modified Bessel I0 (Abramowitz & Stegun 9.8.1 / 9.8.2)
BESSEL_SWITCH = 3.75
BESSEL_I0_SMALL = (1.0, 3.5156229, 3.0899424, 1.2067492, 0.2659732, 0.0360768, 0.0045813)
BESSEL_I0_LARGE = (
    0.39894228,
    0.01328592,
    0.00225319,
    -0.00157565,
    0.00916281,
    -0.02057706,
    0.02635537,
    -0.01647633,
    0.00392377,
)

# Normalizing constants
SQRT_2PI = math.sqrt(2.0 * math.pi)
LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)

# Discrete Weibull: q^(x^β) is treated as zero once x^β exceeds this
DISCRETE_WEIBULL_MAX_EXPONENT = 700.0

# Plot sampling
DEFAULT_NUM_POINTS = 200  # Continuous samples per window (plus the endpoint)
DEFAULT_PLOT_RANGE = (-5.0, 5.0)  # Fallback when a window cannot be computed
DEGENERATE_RANGE_PADDING = 0.5  # Half-width used to widen min == max windows
MAX_PLOT_BOUND = sys.float_info.max / 4  # Window bounds are clamped to ±this

# Diagnostics tolerances
NORMALIZATION_TOLERANCE = 1e-3  # |total mass - 1| allowed
WINDOW_MIN_MASS = 0.9  # Mass a plotting window should capture
DISCRETE_SUM_LIMIT = 10_000  # Max terms summed for unbounded discrete supports
DISCRETE_SUM_CUTOFF = 1e-14  # Stop summing once a tail term drops below this
