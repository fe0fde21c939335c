"""
Read-only catalog of every supported distribution.

The catalog ties each distribution's user-facing metadata (display names,
parameter bounds, suggested slider ranges, descriptions) to its numeric
core: the density evaluator in distviz.core.continuous / distviz.core.discrete
and the window heuristic in distviz.core.ranges.

Lookups are by identifier (e.g. "negative_binomial"). The catalog itself is
a MappingProxyType and cannot be modified at runtime.
"""

import logging
import math
from types import MappingProxyType
from typing import Mapping, Optional

from distviz.core import continuous, discrete, ranges
from distviz.utils.types import DistributionKind, DistributionSpec, ParameterSpec, PlotRange

log = logging.getLogger(__name__)

# Smallest admissible value for strictly positive parameters
MIN_POSITIVE = 0.001

CATEGORIES = ("Continuous", "Discrete")


def _param(
    name: str,
    display_name: str,
    default: float,
    minimum: float = -math.inf,
    maximum: float = math.inf,
    step: float = 0.1,
    slider: tuple[float, float, float] = (-5.0, 5.0, 0.1),
    description: str = "",
) -> ParameterSpec:
    slider_min, slider_max, slider_step = slider
    return ParameterSpec(
        name=name,
        display_name=display_name,
        default=default,
        minimum=minimum,
        maximum=maximum,
        step=step,
        slider_min=slider_min,
        slider_max=slider_max,
        slider_step=slider_step,
        description=description,
    )


def _location(
    display_name: str = "Location (μ)",
    description: str = "Location parameter",
    slider: tuple[float, float, float] = (-5.0, 5.0, 0.1),
    name: str = "mu",
    default: float = 0.0,
) -> ParameterSpec:
    """Unbounded real parameter."""
    return _param(name, display_name, default, slider=slider, description=description)


def _scale(
    name: str,
    display_name: str,
    description: str = "Scale parameter",
    default: float = 1.0,
    slider: tuple[float, float, float] = (0.1, 3.0, 0.1),
) -> ParameterSpec:
    """Strictly positive parameter (scale, shape, rate)."""
    return _param(
        name, display_name, default, minimum=MIN_POSITIVE, slider=slider, description=description
    )


def _continuous(name, display_name, parameters, pdf, range_estimator, description, common_use):
    return DistributionSpec(
        name=name,
        display_name=display_name,
        kind="continuous",
        category="Continuous",
        parameters=tuple(parameters),
        pdf=pdf,
        range_estimator=range_estimator,
        description=description,
        common_use=common_use,
    )


def _discrete(name, display_name, parameters, pmf, range_estimator, description, common_use):
    return DistributionSpec(
        name=name,
        display_name=display_name,
        kind="discrete",
        category="Discrete",
        parameters=tuple(parameters),
        pdf=pmf,
        range_estimator=range_estimator,
        description=description,
        common_use=common_use,
    )


# ===========================
# Continuous Distributions
# ===========================

_CONTINUOUS = (
    _continuous(
        "normal", "Normal (Gaussian)",
        [
            _location("Mean (μ)", "Center of the distribution"),
            _scale("sigma", "Standard Deviation (σ)", "Spread of the distribution"),
        ],
        continuous.normal_pdf, ranges.normal_range,
        "The normal distribution is symmetric about the mean, with 68% of values "
        "within one standard deviation.",
        "Natural phenomena, measurement errors, Central Limit Theorem",
    ),
    _continuous(
        "beta", "Beta",
        [
            _scale("alpha", "Alpha (α)", "Shape parameter - higher values shift mass toward 1",
                   default=2.0, slider=(0.1, 5.0, 0.1)),
            _scale("beta", "Beta (β)", "Shape parameter - higher values shift mass toward 0",
                   default=2.0, slider=(0.1, 5.0, 0.1)),
        ],
        continuous.beta_pdf, ranges.beta_range,
        "The beta distribution is defined on [0,1] and commonly used for modeling "
        "probabilities and proportions.",
        "Bayesian inference, success rates, proportions",
    ),
    _continuous(
        "gamma", "Gamma",
        [
            _scale("alpha", "Shape (α)",
                   "Controls the shape - higher values create more peaked distributions",
                   default=2.0, slider=(0.1, 5.0, 0.1)),
            _scale("beta", "Rate (β)",
                   "Inverse scale parameter - higher values compress the distribution"),
        ],
        continuous.gamma_pdf, ranges.gamma_range,
        "The gamma distribution is used to model waiting times and has applications "
        "in Bayesian analysis.",
        "Waiting times, reliability analysis, Bayesian priors",
    ),
    _continuous(
        "exponential", "Exponential",
        [
            _scale("lambda", "Rate (λ)",
                   "Average rate of events - higher values mean shorter waiting times"),
        ],
        continuous.exponential_pdf, ranges.exponential_range,
        "The exponential distribution models the time between events in a Poisson process.",
        "Inter-arrival times, survival analysis, reliability",
    ),
    _continuous(
        "uniform", "Uniform",
        [
            _location("Lower Bound (a)", "Minimum possible value", name="a"),
            _location("Upper Bound (b)", "Maximum possible value", name="b", default=1.0),
        ],
        continuous.uniform_pdf, ranges.uniform_range,
        "The uniform distribution assigns equal probability to all values in the interval [a,b].",
        "Random number generation, modeling uncertainty with known bounds",
    ),
    _continuous(
        "lognormal", "Log-Normal",
        [
            _location("Log Mean (μ)", "Mean of the underlying normal distribution",
                      slider=(-2.0, 2.0, 0.1)),
            _scale("sigma", "Log Std Dev (σ)",
                   "Standard deviation of the underlying normal distribution",
                   slider=(0.1, 2.0, 0.1)),
        ],
        continuous.lognormal_pdf, ranges.lognormal_range,
        "The log-normal distribution is used when the logarithm of the variable is "
        "normally distributed.",
        "Stock prices, income distributions, biological measurements",
    ),
    _continuous(
        "chi2", "Chi-Squared",
        [
            _scale("k", "Degrees of Freedom (k)",
                   "Number of independent standard normal variables being squared",
                   slider=(1.0, 10.0, 1.0)),
        ],
        continuous.chi2_pdf, ranges.chi2_range,
        "The chi-squared distribution arises in statistical testing and is the sum of "
        "squares of standard normal variables.",
        "Hypothesis testing, confidence intervals, goodness-of-fit tests",
    ),
    _continuous(
        "student", "Student's t",
        [
            _scale("nu", "Degrees of Freedom (ν)",
                   "Controls tail heaviness - higher values approach normal distribution",
                   slider=(0.5, 10.0, 0.5)),
        ],
        continuous.student_pdf, ranges.student_range,
        "Student's t-distribution is used in hypothesis testing when population standard "
        "deviation is unknown.",
        "Small sample hypothesis testing, confidence intervals",
    ),
    _continuous(
        "cauchy", "Cauchy",
        [
            _location("Location (x₀)", "Location parameter (median)", name="x0"),
            _scale("gamma", "Scale (γ)", "Scale parameter (half-width at half-maximum)"),
        ],
        continuous.cauchy_pdf, ranges.cauchy_range,
        "The Cauchy distribution has heavy tails and undefined mean/variance. Used in "
        "physics and robust statistics.",
        "Robust statistics, physics (Lorentzian profile), Bayesian priors",
    ),
    _continuous(
        "laplace", "Laplace",
        [
            _location(description="Location parameter (median)"),
            _scale("b", "Scale (b)", "Scale parameter (diversity)"),
        ],
        continuous.laplace_pdf, ranges.laplace_range,
        "The Laplace distribution is symmetric with exponential tails. Also known as the "
        "double exponential distribution.",
        "Signal processing, machine learning (L1 regularization), robust statistics",
    ),
    _continuous(
        "logistic", "Logistic",
        [
            _location(description="Location parameter (median)"),
            _scale("s", "Scale (s)"),
        ],
        continuous.logistic_pdf, ranges.logistic_range,
        "The logistic distribution resembles the normal distribution but has heavier tails.",
        "Logistic regression, growth modeling, neural networks",
    ),
    _continuous(
        "gumbel", "Gumbel",
        [
            _location(),
            _scale("beta", "Scale (β)"),
        ],
        continuous.gumbel_pdf, ranges.gumbel_range,
        "The Gumbel distribution is used to model the distribution of maximum values in samples.",
        "Extreme value theory, modeling maximum/minimum values, reliability analysis",
    ),
    _continuous(
        "weibull", "Weibull",
        [
            _scale("alpha", "Shape (α)", "Shape parameter", default=2.0, slider=(0.1, 5.0, 0.1)),
            _scale("beta", "Scale (β)"),
        ],
        continuous.weibull_pdf, ranges.weibull_range,
        "The Weibull distribution is widely used in reliability engineering and survival analysis.",
        "Reliability engineering, survival analysis, weather modeling, material strength",
    ),
    _continuous(
        "pareto", "Pareto",
        [
            _scale("alpha", "Shape (α)", "Shape parameter (tail index)", slider=(0.1, 5.0, 0.1)),
            _scale("m", "Scale (m)", "Scale parameter (minimum value)"),
        ],
        continuous.pareto_pdf, ranges.pareto_range,
        'The Pareto distribution models the "80-20 rule" and power-law phenomena.',
        "Economics (wealth distribution), internet traffic, city populations",
    ),
    _continuous(
        "half_normal", "Half-Normal",
        [_scale("sigma", "Scale (σ)")],
        continuous.half_normal_pdf, ranges.half_normal_range,
        "The half-normal distribution is the positive half of a normal distribution.",
        "Bayesian priors for variance parameters, positive-valued modeling",
    ),
    _continuous(
        "half_cauchy", "Half-Cauchy",
        [_scale("beta", "Scale (β)")],
        continuous.half_cauchy_pdf, ranges.half_cauchy_range,
        "The half-Cauchy distribution is commonly used as a prior for scale parameters in "
        "Bayesian models.",
        "Bayesian priors for scale/variance parameters, hierarchical modeling",
    ),
    _continuous(
        "inverse_gamma", "Inverse Gamma",
        [
            _scale("alpha", "Shape (α)", "Shape parameter", default=2.0, slider=(0.1, 5.0, 0.1)),
            _scale("beta", "Scale (β)"),
        ],
        continuous.inverse_gamma_pdf, ranges.inverse_gamma_range,
        "The inverse gamma distribution is commonly used as a prior for variance parameters.",
        "Bayesian priors for variance parameters, scale modeling",
    ),
    _continuous(
        "triangular", "Triangular",
        [
            _location("Lower (a)", "Lower bound", slider=(-2.0, 2.0, 0.1), name="lower"),
            _location("Mode (c)", "Mode (peak location)", slider=(-1.0, 3.0, 0.1), name="c",
                      default=0.5),
            _location("Upper (b)", "Upper bound", slider=(0.0, 4.0, 0.1), name="upper",
                      default=1.0),
        ],
        continuous.triangular_pdf, ranges.triangular_range,
        "The triangular distribution is often used when limited sample data is available.",
        "Project management, risk analysis, when limited data is available",
    ),
    _continuous(
        "kumaraswamy", "Kumaraswamy",
        [
            _scale("a", "Shape (a)", "First shape parameter", default=2.0, slider=(0.1, 5.0, 0.1)),
            _scale("b", "Shape (b)", "Second shape parameter", default=2.0, slider=(0.1, 5.0, 0.1)),
        ],
        continuous.kumaraswamy_pdf, ranges.kumaraswamy_range,
        "The Kumaraswamy distribution is similar to Beta but with simpler CDF and quantile "
        "functions.",
        "Alternative to Beta distribution, hydrology, economics",
    ),
    _continuous(
        "asymmetric_laplace", "Asymmetric Laplace",
        [
            _location(),
            _scale("b", "Scale (b)"),
            _scale("kappa", "Asymmetry (κ)", "Asymmetry parameter"),
        ],
        continuous.asymmetric_laplace_pdf, ranges.asymmetric_laplace_range,
        "The asymmetric Laplace distribution allows for different rates of exponential decay "
        "on either side.",
        "Quantile regression, asymmetric loss functions, financial modeling",
    ),
    _continuous(
        "skew_normal", "Skew Normal",
        [
            _location(),
            _scale("sigma", "Scale (σ)"),
            _location("Shape (α)", "Skewness parameter", name="alpha"),
        ],
        continuous.skew_normal_pdf, ranges.skew_normal_range,
        "The skew normal distribution extends the normal distribution to allow for non-zero "
        "skewness.",
        "Modeling asymmetric data, finance, natural phenomena with skew",
    ),
    _continuous(
        "half_student_t", "Half Student-t",
        [
            _scale("nu", "Degrees of Freedom (ν)", "Degrees of freedom", default=2.0,
                   slider=(0.5, 10.0, 0.5)),
            _scale("sigma", "Scale (σ)"),
        ],
        continuous.half_student_t_pdf, ranges.half_student_t_range,
        "The half Student-t distribution is the positive half of a Student-t distribution.",
        "Bayesian priors for scale parameters with heavy tails",
    ),
    _continuous(
        "logit_normal", "Logit Normal",
        [
            _location(description="Location parameter of logit", slider=(-3.0, 3.0, 0.1)),
            _scale("tau", "Precision (τ)", "Precision parameter", slider=(0.1, 5.0, 0.1)),
        ],
        continuous.logit_normal_pdf, ranges.logit_normal_range,
        "The logit-normal distribution models variables on (0,1) using the logit "
        "transformation of a normal distribution.",
        "Modeling proportions, probabilities, rates on (0,1)",
    ),
    _continuous(
        "wald", "Wald (Inverse Gaussian)",
        [
            _scale("mu", "Mean (μ)", "Mean parameter"),
            _scale("lam", "Shape (λ)", "Shape parameter", slider=(0.1, 5.0, 0.1)),
        ],
        continuous.wald_pdf, ranges.wald_range,
        "The Wald (inverse Gaussian) distribution is used to model positive random variables.",
        "Modeling first passage times, degradation processes, reliability",
    ),
    _continuous(
        "moyal", "Moyal",
        [
            _location(),
            _scale("sigma", "Scale (σ)"),
        ],
        continuous.moyal_pdf, ranges.moyal_range,
        "The Moyal distribution describes energy loss of fast charged particles through matter.",
        "Particle physics, energy loss distributions, radiation detection",
    ),
    _continuous(
        "ex_gaussian", "Ex-Gaussian",
        [
            _location("Mean (μ)", "Mean of Gaussian component", slider=(-2.0, 2.0, 0.1)),
            _scale("sigma", "Sigma (σ)", "Standard deviation of Gaussian component"),
            _scale("lam", "Rate (λ)", "Rate of exponential component"),
        ],
        continuous.ex_gaussian_pdf, ranges.ex_gaussian_range,
        "The ex-Gaussian distribution is a convolution of normal and exponential distributions.",
        "Psychology (reaction times), neuroscience, reliability analysis",
    ),
    _continuous(
        "von_mises", "Von Mises",
        [
            _param("mu", "Direction (μ)", 0.0, minimum=-math.pi, maximum=math.pi,
                   slider=(-math.pi, math.pi, 0.1), description="Mean direction"),
            _scale("kappa", "Concentration (κ)", "Concentration parameter",
                   slider=(0.1, 5.0, 0.1)),
        ],
        continuous.von_mises_pdf, ranges.von_mises_range,
        "The von Mises distribution is the circular analog of the normal distribution.",
        "Directional statistics, wind directions, biological rhythms",
    ),
    _continuous(
        "rice", "Rice (Rician)",
        [
            _param("nu", "Signal (ν)", 1.0, minimum=0.0, slider=(0.0, 3.0, 0.1),
                   description="Signal parameter"),
            _scale("sigma", "Noise (σ)", "Noise parameter"),
        ],
        continuous.rice_pdf, ranges.rice_range,
        "The Rice distribution describes the magnitude of a complex normal random variable.",
        "Signal processing, MRI imaging, radar, communications",
    ),
    _continuous(
        "truncated_normal", "Truncated Normal",
        [
            _location("Mean (μ)", "Mean of underlying normal", slider=(-3.0, 3.0, 0.1)),
            _scale("sigma", "Sigma (σ)", "Standard deviation of underlying normal"),
            _location("Lower (a)", "Lower truncation point", slider=(-5.0, 0.0, 0.1),
                      name="lower", default=-2.0),
            _location("Upper (b)", "Upper truncation point", slider=(0.0, 5.0, 0.1),
                      name="upper", default=2.0),
        ],
        continuous.truncated_normal_pdf, ranges.truncated_normal_range,
        "The truncated normal distribution is a normal distribution restricted to an interval.",
        "Constrained optimization, bounded variables, quality control",
    ),
)


# ===========================
# Discrete Distributions
# ===========================

_SUCCESS_PROBABILITY = _param(
    "p", "Success Probability (p)", 0.3, minimum=MIN_POSITIVE, maximum=1.0, step=0.001,
    slider=(0.01, 1.0, 0.01), description="Probability of success on each trial",
)

_DISCRETE = (
    _discrete(
        "binomial", "Binomial",
        [
            _param("n", "Number of Trials (n)", 10, minimum=1, step=1, slider=(1, 50, 1),
                   description="Total number of independent trials"),
            _param("p", "Success Probability (p)", 0.5, minimum=0.0, maximum=1.0, step=0.01,
                   slider=(0.0, 1.0, 0.01), description="Probability of success on each trial"),
        ],
        discrete.binomial_pmf, ranges.binomial_range,
        "The binomial distribution models the number of successes in a fixed number of "
        "independent trials.",
        "Quality control, clinical trials, polling, A/B testing",
    ),
    _discrete(
        "poisson", "Poisson",
        [
            _scale("lambda", "Rate (λ)", "Average rate of events per unit time/space",
                   default=3.0, slider=(0.1, 20.0, 0.1)),
        ],
        discrete.poisson_pmf, ranges.poisson_range,
        "The Poisson distribution models the number of events occurring in a fixed interval.",
        "Call center arrivals, defects per unit, website visits, radioactive decay",
    ),
    _discrete(
        "geometric", "Geometric",
        [_SUCCESS_PROBABILITY],
        discrete.geometric_pmf, ranges.geometric_range,
        "The geometric distribution models the number of trials until the first success.",
        "Time to first success, reliability testing, customer acquisition",
    ),
    _discrete(
        "negative_binomial", "Negative Binomial",
        [
            _param("r", "Number of Successes (r)", 5, minimum=1, step=1, slider=(1, 20, 1),
                   description="Number of successes desired"),
            _SUCCESS_PROBABILITY,
        ],
        discrete.negative_binomial_pmf, ranges.negative_binomial_range,
        "The negative binomial distribution models the number of trials until the r-th success.",
        "Reliability engineering, epidemiology, marketing campaigns",
    ),
    _discrete(
        "bernoulli", "Bernoulli",
        [
            _param("p", "Success Probability (p)", 0.5, minimum=0.0, maximum=1.0, step=0.01,
                   slider=(0.0, 1.0, 0.01), description="Probability of success (outcome = 1)"),
        ],
        discrete.bernoulli_pmf, ranges.bernoulli_range,
        "The Bernoulli distribution models a single trial with two possible outcomes "
        "(success/failure).",
        "Binary outcomes, coin flips, yes/no questions, A/B testing",
    ),
    _discrete(
        "discrete_uniform", "Discrete Uniform",
        [
            _param("lower", "Lower Bound (a)", 1, step=1, slider=(0, 10, 1),
                   description="Lower bound (inclusive)"),
            _param("upper", "Upper Bound (b)", 6, step=1, slider=(1, 20, 1),
                   description="Upper bound (inclusive)"),
        ],
        discrete.discrete_uniform_pmf, ranges.discrete_uniform_range,
        "The discrete uniform distribution assigns equal probability to each integer in a range.",
        "Dice rolls, random sampling, uniform random integers",
    ),
    _discrete(
        "hypergeometric", "Hypergeometric",
        [
            _param("N", "Population Size (N)", 50, minimum=1, step=1, slider=(10, 100, 1),
                   description="Total population size"),
            _param("K", "Success States (K)", 20, minimum=0, step=1, slider=(1, 50, 1),
                   description="Number of success states in population"),
            _param("n", "Sample Size (n)", 10, minimum=1, step=1, slider=(1, 30, 1),
                   description="Number of draws (without replacement)"),
        ],
        discrete.hypergeometric_pmf, ranges.hypergeometric_range,
        "The hypergeometric distribution models sampling without replacement from a finite "
        "population.",
        "Quality control, card games, survey sampling, ecology",
    ),
    _discrete(
        "beta_binomial", "Beta-Binomial",
        [
            _param("n", "Number of Trials (n)", 10, minimum=1, step=1, slider=(1, 50, 1),
                   description="Number of trials"),
            _scale("alpha", "Alpha (α)", "Shape parameter alpha", default=2.0,
                   slider=(0.1, 10.0, 0.1)),
            _scale("beta", "Beta (β)", "Shape parameter beta", default=2.0,
                   slider=(0.1, 10.0, 0.1)),
        ],
        discrete.beta_binomial_pmf, ranges.beta_binomial_range,
        "The beta-binomial distribution models overdispersed binomial data with "
        "beta-distributed success probability.",
        "Overdispersed count data, ecological studies, quality control",
    ),
    _discrete(
        "discrete_weibull", "Discrete Weibull",
        [
            _param("q", "Scale (q)", 0.5, minimum=MIN_POSITIVE, maximum=0.999, step=0.01,
                   slider=(0.1, 0.9, 0.01), description="Scale parameter (0 < q < 1)"),
            _param("beta", "Shape (β)", 1.0, minimum=0.1, slider=(0.1, 3.0, 0.1),
                   description="Shape parameter"),
        ],
        discrete.discrete_weibull_pmf, ranges.discrete_weibull_range,
        "The discrete Weibull distribution is the discrete analog of the continuous Weibull "
        "distribution.",
        "Reliability analysis, survival times, discrete failure data",
    ),
)

DISTRIBUTIONS: Mapping[str, DistributionSpec] = MappingProxyType(
    {spec.name: spec for spec in _CONTINUOUS + _DISCRETE}
)


# ===========================
# Lookups
# ===========================


def find_distribution(name: Optional[str]) -> Optional[DistributionSpec]:
    """Return the catalog entry for name, or None when there is none."""
    if name is None:
        return None
    return DISTRIBUTIONS.get(name)


def get_distribution(name: str) -> DistributionSpec:
    """
    Return the catalog entry for name.

    Raises:
        ValueError: If name is not a known distribution
    """
    spec = find_distribution(name)
    if spec is None:
        raise ValueError(f"Unknown distribution: {name!r}")
    return spec


def list_distributions(kind: Optional[DistributionKind] = None) -> list[DistributionSpec]:
    """
    List catalog entries in catalog order, optionally filtered by kind.

    Raises:
        ValueError: If kind is neither "continuous" nor "discrete"
    """
    if kind is not None and kind not in ("continuous", "discrete"):
        raise ValueError(f"kind must be 'continuous' or 'discrete', got {kind!r}")
    return [spec for spec in DISTRIBUTIONS.values() if kind is None or spec.kind == kind]


def distribution_categories() -> dict[str, list[str]]:
    """Map each category label to the identifiers it contains."""
    return {
        category: [spec.name for spec in DISTRIBUTIONS.values() if spec.category == category]
        for category in CATEGORIES
    }


def parameter_defaults(name: str) -> dict[str, float]:
    """Default parameter values for name; empty for unknown distributions."""
    spec = find_distribution(name)
    return spec.defaults() if spec is not None else {}


def resolve_parameters(name: str, params: Optional[Mapping[str, float]] = None) -> dict[str, float]:
    """
    Merge user parameters over the defaults, in the evaluator's call order.

    Args:
        name: Distribution identifier
        params: Partial parameter mapping; missing keys take their defaults

    Returns:
        Complete parameter dictionary ordered like the pdf signature

    Raises:
        ValueError: If the distribution is unknown or params has a key the
            distribution does not take
    """
    spec = get_distribution(name)
    params = dict(params or {})

    unknown = sorted(set(params) - set(spec.parameter_names))
    if unknown:
        raise ValueError(
            f"Unknown parameter(s) {', '.join(unknown)} for {name}; "
            f"expected {', '.join(spec.parameter_names)}"
        )

    resolved = {p.name: float(params.get(p.name, p.default)) for p in spec.parameters}
    log.debug("Resolved %s parameters: %s", name, resolved)
    return resolved


# ===========================
# Evaluation
# ===========================


def evaluate(name: str, x: float, params: Optional[Mapping[str, float]] = None) -> float:
    """
    Evaluate the density (or mass) of a catalog distribution at x.

    Examples:
        >>> evaluate("binomial", 5, {"n": 10, "p": 0.5})
        0.24609375
    """
    spec = get_distribution(name)
    values = resolve_parameters(name, params)
    return spec.pdf(x, *values.values())


def plot_range(name: str, params: Optional[Mapping[str, float]] = None) -> PlotRange:
    """Plotting window for a catalog distribution; missing parameters take their defaults."""
    spec = get_distribution(name)
    return spec.range_estimator(resolve_parameters(name, params))
