"""
Data types and structures for distribution evaluation.

This module defines dataclasses and types used throughout the toolkit
for representing plotting windows, distribution metadata, sampled plot
data and diagnostic results.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping

import pandas as pd

DistributionKind = Literal["continuous", "discrete"]
PlotType = Literal["line", "bar"]

DensityFunction = Callable[..., float]


@dataclass(frozen=True)
class PlotRange:
    """
    Immutable plotting window for a distribution.

    Attributes:
        min: Left edge of the window
        max: Right edge of the window

    The window is descriptive only; evaluators never restrict their domain
    to it.
    """
    min: float
    max: float

    def __post_init__(self) -> None:
        """Validate the window is finite and non-empty."""
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError(f"Plot range must be finite, got ({self.min}, {self.max})")
        if not self.min < self.max:
            raise ValueError(f"Plot range must satisfy min < max, got ({self.min}, {self.max})")

    @property
    def width(self) -> float:
        return self.max - self.min

    def as_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)


RangeEstimator = Callable[[Mapping[str, float]], PlotRange]


@dataclass(frozen=True)
class ParameterSpec:
    """
    Metadata for one distribution parameter.

    Attributes:
        name: Keyword used in parameter mappings (e.g. "sigma")
        display_name: Human readable label (e.g. "Standard Deviation (σ)")
        default: Value used when the parameter is omitted
        minimum: Smallest admissible value
        maximum: Largest admissible value
        step: Input granularity (1 for integer parameters)
        slider_min, slider_max, slider_step: Suggested interactive range
        description: One-line explanation of the parameter's effect
    """
    name: str
    display_name: str
    default: float
    minimum: float = -math.inf
    maximum: float = math.inf
    step: float = 0.1
    slider_min: float = -5.0
    slider_max: float = 5.0
    slider_step: float = 0.1
    description: str = ""

    def __post_init__(self) -> None:
        """Validate bounds, default and step sizes."""
        if self.minimum > self.maximum:
            raise ValueError(
                f"Parameter '{self.name}': minimum {self.minimum} exceeds maximum {self.maximum}"
            )
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(
                f"Parameter '{self.name}': default {self.default} outside "
                f"[{self.minimum}, {self.maximum}]"
            )
        if self.step <= 0 or self.slider_step <= 0:
            raise ValueError(f"Parameter '{self.name}': step sizes must be positive")
        if self.slider_min > self.slider_max:
            raise ValueError(f"Parameter '{self.name}': slider range is inverted")

    @property
    def is_integer(self) -> bool:
        return float(self.step).is_integer()


@dataclass(frozen=True)
class DistributionSpec:
    """
    Catalog entry tying a distribution's metadata to its numeric core.

    Attributes:
        name: Identifier used for lookups (e.g. "negative_binomial")
        display_name: Human readable name
        kind: "continuous" or "discrete"
        category: Grouping label shown to users
        parameters: Ordered parameter metadata; order matches the pdf signature
        pdf: Evaluator called as pdf(x, *parameter values)
        range_estimator: Maps a parameter mapping to a PlotRange
        description: What the distribution models
        common_use: Typical applications
    """
    name: str
    display_name: str
    kind: DistributionKind
    category: str
    parameters: tuple[ParameterSpec, ...]
    pdf: DensityFunction
    range_estimator: RangeEstimator
    description: str = ""
    common_use: str = ""

    @property
    def plot_type(self) -> PlotType:
        return "bar" if self.kind == "discrete" else "line"

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    def defaults(self) -> dict[str, float]:
        return {p.name: p.default for p in self.parameters}


@dataclass(frozen=True)
class PlotData:
    """
    Density samples ready to hand to a renderer.

    Attributes:
        name: Distribution identifier
        display_name: Human readable name
        kind: "continuous" or "discrete"
        x: Evaluation points
        y: Density / mass at each point, with non-finite values replaced by 0
        parameters: Effective parameters used for sampling
        replaced: Number of samples that were non-finite before replacement
    """
    name: str
    display_name: str
    kind: DistributionKind
    x: tuple[float, ...]
    y: tuple[float, ...]
    parameters: dict[str, float] = field(default_factory=dict)
    replaced: int = 0

    @property
    def plot_type(self) -> PlotType:
        return "bar" if self.kind == "discrete" else "line"

    def to_frame(self) -> pd.DataFrame:
        """Return the samples as a two-column DataFrame (x, density)."""
        return pd.DataFrame({"x": self.x, "density": self.y})


@dataclass
class DiagnosticCheck:
    """
    Result from a distribution diagnostic.

    Attributes:
        is_valid: Whether the distribution passed the check
        violations: List of specific violations detected
        details: Dictionary with the measured quantities
    """
    is_valid: bool
    violations: list[str]
    details: dict[str, float]
