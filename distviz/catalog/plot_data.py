"""
Sample catalog densities into renderer-ready point sets.

Continuous distributions are sampled on an evenly spaced grid over the
distribution's plotting window; discrete distributions at every integer in
the window. Non-finite samples (boundary singularities, nan from malformed
parameters) are replaced by 0 so that a renderer never has to filter them.
"""

import logging
import math
from typing import Mapping, Optional

import numpy as np

from distviz.catalog.registry import get_distribution, resolve_parameters
from distviz.utils.constants import DEFAULT_NUM_POINTS
from distviz.utils.types import DistributionKind, PlotData, PlotRange

log = logging.getLogger(__name__)


def support_points(kind: DistributionKind, window: PlotRange, num_points: int) -> list[float]:
    """
    Evaluation points for a plotting window.

    Args:
        kind: "continuous" or "discrete"
        window: Plotting window
        num_points: Number of intervals for continuous windows

    Returns:
        num_points + 1 evenly spaced points including both edges for
        continuous windows; the integers from max(0, ⌈min⌉) to ⌊max⌋ for
        discrete windows (possibly empty)
    """
    if kind == "discrete":
        start = max(0, math.ceil(window.min))
        stop = math.floor(window.max)
        return np.arange(start, stop + 1, dtype=float).tolist()
    return np.linspace(window.min, window.max, num_points + 1).tolist()


def sample_plot_data(
    name: str,
    params: Optional[Mapping[str, float]] = None,
    num_points: int = DEFAULT_NUM_POINTS,
) -> PlotData:
    """
    Evaluate a distribution over its plotting window.

    Args:
        name: Distribution identifier
        params: Parameter values; missing keys (or None) take the catalog defaults
        num_points: Number of intervals for continuous distributions

    Returns:
        PlotData with x and y of equal length and every y finite

    Raises:
        ValueError: If the distribution or a parameter key is unknown, or
            num_points < 1

    Examples:
        >>> data = sample_plot_data("binomial", {"n": 4, "p": 0.5})
        >>> data.x
        (0.0, 1.0, 2.0, 3.0, 4.0)
        >>> data.plot_type
        'bar'
    """
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got {num_points}")

    spec = get_distribution(name)
    values = resolve_parameters(name, params)
    window = spec.range_estimator(values)
    xs = support_points(spec.kind, window, num_points)

    ys = []
    replaced = 0
    for point in xs:
        density = spec.pdf(point, *values.values())
        if not math.isfinite(density):
            density = 0.0
            replaced += 1
        ys.append(density)

    if replaced:
        log.debug("Replaced %d non-finite %s samples with 0", replaced, name)
    log.debug("Sampled %s on [%g, %g] at %d points", name, window.min, window.max, len(xs))

    return PlotData(
        name=spec.name,
        display_name=spec.display_name,
        kind=spec.kind,
        x=tuple(xs),
        y=tuple(ys),
        parameters=values,
        replaced=replaced,
    )
