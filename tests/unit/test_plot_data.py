"""
Unit tests for sampling densities into plot data.
"""

import math

import pandas as pd
import pytest

from distviz.catalog.plot_data import sample_plot_data, support_points
from distviz.utils.constants import DEFAULT_NUM_POINTS
from distviz.utils.types import PlotRange


# ===========================
# Support Points
# ===========================


def test_continuous_points_include_both_edges():
    points = support_points("continuous", PlotRange(0.0, 1.0), 4)
    assert points == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_discrete_points_are_integers_inside_window():
    assert support_points("discrete", PlotRange(0.5, 3.7), DEFAULT_NUM_POINTS) == [1.0, 2.0, 3.0]


def test_discrete_points_start_at_zero():
    assert support_points("discrete", PlotRange(-3.0, 2.0), DEFAULT_NUM_POINTS) == [0.0, 1.0, 2.0]


def test_discrete_window_without_integers_is_empty():
    assert support_points("discrete", PlotRange(0.2, 0.8), DEFAULT_NUM_POINTS) == []


# ===========================
# Sampling
# ===========================


def test_normal_samples(standard_normal_params):
    data = sample_plot_data("normal", standard_normal_params)
    assert data.plot_type == "line"
    assert len(data.x) == DEFAULT_NUM_POINTS + 1
    assert data.x[0] == pytest.approx(-4.0)
    assert data.x[-1] == pytest.approx(4.0)
    assert max(data.y) == pytest.approx(0.3989423, abs=1e-6)
    assert data.replaced == 0


def test_binomial_samples():
    data = sample_plot_data("binomial", {"n": 4, "p": 0.5})
    assert data.plot_type == "bar"
    assert data.x == (0.0, 1.0, 2.0, 3.0, 4.0)
    assert data.y == pytest.approx((0.0625, 0.25, 0.375, 0.25, 0.0625))
    assert math.fsum(data.y) == pytest.approx(1.0)


def test_number_of_points_is_configurable():
    data = sample_plot_data("gamma", num_points=50)
    assert len(data.x) == 51


def test_params_none_uses_defaults():
    assert sample_plot_data("poisson", None).y == sample_plot_data("poisson", {}).y


def test_effective_parameters_are_recorded():
    data = sample_plot_data("beta", {"alpha": 3.0})
    assert data.parameters == {"alpha": 3.0, "beta": 2.0}


def test_singular_endpoints_are_replaced_by_zero():
    data = sample_plot_data("beta", {"alpha": 0.5, "beta": 0.5})
    assert data.replaced == 2
    assert data.y[0] == 0.0
    assert data.y[-1] == 0.0
    assert all(math.isfinite(v) for v in data.y)


def test_nan_parameter_is_replaced_by_zero():
    data = sample_plot_data("normal", {"mu": math.nan}, num_points=10)
    assert data.y == (0.0,) * 11
    assert data.replaced == 11


def test_every_default_sample_is_plottable(distribution):
    data = sample_plot_data(distribution.name)
    assert len(data.x) == len(data.y) > 0
    assert all(math.isfinite(v) and v >= 0 for v in data.y)
    assert max(data.y) > 0


@pytest.mark.parametrize("num_points", [0, -5])
def test_invalid_point_count_raises(num_points):
    with pytest.raises(ValueError, match="num_points"):
        sample_plot_data("normal", num_points=num_points)


def test_unknown_names_raise():
    with pytest.raises(ValueError):
        sample_plot_data("nope")
    with pytest.raises(ValueError):
        sample_plot_data("normal", {"scale": 1.0})


def test_to_frame():
    frame = sample_plot_data("bernoulli", {"p": 0.2}).to_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["x", "density"]
    assert frame["density"].tolist() == pytest.approx([0.8, 0.2])
