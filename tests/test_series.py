"""Tests for stepped sampling, 1-D series and the 2-D grid."""
import numpy as np
import pytest

from extrusionviscosity.model.errors import ConfigurationError, DomainError
from extrusionviscosity.model.series import (
    AxisRange, SweepVariable, generate_grid, generate_shear_series, generate_temperature_series,
    stepped_values,
)
from extrusionviscosity.model.viscosity import compute_viscosity


class TestSteppedValues:

    def test_inclusive_integer_steps(self):
        values = stepped_values(175.0, 205.0, 2.0)
        assert len(values) == 16
        assert values[0] == 175.0
        assert values[-1] == 205.0

    def test_upper_bound_not_on_step(self):
        values = stepped_values(30.0, 60.0, 7.0)
        assert values.tolist() == [30.0, 37.0, 44.0, 51.0, 58.0]

    def test_fractional_step_keeps_last_sample(self):
        values = stepped_values(0.0, 1.0, 0.1)
        assert len(values) == 11
        assert values[-1] == pytest.approx(1.0)

    def test_single_point(self):
        assert stepped_values(180.0, 180.0, 5.0).tolist() == [180.0]

    def test_max_below_min_is_empty(self):
        assert len(stepped_values(205.0, 175.0, 2.0)) == 0

    @pytest.mark.parametrize("step", [0.0, -2.0, float("nan"), float("inf")])
    def test_invalid_step(self, step):
        with pytest.raises(ConfigurationError):
            stepped_values(175.0, 205.0, step)

    def test_non_finite_bounds(self):
        with pytest.raises(ConfigurationError):
            stepped_values(175.0, float("inf"), 2.0)


class TestAxisRange:

    def test_invalid_step_rejected_on_construction(self):
        with pytest.raises(ConfigurationError):
            AxisRange(175.0, 205.0, 0.0)

    def test_clamp(self):
        axis = AxisRange(175.0, 205.0, 2.0)
        assert axis.clamp(100.0) == 175.0
        assert axis.clamp(300.0) == 205.0
        assert axis.clamp(190.0) == 190.0

    def test_with_step(self):
        axis = AxisRange(175.0, 205.0, 2.0).with_step(5.0)
        assert axis.values().tolist() == [175.0, 180.0, 185.0, 190.0, 195.0, 200.0, 205.0]


class TestTemperatureSeries:

    def test_reference_sweep(self, reference_params):
        series = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params)

        assert len(series) == 16
        assert series.values.tolist() == list(np.arange(175.0, 206.0, 2.0))
        assert np.all(np.diff(series.viscosities) < 0)
        assert series.variable == SweepVariable.TEMPERATURE
        assert series.fixed_value == 40.0

    def test_values_match_model(self, reference_params):
        series = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params)
        for t, eta in series.points():
            assert eta == pytest.approx(compute_viscosity(t, 40.0, reference_params), rel=1e-12)

    @pytest.mark.parametrize("current, expected", [
        (175.0, 0),
        (180.0, 3),  # first sample >= 180 is 181
        (181.0, 3),
        (205.0, 15),
        (205.5, None),
        (None, None),
    ])
    def test_current_index(self, reference_params, current, expected):
        series = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params, current=current)
        assert series.current_index == expected

    def test_deterministic(self, reference_params):
        a = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params, current=190.0)
        b = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params, current=190.0)
        assert a == b
        assert list(a.points()) == list(b.points())

    def test_equality_compares_samples(self, reference_params):
        a = generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params, current=190.0)
        assert a != generate_temperature_series(45.0, 175.0, 205.0, 2.0, reference_params, current=190.0)
        assert a != generate_temperature_series(40.0, 175.0, 203.0, 2.0, reference_params, current=190.0)
        assert a != generate_temperature_series(40.0, 175.0, 205.0, 2.0, reference_params, current=200.0)

    def test_empty_when_max_below_min(self, reference_params):
        series = generate_temperature_series(40.0, 205.0, 175.0, 2.0, reference_params, current=180.0)
        assert len(series) == 0
        assert series.current_index is None

    def test_zero_step(self, reference_params):
        with pytest.raises(ConfigurationError):
            generate_temperature_series(40.0, 175.0, 205.0, 0.0, reference_params)

    def test_invalid_shear_rate(self, reference_params):
        with pytest.raises(DomainError):
            generate_temperature_series(0.0, 175.0, 205.0, 2.0, reference_params)


class TestShearSeries:

    def test_reference_sweep(self, reference_params):
        series = generate_shear_series(180.0, 30.0, 60.0, 2.0, reference_params, current=40.0)

        assert len(series) == 16
        assert series.values[0] == 30.0
        assert series.values[-1] == 60.0
        assert np.all(np.diff(series.viscosities) < 0)
        assert series.variable == SweepVariable.SHEAR_RATE
        assert series.fixed_value == 180.0
        assert series.current_index == 5

    @pytest.mark.parametrize("current, expected", [
        (30.0, 0),
        (41.0, 6),
        (60.0, 15),
        (61.0, None),
    ])
    def test_current_index(self, reference_params, current, expected):
        series = generate_shear_series(180.0, 30.0, 60.0, 2.0, reference_params, current=current)
        assert series.current_index == expected

    def test_empty_when_max_below_min(self, reference_params):
        series = generate_shear_series(180.0, 60.0, 30.0, 2.0, reference_params, current=40.0)
        assert len(series) == 0
        assert series.current_index is None

    def test_deterministic(self, reference_params):
        a = generate_shear_series(180.0, 30.0, 60.0, 2.0, reference_params, current=40.0)
        b = generate_shear_series(180.0, 30.0, 60.0, 2.0, reference_params, current=40.0)
        assert a == b

    def test_non_positive_shear_in_range(self, reference_params):
        with pytest.raises(DomainError):
            generate_shear_series(180.0, 0.0, 60.0, 2.0, reference_params)


class TestGrid:

    def test_reference_grid(self, reference_params):
        grid = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        assert len(grid) == 11 * 11

    def test_temperature_major_order(self, reference_params):
        grid = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        points = list(grid.points())

        assert points[0][:2] == (175.0, 30.0)
        assert points[1][:2] == (175.0, 33.0)
        assert points[10][:2] == (175.0, 60.0)
        assert points[11][:2] == (178.0, 30.0)
        assert points[-1][:2] == (205.0, 60.0)

    def test_values_match_model(self, reference_params):
        grid = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        for t, gamma, eta in grid.points():
            assert eta == pytest.approx(compute_viscosity(t, gamma, reference_params), rel=1e-12)

    def test_value_range(self, reference_params):
        grid = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        lo, hi = grid.value_range()
        assert hi == pytest.approx(compute_viscosity(175.0, 30.0, reference_params))
        assert lo == pytest.approx(compute_viscosity(205.0, 60.0, reference_params))

    def test_empty_axis_gives_empty_grid(self, reference_params):
        grid = generate_grid(175.0, 205.0, 3.0, 60.0, 30.0, 3.0, reference_params)
        assert len(grid) == 0
        with pytest.raises(ValueError):
            grid.value_range()

    def test_deterministic(self, reference_params):
        a = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        b = generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, 3.0, reference_params)
        assert a == b
        assert a != generate_grid(175.0, 205.0, 5.0, 30.0, 60.0, 3.0, reference_params)

    def test_invalid_step(self, reference_params):
        with pytest.raises(ConfigurationError):
            generate_grid(175.0, 205.0, 3.0, 30.0, 60.0, -3.0, reference_params)
