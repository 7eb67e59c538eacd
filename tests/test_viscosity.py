"""Tests for the viscosity model and its parameter validation."""
import math

import numpy as np
import pytest

from extrusionviscosity.model.errors import DomainError
from extrusionviscosity.model.viscosity import ModelParameters, compute_viscosity


class TestComputeViscosity:

    def test_reference_value(self, reference_params):
        expected = 1550.0 * math.exp(0.0) * 40.0 ** (0.395 - 1.0)
        assert compute_viscosity(180.0, 40.0, reference_params) == pytest.approx(expected, rel=1e-6)

    def test_temperature_shift(self, reference_params):
        expected = 1550.0 * math.exp(-0.0146 * 10.0) * 40.0 ** (0.395 - 1.0)
        assert compute_viscosity(190.0, 40.0, reference_params) == pytest.approx(expected, rel=1e-9)

    def test_scalar_input_returns_float(self, reference_params):
        assert type(compute_viscosity(180, 40, reference_params)) is float

    def test_array_input_returns_array(self, reference_params):
        result = compute_viscosity(np.array([175.0, 180.0]), 40.0, reference_params)
        assert isinstance(result, np.ndarray)
        assert result.shape == (2,)
        assert result[1] == pytest.approx(compute_viscosity(180.0, 40.0, reference_params))

    def test_non_increasing_in_temperature(self, reference_params):
        temperatures = np.linspace(150.0, 250.0, 201)
        for gamma in (1.0, 30.0, 60.0):
            eta = compute_viscosity(temperatures, gamma, reference_params)
            assert np.all(np.diff(eta) <= 0)

    def test_decreasing_in_shear_rate(self, reference_params):
        shear_rates = np.linspace(0.5, 100.0, 200)
        for t in (175.0, 190.0, 205.0):
            eta = compute_viscosity(t, shear_rates, reference_params)
            assert np.all(np.diff(eta) < 0)

    def test_constant_model(self, constant_params):
        assert compute_viscosity(175.0, 30.0, constant_params) == 1550.0
        assert compute_viscosity(205.0, 60.0, constant_params) == 1550.0

    @pytest.mark.parametrize("shear_rate", [0.0, -1.0, -40.0])
    def test_non_positive_shear_rate(self, reference_params, shear_rate):
        with pytest.raises(DomainError):
            compute_viscosity(180.0, shear_rate, reference_params)

    def test_non_positive_shear_rate_in_array(self, reference_params):
        with pytest.raises(DomainError):
            compute_viscosity(180.0, np.array([30.0, 0.0, 40.0]), reference_params)

    @pytest.mark.parametrize("temperature, shear_rate", [
        (float("nan"), 40.0),
        (float("inf"), 40.0),
        (180.0, float("nan")),
        (180.0, float("inf")),
    ])
    def test_non_finite_input(self, reference_params, temperature, shear_rate):
        with pytest.raises(DomainError):
            compute_viscosity(temperature, shear_rate, reference_params)

    def test_overflow_rejected(self, reference_params):
        with pytest.raises(DomainError):
            compute_viscosity(-1e6, 40.0, reference_params)

    def test_overflow_in_array_rejected(self, reference_params):
        with pytest.raises(DomainError):
            compute_viscosity(np.array([180.0, -1e6]), 40.0, reference_params)

    def test_underflow_to_zero_allowed(self, reference_params):
        assert compute_viscosity(1e6, 40.0, reference_params) == 0.0

    def test_domain_error_is_value_error(self, reference_params):
        with pytest.raises(ValueError):
            compute_viscosity(180.0, 0.0, reference_params)


class TestModelParameters:

    @pytest.mark.parametrize("mu0", [0.0, -1550.0])
    def test_mu0_must_be_positive(self, mu0):
        with pytest.raises(DomainError):
            ModelParameters(mu0=mu0, b=0.0146, reference_temperature=180.0, flow_index=0.395)

    def test_parameters_must_be_finite(self):
        with pytest.raises(DomainError):
            ModelParameters(mu0=1550.0, b=float("nan"), reference_temperature=180.0, flow_index=0.395)
        with pytest.raises(DomainError):
            ModelParameters(mu0=1550.0, b=0.0146, reference_temperature=float("inf"), flow_index=0.395)

    def test_immutable(self, reference_params):
        with pytest.raises(AttributeError):
            reference_params.mu0 = 1.0

    def test_dict_round_trip(self, reference_params):
        assert ModelParameters.from_dict(reference_params.to_dict()) == reference_params
