"""Pytest configuration and shared fixtures."""
import pytest

from extrusionviscosity.config import DEFAULT_CONFIG
from extrusionviscosity.model.viscosity import ModelParameters


@pytest.fixture
def reference_params():
    """Reference calibration: mu0=1550, b=0.0146, T0=180, n=0.395."""
    return ModelParameters(mu0=1550.0, b=0.0146, reference_temperature=180.0, flow_index=0.395)


@pytest.fixture
def constant_params():
    """b=0 and n=1 make the viscosity independent of T and gamma."""
    return ModelParameters(mu0=1550.0, b=0.0, reference_temperature=180.0, flow_index=1.0)


@pytest.fixture
def config():
    return DEFAULT_CONFIG
