"""
Viscosity Model
===============
Power-law viscosity with an exponential temperature shift:

    eta = mu0 * exp(-b * (T - T0)) * gamma ** (n - 1)

Units: eta in Pa·s, T in °C, gamma in 1/s.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
import logging
import math
from typing import Any, Dict, TYPE_CHECKING

import numpy as np

from extrusionviscosity.model.errors import DomainError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelParameters:
    """
    Calibration constants of the rheological model.

    Attributes:
        mu0: Consistency at reference temperature and unit shear rate (Pa·s^n).
        b: Temperature shift constant (1/°C).
        reference_temperature: Reference temperature T0 (°C).
        flow_index: Power-law exponent n (dimensionless).
    """
    mu0: float
    b: float
    reference_temperature: float
    flow_index: float

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if not math.isfinite(value):
                raise DomainError(f"Model parameter '{name}' must be finite, got {value!r}.")
        if self.mu0 <= 0:
            raise DomainError(f"Model parameter 'mu0' must be positive, got {self.mu0!r}.")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ModelParameters:
        return ModelParameters(
            mu0=float(data["mu0"]),
            b=float(data["b"]),
            reference_temperature=float(data["reference_temperature"]),
            flow_index=float(data["flow_index"]),
        )


def compute_viscosity(
    temperature: float | npt.ArrayLike,
    shear_rate: float | npt.ArrayLike,
    params: ModelParameters
) -> float | npt.NDArray[np.float64]:
    """
    Evaluate the viscosity model.

    Args:
        temperature: Temperature in °C (scalar or array).
        shear_rate: Shear rate in 1/s (scalar or array), must be > 0.
        params: Model constants.

    Returns:
        Viscosity in Pa·s. A float for scalar input, an array otherwise.

    Raises:
        DomainError: If any input is non-finite or any shear rate is <= 0.
            Also raised if the result is not finite (overflow).
    """
    t = np.asarray(temperature, dtype=np.float64)
    gamma = np.asarray(shear_rate, dtype=np.float64)

    if not (np.all(np.isfinite(t)) and np.all(np.isfinite(gamma))):
        raise DomainError("Temperature and shear rate must be finite.")
    if np.any(gamma <= 0):
        raise DomainError(f"Shear rate must be positive, got {shear_rate!r}.")

    with np.errstate(over="ignore", invalid="ignore"):
        exp_term = np.exp(-params.b * (t - params.reference_temperature))
        power_term = np.power(gamma, params.flow_index - 1.0)
        eta = params.mu0 * exp_term * power_term

    if not np.all(np.isfinite(eta)):
        raise DomainError(
            f"Viscosity overflows for temperature {temperature!r} and shear rate {shear_rate!r}."
        )

    if eta.ndim == 0:
        return float(eta)
    return eta
