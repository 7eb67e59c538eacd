"""
Series Generation
=================
Sampled viscosity curves for the line charts and the heatmap.

Classes:
    AxisRange: Inclusive sampling range of one variable.
    Series1D: Viscosity along one variable with the other held fixed.
    Grid2D: Viscosity over a temperature × shear rate lattice.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
import math
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

from extrusionviscosity.model.errors import ConfigurationError
from extrusionviscosity.model.viscosity import ModelParameters, compute_viscosity

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Relative slack on the inclusive upper bound, absorbs float error of non-integer steps
_STEP_TOLERANCE = 1e-9


class SweepVariable(StrEnum):
    TEMPERATURE = "temperature"
    SHEAR_RATE = "shear_rate"


def stepped_values(minimum: float, maximum: float, step: float) -> npt.NDArray[np.float64]:
    """
    Values from `minimum` to `maximum` inclusive, spaced by `step`.

    Returns an empty array if `maximum < minimum`.

    Raises:
        ConfigurationError: If the step is not a positive finite number or a
            bound is not finite.
    """
    if not (math.isfinite(minimum) and math.isfinite(maximum)):
        raise ConfigurationError(f"Sampling bounds must be finite, got [{minimum}, {maximum}].")
    if not math.isfinite(step) or step <= 0:
        raise ConfigurationError(f"Sampling step must be positive, got {step!r}.")

    if maximum < minimum:
        return np.empty(0, dtype=np.float64)

    count = int(math.floor((maximum - minimum) / step + _STEP_TOLERANCE)) + 1
    return minimum + step * np.arange(count, dtype=np.float64)


@dataclass(frozen=True)
class AxisRange:
    """Inclusive sampling range [minimum, maximum] with a fixed step."""
    minimum: float
    maximum: float
    step: float

    def __post_init__(self) -> None:
        stepped_values(self.minimum, self.maximum, self.step)

    @property
    def bounds(self) -> tuple[float, float]:
        return self.minimum, self.maximum

    def values(self) -> npt.NDArray[np.float64]:
        return stepped_values(self.minimum, self.maximum, self.step)

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)

    def with_step(self, step: float) -> AxisRange:
        return AxisRange(self.minimum, self.maximum, step)


@dataclass(frozen=True, eq=False)
class Series1D:
    """
    Viscosity sampled along one variable.

    `values` holds the swept variable, `viscosities` the model output at each
    sample, and `fixed_value` the value of the other variable. `current_index`
    marks the sample to highlight, or None if the current value lies past the
    last sample.
    """
    variable: SweepVariable
    fixed_value: float
    values: npt.NDArray[np.float64] = field(repr=False)
    viscosities: npt.NDArray[np.float64] = field(repr=False)
    current_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series1D):
            return NotImplemented
        return bool(
            self.variable == other.variable
            and self.fixed_value == other.fixed_value
            and self.current_index == other.current_index
            and np.array_equal(self.values, other.values)
            and np.array_equal(self.viscosities, other.viscosities)
        )

    def points(self) -> Iterator[tuple[float, float]]:
        for x, eta in zip(self.values, self.viscosities):
            yield float(x), float(eta)


@dataclass(frozen=True, eq=False)
class Grid2D:
    """
    Viscosity over the cross product of two sample sequences.

    Points are stored flat, temperature in the outer loop and shear rate in
    the inner loop.
    """
    temperatures: npt.NDArray[np.float64] = field(repr=False)
    shear_rates: npt.NDArray[np.float64] = field(repr=False)
    viscosities: npt.NDArray[np.float64] = field(repr=False)

    def __len__(self) -> int:
        return len(self.viscosities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return bool(
            np.array_equal(self.temperatures, other.temperatures)
            and np.array_equal(self.shear_rates, other.shear_rates)
            and np.array_equal(self.viscosities, other.viscosities)
        )

    def points(self) -> Iterator[tuple[float, float, float]]:
        for t, gamma, eta in zip(self.temperatures, self.shear_rates, self.viscosities):
            yield float(t), float(gamma), float(eta)

    def value_range(self) -> tuple[float, float]:
        if len(self) == 0:
            raise ValueError("Empty grid has no value range.")
        return float(self.viscosities.min()), float(self.viscosities.max())


def _current_index(values: npt.NDArray[np.float64], current: Optional[float]) -> Optional[int]:
    if current is None:
        return None
    hits = np.flatnonzero(values >= current)
    return int(hits[0]) if hits.size else None


def generate_temperature_series(
    fixed_shear_rate: float,
    t_min: float,
    t_max: float,
    t_step: float,
    params: ModelParameters,
    current: Optional[float] = None
) -> Series1D:
    """
    Viscosity vs. temperature at a fixed shear rate.

    Args:
        fixed_shear_rate: Shear rate held constant (1/s).
        t_min, t_max, t_step: Inclusive temperature sampling (°C).
        params: Model constants.
        current: Current temperature to locate in the series (optional).
    """
    temperatures = stepped_values(t_min, t_max, t_step)
    viscosities = np.asarray(compute_viscosity(temperatures, fixed_shear_rate, params), dtype=np.float64)
    logger.debug(f"Temperature series: {len(temperatures)} points at shear rate {fixed_shear_rate}")
    return Series1D(
        variable=SweepVariable.TEMPERATURE,
        fixed_value=float(fixed_shear_rate),
        values=temperatures,
        viscosities=viscosities,
        current_index=_current_index(temperatures, current),
    )


def generate_shear_series(
    fixed_temperature: float,
    g_min: float,
    g_max: float,
    g_step: float,
    params: ModelParameters,
    current: Optional[float] = None
) -> Series1D:
    """
    Viscosity vs. shear rate at a fixed temperature.

    Args:
        fixed_temperature: Temperature held constant (°C).
        g_min, g_max, g_step: Inclusive shear rate sampling (1/s).
        params: Model constants.
        current: Current shear rate to locate in the series (optional).
    """
    shear_rates = stepped_values(g_min, g_max, g_step)
    viscosities = np.asarray(compute_viscosity(fixed_temperature, shear_rates, params), dtype=np.float64)
    logger.debug(f"Shear series: {len(shear_rates)} points at temperature {fixed_temperature}")
    return Series1D(
        variable=SweepVariable.SHEAR_RATE,
        fixed_value=float(fixed_temperature),
        values=shear_rates,
        viscosities=viscosities,
        current_index=_current_index(shear_rates, current),
    )


def generate_grid(
    t_min: float,
    t_max: float,
    t_step: float,
    g_min: float,
    g_max: float,
    g_step: float,
    params: ModelParameters
) -> Grid2D:
    """Viscosity over the full temperature × shear rate lattice."""
    temperatures = stepped_values(t_min, t_max, t_step)
    shear_rates = stepped_values(g_min, g_max, g_step)

    # indexing="ij" keeps temperature as the outer loop after ravel()
    t_grid, g_grid = np.meshgrid(temperatures, shear_rates, indexing="ij")
    t_flat = t_grid.ravel()
    g_flat = g_grid.ravel()
    viscosities = np.asarray(compute_viscosity(t_flat, g_flat, params), dtype=np.float64)

    logger.debug(f"Grid: {len(temperatures)} x {len(shear_rates)} points")
    return Grid2D(temperatures=t_flat, shear_rates=g_flat, viscosities=viscosities)
