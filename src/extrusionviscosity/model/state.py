"""
Session State (Data Model)
==========================
Holds the current operating point of the running application and derives
everything the views draw from it.

Why is this file needed?
------------------------
1. State Management: the slider values live here, not in the widgets, so
   the core never touches presentation objects.
2. Recompute on change: every change produces a fresh, immutable Snapshot;
   nothing is cached between changes.

Classes:
    OperatingPoint: Temperature and shear rate selected by the user.
    Snapshot: Everything derived from one operating point.
    SessionState: The mutable container the application owns.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, TYPE_CHECKING

from extrusionviscosity.model.colors import ColorRGBA, colors_for_values
from extrusionviscosity.model.series import (
    AxisRange, Grid2D, Series1D, generate_grid, generate_shear_series, generate_temperature_series
)
from extrusionviscosity.model.table import TableRow, build_neighborhood_table
from extrusionviscosity.model.viscosity import compute_viscosity

if TYPE_CHECKING:
    from extrusionviscosity.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatingPoint:
    temperature: float  # °C
    shear_rate: float  # 1/s

    def clamped(self, temperature_axis: AxisRange, shear_axis: AxisRange) -> OperatingPoint:
        return OperatingPoint(
            temperature=temperature_axis.clamp(self.temperature),
            shear_rate=shear_axis.clamp(self.shear_rate),
        )


@dataclass(frozen=True)
class Snapshot:
    point: OperatingPoint
    viscosity: float
    temperature_series: Series1D
    shear_series: Series1D
    grid: Grid2D
    grid_colors: List[ColorRGBA]
    table: List[TableRow]


def compute_snapshot(point: OperatingPoint, config: AppConfig) -> Snapshot:
    """Derive charts, heatmap and table data for one operating point."""
    params = config.model
    t_axis = config.temperature_axis
    g_axis = config.shear_axis
    grid_t = config.grid_temperature_axis
    grid_g = config.grid_shear_axis

    grid = generate_grid(
        grid_t.minimum, grid_t.maximum, grid_t.step,
        grid_g.minimum, grid_g.maximum, grid_g.step,
        params
    )

    return Snapshot(
        point=point,
        viscosity=compute_viscosity(point.temperature, point.shear_rate, params),
        temperature_series=generate_temperature_series(
            point.shear_rate, t_axis.minimum, t_axis.maximum, t_axis.step, params,
            current=point.temperature
        ),
        shear_series=generate_shear_series(
            point.temperature, g_axis.minimum, g_axis.maximum, g_axis.step, params,
            current=point.shear_rate
        ),
        grid=grid,
        grid_colors=colors_for_values(grid.viscosities),
        table=build_neighborhood_table(
            point.temperature, point.shear_rate,
            t_axis.bounds, g_axis.bounds, params,
            offsets=config.table_offsets,
            thresholds=config.band_thresholds,
        ),
    )


@dataclass
class SessionState:
    """
    The operating point of the open session.
    Pass this instance to the Store; views read snapshots, never this object.
    """
    config: AppConfig
    point: OperatingPoint = field(init=False)

    def __post_init__(self) -> None:
        self.point = self._clamp(self.config.default_point)

    def _clamp(self, point: OperatingPoint) -> OperatingPoint:
        return point.clamped(self.config.temperature_axis, self.config.shear_axis)

    def set_temperature(self, temperature: float) -> OperatingPoint:
        self.point = self._clamp(OperatingPoint(float(temperature), self.point.shear_rate))
        return self.point

    def set_shear_rate(self, shear_rate: float) -> OperatingPoint:
        self.point = self._clamp(OperatingPoint(self.point.temperature, float(shear_rate)))
        return self.point

    def reset(self) -> OperatingPoint:
        """Return to the default operating point."""
        self.point = self._clamp(self.config.default_point)
        logger.info(f"Session reset to T={self.point.temperature}, gamma={self.point.shear_rate}.")
        return self.point

    def snapshot(self) -> Snapshot:
        return compute_snapshot(self.point, self.config)
