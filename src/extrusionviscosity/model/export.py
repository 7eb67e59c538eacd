"""
Report Export
=============
Serializes the current operating point, the model constants and both
viscosity sweeps into a comma-separated text report.
"""
from __future__ import annotations

import csv
import io
import logging
from typing import TYPE_CHECKING

from extrusionviscosity.model.series import Series1D, generate_shear_series, generate_temperature_series
from extrusionviscosity.model.viscosity import ModelParameters, compute_viscosity

if TYPE_CHECKING:
    from extrusionviscosity.config import AppConfig
    from extrusionviscosity.model.state import OperatingPoint

logger = logging.getLogger(__name__)

REPORT_TITLE = "Data export - extrusion process study"
DEFAULT_EXPORT_FILENAME = "extrusion_data.csv"


def format_number(value: float) -> str:
    """180.0 -> '180', 0.0146 -> '0.0146'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _viscosity_text(value: float) -> str:
    return f"{value:.2f}"


def format_report(
    point: OperatingPoint,
    params: ModelParameters,
    temperature_series: Series1D,
    shear_series: Series1D
) -> str:
    """
    Build the export report.

    Args:
        point: Current operating point.
        params: Model constants.
        temperature_series: Viscosity vs. temperature at the current shear rate.
        shear_series: Viscosity vs. shear rate at the current temperature.

    Returns:
        The report text, lines separated by '\\n'.
    """
    viscosity = compute_viscosity(point.temperature, point.shear_rate, params)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow([REPORT_TITLE])
    writer.writerow([])

    writer.writerow(["Current parameters:"])
    writer.writerow(["Temperature (°C)", format_number(point.temperature)])
    writer.writerow(["Shear rate (1/s)", format_number(point.shear_rate)])
    writer.writerow(["Viscosity (Pa·s)", _viscosity_text(viscosity)])
    writer.writerow([])

    writer.writerow(["Model parameters:"])
    writer.writerow(["mu0 (Pa·s^n)", format_number(params.mu0)])
    writer.writerow(["b (1/°C)", format_number(params.b)])
    writer.writerow(["T0 (°C)", format_number(params.reference_temperature)])
    writer.writerow(["n", format_number(params.flow_index)])
    writer.writerow([])

    writer.writerow([f"Viscosity vs. temperature (shear rate={format_number(temperature_series.fixed_value)}):"])
    writer.writerow(["T (°C)", "eta (Pa·s)"])
    for t, eta in temperature_series.points():
        writer.writerow([format_number(t), _viscosity_text(eta)])
    writer.writerow([])

    writer.writerow([f"Viscosity vs. shear rate (T={format_number(shear_series.fixed_value)}):"])
    writer.writerow(["gamma (1/s)", "eta (Pa·s)"])
    for gamma, eta in shear_series.points():
        writer.writerow([format_number(gamma), _viscosity_text(eta)])

    return buffer.getvalue()


def build_report(point: OperatingPoint, params: ModelParameters, config: AppConfig) -> str:
    """Generate both sweeps at the export step and format the report."""
    t_axis = config.temperature_axis.with_step(config.export_step)
    g_axis = config.shear_axis.with_step(config.export_step)

    temperature_series = generate_temperature_series(
        point.shear_rate, t_axis.minimum, t_axis.maximum, t_axis.step, params
    )
    shear_series = generate_shear_series(
        point.temperature, g_axis.minimum, g_axis.maximum, g_axis.step, params
    )
    logger.debug(
        f"Report sweeps: {len(temperature_series)} temperature rows, {len(shear_series)} shear rows"
    )
    return format_report(point, params, temperature_series, shear_series)
