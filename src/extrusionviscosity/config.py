"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and the
configuration constants of the application.

Why is this file needed?
------------------------
1. Abstraction: model constants, axis bounds and steps, table offsets and
   band thresholds are defined once instead of scattered through the views.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CONFIG_PATH (str): Absolute path to the default configuration file.
    DEFAULT_CONFIG (AppConfig): Built-in reference configuration.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
import math
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from extrusionviscosity.model.errors import ConfigurationError
from extrusionviscosity.model.series import AxisRange
from extrusionviscosity.model.state import OperatingPoint
from extrusionviscosity.model.table import BAND_THRESHOLDS, NEIGHBORHOOD_OFFSETS
from extrusionviscosity.model.viscosity import ModelParameters

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/extrusionviscosity/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Reference calibration of the extrusion material
REFERENCE_MODEL = ModelParameters(
    mu0=1550.0,  # Pa·s^n
    b=0.0146,  # 1/°C
    reference_temperature=180.0,  # °C
    flow_index=0.395,  # -
)


@dataclass(frozen=True)
class AppConfig:
    """
    Everything the views need to sample and classify the model.

    The line charts sample `temperature_axis` and `shear_axis`, whose bounds
    also clamp the sliders and clip the table. The heatmap samples the grid
    axes. The report re-samples the line chart bounds at `export_step`.
    """
    model: ModelParameters = REFERENCE_MODEL
    default_point: OperatingPoint = OperatingPoint(temperature=180.0, shear_rate=40.0)

    temperature_axis: AxisRange = AxisRange(175.0, 205.0, 2.0)
    shear_axis: AxisRange = AxisRange(30.0, 60.0, 2.0)
    grid_temperature_axis: AxisRange = AxisRange(175.0, 205.0, 3.0)
    grid_shear_axis: AxisRange = AxisRange(30.0, 60.0, 3.0)
    export_step: float = 5.0

    table_offsets: tuple[float, ...] = field(default=NEIGHBORHOOD_OFFSETS)
    band_thresholds: tuple[float, ...] = field(default=BAND_THRESHOLDS)

    def __post_init__(self) -> None:
        if not math.isfinite(self.export_step) or self.export_step <= 0:
            raise ConfigurationError(f"Export step must be positive, got {self.export_step!r}.")
        if not self.table_offsets:
            raise ConfigurationError("At least one table offset is required.")
        if len(self.band_thresholds) != 4:
            raise ConfigurationError(f"Expected 4 band thresholds, got {len(self.band_thresholds)}.")
        if any(not 0.0 <= t <= 1.0 for t in self.band_thresholds):
            raise ConfigurationError("Band thresholds must lie within [0, 1].")
        if any(a <= b for a, b in zip(self.band_thresholds, self.band_thresholds[1:])):
            raise ConfigurationError("Band thresholds must be strictly decreasing.")


DEFAULT_CONFIG = AppConfig()

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CONFIG_PATH: str = os.path.join(ASSETS_PATH, "model_default.json")


def _axis_from_dict(data: Dict[str, Any], fallback: AxisRange) -> AxisRange:
    return AxisRange(
        minimum=float(data.get("minimum", fallback.minimum)),
        maximum=float(data.get("maximum", fallback.maximum)),
        step=float(data.get("step", fallback.step)),
    )


def config_from_dict(data: Dict[str, Any]) -> AppConfig:
    """
    Build an AppConfig from a parsed JSON document.
    Missing sections fall back to DEFAULT_CONFIG.

    Raises:
        ConfigurationError: If a present value is malformed or invalid.
    """
    base = DEFAULT_CONFIG
    try:
        model = ModelParameters.from_dict(data["model"]) if "model" in data else base.model

        point_data = data.get("default_point", {})
        default_point = OperatingPoint(
            temperature=float(point_data.get("temperature", base.default_point.temperature)),
            shear_rate=float(point_data.get("shear_rate", base.default_point.shear_rate)),
        )

        axes = data.get("axes", {})
        table = data.get("table", {})

        return AppConfig(
            model=model,
            default_point=default_point,
            temperature_axis=_axis_from_dict(axes.get("temperature", {}), base.temperature_axis),
            shear_axis=_axis_from_dict(axes.get("shear_rate", {}), base.shear_axis),
            grid_temperature_axis=_axis_from_dict(axes.get("grid_temperature", {}), base.grid_temperature_axis),
            grid_shear_axis=_axis_from_dict(axes.get("grid_shear_rate", {}), base.grid_shear_axis),
            export_step=float(data.get("export_step", base.export_step)),
            table_offsets=tuple(float(o) for o in table.get("offsets", base.table_offsets)),
            band_thresholds=tuple(float(t) for t in table.get("band_thresholds", base.band_thresholds)),
        )
    except ConfigurationError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_config(path: Optional[str] = None) -> AppConfig:
    """
    Load the configuration from a JSON file.

    Args:
        path: File to read. Defaults to DEFAULT_CONFIG_PATH.

    Returns:
        The parsed configuration, or DEFAULT_CONFIG if the file does not exist.

    Raises:
        ConfigurationError: If the file cannot be read or decoded, or holds
            invalid values.
    """
    filepath = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(filepath):
        logger.warning(f"Configuration file not found at {filepath}, using built-in defaults.")
        return DEFAULT_CONFIG

    try:
        with open(filepath, mode='r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read configuration file '{filepath}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{filepath}' must contain a JSON object.")

    config = config_from_dict(data)
    logger.info(f"Configuration loaded from: {filepath}")
    return config
