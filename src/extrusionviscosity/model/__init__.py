"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the plotting (pyqtgraph).
It deals with the viscosity model, sampled series, the table and the report.
"""
from extrusionviscosity.model.errors import ConfigurationError, DomainError, ViscosityError
from extrusionviscosity.model.viscosity import ModelParameters, compute_viscosity
from extrusionviscosity.model.series import (
    AxisRange, Grid2D, Series1D, SweepVariable,
    generate_grid, generate_shear_series, generate_temperature_series, stepped_values
)
from extrusionviscosity.model.colors import ColorRGBA, color_for, colors_for_values, normalize
from extrusionviscosity.model.table import TableRow, ViscosityBand, build_neighborhood_table, classify_band
from extrusionviscosity.model.export import build_report, format_report
from extrusionviscosity.model.state import OperatingPoint, SessionState, Snapshot, compute_snapshot
