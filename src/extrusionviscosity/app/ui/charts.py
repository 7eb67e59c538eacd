"""pyqtgraph charts of the sampled viscosity data."""
from __future__ import annotations

import logging

import numpy as np
import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtWidgets import QWidget

from extrusionviscosity.model.series import AxisRange, Series1D
from extrusionviscosity.model.state import Snapshot

logger = logging.getLogger(__name__)

CURRENT_COLOR = '#e74c3c'


def _style_plot(widget: pg.PlotWidget, title: str, bottom: str, left: str) -> None:
    widget.setBackground('w')
    widget.showGrid(x=True, y=True, alpha=0.3)
    widget.setTitle(title, color='black', size='12pt')
    widget.setLabel('bottom', bottom, color='black')
    widget.setLabel('left', left, color='black')
    for side in ('bottom', 'left'):
        widget.getAxis(side).setPen('k')
        widget.getAxis(side).setTextPen('k')
    widget.addLegend(offset=(10, 10))


class SeriesChart(pg.PlotWidget):
    """Line chart of one viscosity sweep with the current value highlighted."""

    def __init__(self, title: str, x_label: str, color: str, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        _style_plot(self, title, x_label, "Viscosity (Pa·s)")

        self.curve = self.plot(
            [], [],
            pen=pg.mkPen(color=color, width=3),
            name="Viscosity (Pa·s)",
            symbol='o',
            symbolSize=6,
            symbolBrush=color,
            symbolPen=None,
        )
        self.marker = pg.ScatterPlotItem(
            size=14, brush=pg.mkBrush(CURRENT_COLOR), pen=pg.mkPen('w', width=2), name="Current value"
        )
        self.addItem(self.marker)

    def show_series(self, series: Series1D, current_viscosity: float) -> None:
        self.curve.setData(series.values, series.viscosities)

        if series.current_index is None:
            self.marker.setData([], [])
        else:
            x = float(series.values[series.current_index])
            self.marker.setData([x], [current_viscosity])


class HeatmapChart(pg.PlotWidget):
    """Bubble heatmap of the viscosity grid with the current operating point."""

    BUBBLE_SIZE = 30
    MARKER_SIZE = 24

    def __init__(self, temperature_axis: AxisRange, shear_axis: AxisRange, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        _style_plot(self, "Viscosity map", "Temperature (°C)", "Shear rate (1/s)")

        self.bubbles = pg.ScatterPlotItem(
            pen=None,
            hoverable=True,
            tip=lambda x, y, data: f"T: {x:g} °C, γ: {y:g} 1/s, η: {data:.2f} Pa·s",
            name="Viscosity",
        )
        self.marker = pg.ScatterPlotItem(
            size=self.MARKER_SIZE, brush=pg.mkBrush(CURRENT_COLOR), pen=pg.mkPen('w', width=3),
            name="Current position",
        )
        self.addItem(self.bubbles)
        self.addItem(self.marker)

        margin_t = temperature_axis.step
        margin_g = shear_axis.step
        self.setXRange(temperature_axis.minimum - margin_t, temperature_axis.maximum + margin_t, padding=0)
        self.setYRange(shear_axis.minimum - margin_g, shear_axis.maximum + margin_g, padding=0)

    def show_snapshot(self, snapshot: Snapshot) -> None:
        grid = snapshot.grid
        brushes = [pg.mkBrush(*color.to_tuple()) for color in snapshot.grid_colors]
        self.bubbles.setData(
            x=grid.temperatures,
            y=grid.shear_rates,
            size=self.BUBBLE_SIZE,
            brush=brushes,
            data=np.asarray(grid.viscosities),
        )
        self.marker.setData([snapshot.point.temperature], [snapshot.point.shear_rate])


def export_chart_image(widget: pg.PlotWidget, file_path: str, width: int = 1920) -> None:
    """Save a chart as an image file, format chosen by the extension."""
    exporter = ImageExporter(widget.getPlotItem())
    exporter.parameters()['width'] = width
    exporter.export(file_path)
    logger.info(f"Chart exported to {file_path}")
