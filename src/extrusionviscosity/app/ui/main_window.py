"""
Main window: controls on the left, charts and the neighborhood table on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QSplitter, QWidget, QGridLayout, QGroupBox, QVBoxLayout,
    QFileDialog, QMessageBox, QToolBar, QStatusBar,
)

from extrusionviscosity.app.application import VISIBLE_APP_NAME
from extrusionviscosity.app.state import Store
from extrusionviscosity.app.ui.charts import SeriesChart, HeatmapChart, export_chart_image
from extrusionviscosity.app.ui.panels.controls import ControlsPanel
from extrusionviscosity.app.ui.results_table import ResultsTable
from extrusionviscosity.config import AppConfig
from extrusionviscosity.model.export import DEFAULT_EXPORT_FILENAME
from extrusionviscosity.model.state import Snapshot

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # Global store
        self.store = Store(config)

        # ---- Toolbar ----
        tb = QToolBar(self.tr("Main"), self)
        self.addToolBar(tb)
        self.act_export = QAction(self.tr("Export Data…"), self)
        self.act_export.triggered.connect(self.on_export_data)
        self.act_export_map = QAction(self.tr("Save Map Image…"), self)
        self.act_export_map.triggered.connect(self.on_export_map_image)
        self.act_reset = QAction(self.tr("Reset"), self)
        self.act_reset.triggered.connect(lambda *_: self.store.reset())
        for act in (self.act_reset, self.act_export, self.act_export_map):
            tb.addAction(act)

        # ---- Central: controls | charts + table ----
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)

        self.controls = ControlsPanel(self.store, parent=split)
        self.controls.export_requested.connect(self.on_export_data)

        right = QWidget(split)
        grid = QGridLayout(right)

        self.temperature_chart = SeriesChart(
            self.tr("Viscosity vs. temperature"), self.tr("Temperature (°C)"), '#667eea', parent=right
        )
        self.shear_chart = SeriesChart(
            self.tr("Viscosity vs. shear rate"), self.tr("Shear rate (1/s)"), '#764ba2', parent=right
        )
        self.heatmap = HeatmapChart(config.grid_temperature_axis, config.grid_shear_axis, parent=right)

        table_box = QGroupBox(self.tr("Results Around Current Point"), right)
        table_layout = QVBoxLayout(table_box)
        self.table = ResultsTable(table_box)
        table_layout.addWidget(self.table)

        grid.addWidget(self.temperature_chart, 0, 0)
        grid.addWidget(self.shear_chart, 0, 1)
        grid.addWidget(self.heatmap, 1, 0)
        grid.addWidget(table_box, 1, 1)

        split.addWidget(self.controls)
        split.addWidget(right)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(split)

        self.setStatusBar(QStatusBar(self))

        # React to every recomputation
        self.store.snapshot_changed.connect(self.show_snapshot)
        self.show_snapshot(self.store.snapshot)

    @Slot(object)
    def show_snapshot(self, snapshot: Snapshot) -> None:
        self.temperature_chart.show_series(snapshot.temperature_series, snapshot.viscosity)
        self.shear_chart.show_series(snapshot.shear_series, snapshot.viscosity)
        self.heatmap.show_snapshot(snapshot)
        self.table.show_rows(snapshot.table)

    @Slot()
    def on_export_data(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Export Data"),
            DEFAULT_EXPORT_FILENAME,
            self.tr("CSV file (*.csv);;All Files (*)"),
        )
        if not file_path:
            return

        try:
            self.store.export_report(file_path)
        except Exception as e:
            logger.exception("Failed to export data")
            QMessageBox.critical(self, self.tr("Export Error"), self.tr("Could not export data:\n{err}").format(err=e))
            return

        self.statusBar().showMessage(self.tr("Data exported to {path}").format(path=file_path), 5000)

    @Slot()
    def on_export_map_image(self) -> None:
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            self.tr("Save Map Image"),
            "viscosity_map.png",
            self.tr("PNG image (*.png);;JPEG image (*.jpg)"),
        )
        if not file_path:
            return

        try:
            export_chart_image(self.heatmap, file_path)
        except Exception as e:
            logger.exception("Failed to export chart")
            QMessageBox.critical(self, self.tr("Export Error"), self.tr("Could not export image:\n{err}").format(err=e))
