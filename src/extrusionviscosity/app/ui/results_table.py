from __future__ import annotations

from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView, QWidget

from extrusionviscosity.model.table import BAND_LABELS, TableRow, ViscosityBand

# Cell backgrounds, cold (low viscosity) to warm (high viscosity)
BAND_COLORS: Dict[ViscosityBand, str] = {
    ViscosityBand.LOW: '#d4f1f9',
    ViscosityBand.MEDIUM_LOW: '#c8e6c9',
    ViscosityBand.MEDIUM: '#fff9c4',
    ViscosityBand.MEDIUM_HIGH: '#ffe0b2',
    ViscosityBand.HIGH: '#ffcdd2',
}


class NumericItem(QTableWidgetItem):
    """Table item that sorts by its numeric value instead of its text."""

    def __init__(self, value: float, decimals: int) -> None:
        super().__init__(f"{value:.{decimals}f}")
        self.value = value
        self.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.setFlags(self.flags() & ~Qt.ItemFlag.ItemIsEditable)

    def __lt__(self, other: QTableWidgetItem) -> bool:
        if isinstance(other, NumericItem):
            return self.value < other.value
        return super().__lt__(other)


class ResultsTable(QTableWidget):
    """Neighborhood table. Click a header to sort by that column."""
    HEADERS = ["Temperature (°C)", "Shear rate (1/s)", "Viscosity (Pa·s)"]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(0, len(self.HEADERS), parent)
        self.setHorizontalHeaderLabels([self.tr(h) for h in self.HEADERS])
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.verticalHeader().setVisible(False)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setSortingEnabled(True)

    def show_rows(self, rows: list[TableRow]) -> None:
        # sorting while inserting scrambles rows, re-enabled below to keep the user's sort
        self.setSortingEnabled(False)
        self.setRowCount(len(rows))

        for i, row in enumerate(rows):
            self.setItem(i, 0, NumericItem(row.temperature, 1))
            self.setItem(i, 1, NumericItem(row.shear_rate, 1))

            cell = NumericItem(row.viscosity, 2)
            cell.setBackground(QBrush(QColor(BAND_COLORS[row.band])))
            cell.setToolTip(BAND_LABELS[row.band])
            self.setItem(i, 2, cell)

        self.setSortingEnabled(True)
