from __future__ import annotations

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLabel, QSlider, QPushButton,
)

from extrusionviscosity.app.state import Store
from extrusionviscosity.app.ui.panels.base import BasePanel
from extrusionviscosity.app.ui.slider_scale import SliderScale
from extrusionviscosity.model.export import format_number
from extrusionviscosity.model.series import AxisRange
from extrusionviscosity.model.state import Snapshot


def _make_slider(axis: AxisRange, scale: SliderScale, parent: QWidget) -> QSlider:
    slider = QSlider(Qt.Orientation.Horizontal, parent)
    slider.setRange(scale.to_position(axis.minimum), scale.to_position(axis.maximum))
    slider.setSingleStep(1)
    slider.setPageStep(5 * scale.factor)
    slider.setTickPosition(QSlider.TickPosition.TicksBelow)
    slider.setTickInterval(5 * scale.factor)
    return slider


class ControlsPanel(BasePanel):
    """
    Panel with the two operating point sliders, the current viscosity readout
    and the reset / export buttons.
    """
    export_requested = Signal()

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # inputs
        inputs = QGroupBox(self.tr("Process Parameters"), self)
        grid = QGridLayout(inputs)

        config = store.config
        self.temperature_scale = SliderScale.for_axis(config.temperature_axis, config.default_point.temperature)
        self.shear_scale = SliderScale.for_axis(config.shear_axis, config.default_point.shear_rate)

        self.temperature_slider = _make_slider(config.temperature_axis, self.temperature_scale, inputs)
        self.temperature_value = QLabel(inputs)
        grid.addWidget(QLabel(self.tr("Temperature (°C):"), inputs), 0, 0)
        grid.addWidget(self.temperature_value, 0, 1, Qt.AlignmentFlag.AlignRight)
        grid.addWidget(self.temperature_slider, 1, 0, 1, 2)

        self.shear_slider = _make_slider(config.shear_axis, self.shear_scale, inputs)
        self.shear_value = QLabel(inputs)
        grid.addWidget(QLabel(self.tr("Shear rate (1/s):"), inputs), 2, 0)
        grid.addWidget(self.shear_value, 2, 1, Qt.AlignmentFlag.AlignRight)
        grid.addWidget(self.shear_slider, 3, 0, 1, 2)

        root.addWidget(inputs)

        # result
        result = QGroupBox(self.tr("Viscosity (Pa·s)"), self)
        result_layout = QVBoxLayout(result)
        self.viscosity_label = QLabel(result)
        self.viscosity_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = self.viscosity_label.font()
        font.setPointSize(font.pointSize() * 2)
        font.setBold(True)
        self.viscosity_label.setFont(font)
        result_layout.addWidget(self.viscosity_label)
        root.addWidget(result)

        # model constants (read-only)
        params = store.config.model
        model_box = QGroupBox(self.tr("Model"), self)
        model_layout = QVBoxLayout(model_box)
        model_layout.addWidget(QLabel("η = μ₀ · exp(−b · (T − T₀)) · γ^(n−1)", model_box))
        model_layout.addWidget(QLabel(
            f"μ₀ = {format_number(params.mu0)} Pa·s^n,  b = {format_number(params.b)} 1/°C,\n"
            f"T₀ = {format_number(params.reference_temperature)} °C,  n = {format_number(params.flow_index)}",
            model_box
        ))
        root.addWidget(model_box)

        # buttons
        self.reset_button = QPushButton(self.tr("Reset"), self)
        self.export_button = QPushButton(self.tr("Export Data…"), self)
        root.addWidget(self.reset_button)
        root.addWidget(self.export_button)
        root.addStretch()

        # wiring
        self.temperature_slider.valueChanged.connect(self._on_temperature_changed)
        self.shear_slider.valueChanged.connect(self._on_shear_changed)
        self.reset_button.clicked.connect(lambda *_: self.store.reset())
        self.export_button.clicked.connect(lambda *_: self.export_requested.emit())
        self.store.snapshot_changed.connect(self.show_snapshot)

        self.show_snapshot(self.store.snapshot)

    @Slot(int)
    def _on_temperature_changed(self, value: int) -> None:
        self.store.set_temperature(self.temperature_scale.to_value(value))

    @Slot(int)
    def _on_shear_changed(self, value: int) -> None:
        self.store.set_shear_rate(self.shear_scale.to_value(value))

    @Slot(object)
    def show_snapshot(self, snapshot: Snapshot) -> None:
        point = snapshot.point

        # keep sliders in sync after reset without echoing back into the store
        for slider, scale, value in ((self.temperature_slider, self.temperature_scale, point.temperature),
                                     (self.shear_slider, self.shear_scale, point.shear_rate)):
            slider.blockSignals(True)
            slider.setValue(scale.to_position(value))
            slider.blockSignals(False)

        self.temperature_value.setText(format_number(point.temperature))
        self.shear_value.setText(format_number(point.shear_rate))
        self.viscosity_label.setText(f"{snapshot.viscosity:.2f}")
