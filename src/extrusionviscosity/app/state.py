from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from extrusionviscosity.config import AppConfig
from extrusionviscosity.model.io import IOManager
from extrusionviscosity.model.state import OperatingPoint, SessionState, Snapshot

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store. Recomputes the snapshot on every change and signals the views."""
    snapshot_changed = Signal(object)

    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        self.session = SessionState(config)
        self.snapshot: Snapshot = self.session.snapshot()

    @property
    def config(self) -> AppConfig:
        return self.session.config

    @property
    def point(self) -> OperatingPoint:
        return self.session.point

    def set_temperature(self, temperature: float) -> None:
        if temperature == self.session.point.temperature:
            return
        self.session.set_temperature(temperature)
        self._recompute()

    def set_shear_rate(self, shear_rate: float) -> None:
        if shear_rate == self.session.point.shear_rate:
            return
        self.session.set_shear_rate(shear_rate)
        self._recompute()

    def reset(self) -> None:
        self.session.reset()
        self._recompute()

    def export_report(self, filepath: str) -> str:
        return IOManager.export_session(self.session, filepath)

    def _recompute(self) -> None:
        self.snapshot = self.session.snapshot()
        self.snapshot_changed.emit(self.snapshot)
