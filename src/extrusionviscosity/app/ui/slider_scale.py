"""
Slider Scaling
Maps real axis values onto the integer positions of a QSlider.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

from extrusionviscosity.model.series import AxisRange

MAX_DECIMALS = 3


def decimals_for(values: Iterable[float], max_decimals: int = MAX_DECIMALS) -> int:
    """Fewest decimal places that represent every value exactly, capped at `max_decimals`."""
    decimals = 0
    for value in values:
        while decimals < max_decimals:
            scaled = value * 10 ** decimals
            if math.isclose(scaled, round(scaled), abs_tol=1e-9):
                break
            decimals += 1
    return decimals


@dataclass(frozen=True)
class SliderScale:
    decimals: int = 0

    @classmethod
    def for_axis(cls, axis: AxisRange, *values: float) -> SliderScale:
        return cls(decimals_for((axis.minimum, axis.maximum, *values)))

    @property
    def factor(self) -> int:
        return 10 ** self.decimals

    def to_position(self, value: float) -> int:
        return int(round(value * self.factor))

    def to_value(self, position: int) -> float:
        return position / self.factor
