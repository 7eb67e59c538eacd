"""
Normalization and Color Mapping
===============================
Maps raw viscosity values onto [0, 1] and onto a blue (low) to red (high)
color ramp used by the heatmap.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from extrusionviscosity.model.errors import DomainError

if TYPE_CHECKING:
    import numpy.typing as npt

HEATMAP_ALPHA = 0.7


@dataclass(frozen=True)
class ColorRGBA:
    red: int
    green: int
    blue: int
    alpha: float = HEATMAP_ALPHA

    def to_css(self) -> str:
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha})"

    def to_tuple(self) -> tuple[int, int, int, int]:
        """(r, g, b, a) with alpha scaled to 0-255, as accepted by pg.mkBrush."""
        return self.red, self.green, self.blue, _round_half_up(self.alpha * 255)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """
    Position of `value` within [minimum, maximum], clamped to [0, 1].

    A degenerate range (minimum == maximum) maps every value to 0.

    Raises:
        DomainError: If an input is non-finite or maximum < minimum.
    """
    if not all(math.isfinite(v) for v in (value, minimum, maximum)):
        raise DomainError("Normalization inputs must be finite.")
    if maximum < minimum:
        raise DomainError(f"Invalid range: maximum {maximum} < minimum {minimum}.")
    if maximum == minimum:
        return 0.0

    normalized = (value - minimum) / (maximum - minimum)
    return min(max(normalized, 0.0), 1.0)


def color_for(normalized: float) -> ColorRGBA:
    """
    Color of a normalized value.

    Red grows linearly with the value, blue falls linearly, green peaks at 0.5.
    """
    n = min(max(float(normalized), 0.0), 1.0)
    return ColorRGBA(
        red=_round_half_up(n * 255),
        green=_round_half_up(math.sin(n * math.pi) * 128),
        blue=_round_half_up((1 - n) * 255),
    )


def colors_for_values(values: npt.ArrayLike) -> list[ColorRGBA]:
    """Colors for a value set, normalized against its own min and max."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return []

    lo, hi = float(arr.min()), float(arr.max())
    return [color_for(normalize(float(v), lo, hi)) for v in arr]
