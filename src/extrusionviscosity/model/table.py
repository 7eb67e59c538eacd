"""
Neighborhood Table
==================
Viscosity on a small cross of offsets around the current operating point,
classified into five bands for display styling.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Dict, List, Sequence

from extrusionviscosity.model.colors import normalize
from extrusionviscosity.model.viscosity import ModelParameters, compute_viscosity

logger = logging.getLogger(__name__)

NEIGHBORHOOD_OFFSETS: tuple[float, ...] = (-10.0, -5.0, 0.0, 5.0, 10.0)

# Lower edges (exclusive) of HIGH, MEDIUM_HIGH, MEDIUM and MEDIUM_LOW
BAND_THRESHOLDS: tuple[float, float, float, float] = (0.8, 0.6, 0.4, 0.2)


class ViscosityBand(StrEnum):
    LOW = "low"
    MEDIUM_LOW = "medium-low"
    MEDIUM = "medium"
    MEDIUM_HIGH = "medium-high"
    HIGH = "high"


# Highest band first, matches the order of BAND_THRESHOLDS
_BANDS_DESCENDING = (
    ViscosityBand.HIGH,
    ViscosityBand.MEDIUM_HIGH,
    ViscosityBand.MEDIUM,
    ViscosityBand.MEDIUM_LOW,
)

BAND_LABELS: Dict[ViscosityBand, str] = {
    ViscosityBand.LOW: "Low",
    ViscosityBand.MEDIUM_LOW: "Medium-low",
    ViscosityBand.MEDIUM: "Medium",
    ViscosityBand.MEDIUM_HIGH: "Medium-high",
    ViscosityBand.HIGH: "High",
}


@dataclass(frozen=True)
class TableRow:
    temperature: float
    shear_rate: float
    viscosity: float
    band: ViscosityBand


def classify_band(
    normalized: float,
    thresholds: Sequence[float] = BAND_THRESHOLDS
) -> ViscosityBand:
    """Band of a normalized value. Comparisons are strict, ties fall to the lower band."""
    if len(thresholds) != len(_BANDS_DESCENDING):
        raise ValueError(f"Expected {len(_BANDS_DESCENDING)} band thresholds, got {len(thresholds)}.")

    for band, threshold in zip(_BANDS_DESCENDING, thresholds):
        if normalized > threshold:
            return band
    return ViscosityBand.LOW


def _candidates(center: float, offsets: Sequence[float], bounds: tuple[float, float]) -> List[float]:
    lo, hi = bounds
    return [center + offset for offset in offsets if lo <= center + offset <= hi]


def build_neighborhood_table(
    current_t: float,
    current_gamma: float,
    t_bounds: tuple[float, float],
    g_bounds: tuple[float, float],
    params: ModelParameters,
    offsets: Sequence[float] = NEIGHBORHOOD_OFFSETS,
    thresholds: Sequence[float] = BAND_THRESHOLDS
) -> List[TableRow]:
    """
    Build the neighborhood table around (current_t, current_gamma).

    Candidates outside the inclusive bounds are dropped. Rows come in
    temperature-major order. Bands are assigned after all rows are computed,
    by normalizing against the min and max viscosity of the table; if all
    viscosities are equal every row is LOW.
    """
    temperatures = _candidates(current_t, offsets, t_bounds)
    shear_rates = _candidates(current_gamma, offsets, g_bounds)

    raw = [
        (t, gamma, compute_viscosity(t, gamma, params))
        for t in temperatures
        for gamma in shear_rates
    ]
    if not raw:
        logger.debug(f"Neighborhood of ({current_t}, {current_gamma}) lies outside the bounds.")
        return []

    lo = min(eta for _, _, eta in raw)
    hi = max(eta for _, _, eta in raw)

    return [
        TableRow(
            temperature=t,
            shear_rate=gamma,
            viscosity=eta,
            band=classify_band(normalize(eta, lo, hi), thresholds),
        )
        for t, gamma, eta in raw
    ]
