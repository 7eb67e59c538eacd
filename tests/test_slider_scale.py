"""Tests for mapping axis values onto integer slider positions."""
import pytest

from extrusionviscosity.app.ui.slider_scale import SliderScale, decimals_for
from extrusionviscosity.model.series import AxisRange


@pytest.mark.parametrize("values, expected", [
    ((175.0, 205.0, 180.0), 0),
    ((175.0, 205.0, 182.5), 1),
    ((0.25, 1.0), 2),
    ((1.0 / 3.0,), 3),
])
def test_decimals_for(values, expected):
    assert decimals_for(values) == expected


class TestSliderScale:

    def test_integer_axis_keeps_unit_positions(self, config):
        scale = SliderScale.for_axis(config.temperature_axis, config.default_point.temperature)
        assert scale.factor == 1
        assert scale.to_position(180.0) == 180
        assert scale.to_value(190) == 190.0

    def test_fractional_default_is_reachable(self):
        scale = SliderScale.for_axis(AxisRange(175.0, 205.0, 2.0), 182.5)
        position = scale.to_position(182.5)

        assert position == 1825
        assert scale.to_value(position) == 182.5

    def test_fractional_bounds(self):
        axis = AxisRange(30.5, 60.25, 2.0)
        scale = SliderScale.for_axis(axis)

        assert scale.to_value(scale.to_position(axis.minimum)) == 30.5
        assert scale.to_value(scale.to_position(axis.maximum)) == 60.25
