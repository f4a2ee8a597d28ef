"""Tests for media fragment selectors and region resolution."""

import math

import pytest

from easel.iiif.v3 import (
    ArgumentError,
    Dimensions,
    MediaFragmentSelector,
    Region,
    SelectorOutOfBoundsError,
    resolve_selector,
)
from easel.iiif.v3.errors import AXIS_UNAVAILABLE, OUT_OF_RANGE


SPATIAL = Dimensions(480, 360)
TEMPORAL = Dimensions(duration=3600)
SPATIOTEMPORAL = Dimensions(480, 360, 3600)


class TestParse:
    """Tests for MediaFragmentSelector.parse()."""

    def test_parse_xywh(self):
        selector = MediaFragmentSelector.parse("xywh=10,20,100,50")
        assert (selector.x, selector.y, selector.width, selector.height) == (10, 20, 100, 50)
        assert selector.is_spatial
        assert not selector.is_temporal

    def test_parse_t(self):
        selector = MediaFragmentSelector.parse("t=0,300.5")
        assert (selector.start, selector.end) == (0.0, 300.5)
        assert selector.is_temporal
        assert not selector.is_spatial

    def test_parse_both(self):
        selector = MediaFragmentSelector.parse("xywh=0,0,480,360&t=0,300")
        assert selector.is_spatial and selector.is_temporal

    def test_parse_both_reversed_order(self):
        selector = MediaFragmentSelector.parse("t=0,300&xywh=0,0,480,360")
        assert selector.value == "xywh=0,0,480,360&t=0,300"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "xywh=",
            "t=",
            "xywh=&t=",
            "xywh=0,0,480",
            "xywh=a,0,480,360",
            "t=10",
            "t=a,b",
            "foo=1,2",
            "xywh=0,0,1,1&xywh=0,0,1,1",
        ],
    )
    def test_malformed(self, value):
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.parse(value)

    def test_zero_width_rejected(self):
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.parse("xywh=0,0,0,360")

    def test_start_after_end_rejected(self):
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.parse("t=300,300")

    @pytest.mark.parametrize(
        "start,end",
        [
            (math.nan, math.nan),
            (0, math.nan),
            (0, math.inf),
            (-math.inf, 10),
            (True, 10),
            ("0", "10"),
        ],
    )
    def test_non_finite_times_rejected(self, start, end):
        """Test that structured times must be finite numbers."""
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.temporal(start, end)

    @pytest.mark.parametrize(
        "x,y,width,height",
        [(0.5, 0, 10, 10), (0, 0, 10.0, 10), (0, 0, True, 10), (0, "0", 10, 10)],
    )
    def test_non_integer_pixels_rejected(self, x, y, width, height):
        """Test that structured xywh values must be integers."""
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.spatial(x, y, width, height)

    def test_overlong_time_rejected(self):
        """Test that a time too large for a float is rejected."""
        with pytest.raises(ArgumentError):
            MediaFragmentSelector.parse("t=0," + "9" * 400)


class TestValue:
    """Tests for canonical selector strings."""

    def test_spatial_value(self):
        assert MediaFragmentSelector.spatial(0, 0, 480, 360).value == "xywh=0,0,480,360"

    def test_whole_seconds_have_no_decimal_point(self):
        assert MediaFragmentSelector.temporal(0.0, 300.0).value == "t=0,300"

    def test_fractional_seconds_kept(self):
        assert MediaFragmentSelector.temporal(1.5, 2.25).value == "t=1.5,2.25"

    def test_empty_selector_rejected(self):
        with pytest.raises(ArgumentError):
            MediaFragmentSelector()


class TestResolve:
    """Tests for resolve_selector()."""

    def test_temporal_selector_on_temporal_canvas(self):
        region = resolve_selector(TEMPORAL, "t=0,3600")
        assert region.start == 0.0
        assert region.end == 3600.0
        assert not region.is_spatial

    def test_spatial_selector_on_temporal_canvas_axis_unavailable(self):
        with pytest.raises(SelectorOutOfBoundsError) as exc:
            resolve_selector(TEMPORAL, "xywh=0,0,10,10")
        assert exc.value.reason == AXIS_UNAVAILABLE
        assert exc.value.axis == "spatial"

    def test_temporal_selector_on_spatial_canvas_axis_unavailable(self):
        with pytest.raises(SelectorOutOfBoundsError) as exc:
            resolve_selector(SPATIAL, "t=0,300")
        assert exc.value.reason == AXIS_UNAVAILABLE

    def test_spatiotemporal_selector_on_spatial_canvas(self):
        with pytest.raises(SelectorOutOfBoundsError):
            resolve_selector(SPATIAL, "xywh=0,0,480,360&t=0,300")

    def test_full_extent_selector_fits(self):
        region = resolve_selector(SPATIOTEMPORAL, "xywh=0,0,480,360")
        assert (region.width, region.height) == (480, 360)

    def test_one_pixel_too_wide(self):
        with pytest.raises(SelectorOutOfBoundsError) as exc:
            resolve_selector(SPATIOTEMPORAL, "xywh=0,0,481,360")
        assert exc.value.reason == OUT_OF_RANGE

    def test_offset_pushes_past_edge(self):
        with pytest.raises(SelectorOutOfBoundsError):
            resolve_selector(SPATIAL, "xywh=240,180,241,180")

    def test_negative_origin_out_of_bounds(self):
        with pytest.raises(SelectorOutOfBoundsError):
            resolve_selector(SPATIAL, MediaFragmentSelector(x=-1, y=0, width=10, height=10))

    def test_end_past_duration(self):
        with pytest.raises(SelectorOutOfBoundsError) as exc:
            resolve_selector(TEMPORAL, "t=3600,7200")
        assert exc.value.axis == "temporal"
        assert exc.value.reason == OUT_OF_RANGE

    def test_unnamed_axis_keeps_canvas_extent(self):
        region = resolve_selector(SPATIOTEMPORAL, "xywh=0,0,240,180")
        assert (region.width, region.height) == (240, 180)
        assert region.duration == 3600.0

        region = resolve_selector(SPATIOTEMPORAL, "t=300,600")
        assert (region.width, region.height) == (480, 360)
        assert region.duration == 300.0

    def test_resolution_is_idempotent(self):
        first = resolve_selector(SPATIOTEMPORAL, "xywh=0,0,480,360&t=0,300")
        second = resolve_selector(SPATIOTEMPORAL, "xywh=0,0,480,360&t=0,300")
        assert first == second
        assert isinstance(first, Region)

    def test_structured_and_string_selectors_agree(self):
        structured = MediaFragmentSelector.spatial(0, 0, 480, 360)
        assert resolve_selector(SPATIAL, structured) == resolve_selector(SPATIAL, "xywh=0,0,480,360")
