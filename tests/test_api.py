"""
End-to-end tests for calculate_mac.
"""

import json
import logging
import math

import pytest

from geometry.primitives import Point2D, Polyline, Spline, SymmetryLine
from mac.api import calculate_mac
from mac.errors import InputError, InsufficientPointsError, MACError, ZeroSpanError

from conftest import rotate_xy, trapezoid_mac


# ============== Reference scenario ==============

def test_linear_taper_scenario(tapered_edges, centerline):
    leading, trailing = tapered_edges
    res = calculate_mac(leading, trailing, centerline, 20.0)

    assert res.scale_factor == pytest.approx(1.0)
    assert res.mac_pixels == pytest.approx(14.0 / 9.0, rel=1e-3)
    assert res.mac == pytest.approx(res.mac_pixels)
    assert res.area_pixels == pytest.approx(15.0, rel=2e-3)
    assert res.span_centroid == pytest.approx(40.0 / 9.0, rel=1e-3)
    # one wing half drawn (span interval [0, 10]) => mirrored
    assert res.mirrored
    assert res.area == pytest.approx(2.0 * res.area_pixels)
    assert res.rotation_angle == 0.0
    assert res.origin == Point2D(0.0, 0.0)
    assert (res.min_span, res.max_span) == (0.0, 10.0)


def test_scenario_traced_along_a_vertical_centerline(tapered_edges, centerline):
    """Same planform rotated a quarter turn, with the centerline drawn vertically."""
    leading, trailing = tapered_edges
    ref = calculate_mac(leading, trailing, centerline, 20.0)

    quarter = math.pi / 2
    le_rot = [Polyline(rotate_xy([(p.x, p.y) for p in leading[0].points], quarter))]
    te_rot = [Polyline(rotate_xy([(p.x, p.y) for p in trailing[0].points], quarter))]
    vertical = SymmetryLine(Point2D(0.0, 0.0), Point2D(0.0, 1.0))
    res = calculate_mac(le_rot, te_rot, vertical, 20.0)

    assert res.rotation_angle == pytest.approx(quarter)
    assert res.mac == pytest.approx(ref.mac, rel=1e-9)
    assert res.area == pytest.approx(ref.area, rel=1e-9)
    assert res.span_of_mac == pytest.approx(ref.span_of_mac, abs=1e-9)


# ============== Planform properties ==============

@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 2, 2.0, -2.7])
def test_rectangular_wing_mac_independent_of_orientation(angle):
    c, b = 3.5, 12.0
    pivot, shift = (4.0, -1.0), (100.0, 250.0)
    le = rotate_xy([(0.0, 0.0), (0.0, b)], angle, pivot, shift)
    te = rotate_xy([(c, 0.0), (c, b)], angle, pivot, shift)
    axis = rotate_xy([(0.0, 0.0), (1.0, 0.0)], angle, pivot, shift)

    res = calculate_mac(
        [Polyline(le)], [Polyline(te)],
        SymmetryLine(Point2D(*axis[0]), Point2D(*axis[1])),
        wingspan=2.0 * b,
    )
    assert res.mac == pytest.approx(c, abs=1e-6)
    assert res.scale_factor == pytest.approx(1.0)


@pytest.mark.parametrize("cr,ct,b", [(2.0, 1.0, 10.0), (5.0, 1.5, 7.0), (1.0, 1.0, 3.0)])
def test_trapezoidal_wing_matches_closed_form(cr, ct, b):
    sweep = 0.4 * b
    le = [Polyline([(0.0, 0.0), (sweep, b)])]
    te = [Polyline([(cr, 0.0), (sweep + ct, b)])]
    axis = SymmetryLine(Point2D(0.0, 0.0), Point2D(1.0, 0.0))
    res = calculate_mac(le, te, axis, wingspan=2.0 * b)
    assert res.mac == pytest.approx(trapezoid_mac(cr, ct), rel=1e-3)


def test_full_span_drawing_is_not_mirrored(centerline):
    le = [Polyline([(0.0, -10.0), (0.0, 10.0)])]
    te = [Polyline([(2.0, -10.0), (2.0, 10.0)])]
    res = calculate_mac(le, te, centerline, wingspan=10.0)
    assert not res.mirrored
    assert res.scale_factor == pytest.approx(0.5)
    assert res.mac == pytest.approx(1.0, abs=1e-6)
    assert res.area == pytest.approx(2.0 * 20.0 * 0.25, rel=2e-3)


def test_spline_through_collinear_knots_matches_polyline(tapered_edges, centerline):
    leading, trailing = tapered_edges
    ref = calculate_mac(leading, trailing, centerline, 20.0)
    te_spline = [Spline([(2.0, 0.0), (1.5, 5.0), (1.0, 10.0)])]
    res = calculate_mac(leading, te_spline, centerline, 20.0)
    assert res.mac == pytest.approx(ref.mac, rel=1e-9)
    assert res.area == pytest.approx(ref.area, rel=1e-9)


def test_multi_segment_edge(centerline):
    le = [Polyline([(0.0, 0.0), (0.0, 4.0)]), Spline([(0.0, 4.0), (0.2, 7.0), (0.5, 10.0)])]
    te = [Polyline([(2.0, 0.0), (1.8, 4.0)]), Polyline([(1.8, 4.0), (1.0, 10.0)])]
    res = calculate_mac(le, te, centerline, 20.0)
    assert 0.5 < res.mac_pixels < 2.0
    assert res.min_span == 0.0 and res.max_span == 10.0


# ============== Reporting ==============

def test_mac_line_maps_back_to_drawing_coordinates(tapered_edges, centerline):
    leading, trailing = tapered_edges
    ref = calculate_mac(leading, trailing, centerline, 20.0)
    start, end = ref.mac_line()
    assert (start.x, start.y) == pytest.approx((0.0, ref.span_of_mac))
    assert (end.x, end.y) == pytest.approx((ref.mac_pixels, ref.span_of_mac))

    angle = 0.8
    le = [Polyline(rotate_xy([(0.0, 0.0), (0.0, 10.0)], angle))]
    te = [Polyline(rotate_xy([(2.0, 0.0), (1.0, 10.0)], angle))]
    axis = rotate_xy([(0.0, 0.0), (1.0, 0.0)], angle)
    res = calculate_mac(le, te, SymmetryLine(Point2D(*axis[0]), Point2D(*axis[1])), 20.0)
    r_start, r_end = res.mac_line()
    (e_start, e_end) = rotate_xy([(start.x, start.y), (end.x, end.y)], angle)
    assert (r_start.x, r_start.y) == pytest.approx(e_start, abs=1e-9)
    assert (r_end.x, r_end.y) == pytest.approx(e_end, abs=1e-9)


def test_summary_and_dict(tapered_edges, centerline):
    res = calculate_mac(*tapered_edges, centerline, 20.0)
    text = res.summary()
    assert text.startswith("MAC: {:.3f} m".format(res.mac))
    assert "Est. Project Area: {:.2f} m²".format(res.area) in text

    payload = res.to_dict()
    assert payload["mac"] == res.mac
    assert payload["mirrored"] is True
    assert len(payload["mac_line"]) == 2
    json.dumps(payload)


def test_config_override_changes_resolution(tapered_edges, centerline):
    coarse = calculate_mac(*tapered_edges, centerline, 20.0, config={"integration": {"n_steps": 10}})
    fine = calculate_mac(*tapered_edges, centerline, 20.0)
    assert coarse.area_pixels == pytest.approx(16.5)
    assert abs(fine.area_pixels - 15.0) < abs(coarse.area_pixels - 15.0)


def test_folded_edge_is_logged(centerline, caplog):
    le = [Polyline([(0.0, 0.0), (0.0, 6.0), (0.0, 4.0), (0.0, 10.0)])]
    te = [Polyline([(2.0, 0.0), (2.0, 10.0)])]
    with caplog.at_level(logging.WARNING, logger="mac.api"):
        res = calculate_mac(le, te, centerline, 20.0)
    assert "leading edge reverses span direction 2 time(s)" in caplog.text
    assert res.mac == pytest.approx(2.0, abs=1e-6)


# ============== Errors ==============

@pytest.mark.parametrize("wingspan", [0.0, -3.0, float("nan"), float("inf"), "abc", None])
def test_invalid_wingspan(tapered_edges, centerline, wingspan):
    with pytest.raises(InputError):
        calculate_mac(*tapered_edges, centerline, wingspan)


def test_missing_geometry(tapered_edges, centerline):
    leading, trailing = tapered_edges
    with pytest.raises(InputError):
        calculate_mac([], trailing, centerline, 20.0)
    with pytest.raises(InputError):
        calculate_mac(leading, None, centerline, 20.0)
    with pytest.raises(InputError):
        calculate_mac(leading, trailing, None, 20.0)
    with pytest.raises(InputError):
        calculate_mac(leading, [(0.0, 0.0), (1.0, 1.0)], centerline, 20.0)


def test_degenerate_symmetry_line(tapered_edges):
    line = SymmetryLine(Point2D(3.0, 3.0), Point2D(3.0, 3.0))
    with pytest.raises(InputError):
        calculate_mac(*tapered_edges, line, 20.0)


def test_single_point_edges_are_insufficient(tapered_edges, centerline):
    _, trailing = tapered_edges
    with pytest.raises(InsufficientPointsError):
        calculate_mac([Polyline([(0.0, 0.0)])], trailing, centerline, 20.0)


def test_degenerate_spline_edge_is_insufficient(tapered_edges, centerline):
    leading, _ = tapered_edges
    with pytest.raises(InsufficientPointsError):
        calculate_mac(leading, [Spline([(2.0, 0.0)])], centerline, 20.0)


def test_non_overlapping_edges(centerline):
    le = [Polyline([(0.0, 0.0), (0.0, 4.0)])]
    te = [Polyline([(2.0, 5.0), (2.0, 10.0)])]
    with pytest.raises(ZeroSpanError) as exc:
        calculate_mac(le, te, centerline, 20.0)
    assert isinstance(exc.value, MACError)
    assert "min_span=" in str(exc.value)


def test_single_segment_is_accepted(tapered_edges, centerline):
    leading, trailing = tapered_edges
    res = calculate_mac(leading[0], trailing[0], centerline, 20.0)
    assert res.mac == pytest.approx(14.0 / 9.0, rel=1e-3)
