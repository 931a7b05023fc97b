"""Tests for sampling and measuring fitted curves."""

import numpy
import pytest

from ndspline.curve import spline_geometry
from ndspline.curve.interpolate import SplineCurveInterpolator


def _fit(points, cubic=True):
    curve = SplineCurveInterpolator()
    curve.fit(points, cubic=cubic)
    return curve


class TestGetPoints:

    def test_shape_and_endpoints(self):
        curve = _fit([(0, 0), (1, 0), (1, 1)])
        points = spline_geometry.get_points(curve, 5)
        assert points.shape == (5, 2)
        numpy.testing.assert_allclose(points[0], [0, 0], atol=1e-12)
        numpy.testing.assert_allclose(points[-1], [1, 1], atol=1e-12)

    def test_default_count(self):
        curve = _fit([(0, 0), (1, 0), (1, 1)])
        assert len(spline_geometry.get_points(curve)) == 100
        long_curve = _fit([(0, 0), (250, 0)])
        assert len(spline_geometry.get_points(long_curve)) == 250


class TestMeasurements:

    def test_arc_length_of_segment(self):
        for cubic in (True, False):
            curve = _fit([(0, 0), (3, 4)], cubic=cubic)
            assert spline_geometry.arc_length(curve, 50) == pytest.approx(5)

    def test_arc_length_at_least_chord_length(self):
        t = numpy.linspace(0, numpy.pi, 10)
        curve = _fit(numpy.transpose([numpy.cos(t), numpy.sin(t)]))
        length = spline_geometry.arc_length(curve, 500)
        assert length >= curve.total_length
        assert length == pytest.approx(numpy.pi, rel=1e-2)

    def test_identical_curves(self):
        points = [(0, 0), (1, 2), (3, 3), (4, 1)]
        assert spline_geometry.rmsd(_fit(points), _fit(points)) == pytest.approx(0)
        assert spline_geometry.centroid_distance(_fit(points), _fit(points)) == pytest.approx(0)

    def test_translated_curves(self):
        points = numpy.array([(0, 0), (1, 2), (3, 3), (4, 1)], dtype=float)
        curve1 = _fit(points)
        curve2 = _fit(points + [1, 0])
        assert spline_geometry.rmsd(curve1, curve2, 50) == pytest.approx(1)
        assert spline_geometry.centroid_distance(curve1, curve2, 50) == pytest.approx(1)
