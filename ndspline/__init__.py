'''
# ndspline

Smooth curves through ordered points in any number of dimensions.

Curve
-----
Functions for computations over curves in any number of dimensions, approximated as series of points (polylines) or parametric splines.
 - curve.geometry: basic algorithms for polyline curves: chord-length parameterization and removal of duplicate points.
 - curve.interpolate: ScalarSpline, a one-dimensional cubic or linear interpolating spline with first- or second-derivative boundary conditions and optional linear extrapolation; and SplineCurveInterpolator, which fits one ScalarSpline per coordinate axis against the cumulative chord length of the input points and evaluates positions along the curve at a normalized parameter in [0, 1].
 - curve.spline_geometry: sample a fitted curve at evenly-spaced parameter values, approximate its arc length, and compare two curves.

'''
