'''
Curve
-----
Functions for computations over curves in any number of dimensions, approximated as series of points (polylines) or parametric splines.
 - curve.geometry: basic algorithms for polyline curves.
 - curve.interpolate: fitting chord-length parameterized splines through polylines (using scipy.interpolate.CubicSpline).
 - curve.spline_geometry: sampling and measuring fitted spline curves.
 '''
