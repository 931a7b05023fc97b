import logging

import numpy
from scipy import interpolate

from . import geometry

logger = logging.getLogger(__name__)

# boundary condition kinds: the order of the derivative fixed at an end of the curve
FIRST_DERIVATIVE = 1
SECOND_DERIVATIVE = 2

def _check_boundary_kind(kind):
    if kind not in (FIRST_DERIVATIVE, SECOND_DERIVATIVE):
        raise ValueError('Boundary kind must be FIRST_DERIVATIVE (1) or SECOND_DERIVATIVE (2), was: {}'.format(kind))

def _linear_ppoly(x, y):
    """Return the piecewise-linear interpolant through points x,y as a PPoly."""
    slopes = numpy.diff(y) / numpy.diff(x)
    return interpolate.PPoly(numpy.array([slopes, y[:-1]]), x)


class ScalarSpline:
    """Interpolating spline y(x) through scalar samples.

    Boundary conditions fix either the first or the second derivative at each
    end of the fitted range. The default is a natural spline (zero second
    derivative at both ends).

    Example:
        spline = ScalarSpline()
        spline.set_boundary(FIRST_DERIVATIVE, 0, SECOND_DERIVATIVE, 0)
        spline.fit([0, 1, 2, 3], [0, 1, 0, 1])
        y = spline(1.5)
    """
    def __init__(self):
        self.left = SECOND_DERIVATIVE
        self.left_value = 0.0
        self.right = SECOND_DERIVATIVE
        self.right_value = 0.0
        self.linear_extrapolation = False
        self._ppoly = None
        self._constant = None

    @property
    def fitted(self):
        return self._ppoly is not None or self._constant is not None

    def set_boundary(self, left, left_value, right, right_value, linear_extrapolation=False):
        """Set the boundary conditions used by fit().

        Parameters:
        left, right: FIRST_DERIVATIVE or SECOND_DERIVATIVE, the order of the
            derivative that is fixed at the start and end of the spline.
        left_value, right_value: the value of that derivative.
        linear_extrapolation: if True, evaluating outside of the fitted range
            continues along the tangent line at the nearest end. If False, the
            polynomial of the nearest segment is continued.

        Must be called before fit()."""
        assert not self.fitted, 'set_boundary() must be called before fit()'
        _check_boundary_kind(left)
        _check_boundary_kind(right)
        self.left = left
        self.left_value = float(left_value)
        self.right = right
        self.right_value = float(right_value)
        self.linear_extrapolation = bool(linear_extrapolation)

    def fit(self, x, y, cubic=True):
        """Fit the spline to samples y at parameter values x.

        Parameters:
        x: non-decreasing parameter values, shape (n,). If all values are
            equal (e.g. n=1), the spline is the constant y[0]. Otherwise the
            values must be strictly increasing.
        y: sample values, shape (n,)
        cubic: if True, fit a cubic spline honoring the boundary conditions;
            if False, fit a piecewise-linear interpolant.

        Any previous fit is replaced."""
        x = numpy.asarray(x, dtype=float)
        y = numpy.asarray(y, dtype=float)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError('Parameter values and samples must be one-dimensional')
        if len(x) != len(y):
            raise ValueError('Lengths of parameter values and samples must be equal')
        if len(x) == 0:
            raise ValueError('At least one sample is required')
        steps = numpy.diff(x)
        if numpy.any(steps < 0):
            raise ValueError('Parameter values must be non-decreasing')
        if x[-1] == x[0]:
            if not numpy.allclose(y, y[0]):
                raise ValueError('Samples at a single parameter value must all be equal')
            self._ppoly = None
            self._constant = y[0]
            return
        repeated = numpy.flatnonzero(steps == 0)
        if len(repeated) > 0:
            raise ValueError('Parameter value {} is repeated: parameter values must be strictly increasing'.format(x[repeated[0]]))
        if cubic:
            bc_type = ((self.left, self.left_value), (self.right, self.right_value))
            ppoly = interpolate.CubicSpline(x, y, bc_type=bc_type, extrapolate=True)
        else:
            ppoly = _linear_ppoly(x, y)
        self._ppoly = ppoly
        self._constant = None

    def evaluate(self, x):
        """Evaluate the spline at x, which may be a scalar or an array.

        Returns a float for scalar x, otherwise an array of the same shape as x."""
        assert self.fitted, 'fit() must be called before evaluate()'
        x = numpy.asarray(x, dtype=float)
        if self._ppoly is None:
            values = numpy.full(x.shape, self._constant)
        else:
            values = self._ppoly(x)
            if self.linear_extrapolation:
                x0, x1 = self._ppoly.x[[0, -1]]
                values = numpy.where(x < x0, self._ppoly(x0) + self._ppoly(x0, 1) * (x - x0), values)
                values = numpy.where(x > x1, self._ppoly(x1) + self._ppoly(x1, 1) * (x - x1), values)
        if values.ndim == 0:
            return float(values)
        return values

    __call__ = evaluate


class SplineCurveInterpolator:
    """Spline curve through an ordered sequence of points in any number of dimensions.

    The curve is parameterized by cumulative chord length along the input
    points, and each coordinate axis is fit independently with a ScalarSpline
    against that shared parameterization. Positions along the curve are
    requested with a normalized parameter u, where 0 is the first point and 1
    is the last.

    Attributes:
        dimension: number of coordinates of each point (0 before fitting)
        total_length: cumulative chord length of the input points
        parameters: chord-length parameter value of each input point, or None
            before fitting.

    Example:
        resolution = 1000
        curve = SplineCurveInterpolator()
        curve.set_boundary(FIRST_DERIVATIVE, 0, FIRST_DERIVATIVE, 0)
        curve.fit(points)
        for i in range(resolution):
            p = curve.evaluate(i / (resolution - 1))

    or, equivalently:
        positions = curve.evaluate(numpy.linspace(0, 1, resolution))
    """
    def __init__(self):
        # zero curvature at both ends (natural spline) unless set_boundary() says otherwise
        self.left = SECOND_DERIVATIVE
        self.left_value = 0.0
        self.right = SECOND_DERIVATIVE
        self.right_value = 0.0
        self.linear_extrapolation = False
        self.dimension = 0
        self.total_length = 0.0
        self.parameters = None
        self._splines = []

    @property
    def fitted(self):
        return len(self._splines) > 0

    def set_boundary(self, left, left_value, right, right_value, linear_extrapolation=False):
        """Set the boundary conditions (optional). If called, it has to come before fit().

        Parameters:
        left, right: FIRST_DERIVATIVE or SECOND_DERIVATIVE, the order of the
            derivative (with respect to chord length) fixed at the start and
            end of the curve. The same condition applies to every coordinate axis.
        left_value, right_value: the value of that derivative.
        linear_extrapolation: if True, evaluating at u outside [0, 1] continues
            along the tangent line at the nearest end of the curve."""
        assert not self.fitted, 'set_boundary() must be called before fit()'
        _check_boundary_kind(left)
        _check_boundary_kind(right)
        self.left = left
        self.left_value = float(left_value)
        self.right = right
        self.right_value = float(right_value)
        self.linear_extrapolation = bool(linear_extrapolation)

    def fit(self, points, cubic=True, distance=None):
        """Fit the curve to a sequence of points, replacing any previous fit.

        Parameters:
        points: sequence of n points ordered along the curve, each with the same
            number of coordinates; e.g. an array of shape (n, m). A flat sequence
            of n numbers is treated as n one-dimensional points. If empty, this
            call does nothing.
        cubic: True for cubic spline interpolation, False for linear interpolation.
        distance: function distance(p0, p1) used for the chord lengths between
            consecutive points. If None, the euclidean distance is used.

        Note: consecutive duplicate points (other than all points coinciding)
        give a repeated parameter value, which the per-axis splines reject with
        a ValueError. Use geometry.filter_dup_points() to remove them first."""
        if len(points) == 0:
            return
        points = numpy.asarray(points, dtype=float)
        if points.ndim == 1:
            points = points[:, numpy.newaxis]
        assert points.ndim == 2 and points.shape[1] > 0, 'points must all have the same, nonzero dimension'

        # an m-dimensional curve is represented in parametric form: x1(t), x2(t), ..., xm(t)
        parameters = geometry.cumulative_distances(points, unit=False, distance=distance)
        splines = []
        for coordinates in points.T:
            spline = ScalarSpline()
            spline.set_boundary(self.left, self.left_value, self.right, self.right_value, self.linear_extrapolation)
            spline.fit(parameters, coordinates, cubic)
            splines.append(spline)
        logger.debug('Fit %s curve through %d points in %d dimensions, total length %g',
            'cubic' if cubic else 'linear', len(points), points.shape[1], parameters[-1])

        # only replace the old fit once every axis has been fit successfully
        self.dimension = points.shape[1]
        self.total_length = float(parameters[-1])
        self.parameters = parameters
        self._splines = splines

    def evaluate(self, u):
        """Evaluate the position of the curve.

        Parameters:
        u: curve parameter, nominally in [0, 1], or an array of such values.
            Values outside [0, 1] extend the curve beyond its ends.

        Returns: array of shape (m,) for scalar u, or of shape (n, m) for an
            array of n parameter values, where m is the curve dimension."""
        assert self.fitted, 'fit() must be called before evaluate()'
        t = numpy.asarray(u, dtype=float) * self.total_length
        return numpy.stack([spline.evaluate(t) for spline in self._splines], axis=-1)

    __call__ = evaluate
