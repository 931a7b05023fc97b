import numpy

def get_points(curve, num_points=None):
    """Evaluate a fitted SplineCurveInterpolator at a given number of points.

    Parameters:
        curve: fitted SplineCurveInterpolator
        num_points: number of points, equally spaced in the curve parameter from
            0 to 1, or None, which causes the code to try to guess a good number
            of points. Specifically, the code will use the total chord length of
            the curve or 100, whichever is greater.

    Returns: array of shape (num_points, d), where d is the dimension of the
        curve.
    """
    if num_points is None:
        num_points = max(100, int(round(curve.total_length)))
    return curve.evaluate(numpy.linspace(0, 1, num_points))

def _polyline_length(points):
    steps = numpy.linalg.norm(numpy.diff(points, axis=0), axis=1)
    return steps.sum()

def arc_length(curve, num_points=None):
    """Approximate the length of a fitted curve.

    The curve is sampled at num_points values of u from 0 to 1 (see get_points()
    for the default), and the length of the polyline through those samples is
    returned. This is at least the chord length (curve.total_length) of the
    input points, up to sampling error, and approaches the true arc length as
    num_points grows."""
    return _polyline_length(get_points(curve, num_points))

def rmsd(curve1, curve2, num_points=None):
    """Return the root mean squared distance between corresponding positions on
    two fitted curves of the same dimension.

    Positions correspond when they have the same normalized parameter u, so the
    comparison is between the curves as traversed from start to end, regardless
    of their lengths. The number of u values defaults to the get_points()
    default for curve1."""
    p1 = get_points(curve1, num_points)
    p2 = curve2.evaluate(numpy.linspace(0, 1, len(p1)))
    return numpy.sqrt(((p1 - p2)**2).sum(axis=1).mean())

def centroid_distance(curve1, curve2, num_points=None):
    """Return the distance between the mean positions of two fitted curves, each
    sampled at evenly-spaced u values from 0 to 1.

    If num_points is None, each curve gets the get_points() default for its own
    length."""
    centroids = [get_points(curve, num_points).mean(axis=0) for curve in (curve1, curve2)]
    return numpy.linalg.norm(centroids[0] - centroids[1])
