import numpy

def cumulative_distances(points, unit=True, distance=None):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths. A curve of zero length (a single
          point, or only coincident points) is returned as all zeros.
    distance: function distance(p0, p1) giving the distance between two points.
          If None, the euclidean distance is used."""
    points = numpy.asarray(points, dtype=float)
    if distance is None:
        steps = numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1))
    else:
        steps = numpy.array([distance(p0, p1) for p0, p1 in zip(points[:-1], points[1:])], dtype=float)
    distances = numpy.concatenate([[0], numpy.add.accumulate(steps)])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def filter_dup_points(points):
    """Return a polyline with no consecutive duplicate or near-duplicate points."""
    points = numpy.asarray(points, dtype=float)
    if len(points) == 0:
        return points
    points_out = [points[0]]
    for point in points[1:]:
        if not numpy.allclose(point, points_out[-1]):
            points_out.append(point)
    return numpy.array(points_out)
