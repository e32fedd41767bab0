"""
Geometric predicates for the triangulation engine.

Both determinants are first evaluated in floating point. If the result
does not clear a static forward error bound (Shewchuk, "Adaptive Precision
Floating-Point Arithmetic and Fast Robust Geometric Predicates", 1997) the
determinant is recomputed exactly with rational arithmetic. The sign of the
returned value is therefore always the exact sign for the given float
coordinates; when the exact path is taken only the sign (-1.0, 0.0, 1.0) is
returned. No epsilon tolerance is applied anywhere.
"""

from fractions import Fraction

from .geometry import Point

_EPSILON = 2.0 ** -53
CCW_ERROR_BOUND = (3.0 + 16.0 * _EPSILON) * _EPSILON
INCIRCLE_ERROR_BOUND = (10.0 + 96.0 * _EPSILON) * _EPSILON


def _sign(value) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def _orient_exact(a: Point, b: Point, c: Point) -> float:
    ax, ay = Fraction(a.x), Fraction(a.y)
    bx, by = Fraction(b.x), Fraction(b.y)
    cx, cy = Fraction(c.x), Fraction(c.y)
    return _sign((ax - cx) * (by - cy) - (ay - cy) * (bx - cx))


def orient(a: Point, b: Point, c: Point) -> float:
    """
    Twice the signed area of triangle abc.

    Args:
        a, b, c: Triangle corners

    Returns:
        Positive if abc is counter-clockwise, negative if clockwise,
        zero if the points are collinear
    """
    det_left = (a.x - c.x) * (b.y - c.y)
    det_right = (a.y - c.y) * (b.x - c.x)
    det = det_left - det_right

    if det_left > 0:
        if det_right <= 0:
            return det
        det_sum = det_left + det_right
    elif det_left < 0:
        if det_right >= 0:
            return det
        det_sum = -det_left - det_right
    else:
        return det

    error_bound = CCW_ERROR_BOUND * det_sum
    if det >= error_bound or -det >= error_bound:
        return det
    return _orient_exact(a, b, c)


def is_ccw(a: Point, b: Point, c: Point) -> bool:
    """True if a, b, c make a strict left turn."""
    return orient(a, b, c) > 0


def on_line(origin: Point, destination: Point, point: Point) -> bool:
    """True if point is collinear with the line through origin and destination."""
    return orient(origin, destination, point) == 0


def _incircle_exact(a: Point, b: Point, c: Point, d: Point) -> float:
    dx, dy = Fraction(d.x), Fraction(d.y)
    adx, ady = Fraction(a.x) - dx, Fraction(a.y) - dy
    bdx, bdy = Fraction(b.x) - dx, Fraction(b.y) - dy
    cdx, cdy = Fraction(c.x) - dx, Fraction(c.y) - dy

    alift = adx * adx + ady * ady
    blift = bdx * bdx + bdy * bdy
    clift = cdx * cdx + cdy * cdy
    return _sign(alift * (bdx * cdy - cdx * bdy)
                 + blift * (cdx * ady - adx * cdy)
                 + clift * (adx * bdy - bdx * ady))


def incircle(a: Point, b: Point, c: Point, d: Point) -> float:
    """
    Lifted in-circle determinant.

    Evaluates the 4x4 determinant with rows (x, y, x^2 + y^2, 1) for
    a, b, c, d, reduced to 3x3 by translating d to the origin.

    Args:
        a, b, c: Counter-clockwise triangle corners
        d: Query point

    Returns:
        Positive if d lies strictly inside the circle through a, b, c,
        negative if strictly outside, zero if co-circular
    """
    adx, ady = a.x - d.x, a.y - d.y
    bdx, bdy = b.x - d.x, b.y - d.y
    cdx, cdy = c.x - d.x, c.y - d.y

    bdxcdy = bdx * cdy
    cdxbdy = cdx * bdy
    alift = adx * adx + ady * ady

    cdxady = cdx * ady
    adxcdy = adx * cdy
    blift = bdx * bdx + bdy * bdy

    adxbdy = adx * bdy
    bdxady = bdx * ady
    clift = cdx * cdx + cdy * cdy

    det = (alift * (bdxcdy - cdxbdy)
           + blift * (cdxady - adxcdy)
           + clift * (adxbdy - bdxady))

    permanent = ((abs(bdxcdy) + abs(cdxbdy)) * alift
                 + (abs(cdxady) + abs(adxcdy)) * blift
                 + (abs(adxbdy) + abs(bdxady)) * clift)
    error_bound = INCIRCLE_ERROR_BOUND * permanent
    if det > error_bound or -det > error_bound:
        return det
    return _incircle_exact(a, b, c, d)


def in_circle(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if d lies strictly inside the circumcircle of counter-clockwise abc."""
    return incircle(a, b, c, d) > 0


def segment_distance_sq(origin: Point, destination: Point, point: Point) -> float:
    """Squared Euclidean distance from point to the segment origin-destination."""
    dx = destination.x - origin.x
    dy = destination.y - origin.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        t = 0.0
    else:
        t = ((point.x - origin.x) * dx + (point.y - origin.y) * dy) / length_sq
        t = min(1.0, max(0.0, t))
    px = origin.x + t * dx - point.x
    py = origin.y + t * dy - point.y
    return px * px + py * py
