from kochflake.segments import Point, Segment, SegmentStyle, as_point
from kochflake.errors import InvalidArgument, ResourceLimit
from kochflake.config import get_max_depth
import numpy as np
import numbers
import logging

logger = logging.getLogger(__name__)

# The tent of the Koch rule is an equilateral triangle so the only angle we
# ever rotate by is 60 degrees; compute its trigonometry once
THETA = np.pi/3
COS_60, SIN_60 = float(np.cos(THETA)), float(np.sin(THETA))


def rotate_point(pivot, point, theta=None, cos_sin=None):
    '''
    Rotate point around pivot by theta (radians, counter clockwise is
    positive). Precomputed (cos, sin) of the angle can be passed instead.
    '''
    if cos_sin is None:
        assert theta is not None
        cos_sin = (float(np.cos(theta)), float(np.sin(theta)))
    c, s = cos_sin
    # Translate to origin, rotate, translate back
    dx, dy = point[0] - pivot[0], point[1] - pivot[1]
    return Point(pivot[0] + dx*c - dy*s,
                 pivot[1] + dy*c + dx*s)


def rotate_point_60(pivot, point):
    '''Counter clockwise by pi/3'''
    return rotate_point(pivot, point, cos_sin=(COS_60, SIN_60))


def rotate_point_minus_60(pivot, point):
    '''Clockwise by pi/3'''
    return rotate_point(pivot, point, cos_sin=(COS_60, -SIN_60))


def check_depth(depth, max_depth=None):
    '''Fail before recursing on depth we can't or won't build'''
    if isinstance(depth, bool) or not isinstance(depth, numbers.Integral):
        raise InvalidArgument(f'Depth must be an integer, got {depth!r}')
    depth = int(depth)
    if depth < 0:
        raise InvalidArgument(f'Depth must be non-negative, got {depth}')

    if max_depth is None:
        max_depth = get_max_depth()
    if depth > max_depth:
        raise ResourceLimit(f'Depth {depth} exceeds the ceiling {max_depth} '
                            f'(4**{depth} segments per side)')
    return depth


def koch_rule(A, B):
    '''Points at 1/3, the tip of the tent and at 2/3 of A -- B'''
    dx, dy = (B[0] - A[0])/3., (B[1] - A[1])/3.
    X = Point(A[0] + dx, A[1] + dy)
    Y = Point(A[0] + 2*dx, A[1] + 2*dy)
    # Grow the tent
    Z = rotate_point_60(X, Y)

    return X, Z, Y


def _koch_curve(A, B, depth, style):
    # Base case
    if depth == 0:
        return [Segment(A, B, style)]

    X, Z, Y = koch_rule(A, B)
    # Order matters, the pieces are chained from A to B
    curve = []
    for start, end in ((A, X), (X, Z), (Z, Y), (Y, B)):
        curve.extend(_koch_curve(start, end, depth-1, style))
    return curve


def koch_curve(start, end, depth, style=SegmentStyle.CURRENT, max_depth=None):
    '''
    Koch curve from start to end after depth subdivisions as a list of
    4**depth segments forming a path from start to end.
    '''
    depth = check_depth(depth, max_depth)
    start, end = as_point(start), as_point(end)

    curve = _koch_curve(start, end, depth, style)
    assert len(curve) == 4**depth
    logger.debug('Koch curve %s -> %s at depth %d has %d segments',
                 start, end, depth, len(curve))

    return curve
