# Points and styled segments; coordinates are kept as floats, rounding
# happens only in `display_coordinates`
from kochflake.errors import InvalidArgument
from collections import namedtuple
import numpy as np
import enum
import math


Point = namedtuple('Point', ('x', 'y'))


class SegmentStyle(enum.Enum):
    '''Which outline a segment belongs to'''
    CURRENT = 'current'
    PREVIOUS = 'previous'


Segment = namedtuple('Segment', ('start', 'end', 'style'),
                     defaults=(SegmentStyle.CURRENT, ))


def as_point(obj):
    '''Point from any pair of reals'''
    if isinstance(obj, Point):
        x, y = obj
    else:
        try:
            x, y = np.asarray(obj, dtype=float).ravel()
        except (TypeError, ValueError):
            raise InvalidArgument(f'Expected a 2D point, got {obj!r}')
    x, y = float(x), float(y)
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidArgument(f'Point coordinates must be finite, got ({x}, {y})')
    return Point(x, y)


def current(segments):
    '''CURRENT segments in order'''
    return [seg for seg in segments if seg.style is SegmentStyle.CURRENT]


def previous(segments):
    '''PREVIOUS segments in order'''
    return [seg for seg in segments if seg.style is SegmentStyle.PREVIOUS]


def as_array(segments):
    '''(n, 2, 2) array where [i, 0] is the start and [i, 1] the end'''
    segments = list(segments)
    if not segments:
        return np.zeros((0, 2, 2))
    return np.array([(seg.start, seg.end) for seg in segments], dtype=float)


def display_coordinates(segments, offset=(0, 0)):
    '''
    Integer (n, 4) array x1, y1, x2, y2 for a renderer. Segments are
    translated by offset first and then rounded.
    '''
    x = as_array(segments).reshape((-1, 4))
    dx, dy = offset
    x = x + np.array([dx, dy, dx, dy], dtype=float)
    return np.rint(x).astype(int)


def is_continuous(segments, tol=1E-9):
    '''Each segment ends where the next one starts'''
    x = as_array(segments)
    if len(x) < 2:
        return True
    gaps = np.linalg.norm(x[1:, 0] - x[:-1, 1], 2, axis=1)
    return bool(np.all(gaps < tol))
