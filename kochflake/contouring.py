# Reasoning about the closed contour traced by an outline
from kochflake.segments import Segment, as_array, is_continuous
import numpy as np


def outline_contour(segments, tol=1E-9):
    '''Linked vertices of a continuous closed outline, first one repeated last'''
    x = as_array(segments)
    assert len(x), 'Empty outline'
    assert is_continuous(segments, tol), 'Outline is not a path'
    # Closed
    assert np.linalg.norm(x[0, 0] - x[-1, 1]) < tol

    return np.vstack([x[:, 0], x[:1, 0]])


def _as_points(contour_or_segments):
    if len(contour_or_segments) and isinstance(contour_or_segments[0], Segment):
        return as_array(contour_or_segments).reshape((-1, 2))
    x = np.asarray(contour_or_segments, dtype=float)
    # Segments come as (n, 2, 2)
    if x.ndim == 3:
        x = x.reshape((-1, 2))
    return x


def bounding_box(contour_or_segments):
    '''Extrema of axis aligned coordinates'''
    x = _as_points(contour_or_segments)
    return (np.min(x, axis=0), np.max(x, axis=0))


def encloses_bbox(b0, b1, tol=1E-10):
    '''Does bbox0 enclose bbox1'''
    ll0, ur0 = b0
    ll1, ur1 = b1

    return bool(np.all(ll0-tol < ll1) and np.all(ur1 < ur0+tol))


def perimeter(contour):
    '''Length of the linked vertices'''
    return float(np.sum(np.linalg.norm(np.diff(contour, axis=0), 2, axis=1)))


def signed_area(contour):
    '''Shoelace; positive if counter clockwise in a y-up frame'''
    x, y = contour[:-1].T
    x1, y1 = contour[1:].T
    return 0.5*float(np.sum(x*y1 - x1*y))


def wind_number_it(contour, points):
    '''Winding number of closed contour around each point'''
    assert contour.ndim == 2
    assert np.linalg.norm(contour[0] - contour[-1]) < 1E-13
    # For polygon the angles subtended by the edges sum up exactly
    for c in points:
        r = contour - c
        a, b = r[:-1], r[1:]
        cross = a[:, 0]*b[:, 1] - a[:, 1]*b[:, 0]
        dot = np.sum(a*b, axis=1)
        yield np.sum(np.arctan2(cross, dot))/2/np.pi


def wind_number(contour, points):
    '''Winding numbers as array'''
    return np.fromiter(wind_number_it(contour, points), dtype=float)


def is_inside_contour(contour, points, tol=1E-2):
    '''We say close to 0 is outside'''
    return np.abs(wind_number(contour, points)) > tol
