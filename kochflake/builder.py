# Snowflake = Koch curve on each side of an equilateral triangle
from kochflake.fractals import check_depth, koch_curve, rotate_point_minus_60
from kochflake.segments import SegmentStyle, as_point
from kochflake.errors import InvalidArgument
import logging

logger = logging.getLogger(__name__)


def triangle(base_start, base_end, require_horizontal=True):
    '''
    Vertices (P1, P2, apex) of the equilateral triangle on the base edge.
    For a horizontal base going right (default requirement) the apex is
    (midX, P2.y - halfBase*tan(60)), i.e. above the base in screen
    coordinates.
    '''
    P1, P2 = as_point(base_start), as_point(base_end)

    if require_horizontal:
        if P1.y != P2.y:
            raise InvalidArgument(f'Base edge must be horizontal, got {P1} -- {P2}')
        if not P2.x > P1.x:
            raise InvalidArgument(f'Base edge must point right, got {P1} -- {P2}')
    elif P1 == P2:
        raise InvalidArgument(f'Base edge has zero length at {P1}')
    # Rotating the base around its start gives the apex for any orientation;
    # for the horizontal one this is the formula from the docstring
    apex = rotate_point_minus_60(P1, P2)

    return P1, P2, apex


def sides(vertices):
    '''Traversal P1 -> P2 -> apex -> P1'''
    P1, P2, apex = vertices
    return ((P1, P2), (P2, apex), (apex, P1))


def _outline(vertices, depth, style):
    outline = []
    for start, end in sides(vertices):
        # Depth is checked by the caller
        outline.extend(koch_curve(start, end, depth, style=style, max_depth=depth))
    return outline


def build_koch_outline(base_start, base_end, depth, include_previous=False,
                       require_horizontal=True, max_depth=None):
    '''
    Koch snowflake on base edge as a flat list of segments: first the
    3*4**depth CURRENT ones (sides in traversal order), then, if asked
    for and depth > 0, the 3*4**(depth-1) PREVIOUS ones.
    '''
    # Everything is validated before we start growing
    depth = check_depth(depth, max_depth)
    vertices = triangle(base_start, base_end, require_horizontal=require_horizontal)

    outline = _outline(vertices, depth, SegmentStyle.CURRENT)
    assert len(outline) == 3*4**depth

    if include_previous and depth > 0:
        outline.extend(_outline(vertices, depth-1, SegmentStyle.PREVIOUS))

    logger.debug(f'Snowflake at depth {depth} (previous={include_previous}) '
                 f'has {len(outline)} segments')
    return outline


build = build_koch_outline
