"""
Configuration
=============
Constants shared by the builder and the view state.

The depth ceiling guards against materializing 4**depth segments. It can be
lowered (or raised) with the KOCHFLAKE_MAX_DEPTH environment variable.

Exports:
    MAX_DEPTH (int): Default ceiling for the recursion depth.
    MIN_DEPTH, MAX_UI_DEPTH, INITIAL_DEPTH (int): Iteration range of the view.
    ANIMATION_WRAP (int): Last depth the animation reaches before restarting.
    PAN_FACTOR (float): Scale of mouse motion to translation.
"""
import os

from kochflake.segments import SegmentStyle


MAX_DEPTH = 12
MAX_DEPTH_ENV = 'KOCHFLAKE_MAX_DEPTH'

# Iteration slider range
MIN_DEPTH = 0
MAX_UI_DEPTH = 10
INITIAL_DEPTH = 0

ANIMATION_WRAP = 5

PAN_FACTOR = -0.02

DEFAULT_BASE = ((200, 500), (600, 500))
DEFAULT_VIEWPORT = (1000, 1000)

STYLE_COLORS = {SegmentStyle.CURRENT: 'blue',
                SegmentStyle.PREVIOUS: 'cyan'}


def get_max_depth():
    '''Depth ceiling, from the environment if set there'''
    value = os.environ.get(MAX_DEPTH_ENV)
    if value is None:
        return MAX_DEPTH
    try:
        ceiling = int(value)
    except ValueError:
        raise ValueError(f'{MAX_DEPTH_ENV} must be an integer, got {value!r}')
    if ceiling < 0:
        raise ValueError(f'{MAX_DEPTH_ENV} must be non-negative, got {ceiling}')
    return ceiling
