"""
Headless state of the snowflake window.

The view owns the base edge, the iteration, the previous-iteration flag and
the pan translation. Widgets (sliders, check boxes, timers) only call into
it; every change that affects the geometry goes through `recreate`, which
rebuilds the outline with the pure builder.
"""
from kochflake.builder import build_koch_outline
from kochflake.contouring import bounding_box
from kochflake.errors import InvalidArgument
from kochflake.segments import as_point, display_coordinates
from kochflake import config
import numpy as np
import numbers
import logging

logger = logging.getLogger(__name__)


class KochView:
    '''Snowflake with iteration, overlay and pan state'''

    def __init__(self, base_start=None, base_end=None, depth=config.INITIAL_DEPTH,
                 show_previous=False, pan_factor=config.PAN_FACTOR):
        default_start, default_end = config.DEFAULT_BASE
        self.base_start = as_point(default_start if base_start is None else base_start)
        self.base_end = as_point(default_end if base_end is None else base_end)

        self.depth = self._check_iteration(depth)
        self.show_previous = show_previous
        self.pan_factor = pan_factor

        self.translation = np.zeros(2)
        self._mouse = np.zeros(2)
        self._listeners = []

        self.segments = []
        self.recreate()

    @staticmethod
    def _check_iteration(depth):
        if isinstance(depth, bool) or not isinstance(depth, numbers.Integral):
            raise InvalidArgument(f'Iteration must be an integer, got {depth!r}')
        if not config.MIN_DEPTH <= depth <= config.MAX_UI_DEPTH:
            raise InvalidArgument(f'Iteration {depth} outside of '
                                  f'[{config.MIN_DEPTH}, {config.MAX_UI_DEPTH}]')
        return int(depth)

    def add_listener(self, callback):
        '''callback(view, command) is called when the iteration changes'''
        self._listeners.append(callback)

    def _fire_change(self, command):
        for callback in self._listeners:
            callback(self, command)

    def set_iteration(self, depth):
        self.depth = self._check_iteration(depth)
        self._fire_change('changeIter')

    def show_previous_iteration(self, flag):
        self.show_previous = bool(flag)

    def recreate(self):
        '''Rebuild the outline from the current state'''
        self.segments = build_koch_outline(self.base_start, self.base_end, self.depth,
                                           include_previous=self.show_previous)
        logger.debug(f'Recreated depth {self.depth} with {len(self.segments)} segments')
        return self.segments

    def tick(self):
        '''One animation step; past the wrap depth start over'''
        if self.depth > config.ANIMATION_WRAP:
            self.set_iteration(0)
        else:
            self.set_iteration(self.depth + 1)
        return self.recreate()

    def press(self, x, y):
        '''Mouse button went down at (x, y)'''
        self._mouse = np.array([x, y], dtype=float)

    def drag(self, x, y, viewport=config.DEFAULT_VIEWPORT):
        '''
        Pan by the scaled distance from the press point. The move along an
        axis is undone if the outline would leave the viewport on that axis.
        '''
        step = self.pan_factor*(self._mouse - np.array([x, y], dtype=float))
        ll, ur = bounding_box(self.segments)
        size = np.asarray(viewport, dtype=float)

        translation = self.translation + step
        for axis in range(2):
            if ur[axis] + translation[axis] - size[axis] > 0 or ll[axis] + translation[axis] < 0:
                translation[axis] = self.translation[axis]
        self.translation = translation

        return self.translation

    def move_base(self, dx, dy):
        '''Translate the base edge itself and rebuild'''
        self.base_start = as_point((self.base_start.x + dx, self.base_start.y + dy))
        self.base_end = as_point((self.base_end.x + dx, self.base_end.y + dy))
        return self.recreate()

    def display_segments(self):
        '''Integer coordinates for drawing, pan included'''
        return display_coordinates(self.segments, offset=self.translation)
