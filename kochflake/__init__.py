from .segments import (Point, Segment, SegmentStyle, as_point, current, previous,
                       as_array, display_coordinates, is_continuous)
from .fractals import koch_curve, koch_rule, rotate_point, check_depth
from .builder import build_koch_outline, build, triangle, sides
from .errors import KochError, InvalidArgument, ResourceLimit
from .logging_config import setup_logging
from .view import KochView
