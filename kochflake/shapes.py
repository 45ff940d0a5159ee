import kochflake.contouring as contour
from kochflake.builder import build_koch_outline
from kochflake.errors import InvalidArgument
import numpy as np
import logging
import tqdm

logger = logging.getLogger(__name__)


class Shape:
    '''Planar shape that can be added to a gmsh model'''
    tol = 1E-10

    def __init__(self):
        self._com = None
        self._com_surfaces = None
        self._vertices = None

    def is_inside(self, point):
        '''Check if point is inside shape'''
        raise NotImplementedError

    def add(self, model, factory):
        '''Add self to gmsh model'''
        raise NotImplementedError

    def __contains__(self, other):
        '''Is the other shape contained inside self?'''
        return all(self.is_inside(p) for p in other.vertices)

    def intersects(self, other):
        '''Check collision with other shape'''
        return any(self.is_inside(p) for p in other.vertices)

    @property
    def com(self):
        '''Shape's center of mass'''
        return self._com

    @property
    def com_surfaces(self):
        '''Center of mass for each edge of the shape'''
        return self._com_surfaces

    @property
    def vertices(self):
        '''Vertices defining the shape'''
        return self._vertices


class Polygon(Shape):
    '''Closed one. Specified by it's LINKED vertices (no duplicates)'''
    tol = 1E-2
    # Show progress when adding this many vertices to gmsh
    progress_threshold = 1000

    def __init__(self, vertices):
        super().__init__()
        vertices = np.asarray(vertices, dtype=float)
        nvtx, gdim = vertices.shape
        if nvtx < 3 or gdim != 2:
            raise InvalidArgument(f'Polygon needs at least 3 planar vertices, got {vertices.shape}')

        self._vertices = vertices
        # Closed loop is convenient for what follows
        self.contour = np.vstack([vertices, vertices[:1]])
        self._com_surfaces = 0.5*(self.contour[:-1] + self.contour[1:])

        self.signed_area = contour.signed_area(self.contour)
        if abs(self.signed_area) < Shape.tol:
            raise InvalidArgument('Polygon is degenerate (zero area)')
        # See https://stackoverflow.com/a/5271722
        x, y = self.contour[:-1].T
        x1, y1 = self.contour[1:].T
        x_cross_y = x*y1 - x1*y
        self._com = np.array([np.sum((x + x1)*x_cross_y),
                              np.sum((y + y1)*x_cross_y)])/(6*self.signed_area)
        # Coarse outside filter
        self.ll, self.ur = contour.bounding_box(self.contour)

    @property
    def area(self):
        return abs(self.signed_area)

    def __contains__(self, other):
        # Coarse bounding box test first
        if isinstance(other, Polygon) and not contour.encloses_bbox((self.ll, self.ur), (other.ll, other.ur)):
            return False
        return super().__contains__(other)

    @property
    def perimeter(self):
        return contour.perimeter(self.contour)

    def is_inside(self, p):
        p = np.asarray(p, dtype=float)
        if np.any(p < self.ll - Shape.tol) or np.any(p > self.ur + Shape.tol):
            return False
        # Fine with winding number
        wn, = contour.wind_number(self.contour, [p])
        return abs(wn) > self.tol

    def add(self, model, factory):
        # Surface bounded by the contour
        l = len(self.vertices)
        vertices = tqdm.tqdm(self.vertices, disable=l < self.progress_threshold,
                             desc='gmsh points')
        pts = [factory.addPoint(*p, z=0) for p in vertices]
        lines = [factory.addLine(pts[i], pts[(i+1) % l]) for i in range(l)]

        loop = factory.addCurveLoop(lines)
        ngon = factory.addPlaneSurface([loop])
        logger.debug(f'Added polygon with {l} vertices as surface {ngon}')

        return (2, ngon)


class KochSnowflake(Polygon):
    '''Polygon traced by the CURRENT outline of the snowflake'''
    def __init__(self, base_start, base_end, depth, require_horizontal=True):
        self.depth = depth
        self.segments = build_koch_outline(base_start, base_end, depth,
                                           require_horizontal=require_horizontal)
        vertices = contour.outline_contour(self.segments)[:-1]
        super().__init__(vertices)

# -------------------------------------------

if __name__ == '__main__':
    import gmsh

    gmsh.initialize()

    model = gmsh.model
    factory = model.occ

    f = KochSnowflake((0, 0), (1, 0), 3)
    print(f.com, f.area)
    idx = f.add(model, factory)

    factory.synchronize()

    print(factory.getCenterOfMass(*idx), factory.getMass(*idx))

    gmsh.fltk.initialize()
    gmsh.fltk.run()

    gmsh.finalize()
