from kochflake.shapes import Polygon, KochSnowflake
from kochflake.errors import InvalidArgument
import numpy as np
import pytest
import gmsh


def test_rectangle():
    vertices = np.array([[0, 0],
                         [2, 0],
                         [2, 1],
                         [0, 1]])
    p = Polygon(vertices)
    assert np.linalg.norm(p.com - np.array([1, 0.5])) < 1E-10
    assert p.area == pytest.approx(2)

    points = 3*np.random.rand(20, 2)
    x, y = points.T
    tol = 1E-3
    # Stay away from the boundary
    away = np.all([np.abs(x-2) > tol, np.abs(y-1) > tol, x > tol, y > tol], axis=0)
    points = points[away]
    x, y = points.T

    inside0 = np.logical_and(x < 2, y < 1)
    inside = np.array([p.is_inside(x) for x in points])
    assert np.all(inside == inside0)


def test_degenerate():
    with pytest.raises(InvalidArgument):
        Polygon(np.array([[0, 0], [1, 0]]))

    with pytest.raises(InvalidArgument):
        Polygon(np.array([[0, 0], [1, 0], [2, 0]]))


@pytest.mark.parametrize('depth', (0, 1, 2, 3))
def test_snowflake(depth):
    f = KochSnowflake((200, 500), (600, 500), depth)
    assert len(f.vertices) == 3*4**depth
    assert len(f.segments) == 3*4**depth

    area0 = np.sqrt(3)/4*400**2
    assert f.area == pytest.approx(area0*(8/5 - 3/5*(4/9)**depth))
    # Symmetric so the center is that of the triangle
    centroid = np.array([400, (1000 + 500 - 200*np.sqrt(3))/3])
    assert np.linalg.norm(f.com - centroid) < 1E-8

    assert f.is_inside(centroid)
    assert not f.is_inside(np.array([0, 0]))
    # Tip of the bottom bump is inside from depth 1
    assert f.is_inside(np.array([400, 500 + 100])) == (depth > 0)


def test_contains():
    small = KochSnowflake((350, 600), (450, 600), 2)
    big = KochSnowflake((0, 900), (800, 900), 2)
    assert small in big
    assert big.intersects(small)
    assert big not in small


def test_gmsh():
    f = KochSnowflake((0, 0), (1, 0), 2)
    # Trust gmsh for ground truth
    gmsh.initialize()
    try:
        vol = f.add(gmsh.model, gmsh.model.occ)
        gmsh.model.occ.synchronize()

        assert vol[0] == 2
        com = gmsh.model.occ.getCenterOfMass(*vol)[:2]
        assert np.linalg.norm(f.com - com) < 1E-8
        assert gmsh.model.occ.getMass(*vol) == pytest.approx(f.area)
    finally:
        gmsh.finalize()


def test_contains_disjoint():
    left = KochSnowflake((0, 100), (100, 100), 1)
    right = KochSnowflake((500, 100), (600, 100), 1)
    assert left not in right and right not in left
    assert not left.intersects(right)
