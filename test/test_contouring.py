import kochflake.contouring as contour
from kochflake.builder import build_koch_outline
import numpy as np
import pytest


def test_contour():
    # L shaped one
    Lc = np.array([[0.5, 0.5],
                   [0.5, 0.0],
                   [1.0, 0.0],
                   [1.0, 1.0],
                   [0.0, 1.0],
                   [0.0, 0.5],
                   [0.5, 0.5]])

    points = np.array([[0.75, 0.75], [-1, -1], [0.234, 0.769], [0.25, 0.25]])
    mine = contour.is_inside_contour(Lc, points).tolist()
    assert mine == [True, False, True, False]

    # Square that is outside of L
    S = np.array([[0.0, 0.0],
                  [-1.0, 0.0],
                  [-1.0, -1.0],
                  [0.0, -1.0],
                  [0.0, 0.0]])

    assert contour.encloses_bbox(contour.bounding_box(Lc),
                                 contour.bounding_box(S)) == False

    # Thing that encloses all of them
    B = np.array([[2.0, 2.0],
                  [-2.0, 2.0],
                  [-2.0, -2.0],
                  [2.0, -2.0],
                  [2.0, 2.0]])

    assert contour.encloses_bbox(contour.bounding_box(B),
                                 contour.bounding_box(S)) == True
    assert contour.encloses_bbox(contour.bounding_box(B),
                                 contour.bounding_box(Lc)) == True

    assert abs(contour.signed_area(Lc)) == pytest.approx(0.75)
    assert contour.perimeter(Lc) == pytest.approx(4)
    # Counter clockwise gives plus
    assert contour.signed_area(B) > 0
    assert np.allclose(contour.wind_number(B, [[0, 0]]), 1)


def test_outline_contour():
    outline = build_koch_outline((0, 0), (1, 0), 2)
    x = contour.outline_contour(outline)
    assert x.shape == (49, 2)
    assert np.linalg.norm(x[0] - x[-1]) < 1E-15


@pytest.mark.parametrize('depth', (0, 1, 2, 3, 4))
def test_snowflake_measures(depth):
    side = 3.
    x = contour.outline_contour(build_koch_outline((0, 0), (side, 0), depth))

    area0 = np.sqrt(3)/4*side**2
    assert abs(contour.signed_area(x)) == pytest.approx(area0*(8/5 - 3/5*(4/9)**depth))
    assert contour.perimeter(x) == pytest.approx(3*side*(4/3)**depth)


def test_bounding_box():
    outline = build_koch_outline((200, 500), (600, 500), 1)
    ll, ur = contour.bounding_box(outline)
    # Bottom bump sticks out by the height of a small tent, the side bumps
    # just reach the vertical lines through the base corners
    h = 400/3*np.sqrt(3)/2
    assert ll[0] == pytest.approx(200) and ur[0] == pytest.approx(600)
    assert ur[1] == pytest.approx(500 + h)
    assert ll[1] == pytest.approx(500 - 200*np.sqrt(3))
    # Arrays and segments agree
    ll_, ur_ = contour.bounding_box(contour.outline_contour(outline))
    assert np.allclose(ll, ll_) and np.allclose(ur, ur_)
