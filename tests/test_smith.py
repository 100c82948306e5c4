import math

import numpy as np
import pytest

from tline.tl_complex import Complex
from tline.tl_errors import InvalidParameter
from tline.tl_smith import SmithChartProjector, smith_forward, smith_inverse


@pytest.fixture
def proj():
    return SmithChartProjector(radius_px=200, cx=400, cy=300)


def test_round_trip():
    rng = np.random.default_rng(7)
    for re, im in zip(rng.uniform(0, 500, 100), rng.normal(scale=200, size=100)):
        z = Complex(float(re), float(im))
        assert smith_inverse(smith_forward(z, 50.0), 50.0).isclose(z, 1e-9)


def test_landmarks(proj):
    centre = proj.project_impedance(Complex(50, 0), 50)
    assert (centre.x, centre.y) == (400.0, 300.0)
    assert centre.kind == 'impedance' and centre.value == Complex(50, 0)
    short = proj.project_impedance(Complex(0, 0), 50)
    assert math.isclose(short.x, 200.0) and math.isclose(short.y, 300.0)
    # +j50 sits at the top of the chart
    top = proj.project_impedance(Complex(0, 50), 50)
    assert math.isclose(top.x, 400.0, abs_tol=1e-9) and math.isclose(top.y, 100.0)


def test_unproject(proj):
    g = Complex(0.3, -0.4)
    pt = proj.project_reflection(g)
    assert pt.kind == 'reflection'
    assert proj.unproject(pt.x, pt.y).isclose(g)


def test_resistance_circles(proj):
    assert proj.resistance_circle(0).radius == 200
    c = proj.resistance_circle(1)
    assert (c.cx, c.cy, c.radius) == (500.0, 300.0, 100.0)
    # every z = r + jx lands on its circle
    for x in (-3.0, -0.5, 0.0, 0.7, 4.0):
        pt = proj.project_impedance(Complex(1.0*50, x*50), 50)
        assert math.isclose(math.hypot(pt.x - c.cx, pt.y - c.cy), c.radius, rel_tol=1e-9)
    with pytest.raises(InvalidParameter):
        proj.resistance_circle(-1)


@pytest.mark.parametrize("x", [-5, -1, -0.2, 0.2, 0.5, 2])
def test_reactance_arcs(proj, x):
    arc = proj.reactance_arc(x)
    assert math.isclose(arc.radius, 200/abs(x))
    assert math.isclose(arc.cy, 300 - 200/x)
    for r in (0.0, 0.3, 1.0, 10.0):
        pt = proj.project_impedance(Complex(r*50, x*50), 50)
        assert math.isclose(math.hypot(pt.x - arc.cx, pt.y - arc.cy), arc.radius, rel_tol=1e-9)
    # both endpoints on the outer circle, sampled points inside it
    for ex, ey in (arc.start, arc.end):
        assert math.isclose(math.hypot(ex - 400, ey - 300), 200, rel_tol=1e-9)
    pts = arc.points(50)
    assert np.all(np.hypot(pts[:, 0] - 400, pts[:, 1] - 300) <= 200 + 1e-6)
    # positive reactance in the upper half
    assert np.all(np.sign(300 - pts[1:-1, 1]) == np.sign(x))


def test_zero_reactance_rejected(proj):
    with pytest.raises(InvalidParameter):
        proj.reactance_arc(0)


def test_grid_and_radials(proj):
    g = proj.grid()
    assert len(g.resistance) == 6 and len(g.reactance) == 10
    assert len(g.radials) == 12
    top = g.radials[0]
    assert math.isclose(top.x1, 400, abs_tol=1e-9) and math.isclose(top.y1, 100)


def test_rotation_path(proj):
    path = proj.rotation_path(Complex(0.5, 0), math.pi, n=5)
    assert path.shape == (5, 2)
    np.testing.assert_allclose(path[0], [500, 300])
    np.testing.assert_allclose(path[-1], [300, 300], atol=1e-9)
    assert math.isclose(proj.vswr_circle(0.5).radius, 100)


def test_bad_radius():
    with pytest.raises(InvalidParameter):
        SmithChartProjector(radius_px=0)
