import math

import numpy as np
import pytest

from tline.tl_complex import Complex
from tline.tl_config import DEFAULT_CONFIG
from tline.tl_core import derive_line_state
from tline.tl_errors import UNDEFINED, SaturatedReflection
from tline.tl_transform import (
    impedance_from_reflection, input_impedance_hyperbolic, mismatch_loss_db,
    reflection_coefficient, return_loss_db, rotate_reflection, transform_load, vswr_from_gamma,
)


def _solve(p):
    return transform_load(p, derive_line_state(p))


@pytest.mark.parametrize("l", [0.0, 0.01, 0.05, 0.1, 0.3, 1.7])
def test_matched_line_any_length(lossless_line, l):
    r = _solve(lossless_line(ZL=50.0, l=l))
    assert abs(r.gamma_input) == 0
    assert r.vswr == 1.0
    assert r.zin.isclose(Complex(50.0, 0.0), 1e-12)
    assert r.matched and not r.saturated
    assert math.isinf(r.return_loss_db)


def test_matched_scenario_values(lossless_line):
    r = _solve(lossless_line(ZL=Complex(50.0, 0.0), l=0.1))
    assert f"{r.vswr:.3f}" == "1.000"
    assert f"{r.zin:.2f}" == "50.00 + j0.00"


def test_short_load(lossless_line):
    r = _solve(lossless_line(ZL=0.0))
    assert r.gamma_load == Complex(-1.0, 0.0)
    assert f"{r.gamma_load.re:.4f}" == "-1.0000"
    assert r.saturated
    assert math.isinf(r.vswr)
    assert math.isinf(r.mismatch_loss_db)
    assert 0.0 <= r.return_loss_db < 1e-9
    assert r.yl is UNDEFINED


def test_open_load_saturates(lossless_line):
    r = _solve(lossless_line(ZL=1e9))
    assert abs(r.gamma_load) > 0.9999
    assert r.saturated and math.isinf(r.vswr)


def test_quarter_wave_short_is_open_at_input(lossless_line):
    # lambda = 0.2 m, so 0.05 m turns the short into an open
    r = _solve(lossless_line(ZL=0.0, l=0.05))
    assert r.gamma_input.isclose(Complex(1.0, 0.0), 1e-12)
    assert r.zin is UNDEFINED or abs(r.zin) > 1e10


def test_vswr_strict_raises():
    with pytest.raises(SaturatedReflection):
        vswr_from_gamma(Complex(0.99995, 0.0), strict=True)
    assert vswr_from_gamma(Complex(0.5, 0.0), strict=True) == (3.0, False)


def test_vswr_threshold_is_configurable():
    cfg = DEFAULT_CONFIG.with_overrides(saturation_threshold=0.9)
    value, saturated = vswr_from_gamma(Complex(0.95, 0.0), cfg)
    assert saturated and math.isinf(value)


def test_return_and_mismatch_loss():
    assert math.isclose(return_loss_db(Complex(0.1, 0.0)), 20.0)
    assert math.isclose(return_loss_db(Complex(0.0, 0.5)), -20*math.log10(0.5))
    assert math.isinf(return_loss_db(Complex(0.0, 0.0)))
    assert return_loss_db(Complex(1.2, 0.0)) == 0.0
    assert math.isclose(mismatch_loss_db(Complex(0.5, 0.0)), -10*math.log10(0.75))


def test_rotation_is_clockwise():
    g = rotate_reflection(Complex(0.5, 0.0), beta=math.pi, length=0.125)
    # 2*beta*l = pi/4 clockwise
    assert g.isclose(Complex.from_polar(0.5, -math.pi/4))


def test_reflection_impedance_inverse():
    for z in (Complex(10, 5), Complex(0, -30), Complex(500, 0), Complex(1, 1000)):
        g = reflection_coefficient(z, 50.0)
        assert impedance_from_reflection(g, 50.0).isclose(z, 1e-9)
    assert impedance_from_reflection(Complex(1.0, 0.0), 50.0) is UNDEFINED


@pytest.mark.parametrize("ZL", [Complex(75, 25), Complex(10, -40), Complex(0, 30), Complex(200, 0), Complex(1e-3, 0)])
@pytest.mark.parametrize("l", [0.013, 0.08, 0.137, 0.42])
def test_formulations_agree_when_lossless(lossless_line, ZL, l):
    p = lossless_line(ZL=ZL, l=l)
    d = derive_line_state(p)
    z_rot = transform_load(p, d).zin
    z_hyp = input_impedance_hyperbolic(ZL, d.Zc, d.gamma, l)
    assert z_rot.isclose(z_hyp, 1e-8)


def test_hyperbolic_matches_numpy_on_lossy_line(lossy_line):
    d = derive_line_state(lossy_line)
    g, zc, zl = complex(d.gamma), complex(d.Zc), complex(lossy_line.load_impedance)
    t = np.tanh(g*lossy_line.length_m)
    expected = zc*(zl + zc*t)/(zc + zl*t)
    z = input_impedance_hyperbolic(lossy_line.load_impedance, d.Zc, d.gamma, lossy_line.length_m)
    assert z.isclose(expected, 1e-10)


def test_admittance_and_q(lossless_line):
    r = _solve(lossless_line(ZL=Complex(50.0, 50.0), l=0.0))
    assert r.yl.isclose(Complex(0.01, -0.01))
    assert r.zin.isclose(Complex(50.0, 50.0), 1e-12)
    assert math.isclose(r.q_factor, 1.0, rel_tol=1e-9)
