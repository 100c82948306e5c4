import math

import pytest

from tline.tl_complex import Complex
from tline.tl_core import derive_line_state, gamma_Zc
from tline.tl_errors import UNDEFINED, SingularDivision, UndefinedLineQuantity, is_undefined
from tline.tl_params import LineParameters


def test_lossless_line_constants(lossless_line):
    d = derive_line_state(lossless_line())
    assert math.isclose(d.Zc.re, 50.0, rel_tol=1e-12)
    assert abs(d.Zc.im) < 1e-9
    assert d.alpha >= 0 and d.alpha < 1e-12
    assert math.isclose(d.beta, 2*math.pi*1e9*math.sqrt(250e-9*100e-12), rel_tol=1e-12)
    assert math.isclose(d.wavelength, 0.2, rel_tol=1e-12)
    assert math.isclose(d.phase_velocity, 2e8, rel_tol=1e-12)
    assert math.isclose(d.electrical_length_deg, 180.0, rel_tol=1e-9)
    assert math.isclose(d.electrical_length_wl, 0.5, rel_tol=1e-9)
    assert math.isclose(d.delay_s, 0.1/2e8, rel_tol=1e-9)
    assert d.attenuation_db < 1e-9


def test_lossy_line_matches_numpy(lossy_line):
    import numpy as np
    p = lossy_line
    w = 2*np.pi*p.frequency_hz
    z = p.R + 1j*w*p.L
    y = p.G + 1j*w*p.C
    d = derive_line_state(p)
    assert d.gamma.isclose(np.sqrt(z*y), 1e-12)
    assert d.Zc.isclose(np.sqrt(z/y), 1e-12)
    assert d.alpha > 0
    assert math.isclose(d.attenuation_db, d.alpha*p.length_m*8.686)


def test_lossless_flag_drops_R_and_G(lossy_line):
    from dataclasses import replace
    d = derive_line_state(replace(lossy_line, lossless=True))
    assert d.alpha < 1e-12
    assert d.Z.re == 0 and d.Y.re == 0


def test_gamma_Zc_principal_branch():
    gamma, Zc = gamma_Zc(5.0, 1e-7, 1e-3, 1e-10, 2*math.pi*1e6)
    assert gamma.re >= 0
    assert Zc.re > 0


def test_zero_beta_is_undefined():
    # no inductance and no resistance: Z = 0, so gamma = 0
    p = LineParameters(R=0.0, L=0.0, G=0.0, C=100e-12, frequency_hz=1e9, length_m=1.0,
                       Z0=50.0, load_impedance=Complex(50.0, 0.0))
    d = derive_line_state(p)
    assert d.beta == 0
    assert d.wavelength is UNDEFINED
    assert is_undefined(d.phase_velocity)
    assert not d.wavelength
    with pytest.raises(UndefinedLineQuantity, match="wavelength"):
        d.require('wavelength')


def test_zero_admittance_is_singular():
    p = LineParameters(R=1.0, L=250e-9, G=0.0, C=0.0, frequency_hz=1e9, length_m=1.0,
                       Z0=50.0, load_impedance=Complex(50.0, 0.0))
    with pytest.raises(SingularDivision):
        derive_line_state(p)


def test_line_quality_factors(lossy_line):
    d = derive_line_state(lossy_line)
    w = 2*math.pi*1e9
    assert math.isclose(d.q_series, w*300e-9/2.0)
    assert math.isclose(d.q_shunt, w*80e-12/1e-4)


def test_lossless_quality_factors_are_infinite(lossless_line):
    d = derive_line_state(lossless_line())
    assert math.isinf(d.q_series) and math.isinf(d.q_shunt)
