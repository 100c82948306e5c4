# tline/tl_validate.py
import math
from .tl_complex import Complex
from .tl_core import derive_line_state
from .tl_params import LineParameters
from .tl_transform import transform_load, input_impedance_hyperbolic

def approx(a, b, tol=1e-3):
    """Relative tolerance check: |a-b| <= tol*(1+|b|)."""
    return abs(a - b) <= tol * (1 + abs(b))

def _line(l=0.1, ZL=50.0, L=250e-9, C=100e-12):
    return LineParameters(R=0.0, L=L, G=0.0, C=C, frequency_hz=1e9, length_m=l,
                          Z0=50.0, load_impedance=Complex.from_complex(ZL))

def test_matched():
    """
    Lossless benchmark: L=250 nH/m, C=100 pF/m gives Zc = sqrt(L/C) = 50 ohm.
    With ZL = Z0 = 50 ohm the line is matched at every length.
    """
    for l in (0.0, 0.037, 0.1, 0.25):
        p = _line(l=l)
        d = derive_line_state(p)
        r = transform_load(p, d)
        assert approx(d.Zc.re, 50.0, 1e-9) and abs(d.Zc.im) < 1e-9, f"Expected Zc≈50Ω, got {d.Zc}"
        assert abs(r.gamma_input) < 1e-12, f"Not matched: Γ={r.gamma_input}"
        assert approx(r.vswr, 1.0, 1e-9), f"VSWR not ~1: VSWR={r.vswr}"
        assert r.zin.isclose(Complex(50.0, 0.0), 1e-9), f"Zin={r.zin}"

def test_short():
    p = _line(ZL=0.0)
    r = transform_load(p, derive_line_state(p))
    assert r.gamma_load == Complex(-1.0, 0.0), f"Γ_L={r.gamma_load}"
    assert r.saturated and math.isinf(r.vswr)

def test_half_lambda_periodicity():
    """Z_in(l + λ/2) ≈ Z_in(l): impedance repeats every half-wavelength."""
    p1 = _line(l=0.1, ZL=100.0, C=80e-12)
    d1 = derive_line_state(p1)
    p2 = _line(l=0.1 + 0.5*d1.require('wavelength'), ZL=100.0, C=80e-12)
    z1 = transform_load(p1, d1).zin
    z2 = transform_load(p2, derive_line_state(p2)).zin
    assert z1.isclose(z2, 1e-6), f"Zin periodicity failed: {z1} vs {z2}"

def test_formulations_agree():
    """Rotation and tanh formulations agree on a lossless line with Zc = Z0."""
    for ZL in (Complex(75, 25), Complex(10, -40), Complex(0, 30), Complex(200, 0)):
        p = _line(l=0.137, ZL=ZL)
        d = derive_line_state(p)
        z_rot = transform_load(p, d).zin
        z_hyp = input_impedance_hyperbolic(ZL, d.Zc, d.gamma, p.length_m)
        assert z_rot.isclose(z_hyp, 1e-9), f"{z_rot} vs {z_hyp}"

if __name__ == '__main__':
    test_matched()
    test_short()
    test_half_lambda_periodicity()
    test_formulations_agree()
    print("OK")
