import pytest

from tline.tl_complex import Complex
from tline.tl_params import LineParameters


@pytest.fixture
def lossless_line():
    """R=0, L=250 nH/m, G=0, C=100 pF/m at 1 GHz: Zc = 50 ohm, lambda = 0.2 m."""
    def make(ZL=50.0, l=0.1, **kw):
        return LineParameters(
            R=0.0, L=250e-9, G=0.0, C=100e-12, frequency_hz=1e9, length_m=l,
            Z0=50.0, load_impedance=Complex.from_complex(ZL), **kw
        )
    return make


@pytest.fixture
def lossy_line():
    return LineParameters(
        R=2.0, L=300e-9, G=1e-4, C=80e-12, frequency_hz=1e9, length_m=0.25,
        Z0=50.0, load_impedance=Complex(75.0, 25.0),
    )
