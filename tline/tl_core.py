# tline/tl_core.py
from __future__ import annotations
import math
import logging
from dataclasses import dataclass
from typing import Union

from .tl_complex import Complex
from .tl_config import DEFAULT_CONFIG, EngineConfig
from .tl_errors import UNDEFINED, UndefinedLineQuantity
from .tl_params import LineParameters

logger = logging.getLogger(__name__)

MaybeFloat = Union[float, type(UNDEFINED)]

@dataclass(frozen=True)
class DerivedLineState:
    omega: float
    Z: Complex          # series impedance R + jwL (ohm/m)
    Y: Complex          # shunt admittance G + jwC (S/m)
    gamma: Complex      # alpha + j*beta
    alpha: float        # Np/m
    beta: float         # rad/m
    Zc: Complex
    wavelength: MaybeFloat       # m
    phase_velocity: MaybeFloat   # m/s
    attenuation_db: float        # over the whole line
    electrical_length_deg: float
    electrical_length_wl: MaybeFloat
    delay_s: MaybeFloat
    q_series: float      # wL/R, inf for R = 0
    q_shunt: float       # wC/G, inf for G = 0

    def require(self, name: str) -> float:
        """Concrete value of a derived quantity, or UndefinedLineQuantity if beta is zero."""
        value = getattr(self, name)
        if value is UNDEFINED:
            raise UndefinedLineQuantity(f"{name} is undefined for beta={self.beta:g} rad/m")
        return value

def line_q(reactive: float, lossy: float) -> float:
    """Quality factor of a series (wL/R) or shunt (wC/G) branch; inf when the branch is lossless."""
    if lossy == 0:
        return math.inf
    return reactive/lossy

def series_shunt(R, L, G, C, omega):
    return Complex(R, omega*L), Complex(G, omega*C)

def gamma_Zc(R, L, G, C, omega, eps: float = DEFAULT_CONFIG.epsilon):
    """Propagation constant gamma = sqrt(ZY) and characteristic impedance Zc = sqrt(Z/Y)."""
    Z, Y = series_shunt(R, L, G, C, omega)
    gamma = Z.mul(Y).sqrt()
    Zc = Z.div(Y, eps).sqrt()
    return gamma, Zc

def derive_line_state(p: LineParameters, config: EngineConfig = DEFAULT_CONFIG) -> DerivedLineState:
    w = p.omega
    Z, Y = series_shunt(p.series_R, p.L, p.shunt_G, p.C, w)
    gamma, Zc = gamma_Zc(p.series_R, p.L, p.shunt_G, p.C, w, config.epsilon)
    # principal branch gives re >= 0; clear the -0.0 / rounding residue
    alpha, beta = max(gamma.re, 0.0), gamma.im

    if abs(beta) < config.beta_epsilon:
        logger.debug("beta=%g below %g: wavelength and phase velocity undefined", beta, config.beta_epsilon)
        lamb = vp = wl = tau = UNDEFINED
    else:
        lamb = 2*math.pi/beta
        vp = w/beta
        wl = p.length_m/lamb
        tau = p.length_m/vp

    return DerivedLineState(
        omega=w, Z=Z, Y=Y, gamma=gamma, alpha=alpha, beta=beta, Zc=Zc,
        wavelength=lamb, phase_velocity=vp,
        attenuation_db=alpha*p.length_m*config.np_to_db,
        electrical_length_deg=math.degrees(beta*p.length_m),
        electrical_length_wl=wl, delay_s=tau,
        q_series=line_q(Z.im, Z.re), q_shunt=line_q(Y.im, Y.re),
    )
