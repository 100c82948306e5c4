# tline/tl_transform.py
"""
Impedance / reflection transformation along a finite line.

The canonical path rotates the load reflection coefficient toward the generator,
Gamma(l) = Gamma_L * exp(-j*2*beta*l), and maps back with Zin = Z0*(1+Gamma)/(1-Gamma).
The hyperbolic form Zin = Zc*(ZL + Zc*tanh(gamma*l))/(Zc + ZL*tanh(gamma*l)) is kept
as the reference for lossy lines; both agree when alpha = 0 and Zc = Z0.
"""
from __future__ import annotations
import math
import logging
from dataclasses import dataclass
from typing import Tuple, Union

from .tl_complex import Complex, ONE, cexp_j, ctanh
from .tl_config import DEFAULT_CONFIG, EngineConfig
from .tl_core import DerivedLineState
from .tl_errors import UNDEFINED, SaturatedReflection, SingularDivision
from .tl_params import LineParameters

logger = logging.getLogger(__name__)

MaybeComplex = Union[Complex, type(UNDEFINED)]

@dataclass(frozen=True)
class ReflectionState:
    gamma_load: Complex
    gamma_input: Complex
    zin: MaybeComplex
    zl: Complex
    yl: MaybeComplex
    yin: MaybeComplex
    vswr: float
    return_loss_db: float
    mismatch_loss_db: float
    q_factor: float
    saturated: bool   # |Gamma| >= saturation threshold, vswr is the inf sentinel
    matched: bool     # |Gamma| == 0, return loss is the inf sentinel

def reflection_coefficient(Z, Z0, eps: float = DEFAULT_CONFIG.epsilon) -> Complex:
    """Gamma = (Z - Z0)/(Z + Z0)."""
    Z, Z0 = Complex.from_complex(Z), Complex.from_complex(Z0)
    return Z.sub(Z0).div(Z.add(Z0), eps)

def rotate_reflection(gamma_load: Complex, beta: float, length: float) -> Complex:
    """Clockwise rotation by 2*beta*l toward the generator."""
    return gamma_load.mul(cexp_j(-2*beta*length))

def impedance_from_reflection(gamma: Complex, Z0, eps: float = DEFAULT_CONFIG.epsilon) -> MaybeComplex:
    """Z = Z0*(1+Gamma)/(1-Gamma); UNDEFINED at Gamma = 1 (open circuit)."""
    try:
        zn = ONE.add(gamma).div(ONE.sub(gamma), eps)
    except SingularDivision:
        logger.debug("Gamma=%s is an open circuit, impedance undefined", gamma)
        return UNDEFINED
    return zn.mul(Complex.from_complex(Z0))

def input_impedance_hyperbolic(ZL, Zc: Complex, gamma: Complex, length: float,
                               eps: float = DEFAULT_CONFIG.epsilon) -> Complex:
    """Input impedance of a line of length l terminated by ZL (exact for lossy lines)."""
    ZL = Complex.from_complex(ZL)
    tanh_gl = ctanh(gamma.scale(length), eps)
    num = ZL.add(Zc.mul(tanh_gl))
    den = Zc.add(ZL.mul(tanh_gl))
    return Zc.mul(num.div(den, eps))

def vswr_from_gamma(gamma, config: EngineConfig = DEFAULT_CONFIG, strict: bool = False) -> Tuple[float, bool]:
    """(VSWR, saturated). |Gamma| >= threshold gives math.inf unless strict, which raises."""
    g = abs(gamma)
    if g >= config.saturation_threshold:
        if strict:
            raise SaturatedReflection(f"|Gamma|={g:.6f} >= {config.saturation_threshold}")
        return math.inf, True
    return (1 + g)/(1 - g), False

def return_loss_db(gamma) -> float:
    """-20*log10|Gamma|; inf for a perfect match, clamped at 0 dB for |Gamma| >= 1."""
    g = abs(gamma)
    if g == 0:
        return math.inf
    if g >= 1:
        return 0.0
    return -20*math.log10(g)

def mismatch_loss_db(gamma, config: EngineConfig = DEFAULT_CONFIG) -> float:
    g = abs(gamma)
    if g >= config.saturation_threshold:
        return math.inf
    return -10*math.log10(1 - g*g)

def _admittance(Z: MaybeComplex, eps: float) -> MaybeComplex:
    if Z is UNDEFINED:
        return UNDEFINED
    try:
        return ONE.div(Z, eps)
    except SingularDivision:
        return UNDEFINED

def q_factor(Z: MaybeComplex) -> float:
    """|X|/R of an impedance; inf for a purely reactive or undefined impedance."""
    if Z is UNDEFINED or Z.re == 0:
        return math.inf
    return abs(Z.im)/Z.re

def transform_load(p: LineParameters, d: DerivedLineState,
                   config: EngineConfig = DEFAULT_CONFIG) -> ReflectionState:
    Z0 = Complex(p.Z0, 0.0)
    ZL = p.load_impedance
    Gamma_L = reflection_coefficient(ZL, Z0, config.epsilon)
    Gamma_in = rotate_reflection(Gamma_L, d.beta, p.length_m)
    Zin = impedance_from_reflection(Gamma_in, Z0, config.epsilon)

    VSWR, saturated = vswr_from_gamma(Gamma_in, config)
    if saturated:
        logger.debug("|Gamma|=%.6f saturated, VSWR reported as inf", abs(Gamma_in))

    return ReflectionState(
        gamma_load=Gamma_L, gamma_input=Gamma_in, zin=Zin,
        zl=ZL, yl=_admittance(ZL, config.epsilon), yin=_admittance(Zin, config.epsilon),
        vswr=VSWR, return_loss_db=return_loss_db(Gamma_in),
        mismatch_loss_db=mismatch_loss_db(Gamma_in, config),
        q_factor=q_factor(Zin), saturated=saturated, matched=abs(Gamma_in) == 0,
    )
