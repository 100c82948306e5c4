# tline/tl_waveforms.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .tl_config import DEFAULT_CONFIG
from .tl_core import DerivedLineState
from .tl_errors import InvalidParameter, SingularDivision
from .tl_params import LineParameters
from .tl_transform import ReflectionState

@dataclass(frozen=True)
class WaveformSample:
    position: float
    forward_v: float
    reflected_v: float
    total_v: float
    forward_i: float
    reflected_i: float
    total_i: float

@dataclass(frozen=True)
class Waveform:
    """Instantaneous voltages and currents at time t along z in [0, l]."""
    t: float
    z: np.ndarray
    forward_v: np.ndarray
    reflected_v: np.ndarray
    total_v: np.ndarray
    forward_i: np.ndarray
    reflected_i: np.ndarray
    total_i: np.ndarray
    envelope: float          # standing-wave bound, |V| <= envelope everywhere

    def samples(self) -> Iterator[WaveformSample]:
        for k in range(len(self.z)):
            yield WaveformSample(
                position=float(self.z[k]),
                forward_v=float(self.forward_v[k]), reflected_v=float(self.reflected_v[k]),
                total_v=float(self.total_v[k]),
                forward_i=float(self.forward_i[k]), reflected_i=float(self.reflected_i[k]),
                total_i=float(self.total_i[k]),
            )

@dataclass(frozen=True)
class PowerFlow:
    incident: float      # W
    reflected: float
    transmitted: float

def synthesize(p: LineParameters, d: DerivedLineState, r: ReflectionState,
               t: float = 0.0, samples: int = DEFAULT_CONFIG.samples) -> Waveform:
    """
    Forward and reflected travelling waves, z = 0 at the source.
    Reflected amplitude and phase come from the load reflection coefficient;
    currents lag their voltages by 90 degrees and the reflected current is negated.
    """
    if samples < 2:
        raise InvalidParameter('samples', "need at least 2 positions")
    V0 = p.source_voltage
    w, beta = d.omega, d.beta
    g_mag, g_ph = abs(r.gamma_load), r.gamma_load.phase()
    Zc = abs(d.Zc)
    if Zc == 0:
        raise SingularDivision("characteristic impedance is zero, line currents are unbounded")

    z = np.linspace(0.0, p.length_m, samples)
    fwd_ph = w*t - beta*z
    ref_ph = w*t + beta*z + g_ph
    Vf = V0*np.cos(fwd_ph)
    Vr = V0*g_mag*np.cos(ref_ph)
    If = (V0/Zc)*np.cos(fwd_ph - np.pi/2)
    Ir = -(V0*g_mag/Zc)*np.cos(ref_ph - np.pi/2)
    return Waveform(t=float(t), z=z, forward_v=Vf, reflected_v=Vr, total_v=Vf + Vr,
                    forward_i=If, reflected_i=Ir, total_i=If + Ir,
                    envelope=standing_wave_envelope(V0, g_mag))

def standing_wave_envelope(V0: float, gamma_mag: float) -> float:
    return V0*(1 + gamma_mag)

def power_flow(p: LineParameters, d: DerivedLineState, r: ReflectionState) -> PowerFlow:
    if abs(d.Zc) == 0:
        raise SingularDivision("characteristic impedance is zero")
    P_inc = p.source_voltage**2/(2*abs(d.Zc))
    P_ref = P_inc*abs(r.gamma_load)**2
    return PowerFlow(incident=P_inc, reflected=P_ref, transmitted=P_inc - P_ref)
