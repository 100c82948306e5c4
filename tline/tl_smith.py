# tline/tl_smith.py
"""
Smith-chart projection: Gamma = (zn - 1)/(zn + 1) mapped to plot coordinates.

Grid curves are the images of constant-r and constant-x lines under the same
bilinear map, so they are exact circles; nothing here is fitted from samples.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from .tl_complex import Complex, ONE, cexp_j
from .tl_config import DEFAULT_CONFIG
from .tl_errors import InvalidParameter

R_VALUES = (0, 0.2, 0.5, 1, 2, 5)
X_VALUES = (-5, -2, -1, -0.5, -0.2, 0.2, 0.5, 1, 2, 5)

@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float
    value: Complex      # impedance or reflection coefficient that was projected
    kind: str           # 'impedance' | 'reflection'

@dataclass(frozen=True)
class GridCircle:
    cx: float
    cy: float
    radius: float
    label: float

    def points(self, n: int = 181) -> np.ndarray:
        t = np.linspace(0, 2*np.pi, n)
        return np.column_stack([self.cx + self.radius*np.cos(t), self.cy + self.radius*np.sin(t)])

@dataclass(frozen=True)
class GridArc:
    """Part of the circle (cx, cy, radius) between start and end that lies inside the chart."""
    cx: float
    cy: float
    radius: float
    start: tuple     # (x, y) on the outer circle at Gamma = 1
    end: tuple       # (x, y) on the outer circle at Gamma(z = jx)
    label: float

    def points(self, n: int = 91) -> np.ndarray:
        a0 = math.atan2(self.start[1] - self.cy, self.start[0] - self.cx)
        a1 = math.atan2(self.end[1] - self.cy, self.end[0] - self.cx)
        # take the short way round; the inside part is always the minor arc
        da = (a1 - a0 + math.pi) % (2*math.pi) - math.pi
        t = a0 + np.linspace(0.0, da, n)
        return np.column_stack([self.cx + self.radius*np.cos(t), self.cy + self.radius*np.sin(t)])

@dataclass(frozen=True)
class RadialLine:
    angle_deg: float
    x0: float
    y0: float
    x1: float
    y1: float

@dataclass(frozen=True)
class SmithGrid:
    outer: GridCircle
    resistance: List[GridCircle]
    reactance: List[GridArc]
    radials: List[RadialLine]

class SmithChartProjector:
    def __init__(self, radius_px: float = 200.0, cx: float = 400.0, cy: float = 300.0,
                 eps: float = DEFAULT_CONFIG.epsilon):
        if not radius_px > 0:
            raise InvalidParameter('radius_px', "must be > 0")
        self.radius_px = float(radius_px)
        self.cx = float(cx)
        self.cy = float(cy)
        self.eps = eps

    def __repr__(self):
        return f"SmithChartProjector(radius_px={self.radius_px}, cx={self.cx}, cy={self.cy})"

    # --- the conformal map -------------------------------------------------
    def to_reflection(self, Z, Z0) -> Complex:
        zn = Complex.from_complex(Z).div(Complex.from_complex(Z0), self.eps)
        return zn.sub(ONE).div(zn.add(ONE), self.eps)

    def from_reflection(self, gamma, Z0) -> Complex:
        gamma = Complex.from_complex(gamma)
        zn = ONE.add(gamma).div(ONE.sub(gamma), self.eps)
        return zn.mul(Complex.from_complex(Z0))

    def _xy(self, gamma: Complex):
        # y flipped so positive reactance plots upward
        return gamma.re*self.radius_px + self.cx, -gamma.im*self.radius_px + self.cy

    def project_reflection(self, gamma) -> PlotPoint:
        gamma = Complex.from_complex(gamma)
        x, y = self._xy(gamma)
        return PlotPoint(x, y, gamma, 'reflection')

    def project_impedance(self, Z, Z0) -> PlotPoint:
        Z = Complex.from_complex(Z)
        x, y = self._xy(self.to_reflection(Z, Z0))
        return PlotPoint(x, y, Z, 'impedance')

    def unproject(self, x: float, y: float) -> Complex:
        return Complex((x - self.cx)/self.radius_px, -(y - self.cy)/self.radius_px)

    # --- grid geometry -----------------------------------------------------
    def outer_circle(self) -> GridCircle:
        return GridCircle(self.cx, self.cy, self.radius_px, 0)

    def resistance_circle(self, r: float) -> GridCircle:
        if r < 0:
            raise InvalidParameter('r', "constant-resistance circles need r >= 0")
        if r == 0:
            return self.outer_circle()
        return GridCircle(self.cx + self.radius_px*r/(1 + r), self.cy, self.radius_px/(1 + r), r)

    def reactance_arc(self, x: float) -> GridArc:
        if x == 0:
            raise InvalidParameter('x', "x = 0 is the real axis, not an arc")
        R = self.radius_px
        # arc meets the outer circle at Gamma = 1 and at Gamma(jx) = (x^2 - 1 + 2jx)/(x^2 + 1)
        g_end = Complex((x*x - 1)/(x*x + 1), 2*x/(x*x + 1))
        return GridArc(cx=self.cx + R, cy=self.cy - R/x, radius=R/abs(x),
                       start=self._xy(ONE), end=self._xy(g_end), label=x)

    def vswr_circle(self, gamma_mag: float) -> GridCircle:
        """Constant-|Gamma| circle about the chart centre."""
        return GridCircle(self.cx, self.cy, min(abs(gamma_mag), 1.0)*self.radius_px, abs(gamma_mag))

    def radial_lines(self, step_deg: float = 30.0) -> List[RadialLine]:
        lines = []
        for angle in np.arange(0.0, 360.0, step_deg):
            rad = math.radians(angle - 90)
            lines.append(RadialLine(float(angle), self.cx, self.cy,
                                    self.cx + self.radius_px*math.cos(rad),
                                    self.cy + self.radius_px*math.sin(rad)))
        return lines

    def rotation_path(self, gamma_load, two_beta_l: float, n: int = 64) -> np.ndarray:
        """Plot-space locus from the load point rotated clockwise by 2*beta*l."""
        gamma_load = Complex.from_complex(gamma_load)
        pts = [self._xy(gamma_load.mul(cexp_j(-two_beta_l*k/(n - 1)))) for k in range(n)]
        return np.array(pts)

    def grid(self, r_values: Iterable[float] = R_VALUES, x_values: Iterable[float] = X_VALUES,
             radial_step_deg: Optional[float] = 30.0) -> SmithGrid:
        return SmithGrid(
            outer=self.outer_circle(),
            resistance=[self.resistance_circle(r) for r in r_values],
            reactance=[self.reactance_arc(x) for x in x_values],
            radials=self.radial_lines(radial_step_deg) if radial_step_deg else [],
        )

def smith_forward(Z, Z0) -> Complex:
    return SmithChartProjector().to_reflection(Z, Z0)

def smith_inverse(gamma, Z0) -> Complex:
    return SmithChartProjector().from_reflection(gamma, Z0)
