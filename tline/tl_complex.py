# tline/tl_complex.py
from __future__ import annotations
import math
from dataclasses import dataclass

from .tl_config import DEFAULT_CONFIG
from .tl_errors import SingularDivision

EPSILON = DEFAULT_CONFIG.epsilon

@dataclass(frozen=True)
class Complex:
    re: float
    im: float = 0.0

    @classmethod
    def from_polar(cls, mag: float, phase: float) -> "Complex":
        return cls(mag*math.cos(phase), mag*math.sin(phase))

    @classmethod
    def from_complex(cls, z) -> "Complex":
        if isinstance(z, Complex):
            return z
        z = complex(z)
        return cls(z.real, z.imag)

    def add(self, z: "Complex") -> "Complex":
        return Complex(self.re + z.re, self.im + z.im)

    def sub(self, z: "Complex") -> "Complex":
        return Complex(self.re - z.re, self.im - z.im)

    def mul(self, z: "Complex") -> "Complex":
        return Complex(self.re*z.re - self.im*z.im,
                       self.re*z.im + self.im*z.re)

    def div(self, z: "Complex", eps: float = EPSILON) -> "Complex":
        """Multiply by the conjugate, divide by |z|^2. Raises SingularDivision for |z|^2 < eps."""
        denom = z.re*z.re + z.im*z.im
        if denom < eps:
            raise SingularDivision(f"division by near-zero complex value {z!r}")
        return Complex((self.re*z.re + self.im*z.im) / denom,
                       (self.im*z.re - self.re*z.im) / denom)

    def mag(self) -> float:
        return math.hypot(self.re, self.im)

    def phase(self) -> float:
        """Four-quadrant angle in (-pi, pi]."""
        p = math.atan2(self.im, self.re)
        return math.pi if p == -math.pi else p

    def scale(self, k: float) -> "Complex":
        return Complex(self.re*k, self.im*k)

    def conj(self) -> "Complex":
        return Complex(self.re, -self.im)

    def sqrt(self) -> "Complex":
        """Principal root: sqrt of the magnitude, half the phase. Re(result) >= 0."""
        r = math.sqrt(self.mag())
        theta = self.phase() / 2
        return Complex(r*math.cos(theta), r*math.sin(theta))

    def isclose(self, other, tol: float = 1e-9) -> bool:
        other = Complex.from_complex(other)
        return self.sub(other).mag() <= tol * (1 + other.mag())

    # operator sugar over the named methods
    def __add__(self, other):
        return self.add(Complex.from_complex(other))

    __radd__ = __add__

    def __sub__(self, other):
        return self.sub(Complex.from_complex(other))

    def __rsub__(self, other):
        return Complex.from_complex(other).sub(self)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return self.mul(Complex.from_complex(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self.div(Complex.from_complex(other))

    def __rtruediv__(self, other):
        return Complex.from_complex(other).div(self)

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self):
        return self.mag()

    def __complex__(self):
        return complex(self.re, self.im)

    def __format__(self, spec):
        spec = spec or '.3f'
        sign = '+' if self.im >= 0 else '-'
        return f"{format(self.re, spec)} {sign} j{format(abs(self.im), spec)}"

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)

def cexp_j(theta: float) -> Complex:
    """Unit phasor e^(j*theta)."""
    return Complex(math.cos(theta), math.sin(theta))

def csinh(z: Complex) -> Complex:
    return Complex(math.sinh(z.re)*math.cos(z.im), math.cosh(z.re)*math.sin(z.im))

def ccosh(z: Complex) -> Complex:
    return Complex(math.cosh(z.re)*math.cos(z.im), math.sinh(z.re)*math.sin(z.im))

def ctanh(z: Complex, eps: float = EPSILON) -> Complex:
    # cosh(jy) vanishes at y = pi/2 + k*pi on a lossless line
    return csinh(z).div(ccosh(z), eps)
