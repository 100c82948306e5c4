# tline/tl_params.py
from __future__ import annotations
import math
import logging
from dataclasses import dataclass, replace
from typing import Mapping

from .tl_complex import Complex
from .tl_errors import InvalidParameter

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class LineParameters:
    R: float                  # ohm/m
    L: float                  # H/m
    G: float                  # S/m
    C: float                  # F/m
    frequency_hz: float       # Hz
    length_m: float           # m
    Z0: float                 # reference impedance (ohm)
    load_impedance: Complex   # ohm
    source_voltage: float = 1.0   # forward wave amplitude V0
    speed_multiplier: float = 1.0
    lossless: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'load_impedance', Complex.from_complex(self.load_impedance))
        _check_ranges(self)

    @property
    def omega(self) -> float:
        return 2*math.pi*self.frequency_hz

    @property
    def series_R(self) -> float:
        return 0.0 if self.lossless else self.R

    @property
    def shunt_G(self) -> float:
        return 0.0 if self.lossless else self.G

    def with_load(self, ZL) -> "LineParameters":
        return replace(self, load_impedance=Complex.from_complex(ZL))

# record key -> (attribute, aliases)
FIELDS = {
    'R': ('R', ()),
    'L': ('L', ()),
    'G': ('G', ()),
    'C': ('C', ()),
    'frequencyHz': ('frequency_hz', ('frequency_hz', 'f')),
    'lengthM': ('length_m', ('length_m', 'l', 'length')),
    'Z0': ('Z0', ('z0',)),
    'loadImpedanceRe': ('load_re', ('load_impedance_re', 'ZLre')),
    'loadImpedanceIm': ('load_im', ('load_impedance_im', 'ZLim')),
    'sourceVoltage': ('source_voltage', ('source_voltage', 'V0')),
    'speedMultiplier': ('speed_multiplier', ('speed_multiplier', 'speed')),
}
OPTIONAL = {'loadImpedanceIm': 0.0, 'sourceVoltage': 1.0, 'speedMultiplier': 1.0}

def to_number(field: str, value) -> float:
    """Strict numeric coercion: numbers and numeric strings only, finite."""
    if isinstance(value, bool) or value is None:
        raise InvalidParameter(field, f"expected a number, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidParameter(field, "empty value")
        try:
            value = float(text)
        except ValueError:
            raise InvalidParameter(field, f"not a number: {value!r}") from None
    try:
        x = float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(field, f"expected a number, got {value!r}") from None
    if not math.isfinite(x):
        raise InvalidParameter(field, f"must be finite, got {x}")
    return x

def _require_real(field: str, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, f"expected a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(field, f"must be finite, got {value}")

def _check_ranges(p: LineParameters):
    for name in ('R', 'L', 'G', 'C', 'frequency_hz', 'length_m', 'Z0',
                 'source_voltage', 'speed_multiplier'):
        _require_real(name, getattr(p, name))
    _require_real('load_impedance.re', p.load_impedance.re)
    _require_real('load_impedance.im', p.load_impedance.im)
    if p.frequency_hz <= 0:
        raise InvalidParameter('frequency_hz', "must be > 0")
    if p.Z0 <= 0:
        raise InvalidParameter('Z0', "must be > 0")
    if p.length_m < 0:
        raise InvalidParameter('length_m', "must be >= 0")
    for name in ('R', 'L', 'G', 'C', 'source_voltage', 'speed_multiplier'):
        if getattr(p, name) < 0:
            raise InvalidParameter(name, "must be >= 0")

_MISSING = object()

def _lookup(record: Mapping, key: str, aliases):
    for k in (key, *aliases):
        if k in record:
            return k, record[k]
    return key, _MISSING

def parse_parameters(record: Mapping) -> LineParameters:
    """
    Build LineParameters from a user-edited record (camelCase keys or snake_case aliases).
    Non-numeric values raise InvalidParameter; nothing is coerced to zero.
    """
    values = {}
    for key, (attr, aliases) in FIELDS.items():
        found, raw = _lookup(record, key, aliases)
        if raw is _MISSING:
            if key in OPTIONAL:
                values[attr] = OPTIONAL[key]
                continue
            raise InvalidParameter(key, "missing")
        values[attr] = to_number(found, raw)
    lossless = record.get('lossless', False)
    if not isinstance(lossless, bool):
        raise InvalidParameter('lossless', f"expected a bool, got {lossless!r}")
    ZL = Complex(values.pop('load_re'), values.pop('load_im'))
    return LineParameters(load_impedance=ZL, lossless=lossless, **values)

# Load presets from the wave-propagation demo; short and open are ideal terminations.
LOAD_PRESETS = {
    'matched': None,            # Z0 of the line
    'short': Complex(0.0, 0.0),
    'open': Complex(1e12, 0.0),
    'mismatch25': Complex(25.0, 0.0),
    'mismatch100': Complex(100.0, 0.0),
}

def apply_preset(params: LineParameters, name: str) -> LineParameters:
    if name not in LOAD_PRESETS:
        raise InvalidParameter('preset', f"unknown preset {name!r}; choose from {sorted(LOAD_PRESETS)}")
    ZL = LOAD_PRESETS[name]
    if ZL is None:
        ZL = Complex(params.Z0, 0.0)
    logger.debug("preset %s -> ZL=%s", name, ZL)
    return params.with_load(ZL)
