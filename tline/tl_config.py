# tline/tl_config.py
from __future__ import annotations
from dataclasses import dataclass, replace

@dataclass(frozen=True)
class EngineConfig:
    epsilon: float = 1e-24               # |divisor|^2 below this is singular
    beta_epsilon: float = 1e-12          # rad/m, below this lambda and vp are undefined
    saturation_threshold: float = 0.9999 # |Gamma| at or above this saturates VSWR
    np_to_db: float = 8.686              # dB per neper
    samples: int = 201                   # positions per waveform snapshot
    tick_increment: float = 0.02         # clock advance per tick at speed 1
    tick_interval: float = 0.016         # s between wall-clock ticks

    def with_overrides(self, **kwargs) -> "EngineConfig":
        return replace(self, **kwargs)

DEFAULT_CONFIG = EngineConfig()
